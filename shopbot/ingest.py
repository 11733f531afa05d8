"""
Catalogue ingestion.

This module provides functions to:
- Load the catalogue JSON file
- Turn its externally-tagged node records into an immutable tree

Node records:
    {"Item": <item payload>}
    {"List": {"data": <group payload>, "list": [<node>, ...]}}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

from pydantic import ValidationError

from .address import Address
from .catalogue import Catalogue, Group, GroupT, ItemT, Leaf


LEAF_TAG = "Item"
GROUP_TAG = "List"


class CatalogueFormatError(ValueError):
    """A node record does not match the expected catalogue shape."""

    def __init__(self, address: Address, message: str):
        self.address = address
        super().__init__(f"{message} (at {address.to_text()})")


def load_dataset(path: str) -> Any:
    """
    Load the catalogue JSON from disk.

    Args:
        path: Path to the JSON file

    Returns:
        The decoded JSON document

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the JSON is invalid
        ValueError: If the file cannot be read
    """
    file_path = Path(path)

    if not file_path.exists():
        raise FileNotFoundError(
            f"Catalogue file not found: {path}. "
            f"Set INPUT_FILE or pass --in with the path to the catalogue JSON."
        )

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise json.JSONDecodeError(
            f"Invalid JSON in catalogue file: {path}",
            e.doc,
            e.pos,
        ) from e
    except OSError as e:
        raise ValueError(f"Error reading catalogue file {path}: {e}") from e

    return data


def _identity(value: Any) -> Any:
    return value


def parse_catalogue(
    data: Any,
    parse_item: Callable[[Any], ItemT] = _identity,
    parse_group: Callable[[Any], GroupT] = _identity,
) -> Catalogue[ItemT, GroupT]:
    """
    Build the catalogue tree from decoded JSON.

    `parse_item` / `parse_group` turn raw payloads into application values
    (e.g. Product.model_validate). Any structural or payload problem raises
    CatalogueFormatError carrying the address of the offending node.
    """
    return _parse_node(data, Address.root(), parse_item, parse_group)


def _parse_payload(parser: Callable[[Any], Any], raw: Any, address: Address, what: str) -> Any:
    try:
        return parser(raw)
    except (ValidationError, ValueError, TypeError) as e:
        raise CatalogueFormatError(address, f"Invalid {what} payload: {e}") from e


def _parse_node(
    record: Any,
    address: Address,
    parse_item: Callable[[Any], Any],
    parse_group: Callable[[Any], Any],
) -> Catalogue[Any, Any]:
    if not isinstance(record, dict) or len(record) != 1:
        raise CatalogueFormatError(
            address,
            f'Expected a node record with a single "{LEAF_TAG}" or "{GROUP_TAG}" key',
        )

    tag, body = next(iter(record.items()))

    if tag == LEAF_TAG:
        return Leaf(_parse_payload(parse_item, body, address, "item"))

    if tag == GROUP_TAG:
        if not isinstance(body, dict) or "data" not in body or "list" not in body:
            raise CatalogueFormatError(address, f'"{GROUP_TAG}" node requires "data" and "list" fields')
        children = body["list"]
        if not isinstance(children, list):
            raise CatalogueFormatError(address, f'"list" must be an array, got {type(children).__name__}')

        return Group(
            data=_parse_payload(parse_group, body["data"], address, "group"),
            children=tuple(
                _parse_node(child, address.join(i), parse_item, parse_group)
                for i, child in enumerate(children)
            ),
        )

    raise CatalogueFormatError(address, f"Unknown node tag {tag!r}")
