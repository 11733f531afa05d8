from __future__ import annotations

import json
from typing import Any, Dict, Tuple

from .catalogue import Catalogue, Group, count_nodes
from .ingest import load_dataset, parse_catalogue
from .models import Product

ProductCatalogue = Catalogue[Product, str]


def _parse_label(raw: Any) -> str:
    if not isinstance(raw, str):
        raise TypeError(f"group label must be a string, got {type(raw).__name__}")
    return raw


def load_catalogue(dataset_path: str = "data/catalogue.json") -> ProductCatalogue:
    """
    Load catalogue JSON, parse it into the product tree and return the root.
    Must raise clear, actionable errors for invalid input files.
    """
    try:
        dataset = load_dataset(dataset_path)
    except FileNotFoundError as e:
        raise FileNotFoundError(str(e)) from e
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in catalogue file: {dataset_path}") from e

    root = parse_catalogue(dataset, Product.model_validate, _parse_label)
    if not isinstance(root, Group):
        raise ValueError(f"Catalogue root must be a group, not a single item: {dataset_path}")

    return root


def load_catalogue_with_summary(dataset_path: str = "data/catalogue.json") -> Tuple[ProductCatalogue, Dict[str, Any]]:
    """
    Same as load_catalogue, but also returns a small summary dict for debug / demo:
      - total_nodes, groups, leaves, max_depth
      - top_level: labels of the root's children
    """
    root = load_catalogue(dataset_path)

    summary: Dict[str, Any] = dict(count_nodes(root))
    summary["top_level"] = [
        child.data if isinstance(child, Group) else child.item.title
        for child in root.children
    ]

    return root, summary
