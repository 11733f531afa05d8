from __future__ import annotations

from typing import Any, List, Optional

from .address import Address
from .catalogue import Catalogue, is_group, node_label, paginate, resolve
from .models import Button, Keyboard

BACK_LABEL = "« Back"


def back_row(address: Address) -> List[Button]:
    """Single-button row pointing at the parent; empty for the root."""
    parent = address.parent()
    if parent is None:
        return []
    return [Button(text=BACK_LABEL, callback_data=parent.to_text())]


def build_keyboard(
    root: Catalogue[Any, Any],
    address: Address,
    page_size: int = 3,
    *,
    back_button: bool = True,
) -> Optional[Keyboard]:
    """
    Rows of buttons for the children of the group at `address`.

    Each button carries the child's own address (the group's address joined
    with the child's index), so pressing it navigates one level down.
    Returns None when the address names nothing or names a leaf.
    """
    node = resolve(root, address)
    if not is_group(node):
        return None

    rows: List[List[Button]] = [
        [
            Button(text=node_label(child), callback_data=address.join(local_index).to_text())
            for local_index, child in page
        ]
        for page in paginate(node, page_size)
    ]

    if back_button:
        row = back_row(address)
        if row:
            rows.append(row)

    return Keyboard(rows=rows)
