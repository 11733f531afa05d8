from __future__ import annotations

from typing import Any, List, Sequence

from .models import Candidate, Product


def format_money(value: Any) -> str:
    try:
        return f"${float(value):.2f}"
    except (TypeError, ValueError):
        return str(value)


def format_product(product: Product) -> str:
    """
    Leaf view:
        TITLE — $price
        description (if any)
    """
    lines = [f"{product.title} — {format_money(product.price)}"]
    description = (product.description or "").strip()
    if description:
        lines.append(description)
    return "\n".join(lines)


def format_group_heading(path_labels: Sequence[str]) -> str:
    parts = [p for p in path_labels if p]
    if not parts:
        return "Catalogue"
    return " > ".join(parts)


def format_candidates(candidates: List[Candidate], *, query: str) -> str:
    if not candidates:
        return f"I couldn't find '{query}' in the catalogue."
    if len(candidates) == 1:
        return f"Found {candidates[0].display}:"
    return f"Found {len(candidates)} matches for '{query}'. Which one did you mean?"
