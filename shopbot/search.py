from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field
from rapidfuzz import fuzz, process

from .catalogue import Catalogue, is_group, iter_nodes, node_label
from .models import Candidate
from .utils import _trace, normalize_text


FUZZY_ACCEPT_THRESHOLD = 70.0


class SearchIndex(BaseModel):
    # address text -> display label / kind
    labels: Dict[str, str] = Field(default_factory=dict)
    kinds: Dict[str, str] = Field(default_factory=dict)

    # normalized label -> addresses (collisions stored as list)
    by_norm_label: Dict[str, List[str]] = Field(default_factory=dict)

    # Fuzzy matching helper: address text -> normalized label
    choice_map: Dict[str, str] = Field(default_factory=dict)


def build_search_index(root: Catalogue[Any, Any]) -> SearchIndex:
    """
    Index every node below the root by its normalized label.
    """
    idx = SearchIndex()
    for ctx in iter_nodes(root):
        if ctx.address.is_root:
            continue
        key = ctx.address.to_text()
        label = node_label(ctx.node)
        idx.labels[key] = label
        idx.kinds[key] = "group" if is_group(ctx.node) else "item"

        norm = normalize_text(label)
        if not norm:
            continue
        idx.by_norm_label.setdefault(norm, []).append(key)
        idx.choice_map[key] = norm
    return idx


def _candidate(idx: SearchIndex, key: str, score: float) -> Candidate:
    return Candidate(kind=idx.kinds[key], address=key, display=idx.labels[key], score=float(score))


def find_nodes(idx: SearchIndex, query: str, *, top_k: int = 5, debug: bool = False) -> List[Candidate]:
    """
    Exact normalized label matches first; otherwise the best fuzzy matches
    scoring at least FUZZY_ACCEPT_THRESHOLD.
    """
    norm_q = normalize_text(query)
    if not norm_q:
        return []

    exact = idx.by_norm_label.get(norm_q)
    if exact:
        out = [_candidate(idx, key, 100.0) for key in exact[:top_k]]
        reason = "exact"
    elif not idx.choice_map:
        out = []
        reason = "no_choices"
    else:
        matches = process.extract(norm_q, idx.choice_map, scorer=fuzz.WRatio, limit=top_k)
        # matches: (choice_value, score, choice_key)
        out = [_candidate(idx, key, score) for _val, score, key in matches if score >= FUZZY_ACCEPT_THRESHOLD]
        reason = "fuzzy" if out else "no_match"

    _trace(
        debug,
        "search.find",
        {
            "query": query,
            "normalized_query": norm_q,
            "reason": reason,
            "candidates": [c.model_dump() for c in out[:3]],
        },
    )
    return out
