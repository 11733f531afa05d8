"""Shop bot - path-addressed catalogue navigation with paged button layouts."""

from .address import Address, AddressParseError
from .bootstrap import load_catalogue
from .catalogue import Catalogue, Group, Leaf, paginate, resolve
from .chat import build_context, handle_callback, handle_message

__all__ = [
    "Address",
    "AddressParseError",
    "Catalogue",
    "Group",
    "Leaf",
    "build_context",
    "handle_callback",
    "handle_message",
    "load_catalogue",
    "paginate",
    "resolve",
]
