from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .address import Address, AddressParseError
from .catalogue import Catalogue, children_of, is_group, node_label, resolve_path
from .commands import Command, descriptions, parse_command
from .config import Settings
from .formatting import format_candidates, format_group_heading, format_product
from .keyboard import back_row, build_keyboard
from .models import Button, Keyboard, Product, Reply
from .search import SearchIndex, build_search_index, find_nodes
from .utils import _trace, truncate

GREETING = "This is the shop bot. Send /buy to browse the catalogue or /help for commands."
INVALID_SELECTION = "Invalid selection."
NOT_AVAILABLE = "This item is no longer available."
FALLBACK = "Something went wrong. Send /buy to start over."


@dataclass(frozen=True)
class BotContext:
    """Everything a request handler needs; built once at startup and shared read-only."""
    catalogue: Catalogue[Any, Any]
    settings: Settings = field(default_factory=Settings)
    search_index: SearchIndex = field(default_factory=SearchIndex)


def build_context(catalogue: Catalogue[Any, Any], settings: Optional[Settings] = None) -> BotContext:
    return BotContext(
        catalogue=catalogue,
        settings=settings or Settings(),
        search_index=build_search_index(catalogue),
    )


def _debug_enabled(ctx: BotContext, debug: bool) -> bool:
    return bool(debug or ctx.settings.debug_trace)


def _browse_reply(ctx: BotContext, address: Address) -> Optional[Reply]:
    path = resolve_path(ctx.catalogue, address)
    if path is None:
        return None

    node = path[-1]
    meta = {"address": address.to_text()}

    if is_group(node):
        heading = format_group_heading([node_label(n) for n in path])
        keyboard = build_keyboard(ctx.catalogue, address, ctx.settings.page_size)
        if not children_of(node):
            heading += "\n(nothing here yet)"
        return Reply(text=heading, keyboard=keyboard, meta={**meta, "kind": "group"})

    item = node.item
    text = format_product(item) if isinstance(item, Product) else node_label(node)
    row = back_row(address)
    return Reply(
        text=text,
        keyboard=Keyboard(rows=[row]) if row else None,
        meta={**meta, "kind": "item"},
    )


def _find_reply(ctx: BotContext, query: str, trace_enabled: bool) -> Reply:
    if not query:
        return Reply(text="What should I look for? Try /find followed by a product name.")

    candidates = find_nodes(ctx.search_index, query, debug=trace_enabled)
    text = format_candidates(candidates, query=query)
    if not candidates:
        return Reply(text=text, meta={"query": query})

    rows = [[Button(text=truncate(c.display), callback_data=c.address)] for c in candidates]
    return Reply(text=text, keyboard=Keyboard(rows=rows), meta={"query": query, "hits": len(candidates)})


def handle_message(text: Optional[str], ctx: BotContext, *, debug: bool = False) -> Optional[Reply]:
    """
    Reply to a text message, or None if it is not one of our commands.
    Must never raise for normal user input.
    """
    trace_enabled = _debug_enabled(ctx, debug)
    try:
        parsed = parse_command(text, ctx.settings.bot_name)
        _trace(
            trace_enabled,
            "chat.message",
            {"text": text, "command": parsed.command.value if parsed else None},
        )
        if parsed is None:
            return None

        if parsed.command == Command.START:
            return Reply(text=GREETING)
        if parsed.command == Command.HELP:
            return Reply(text=descriptions())
        if parsed.command == Command.BUY:
            return _browse_reply(ctx, Address.root())
        if parsed.command == Command.FIND:
            return _find_reply(ctx, parsed.args, trace_enabled)
        return None
    except Exception as e:
        _trace(trace_enabled, "chat.error", {"error_type": e.__class__.__name__, "error": str(e)})
        return Reply(text=FALLBACK)


def handle_callback(data: Optional[str], ctx: BotContext, *, debug: bool = False) -> Reply:
    """
    Reply to a button press whose token is an address in wire form.
    Stale or tampered tokens get a polite message, never an exception.
    """
    trace_enabled = _debug_enabled(ctx, debug)
    try:
        if data is None:
            return Reply(text=INVALID_SELECTION, meta={"error": "missing_data"})
        try:
            address = Address.from_text(data)
        except AddressParseError as e:
            _trace(trace_enabled, "chat.callback", {"data": data, "ok": False, "reason": "parse_error", "fragment": e.fragment})
            return Reply(text=INVALID_SELECTION, meta={"error": "parse_error"})

        reply = _browse_reply(ctx, address)
        _trace(
            trace_enabled,
            "chat.callback",
            {"data": data, "address": address.to_text(), "ok": reply is not None},
        )
        if reply is None:
            return Reply(text=NOT_AVAILABLE, meta={"error": "not_found", "address": address.to_text()})
        return reply
    except Exception as e:
        _trace(trace_enabled, "chat.error", {"error_type": e.__class__.__name__, "error": str(e)})
        return Reply(text=FALLBACK)


def render_reply(reply: Reply) -> str:
    """Plain-text rendering for terminals: text followed by one line per keyboard row."""
    lines = [reply.text]
    if reply.keyboard:
        for row in reply.keyboard.rows:
            lines.append("  ".join(f"[{b.text} → {b.callback_data}]" for b in row))
    return "\n".join(lines)

