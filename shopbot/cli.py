from __future__ import annotations

import argparse
import json
import sys
from typing import Optional, TextIO

from .address import Address, AddressParseError
from .bootstrap import load_catalogue, load_catalogue_with_summary
from .catalogue import children_of, is_leaf, node_label, resolve
from .chat import build_context, handle_callback, handle_message, render_reply
from .config import Settings
from .formatting import format_product


def _is_address_token(line: str) -> bool:
    # Button tokens look like "/", "/0/", "/1/3/"; commands never end with "/"
    if not line.endswith("/"):
        return False
    try:
        Address.from_text(line)
    except AddressParseError:
        return False
    return True


def run_chat(settings: Settings, *, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    """
    Line REPL standing in for a chat client:
      /buy, /help, /find ...  -> commands
      /0/, /1/2/              -> button presses
      /quit or EOF            -> exit
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    ctx = build_context(load_catalogue(settings.input_file), settings)
    print("Type /help for commands, /quit to exit.", file=stdout)

    for raw in stdin:
        line = raw.strip()
        if not line:
            continue
        if line in {"/quit", "/exit"}:
            break

        if _is_address_token(line):
            reply = handle_callback(line, ctx)
        else:
            reply = handle_message(line, ctx)

        if reply is None:
            print("(no reply; try /help)", file=stdout)
        else:
            print(render_reply(reply), file=stdout)
        stdout.flush()

    return 0


def run_inspect(settings: Settings, *, stdout: Optional[TextIO] = None) -> int:
    stdout = sys.stdout if stdout is None else stdout
    _root, summary = load_catalogue_with_summary(settings.input_file)
    print(json.dumps(summary, ensure_ascii=False, indent=2), file=stdout)
    return 0


def run_resolve(settings: Settings, address_text: str, *, stdout: Optional[TextIO] = None) -> int:
    stdout = sys.stdout if stdout is None else stdout
    try:
        address = Address.from_text(address_text)
    except AddressParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    node = resolve(load_catalogue(settings.input_file), address)
    if node is None:
        print(f"Nothing at {address.to_text()}", file=sys.stderr)
        return 1

    if is_leaf(node):
        print(format_product(node.item), file=stdout)
        return 0

    children = children_of(node)
    print(f"{node_label(node)} ({len(children)} entries)", file=stdout)
    for i, child in enumerate(children):
        print(f"  {address.join(i).to_text()}  {node_label(child)}", file=stdout)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="shopbot", description="Browse a nested product catalogue by address.")
    p.add_argument("--in", dest="inp", default=None, help="Catalogue JSON path (default: $INPUT_FILE or data/catalogue.json)")
    p.add_argument("--page-size", dest="page_size", type=int, default=None, help="Buttons per keyboard row (default: $PAGE_SIZE or 3)")
    p.add_argument("--debug", action="store_true", help="Print structured traces to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("chat", help="Interactive chat session on stdin/stdout")
    sub.add_parser("inspect", help="Print catalogue summary as JSON")
    rp = sub.add_parser("resolve", help="Show the node at an address, e.g. /0/1/")
    rp.add_argument("address")

    args = p.parse_args(argv)

    try:
        settings = Settings.from_env()
        overrides = {}
        if args.inp:
            overrides["input_file"] = args.inp
        if args.page_size is not None:
            overrides["page_size"] = args.page_size
        if args.debug:
            overrides["debug_trace"] = True
        if overrides:
            settings = Settings.model_validate({**settings.model_dump(), **overrides})

        if args.cmd == "chat":
            return run_chat(settings)
        if args.cmd == "inspect":
            return run_inspect(settings)
        return run_resolve(settings, args.address)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
