from __future__ import annotations

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class Command(str, Enum):
    START = "start"
    HELP = "help"
    BUY = "buy"
    FIND = "find"


COMMAND_DESCRIPTIONS = {
    Command.START: "start the bot",
    Command.HELP: "display this text.",
    Command.BUY: "buy goods",
    Command.FIND: "search the catalogue, e.g. /find green tea",
}

_COMMAND_RE = re.compile(r"^/(?P<name>[A-Za-z0-9_]+)(?:@(?P<mention>\S+))?(?:\s+(?P<args>.*))?$", re.DOTALL)


class ParsedCommand(BaseModel):
    command: Command
    args: str = ""


def parse_command(text: Optional[str], bot_name: str) -> Optional[ParsedCommand]:
    """
    Parse "/name", "/name@bot" and "/name args".
    Returns None for plain text, unknown commands, or commands addressed
    to another bot.
    """
    if not text:
        return None
    m = _COMMAND_RE.match(text.strip())
    if not m:
        return None

    mention = m.group("mention")
    if mention is not None and mention.lower() != bot_name.lower():
        return None

    try:
        command = Command(m.group("name").lower())
    except ValueError:
        return None

    return ParsedCommand(command=command, args=(m.group("args") or "").strip())


def descriptions() -> str:
    lines = ["These commands are supported:"]
    for command in Command:
        lines.append(f"/{command.value} — {COMMAND_DESCRIPTIONS[command]}")
    return "\n".join(lines)
