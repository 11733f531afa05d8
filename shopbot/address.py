from __future__ import annotations

import sys
from typing import Annotated, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

# Largest segment accepted; keeps every segment a machine-sized index
MAX_SEGMENT = sys.maxsize
_MAX_SEGMENT_DIGITS = len(str(MAX_SEGMENT))

Segment = Annotated[int, Field(ge=0, le=MAX_SEGMENT)]


class AddressParseError(ValueError):
    """Raised when callback text is not a valid slash-delimited address."""

    def __init__(self, text: str, fragment: str):
        self.text = text
        self.fragment = fragment
        super().__init__(f"Invalid address {text!r}: segment {fragment!r} is not an integer in 0..{MAX_SEGMENT}")


class Address(BaseModel):
    """
    Path to a catalogue node: child indices from the root, in order.

    The empty address names the root. Addresses are immutable values;
    `join` and `parent` return new instances.
    """

    model_config = ConfigDict(frozen=True)

    segments: Tuple[Segment, ...] = ()

    @classmethod
    def root(cls) -> "Address":
        return cls()

    @classmethod
    def of(cls, *segments: int) -> "Address":
        return cls(segments=segments)

    @property
    def depth(self) -> int:
        return len(self.segments)

    @property
    def is_root(self) -> bool:
        return not self.segments

    def join(self, segment: int) -> "Address":
        if segment < 0 or segment > MAX_SEGMENT:
            raise ValueError(f"Address segments must be in 0..{MAX_SEGMENT}")
        return Address(segments=self.segments + (segment,))

    def parent(self) -> Optional["Address"]:
        if not self.segments:
            return None
        return Address(segments=self.segments[:-1])

    def to_text(self) -> str:
        """
        Wire form used as a callback token: "/" for the root, otherwise
        "/1/3/2/" (leading and trailing slash).
        """
        if not self.segments:
            return "/"
        return "/" + "/".join(str(s) for s in self.segments) + "/"

    @classmethod
    def from_text(cls, text: str) -> "Address":
        """
        Parse the wire form back into an Address.

        Empty fragments are skipped, so "", "/", "//1//2" are all accepted.
        Raises AddressParseError if any other fragment is not a plain
        decimal integer in 0..MAX_SEGMENT.
        """
        segments = []
        for fragment in (text or "").split("/"):
            if not fragment:
                continue
            # str.isdigit alone accepts superscripts and other unicode digits
            if not (fragment.isascii() and fragment.isdigit()):
                raise AddressParseError(text, fragment)
            # length check first: int() refuses very long digit strings
            digits = fragment.lstrip("0") or "0"
            if len(digits) > _MAX_SEGMENT_DIGITS:
                raise AddressParseError(text, fragment)
            value = int(digits)
            if value > MAX_SEGMENT:
                raise AddressParseError(text, fragment)
            segments.append(value)
        return cls(segments=tuple(segments))

    def __str__(self) -> str:
        return self.to_text()
