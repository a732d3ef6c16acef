"""Recursive-descent parser for the asset list notation.

Grammar::

    input     = spaces list spaces END
    list      = item (spaces "," spaces item)*
    item      = range | asset_id
    range     = asset_id spaces "--" spaces asset_id
    asset_id  = component "-" component
    component = DIGIT DIGIT DIGIT

Only ASCII spaces count as incidental whitespace and they never appear
inside an ``asset_id``. On failure the error points at the furthest
position any rule reached, together with every token that would have
been accepted there.
"""

from __future__ import annotations

from .asset_id import AssetId
from .entries import ListEntry, RangeEntry, SingleEntry
from .errors import AssetListSyntaxError

_DIGITS = frozenset("0123456789")
_COMPONENT = "3-digit component"
_END = "end of input"


class _Parser:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self._fail_pos = -1
        self._expected: list[str] = []

    def _fail(self, expected: str) -> None:
        if self.pos > self._fail_pos:
            self._fail_pos = self.pos
            self._expected = [expected]
        elif self.pos == self._fail_pos and expected not in self._expected:
            self._expected.append(expected)

    def error(self) -> AssetListSyntaxError:
        return AssetListSyntaxError(self.text, max(self._fail_pos, 0), self._expected)

    def skip_spaces(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos] == " ":
            self.pos += 1

    def literal(self, token: str) -> bool:
        if self.text.startswith(token, self.pos):
            self.pos += len(token)
            return True
        self._fail(f"'{token}'")
        return False

    def at_end(self) -> bool:
        if self.pos == len(self.text):
            return True
        self._fail(_END)
        return False

    def component(self) -> int | None:
        chunk = self.text[self.pos : self.pos + 3]
        if len(chunk) == 3 and all(char in _DIGITS for char in chunk):
            self.pos += 3
            return int(chunk)
        self._fail(_COMPONENT)
        return None

    def asset_id(self) -> AssetId | None:
        start = self.pos
        primary = self.component()
        if primary is not None and self.literal("-"):
            secondary = self.component()
            if secondary is not None:
                return AssetId(primary, secondary)
        self.pos = start
        return None

    def item(self) -> ListEntry | None:
        first = self.asset_id()
        if first is None:
            return None
        after_first = self.pos
        self.skip_spaces()
        if self.literal("--"):
            self.skip_spaces()
            second = self.asset_id()
            if second is not None:
                return RangeEntry(first, second)
        # not a range, fall back to the bare id
        self.pos = after_first
        return SingleEntry(first)

    def items(self) -> list[ListEntry]:
        first = self.item()
        if first is None:
            raise self.error()
        entries = [first]
        while True:
            checkpoint = self.pos
            self.skip_spaces()
            if not self.literal(","):
                self.pos = checkpoint
                break
            self.skip_spaces()
            entry = self.item()
            if entry is None:
                raise self.error()
            entries.append(entry)
        return entries


def parse_asset_list(text: str) -> tuple[ListEntry, ...]:
    """Parse ``text`` into its entries, in the order they were written.

    Raises :class:`AssetListSyntaxError` when ``text`` is not a well formed
    list. Range direction is not checked here, see ``validate_asset_list``.
    """

    if not isinstance(text, str):
        raise TypeError("Asset list must be a string")
    parser = _Parser(text)
    parser.skip_spaces()
    entries = parser.items()
    parser.skip_spaces()
    if not parser.at_end():
        raise parser.error()
    return tuple(entries)


def parse_asset_id(text: str) -> AssetId:
    """Parse a single asset ID surrounded by optional spaces."""

    if not isinstance(text, str):
        raise TypeError("Asset ID must be a string")
    parser = _Parser(text)
    parser.skip_spaces()
    asset_id = parser.asset_id()
    if asset_id is None:
        raise parser.error()
    parser.skip_spaces()
    if not parser.at_end():
        raise parser.error()
    return asset_id


__all__ = ["parse_asset_list", "parse_asset_id"]
