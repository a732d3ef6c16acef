"""Parsed asset list entries, range validation and lazy expansion."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import chain
from typing import Iterable, Iterator, Union

from .asset_id import AssetId
from .errors import RangeDirectionError


@dataclass(frozen=True, slots=True)
class SingleEntry:
    """A lone asset ID."""

    asset_id: AssetId

    def __str__(self) -> str:
        return str(self.asset_id)


@dataclass(frozen=True, slots=True)
class RangeEntry:
    """An inclusive span of asset IDs written as ``start--end``."""

    start: AssetId
    end: AssetId

    def __str__(self) -> str:
        return f"{self.start}--{self.end}"


ListEntry = Union[SingleEntry, RangeEntry]


def _unknown_entry(entry: object) -> TypeError:
    return TypeError(f"Unsupported asset list entry: {entry!r}")


class EntryIterator:
    """Single-pass cursor over the asset IDs of one entry.

    The cursor starts empty; the first step yields the entry's first ID and
    every later step advances the cursor in place until the entry is spent.
    """

    __slots__ = ("_entry", "_current", "_done")

    def __init__(self, entry: ListEntry):
        if not isinstance(entry, (SingleEntry, RangeEntry)):
            raise _unknown_entry(entry)
        self._entry = entry
        self._current: AssetId | None = None
        self._done = False

    def __iter__(self) -> "EntryIterator":
        return self

    def __next__(self) -> AssetId:
        if self._done:
            raise StopIteration
        entry = self._entry
        if isinstance(entry, SingleEntry):
            self._current = entry.asset_id
            self._done = True
            return self._current
        if isinstance(entry, RangeEntry):
            if self._current is None:
                self._current = entry.start
            elif self._current >= entry.end:
                self._done = True
                raise StopIteration
            else:
                self._current = self._current.successor()
            if self._current > entry.end:
                self._done = True
                raise StopIteration
            return self._current
        raise _unknown_entry(entry)


def expand_entry(entry: ListEntry) -> EntryIterator:
    """Return a fresh lazy expansion of ``entry``."""

    return EntryIterator(entry)


def expand_asset_list(entries: Iterable[ListEntry]) -> Iterator[AssetId]:
    """Lazily yield every asset ID of ``entries`` in list order."""

    return chain.from_iterable(expand_entry(entry) for entry in entries)


def entry_size(entry: ListEntry) -> int:
    """Number of IDs ``entry`` expands to; reversed ranges are empty."""

    if isinstance(entry, SingleEntry):
        return 1
    if isinstance(entry, RangeEntry):
        return max(entry.end.ordinal - entry.start.ordinal + 1, 0)
    raise _unknown_entry(entry)


def count_asset_ids(entries: Iterable[ListEntry]) -> int:
    return sum(entry_size(entry) for entry in entries)


def validate_asset_list(entries: Iterable[ListEntry]) -> None:
    """Raise :class:`RangeDirectionError` for the first range whose end precedes its start."""

    for index, entry in enumerate(entries):
        if isinstance(entry, SingleEntry):
            continue
        if isinstance(entry, RangeEntry):
            if entry.end < entry.start:
                raise RangeDirectionError(index, entry.start, entry.end)
            continue
        raise _unknown_entry(entry)


def describe_entry(entry: ListEntry) -> dict[str, object]:
    """JSON friendly summary of an entry."""

    if isinstance(entry, SingleEntry):
        return {"kind": "single", "asset_id": str(entry.asset_id), "count": 1}
    if isinstance(entry, RangeEntry):
        return {
            "kind": "range",
            "start": str(entry.start),
            "end": str(entry.end),
            "count": entry_size(entry),
        }
    raise _unknown_entry(entry)


__all__ = [
    "SingleEntry",
    "RangeEntry",
    "ListEntry",
    "EntryIterator",
    "expand_entry",
    "expand_asset_list",
    "entry_size",
    "count_asset_ids",
    "validate_asset_list",
    "describe_entry",
]
