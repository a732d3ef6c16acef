"""Exception types raised by the asset list core."""

from __future__ import annotations

from typing import Any, Sequence


class AssetListError(ValueError):
    """Base class for every asset list failure."""

    def details(self) -> dict[str, Any]:
        return {}


class AssetIdError(AssetListError):
    """Raised when an asset ID is built from out-of-range components."""


class AssetIdOverflowError(AssetIdError):
    """Raised when advancing past the last representable asset ID."""


class AssetListSyntaxError(AssetListError):
    """Raised when the input does not match the asset list grammar."""

    def __init__(self, text: str, position: int, expected: Sequence[str]):
        self.text = text
        self.position = position
        self.expected = list(expected)
        consumed = text[:position]
        self.line = consumed.count("\n") + 1
        self.column = position - (consumed.rfind("\n") + 1) + 1
        super().__init__(self._render())

    def _expected_phrase(self) -> str:
        if not self.expected:
            return "valid input"
        if len(self.expected) == 1:
            return self.expected[0]
        return ", ".join(self.expected[:-1]) + f" or {self.expected[-1]}"

    def _render(self) -> str:
        source_line = self.text.split("\n")[self.line - 1]
        if self.line > 1:
            location = f"line {self.line}, column {self.column}"
        else:
            location = f"column {self.column}"
        pointer = " " * (self.column - 1) + "^"
        return (
            f"Invalid asset list at {location}: expected {self._expected_phrase()}\n"
            f"  {source_line}\n"
            f"  {pointer}"
        )

    def details(self) -> dict[str, Any]:
        return {
            "position": self.position,
            "line": self.line,
            "column": self.column,
            "expected": list(self.expected),
        }


class RangeDirectionError(AssetListError):
    """Raised when a range ends before it starts."""

    def __init__(self, index: int, start: Any, end: Any):
        self.index = index
        self.start = start
        self.end = end
        super().__init__(
            f"The start of a range must not be greater than its end "
            f"(entry {index + 1}: {start}--{end})"
        )

    def details(self) -> dict[str, Any]:
        return {"index": self.index, "start": str(self.start), "end": str(self.end)}


class AssetLimitError(AssetListError):
    """Raised when an asset list expands to more IDs than allowed."""

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(f"Asset list expands to {count} IDs, the limit is {limit}")

    def details(self) -> dict[str, Any]:
        return {"count": self.count, "limit": self.limit}


__all__ = [
    "AssetListError",
    "AssetIdError",
    "AssetIdOverflowError",
    "AssetListSyntaxError",
    "RangeDirectionError",
    "AssetLimitError",
]
