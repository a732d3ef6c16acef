"""Structured asset identifiers of the form ``PPP-SSS``."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import AssetIdError, AssetIdOverflowError

COMPONENT_MAX = 999
_BASE = COMPONENT_MAX + 1


def _check_component(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise AssetIdError(f"{name} component must be an integer")
    if value < 0 or value > COMPONENT_MAX:
        raise AssetIdError(f"{name} component must be between 0 and {COMPONENT_MAX}, got {value}")
    return value


@dataclass(frozen=True, order=True, slots=True)
class AssetId:
    """Two zero-padded three digit components, ordered primary first."""

    primary: int
    secondary: int

    def __post_init__(self) -> None:
        _check_component("primary", self.primary)
        _check_component("secondary", self.secondary)

    def __str__(self) -> str:
        return f"{self.primary:03}-{self.secondary:03}"

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "AssetId":
        if ordinal < 0 or ordinal >= _BASE * _BASE:
            raise AssetIdError(f"Ordinal {ordinal} is outside the asset ID space")
        primary, secondary = divmod(ordinal, _BASE)
        return cls(primary, secondary)

    @property
    def ordinal(self) -> int:
        return self.primary * _BASE + self.secondary

    def successor(self) -> "AssetId":
        """Return the next asset ID, carrying into the primary component."""

        if self.secondary < COMPONENT_MAX:
            return AssetId(self.primary, self.secondary + 1)
        if self.primary >= COMPONENT_MAX:
            raise AssetIdOverflowError(f"Cannot advance past {self}")
        return AssetId(self.primary + 1, 0)


__all__ = ["AssetId", "COMPONENT_MAX"]
