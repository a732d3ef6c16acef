"""Validation primitives for plugin APIs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, TypeVar

import pydantic
from pydantic import BaseModel


class ValidationError(ValueError):
    """Raised when validation fails."""

    def __init__(self, message: str, *, details: Any | None = None):
        super().__init__(message)
        self.details = details


class SchemaModel(BaseModel):
    """Strict base model for request/response validation."""

    model_config = pydantic.ConfigDict(extra="forbid", str_strip_whitespace=True)


TModel = TypeVar("TModel", bound=SchemaModel)


def parse_model(model: type[TModel], payload: Mapping[str, Any] | None) -> TModel:
    payload = payload or {}
    try:
        return model.model_validate(payload)
    except pydantic.ValidationError as exc:
        raise ValidationError(
            "Invalid request payload",
            details=exc.errors(include_url=False),
        ) from exc


@dataclass(slots=True)
class ItemLimit:
    max_items: int

    @classmethod
    def from_settings(
        cls,
        settings: Mapping[str, Any] | None,
        *,
        key: str,
        default_max_items: int,
    ) -> "ItemLimit":
        """Build an :class:`ItemLimit` from the ``config.yml`` plugin section.

        Missing or malformed values fall back to ``default_max_items`` so a
        bad configuration never raises while serving a request.
        """

        max_items = default_max_items
        if settings:
            try:
                max_items = int(settings.get(key))
            except (TypeError, ValueError):
                max_items = default_max_items
        return cls(max_items=max(max_items, 1))

    def narrow(self, requested: int | None) -> int:
        """Return the tighter of ``requested`` and the configured maximum."""

        if requested is None:
            return self.max_items
        return max(min(requested, self.max_items), 1)


__all__ = [
    "ValidationError",
    "SchemaModel",
    "parse_model",
    "ItemLimit",
]
