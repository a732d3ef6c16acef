"""Asset labels API blueprint with standardized responses."""

from __future__ import annotations

from flask import Blueprint, Response, current_app, request
import pydantic
from pydantic import Field

from common.errors import ValidationAppError
from common.logging import get_logger
from common.responses import fail, ok
from common.validation import ItemLimit, SchemaModel, ValidationError, parse_model

from ..core import (
    AssetLimitError,
    AssetListSyntaxError,
    ListEntry,
    RangeDirectionError,
    check_asset_limit,
    describe_entry,
    expand_asset_list,
    label_path,
    parse_asset_list,
    validate_asset_list,
)

DEFAULT_MAX_ASSETS = 5000

NOTATION_HELP = (
    "List asset IDs separated by commas. An asset ID is two three-digit "
    "components joined by a hyphen (012-007). Join two IDs with -- to "
    "include every ID between them, e.g. 000-000--000-010,000-015."
)

EXAMPLES = [
    "007-003",
    "000-998--001-002",
    "012-000--012-010,013-005",
]

logger = get_logger("asset_label_server.asset_labels")


class AssetListPayload(SchemaModel):
    # the grammar decides which whitespace is allowed
    model_config = pydantic.ConfigDict(extra="forbid", str_strip_whitespace=False)

    assets: str
    limit: int | None = Field(default=None, ge=1)


api_bp = Blueprint("asset_labels_api", __name__, url_prefix="/api/asset_labels")


def _asset_limit() -> ItemLimit:
    settings = current_app.config.get("PLUGIN_SETTINGS", {}).get("asset_labels", {})
    return ItemLimit.from_settings(settings, key="max_assets", default_max_items=DEFAULT_MAX_ASSETS)


def _load_payload() -> AssetListPayload | Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        return parse_model(AssetListPayload, raw_payload)
    except ValidationError as exc:
        return fail(
            ValidationAppError(
                message=str(exc),
                code="asset_labels.invalid_request",
                details={"errors": getattr(exc, "details", None)},
            )
        )


def _parse_and_validate(payload: AssetListPayload) -> tuple[tuple[ListEntry, ...], int] | Response:
    try:
        entries = parse_asset_list(payload.assets)
    except AssetListSyntaxError as exc:
        logger.info("Rejected asset list %r at column %s", payload.assets, exc.column)
        return fail(
            ValidationAppError(
                message=str(exc), code="asset_labels.syntax_error", details=exc.details()
            )
        )
    try:
        validate_asset_list(entries)
    except RangeDirectionError as exc:
        return fail(
            ValidationAppError(
                message=str(exc), code="asset_labels.reversed_range", details=exc.details()
            )
        )
    max_assets = _asset_limit().narrow(payload.limit)
    try:
        total = check_asset_limit(entries, max_assets)
    except AssetLimitError as exc:
        return fail(
            ValidationAppError(
                message=str(exc), code="asset_labels.too_many_assets", details=exc.details()
            )
        )
    return entries, total


@api_bp.post("/expand")
def expand() -> Response:
    payload = _load_payload()
    if isinstance(payload, Response):
        return payload
    parsed = _parse_and_validate(payload)
    if isinstance(parsed, Response):
        return parsed
    entries, total = parsed

    asset_ids = [str(asset_id) for asset_id in expand_asset_list(entries)]
    logger.debug("Expanded %d entries into %d asset IDs", len(entries), total)
    return ok(
        {
            "asset_ids": asset_ids,
            "count": total,
            "entries": [describe_entry(entry) for entry in entries],
            "label_paths": [label_path(asset_id) for asset_id in asset_ids],
        }
    )


@api_bp.post("/validate")
def validate() -> Response:
    payload = _load_payload()
    if isinstance(payload, Response):
        return payload
    parsed = _parse_and_validate(payload)
    if isinstance(parsed, Response):
        return parsed
    entries, total = parsed
    return ok(
        {
            "valid": True,
            "count": total,
            "entries": [describe_entry(entry) for entry in entries],
        }
    )


@api_bp.get("/example")
def example() -> Response:
    return ok(
        {
            "help": NOTATION_HELP,
            "examples": EXAMPLES,
            "max_assets": _asset_limit().max_items,
        }
    )


blueprints = [api_bp]


__all__ = ["blueprints", "expand", "validate", "example"]
