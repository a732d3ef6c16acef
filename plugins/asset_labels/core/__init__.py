from __future__ import annotations

from typing import List

from .asset_id import COMPONENT_MAX, AssetId
from .entries import (
    EntryIterator,
    ListEntry,
    RangeEntry,
    SingleEntry,
    count_asset_ids,
    describe_entry,
    entry_size,
    expand_asset_list,
    expand_entry,
    validate_asset_list,
)
from .errors import (
    AssetIdError,
    AssetIdOverflowError,
    AssetLimitError,
    AssetListError,
    AssetListSyntaxError,
    RangeDirectionError,
)
from .parser import parse_asset_id, parse_asset_list

LABEL_PATH_TEMPLATE = "/v1/labelmaker/asset/{asset_id}?print=false"


def label_path(asset_id: AssetId | str) -> str:
    """Label-maker request path for ``asset_id``, relative to the API base URL."""

    return LABEL_PATH_TEMPLATE.format(asset_id=asset_id)


def check_asset_limit(entries: tuple[ListEntry, ...], max_assets: int | None) -> int:
    total = count_asset_ids(entries)
    if max_assets is not None and total > max_assets:
        raise AssetLimitError(total, max_assets)
    return total


def resolve_asset_ids(text: str, *, max_assets: int | None = None) -> List[AssetId]:
    """Parse, validate and expand ``text`` into a flat list of asset IDs."""

    entries = parse_asset_list(text)
    validate_asset_list(entries)
    check_asset_limit(entries, max_assets)
    return list(expand_asset_list(entries))


__all__ = [
    "AssetId",
    "COMPONENT_MAX",
    "ListEntry",
    "SingleEntry",
    "RangeEntry",
    "EntryIterator",
    "AssetListError",
    "AssetIdError",
    "AssetIdOverflowError",
    "AssetListSyntaxError",
    "RangeDirectionError",
    "AssetLimitError",
    "parse_asset_list",
    "parse_asset_id",
    "validate_asset_list",
    "expand_entry",
    "expand_asset_list",
    "entry_size",
    "count_asset_ids",
    "describe_entry",
    "check_asset_limit",
    "label_path",
    "resolve_asset_ids",
]
