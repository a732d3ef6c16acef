"""Command line interface for the Asset Labels plugin."""

from __future__ import annotations

import argparse
import json
from typing import Any

from common.logging import configure_verbosity, get_logger

from .core import (
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

logger = get_logger("asset_label_server.asset_labels.cli")


def _max_assets(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number


def _print(payload: dict[str, Any]) -> None:
    print(json.dumps(payload, indent=2, sort_keys=True))


def _load(assets: str, max_assets: int | None) -> tuple[tuple[ListEntry, ...], int]:
    try:
        entries = parse_asset_list(assets)
    except AssetListSyntaxError as exc:
        raise SystemExit(f"Failed to parse asset list: {exc}") from exc
    logger.debug("Assets: %s", ", ".join(str(entry) for entry in entries))
    try:
        validate_asset_list(entries)
    except RangeDirectionError as exc:
        raise SystemExit(f"Failed to validate asset list: {exc}") from exc
    try:
        total = check_asset_limit(entries, max_assets)
    except AssetLimitError as exc:
        raise SystemExit(f"Failed to validate asset list: {exc}") from exc
    return entries, total


def command_expand(args: argparse.Namespace) -> None:
    entries, total = _load(args.assets, args.max_assets)
    asset_ids = []
    for asset_id in expand_asset_list(entries):
        logger.info("Asset ID: %s", asset_id)
        asset_ids.append(str(asset_id))
    payload: dict[str, Any] = {"asset_ids": asset_ids, "count": total}
    if args.paths:
        payload["label_paths"] = [label_path(asset_id) for asset_id in asset_ids]
    _print(payload)


def command_validate(args: argparse.Namespace) -> None:
    entries, total = _load(args.assets, args.max_assets)
    _print(
        {
            "valid": True,
            "count": total,
            "entries": [describe_entry(entry) for entry in entries],
        }
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Asset list expansion CLI")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity")
    parser.add_argument("-q", "--quiet", action="count", default=0, help="Decrease log verbosity")
    subparsers = parser.add_subparsers(dest="command", required=True)

    assets_help = (
        "The assets to expand: an individual ID, a range (using -- to join the "
        "start and end IDs), or a comma separated list of both, e.g. 000-000--000-010,000-015"
    )

    expand_parser = subparsers.add_parser("expand", help="Print every asset ID of a list")
    expand_parser.add_argument("assets", help=assets_help)
    expand_parser.add_argument("--paths", action="store_true", help="Include label-maker request paths")
    expand_parser.add_argument("--max-assets", dest="max_assets", type=_max_assets, default=None, help="Refuse lists larger than this")
    expand_parser.set_defaults(func=command_expand)

    validate_parser = subparsers.add_parser("validate", help="Check a list without expanding it")
    validate_parser.add_argument("assets", help=assets_help)
    validate_parser.add_argument("--max-assets", dest="max_assets", type=_max_assets, default=None, help="Refuse lists larger than this")
    validate_parser.set_defaults(func=command_validate)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_verbosity(args.verbose, args.quiet)
    args.func(args)


if __name__ == "__main__":
    main()
