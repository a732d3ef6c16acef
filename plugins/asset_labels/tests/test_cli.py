"""Smoke tests for the Asset Labels CLI."""

from __future__ import annotations

import json
from contextlib import redirect_stdout
from io import StringIO

import pytest

from plugins.asset_labels import cli


def _run_cli(args: list[str]) -> dict[str, object]:
    buffer = StringIO()
    with redirect_stdout(buffer):
        cli.main(args)
    output = buffer.getvalue().strip()
    return json.loads(output)


def test_cli_expand_prints_ids():
    result = _run_cli(["expand", "012-000--012-002,013-005"])
    assert result["asset_ids"] == ["012-000", "012-001", "012-002", "013-005"]
    assert result["count"] == 4
    assert "label_paths" not in result


def test_cli_expand_with_paths():
    result = _run_cli(["-q", "expand", "--paths", "001-001"])
    assert result["label_paths"] == ["/v1/labelmaker/asset/001-001?print=false"]


def test_cli_validate_summarises_entries():
    result = _run_cli(["validate", "000-000--000-004,000-010"])
    assert result["valid"] is True
    assert result["count"] == 6
    assert [entry["kind"] for entry in result["entries"]] == ["range", "single"]


def test_cli_reports_parse_failures():
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["expand", "000-000-"])
    assert str(excinfo.value.code).startswith("Failed to parse asset list:")


def test_cli_reports_reversed_ranges():
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["validate", "005-000--003-000"])
    assert str(excinfo.value.code).startswith("Failed to validate asset list:")


def test_cli_enforces_max_assets():
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["expand", "--max-assets", "2", "000-000--000-002"])
    assert "limit is 2" in str(excinfo.value.code)


@pytest.mark.parametrize("value", ["0", "-1", "many"])
def test_cli_rejects_non_positive_max_assets(value, capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["expand", "--max-assets", value, "000-000"])
    assert excinfo.value.code == 2
    assert "--max-assets" in capsys.readouterr().err
