import pytest

from plugins.asset_labels.core import (
    AssetId,
    AssetListSyntaxError,
    RangeEntry,
    SingleEntry,
    parse_asset_id,
    parse_asset_list,
)


@pytest.mark.parametrize(
    "text",
    [
        "12-000",
        "000-000-",
        "",
        "000-000,,001-000",
        "000-000,",
        ",000-000",
        "000-000--",
        "--000-000",
        "0000-000",
        "000-0000",
        "000 -000",
        "000-000- -001-000",
        "000-000\t",
        "abc-def",
        "000_000",
        "000-000;001-000",
        "١٢٣-000",
        "   ",
    ],
)
def test_malformed_input_is_rejected(text):
    with pytest.raises(AssetListSyntaxError):
        parse_asset_list(text)


def test_spaces_between_tokens_are_ignored():
    entries = parse_asset_list("  000-001 --  000-003 , 004-000  ")
    assert entries == (
        RangeEntry(AssetId(0, 1), AssetId(0, 3)),
        SingleEntry(AssetId(4, 0)),
    )


def test_entries_keep_input_order():
    entries = parse_asset_list("009-000,001-000--001-001,003-000")
    assert [str(entry) for entry in entries] == ["009-000", "001-000--001-001", "003-000"]


def test_error_reports_position_and_expected_tokens():
    with pytest.raises(AssetListSyntaxError) as excinfo:
        parse_asset_list("000-000-")
    error = excinfo.value
    assert error.position == 7
    assert (error.line, error.column) == (1, 8)
    assert error.expected == ["'--'", "','", "end of input"]
    assert "column 8" in str(error)
    assert str(error).splitlines()[-1] == "  " + " " * 7 + "^"


def test_error_points_at_short_component():
    with pytest.raises(AssetListSyntaxError) as excinfo:
        parse_asset_list("12-000")
    assert excinfo.value.position == 0
    assert excinfo.value.expected == ["3-digit component"]


def test_error_points_at_missing_item_after_comma():
    with pytest.raises(AssetListSyntaxError) as excinfo:
        parse_asset_list("000-000,,001-000")
    assert excinfo.value.position == 8
    assert excinfo.value.details()["expected"] == ["3-digit component"]


def test_error_points_past_incomplete_range():
    with pytest.raises(AssetListSyntaxError) as excinfo:
        parse_asset_list("000-000-- ")
    assert excinfo.value.position == 10
    assert excinfo.value.expected == ["3-digit component"]


def test_empty_input_error_is_at_start():
    with pytest.raises(AssetListSyntaxError) as excinfo:
        parse_asset_list("")
    assert excinfo.value.details() == {
        "position": 0,
        "line": 1,
        "column": 1,
        "expected": ["3-digit component"],
    }


def test_parse_asset_id_rejects_lists():
    assert parse_asset_id(" 001-002 ") == AssetId(1, 2)
    with pytest.raises(AssetListSyntaxError):
        parse_asset_id("001-002,001-003")
    with pytest.raises(AssetListSyntaxError):
        parse_asset_id("001-002--001-003")


def test_parse_requires_string():
    with pytest.raises(TypeError):
        parse_asset_list(None)
