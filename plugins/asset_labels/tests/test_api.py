from pathlib import Path

import pytest

from app import create_app


def _make_client(config_path: Path | None = None):
    app = create_app("TestingConfig", config_path=config_path)
    return app.test_client()


def _post(client, endpoint: str, payload):
    return client.post(f"/api/asset_labels/{endpoint}", json=payload)


def test_expand_returns_ids_in_order():
    client = _make_client()
    response = _post(client, "expand", {"assets": "000-998--001-000,005-000"})
    assert response.status_code == 200
    payload = response.get_json()
    assert payload["success"] is True
    data = payload["data"]
    assert data["asset_ids"] == ["000-998", "000-999", "001-000", "005-000"]
    assert data["count"] == 4
    assert [entry["kind"] for entry in data["entries"]] == ["range", "single"]
    assert data["label_paths"][0] == "/v1/labelmaker/asset/000-998?print=false"
    assert payload["meta"]["request_id"]
    assert response.headers["X-Request-ID"] == payload["meta"]["request_id"]


def test_expand_reports_syntax_errors_with_position():
    client = _make_client()
    response = _post(client, "expand", {"assets": "000-000,,001-000"})
    assert response.status_code == 400
    payload = response.get_json()
    assert payload["success"] is False
    error = payload["error"]
    assert error["code"] == "asset_labels.syntax_error"
    assert error["details"]["position"] == 8
    assert error["details"]["column"] == 9
    assert error["details"]["expected"] == ["3-digit component"]


def test_expand_rejects_reversed_range():
    client = _make_client()
    response = _post(client, "expand", {"assets": "001-000,005-000--003-000"})
    assert response.status_code == 400
    error = response.get_json()["error"]
    assert error["code"] == "asset_labels.reversed_range"
    assert error["details"] == {"index": 1, "start": "005-000", "end": "003-000"}


def test_expand_rejects_missing_or_extra_fields():
    client = _make_client()
    response = _post(client, "expand", {})
    assert response.status_code == 400
    assert response.get_json()["error"]["code"] == "asset_labels.invalid_request"

    response = _post(client, "expand", {"assets": "000-000", "colour": "red"})
    assert response.status_code == 400
    assert response.get_json()["error"]["code"] == "asset_labels.invalid_request"


def test_expand_respects_configured_limit():
    client = _make_client()
    response = _post(client, "expand", {"assets": "000-000--009-999"})
    assert response.status_code == 400
    error = response.get_json()["error"]
    assert error["code"] == "asset_labels.too_many_assets"
    assert error["details"] == {"count": 10000, "limit": 5000}


def test_expand_request_limit_cannot_exceed_configuration(tmp_path):
    config = tmp_path / "config.yml"
    config.write_text("plugins:\n  asset_labels:\n    max_assets: 3\n", encoding="utf-8")
    client = _make_client(config)

    response = _post(client, "expand", {"assets": "000-000--000-002"})
    assert response.status_code == 200

    response = _post(client, "expand", {"assets": "000-000--000-003", "limit": 50})
    assert response.status_code == 400
    assert response.get_json()["error"]["details"]["limit"] == 3

    response = _post(client, "expand", {"assets": "000-000--000-002", "limit": 2})
    assert response.status_code == 400
    assert response.get_json()["error"]["details"] == {"count": 3, "limit": 2}


def test_malformed_limit_setting_falls_back_to_default(tmp_path):
    config = tmp_path / "config.yml"
    config.write_text("plugins:\n  asset_labels:\n    max_assets: lots\n", encoding="utf-8")
    client = _make_client(config)
    response = client.get("/api/asset_labels/example")
    assert response.get_json()["data"]["max_assets"] == 5000


def test_validate_does_not_expand():
    client = _make_client()
    response = _post(client, "validate", {"assets": "000-000--000-009, 001-000"})
    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["valid"] is True
    assert data["count"] == 11
    assert "asset_ids" not in data
    assert data["entries"][0] == {"kind": "range", "start": "000-000", "end": "000-009", "count": 10}


def test_example_endpoint_lists_examples():
    client = _make_client()
    response = client.get("/api/asset_labels/example")
    assert response.status_code == 200
    data = response.get_json()["data"]
    assert "--" in data["help"]
    for sample in data["examples"]:
        assert _post(client, "validate", {"assets": sample}).status_code == 200


@pytest.mark.parametrize("assets", ["000-000\t", "\n000-000", "\t001-000--001-002\r\n"])
def test_expand_rejects_non_space_whitespace(assets):
    client = _make_client()
    response = _post(client, "expand", {"assets": assets})
    assert response.status_code == 400
    assert response.get_json()["error"]["code"] == "asset_labels.syntax_error"


@pytest.mark.parametrize("assets, position", [("", 0), ("   ", 3)])
def test_blank_list_is_a_syntax_error(assets, position):
    client = _make_client()
    response = _post(client, "validate", {"assets": assets})
    assert response.status_code == 400
    error = response.get_json()["error"]
    assert error["code"] == "asset_labels.syntax_error"
    assert error["details"]["position"] == position
    assert error["details"]["expected"] == ["3-digit component"]
