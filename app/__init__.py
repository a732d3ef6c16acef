"""Application factory for the Asset Label Server."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from flask import Flask
from werkzeug.exceptions import HTTPException

from common.errors import (
    AppError,
    MethodNotAllowedAppError,
    NotFoundAppError,
    ensure_app_error,
)
from common.logging import get_logger, install_request_logging
from common.responses import fail, ok

from . import config as config_module
from .blueprints import load_manifests, register_plugin_blueprints

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.yml"


def _load_yaml_config(path: Path = CONFIG_PATH) -> dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def _apply_site_settings(app: Flask, site_settings: dict[str, Any]) -> None:
    app.config["SITE_SETTINGS"] = site_settings
    if "max_content_length_kb" in site_settings:
        try:
            app.config["MAX_CONTENT_LENGTH"] = int(float(site_settings["max_content_length_kb"]) * 1024)
        except (TypeError, ValueError):
            get_logger().warning(
                "Ignoring invalid max_content_length_kb=%r", site_settings["max_content_length_kb"]
            )
    if "log_level" in site_settings:
        level = str(site_settings["log_level"]).upper()
        try:
            get_logger().setLevel(level)
        except ValueError:
            get_logger().warning("Ignoring unknown log_level=%r", site_settings["log_level"])


def create_app(config_name: str | None = None, *, config_path: Path | None = None) -> Flask:
    """Create and configure the Flask application instance."""

    app = Flask(__name__)
    app.config.from_object(config_module.BaseConfig)

    yaml_config = _load_yaml_config(config_path or CONFIG_PATH)
    _apply_site_settings(app, dict(yaml_config.get("site", {}) or {}))
    plugin_settings = dict(yaml_config.get("plugins", {}) or {})
    app.config["PLUGIN_SETTINGS"] = plugin_settings

    if config_name:
        config_obj = getattr(config_module, config_name, None)
        if config_obj:
            app.config.from_object(config_obj)

    install_request_logging(app)
    register_plugin_blueprints(app)

    manifests = load_manifests()
    for manifest in manifests:
        blueprint = manifest.get("blueprint")
        plugin_config = plugin_settings.get(blueprint, {}) if blueprint else {}
        if plugin_config.get("summary"):
            manifest["summary"] = plugin_config["summary"]
    app.config["PLUGIN_MANIFESTS"] = manifests

    @app.after_request
    def apply_response_headers(response):
        """Attach strict security headers to every outgoing response."""

        configured = app.config.get("RESPONSE_HEADERS", {})
        for header, value in configured.items():
            if header not in response.headers:
                response.headers[header] = value
        return response

    @app.get("/")
    def home():
        site_config = app.config.get("SITE_SETTINGS", {})
        return ok(
            {
                "title": site_config.get("title", "Asset Label Server"),
                "plugins": app.config["PLUGIN_MANIFESTS"],
            }
        )

    @app.errorhandler(AppError)
    def handle_app_error(error: AppError):
        return fail(error)

    @app.errorhandler(404)
    def not_found(error):
        return fail(NotFoundAppError(message="Resource not found"))

    @app.errorhandler(405)
    def method_not_allowed(error):
        return fail(MethodNotAllowedAppError(message="Method not allowed"))

    @app.errorhandler(HTTPException)
    def http_error(error: HTTPException):
        return fail(
            AppError(
                message=error.description or error.name,
                code=f"http.{error.code}",
                status_code=error.code or 500,
            )
        )

    @app.errorhandler(Exception)
    def server_error(error: Exception):
        get_logger().exception("Unhandled error while serving request")
        return fail(ensure_app_error(error, fallback_code="internal_error"))

    return app


__all__ = ["create_app"]
