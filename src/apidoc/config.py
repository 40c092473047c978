"""Generator settings, read from a YAML file plus the APP_URL environment variable."""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from apidoc.errors import ConfigurationMissingError

DEFAULT_URI_PREFIX = "api/v1"

# camelCase keys accepted in the config file
_ALIASES = {
    "apiTitle": "api_title",
    "apiVersion": "api_version",
    "apiDescription": "api_description",
    "apiBasePath": "api_base_path",
    "appUrl": "app_url",
    "uriPrefix": "uri_prefix",
    "controllerPrefix": "controller_prefix",
}


class ApiDocConfig(BaseModel):
    """Settings for one generation run."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    api_title: str = ""
    api_version: str = ""
    api_description: str = ""
    api_base_path: str = DEFAULT_URI_PREFIX
    app_url: str | None = None
    uri_prefix: str = DEFAULT_URI_PREFIX  # removed from every path key
    controller_prefix: str = ""  # removed from the operation tag


def load_config(file_path: Path | None = None, app_url: str | None = None) -> ApiDocConfig:
    """Load settings from ``file_path`` (optional) and resolve the application URL.

    ``app_url`` wins over the config file, which wins over ``APP_URL``.
    """
    data: dict = {}
    if file_path is not None:
        if not file_path.exists():
            raise ConfigurationMissingError(f"Config file not found: {file_path}")
        try:
            raw = yaml.safe_load(file_path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ConfigurationMissingError(f"Invalid config file {file_path}: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigurationMissingError(f"Config file {file_path} must contain a mapping")
        # accept an `apidoc:` section as well as top-level keys
        raw = raw.get("apidoc", raw)
        data = {_ALIASES.get(key, key): value for key, value in raw.items()}

    if app_url:
        data["app_url"] = app_url
    elif not data.get("app_url"):
        data["app_url"] = os.getenv("APP_URL") or None

    try:
        return ApiDocConfig(**data)
    except ValidationError as e:
        raise ConfigurationMissingError(f"Invalid configuration: {e}") from e
