from __future__ import annotations

import logging
import os
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field


DEFAULT_CONFIG_PATH = "docwiki.yaml"
CONFIG_ENV_VAR = "DOCWIKI_CONFIG"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class AppConfig(BaseModel):
    debug_level: str = "INFO"

    # FastAPI / Uvicorn
    api_port: int = 8080

    # CORS
    # If True, enables permissive CORS headers for browser clients (dev-friendly).
    # When False, no CORS middleware is installed.
    cors_enabled: bool = False

    # Prefix of every internal wiki link, for deployments behind a reverse
    # proxy (e.g. "/wiki" turns [FrontPage] into /wiki/view/FrontPage).
    proxy_root: str = ""

    # Column at which rendered HTML lines are wrapped.
    wrap_width: int = Field(80, ge=2)

    # Documentation links ([doc:project:Entity])
    # XML file listing the documented projects and their search data files.
    # When unset (or missing), doc links point at each project's index page.
    doc_project_index: Optional[str] = None


def resolve_config_path(path: Optional[str] = None) -> str:
    """Pick the config file: `path`, else $DOCWIKI_CONFIG, else ./docwiki.yaml."""

    return path or os.getenv(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH


def load_config(path: Optional[str] = None) -> AppConfig:
    """Read the wiki settings from YAML.

    An absent or empty file means every setting keeps its default.

    Raises:
        ValueError: The document is not a mapping of setting names.
        pydantic.ValidationError: A setting has an invalid value.
    """

    config_path = resolve_config_path(path)
    if not os.path.exists(config_path):
        return AppConfig()

    with open(config_path, "r", encoding="utf-8") as f:
        settings: Any = yaml.safe_load(f) or {}

    if not isinstance(settings, dict):
        raise ValueError(f"{config_path}: expected a mapping of settings, got {type(settings).__name__}")

    return AppConfig(**settings)


def configure_logging(debug_level: str) -> None:
    """Set the root log level from the `debug_level` setting (case-insensitive)."""

    level = logging.getLevelName((debug_level or "INFO").strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown debug_level {debug_level!r}; use DEBUG, INFO, WARNING or ERROR")

    logging.basicConfig(level=level, format=LOG_FORMAT)
