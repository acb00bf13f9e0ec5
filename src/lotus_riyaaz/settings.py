"""Application settings — configs/app.json with environment overrides."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from lotus_riyaaz.raga.catalog import DEFAULT_CATALOG_PATH, FallbackPolicy
from lotus_riyaaz.raga.text import Language

_PROJECT_ROOT = Path(__file__).resolve().parents[2]
_CONFIGS_DIR = _PROJECT_ROOT / "configs"

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class Settings:
    """Resolved runtime settings.

    Attributes:
        catalog_source: URL or filesystem path of the rāga catalog.
        catalog_fallback: What to show when the catalog cannot be loaded.
        default_language: Language used when a request does not ask for one.
        log_level: Root logging level name.
    """

    catalog_source: str | Path = DEFAULT_CATALOG_PATH
    catalog_fallback: FallbackPolicy = FallbackPolicy.BUILTIN
    default_language: Language = Language.en
    log_level: str = "INFO"


def _load_config(path: Path | None = None) -> dict:
    with open(path or _CONFIGS_DIR / "app.json") as f:
        return json.load(f)


def _resolve_source(source: str) -> str | Path:
    """Keep URLs as-is; make relative paths relative to the project root."""
    if source.startswith(("http://", "https://")):
        return source
    path = Path(source)
    return path if path.is_absolute() else _PROJECT_ROOT / path


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from the config file, letting environment variables win.

    Environment variables:
        RIYAAZ_CATALOG_SOURCE, RIYAAZ_CATALOG_FALLBACK,
        RIYAAZ_LANGUAGE, RIYAAZ_LOG_LEVEL
    """
    config = _load_config(path)
    source = os.environ.get("RIYAAZ_CATALOG_SOURCE", config["catalog_source"])
    fallback = os.environ.get("RIYAAZ_CATALOG_FALLBACK", config["catalog_fallback"])
    language = os.environ.get("RIYAAZ_LANGUAGE", config["default_language"])
    log_level = os.environ.get("RIYAAZ_LOG_LEVEL", config.get("log_level", "INFO"))

    return Settings(
        catalog_source=_resolve_source(source),
        catalog_fallback=FallbackPolicy(fallback),
        default_language=Language(language),
        log_level=log_level.upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    """Install a basic root handler once and set the package log level."""
    logging.basicConfig(format=_LOG_FORMAT)
    logging.getLogger("lotus_riyaaz").setLevel(level)
