"""Configuration for the URL builder and the page fetcher.

The defaults point at the public Lens deployment. A YAML file may override
any of them::

    search_base: "https://www.lens.org/lens/search?q="
    paginated_base: "https://www.lens.org/lens/search?p="
    page_size: 50
    max_results: 500
    throttle_sec: 20
    user_agent: "my-tool/1.0"
    timeout_sec: 30
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .constants import (
    CONFIG_ENV_VAR,
    DEFAULT_THROTTLE_SEC,
    DEFAULT_TIMEOUT_SEC,
    DEFAULT_UA,
    LENS_PAGINATED_BASE,
    LENS_SEARCH_BASE,
    MAX_RESULTS,
    PAGE_SIZE,
)
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LensConfig:
    """Where and how to reach the search service."""

    search_base: str = LENS_SEARCH_BASE
    paginated_base: str = LENS_PAGINATED_BASE
    page_size: int = PAGE_SIZE
    max_results: int = MAX_RESULTS
    throttle_sec: float = DEFAULT_THROTTLE_SEC
    user_agent: str = DEFAULT_UA
    timeout_sec: int = DEFAULT_TIMEOUT_SEC

    def with_overrides(self, **overrides: Any) -> "LensConfig":
        """Return a copy with the non-None ``overrides`` applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self


_KNOWN_KEYS = {f.name for f in fields(LensConfig)}


def validate_config(data: Dict[str, Any]) -> None:
    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown config keys: {', '.join(unknown)}")
    for key in ("search_base", "paginated_base"):
        if key in data:
            value = data[key]
            if not isinstance(value, str) or not value.startswith(("http://", "https://")):
                raise ConfigurationError(f"{key} must be an http(s) URL, got {value!r}")
    for key in ("page_size", "max_results", "timeout_sec"):
        if key in data:
            value = data[key]
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigurationError(f"{key} must be a positive integer, got {value!r}")
    if "throttle_sec" in data:
        value = data["throttle_sec"]
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
            raise ConfigurationError(f"throttle_sec must be a non-negative number, got {value!r}")
    if "user_agent" in data and not isinstance(data["user_agent"], str):
        raise ConfigurationError("user_agent must be a string")
    page_size = data.get("page_size", PAGE_SIZE)
    max_results = data.get("max_results", MAX_RESULTS)
    if max_results < page_size:
        raise ConfigurationError(
            f"max_results ({max_results}) must not be smaller than page_size ({page_size})"
        )


def load_config(config_path: Optional[Path] = None) -> LensConfig:
    """Load a :class:`LensConfig` from YAML.

    With no path, ``$LENSURLS_CONFIG`` is used when set; otherwise the
    built-in defaults are returned.
    """
    if config_path is None:
        env_path = os.getenv(CONFIG_ENV_VAR)
        if not env_path:
            return LensConfig()
        config_path = Path(env_path)
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config not found: {config_path}")
    with config_path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config must be a mapping: {config_path}")
    validate_config(data)
    logger.debug(f"Loaded config from {config_path}: {sorted(data)}")
    return LensConfig(**data)
