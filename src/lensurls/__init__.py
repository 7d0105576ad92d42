"""lensurls: build (and optionally fetch) Lens patent search URLs."""

from .config import LensConfig, load_config
from .errors import ConfigurationError, LensQueryError, UnsupportedValue
from .query import (
    BooleanMode,
    FieldScope,
    RankingMode,
    ResultSet,
    SearchRequest,
    build_urls,
    lens_urls,
)

__all__ = [
    "BooleanMode",
    "ConfigurationError",
    "FieldScope",
    "LensConfig",
    "LensQueryError",
    "RankingMode",
    "ResultSet",
    "SearchRequest",
    "UnsupportedValue",
    "build_urls",
    "lens_urls",
    "load_config",
]
