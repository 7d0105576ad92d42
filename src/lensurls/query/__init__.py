from .builder import build_query, build_urls, lens_urls
from .clauses import applicant_clause, inventor_clause
from .models import (
    BooleanMode,
    FieldScope,
    NameFilter,
    RankingMode,
    ResultSet,
    SearchRequest,
)

__all__ = [
    "BooleanMode",
    "FieldScope",
    "NameFilter",
    "RankingMode",
    "ResultSet",
    "SearchRequest",
    "applicant_clause",
    "build_query",
    "build_urls",
    "inventor_clause",
    "lens_urls",
]
