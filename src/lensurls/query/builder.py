"""Build Lens patent search URLs from a :class:`SearchRequest`.

The query string is assembled left to right, one clause at a time, in the
order the service expects: terms, field scope, applicant, inventor, dates,
ranking, jurisdiction, families, stemming and finally the page tokens.
Nothing here touches the network.

Example::

    >>> lens_urls("synthetic biology").url
    'https://www.lens.org/lens/search?q=%22synthetic+biology%22&st=false&n=50'
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from ..config import LensConfig
from .clauses import join_terms, name_filter_clause
from .models import JURISDICTION_GROUPS, FieldScope, ResultSet, SearchRequest

logger = logging.getLogger(__name__)

# Encoded " && " joining the term block with applicant/inventor clauses
CLAUSE_CONNECTOR = "+%26%26+"


def _scope(terms: str, field: Optional[FieldScope]) -> str:
    if field is None or field is FieldScope.FULLTEXT:
        return f"%22{terms}%22"
    if field is FieldScope.TAC:
        parts = [_scope(terms, f) for f in (FieldScope.TITLE, FieldScope.ABSTRACT, FieldScope.CLAIMS)]
        return "%28" + "+%7C%7C+".join(parts) + "%29"
    return f"{field.value}%3A%28%22{terms}%22%29"


def _dates(key: str, start: Optional[int], end: Optional[int]) -> str:
    if start is None:
        return ""
    clause = f"&dates=%2B{key}%3A{start}"
    if end is not None:
        clause += f"-{end}"
    return clause


def _jurisdiction(value: Optional[str]) -> str:
    if value is None:
        return ""
    codes = JURISDICTION_GROUPS.get(value, (value,))
    return "&jo=true" + "".join(f"&j={code}" for code in codes)


def build_query(request: SearchRequest) -> str:
    """Return the encoded ``q`` value, everything before the page tokens."""
    query = _scope(join_terms(request.query, request.boolean), request.field)
    if request.applicant is not None:
        query += CLAUSE_CONNECTOR + name_filter_clause("applicant", request.applicant)
    if request.inventor is not None:
        query += CLAUSE_CONNECTOR + name_filter_clause("inventor", request.inventor)
    query += _dates("pub_date", request.publn_date_start, request.publn_date_end)
    query += _dates("filing_date", request.filing_date_start, request.filing_date_end)
    if request.rank is not None:
        query += request.rank.suffix
    query += _jurisdiction(request.jurisdiction)
    if request.families:
        query += "&f=true"
    # leaving stemming on means falling back to the service default
    if not request.stemming:
        query += "&st=false"
    return query


def build_urls(request: SearchRequest, config: Optional[LensConfig] = None) -> ResultSet:
    """Build the URL (or per-page URLs) for ``request``.

    Up to ``page_size`` results give one URL. Larger counts give one URL per
    page, ``ceil(results / page_size)`` of them. Counts above ``max_results``
    are logged and served as the ``max_results`` page set.
    """
    config = config or LensConfig()
    query = build_query(request)
    page_tokens = f"&n={config.page_size}"
    results = request.results

    if results is None or results <= config.page_size:
        return ResultSet(urls=(f"{config.search_base}{query}{page_tokens}",))

    capped = results > config.max_results
    if capped:
        logger.warning(
            f"More than {config.max_results} results requested ({results}); only "
            f"{config.max_results} can be returned. Split the query into date ranges "
            f"of {config.max_results} results or fewer and call again for each range."
        )
        results = config.max_results

    pages = math.ceil(results / config.page_size)
    logger.info(f"Returning {results} results over {pages} pages of {config.page_size}")
    urls = tuple(
        f"{config.paginated_base}{page}&q={query}{page_tokens}" for page in range(pages)
    )
    return ResultSet(urls=urls, paginated=True, capped=capped)


def lens_urls(query, config: Optional[LensConfig] = None, **options) -> ResultSet:
    """Shortcut for ``build_urls(SearchRequest.from_options(query, **options))``."""
    return build_urls(SearchRequest.from_options(query, **options), config)
