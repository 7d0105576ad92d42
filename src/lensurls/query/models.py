"""Typed search request and result models.

A :class:`SearchRequest` is validated when it is constructed, so the builder
only ever sees consistent options. :meth:`SearchRequest.from_options` accepts
the flat keyword form (``rank_family=True``, ``applicant_boolean="OR"``, ...)
and converts it into the typed request.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Iterator, Optional, Sequence, Tuple, Union

from ..errors import ConfigurationError, UnsupportedValue

Terms = Union[str, Sequence[str]]
DateLike = Union[int, date]

JURISDICTION_GROUPS = {
    "main": ("EP", "JP", "US", "WO"),
    "ops": ("AT", "CA", "CH", "EP", "GB", "WO"),
}

_COUNTRY_CODE = re.compile(r"[A-Za-z]{2}")


class BooleanMode(str, Enum):
    AND = "AND"
    OR = "OR"

    @property
    def separator(self) -> str:
        """Encoded ``" && "`` / ``" || "`` token, closing and reopening quotes."""
        if self is BooleanMode.OR:
            return "%22+%7C%7C+%22"
        return "%22+%26%26+%22"

    @classmethod
    def parse(cls, value, option: str = "boolean") -> Optional["BooleanMode"]:
        if value is None:
            return None
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        raise UnsupportedValue(option, value, [m.value for m in cls])


class FieldScope(str, Enum):
    FULLTEXT = "fulltext"
    TITLE = "title"
    ABSTRACT = "abstract"
    CLAIMS = "claims"
    # title or abstract or claims
    TAC = "tac"

    @classmethod
    def parse(cls, value, option: str = "type") -> Optional["FieldScope"]:
        if value is None:
            return None
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnsupportedValue(option, value, [m.value for m in cls])


class RankingMode(str, Enum):
    """Sort directive. Member order is the precedence order of the flat flags."""

    CITING = "citing"
    FAMILY = "family"
    SEQUENCES = "sequences"
    LATEST_PUBLN = "latest_publn"
    EARLIEST_PUBLN = "earliest_publn"
    LATEST_FILING = "latest_filing"
    EARLIEST_FILING = "earliest_filing"

    @property
    def suffix(self) -> str:
        return _RANK_SUFFIXES[self]

    @classmethod
    def parse(cls, value, option: str = "rank") -> Optional["RankingMode"]:
        if value is None:
            return None
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnsupportedValue(option, value, [m.value for m in cls])


# "-" sorts descending, "%2B" (an encoded "+") ascending
_RANK_SUFFIXES = {
    RankingMode.CITING: "&s=citing_pub_key_count&d=-",
    RankingMode.FAMILY: "&s=simple_family_size&d=-",
    RankingMode.SEQUENCES: "&s=sequence_count&d=-",
    RankingMode.LATEST_PUBLN: "&s=pub_date&d=-",
    RankingMode.EARLIEST_PUBLN: "&s=pub_date&d=%2B",
    RankingMode.LATEST_FILING: "&s=filing_date&d=-",
    RankingMode.EARLIEST_FILING: "&s=filing_date&d=%2B",
}


def as_terms(values: Terms, option: str) -> Tuple[str, ...]:
    if isinstance(values, str):
        values = (values,)
    items = tuple(values)
    if not items:
        raise ConfigurationError(f"{option} must not be empty")
    for item in items:
        if not isinstance(item, str) or not item.strip():
            raise ConfigurationError(f"{option} contains an empty or non-string entry: {item!r}")
    return items


def _coerce_date(value: Optional[DateLike], option: str) -> Optional[int]:
    """Return ``value`` as a YYYYMMDD integer."""
    if value is None:
        return None
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        return int(value.strftime("%Y%m%d"))
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{option} must be a YYYYMMDD integer or a date, got {value!r}")
    if not 10_000_000 <= value <= 99_999_999:
        raise ConfigurationError(f"{option} must have exactly 8 digits (YYYYMMDD), got {value}")
    try:
        datetime.strptime(f"{value:08d}", "%Y%m%d")
    except ValueError:
        raise ConfigurationError(f"{option} is not a valid YYYYMMDD date: {value}") from None
    return value


def _check_range(start: Optional[int], end: Optional[int], label: str) -> None:
    if end is not None and start is None:
        raise ConfigurationError(f"{label}_date_end given without {label}_date_start")
    if start is not None and end is not None and end < start:
        raise ConfigurationError(f"{label}_date_end ({end}) is before {label}_date_start ({start})")


def normalize_jurisdiction(value: Optional[str]) -> Optional[str]:
    """Return a group name ("main"/"ops") or an upper-case two-letter code."""
    if value is None:
        return None
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.lower() in JURISDICTION_GROUPS:
            return stripped.lower()
        if _COUNTRY_CODE.fullmatch(stripped):
            return stripped.upper()
    raise UnsupportedValue(
        "jurisdiction", value, ["<two-letter code>", *JURISDICTION_GROUPS]
    )


@dataclass(frozen=True)
class NameFilter:
    """Applicant or inventor names combined with one boolean mode."""

    names: Tuple[str, ...]
    boolean: Optional[BooleanMode] = None

    @classmethod
    def of(cls, names: Terms, boolean=None, option: str = "applicant") -> "NameFilter":
        return cls(
            names=as_terms(names, option),
            boolean=BooleanMode.parse(boolean, f"{option}_boolean"),
        )


def _coerce_names(value, option: str) -> Optional[NameFilter]:
    if value is None:
        return None
    if isinstance(value, (str, list, tuple)):
        value = NameFilter.of(value, None, option)
    elif not isinstance(value, NameFilter):
        raise ConfigurationError(
            f"{option} must be a name, a list of names or a NameFilter, got {type(value).__name__}"
        )
    if len(value.names) > 1 and value.boolean is None:
        raise ConfigurationError(
            f"{len(value.names)} {option} values given without {option}_boolean (AND/OR)"
        )
    return value


@dataclass(frozen=True)
class SearchRequest:
    query: Tuple[str, ...]
    boolean: Optional[BooleanMode] = None
    field: Optional[FieldScope] = None
    applicant: Optional[NameFilter] = None
    inventor: Optional[NameFilter] = None
    publn_date_start: Optional[int] = None
    publn_date_end: Optional[int] = None
    filing_date_start: Optional[int] = None
    filing_date_end: Optional[int] = None
    rank: Optional[RankingMode] = None
    jurisdiction: Optional[str] = None
    families: bool = False
    stemming: bool = False
    results: Optional[int] = None

    def __post_init__(self):
        # frozen: normalized values go through object.__setattr__
        set_ = object.__setattr__
        set_(self, "query", as_terms(self.query, "query"))
        set_(self, "boolean", BooleanMode.parse(self.boolean))
        set_(self, "field", FieldScope.parse(self.field))
        set_(self, "rank", RankingMode.parse(self.rank))
        set_(self, "jurisdiction", normalize_jurisdiction(self.jurisdiction))
        set_(self, "applicant", _coerce_names(self.applicant, "applicant"))
        set_(self, "inventor", _coerce_names(self.inventor, "inventor"))
        for name in ("publn_date_start", "publn_date_end", "filing_date_start", "filing_date_end"):
            set_(self, name, _coerce_date(getattr(self, name), name))

        if len(self.query) > 1 and self.boolean is None:
            raise ConfigurationError(
                f"{len(self.query)} query terms given without a boolean mode (AND/OR)"
            )
        _check_range(self.publn_date_start, self.publn_date_end, "publn")
        _check_range(self.filing_date_start, self.filing_date_end, "filing")
        if self.results is not None:
            if isinstance(self.results, bool) or not isinstance(self.results, int) or self.results < 1:
                raise ConfigurationError(f"results must be a positive integer, got {self.results!r}")

    @classmethod
    def from_options(
        cls,
        query: Terms,
        boolean: Optional[str] = None,
        type: Optional[str] = None,
        applicant: Optional[Terms] = None,
        applicant_boolean: Optional[str] = None,
        inventor: Optional[Terms] = None,
        inventor_boolean: Optional[str] = None,
        publn_date_start: Optional[DateLike] = None,
        publn_date_end: Optional[DateLike] = None,
        filing_date_start: Optional[DateLike] = None,
        filing_date_end: Optional[DateLike] = None,
        rank_citing: bool = False,
        rank_family: bool = False,
        rank_sequences: bool = False,
        rank_latest_publn: bool = False,
        rank_earliest_publn: bool = False,
        rank_latest_filing: bool = False,
        rank_earliest_filing: bool = False,
        jurisdiction: Optional[str] = None,
        families: bool = False,
        results: Optional[int] = None,
        stemming: bool = False,
    ) -> "SearchRequest":
        """Build a request from the flat keyword options.

        At most one ``rank_*`` flag may be true.
        """
        flags = (
            rank_citing,
            rank_family,
            rank_sequences,
            rank_latest_publn,
            rank_earliest_publn,
            rank_latest_filing,
            rank_earliest_filing,
        )
        selected = [mode for mode, flag in zip(RankingMode, flags) if flag]
        if len(selected) > 1:
            names = ", ".join(f"rank_{m.value}" for m in selected)
            raise ConfigurationError(f"Only one ranking mode may be used per query, got: {names}")

        applicant_filter = None
        if applicant is not None:
            applicant_filter = NameFilter.of(applicant, applicant_boolean, "applicant")
        inventor_filter = None
        if inventor is not None:
            inventor_filter = NameFilter.of(inventor, inventor_boolean, "inventor")

        return cls(
            query=query,
            boolean=boolean,
            field=type,
            applicant=applicant_filter,
            inventor=inventor_filter,
            publn_date_start=publn_date_start,
            publn_date_end=publn_date_end,
            filing_date_start=filing_date_start,
            filing_date_end=filing_date_end,
            rank=selected[0] if selected else None,
            jurisdiction=jurisdiction,
            families=bool(families),
            stemming=bool(stemming),
            results=results,
        )


@dataclass(frozen=True)
class ResultSet:
    """URLs for one search: a single page, or pages 0..n-1 in order."""

    urls: Tuple[str, ...]
    paginated: bool = False
    # more results were requested than the service can page through
    capped: bool = False

    @property
    def url(self) -> str:
        if len(self.urls) != 1:
            raise ValueError(f"ResultSet holds {len(self.urls)} page URLs, not a single URL")
        return self.urls[0]

    def __iter__(self) -> Iterator[str]:
        return iter(self.urls)

    def __len__(self) -> int:
        return len(self.urls)

    def __getitem__(self, index: int) -> str:
        return self.urls[index]
