"""Applicant and inventor sub-clauses.

``applicant_clause(["Google Inc", "Apple"], "OR")`` gives
``applicant%3A%28%22Google+Inc%22+%7C%7C+%22Apple%22%29``, i.e.
``applicant:("Google+Inc" || "Apple")`` once decoded.
"""

from __future__ import annotations

from typing import Optional
from urllib.parse import quote_plus

from ..errors import ConfigurationError
from .models import BooleanMode, NameFilter, Terms, as_terms


def encode_term(term: str) -> str:
    """Spaces become ``+``; reserved characters are percent-encoded.

    The term is otherwise kept as given, surrounding spaces included.
    """
    return quote_plus(term)


def join_terms(terms, boolean: Optional[BooleanMode], option: str = "query") -> str:
    """Encode ``terms`` and join them with the boolean separator.

    The result sits between an opening and a closing encoded quote.
    """
    encoded = [encode_term(t) for t in terms]
    if len(encoded) > 1 and boolean is None:
        raise ConfigurationError(
            f"{len(encoded)} {option} values given without {option}_boolean (AND/OR)"
        )
    if len(encoded) == 1:
        return encoded[0]
    return boolean.separator.join(encoded)


def field_clause(field_name: str, names: Terms, boolean=None) -> str:
    """``<field_name>:("A" OP "B" ...)``, percent-encoded."""
    mode = BooleanMode.parse(boolean, f"{field_name}_boolean")
    joined = join_terms(as_terms(names, field_name), mode, field_name)
    return f"{field_name}%3A%28%22{joined}%22%29"


def applicant_clause(applicant: Terms, applicant_boolean=None) -> str:
    return field_clause("applicant", applicant, applicant_boolean)


def inventor_clause(inventor: Terms, inventor_boolean=None) -> str:
    return field_clause("inventor", inventor, inventor_boolean)


def name_filter_clause(field_name: str, name_filter: NameFilter) -> str:
    return field_clause(field_name, name_filter.names, name_filter.boolean)
