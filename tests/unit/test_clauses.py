"""Tests for applicant/inventor clause builders."""

import pytest

from lensurls.errors import ConfigurationError, UnsupportedValue
from lensurls.query.clauses import (
    applicant_clause,
    encode_term,
    inventor_clause,
    join_terms,
)
from lensurls.query.models import BooleanMode


def test_encode_term_replaces_spaces_with_plus():
    assert encode_term("synthetic biology") == "synthetic+biology"


def test_encode_term_escapes_reserved_characters():
    assert encode_term("Procter & Gamble") == "Procter+%26+Gamble"
    assert encode_term('say "hi"') == "say+%22hi%22"


def test_join_single_term_needs_no_boolean():
    assert join_terms(["drones"], None) == "drones"


def test_join_terms_or_and():
    assert join_terms(["a", "b"], BooleanMode.OR) == "a%22+%7C%7C+%22b"
    assert join_terms(["a", "b", "c"], BooleanMode.AND) == "a%22+%26%26+%22b%22+%26%26+%22c"


def test_join_several_terms_without_boolean_raises():
    with pytest.raises(ConfigurationError):
        join_terms(["a", "b"], None)


def test_single_applicant():
    assert applicant_clause("Google Inc") == "applicant%3A%28%22Google+Inc%22%29"


def test_applicants_joined_with_or():
    clause = applicant_clause(["Google Inc", "Apple"], "OR")
    assert clause == "applicant%3A%28%22Google+Inc%22+%7C%7C+%22Apple%22%29"


def test_inventors_joined_with_and():
    clause = inventor_clause(["Jane Doe", "John Roe"], "AND")
    assert clause == "inventor%3A%28%22Jane+Doe%22+%26%26+%22John+Roe%22%29"


def test_several_names_without_boolean_raises():
    with pytest.raises(ConfigurationError, match="applicant_boolean"):
        applicant_clause(["Google", "Apple"])


def test_empty_name_list_raises():
    with pytest.raises(ConfigurationError):
        inventor_clause([])


def test_unknown_boolean_token_raises():
    with pytest.raises(UnsupportedValue):
        applicant_clause(["Google", "Apple"], "XOR")


def test_boolean_is_case_insensitive():
    assert applicant_clause(["A", "B"], "or") == applicant_clause(["A", "B"], "OR")


def test_encode_term_keeps_surrounding_spaces():
    assert encode_term(" drones ") == "+drones+"
