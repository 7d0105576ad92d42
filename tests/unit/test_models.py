"""Tests for SearchRequest validation and the flat option form."""

from datetime import date

import pytest

from lensurls.errors import ConfigurationError, UnsupportedValue
from lensurls.query.models import (
    BooleanMode,
    FieldScope,
    NameFilter,
    RankingMode,
    ResultSet,
    SearchRequest,
)


def test_single_term_becomes_tuple():
    req = SearchRequest(query="synthetic biology")
    assert req.query == ("synthetic biology",)
    assert req.boolean is None
    assert req.stemming is False
    assert req.families is False


def test_strings_are_parsed_into_enums():
    req = SearchRequest(query=["a", "b"], boolean="or", field="Title", rank="family")
    assert req.boolean is BooleanMode.OR
    assert req.field is FieldScope.TITLE
    assert req.rank is RankingMode.FAMILY


def test_several_terms_need_boolean():
    with pytest.raises(ConfigurationError):
        SearchRequest(query=["a", "b"])


def test_empty_query_raises():
    with pytest.raises(ConfigurationError):
        SearchRequest(query=[])
    with pytest.raises(ConfigurationError):
        SearchRequest(query="   ")


@pytest.mark.parametrize(
    "option, value",
    [("boolean", "NOT"), ("field", "description"), ("rank", "popularity")],
)
def test_unrecognized_enum_values_raise(option, value):
    with pytest.raises(UnsupportedValue) as exc:
        SearchRequest(query="x", **{option: value})
    assert exc.value.value == value


def test_jurisdiction_normalized():
    assert SearchRequest(query="x", jurisdiction="us").jurisdiction == "US"
    assert SearchRequest(query="x", jurisdiction="MAIN").jurisdiction == "main"
    assert SearchRequest(query="x", jurisdiction="ops").jurisdiction == "ops"


@pytest.mark.parametrize("value", ["USA", "europe", "1A", ""])
def test_unknown_jurisdiction_raises(value):
    with pytest.raises(UnsupportedValue):
        SearchRequest(query="x", jurisdiction=value)


def test_date_end_without_start_raises():
    with pytest.raises(ConfigurationError, match="publn_date_start"):
        SearchRequest(query="x", publn_date_end=20201231)
    with pytest.raises(ConfigurationError, match="filing_date_start"):
        SearchRequest(query="x", filing_date_end=20201231)


def test_date_end_before_start_raises():
    with pytest.raises(ConfigurationError):
        SearchRequest(query="x", publn_date_start=20200101, publn_date_end=20190101)


@pytest.mark.parametrize("value", [2020, 201231, 2020111, 20201340, 202001011, "20200101", True])
def test_malformed_dates_raise(value):
    with pytest.raises(ConfigurationError):
        SearchRequest(query="x", publn_date_start=value)


def test_date_objects_are_converted():
    req = SearchRequest(query="x", filing_date_start=date(2015, 3, 9))
    assert req.filing_date_start == 20150309


@pytest.mark.parametrize("value", [0, -5, True, 12.5])
def test_invalid_results_raise(value):
    with pytest.raises(ConfigurationError):
        SearchRequest(query="x", results=value)


def test_from_options_selects_single_ranking():
    req = SearchRequest.from_options("x", rank_latest_filing=True)
    assert req.rank is RankingMode.LATEST_FILING


def test_from_options_rejects_several_rankings():
    with pytest.raises(ConfigurationError) as exc:
        SearchRequest.from_options("x", rank_family=True, rank_citing=True)
    # reported in precedence order
    assert "rank_citing, rank_family" in str(exc.value)


def test_from_options_builds_name_filters():
    req = SearchRequest.from_options(
        "x", applicant=["Google", "Apple"], applicant_boolean="OR", inventor="Jane Doe"
    )
    assert req.applicant == NameFilter(names=("Google", "Apple"), boolean=BooleanMode.OR)
    assert req.inventor == NameFilter(names=("Jane Doe",))


def test_from_options_maps_type_to_field():
    assert SearchRequest.from_options("x", type="tac").field is FieldScope.TAC


def test_requests_are_immutable_and_comparable():
    a = SearchRequest.from_options("x", results=120)
    b = SearchRequest.from_options("x", results=120)
    assert a == b
    with pytest.raises(AttributeError):
        a.results = 10


def test_ranking_suffixes():
    assert RankingMode.CITING.suffix == "&s=citing_pub_key_count&d=-"
    assert RankingMode.EARLIEST_PUBLN.suffix == "&s=pub_date&d=%2B"


def test_result_set_single_url():
    rs = ResultSet(urls=("u",))
    assert rs.url == "u"
    assert list(rs) == ["u"]


def test_result_set_url_needs_single_page():
    rs = ResultSet(urls=("u0", "u1"), paginated=True)
    assert len(rs) == 2
    assert rs[1] == "u1"
    with pytest.raises(ValueError):
        rs.url


@pytest.mark.parametrize("value", ["Google", ["Google"], ("Google",)])
def test_plain_applicant_names_become_name_filters(value):
    req = SearchRequest(query="x", applicant=value)
    assert req.applicant == NameFilter(names=("Google",))


def test_plain_inventor_list_needs_boolean():
    with pytest.raises(ConfigurationError, match="inventor_boolean"):
        SearchRequest(query="x", inventor=["Jane Doe", "John Roe"])
    with pytest.raises(ConfigurationError, match="inventor_boolean"):
        SearchRequest(query="x", inventor=NameFilter(names=("Jane Doe", "John Roe")))


@pytest.mark.parametrize("value", [42, {"name": "Google"}, object()])
def test_other_applicant_types_raise(value):
    with pytest.raises(ConfigurationError):
        SearchRequest(query="x", applicant=value)
