import itertools

import pytest

from domain.common.exceptions import DomainValidationException
from domain.order import Catalog, MatchResult, OrderResponse, ResponseAssembler
from shared.codes import BusinessCode


def test_match_returns_containing_entries_in_catalog_order(catalog):
    result = catalog.match("apple")
    assert result == MatchResult(found=True, matches=("apple", "red apple", "green apple"))


def test_match_is_substring_contains_not_reverse(catalog):
    # the query need not equal an entry, and an entry inside the query does not count
    assert catalog.match("an").matches == ("banana", "orange", "mango")
    assert catalog.match("pineapple").found is False


def test_match_is_case_sensitive(catalog):
    assert catalog.match("Apple") == MatchResult(found=False, matches=())


def test_empty_query_matches_whole_catalog(catalog):
    result = catalog.match("")
    assert result.found is True
    assert result.matches == tuple(catalog.items)


def test_no_match(catalog):
    assert catalog.match("zzz") == MatchResult(found=False, matches=())


@pytest.mark.parametrize("query", ["a", "e", "apple", "ng", "r", "kiwi", "x", " "])
def test_membership_matches_substring_rule(catalog, query):
    matches = catalog.match(query).matches
    for entry in catalog:
        assert (entry in matches) == (query in entry)


def test_repeated_match_is_identical(catalog):
    assert catalog.match("an") == catalog.match("an")


def test_catalog_is_snapshot_of_input():
    source = ["a", "b"]
    catalog = Catalog(source)
    source.append("c")
    assert catalog.items == ("a", "b")
    assert len(catalog) == 2


def test_catalog_rejects_non_string_entries():
    with pytest.raises(DomainValidationException) as ei:
        Catalog(["apple", 3])
    assert ei.value.code == BusinessCode.PARAM_VALIDATION_ERROR
    assert ei.value.details == {"index": 1, "type": "int"}


def test_empty_catalog_matches_nothing():
    assert Catalog([]).match("") == MatchResult(found=False, matches=())


def test_assemble_uses_clock_per_call():
    ticks = itertools.count(1700000000)
    assembler = ResponseAssembler(clock=lambda: float(next(ticks)) + 0.75)

    first = assembler.assemble("apple")
    second = assembler.assemble("red apple")

    assert first == OrderResponse(item_name="apple", time_stamp="1700000000")
    assert second == OrderResponse(item_name="red apple", time_stamp="1700000001")


def test_default_clock_produces_decimal_seconds():
    stamp = ResponseAssembler().assemble("kiwi").time_stamp
    assert stamp.isdigit()
