"""
tests/test_filters.py
=====================

Unit tests for entityview.filters: setters and cache‑key normalisation.
"""

import itertools

from entityview.filters import COUNTRY_OPTIONS, STATUS_OPTIONS, FilterState, QueryKey


def test_setters_store_raw_values():
    fs = FilterState()
    fs.set_search_term("  Acme ")
    fs.set_country_filter("ae")
    fs.set_status_filter("whatever")
    assert (fs.search_term, fs.country_filter, fs.status_filter) == ("  Acme ", "ae", "whatever")


def test_empty_fields_are_omitted_from_params():
    fs = FilterState(country_filter="AE")
    assert fs.params() == {"country": "AE"}


def test_empty_variants_share_one_key():
    assert FilterState("", "AE", "").query_key() == FilterState(country_filter="AE").query_key()
    assert QueryKey.from_params(search="", country="AE", status="") == QueryKey.from_params(country="AE")


def test_key_is_order_independent():
    assert QueryKey.from_params(status="ACTIVE", country="AE") == QueryKey.from_params(country="AE", status="ACTIVE")


def test_distinct_triples_give_distinct_keys():
    values = ["", "AE", "ACTIVE"]
    triples = set(itertools.product(values, repeat=3))
    keys = {FilterState(*t).query_key() for t in triples}
    assert len(keys) == len(triples)


def test_same_value_in_different_fields_differs():
    assert FilterState(search_term="AE").query_key() != FilterState(country_filter="AE").query_key()


def test_setter_changes_key_immediately():
    fs = FilterState()
    before = fs.query_key()
    fs.set_status_filter("PENDING")
    assert fs.query_key() != before
    fs.set_status_filter("")
    assert fs.query_key() == before


def test_key_string_is_deterministic():
    assert str(QueryKey()) == "entities"
    assert str(FilterState("acme co", "AE", "").query_key()) == "entities?country=AE&search=acme+co"


def test_option_lists_start_with_no_constraint():
    assert COUNTRY_OPTIONS[0] == ("", "All Countries")
    assert STATUS_OPTIONS[0] == ("", "All Statuses")
