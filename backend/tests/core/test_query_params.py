"""Query Parameter Parsing — filters, search and sort from raw request maps.

Tests:
    - Reserved keys never become filters
    - Allow-list restricts filter keys; empty allow-list accepts everything
    - Comma-separated values become MembershipPredicate (trimmed, deduped)
    - Sort parsing: direction prefix, default, duplicates
"""

from contentdesk.core.query_params import (
    MembershipPredicate, SearchClause, SortDirection, SortField,
    default_sort, parse_filters, parse_search, parse_sort,
)


# -- parse_filters -------------------------------------------------------------

def test_reserved_keys_are_dropped():
    raw = {"page": "2", "limit": "5", "sort": "-title", "fields": "a", "search": "x", "status": "draft"}
    assert parse_filters(raw) == {"status": "draft"}


def test_allow_list_restricts_keys():
    raw = {"status": "draft", "secret": "1"}
    assert parse_filters(raw, ["status"]) == {"status": "draft"}


def test_empty_allow_list_accepts_all_non_reserved():
    raw = {"status": "draft", "type": "book"}
    assert parse_filters(raw, []) == raw


def test_comma_value_becomes_membership():
    filters = parse_filters({"type": "book, guide,,book"})
    assert filters == {"type": MembershipPredicate(("book", "guide"))}


def test_scalar_values_pass_through_untyped():
    filters = parse_filters({"year": "2024", "isFree": "true"})
    assert filters == {"year": "2024", "isFree": "true"}


def test_none_query_yields_empty_spec():
    assert parse_filters(None) == {}


# -- parse_search --------------------------------------------------------------

def test_search_term_kept_verbatim():
    assert parse_search("  climate change ") == SearchClause("  climate change ")


def test_blank_or_missing_search_is_none():
    assert parse_search("") is None
    assert parse_search("   ") is None
    assert parse_search(None) is None
    assert parse_search(42) is None


# -- parse_sort ----------------------------------------------------------------

def test_default_sort_is_newest_first():
    assert parse_sort(None) == default_sort()
    assert parse_sort("") == [SortField("createdAt", SortDirection.DESC)]


def test_direction_prefix():
    assert parse_sort("-createdAt,title") == [
        SortField("createdAt", SortDirection.DESC),
        SortField("title", SortDirection.ASC),
    ]


def test_empty_tokens_skipped():
    assert parse_sort(",title,,-") == [SortField("title", SortDirection.ASC)]


def test_only_empty_tokens_falls_back_to_default():
    assert parse_sort(" , - ,") == default_sort()


def test_duplicate_field_keeps_first_position_last_direction():
    assert parse_sort("title,-year,-title") == [
        SortField("title", SortDirection.DESC),
        SortField("year", SortDirection.DESC),
    ]


def test_sort_never_empty():
    for raw in (None, "", ",", "-", 7):
        assert len(parse_sort(raw)) >= 1
