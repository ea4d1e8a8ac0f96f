from __future__ import annotations

import pytest

from scandalscope.services.query_expander import (
    CONTROVERSY_TERMS,
    EXCLUDED_SITES,
    expand_queries,
    site_exclusion_clause,
)


@pytest.mark.parametrize("name", ["Test Person", "山田太郎", "A"])
def test_expand_queries_returns_fixed_length_distinct_queries_with_name(name):
    queries = expand_queries(name)

    assert len(queries) == len(CONTROVERSY_TERMS) == 19
    assert len(set(queries)) == len(queries)
    assert all(q.strip() for q in queries)
    assert all(name in q for q in queries)


def test_expand_queries_keeps_vocabulary_order():
    queries = expand_queries("Test Person")

    assert queries[0].startswith("Test Person 批判 ")
    assert queries[1].startswith("Test Person 炎上 ")
    assert queries[-1].startswith("Test Person NG ")


def test_every_query_carries_site_exclusions():
    clause = site_exclusion_clause()
    for query in expand_queries("Test Person"):
        assert query.endswith(clause)
        for site in EXCLUDED_SITES:
            assert f"-site:{site}" in query


def test_expand_queries_is_deterministic():
    assert expand_queries("Test Person") == expand_queries("Test Person")


def test_expand_queries_normalizes_whitespace_in_name():
    queries = expand_queries("  Test   Person ")
    assert queries[0].startswith("Test Person 批判")


def test_expand_queries_accepts_custom_vocabulary_without_exclusions():
    queries = expand_queries("Test Person", terms=["criticism", "backlash"], excluded_sites=[])
    assert queries == ["Test Person criticism", "Test Person backlash"]
