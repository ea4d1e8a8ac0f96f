"""Expand a subject name into narrow controversy search queries.

Many narrow queries surface low-magnitude incidents that a single broad
query misses. Redundant hits across queries are expected.
"""
from __future__ import annotations

# Formal controversy vocabulary followed by informal negative slang.
CONTROVERSY_TERMS: tuple[str, ...] = (
    "批判",
    "炎上",
    "謝罪",
    "問題",
    "物議",
    "波紋",
    "非難",
    "議論",
    "騒動",
    "疑問の声",
    "草",
    "エグい",
    "ダサい",
    "やばい",
    "は?",
    "引く",
    "それは違う",
    "なんで",
    "NG",
)

EXCLUDED_SITES: tuple[str, ...] = (
    "instagram.com",
    "youtube.com",
    "wikipedia.org",
    "x.com",
    "mobile.twitter.com",
)


def site_exclusion_clause(sites: tuple[str, ...] | list[str] = EXCLUDED_SITES) -> str:
    return " ".join(f"-site:{site}" for site in sites)


def expand_queries(
    subject_name: str,
    *,
    terms: tuple[str, ...] | list[str] = CONTROVERSY_TERMS,
    excluded_sites: tuple[str, ...] | list[str] = EXCLUDED_SITES,
) -> list[str]:
    """Return one search query per vocabulary term, in vocabulary order."""
    name = " ".join(subject_name.split())
    exclusion = site_exclusion_clause(excluded_sites)
    queries: list[str] = []
    for term in terms:
        query = f"{name} {term}"
        if exclusion:
            query = f"{query} {exclusion}"
        queries.append(query)
    return queries
