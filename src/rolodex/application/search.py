"""Rank contacts against a search query on their name fields.

Tiers from best to worst: exact (case-sensitive), exact, prefix, word prefix,
substring, in-order subsequence ("fuzzy"). Inside the fuzzy tier the
SequenceMatcher ratio orders candidates so near-misses (typos) come first.
"""

from collections.abc import Iterable, Sequence
from difflib import SequenceMatcher
from enum import IntEnum

from rolodex.domain import Contact

NAME_KEYS = ("first", "last")


class MatchRank(IntEnum):
    NO_MATCH = 0
    FUZZY = 1
    CONTAINS = 2
    WORD_STARTS_WITH = 3
    STARTS_WITH = 4
    EQUAL = 5
    CASE_SENSITIVE_EQUAL = 6


def _is_subsequence(needle: str, haystack: str) -> bool:
    it = iter(haystack)
    return all(ch in it for ch in needle)


def rank(value: str | None, query: str) -> MatchRank:
    """Return how well value matches query."""
    if not value or not query:
        return MatchRank.NO_MATCH
    if value == query:
        return MatchRank.CASE_SENSITIVE_EQUAL
    v = value.lower()
    q = query.lower()
    if v == q:
        return MatchRank.EQUAL
    if v.startswith(q):
        return MatchRank.STARTS_WITH
    if f" {q}" in v:
        return MatchRank.WORD_STARTS_WITH
    if q in v:
        return MatchRank.CONTAINS
    if _is_subsequence(q, v):
        return MatchRank.FUZZY
    return MatchRank.NO_MATCH


def score(contact: Contact, query: str, keys: Sequence[str] = NAME_KEYS) -> tuple[MatchRank, float]:
    """Best (rank, similarity) of query across the contact's keys."""
    best = (MatchRank.NO_MATCH, 0.0)
    for key in keys:
        value = getattr(contact, key, None)
        if not isinstance(value, str):
            continue
        r = rank(value, query)
        if r == MatchRank.NO_MATCH:
            continue
        ratio = SequenceMatcher(None, query.lower(), value.lower()).ratio()
        best = max(best, (r, ratio))
    return best


def match_contacts(
    contacts: Iterable[Contact], query: str, keys: Sequence[str] = NAME_KEYS
) -> list[Contact]:
    """Return contacts matching query on keys, best match first.

    Equal scores keep their input order.
    """
    query = (query or "").strip()
    if not query:
        return list(contacts)
    scored = []
    for contact in contacts:
        r, ratio = score(contact, query, keys)
        if r != MatchRank.NO_MATCH:
            scored.append((r, ratio, contact))
    scored.sort(key=lambda item: (item[0], item[1]), reverse=True)
    return [contact for _, _, contact in scored]
