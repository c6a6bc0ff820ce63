"""Tests for name matching and ranking."""

from rolodex.application.search import MatchRank, match_contacts, rank
from rolodex.domain import Contact


def _contact(contact_id: str, first: str | None = None, last: str | None = None) -> Contact:
    return Contact(id=contact_id, first=first, last=last, created_at=1)


def test_rank_tiers() -> None:
    assert rank("Ada", "Ada") == MatchRank.CASE_SENSITIVE_EQUAL
    assert rank("Ada", "ada") == MatchRank.EQUAL
    assert rank("Lovelace", "love") == MatchRank.STARTS_WITH
    assert rank("Mary Ann", "ann") == MatchRank.WORD_STARTS_WITH
    assert rank("Lovelace", "lace") == MatchRank.CONTAINS
    assert rank("Lovelace", "lvc") == MatchRank.FUZZY
    assert rank("Lovelace", "xyz") == MatchRank.NO_MATCH
    assert rank(None, "ada") == MatchRank.NO_MATCH


def test_exact_and_prefix_ranked_above_fuzzy() -> None:
    contacts = [
        _contact("fuzzy", first="Adrian"),  # a..d..a in order
        _contact("contains", last="Canada"),
        _contact("prefix", first="Adam"),
        _contact("exact", first="Ada"),
    ]
    ordered = match_contacts(contacts, "ada")
    assert [c.id for c in ordered] == ["exact", "prefix", "contains", "fuzzy"]


def test_substring_always_included() -> None:
    contacts = [_contact("1", first="Grace", last="Hopper"), _contact("2", first="Alan")]
    assert [c.id for c in match_contacts(contacts, "opp")] == ["1"]
    assert [c.id for c in match_contacts(contacts, "RAC")] == ["1"]


def test_best_key_wins() -> None:
    contacts = [_contact("1", first="Lee", last="Smith"), _contact("2", first="Smith", last="Lee")]
    ordered = match_contacts(contacts, "lee")
    assert {c.id for c in ordered} == {"1", "2"}


def test_empty_query_returns_input() -> None:
    contacts = [_contact("1", first="Ada"), _contact("2")]
    assert match_contacts(contacts, "") == contacts
    assert match_contacts(contacts, "   ") == contacts


def test_equal_scores_keep_input_order() -> None:
    contacts = [_contact("1", first="Ada"), _contact("2", first="Ada"), _contact("3", first="Ada")]
    assert [c.id for c in match_contacts(contacts, "Ada")] == ["1", "2", "3"]


def test_contacts_without_names_are_excluded() -> None:
    contacts = [_contact("1"), _contact("2", first="Ada")]
    assert [c.id for c in match_contacts(contacts, "a")] == ["2"]
