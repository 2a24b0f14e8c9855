"""Tests for entity name matching."""

import pytest

from org_relevance.domain.exceptions import ConfigurationError
from org_relevance.services import entity_matcher
from org_relevance.services.entity_matcher import (
    SubstringEntityMatcher,
    TokenOverlapEntityMatcher,
    create_entity_matcher,
)


@pytest.mark.parametrize(
    ("a", "b"),
    [
        ("Jane Doe", "jane doe"),
        ("Jane Doe", "Senator Jane Doe"),
        ("Senator Jane Doe", "Jane Doe"),
        ("J.D. Vance", "JD Vance"),
        ("AI", "AI Policy Task Force"),
    ],
)
def test_entities_match_positive(a: str, b: str) -> None:
    """Equality and containment in either direction match."""
    assert entity_matcher.entities_match(a, b) is True


@pytest.mark.parametrize(
    ("a", "b"),
    [
        ("Jane Doe", "John Roe"),
        ("Jane-Doe", "Jane Doe"),
    ],
)
def test_entities_match_negative(a: str, b: str) -> None:
    """Different names do not match."""
    assert entity_matcher.entities_match(a, b) is False


@pytest.mark.parametrize(
    ("a", "b"),
    [
        ("!!!", "???"),
        ("", "Jane Doe"),
        ("Jane Doe", ""),
        ("!!!", "anything"),
        ("", ""),
    ],
)
def test_empty_normalized_names_match_everything(a: str, b: str) -> None:
    """A name that normalizes to "" is contained in every other name."""
    assert entity_matcher.entities_match(a, b) is True


def test_token_overlap_similarity_equal() -> None:
    """Identical normalized names score 1.0."""
    assert entity_matcher.token_overlap_similarity("Gaza!", "gaza") == 1.0


def test_token_overlap_similarity_containment() -> None:
    """Containment scores 0.85."""
    score = entity_matcher.token_overlap_similarity("NATO", "NATO summit in Vilnius")
    assert score == 0.85


def test_token_overlap_similarity_partial_overlap() -> None:
    """Shared tokens over the larger token set."""
    score = entity_matcher.token_overlap_similarity(
        "Gaza ceasefire talks resume", "ceasefire talks stall"
    )
    assert score == 0.5


def test_token_overlap_similarity_ignores_short_tokens() -> None:
    """Tokens under three characters are not counted."""
    score = entity_matcher.token_overlap_similarity("vote on tax", "tax on vote day")
    # {vote, tax} vs {tax, vote, day}
    assert score == pytest.approx(2 / 3)


def test_token_overlap_similarity_empty() -> None:
    """Empty input has no similarity unless both sides are empty."""
    assert entity_matcher.token_overlap_similarity("", "Gaza") == 0.0
    assert entity_matcher.token_overlap_similarity("!!!", "") == 1.0


def test_substring_matcher_delegates() -> None:
    """Default matcher follows entities_match."""
    matcher = SubstringEntityMatcher()
    assert matcher.matches("Jane Doe", "Senator Jane Doe") is True
    assert matcher.matches("ceasefire talks stall", "Gaza ceasefire talks") is False


def test_token_overlap_matcher_threshold() -> None:
    """Token overlap matcher accepts names at or above its threshold."""
    matcher = TokenOverlapEntityMatcher(min_similarity=0.5)
    assert matcher.matches("Gaza ceasefire talks resume", "ceasefire talks stall")

    strict = TokenOverlapEntityMatcher(min_similarity=0.9)
    assert not strict.matches("Gaza ceasefire talks resume", "ceasefire talks stall")


@pytest.mark.parametrize("value", [0.0, -0.1, 1.5])
def test_token_overlap_matcher_rejects_bad_threshold(value: float) -> None:
    """Thresholds outside (0, 1] are configuration errors."""
    with pytest.raises(ConfigurationError):
        TokenOverlapEntityMatcher(min_similarity=value)


def test_create_entity_matcher() -> None:
    """Factory returns the configured implementation."""
    assert isinstance(create_entity_matcher("substring"), SubstringEntityMatcher)

    matcher = create_entity_matcher("token_overlap", min_similarity=0.7)
    assert isinstance(matcher, TokenOverlapEntityMatcher)
    assert matcher.min_similarity == 0.7


def test_create_entity_matcher_unknown_kind() -> None:
    """Unknown matcher kinds are rejected."""
    with pytest.raises(ConfigurationError, match="Unknown entity matcher"):
        create_entity_matcher("embedding")
