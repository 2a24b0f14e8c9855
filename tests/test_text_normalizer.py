"""Tests for text normalization service."""

import pytest

from org_relevance.services import text_normalizer


def test_normalize_entity_name_basic() -> None:
    """Test lower-casing and punctuation removal."""
    result = text_normalizer.normalize_entity_name("Sen. Jane Doe (D-TN)!")
    assert result == "sen jane doe dtn"


def test_normalize_entity_name_collapses_whitespace() -> None:
    """Test whitespace collapsing and trimming."""
    result = text_normalizer.normalize_entity_name("  Too    many\t\nspaces  ")
    assert result == "too many spaces"


def test_normalize_entity_name_keeps_digits() -> None:
    """Digits survive normalization."""
    assert text_normalizer.normalize_entity_name("TN-05 Race 2026") == "tn05 race 2026"


def test_normalize_entity_name_keeps_non_ascii_letters() -> None:
    """Accented letters are letters, not punctuation."""
    assert text_normalizer.normalize_entity_name("São Paulo") == "são paulo"


def test_normalize_entity_name_drops_underscore() -> None:
    """Underscore is not a letter or digit."""
    assert text_normalizer.normalize_entity_name("climate_change") == "climatechange"


def test_normalize_entity_name_empty() -> None:
    """Empty and punctuation-only inputs normalize to empty string."""
    assert text_normalizer.normalize_entity_name("") == ""
    assert text_normalizer.normalize_entity_name("?!...") == ""


@pytest.mark.parametrize(
    "raw",
    [
        "Senator Jane Doe",
        "  AI   Policy -- Task Force!! ",
        "Gaza: ceasefire talks, day 3",
        "",
        "J.D. Vance",
    ],
)
def test_normalize_entity_name_idempotent(raw: str) -> None:
    """Normalizing twice equals normalizing once."""
    once = text_normalizer.normalize_entity_name(raw)
    assert text_normalizer.normalize_entity_name(once) == once


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (22.5, 23),
        (2.5, 3),
        (47.9, 48),
        (48.4, 48),
        (0.0, 0),
        (3.0, 3),
    ],
)
def test_round_half_up(value: float, expected: int) -> None:
    """Half values round up, unlike round()."""
    assert text_normalizer.round_half_up(value) == expected
