"""Fuzzy matching of entity and topic names.

The default matcher treats two names as the same when their normalized forms
are equal or one contains the other. Short names over-match ("AI" matches
"AI Policy Task Force"); that is the accepted trade-off of the heuristic.
"""

from typing import Final

from org_relevance.domain.exceptions import ConfigurationError
from org_relevance.domain.protocols import EntityMatcher
from org_relevance.domain.scoring_constants import (
    CONTAINMENT_SIMILARITY,
    DEFAULT_TOKEN_OVERLAP_MIN_SIMILARITY,
    MIN_OVERLAP_TOKEN_LENGTH,
)
from org_relevance.services.text_normalizer import normalize_entity_name

SUBSTRING_MATCHER: Final[str] = "substring"
TOKEN_OVERLAP_MATCHER: Final[str] = "token_overlap"


def normalized_match(norm_a: str, norm_b: str) -> bool:
    """Equality or bidirectional containment of already-normalized names.

    An empty name is contained in every name, so it matches anything. Short
    names over-match the same way.
    """
    return norm_a == norm_b or norm_a in norm_b or norm_b in norm_a


def entities_match(a: str, b: str) -> bool:
    """Check if two entity names match (fuzzy).

    Args:
        a: First name
        b: Second name

    Returns:
        True if normalized names are equal or one contains the other

    Example:
        >>> entities_match("Jane Doe", "Senator Jane Doe")
        True
        >>> entities_match("Jane Doe", "John Roe")
        False
    """
    return normalized_match(normalize_entity_name(a), normalize_entity_name(b))


def token_overlap_similarity(a: str, b: str) -> float:
    """Similarity in [0, 1] based on containment and shared tokens.

    Equal names score 1.0, containment scores 0.85, otherwise the share of
    tokens (3+ characters) the names have in common.

    Example:
        >>> token_overlap_similarity("Gaza ceasefire talks", "ceasefire talks stall")
        0.6666666666666666
    """
    norm_a = normalize_entity_name(a)
    norm_b = normalize_entity_name(b)
    if norm_a == norm_b:
        return 1.0
    if not norm_a or not norm_b:
        return 0.0
    if norm_a in norm_b or norm_b in norm_a:
        return CONTAINMENT_SIMILARITY

    tokens_a = {t for t in norm_a.split(" ") if len(t) >= MIN_OVERLAP_TOKEN_LENGTH}
    tokens_b = {t for t in norm_b.split(" ") if len(t) >= MIN_OVERLAP_TOKEN_LENGTH}
    if not tokens_a or not tokens_b:
        return 0.0

    overlap = len(tokens_a & tokens_b)
    return overlap / max(len(tokens_a), len(tokens_b))


class SubstringEntityMatcher:
    """Default matcher: normalize, then equality or containment."""

    def matches(self, a: str, b: str) -> bool:
        return entities_match(a, b)


class TokenOverlapEntityMatcher:
    """Matcher that also accepts partially overlapping multi-word names."""

    def __init__(
        self, min_similarity: float = DEFAULT_TOKEN_OVERLAP_MIN_SIMILARITY
    ) -> None:
        """Initialize token overlap matcher.

        Args:
            min_similarity: Minimum similarity (0.0-1.0) to count as a match

        Raises:
            ConfigurationError: If min_similarity is outside (0, 1]
        """
        if not 0.0 < min_similarity <= 1.0:
            raise ConfigurationError(
                f"min_similarity must be in (0, 1], got {min_similarity}"
            )
        self.min_similarity = min_similarity

    def matches(self, a: str, b: str) -> bool:
        return token_overlap_similarity(a, b) >= self.min_similarity


def create_entity_matcher(
    kind: str = SUBSTRING_MATCHER,
    min_similarity: float = DEFAULT_TOKEN_OVERLAP_MIN_SIMILARITY,
) -> EntityMatcher:
    """Create the matcher selected by configuration.

    Args:
        kind: "substring" or "token_overlap"
        min_similarity: Threshold for the token overlap matcher

    Returns:
        EntityMatcher implementation

    Raises:
        ConfigurationError: If kind is unknown
    """
    if kind == SUBSTRING_MATCHER:
        return SubstringEntityMatcher()
    if kind == TOKEN_OVERLAP_MATCHER:
        return TokenOverlapEntityMatcher(min_similarity=min_similarity)
    raise ConfigurationError(f"Unknown entity matcher: {kind}")
