"""Relevance scoring engine for organization-specific prioritization.

Calculates a 0-100 score for one candidate and one organization:
- Deny list (hard block, short-circuits everything else)
- Interest topic match: up to 60 points from the best matching weight
- Profile focus areas / key issues: up to 40 points, only without a topic match
- Allow list: +20
- Geography: +10
- Velocity: up to +10

Every step that contributes appends a human-readable reason.
"""

import math
from collections.abc import Sequence

from org_relevance.config.logging_config import get_logger
from org_relevance.domain.models import (
    InterestEntityRule,
    InterestTopic,
    OrganizationProfile,
    PriorityBucket,
    RelevanceCandidate,
    RelevanceResult,
    RuleType,
)
from org_relevance.domain.protocols import EntityMatcher
from org_relevance.domain.scoring_constants import (
    ALLOWLIST_BONUS,
    GEOGRAPHY_BONUS,
    HIGH_PRIORITY_MIN_SCORE,
    MAX_RELEVANCE_SCORE,
    MEDIUM_PRIORITY_MIN_SCORE,
    MIN_RELEVANCE_SCORE,
    NO_MATCH_REASON,
    PROFILE_REASON_MAX_TOPICS,
    PROFILE_TOPIC_MAX_POINTS,
    PROFILE_TOPIC_POINTS_PER_MATCH,
    TOPIC_MATCH_MAX_POINTS,
    URGENCY_VELOCITY_DIVISOR,
    VELOCITY_MAX_POINTS,
    VELOCITY_MIN_FOR_BONUS,
    VELOCITY_POINTS_DIVISOR,
)
from org_relevance.services.entity_matcher import SubstringEntityMatcher
from org_relevance.services.text_normalizer import (
    normalize_entity_name,
    round_half_up,
)

logger = get_logger(__name__)

_DEFAULT_MATCHER = SubstringEntityMatcher()


def candidate_topic_universe(candidate: RelevanceCandidate) -> list[str]:
    """Candidate topics plus the entity type, if any."""
    universe = list(candidate.topics)
    if candidate.entity_type:
        universe.append(candidate.entity_type)
    return universe


def topic_matches_candidate(
    topic: str,
    entity_name: str,
    universe: Sequence[str],
    matcher: EntityMatcher,
) -> bool:
    """Check if a topic matches the candidate entity or any candidate topic."""
    if matcher.matches(topic, entity_name):
        return True
    return any(matcher.matches(topic, item) for item in universe)


def priority_bucket_for_score(score: int) -> PriorityBucket:
    """Map a relevance score to its priority bucket.

    Example:
        >>> priority_bucket_for_score(70)
        <PriorityBucket.HIGH: 'high'>
        >>> priority_bucket_for_score(39)
        <PriorityBucket.LOW: 'low'>
    """
    if score >= HIGH_PRIORITY_MIN_SCORE:
        return PriorityBucket.HIGH
    elif score >= MEDIUM_PRIORITY_MIN_SCORE:
        return PriorityBucket.MEDIUM
    else:
        return PriorityBucket.LOW


def estimate_urgency(velocity: float | None) -> int:
    """Estimate an urgency score (0-100) from trend velocity.

    Example:
        >>> estimate_urgency(150)
        75
        >>> estimate_urgency(None)
        0
    """
    if not velocity or not math.isfinite(velocity):
        return 0
    urgency = round_half_up(velocity / URGENCY_VELOCITY_DIVISOR)
    return max(MIN_RELEVANCE_SCORE, min(urgency, MAX_RELEVANCE_SCORE))


def _find_rule(
    rules: Sequence[InterestEntityRule],
    rule_type: RuleType,
    entity_name: str,
    matcher: EntityMatcher,
) -> InterestEntityRule | None:
    return next(
        (
            rule
            for rule in rules
            if rule.rule_type == rule_type
            and matcher.matches(rule.entity_name, entity_name)
        ),
        None,
    )


def _matched_geographies(
    geographies: Sequence[str], entity_name: str, universe: Sequence[str]
) -> list[str]:
    # One-directional: the geography must appear inside the candidate text.
    norm_entity = normalize_entity_name(entity_name)
    norm_universe = [normalize_entity_name(item) for item in universe]

    matched: list[str] = []
    for geography in geographies:
        norm_geo = normalize_entity_name(geography)
        if norm_geo in norm_entity or any(norm_geo in item for item in norm_universe):
            matched.append(geography)
    return matched


def calculate_relevance(
    candidate: RelevanceCandidate,
    profile: OrganizationProfile | None,
    interest_topics: Sequence[InterestTopic],
    entity_rules: Sequence[InterestEntityRule],
    matcher: EntityMatcher | None = None,
) -> RelevanceResult:
    """Calculate org-specific relevance for a candidate entity/opportunity.

    Args:
        candidate: Entity, topics and momentum being evaluated
        profile: Organization profile (None if the org has none)
        interest_topics: Weighted interest topics of the organization
        entity_rules: Allow/deny entity rules of the organization
        matcher: Name matcher (defaults to substring containment)

    Returns:
        RelevanceResult with score, reasons and matches

    Example:
        >>> candidate = RelevanceCandidate(
        ...     entity_name="Senator Jane Doe", topics=["healthcare"]
        ... )
        >>> topics = [InterestTopic(topic="healthcare", weight=0.8)]
        >>> calculate_relevance(candidate, None, topics, []).score
        48
    """
    matcher = matcher or _DEFAULT_MATCHER

    denied = _find_rule(entity_rules, RuleType.DENY, candidate.entity_name, matcher)
    if denied:
        reason = f'Blocked: "{denied.entity_name}" is on deny list'
        if denied.reason:
            reason += f" ({denied.reason})"
        logger.debug(
            "relevance_blocked",
            entity=candidate.entity_name,
            rule_entity=denied.entity_name,
        )
        return RelevanceResult(
            score=0,
            reasons=[reason],
            is_blocked=True,
            priority_bucket=PriorityBucket.LOW,
        )

    universe = candidate_topic_universe(candidate)
    score = 0
    reasons: list[str] = []
    matched_topics: list[str] = []
    matched_geographies: list[str] = []
    is_allowlisted = False

    # Interest topics (best weight wins)
    topic_hits = [
        interest
        for interest in interest_topics
        if topic_matches_candidate(
            interest.topic, candidate.entity_name, universe, matcher
        )
    ]
    if topic_hits:
        max_weight = max(interest.weight for interest in topic_hits)
        topic_points = round_half_up(max_weight * TOPIC_MATCH_MAX_POINTS)
        score += topic_points
        names = [interest.topic for interest in topic_hits]
        reasons.append(f"Topic match: {', '.join(names)} (+{topic_points} pts)")
        matched_topics.extend(names)

    # Profile fallback, mutually exclusive with interest topics
    if not topic_hits and profile is not None:
        profile_topics = [*profile.focus_areas, *profile.key_issues]
        profile_hits = [
            topic
            for topic in profile_topics
            if topic_matches_candidate(topic, candidate.entity_name, universe, matcher)
        ]
        if profile_hits:
            profile_points = min(
                len(profile_hits) * PROFILE_TOPIC_POINTS_PER_MATCH,
                PROFILE_TOPIC_MAX_POINTS,
            )
            score += profile_points
            listed = ", ".join(profile_hits[:PROFILE_REASON_MAX_TOPICS])
            reasons.append(f"Profile topic match: {listed} (+{profile_points} pts)")
            matched_topics.extend(profile_hits)

    allowed = _find_rule(entity_rules, RuleType.ALLOW, candidate.entity_name, matcher)
    if allowed:
        score += ALLOWLIST_BONUS
        is_allowlisted = True
        reasons.append(
            f'Allowlisted entity: "{allowed.entity_name}" (+{ALLOWLIST_BONUS} pts)'
        )

    if profile is not None and profile.geographies:
        matched_geographies = _matched_geographies(
            profile.geographies, candidate.entity_name, universe
        )
        if matched_geographies:
            score += GEOGRAPHY_BONUS
            reasons.append(
                f"Geographic relevance: {', '.join(matched_geographies)} "
                f"(+{GEOGRAPHY_BONUS} pts)"
            )

    velocity = candidate.velocity
    if (
        velocity is not None
        and math.isfinite(velocity)
        and velocity > VELOCITY_MIN_FOR_BONUS
    ):
        velocity_points = min(
            round_half_up(velocity / VELOCITY_POINTS_DIVISOR), VELOCITY_MAX_POINTS
        )
        score += velocity_points
        reasons.append(
            f"High velocity: {round_half_up(velocity)}% (+{velocity_points} pts)"
        )

    score = max(MIN_RELEVANCE_SCORE, min(score, MAX_RELEVANCE_SCORE))

    if not reasons:
        reasons.append(NO_MATCH_REASON)

    bucket = priority_bucket_for_score(score)
    logger.debug(
        "relevance_scored",
        entity=candidate.entity_name,
        score=score,
        priority_bucket=bucket.value,
    )

    return RelevanceResult(
        score=score,
        reasons=reasons,
        is_blocked=False,
        priority_bucket=bucket,
        matched_topics=matched_topics,
        matched_geographies=matched_geographies,
        is_allowlisted=is_allowlisted,
    )
