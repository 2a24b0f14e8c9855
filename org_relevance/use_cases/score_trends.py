"""Score trends use case.

Scores every current trend for every organization and returns the records
worth keeping, ready for the caller to persist.
"""

from collections.abc import Sequence
from datetime import datetime, timedelta
from uuid import uuid4

import pytz

from org_relevance.config.logging_config import (
    bind_context,
    get_logger,
    unbind_context,
)
from org_relevance.config.settings import Settings
from org_relevance.domain.models import (
    OrganizationContext,
    OrgTrendScore,
    PriorityBucket,
    RelevanceCandidate,
    TrendScoringResult,
    TrendSignal,
    TrendSource,
)
from org_relevance.services.entity_matcher import create_entity_matcher
from org_relevance.services.relevance_scorer import (
    calculate_relevance,
    estimate_urgency,
)
from org_relevance.services.text_normalizer import normalize_entity_name
from org_relevance.services.threshold_gate import passes_thresholds

logger = get_logger(__name__)


def select_trends(
    trends: Sequence[TrendSignal], max_trends: int
) -> tuple[list[TrendSignal], int]:
    """Deduplicate trends by normalized title, preferring events over clusters.

    Every title is kept once across the whole run. This covers clusters that
    repeat an event title, and also repeated titles within the events or
    within the clusters; the first occurrence wins.

    Args:
        trends: Trend signals from upstream
        max_trends: Maximum distinct trends to keep

    Returns:
        Tuple of (selected trends, number of duplicates skipped)

    Example:
        >>> event = TrendSignal(trend_id="e1", title="Gaza Ceasefire")
        >>> cluster = TrendSignal(
        ...     trend_id="c1", title="gaza ceasefire!", source=TrendSource.CLUSTER
        ... )
        >>> selected, skipped = select_trends([cluster, event], max_trends=10)
        >>> [t.trend_id for t in selected], skipped
        (['e1'], 1)
    """
    ordered = [t for t in trends if t.source == TrendSource.EVENT] + [
        t for t in trends if t.source != TrendSource.EVENT
    ]

    seen_keys: set[str] = set()
    selected: list[TrendSignal] = []
    skipped = 0
    for trend in ordered:
        key = normalize_entity_name(trend.title)
        if key in seen_keys:
            skipped += 1
            continue
        seen_keys.add(key)
        selected.append(trend)

    return selected[:max_trends], skipped


def trend_to_candidate(trend: TrendSignal) -> RelevanceCandidate:
    """Build a scoring candidate from a trend signal."""
    return RelevanceCandidate(
        entity_name=trend.title,
        entity_type=trend.entity_type,
        topics=list(trend.topics),
        velocity=trend.velocity,
        sentiment=trend.sentiment,
        mentions=trend.mentions,
    )


def score_trends_use_case(
    organizations: Sequence[OrganizationContext],
    trends: Sequence[TrendSignal],
    settings: Settings,
    now: datetime | None = None,
) -> TrendScoringResult:
    """Compute org-specific relevance for every organization × trend.

    1. Deduplicate trends by normalized title (events win over clusters)
    2. Score each trend for each organization
    3. Estimate urgency from velocity and run the threshold gate
    4. Keep records at or above the stored-score minimum, plus blocked ones

    Args:
        organizations: Organizations with profile, topics, rules and preferences
        trends: Current trend signals
        settings: Application settings
        now: Computation timestamp (defaults to current UTC time)

    Returns:
        TrendScoringResult with the kept records and counts

    Example:
        >>> result = score_trends_use_case(orgs, trends, settings)
        >>> result.high_priority_count
        3
    """
    computed_at = now or datetime.now(pytz.UTC)
    expires_at = computed_at + timedelta(hours=settings.score_ttl_hours)
    matcher = create_entity_matcher(
        settings.entity_matcher, settings.token_overlap_min_similarity
    )

    selected, skipped = select_trends(trends, settings.max_trends_per_run)

    bind_context(run_id=uuid4().hex)
    try:
        logger.info(
            "trend_scoring_started",
            organizations=len(organizations),
            trends=len(selected),
            duplicates_skipped=skipped,
            matcher=settings.entity_matcher,
        )

        scores: list[OrgTrendScore] = []
        high_priority_count = 0
        alert_eligible_count = 0

        for org in organizations:
            for trend in selected:
                relevance = calculate_relevance(
                    trend_to_candidate(trend),
                    org.profile,
                    org.interest_topics,
                    org.entity_rules,
                    matcher=matcher,
                )

                if (
                    relevance.score < settings.min_stored_relevance_score
                    and not relevance.is_blocked
                ):
                    continue

                urgency = estimate_urgency(trend.velocity)
                decision = passes_thresholds(
                    relevance.score, urgency, org.alert_preferences
                )
                passes = decision.passes and not relevance.is_blocked

                scores.append(
                    OrgTrendScore(
                        organization_id=org.organization_id,
                        trend_id=trend.trend_id,
                        trend_source=trend.source,
                        trend_key=normalize_entity_name(trend.title),
                        relevance_score=relevance.score,
                        urgency_score=urgency,
                        priority_bucket=relevance.priority_bucket,
                        is_blocked=relevance.is_blocked,
                        is_allowlisted=relevance.is_allowlisted,
                        matched_topics=relevance.matched_topics,
                        matched_geographies=relevance.matched_geographies,
                        reasons=relevance.reasons,
                        passes_thresholds=passes,
                        threshold_reason=decision.reason,
                        computed_at=computed_at,
                        expires_at=expires_at,
                    )
                )

                if relevance.priority_bucket == PriorityBucket.HIGH:
                    high_priority_count += 1
                if passes:
                    alert_eligible_count += 1

        logger.info(
            "trend_scoring_complete",
            organizations=len(organizations),
            trends_scored=len(selected),
            scores_created=len(scores),
            high_priority=high_priority_count,
            alert_eligible=alert_eligible_count,
        )
    finally:
        unbind_context("run_id")

    return TrendScoringResult(
        organizations_processed=len(organizations),
        trends_scored=len(selected),
        scores=scores,
        high_priority_count=high_priority_count,
        alert_eligible_count=alert_eligible_count,
        skipped_duplicates=skipped,
    )
