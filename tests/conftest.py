"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from datetime import datetime

import pytest
import pytz

from org_relevance.config.settings import Settings
from org_relevance.domain.models import (
    AlertPreferences,
    InterestEntityRule,
    InterestTopic,
    OrganizationContext,
    OrganizationProfile,
    OrgType,
    RelevanceCandidate,
    RuleType,
    TrendSignal,
    TrendSource,
)


@pytest.fixture
def settings() -> Settings:
    """Settings with explicit trend-run values (not taken from config/*.yaml)."""
    return Settings(
        entity_matcher="substring",
        min_stored_relevance_score=10,
        score_ttl_hours=24,
        max_trends_per_run=200,
    )


@pytest.fixture
def fixed_now() -> datetime:
    """Deterministic computation timestamp."""
    return datetime(2026, 3, 3, 12, 0, tzinfo=pytz.UTC)


@pytest.fixture
def sample_candidate() -> RelevanceCandidate:
    """Candidate from the healthcare example."""
    return RelevanceCandidate(entity_name="Senator Jane Doe", topics=["healthcare"])


@pytest.fixture
def healthcare_topics() -> list[InterestTopic]:
    """Single healthcare interest topic."""
    return [InterestTopic(topic="healthcare", weight=0.8)]


@pytest.fixture
def labor_profile() -> OrganizationProfile:
    """Labor organization profile focused on Tennessee."""
    return OrganizationProfile(
        org_type=OrgType.LABOR,
        display_name="Tennessee Workers United",
        mission_summary="Organizing service and transit workers across Tennessee.",
        focus_areas=["collective bargaining"],
        key_issues=["minimum wage"],
        geographies=["Tennessee"],
    )


@pytest.fixture
def labor_org(labor_profile: OrganizationProfile) -> OrganizationContext:
    """Labor organization with topics, a deny rule and alert preferences."""
    return OrganizationContext(
        organization_id="org-labor",
        profile=labor_profile,
        interest_topics=[InterestTopic(topic="unions", weight=0.9)],
        entity_rules=[
            InterestEntityRule(
                entity_name="Acme Corp",
                rule_type=RuleType.DENY,
                reason="Client conflict",
            )
        ],
        alert_preferences=AlertPreferences(
            min_relevance_score=40, min_urgency_score=0
        ),
    )


@pytest.fixture
def sample_trends() -> list[TrendSignal]:
    """Trends covering a match, a duplicate, a block, noise and momentum."""
    return [
        TrendSignal(
            trend_id="evt-1",
            title="Nashville transit unions vote to strike in Tennessee",
            velocity=180,
        ),
        TrendSignal(
            trend_id="cl-1",
            title="nashville transit UNIONS vote to strike in tennessee!",
            source=TrendSource.CLUSTER,
            velocity=90,
        ),
        TrendSignal(trend_id="evt-2", title="Acme Corp announces layoffs"),
        TrendSignal(trend_id="evt-3", title="Celebrity gossip roundup"),
        TrendSignal(
            trend_id="cl-2",
            title="Strike wave spreads",
            source=TrendSource.CLUSTER,
            velocity=600,
        ),
    ]
