"""Domain models for the organization relevance engine.

All models use Pydantic v2 for validation and serialization.
Scoring inputs are frozen; results are built once per evaluation.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OrgType(str, Enum):
    """Organization type taxonomy."""

    FOREIGN_POLICY = "foreign_policy"
    HUMAN_RIGHTS = "human_rights"
    CANDIDATE = "candidate"
    LABOR = "labor"
    CLIMATE = "climate"
    CIVIL_RIGHTS = "civil_rights"
    OTHER = "other"


class TopicSource(str, Enum):
    """Where an interest topic came from."""

    SELF_DECLARED = "self_declared"
    LEARNED_IMPLICIT = "learned_implicit"
    LEARNED_OUTCOME = "learned_outcome"
    ADMIN_OVERRIDE = "admin_override"


class RuleType(str, Enum):
    """Entity rule type."""

    ALLOW = "allow"
    DENY = "deny"


class DigestMode(str, Enum):
    """Alert delivery cadence."""

    REALTIME = "realtime"
    HOURLY_DIGEST = "hourly_digest"
    DAILY_DIGEST = "daily_digest"


class PriorityBucket(str, Enum):
    """Coarse priority derived from the relevance score."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TrendSource(str, Enum):
    """Upstream record a trend signal was read from."""

    EVENT = "event"
    CLUSTER = "cluster"


class OrganizationProfile(BaseModel):
    """Descriptive metadata about an organization."""

    model_config = ConfigDict(frozen=True)

    org_type: OrgType | None = Field(default=None, description="Organization type")
    display_name: str | None = Field(default=None, description="Display name")
    mission_summary: str | None = Field(default=None, description="Mission summary")
    focus_areas: list[str] = Field(default_factory=list, description="Focus areas")
    key_issues: list[str] = Field(default_factory=list, description="Key issues")
    geographies: list[str] = Field(
        default_factory=list, description="States, districts, regions of interest"
    )
    primary_goals: list[str] = Field(default_factory=list, description="Primary goals")
    audiences: list[str] = Field(default_factory=list, description="Target audiences")

    @field_validator(
        "focus_areas",
        "key_issues",
        "geographies",
        "primary_goals",
        "audiences",
        mode="before",
    )
    @classmethod
    def _none_as_empty(cls, value: list[str] | None) -> list[str]:
        """Storage rows may carry NULL arrays."""
        return [] if value is None else value


class InterestTopic(BaseModel):
    """An organization's declared or inferred interest in a subject."""

    model_config = ConfigDict(frozen=True)

    topic: str = Field(..., description="Topic text")
    weight: float = Field(..., ge=0.0, le=1.0, description="Relative importance")
    source: TopicSource = Field(
        default=TopicSource.SELF_DECLARED, description="Origin of the topic"
    )


class InterestEntityRule(BaseModel):
    """Per-organization allow/deny override for a named entity."""

    model_config = ConfigDict(frozen=True)

    entity_name: str = Field(..., description="Entity the rule applies to")
    rule_type: RuleType = Field(..., description="allow or deny")
    reason: str | None = Field(default=None, description="Why the rule exists")


class AlertPreferences(BaseModel):
    """Per-organization gating configuration.

    ``max_alerts_per_day`` and ``digest_mode`` belong to alert delivery and are
    not read by scoring.
    """

    model_config = ConfigDict(frozen=True)

    min_relevance_score: float = Field(default=0.0, description="Minimum relevance")
    min_urgency_score: float = Field(default=0.0, description="Minimum urgency")
    max_alerts_per_day: int = Field(default=10, ge=0, description="Daily alert cap")
    digest_mode: DigestMode = Field(
        default=DigestMode.REALTIME, description="Delivery cadence"
    )


class RelevanceCandidate(BaseModel):
    """One news entity/opportunity evaluated against one organization."""

    model_config = ConfigDict(frozen=True)

    entity_name: str = Field(..., description="Entity or headline text")
    entity_type: str | None = Field(default=None, description="Entity type tag")
    topics: list[str] = Field(default_factory=list, description="Candidate topics")
    velocity: float | None = Field(
        default=None, allow_inf_nan=False, description="Momentum in percent"
    )
    sentiment: float | None = Field(default=None, description="Not used by scoring")
    mentions: int | None = Field(default=None, description="Not used by scoring")

    @field_validator("topics", mode="before")
    @classmethod
    def _none_as_empty(cls, value: list[str] | None) -> list[str]:
        return [] if value is None else value


class RelevanceResult(BaseModel):
    """Scoring output for one candidate and one organization."""

    score: int = Field(..., ge=0, le=100, description="Relevance score")
    reasons: list[str] = Field(..., min_length=1, description="Explanation trail")
    is_blocked: bool = False
    priority_bucket: PriorityBucket = PriorityBucket.LOW
    matched_topics: list[str] = Field(default_factory=list)
    matched_geographies: list[str] = Field(default_factory=list)
    is_allowlisted: bool = False


class ThresholdDecision(BaseModel):
    """Verdict of the threshold gate."""

    passes: bool
    reason: str | None = None


class TrendSignal(BaseModel):
    """A trending news event or cluster to score for every organization."""

    model_config = ConfigDict(frozen=True)

    trend_id: str = Field(..., description="Upstream record ID")
    title: str = Field(..., description="Event or cluster title")
    source: TrendSource = Field(default=TrendSource.EVENT)
    velocity: float = Field(
        default=0.0, allow_inf_nan=False, description="Momentum in percent"
    )
    entity_type: str | None = None
    topics: list[str] = Field(default_factory=list)
    sentiment: float | None = None
    mentions: int | None = None


class OrganizationContext(BaseModel):
    """Everything the engine needs to know about one organization."""

    model_config = ConfigDict(frozen=True)

    organization_id: str
    profile: OrganizationProfile | None = None
    interest_topics: list[InterestTopic] = Field(default_factory=list)
    entity_rules: list[InterestEntityRule] = Field(default_factory=list)
    alert_preferences: AlertPreferences | None = None


class OrgTrendScore(BaseModel):
    """Relevance of one trend for one organization, ready to persist."""

    organization_id: str
    trend_id: str
    trend_source: TrendSource
    trend_key: str = Field(..., description="Normalized trend title")
    relevance_score: int = Field(..., ge=0, le=100)
    urgency_score: int = Field(..., ge=0, le=100)
    priority_bucket: PriorityBucket
    is_blocked: bool
    is_allowlisted: bool
    matched_topics: list[str] = Field(default_factory=list)
    matched_geographies: list[str] = Field(default_factory=list)
    reasons: list[str] = Field(default_factory=list)
    passes_thresholds: bool
    threshold_reason: str | None = None
    computed_at: datetime
    expires_at: datetime


class TrendScoringResult(BaseModel):
    """Result of a trend scoring run."""

    organizations_processed: int
    trends_scored: int
    scores: list[OrgTrendScore] = Field(default_factory=list)
    high_priority_count: int = 0
    alert_eligible_count: int = 0
    skipped_duplicates: int = 0
