"""Default interest topics used to bootstrap new organizations.

Hand-curated seed data keyed by organization type. Weights express relative
importance within the type, not probabilities.
"""

from typing import Final

from org_relevance.domain.models import (
    InterestTopic,
    OrganizationContext,
    OrgType,
    TopicSource,
)

DEFAULT_TOPICS: Final[dict[OrgType, tuple[tuple[str, float], ...]]] = {
    OrgType.FOREIGN_POLICY: (
        ("ukraine", 0.8),
        ("gaza", 0.8),
        ("israel", 0.7),
        ("china", 0.7),
        ("russia", 0.7),
        ("nato", 0.6),
        ("sanctions", 0.6),
        ("diplomacy", 0.5),
    ),
    OrgType.HUMAN_RIGHTS: (
        ("police brutality", 0.8),
        ("civil rights", 0.8),
        ("voting rights", 0.7),
        ("immigration", 0.7),
        ("refugees", 0.6),
        ("discrimination", 0.6),
        ("incarceration", 0.5),
    ),
    OrgType.CANDIDATE: (
        ("election", 0.9),
        ("campaign", 0.8),
        ("polls", 0.7),
        ("endorsement", 0.7),
        ("debate", 0.6),
        ("fundraising", 0.6),
    ),
    OrgType.LABOR: (
        ("unions", 0.9),
        ("strikes", 0.8),
        ("wages", 0.8),
        ("workers rights", 0.7),
        ("collective bargaining", 0.7),
        ("nlrb", 0.6),
    ),
    OrgType.CLIMATE: (
        ("climate change", 0.9),
        ("renewable energy", 0.8),
        ("fossil fuels", 0.8),
        ("emissions", 0.7),
        ("environmental justice", 0.7),
        ("green new deal", 0.6),
    ),
    OrgType.CIVIL_RIGHTS: (
        ("equality", 0.8),
        ("discrimination", 0.8),
        ("lgbtq", 0.7),
        ("voting rights", 0.7),
        ("affirmative action", 0.6),
        ("dei", 0.6),
    ),
    OrgType.OTHER: (),
}

ORG_TYPE_LABELS: Final[dict[OrgType, str]] = {
    OrgType.FOREIGN_POLICY: "Foreign Policy & International Affairs",
    OrgType.HUMAN_RIGHTS: "Human Rights & Social Justice",
    OrgType.CANDIDATE: "Political Campaign / Candidate",
    OrgType.LABOR: "Labor & Workers Rights",
    OrgType.CLIMATE: "Climate & Environment",
    OrgType.CIVIL_RIGHTS: "Civil Rights & Equality",
    OrgType.OTHER: "Other",
}


def _coerce_org_type(org_type: OrgType | str | None) -> OrgType | None:
    if org_type is None or isinstance(org_type, OrgType):
        return org_type
    try:
        return OrgType(org_type)
    except ValueError:
        return None


def default_topics_for_org_type(org_type: OrgType | str | None) -> list[InterestTopic]:
    """Get default interest topics for an organization type.

    Args:
        org_type: Organization type (enum or its string value)

    Returns:
        Fresh list of self-declared topics; empty for unknown types

    Example:
        >>> [t.topic for t in default_topics_for_org_type("candidate")][:2]
        ['election', 'campaign']
        >>> default_topics_for_org_type("bake_sale")
        []
    """
    resolved = _coerce_org_type(org_type)
    if resolved is None:
        return []

    return [
        InterestTopic(topic=topic, weight=weight, source=TopicSource.SELF_DECLARED)
        for topic, weight in DEFAULT_TOPICS.get(resolved, ())
    ]


def org_type_label(org_type: OrgType | str | None) -> str:
    """Human-readable label for an organization type ("Other" if unknown)."""
    resolved = _coerce_org_type(org_type)
    if resolved is None:
        return ORG_TYPE_LABELS[OrgType.OTHER]
    return ORG_TYPE_LABELS[resolved]


def with_default_topics(org: OrganizationContext) -> OrganizationContext:
    """Seed an organization without interest topics from its profile type.

    Organizations that already declare topics, or have no typed profile, are
    returned unchanged.
    """
    if org.interest_topics or org.profile is None:
        return org

    defaults = default_topics_for_org_type(org.profile.org_type)
    if not defaults:
        return org
    return org.model_copy(update={"interest_topics": defaults})
