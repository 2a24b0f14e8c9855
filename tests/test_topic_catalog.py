"""Tests for default topic catalog."""

import pytest

from org_relevance.domain.models import (
    InterestTopic,
    OrganizationContext,
    OrganizationProfile,
    OrgType,
    TopicSource,
)
from org_relevance.services import topic_catalog


@pytest.mark.parametrize(
    "org_type", [t for t in OrgType if t != OrgType.OTHER]
)
def test_every_seeded_type_has_self_declared_topics(org_type: OrgType) -> None:
    """Each seeded type yields weighted, self-declared topics."""
    topics = topic_catalog.default_topics_for_org_type(org_type)

    assert topics
    assert all(t.source == TopicSource.SELF_DECLARED for t in topics)
    assert all(0.0 < t.weight <= 1.0 for t in topics)


def test_catalog_covers_every_org_type() -> None:
    """The table and labels have an entry for every enum member."""
    assert set(topic_catalog.DEFAULT_TOPICS) == set(OrgType)
    assert set(topic_catalog.ORG_TYPE_LABELS) == set(OrgType)


def test_candidate_defaults() -> None:
    """Candidate organizations start with election topics."""
    topics = topic_catalog.default_topics_for_org_type(OrgType.CANDIDATE)

    assert [(t.topic, t.weight) for t in topics] == [
        ("election", 0.9),
        ("campaign", 0.8),
        ("polls", 0.7),
        ("endorsement", 0.7),
        ("debate", 0.6),
        ("fundraising", 0.6),
    ]


def test_string_and_enum_lookup_agree() -> None:
    """String values resolve to the same topics as the enum."""
    assert topic_catalog.default_topics_for_org_type(
        "climate"
    ) == topic_catalog.default_topics_for_org_type(OrgType.CLIMATE)


@pytest.mark.parametrize("org_type", ["bake_sale", "", None, OrgType.OTHER, "other"])
def test_unknown_types_yield_empty_list(org_type: OrgType | str | None) -> None:
    """Unknown or unmapped types are not errors."""
    assert topic_catalog.default_topics_for_org_type(org_type) == []


def test_returned_list_is_fresh() -> None:
    """Mutating a returned list does not change later results."""
    first = topic_catalog.default_topics_for_org_type("labor")
    first.clear()

    assert topic_catalog.default_topics_for_org_type("labor")


def test_org_type_label() -> None:
    """Labels resolve from enum or string, unknown falls back to Other."""
    assert topic_catalog.org_type_label(OrgType.LABOR) == "Labor & Workers Rights"
    assert (
        topic_catalog.org_type_label("foreign_policy")
        == "Foreign Policy & International Affairs"
    )
    assert topic_catalog.org_type_label("bake_sale") == "Other"
    assert topic_catalog.org_type_label(None) == "Other"


def test_with_default_topics_seeds_empty_org() -> None:
    """Organizations without topics get their type's defaults."""
    org = OrganizationContext(
        organization_id="org-1",
        profile=OrganizationProfile(org_type=OrgType.HUMAN_RIGHTS),
    )

    seeded = topic_catalog.with_default_topics(org)

    assert seeded.interest_topics == topic_catalog.default_topics_for_org_type(
        OrgType.HUMAN_RIGHTS
    )
    assert org.interest_topics == []


def test_with_default_topics_keeps_declared_topics() -> None:
    """Declared topics are never replaced."""
    declared = [InterestTopic(topic="transit", weight=1.0)]
    org = OrganizationContext(
        organization_id="org-1",
        profile=OrganizationProfile(org_type=OrgType.LABOR),
        interest_topics=declared,
    )

    assert topic_catalog.with_default_topics(org).interest_topics == declared


def test_with_default_topics_without_profile() -> None:
    """Organizations without a profile are returned unchanged."""
    org = OrganizationContext(organization_id="org-1")

    assert topic_catalog.with_default_topics(org) is org
