"""YAML loader for offline trend scoring runs.

Expected document shape:

    organizations:
      - organization_id: org-1
        profile: {org_type: labor, geographies: [Tennessee]}
        interest_topics: [{topic: unions, weight: 0.9}]
        entity_rules: [{entity_name: Acme Corp, rule_type: deny}]
        alert_preferences: {min_relevance_score: 40, min_urgency_score: 0}
    trends:
      - trend_id: t-1
        title: Nashville transit workers vote to strike
        velocity: 180
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from org_relevance.config.logging_config import get_logger
from org_relevance.domain.exceptions import InputValidationError
from org_relevance.domain.models import OrganizationContext, TrendSignal

logger = get_logger(__name__)


def parse_scoring_input(
    document: dict[str, Any], source: str = "<document>"
) -> tuple[list[OrganizationContext], list[TrendSignal]]:
    """Parse a scoring input document into domain models.

    Args:
        document: Mapping with "organizations" and "trends" lists
        source: Name used in error messages

    Returns:
        Tuple of (organizations, trends)

    Raises:
        InputValidationError: If the document does not match the models
    """
    if not isinstance(document, dict):
        raise InputValidationError(source, "top level must be a mapping")

    try:
        organizations = [
            OrganizationContext.model_validate(item)
            for item in document.get("organizations") or []
        ]
        trends = [
            TrendSignal.model_validate(item) for item in document.get("trends") or []
        ]
    except ValidationError as e:
        raise InputValidationError(source, str(e)) from e

    return organizations, trends


def load_scoring_input(
    path: Path,
) -> tuple[list[OrganizationContext], list[TrendSignal]]:
    """Load organizations and trends from a YAML file.

    Args:
        path: YAML file path

    Returns:
        Tuple of (organizations, trends)

    Raises:
        InputValidationError: If the file cannot be read or parsed
    """
    try:
        with open(path, encoding="utf-8") as f:
            document = yaml.safe_load(f) or {}
    except (yaml.YAMLError, OSError) as e:
        raise InputValidationError(str(path), str(e)) from e

    organizations, trends = parse_scoring_input(document, source=str(path))
    logger.info(
        "scoring_input_loaded",
        path=str(path),
        organizations=len(organizations),
        trends=len(trends),
    )
    return organizations, trends
