"""Threshold gate for organization alerting.

Relevance is checked before urgency, so a candidate failing both is reported
as a relevance failure.
"""

from org_relevance.domain.models import AlertPreferences, ThresholdDecision


def _format_score(value: float) -> str:
    return f"{value:g}"


def passes_thresholds(
    relevance_score: float,
    urgency_score: float,
    preferences: AlertPreferences | None,
) -> ThresholdDecision:
    """Check if an opportunity passes the organization's threshold filters.

    Args:
        relevance_score: Computed relevance score
        urgency_score: Separately computed urgency score
        preferences: Organization alert preferences (None = no gating)

    Returns:
        ThresholdDecision with a reason when it does not pass

    Example:
        >>> prefs = AlertPreferences(min_relevance_score=60, min_urgency_score=50)
        >>> passes_thresholds(55, 80, prefs).reason
        'Relevance score 55 below threshold 60'
    """
    if preferences is None:
        return ThresholdDecision(passes=True)

    if relevance_score < preferences.min_relevance_score:
        return ThresholdDecision(
            passes=False,
            reason=(
                f"Relevance score {_format_score(relevance_score)} below threshold "
                f"{_format_score(preferences.min_relevance_score)}"
            ),
        )

    if urgency_score < preferences.min_urgency_score:
        return ThresholdDecision(
            passes=False,
            reason=(
                f"Urgency score {_format_score(urgency_score)} below threshold "
                f"{_format_score(preferences.min_urgency_score)}"
            ),
        )

    return ThresholdDecision(passes=True)
