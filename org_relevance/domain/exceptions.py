"""Custom exception hierarchy for the organization relevance engine.

Scoring itself never raises; these cover configuration and input loading.
"""


class OrgRelevanceError(Exception):
    """Base exception for all application errors."""

    pass


class ConfigurationError(OrgRelevanceError):
    """Invalid or unsupported configuration."""

    pass


class InputValidationError(OrgRelevanceError):
    """Input document could not be parsed into domain models."""

    def __init__(self, source: str, detail: str) -> None:
        """Initialize with the offending source and a short detail."""
        self.source = source
        self.detail = detail
        super().__init__(f"Invalid input in {source}: {detail}")
