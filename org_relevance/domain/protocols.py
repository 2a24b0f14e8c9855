"""Protocol definitions for dependency inversion.

These abstract interfaces define contracts that matchers must implement.
"""

from typing import Protocol


class EntityMatcher(Protocol):
    """Decides whether two entity/topic strings refer to the same thing.

    The scorer only depends on this contract, so substring containment can be
    replaced by token or embedding based matching without touching scoring.
    """

    def matches(self, a: str, b: str) -> bool:
        """Check whether two free-text names match.

        Args:
            a: First name (raw, not normalized)
            b: Second name (raw, not normalized)

        Returns:
            True if the names are considered the same entity/topic
        """
        ...
