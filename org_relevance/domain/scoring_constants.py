"""Scoring constants and limits for organization relevance.

Point values for every scoring step and the bucket boundaries live here so
the scorer, the trend run and the tests share one source of truth.
"""

from typing import Final

# Score range
MIN_RELEVANCE_SCORE: Final[int] = 0
MAX_RELEVANCE_SCORE: Final[int] = 100

# Topic scoring
TOPIC_MATCH_MAX_POINTS: Final[int] = 60
"""Points for a primary topic match at weight 1.0.

Business rule: only the highest-weighted matching topic counts, so an
organization with many overlapping topics does not outscore one with a single
strong topic. Points = round(max_weight × 60).
"""

PROFILE_TOPIC_POINTS_PER_MATCH: Final[int] = 15
"""Points per matching profile focus area or key issue (fallback only)."""

PROFILE_TOPIC_MAX_POINTS: Final[int] = 40
"""Cap for the profile fallback.

Business rule: the fallback runs only when no interest topic matched, and it
stays below the primary maximum so declared topics always dominate.
"""

PROFILE_REASON_MAX_TOPICS: Final[int] = 3
"""Profile matches listed in the explanation text."""

# Bonuses
ALLOWLIST_BONUS: Final[int] = 20
"""Flat bonus for an allow-listed entity, applied once."""

GEOGRAPHY_BONUS: Final[int] = 10
"""Flat bonus when one or more profile geographies match, applied once."""

VELOCITY_MIN_FOR_BONUS: Final[float] = 50.0
"""Velocity (percent) that must be exceeded before momentum counts."""

VELOCITY_POINTS_DIVISOR: Final[float] = 50.0
"""Velocity bonus = round(velocity / 50), capped."""

VELOCITY_MAX_POINTS: Final[int] = 10

# Priority buckets
HIGH_PRIORITY_MIN_SCORE: Final[int] = 70
MEDIUM_PRIORITY_MIN_SCORE: Final[int] = 40

# Urgency estimate
URGENCY_VELOCITY_DIVISOR: Final[float] = 2.0
"""Urgency = round(velocity / 2), clamped to 0-100.

Example:
    - velocity 150% → urgency 75
    - velocity 300% → urgency 100
"""

NO_MATCH_REASON: Final[str] = "No specific topic or entity matches found."

# Token overlap matcher
CONTAINMENT_SIMILARITY: Final[float] = 0.85
"""Similarity assigned when one normalized string contains the other."""

MIN_OVERLAP_TOKEN_LENGTH: Final[int] = 3
"""Tokens shorter than this are ignored by the token overlap matcher."""

DEFAULT_TOKEN_OVERLAP_MIN_SIMILARITY: Final[float] = 0.5

# Trend scoring run
DEFAULT_MIN_STORED_RELEVANCE_SCORE: Final[int] = 10
"""Records below this score are not kept (blocked records always are)."""

DEFAULT_SCORE_TTL_HOURS: Final[int] = 24

DEFAULT_MAX_TRENDS_PER_RUN: Final[int] = 200
