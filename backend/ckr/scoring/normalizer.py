"""
Score Normalizer: map a Judgment to a bounded CCP percentage.

Two independent policies. The batch policy is a capped-linear blend with a
soft floor; the single-query policy is a logarithmic blend that saturates
slowly. They are kept as separate functions so tuning one never moves the
other.

The constants below are empirical tuning values carried over from the
production prompts. They have no derivation; treat changes as a product
decision.
"""

import math

from ckr.judgment.schemas import Judgment
from ckr.scoring.schemas import ScoreResult

# ----- Batch policy (capped-linear) -----

BATCH_FANOUT_CAP = 6
BATCH_SNIPPET_CAP = 5
BATCH_URL_CAP = 5

BATCH_FANOUT_WEIGHT = 0.40
BATCH_SNIPPET_WEIGHT = 0.35
BATCH_URL_WEIGHT = 0.25

BATCH_FLOOR = 0.15
BATCH_SPAN = 0.75  # floor + span = 0.90 ceiling

# ----- Single-query policy (log-saturation) -----

SINGLE_FANOUT_WEIGHT = 0.15
SINGLE_SNIPPET_WEIGHT = 0.25
SINGLE_URL_WEIGHT = 0.35
SINGLE_DECISION_WEIGHT = 0.25


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (round() would round to even)."""
    return math.floor(value + 0.5)


def search_depth(judgment: Judgment) -> int:
    """Fanout + snippet + URL counts; URLs are counted with duplicates."""
    return len(judgment.fanout_queries) + len(judgment.snippets) + len(judgment.urls)


def batch_ccp(judgment: Judgment) -> ScoreResult:
    """Batch policy: 0/0 when no search was triggered, else a value in [15, 90]."""
    if not judgment.needs_search:
        return ScoreResult(ccp=0, search_depth=0)

    fanout_score = min(len(judgment.fanout_queries) / BATCH_FANOUT_CAP, 1)
    snippet_score = min(len(judgment.snippets) / BATCH_SNIPPET_CAP, 1)
    url_score = min(len(judgment.distinct_urls) / BATCH_URL_CAP, 1)

    raw = (
        BATCH_FANOUT_WEIGHT * fanout_score
        + BATCH_SNIPPET_WEIGHT * snippet_score
        + BATCH_URL_WEIGHT * url_score
    )
    ccp = round_half_up((BATCH_FLOOR + raw * BATCH_SPAN) * 100)
    return ScoreResult(ccp=ccp, search_depth=search_depth(judgment))


def single_ccp(judgment: Judgment) -> int:
    """Single-query policy: evaluated for every judgment, no special case for no-search."""
    raw = (
        SINGLE_FANOUT_WEIGHT * math.log(1 + len(judgment.fanout_queries))
        + SINGLE_SNIPPET_WEIGHT * math.log(1 + len(judgment.snippets))
        + SINGLE_URL_WEIGHT * math.log(1 + len(judgment.distinct_urls))
        + SINGLE_DECISION_WEIGHT * (1 if judgment.needs_search else 0)
    )
    clamped = max(0.0, min(1.0, raw))
    return round_half_up(clamped * 100)
