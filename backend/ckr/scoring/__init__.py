"""Scoring: CCP normalization, batch runner and single-query path."""

from .batch_runner import run_batch
from .normalizer import batch_ccp, round_half_up, search_depth, single_ccp
from .schemas import NO_SEARCH_SENTINEL, NOT_AVAILABLE, BatchRow, ScoreResult, SingleQueryResult
from .single import score_single
from .validation import clean_query, validate_batch

__all__ = [
    "batch_ccp",
    "single_ccp",
    "search_depth",
    "round_half_up",
    "run_batch",
    "score_single",
    "clean_query",
    "validate_batch",
    "BatchRow",
    "ScoreResult",
    "SingleQueryResult",
    "NO_SEARCH_SENTINEL",
    "NOT_AVAILABLE",
]
