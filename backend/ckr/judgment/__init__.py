"""Judgment Source: search-trigger decisions from the language model."""

from .parsing import parse_judgment
from .prompts import BATCH_SYSTEM_PROMPT, CONTRACT_VERSION, SINGLE_SYSTEM_PROMPT
from .schemas import Judgment, ParseFailure, ParseOutcome, ParseSuccess
from .source import JudgmentSource

__all__ = [
    "parse_judgment",
    "JudgmentSource",
    "Judgment",
    "ParseFailure",
    "ParseOutcome",
    "ParseSuccess",
    "BATCH_SYSTEM_PROMPT",
    "CONTRACT_VERSION",
    "SINGLE_SYSTEM_PROMPT",
]
