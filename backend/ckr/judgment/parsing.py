"""
Parse boundary between free-form model output and the Judgment shape.

Nothing here raises: every input ends up as a ParseSuccess or a ParseFailure.
"""

import json
import logging
from typing import Any, Optional

from pydantic import ValidationError

from ckr.judgment.llm_utils import parse_llm_response
from ckr.judgment.schemas import LIST_FIELDS, Judgment, ParseFailure, ParseOutcome, ParseSuccess

logger = logging.getLogger(__name__)


def _as_text(item: Any) -> str:
    if item is None:
        return ""
    return item if isinstance(item, str) else str(item)


def _clean_list(value: Any) -> list[str]:
    """Absent, null or non-list fields become []; items are kept as given, non-strings stringified."""
    if not isinstance(value, list):
        return []
    return [_as_text(item) for item in value]


def parse_judgment(content: Optional[str]) -> ParseOutcome:
    if content is None or not content.strip():
        return ParseFailure(reason="Judgment model returned an empty response")
    try:
        data = parse_llm_response(content)
    except json.JSONDecodeError as e:
        logger.debug("Unparseable judgment payload: %r", content)
        return ParseFailure(reason=f"Judgment model response was not valid JSON ({e.msg})")
    except RecursionError:
        return ParseFailure(reason="Judgment model response was nested too deeply")
    if not isinstance(data, dict):
        return ParseFailure(reason="Judgment model response was not a JSON object")

    fields = {key: _clean_list(data.get(key)) for key in LIST_FIELDS}
    try:
        judgment = Judgment(needs_search=data.get("needs_search", False), **fields)
    except ValidationError as e:
        return ParseFailure(reason=f"Judgment model response did not match the expected shape ({e.error_count()} errors)")
    return ParseSuccess(judgment=judgment)
