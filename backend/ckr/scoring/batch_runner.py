"""
Batch Runner: score 2-5 queries one after another.

Each query is judged and scored on its own; a failure only ever lands in
that query's row, and rows come back in submission order.
"""

import logging
from typing import Protocol

from ckr.errors import JudgmentSourceError, QueryValidationError
from ckr.judgment.prompts import BATCH_SYSTEM_PROMPT
from ckr.judgment.schemas import ParseFailure, ParseOutcome
from ckr.scoring.normalizer import batch_ccp
from ckr.scoring.schemas import NO_SEARCH_SENTINEL, BatchRow
from ckr.scoring.validation import clean_query, validate_batch

logger = logging.getLogger(__name__)

# Batch items that may be coerced to query text; anything else is a row error
QUERY_ITEM_TYPES = (str, int, float)


class Judge(Protocol):
    def judge(self, query: str, system_prompt: str = ...) -> ParseOutcome: ...


def run_batch(queries: list, source: Judge) -> list[BatchRow]:
    """
    Score every query in order and return one BatchRow per query.

    Raises QueryValidationError only for a malformed batch (not a list, or
    outside 2-5 items); per-query problems become row errors.
    """
    validate_batch(queries)
    rows: list[BatchRow] = []
    for index, raw_query in enumerate(queries, start=1):
        rows.append(_score_one(index, raw_query, source))
    failed = sum(1 for row in rows if row.failed)
    logger.info("Batch of %d scored, %d failed", len(rows), failed)
    return rows


def _score_one(index: int, raw_query, source: Judge) -> BatchRow:
    query = str(raw_query).strip()
    try:
        if isinstance(raw_query, bool) or not isinstance(raw_query, QUERY_ITEM_TYPES):
            raise QueryValidationError("Query must be text")
        query = clean_query(query)
        outcome = source.judge(query, system_prompt=BATCH_SYSTEM_PROMPT)
    except (QueryValidationError, JudgmentSourceError) as e:
        logger.warning("Batch row %d (%r) failed: %s", index, query, e)
        return BatchRow(index=index, query=query, error=str(e))
    except Exception as e:
        logger.exception("Unexpected error scoring batch row %d (%r)", index, query)
        return BatchRow(index=index, query=query, error=str(e) or "Processing failed")

    if isinstance(outcome, ParseFailure):
        logger.warning("Batch row %d (%r) unparseable: %s", index, query, outcome.reason)
        return BatchRow(index=index, query=query, error=outcome.reason)

    judgment = outcome.judgment
    if not judgment.needs_search:
        return BatchRow(
            index=index,
            query=query,
            ccp=0,
            fanouts=NO_SEARCH_SENTINEL,
            snippets=NO_SEARCH_SENTINEL,
            urls=NO_SEARCH_SENTINEL,
            search_depth=0,
        )

    score = batch_ccp(judgment)
    return BatchRow(
        index=index,
        query=query,
        ccp=score.ccp,
        fanouts="\n".join(judgment.fanout_queries),
        snippets="\n".join(judgment.snippets),
        urls="\n".join(judgment.urls),
        search_depth=score.search_depth,
    )
