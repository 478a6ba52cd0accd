"""Single-query path: validate, judge, score with the log-saturation policy."""

from ckr.errors import MalformedJudgmentError
from ckr.judgment.prompts import SINGLE_SYSTEM_PROMPT
from ckr.judgment.schemas import ParseFailure
from ckr.scoring.batch_runner import Judge
from ckr.scoring.normalizer import single_ccp
from ckr.scoring.schemas import SingleQueryResult
from ckr.scoring.validation import clean_query


def score_single(query, source: Judge) -> SingleQueryResult:
    """
    Score one query. Raises QueryValidationError before any model call,
    JudgmentSourceError subclasses (including MalformedJudgmentError) after.
    """
    cleaned = clean_query(query)
    outcome = source.judge(cleaned, system_prompt=SINGLE_SYSTEM_PROMPT)
    if isinstance(outcome, ParseFailure):
        raise MalformedJudgmentError(outcome.reason)

    judgment = outcome.judgment
    return SingleQueryResult(
        query=cleaned,
        needs_search=judgment.needs_search,
        ccp=single_ccp(judgment),
        fanout_queries=judgment.fanout_queries,
        snippets=judgment.snippets,
        urls=judgment.urls,
    )
