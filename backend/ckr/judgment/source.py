"""
Judgment Source adapter: ask the model whether a query would trigger web search.

Transport problems raise JudgmentSourceError subclasses; anything the model
says comes back as a ParseOutcome.
"""

import logging
import time

import openai
from openai import OpenAI

from ckr.config import Settings
from ckr.errors import JudgmentTimeoutError, JudgmentTransportError
from ckr.judgment.llm_utils import get_client
from ckr.judgment.parsing import parse_judgment
from ckr.judgment.prompts import CONTRACT_VERSION, SINGLE_SYSTEM_PROMPT
from ckr.judgment.schemas import ParseFailure, ParseOutcome

logger = logging.getLogger(__name__)


class JudgmentSource:
    def __init__(self, client: OpenAI, model: str = "gpt-4o-mini", temperature: float = 0.0):
        self.client = client
        self.model = model
        self.temperature = temperature

    @classmethod
    def from_settings(cls, settings: Settings) -> "JudgmentSource":
        """Build from settings; raises ConfigurationError when the API key is missing."""
        return cls(
            get_client(settings),
            model=settings.model_judgment,
            temperature=settings.judgment_temperature,
        )

    def judge(self, query: str, system_prompt: str = SINGLE_SYSTEM_PROMPT) -> ParseOutcome:
        started = time.perf_counter()
        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                temperature=self.temperature,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": query},
                ],
            )
        except openai.APITimeoutError as e:
            logger.warning("Judgment timed out for %r: %s", query, e)
            raise JudgmentTimeoutError("Judgment source timed out") from e
        except openai.APIStatusError as e:
            logger.warning("Judgment HTTP %s for %r", e.status_code, query)
            raise JudgmentTransportError(f"Judgment source returned HTTP {e.status_code}") from e
        except openai.APIError as e:
            logger.warning("Judgment request failed for %r: %s", query, e)
            raise JudgmentTransportError(f"Judgment source request failed: {e}") from e

        elapsed = time.perf_counter() - started
        if not resp.choices:
            outcome = ParseFailure(reason="Judgment model returned no choices")
        else:
            outcome = parse_judgment(resp.choices[0].message.content)
        logger.info(
            "Judged %r in %.2fs (contract %s): %s",
            query,
            elapsed,
            CONTRACT_VERSION,
            outcome.kind,
        )
        return outcome
