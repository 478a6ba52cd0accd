"""Pytest fixtures for judgment, scoring and API tests."""

from unittest.mock import MagicMock

import pytest

from ckr.judgment.schemas import Judgment, ParseFailure, ParseSuccess


class FakeJudgmentSource:
    """Stands in for JudgmentSource; answers from a query -> outcome/exception map."""

    def __init__(self, answers=None, default=None):
        self.answers = answers or {}
        self.default = default or ParseSuccess(judgment=Judgment(needs_search=False))
        self.calls: list[tuple[str, str]] = []

    def judge(self, query: str, system_prompt: str = "") -> ParseSuccess | ParseFailure:
        self.calls.append((query, system_prompt))
        answer = self.answers.get(query, self.default)
        if isinstance(answer, Exception):
            raise answer
        return answer


def make_completion(content):
    """Shape of openai's ChatCompletion as far as JudgmentSource reads it."""
    choice = MagicMock()
    choice.message.content = content
    choice.message.role = "assistant"
    resp = MagicMock()
    resp.choices = [choice]
    return resp


@pytest.fixture
def fake_source():
    return FakeJudgmentSource()


@pytest.fixture
def search_judgment():
    return Judgment(
        needs_search=True,
        fanout_queries=["q1", "q2", "q3"],
        snippets=["s1", "s2"],
        urls=["u1", "u2"],
    )


@pytest.fixture
def saturated_judgment():
    return Judgment(
        needs_search=True,
        fanout_queries=[f"q{i}" for i in range(1, 7)],
        snippets=[f"s{i}" for i in range(1, 6)],
        urls=[f"https://example.com/{i}" for i in range(1, 6)],
    )


@pytest.fixture
def no_search_judgment():
    return Judgment(needs_search=False)


@pytest.fixture
def llm_response_json():
    """Minimal valid judgment JSON string as returned by the model."""
    return '''{
        "needs_search": true,
        "fanout_queries": ["best sunglasses 2025 men", "polarized sunglasses reviews"],
        "snippets": ["Top picks include Ray-Ban and Oakley."],
        "urls": ["https://www.gq.com/sunglasses", "https://www.gq.com/sunglasses"]
    }'''


@pytest.fixture
def llm_response_with_markdown(llm_response_json):
    """Model response wrapped in markdown code block."""
    return "```json\n" + llm_response_json + "\n```"
