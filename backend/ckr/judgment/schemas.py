"""
Judgment Source: Pydantic schemas for the search-trigger decision and its parse outcome.
"""

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

LIST_FIELDS = ("fanout_queries", "snippets", "urls")


def as_bool(value) -> bool:
    """Read a loosely typed yes/no flag; "false"/"no"/"0" strings count as false."""
    if isinstance(value, str):
        return value.strip().lower() not in ("", "false", "no", "0", "null", "none")
    return bool(value)


class Judgment(BaseModel):
    """
    Search-trigger decision for one query.

    When needs_search is false the three lists are always empty, whatever
    the model returned alongside the decision.
    """

    model_config = ConfigDict(frozen=True)

    needs_search: bool = False
    fanout_queries: list[str] = Field(default_factory=list, description="Sub-queries the assistant would issue, in order")
    snippets: list[str] = Field(default_factory=list, description="Short synthesized result snippets")
    urls: list[str] = Field(default_factory=list, description="Source URLs, possibly with duplicates")

    @model_validator(mode="before")
    @classmethod
    def _clamp_when_no_search(cls, data):
        if not isinstance(data, dict):
            return data
        data = dict(data)
        data["needs_search"] = as_bool(data.get("needs_search"))
        for key in LIST_FIELDS:
            if not data["needs_search"] or data.get(key) is None:
                data[key] = []
        return data

    @property
    def distinct_urls(self) -> list[str]:
        """URLs deduplicated by exact string match, first occurrence kept."""
        return list(dict.fromkeys(self.urls))


class ParseSuccess(BaseModel):
    """Model output parsed into a Judgment."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    judgment: Judgment


class ParseFailure(BaseModel):
    """Model output that could not be read as a Judgment."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["failure"] = "failure"
    reason: str


ParseOutcome = Union[ParseSuccess, ParseFailure]
