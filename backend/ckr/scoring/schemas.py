"""
Scoring: Pydantic schemas for scores, batch rows and the single-query response.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

NOT_AVAILABLE = "N/A"
NO_SEARCH_SENTINEL = "None — web search was not triggered"


class ScoreResult(BaseModel):
    """Normalized score for one judgment."""

    model_config = ConfigDict(frozen=True)

    ccp: int = Field(..., ge=0, le=100, description="Confidence/click probability, percent")
    search_depth: int = Field(default=0, ge=0, description="Fanout + snippet + URL count")


class BatchRow(BaseModel):
    """One query's line in the batch report. Score fields stay empty when the row failed."""

    index: int = Field(..., ge=1, description="1-based position in the submitted batch")
    query: str
    ccp: Optional[int] = Field(default=None, ge=0, le=100)
    fanouts: str = ""
    snippets: str = ""
    urls: str = ""
    search_depth: Optional[int] = Field(default=None, ge=0)
    error: str = NOT_AVAILABLE

    @property
    def failed(self) -> bool:
        return self.error != NOT_AVAILABLE


class SingleQueryResult(BaseModel):
    """Response body of the single-query endpoint."""

    query: str
    needs_search: bool
    ccp: int = Field(..., ge=0, le=100)
    fanout_queries: list[str] = Field(default_factory=list)
    snippets: list[str] = Field(default_factory=list)
    urls: list[str] = Field(default_factory=list)
