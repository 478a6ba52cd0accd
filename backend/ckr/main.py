"""
CKR API: search-trigger likelihood (CCP) for one query or a small batch.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from ckr import __version__
from ckr.config import Settings, get_settings
from ckr.errors import ConfigurationError, JudgmentSourceError, MalformedJudgmentError, QueryValidationError
from ckr.judgment import JudgmentSource
from ckr.logging_config import configure_logging
from ckr.report import build_csv, report_date, report_filename
from ckr.scoring import SingleQueryResult, run_batch, score_single

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    configure_logging(get_settings().log_level)
    yield


app = FastAPI(title="CKR", version=__version__, lifespan=lifespan)


class SingleQueryRequest(BaseModel):
    query: Any = None


class BulkQueryRequest(BaseModel):
    queries: Any = None


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    content = exc.detail if isinstance(exc.detail, dict) else {"error": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"error": "Request body must be a JSON object"})


def get_judgment_source(settings: Settings = Depends(get_settings)) -> JudgmentSource:
    """Fails the whole request with 503 when the model credential is missing."""
    try:
        return JudgmentSource.from_settings(settings)
    except ConfigurationError as e:
        logger.error("Judgment source unavailable: %s", e)
        raise HTTPException(
            status_code=503,
            detail="Service unavailable: judgment model API key is not configured",
        )


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/api/single", response_model=SingleQueryResult)
def single_query(body: SingleQueryRequest, source: JudgmentSource = Depends(get_judgment_source)):
    """
    Score one query (4-100 chars) with the log-saturation policy.
    """
    try:
        return score_single(body.query, source)
    except QueryValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except MalformedJudgmentError as e:
        raise HTTPException(
            status_code=500,
            detail={"error": "Could not understand the judgment model's answer. Try again.", "detail": str(e)},
        )
    except JudgmentSourceError as e:
        raise HTTPException(
            status_code=500,
            detail={"error": "Judgment model call failed. Try again.", "detail": str(e)},
        )
    except Exception as e:
        logger.exception("Unexpected error scoring single query")
        raise HTTPException(
            status_code=500,
            detail={"error": "Something went wrong. Try again.", "detail": str(e) or "Unknown error"},
        )


@app.post("/api/bulk")
def bulk_query(
    body: BulkQueryRequest,
    source: JudgmentSource = Depends(get_judgment_source),
    settings: Settings = Depends(get_settings),
):
    """
    Score 2-5 queries in order and return the CSV report as an attachment.
    """
    try:
        rows = run_batch(body.queries, source)
    except QueryValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    date_str = report_date(settings.report_timezone)
    csv_text = build_csv(rows, date_str, generated_by=settings.report_generated_by)
    filename = report_filename(settings.report_filename_prefix, date_str)
    return Response(
        content=csv_text,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
