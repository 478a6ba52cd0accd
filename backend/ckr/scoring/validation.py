"""Input checks for queries and batches."""

from typing import Any

from ckr.errors import QueryValidationError

MIN_QUERY_LENGTH = 4
MAX_QUERY_LENGTH = 100

MIN_BATCH_SIZE = 2
MAX_BATCH_SIZE = 5


def clean_query(query: Any) -> str:
    """Trim and length-check one query; returns the trimmed text."""
    if not isinstance(query, str):
        raise QueryValidationError(f"Query must be between {MIN_QUERY_LENGTH} - {MAX_QUERY_LENGTH} chars")
    cleaned = query.strip()
    if not MIN_QUERY_LENGTH <= len(cleaned) <= MAX_QUERY_LENGTH:
        raise QueryValidationError(f"Query must be between {MIN_QUERY_LENGTH} - {MAX_QUERY_LENGTH} chars")
    return cleaned


def validate_batch(queries: Any) -> list:
    if not isinstance(queries, list) or not MIN_BATCH_SIZE <= len(queries) <= MAX_BATCH_SIZE:
        raise QueryValidationError(f"Provide {MIN_BATCH_SIZE}–{MAX_BATCH_SIZE} queries only")
    return queries
