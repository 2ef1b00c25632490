"""Prometheus range-query payload parsing."""

from .models import (
    MatrixResult,
    QueryResult,
    RawSeries,
    UnsupportedResult,
    parse_query_result,
    parse_sample_value,
)

__all__ = [
    "MatrixResult",
    "QueryResult",
    "RawSeries",
    "UnsupportedResult",
    "parse_query_result",
    "parse_sample_value",
]
