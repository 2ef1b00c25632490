"""Data models for Prometheus range-query responses."""

from dataclasses import dataclass, field
from typing import Any

from datav.exceptions import SampleParseError

MATRIX = "matrix"


def parse_sample_value(raw_value: Any) -> float:
    """
    Parse a sample value from its Prometheus string encoding.

    Prometheus encodes sample values as strings so that "NaN", "+Inf" and
    "-Inf" survive JSON. Those parse to the matching float values and are
    not errors.

    Args:
        raw_value: Value as received, usually a string like "0.25"

    Returns:
        Parsed float

    Raises:
        SampleParseError: If the value is not a number
    """
    if isinstance(raw_value, bool):
        raise SampleParseError(raw_value)
    try:
        return float(raw_value)
    except (TypeError, ValueError) as e:
        raise SampleParseError(raw_value) from e


def _split_sample(pair: Any) -> tuple[Any, Any]:
    """Split a [timestamp, value] pair, padding missing parts with None."""
    if not isinstance(pair, (list, tuple)):
        return None, None
    timestamp = pair[0] if len(pair) > 0 else None
    raw_value = pair[1] if len(pair) > 1 else None
    return timestamp, raw_value


@dataclass
class RawSeries:
    """One series of a matrix result: its label set and its samples."""

    metric: dict[str, str]
    values: list[tuple[Any, Any]] = field(default_factory=list)

    @classmethod
    def from_api_response(cls, series_data: dict[str, Any]) -> "RawSeries":
        """Parse a series from a matrix result entry."""
        metric = series_data.get("metric")
        if not isinstance(metric, dict):
            metric = {}
        samples = series_data.get("values")
        if not isinstance(samples, list):
            samples = []
        return cls(
            metric=dict(metric),
            values=[_split_sample(pair) for pair in samples],
        )

    def get_timestamps(self) -> list[Any]:
        """Get timestamps in sample order."""
        return [timestamp for timestamp, _raw in self.values]


@dataclass
class MatrixResult:
    """A range-query result: ordered series with (timestamp, value) samples."""

    series: list[RawSeries] = field(default_factory=list)
    result_type: str = MATRIX


@dataclass
class UnsupportedResult:
    """Any result whose resultType is not handled (vector, scalar, string...)."""

    result_type: str


QueryResult = MatrixResult | UnsupportedResult


def parse_query_result(payload: Any) -> QueryResult:
    """
    Parse a Prometheus query response into a QueryResult.

    Handles two formats:
    - Bare: {"resultType": ..., "result": [...]}
    - Envelope: {"status": "success", "data": {"resultType": ..., "result": [...]}}

    Args:
        payload: Decoded JSON response; anything but a dict is unsupported

    Returns:
        MatrixResult for matrix responses, UnsupportedResult otherwise
    """
    if not isinstance(payload, dict):
        return UnsupportedResult(result_type="")

    data = payload
    if "resultType" not in payload and isinstance(payload.get("data"), dict):
        data = payload["data"]

    result_type = data.get("resultType") or ""
    if result_type != MATRIX:
        return UnsupportedResult(result_type=str(result_type))

    results = data.get("result")
    if not isinstance(results, list):
        results = []

    series = [
        RawSeries.from_api_response(series_data)
        for series_data in results
        if isinstance(series_data, dict)
    ]
    return MatrixResult(series=series)
