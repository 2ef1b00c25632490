"""Pytest fixtures for Prometheus transform tests."""

import pytest
from datav.models import Panel, PanelQuery
from datav.prometheus.models import parse_query_result, MatrixResult


@pytest.fixture
def matrix_response() -> dict:
    """Sample Prometheus range-query result with two series."""
    return {
        "resultType": "matrix",
        "result": [
            {
                "metric": {"__name__": "up", "instance": "host1:9090", "job": "prometheus"},
                "values": [
                    [1435781430.781, "1"],
                    [1435781445.781, "5"],
                    [1435781460.781, "3"],
                ],
            },
            {
                "metric": {"__name__": "up", "instance": "host2:9100", "job": "node"},
                "values": [
                    [1435781430.781, "0"],
                    [1435781445.781, "0"],
                ],
            },
        ],
    }


@pytest.fixture
def envelope_response(matrix_response: dict) -> dict:
    """Same result wrapped in the Prometheus HTTP API envelope."""
    return {"status": "success", "data": matrix_response}


@pytest.fixture
def vector_response() -> dict:
    """Instant-query result, which panels do not handle."""
    return {
        "resultType": "vector",
        "result": [
            {"metric": {"instance": "host1"}, "value": [1435781451.781, "1"]},
        ],
    }


@pytest.fixture
def matrix_result(matrix_response: dict) -> MatrixResult:
    """Parsed matrix result."""
    return parse_query_result(matrix_response)


@pytest.fixture
def graph_panel() -> Panel:
    """Create a sample graph panel."""
    return Panel(id=1, type="graph", title="Targets Up")


@pytest.fixture
def stat_panel() -> Panel:
    """Create a stat panel calculating the max value."""
    return Panel(
        id=2,
        type="stat",
        title="Peak",
        plugins={"stat": {"value": {"calc": "max"}}},
    )


@pytest.fixture
def table_panel() -> Panel:
    """Create a sample table panel."""
    return Panel(id=3, type="table", title="Samples")


@pytest.fixture
def query() -> PanelQuery:
    """Query without a legend template."""
    return PanelQuery(id=65, metrics="up")


@pytest.fixture
def legend_query() -> PanelQuery:
    """Query with an instance legend template."""
    return PanelQuery(id=65, metrics="up", legend="{{instance}}")
