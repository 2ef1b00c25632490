"""Entry point: route a Prometheus payload to the transformer for a panel type."""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from datav.exceptions import UnsupportedPanelTypeError
from datav.models import Panel, PanelQuery, SeriesData, StatPluginData, TableSeries
from datav.prometheus.models import parse_query_result
from datav.transformers import get_transformer

logger = logging.getLogger(__name__)

PanelData = list[SeriesData] | StatPluginData | list[TableSeries]


def transform(
    raw_data: dict[str, Any] | None,
    panel: Panel,
    query: PanelQuery,
    variables: Mapping[str, Any] | None = None,
    strict: bool = False,
) -> PanelData | None:
    """
    Convert a Prometheus query response to data for a panel.

    Args:
        raw_data: Prometheus response, bare or wrapped in {"status", "data"}
        panel: Panel configuration; its type selects the transformer
        query: Query configuration (id, legend template)
        variables: Dashboard variables used when rendering legend names
        strict: Raise for unknown panel types instead of returning None

    Returns:
        list[SeriesData] for graph, StatPluginData for stat,
        list[TableSeries] for table, or None for empty input or an
        unknown panel type

    Raises:
        UnsupportedPanelTypeError: Unknown panel type with strict=True
    """
    if not raw_data:
        return None

    transformer = get_transformer(panel.type)
    if transformer is None:
        if strict:
            raise UnsupportedPanelTypeError(panel.type)
        logger.debug(f"No transformer for panel type {panel.type!r}")
        return None

    # Snapshot so concurrent updates by the caller can't change names mid-call
    snapshot = MappingProxyType(dict(variables or {}))

    query_result = parse_query_result(raw_data)
    return transformer.transform(query_result, panel, query, snapshot)


def to_json(data: PanelData | None) -> Any:
    """Convert panel data to JSON-serializable structures."""
    if data is None:
        return None
    if isinstance(data, list):
        return [item.to_dict() for item in data]
    return data.to_dict()
