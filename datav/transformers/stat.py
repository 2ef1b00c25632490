"""Transformer for stat panels."""

import logging
from collections.abc import Mapping
from typing import Any

from datav.aggregate import calc_value_on_series_data
from datav.models import Panel, PanelQuery, StatPluginData
from datav.prometheus.models import QueryResult
from datav.transformers import register_transformer
from datav.transformers.graph import GraphTransformer

logger = logging.getLogger(__name__)


@register_transformer("stat")
class StatTransformer(GraphTransformer):
    """Transform matrix results into series plus one calculated value."""

    def transform(
        self,
        query_result: QueryResult,
        panel: Panel,
        query: PanelQuery,
        variables: Mapping[str, Any] | None = None,
    ) -> StatPluginData:
        """
        Transform stat panel data.

        The value is calculated from the first series with the panel's
        configured calc mode, and is 0 when there are no series.
        """
        series = super().transform(query_result, panel, query, variables)
        data = StatPluginData(series=series, value=0)

        if series:
            calc = panel.get_stat_calc()
            data.value = calc_value_on_series_data(series[0], calc)
            logger.debug(f"Stat value ({calc or 'last'}) for panel {panel.id}: {data.value}")

        return data
