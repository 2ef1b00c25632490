"""Transformer for graph panels."""

import logging
from collections.abc import Mapping
from typing import Any

from datav.legend import format_legend
from datav.models import (
    FIELD_TYPE_NUMBER,
    FIELD_TYPE_TIME,
    Field,
    Panel,
    PanelQuery,
    SeriesData,
)
from datav.prometheus.models import MatrixResult, QueryResult, RawSeries
from datav.transformers import register_transformer
from datav.transformers.base import BaseTransformer
from datav.variables import replace_with_variables

logger = logging.getLogger(__name__)


@register_transformer("graph")
class GraphTransformer(BaseTransformer):
    """Transform matrix results into one SeriesData per raw series."""

    def transform(
        self,
        query_result: QueryResult,
        panel: Panel,
        query: PanelQuery,
        variables: Mapping[str, Any] | None = None,
    ) -> list[SeriesData]:
        """
        Transform a matrix result to graph series.

        Series keep the order the backend returned them in. Results of any
        other type produce an empty list.
        """
        if not isinstance(query_result, MatrixResult):
            logger.debug(f"Ignoring unsupported result type: {query_result.result_type!r}")
            return []

        return [
            self._build_series(raw, query, variables)
            for raw in query_result.series
        ]

    def _build_series(
        self,
        raw: RawSeries,
        query: PanelQuery,
        variables: Mapping[str, Any] | None,
    ) -> SeriesData:
        """Build a single series, naming it from the legend template if set."""
        time_values = raw.get_timestamps()
        values = [self._parse_value(raw_value) for _ts, raw_value in raw.values]

        name = self._series_name(raw.metric)
        if query.legend:
            name = format_legend(query.legend, raw.metric)
            name = replace_with_variables(name, variables)

        return SeriesData(
            id=query.id,
            name=name,
            length=len(raw.values),
            fields=[
                Field(name="Time", type=FIELD_TYPE_TIME, values=time_values),
                Field(
                    name="Value",
                    type=FIELD_TYPE_NUMBER,
                    values=values,
                    labels=raw.metric,
                ),
            ],
        )
