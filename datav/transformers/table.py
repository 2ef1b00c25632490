"""Transformer for table panels."""

import logging
import math
from collections.abc import Mapping
from decimal import ROUND_HALF_DOWN, ROUND_HALF_UP, Decimal
from typing import Any

from datav.models import Panel, PanelQuery, TableColumn, TableSeries
from datav.prometheus.models import MatrixResult, QueryResult, RawSeries
from datav.transformers import register_transformer
from datav.transformers.base import BaseTransformer

logger = logging.getLogger(__name__)

VALUE_QUANTUM = Decimal("1e-5")


@register_transformer("table")
class TableTransformer(BaseTransformer):
    """Transform matrix results into one Time/Value table per raw series."""

    def transform(
        self,
        query_result: QueryResult,
        panel: Panel,
        query: PanelQuery,
        variables: Mapping[str, Any] | None = None,
    ) -> list[TableSeries]:
        """
        Transform table panel data.

        Table names are always the serialized label set; legend templates
        and variables are not applied to tables.
        """
        if not isinstance(query_result, MatrixResult):
            logger.debug(f"Ignoring unsupported result type: {query_result.result_type!r}")
            return []

        return [self._build_table(raw) for raw in query_result.series]

    def _columns(self) -> list[TableColumn]:
        return [
            TableColumn(header="Time", can_filter=True),
            TableColumn(header="Value", can_filter=True),
        ]

    def _build_table(self, raw: RawSeries) -> TableSeries:
        rows = []
        for timestamp, raw_value in raw.values:
            rows.append({
                "Time": timestamp,
                "Value": self._format_cell(self._parse_value(raw_value)),
            })

        return TableSeries(
            name=self._series_name(raw.metric),
            columns=self._columns(),
            rows=rows,
        )

    def _format_cell(self, value: float | None) -> float | None:
        """
        Round a value for display.

        Ties round towards positive infinity on the decimal value, so
        "0.015625" shows as 0.01563 and "-0.015625" as -0.01562.
        """
        if value is None or not math.isfinite(value):
            return value
        decimal_value = Decimal(str(value))
        # Already within 5 decimals; also keeps large values out of quantize
        if decimal_value.as_tuple().exponent >= VALUE_QUANTUM.as_tuple().exponent:
            return value
        rounding = ROUND_HALF_UP if value >= 0 else ROUND_HALF_DOWN
        return float(decimal_value.quantize(VALUE_QUANTUM, rounding=rounding))
