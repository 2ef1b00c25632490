"""Base transformer for converting Prometheus query results to panel data."""

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from datav.exceptions import SampleParseError
from datav.models import Panel, PanelQuery
from datav.prometheus.models import QueryResult, parse_sample_value

logger = logging.getLogger(__name__)


class BaseTransformer(ABC):
    """
    Base class for panel type transformers.

    Each transformer converts a parsed Prometheus query result into the
    data structure its panel type renders.
    """

    panel_type: str = ""

    @abstractmethod
    def transform(
        self,
        query_result: QueryResult,
        panel: Panel,
        query: PanelQuery,
        variables: Mapping[str, Any] | None = None,
    ) -> Any:
        """
        Transform a query result to panel data.

        Args:
            query_result: Parsed Prometheus response
            panel: Panel configuration
            query: Query configuration (id, legend template)
            variables: Read-only dashboard variables for name substitution

        Returns:
            Panel-type specific data
        """
        pass

    def _series_name(self, metric: dict[str, str]) -> str:
        """
        Serialize a label set into a series name.

        Produces compact JSON with ':' replaced by '=', e.g.
        {"__name__"="up","instance"="host1=9090"}
        """
        serialized = json.dumps(metric, separators=(",", ":"), ensure_ascii=False)
        return serialized.replace(":", "=")

    def _parse_value(self, raw_value: Any) -> float | None:
        """
        Parse a sample value.

        Returns:
            The float value, or None if the sample is invalid
        """
        try:
            return parse_sample_value(raw_value)
        except SampleParseError as e:
            logger.debug(f"Invalid sample: {e}")
            return None
