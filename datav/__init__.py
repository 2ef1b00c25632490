"""Convert Prometheus range-query results into graph, stat and table panel data."""

from .dispatcher import transform
from .exceptions import DatavError, SampleParseError, UnsupportedPanelTypeError
from .models import Panel, PanelQuery, SeriesData, StatPluginData, TableSeries

__all__ = [
    "transform",
    "DatavError",
    "SampleParseError",
    "UnsupportedPanelTypeError",
    "Panel",
    "PanelQuery",
    "SeriesData",
    "StatPluginData",
    "TableSeries",
]
