"""Data models for panel configuration and panel data."""

import math
from dataclasses import dataclass, field
from typing import Any

FIELD_TYPE_TIME = "time"
FIELD_TYPE_NUMBER = "number"


def json_number(value: Any) -> Any:
    """
    Make a value safe for strict JSON.

    NaN and infinities have no JSON literal, so they are written back in
    their Prometheus string forms ("NaN", "+Inf", "-Inf").
    """
    if isinstance(value, float) and not math.isfinite(value):
        if math.isnan(value):
            return "NaN"
        return "+Inf" if value > 0 else "-Inf"
    return value


@dataclass
class Panel:
    """Represents a dashboard panel."""

    id: int
    type: str
    title: str = ""
    plugins: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_api_response(cls, panel_data: dict[str, Any]) -> "Panel":
        """Parse panel from dashboard JSON."""
        return cls(
            id=panel_data.get("id", 0),
            type=panel_data.get("type", "unknown"),
            title=panel_data.get("title", "Untitled"),
            plugins=panel_data.get("plugins") or {},
        )

    def get_stat_calc(self) -> str | None:
        """Get the stat value calculation mode (plugins.stat.value.calc)."""
        stat = self.plugins.get("stat") if isinstance(self.plugins, dict) else None
        value = stat.get("value") if isinstance(stat, dict) else None
        if not isinstance(value, dict):
            return None
        return value.get("calc")


@dataclass
class PanelQuery:
    """Represents one query of a panel."""

    id: int
    legend: str = ""
    metrics: str = ""

    @classmethod
    def from_api_response(cls, query_data: dict[str, Any]) -> "PanelQuery":
        """Parse query from panel JSON."""
        return cls(
            id=query_data.get("id", 0),
            legend=query_data.get("legend") or "",
            metrics=query_data.get("metrics") or "",
        )


@dataclass
class Field:
    """A named column of values inside a series."""

    name: str
    type: str
    values: list[Any]
    labels: dict[str, str] | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "type": self.type,
            "values": [json_number(v) for v in self.values],
        }
        if self.labels is not None:
            data["labels"] = self.labels
        return data


@dataclass
class SeriesData:
    """
    A single series for graph and stat panels.

    Always holds two fields, Time then Value, and ``length`` equals the
    number of values in each. Invalid samples are kept as None in the
    Value field so timestamps stay aligned.
    """

    id: int
    name: str
    length: int
    fields: list[Field]

    @property
    def time_field(self) -> Field:
        return self.fields[0]

    @property
    def value_field(self) -> Field:
        return self.fields[1]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "length": self.length,
            "fields": [f.to_dict() for f in self.fields],
        }


@dataclass
class StatPluginData:
    """Series plus the single value displayed by a stat panel."""

    series: list[SeriesData]
    value: float | int | None = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "series": [s.to_dict() for s in self.series],
            "value": json_number(self.value),
        }


@dataclass
class TableColumn:
    """Column definition for a table series."""

    header: str
    can_filter: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {"Header": self.header, "canFilter": self.can_filter}


@dataclass
class TableSeries:
    """One table (columns plus rows) per raw series."""

    name: str
    columns: list[TableColumn]
    rows: list[dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "columns": [c.to_dict() for c in self.columns],
            "rows": [{k: json_number(v) for k, v in row.items()} for row in self.rows],
        }
