"""Tests for payload parsing and panel data models."""

import math

import pytest
from datav.exceptions import SampleParseError
from datav.models import (
    json_number,
    Field,
    Panel,
    PanelQuery,
    SeriesData,
    StatPluginData,
    TableColumn,
    TableSeries,
)
from datav.prometheus.models import (
    MatrixResult,
    RawSeries,
    UnsupportedResult,
    parse_query_result,
    parse_sample_value,
)


class TestParseSampleValue:
    """Tests for parse_sample_value."""

    def test_parses_numeric_strings(self):
        assert parse_sample_value("1.5") == 1.5
        assert parse_sample_value("0") == 0.0
        assert parse_sample_value("-3") == -3.0

    def test_parses_prometheus_special_values(self):
        """Test NaN and infinities are legitimate values, not errors."""
        assert math.isnan(parse_sample_value("NaN"))
        assert parse_sample_value("+Inf") == math.inf
        assert parse_sample_value("-Inf") == -math.inf

    def test_accepts_numbers(self):
        assert parse_sample_value(2) == 2.0
        assert parse_sample_value(2.5) == 2.5

    def test_invalid_value_raises(self):
        with pytest.raises(SampleParseError) as exc_info:
            parse_sample_value("abc")
        assert exc_info.value.raw_value == "abc"

    def test_none_and_bool_raise(self):
        with pytest.raises(SampleParseError):
            parse_sample_value(None)
        with pytest.raises(SampleParseError):
            parse_sample_value(True)

    def test_sample_parse_error_is_value_error(self):
        assert isinstance(SampleParseError("x"), ValueError)


class TestRawSeries:
    """Tests for RawSeries parsing."""

    def test_from_api_response(self):
        series = RawSeries.from_api_response({
            "metric": {"instance": "host1"},
            "values": [[1, "1"], [2, "2"]],
        })
        assert series.metric == {"instance": "host1"}
        assert series.values == [(1, "1"), (2, "2")]
        assert series.get_timestamps() == [1, 2]

    def test_missing_keys_are_empty(self):
        series = RawSeries.from_api_response({})
        assert series.metric == {}
        assert series.values == []

    def test_short_sample_padded(self):
        """Test samples missing a value keep their timestamp."""
        series = RawSeries.from_api_response({"metric": {}, "values": [[1], "junk"]})
        assert series.values == [(1, None), (None, None)]


class TestParseQueryResult:
    """Tests for parse_query_result."""

    def test_matrix(self, matrix_response: dict):
        result = parse_query_result(matrix_response)
        assert isinstance(result, MatrixResult)
        assert result.result_type == "matrix"
        assert len(result.series) == 2
        assert result.series[0].metric["instance"] == "host1:9090"

    def test_envelope_is_unwrapped(self, envelope_response: dict):
        result = parse_query_result(envelope_response)
        assert isinstance(result, MatrixResult)
        assert len(result.series) == 2

    def test_vector_is_unsupported(self, vector_response: dict):
        result = parse_query_result(vector_response)
        assert isinstance(result, UnsupportedResult)
        assert result.result_type == "vector"

    def test_missing_result_type(self):
        result = parse_query_result({"result": []})
        assert isinstance(result, UnsupportedResult)
        assert result.result_type == ""

    def test_missing_result_list(self):
        result = parse_query_result({"resultType": "matrix"})
        assert isinstance(result, MatrixResult)
        assert result.series == []

    def test_non_dict_series_skipped(self):
        result = parse_query_result({"resultType": "matrix", "result": ["junk", {"metric": {}}]})
        assert len(result.series) == 1


class TestPanel:
    """Tests for Panel and PanelQuery."""

    def test_from_api_response(self):
        panel = Panel.from_api_response({
            "id": 7,
            "type": "stat",
            "title": "Requests",
            "plugins": {"stat": {"value": {"calc": "sum"}}},
        })
        assert panel.id == 7
        assert panel.type == "stat"
        assert panel.title == "Requests"
        assert panel.get_stat_calc() == "sum"

    def test_defaults(self):
        panel = Panel.from_api_response({})
        assert panel.id == 0
        assert panel.type == "unknown"
        assert panel.title == "Untitled"
        assert panel.get_stat_calc() is None

    def test_query_from_api_response(self):
        query = PanelQuery.from_api_response({"id": 65, "metrics": "up", "legend": None})
        assert query.id == 65
        assert query.metrics == "up"
        assert query.legend == ""


class TestToDict:
    """Tests for JSON shapes of panel data."""

    def test_series_to_dict(self):
        series = SeriesData(
            id=1,
            name="s",
            length=1,
            fields=[
                Field(name="Time", type="time", values=[0]),
                Field(name="Value", type="number", values=[1.0], labels={"a": "b"}),
            ],
        )
        assert series.to_dict() == {
            "id": 1,
            "name": "s",
            "length": 1,
            "fields": [
                {"name": "Time", "type": "time", "values": [0]},
                {"name": "Value", "type": "number", "values": [1.0], "labels": {"a": "b"}},
            ],
        }

    def test_stat_to_dict(self):
        assert StatPluginData(series=[], value=3).to_dict() == {"series": [], "value": 3}

    def test_table_to_dict(self):
        table = TableSeries(
            name="t",
            columns=[TableColumn(header="Time"), TableColumn(header="Value")],
            rows=[{"Time": 0, "Value": 1.0}],
        )
        assert table.to_dict() == {
            "name": "t",
            "columns": [
                {"Header": "Time", "canFilter": True},
                {"Header": "Value", "canFilter": True},
            ],
            "rows": [{"Time": 0, "Value": 1.0}],
        }


class TestMalformedPayloads:
    """Tests that odd payload shapes are read leniently."""

    @pytest.mark.parametrize("payload", [["x"], "matrix", 5, None])
    def test_non_dict_payload_is_unsupported(self, payload):
        result = parse_query_result(payload)
        assert isinstance(result, UnsupportedResult)
        assert result.result_type == ""

    def test_non_dict_envelope_data(self):
        result = parse_query_result({"status": "success", "data": ["x"]})
        assert isinstance(result, UnsupportedResult)

    def test_non_list_result(self):
        result = parse_query_result({"resultType": "matrix", "result": {"a": 1}})
        assert isinstance(result, MatrixResult)
        assert result.series == []

    def test_non_string_result_type(self):
        result = parse_query_result({"resultType": 5, "result": []})
        assert isinstance(result, UnsupportedResult)
        assert result.result_type == "5"

    def test_non_dict_metric_is_empty(self):
        series = RawSeries.from_api_response({"metric": "abc", "values": [[0, "1"]]})
        assert series.metric == {}
        assert series.values == [(0, "1")]

    @pytest.mark.parametrize("values", [5, "abc", {"0": "1"}])
    def test_non_list_values_are_empty(self, values):
        series = RawSeries.from_api_response({"metric": {"a": "b"}, "values": values})
        assert series.metric == {"a": "b"}
        assert series.values == []


class TestJsonNumber:
    """Tests for strict-JSON number conversion."""

    def test_finite_values_unchanged(self):
        assert json_number(1.5) == 1.5
        assert json_number(0) == 0
        assert json_number(None) is None
        assert json_number("x") == "x"

    def test_non_finite_values(self):
        assert json_number(math.nan) == "NaN"
        assert json_number(math.inf) == "+Inf"
        assert json_number(-math.inf) == "-Inf"

    def test_series_to_dict_converts_values(self):
        series = SeriesData(
            id=1,
            name="s",
            length=3,
            fields=[
                Field(name="Time", type="time", values=[0, 1, 2]),
                Field(name="Value", type="number", values=[math.nan, math.inf, None]),
            ],
        )
        assert series.to_dict()["fields"][1]["values"] == ["NaN", "+Inf", None]

    def test_table_rows_converted(self):
        table = TableSeries(name="t", columns=[], rows=[{"Time": 0, "Value": -math.inf}])
        assert table.to_dict()["rows"] == [{"Time": 0, "Value": "-Inf"}]

    def test_stat_value_converted(self):
        assert StatPluginData(series=[], value=math.inf).to_dict()["value"] == "+Inf"

    def test_panel_with_odd_plugins(self):
        """Test malformed plugin config yields no calc mode."""
        assert Panel(id=1, type="stat", plugins=["x"]).get_stat_calc() is None
        assert Panel(id=1, type="stat", plugins={"stat": "x"}).get_stat_calc() is None
        assert Panel(id=1, type="stat", plugins={"stat": {"value": 3}}).get_stat_calc() is None
