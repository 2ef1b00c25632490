"""Flask API exposing the Prometheus-to-panel transform.

The service never queries Prometheus itself; callers POST the raw response
along with the panel and query configuration.
"""

import logging

from flask import Flask, jsonify, request

from datav.config import ConfigError, load_config
from datav.dispatcher import to_json, transform
from datav.exceptions import DatavError
from datav.models import Panel, PanelQuery
from datav.test_data import PANEL_ALIASES, TEST_DATA

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = Flask(__name__)


def _validate_body(body) -> list[str]:
    """Check the shape of a transform request body."""
    if not isinstance(body, dict):
        return ["request body must be a JSON object"]

    errors = []
    panel_data = body.get("panel")
    if not isinstance(panel_data, dict) or not panel_data.get("type"):
        errors.append("panel with a type is required")
    for key in ("query", "variables"):
        if body.get(key) is not None and not isinstance(body[key], dict):
            errors.append(f"{key} must be an object")
    return errors


def _run_transform(body: dict, strict: bool, global_variables: dict):
    """Build panel/query objects from a request body and run the transform."""
    panel = Panel.from_api_response(body["panel"])
    query = PanelQuery.from_api_response(body.get("query") or {})

    # Request variables take precedence over configured dashboard variables
    variables = {**global_variables, **(body.get("variables") or {})}

    result = transform(body.get("data"), panel, query, variables, strict=strict)
    return panel, to_json(result)


@app.route("/api/transform", methods=["POST"])
def transform_data():
    """
    Transform a Prometheus response for a panel.

    Expects a JSON body:
    {
        "data": {"resultType": "matrix", "result": [...]},
        "panel": {"id": 1, "type": "graph", "plugins": {...}},
        "query": {"id": 65, "legend": "{{instance}}"},
        "variables": {"env": "prod"}
    }
    """
    body = request.get_json(silent=True)
    errors = _validate_body(body)
    if errors:
        return jsonify({
            "error": "Missing or invalid configuration",
            "details": errors,
        }), 400

    try:
        config = load_config()
        logging.getLogger().setLevel(config.log_level)

        panel, data = _run_transform(body, config.strict_panel_types, config.variables)
        logger.info(f"Transformed data for {panel.type} panel {panel.id}")
        return jsonify({"panel_type": panel.type, "data": data})

    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        return jsonify({"error": "Configuration error", "details": [str(e)]}), 500

    except DatavError as e:
        logger.warning(f"Transform rejected: {e}")
        return jsonify({"error": "Transform error", "details": [e.message]}), 400

    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return jsonify({
            "panel_type": "error",
            "error_message": f"Internal error: {type(e).__name__}",
        }), 500


@app.route("/health")
def health():
    """Health check endpoint."""
    return jsonify({"status": "ok"})


@app.route("/api/test/<panel_type>", methods=["GET"])
def get_test_data(panel_type: str):
    """
    Return demonstration output for a panel type.

    Supported types: graph (alias: timeseries), stat, table
    """
    panel_type = panel_type.lower()
    panel_type = PANEL_ALIASES.get(panel_type, panel_type)

    if panel_type not in TEST_DATA:
        return jsonify({
            "error": f"Unknown panel type: {panel_type}",
            "available_types": list(TEST_DATA.keys()),
        }), 404

    sample = TEST_DATA[panel_type]
    _panel, data = _run_transform(sample, strict=True, global_variables={})
    return jsonify({"panel_type": panel_type, "data": data})


def create_app():
    """Application factory for gunicorn."""
    return app


if __name__ == "__main__":
    config = load_config()
    app.run(host=config.host, port=config.port)
