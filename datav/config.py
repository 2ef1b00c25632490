"""Configuration management for the transform service."""

import json
import logging
from dataclasses import dataclass, field
from os import environ
from typing import Any

from dotenv import load_dotenv

TRUE_VALUES = {"1", "true", "yes", "on"}


class ConfigError(Exception):
    """Raised when configuration is invalid."""
    pass


@dataclass
class Config:
    """Service configuration loaded from environment variables."""

    # Transform behaviour
    strict_panel_types: bool = False  # Raise for unknown panel types
    variables: dict[str, Any] = field(default_factory=dict)  # Global dashboard variables

    # HTTP service
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"


def load_config() -> Config:
    """
    Load configuration from environment variables.

    Optional:
        - STRICT_PANEL_TYPES: Reject unknown panel types (default: false)
        - DASHBOARD_VARIABLES: JSON object of dashboard variables (default: {})
        - LOG_LEVEL: Logging level name (default: INFO)
        - HOST: Bind address (default: 0.0.0.0)
        - PORT: Listen port (default: 8080)

    Raises:
        ConfigError: If any variable has an invalid value.
    """
    load_dotenv()

    errors: list[str] = []

    strict = environ.get("STRICT_PANEL_TYPES", "").strip().lower() in TRUE_VALUES

    variables: dict[str, Any] = {}
    variables_str = environ.get("DASHBOARD_VARIABLES", "")
    if variables_str:
        try:
            variables = json.loads(variables_str)
        except json.JSONDecodeError:
            errors.append("DASHBOARD_VARIABLES must be valid JSON")
        else:
            if not isinstance(variables, dict):
                errors.append("DASHBOARD_VARIABLES must be a JSON object")
                variables = {}

    log_level = environ.get("LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        errors.append(f"LOG_LEVEL is not a valid level: {log_level}")

    port_str = environ.get("PORT", "8080")
    try:
        port = int(port_str)
    except ValueError:
        errors.append(f"PORT must be an integer, got: {port_str}")
        port = 0

    if errors:
        raise ConfigError("Configuration errors:\n" + "\n".join(f"  - {e}" for e in errors))

    return Config(
        strict_panel_types=strict,
        variables=variables,
        host=environ.get("HOST", "0.0.0.0"),
        port=port,
        log_level=log_level,
    )
