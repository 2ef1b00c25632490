"""Dashboard variable substitution for display strings."""

import re
from collections.abc import Mapping
from typing import Any

# Built-in variables with sensible defaults; caller variables take precedence
BUILTIN_VARIABLES = {
    "__rate_interval": "5m",
    "__interval": "1m",
    "__interval_ms": "60000",
    "__range": "1h",
    "__range_s": "3600",
    "__range_ms": "3600000",
}

VARIABLE_PATTERN = re.compile(r"\$\{([a-zA-Z_][a-zA-Z0-9_]*)\}")


def _format_variable_value(value: Any) -> str:
    """Render a variable value; multi-value variables are comma joined."""
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return str(value)


def replace_with_variables(text: str, variables: Mapping[str, Any] | None) -> str:
    """
    Substitute ${varname} placeholders in text.

    Args:
        text: String possibly containing ${varname} placeholders
        variables: Variable name -> value, never modified

    Returns:
        Text with known variables substituted; unknown placeholders
        are left as they are
    """
    if not text:
        return text
    all_vars = {**BUILTIN_VARIABLES, **(variables or {})}

    def _replace(match: re.Match) -> str:
        name = match.group(1)
        if name not in all_vars:
            return match.group(0)
        return _format_variable_value(all_vars[name])

    return VARIABLE_PATTERN.sub(_replace, text)
