"""Legend template parsing."""

import re

# {{label}} with a Prometheus label name inside
LEGEND_TOKEN_PATTERN = re.compile(r"\{\{([a-zA-Z_][a-zA-Z0-9_]*)\}\}")


def parse_legend_format(legend: str | None) -> list[str]:
    """
    Extract label names referenced by a legend template.

    Args:
        legend: Template like "{{instance}} - {{job}}"

    Returns:
        Label names in order of appearance, duplicates included.
        Malformed placeholders yield no token.
    """
    if not legend:
        return []
    return LEGEND_TOKEN_PATTERN.findall(legend)


def format_legend(legend: str, labels: dict[str, str]) -> str:
    """Replace each {{label}} in the template with its value from labels.

    Placeholders whose label is missing or empty are left as they are.
    """
    name = legend
    for label in parse_legend_format(legend):
        value = labels.get(label)
        if value:
            name = name.replace(f"{{{{{label}}}}}", str(value))
    return name
