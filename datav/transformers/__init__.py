"""Transformers for converting Prometheus query results to panel data.

Each panel module registers its transformer class under a panel type;
the dispatcher looks transformers up here by ``panel.type``.
"""

from .base import BaseTransformer

_TRANSFORMERS: dict[str, type[BaseTransformer]] = {}


def register_transformer(panel_type: str):
    """Register the decorated class as the transformer for panel_type."""
    def decorator(cls: type[BaseTransformer]) -> type[BaseTransformer]:
        if panel_type in _TRANSFORMERS:
            raise ValueError(f"Transformer already registered for {panel_type!r}")
        cls.panel_type = panel_type
        _TRANSFORMERS[panel_type] = cls
        return cls
    return decorator


def get_transformer(panel_type: str) -> BaseTransformer | None:
    """
    Look up the transformer for a panel type.

    Args:
        panel_type: Panel type tag ("graph", "stat" or "table")

    Returns:
        A fresh transformer, or None when the type has no transformer;
        unknown types are not an error here
    """
    transformer_class = _TRANSFORMERS.get(panel_type)
    return transformer_class() if transformer_class else None


def get_supported_types() -> list[str]:
    """Panel types with a registered transformer, in registration order."""
    return list(_TRANSFORMERS)


# Registration happens on import; the registry must exist first
from . import graph, stat, table  # noqa: E402,F401

__all__ = [
    "BaseTransformer",
    "get_transformer",
    "get_supported_types",
    "register_transformer",
]
