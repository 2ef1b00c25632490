"""Custom exceptions for Prometheus-to-panel transforms."""


class DatavError(Exception):
    """Base exception for transform errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class SampleParseError(DatavError, ValueError):
    """Raised when a sample value cannot be parsed as a number."""

    def __init__(self, raw_value: object):
        self.raw_value = raw_value
        super().__init__(f"Cannot parse sample value: {raw_value!r}")


class UnsupportedPanelTypeError(DatavError):
    """Raised in strict mode when no transformer is registered for a panel type."""

    def __init__(self, panel_type: str):
        self.panel_type = panel_type
        super().__init__(f"Unsupported panel type: {panel_type}")
