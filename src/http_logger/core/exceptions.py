"""
Exception hierarchy for HTTP Logger.

The logging path itself never raises to its callers; these exceptions travel
between internal layers (a sink reporting a failed write to its dispatcher) or
come out of explicit configuration loading.
"""

from typing import Optional

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# BASE
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class HTTPLoggerException(Exception):
    """Base exception for HTTP Logger."""

    def __init__(self, message: str, **kwargs):
        self.message = message
        super().__init__(message)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# SINKS
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class SinkWriteError(HTTPLoggerException):
    """
    A sink could not write a formatted line.

    Args:
        message: Error description
        sink: Name of the failing sink (e.g. "file")
        line: The line that was not written
    """

    def __init__(self, message: str, sink: Optional[str] = None, line: Optional[str] = None):
        self.sink = sink
        self.line = line

        full_message = message
        if sink:
            full_message = f"[{sink}] {message}"
        super().__init__(full_message)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# CONFIGURATION
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class ConfigurationError(HTTPLoggerException):
    """Configuration error."""


class ConfigValidationError(ConfigurationError):
    """Raised when a configuration file or environment is invalid."""
