"""Custom exception classes for LED locator package."""

from .custom_exceptions import (
    LocatorError,
    InvalidArgumentError,
    TransportError,
    WorkflowConflict,
    ConfigurationError,
    ScannerError
)

__all__ = [
    "LocatorError",
    "InvalidArgumentError",
    "TransportError",
    "WorkflowConflict",
    "ConfigurationError",
    "ScannerError"
]
