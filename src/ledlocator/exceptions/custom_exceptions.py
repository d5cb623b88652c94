"""Custom exceptions for LED locator package."""


class LocatorError(Exception):
    """Base exception for all LED locator related errors."""
    pass


class InvalidArgumentError(LocatorError):
    """
    Raised when a command argument is outside the controller's range.

    Frames are never built or sent for rejected arguments.
    """
    pass


class TransportError(LocatorError):
    """Raised when a command datagram could not be sent to the board."""
    pass


class WorkflowConflict(LocatorError):
    """
    Raised when a scan cannot be applied in the current workflow state.

    Covers a tag that is already associated during an import and any
    input other than the confirmation token while an export is pending.
    """
    pass


class ConfigurationError(LocatorError):
    """Raised when locator configuration is invalid."""
    pass


class ScannerError(LocatorError):
    """Raised when a scan source cannot be opened or read."""
    pass
