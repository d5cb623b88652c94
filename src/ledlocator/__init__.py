"""
LED Locator Package

Scan-driven inventory locator for warehouse access-controller boards.
Scanning a product then a tag lights the product's indicator; scanning
the tag again beacons the indicator until the pick is confirmed.

Commands are fire-and-forget 64-byte UDP frames. Nothing is persisted.
"""

from .core.locator import LedLocator
from .core.workflow import InventoryWorkflow
from .models.data_models import BoardIdentity, ScanOutcome, ScanResult
from .exceptions.custom_exceptions import LocatorError, InvalidArgumentError, TransportError

__version__ = "1.0.0"
__author__ = "Warehouse Automation Team"

__all__ = [
    "LedLocator",
    "InventoryWorkflow",
    "BoardIdentity",
    "ScanOutcome",
    "ScanResult",
    "LocatorError",
    "InvalidArgumentError",
    "TransportError"
]
