"""Core protocol and workflow logic for LED locator."""

from .packet_builder import encode, encode_open_door, decode
from .sequence import SequenceCounter
from .beacon import LocateBeacon
from .workflow import InventoryWorkflow
from .locator import LedLocator

__all__ = [
    "encode",
    "encode_open_door",
    "decode",
    "SequenceCounter",
    "LocateBeacon",
    "InventoryWorkflow",
    "LedLocator"
]
