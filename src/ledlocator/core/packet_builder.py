"""
Command frame encoding for the access-controller board.

Every command is one 64-byte datagram:

    0       packet type (0x17)
    1       function (0x40, remote activate / open door)
    2-3     reserved
    4-7     board serial number, little-endian
    8       door number
    9       indicator number (0 for a plain open-door command)
    10-11   duration, little-endian (0 = board default)
    40-43   sequence number, little-endian

All other bytes are zero. Nothing here touches the network.
"""

import struct
from typing import Any, Dict

from ..models.data_models import BoardIdentity
from ..exceptions.custom_exceptions import InvalidArgumentError
from ..utils.validation import (
    validate_door, validate_indicator, validate_duration,
    validate_serial_number, validate_sequence_number
)


FRAME_LENGTH = 64
PACKET_TYPE = 0x17
FUNCTION_REMOTE_ACTIVATE = 0x40

SERIAL_OFFSET = 4
DATA_OFFSET = 8
SEQUENCE_OFFSET = 40

_DATA_BLOCK = struct.Struct("<BBH")  # door, indicator, duration
_UINT32 = struct.Struct("<I")


def _build_frame(serial_number: int, door: int, indicator: int,
                 duration: int, sequence_number: int) -> bytes:
    frame = bytearray(FRAME_LENGTH)
    frame[0] = PACKET_TYPE
    frame[1] = FUNCTION_REMOTE_ACTIVATE
    _UINT32.pack_into(frame, SERIAL_OFFSET, serial_number)
    _DATA_BLOCK.pack_into(frame, DATA_OFFSET, door, indicator, duration)
    _UINT32.pack_into(frame, SEQUENCE_OFFSET, sequence_number)
    return bytes(frame)


def encode(board: BoardIdentity, door: int, indicator: int,
           sequence_number: int, duration: int = 0) -> bytes:
    """
    Encode a remote activate command for one indicator.

    Args:
        board: Target board identity
        door: Door number (1-4)
        indicator: Relay/LED/floor output number (1-80)
        sequence_number: Value drawn from a SequenceCounter
        duration: Activation duration, 0 for the board default

    Returns:
        64-byte command frame

    Raises InvalidArgumentError if any field is outside the controller range.
    """
    validate_serial_number(board.serial_number)
    validate_door(door)
    validate_indicator(indicator)
    validate_duration(duration)
    validate_sequence_number(sequence_number)

    return _build_frame(board.serial_number, door, indicator, duration, sequence_number)


def encode_open_door(board: BoardIdentity, door: int, sequence_number: int) -> bytes:
    """Encode a plain remote open-door command (no indicator selected)."""
    validate_serial_number(board.serial_number)
    validate_door(door)
    validate_sequence_number(sequence_number)

    return _build_frame(board.serial_number, door, 0, 0, sequence_number)


def decode(frame: bytes) -> Dict[str, Any]:
    """
    Decode a command frame back into its fields.

    Raises InvalidArgumentError if the frame is not a remote activate frame.
    """
    if len(frame) != FRAME_LENGTH:
        raise InvalidArgumentError(f"Frame must be {FRAME_LENGTH} bytes, got {len(frame)}")

    if frame[0] != PACKET_TYPE or frame[1] != FUNCTION_REMOTE_ACTIVATE:
        raise InvalidArgumentError(
            f"Unexpected packet type/function 0x{frame[0]:02X}/0x{frame[1]:02X}"
        )

    door, indicator, duration = _DATA_BLOCK.unpack_from(frame, DATA_OFFSET)
    return {
        "serial_number": _UINT32.unpack_from(frame, SERIAL_OFFSET)[0],
        "door": door,
        "indicator": indicator,
        "duration": duration,
        "sequence_number": _UINT32.unpack_from(frame, SEQUENCE_OFFSET)[0],
    }


def format_frame(frame: bytes) -> str:
    """Hex dump of a frame for logs and diagnostics."""
    return " ".join(f"{b:02X}" for b in frame)
