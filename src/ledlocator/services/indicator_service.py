"""Indicator control service: encode and send commands for one board."""

import logging
from typing import Optional

from ..models.data_models import BoardIdentity, OffPolicy
from ..core.packet_builder import encode, encode_open_door
from ..core.sequence import SequenceCounter
from ..utils.validation import validate_door, validate_duration, validate_indicator
from .udp_service import UdpTransport


class IndicatorService:
    """Turns indicators on (and, per policy, off) on the configured board."""

    def __init__(self, board: BoardIdentity, transport: UdpTransport,
                 counter: SequenceCounter, door: int = 1, duration: int = 0,
                 off_policy: OffPolicy = OffPolicy.SIMULATE):
        validate_door(door)
        validate_duration(duration)

        self.board = board
        self.transport = transport
        self.counter = counter
        self.door = door
        self.duration = duration
        self.off_policy = off_policy
        self.logger = logging.getLogger(__name__)

    def activate(self, indicator: int) -> bytes:
        """
        Send one activate command for an indicator.

        Returns:
            The frame that was sent

        Raises InvalidArgumentError before sending if indicator is out of range.
        Raises TransportError if the send fails.
        """
        validate_indicator(indicator)
        frame = encode(self.board, self.door, indicator,
                       self.counter.next(), self.duration)
        self.transport.send(self.board.endpoint, frame)
        return frame

    def turn_off(self, indicator: int) -> Optional[bytes]:
        """
        Turn an indicator off according to the OFF policy.

        The controller protocol has no deactivate command. SIMULATE only
        logs; RESEND sends the activate frame once more.

        Returns:
            The frame that was sent, or None when simulated
        """
        if self.off_policy is OffPolicy.SIMULATE:
            self.logger.info(f"[SIMULATED] Indicator {indicator} OFF - no frame sent")
            return None

        return self.activate(indicator)

    def open_door(self, door: Optional[int] = None) -> bytes:
        """Send a plain remote open-door command (connectivity test)."""
        door = door if door is not None else self.door
        validate_door(door)
        frame = encode_open_door(self.board, door, self.counter.next())
        self.transport.send(self.board.endpoint, frame)
        return frame
