"""UDP transport for access-controller command frames."""

import socket
import logging
import threading
from typing import Tuple

from ..exceptions.custom_exceptions import TransportError, InvalidArgumentError
from ..core.packet_builder import FRAME_LENGTH, format_frame


class UdpTransport:
    """
    Fire-and-forget datagram sender.

    One datagram per send() call, no acknowledgement and no retry. The
    board never answers in a way this package reads, so a successful
    send only means the datagram left this host.

    SO_BROADCAST is always set so limited and subnet broadcast addresses
    both work; it has no effect on unicast sends.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self._lock = threading.Lock()
        self._frames_sent = 0

    @property
    def frames_sent(self) -> int:
        with self._lock:
            return self._frames_sent

    def send(self, endpoint: Tuple[str, int], frame: bytes) -> None:
        """
        Send one command frame to a board endpoint.

        Raises InvalidArgumentError if frame is not a full command frame.
        Raises TransportError if the datagram could not be sent.
        """
        if len(frame) != FRAME_LENGTH:
            raise InvalidArgumentError(f"Frame must be {FRAME_LENGTH} bytes, got {len(frame)}")

        try:
            with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
                sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
                sock.sendto(frame, endpoint)
        except Exception as e:
            raise TransportError(f"Send to {endpoint[0]}:{endpoint[1]} failed: {e}")

        with self._lock:
            self._frames_sent += 1
        self.logger.debug(f"Sent to {endpoint[0]}:{endpoint[1]}: {format_frame(frame)}")
