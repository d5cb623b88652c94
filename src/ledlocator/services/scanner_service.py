"""Scan token sources: console input and serial barcode/RFID readers."""

import sys
import logging
from typing import Iterator, Optional, TextIO

import serial

from ..exceptions.custom_exceptions import ScannerError


class ConsoleScanSource:
    """Reads scan tokens line by line from a text stream (stdin by default)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdin
        self.closed = False

    def lines(self) -> Iterator[str]:
        """Yield stripped, non-empty lines until EOF or close()."""
        for line in self.stream:
            if self.closed:
                break
            token = line.strip()
            if token:
                yield token

    def close(self) -> None:
        self.closed = True


class SerialScanSource:
    """
    Reads scan tokens from a serial-attached scanner.

    USB barcode and RFID readers in serial mode emit one code per
    newline-terminated line.
    """

    def __init__(self, port: str, baud: int = 9600, timeout: float = 1.0):
        self.port = port
        self.baud = baud
        self.timeout = timeout
        self.logger = logging.getLogger(__name__)
        self.serial_conn: Optional[serial.Serial] = None
        self.closed = False

    def connect(self) -> None:
        """
        Open the scanner port.

        Raises ScannerError if the port cannot be opened.
        """
        try:
            self.logger.info(f"Opening scanner at {self.port} ({self.baud} baud)")
            self.serial_conn = serial.Serial(self.port, self.baud, timeout=self.timeout)
            self.serial_conn.reset_input_buffer()
        except serial.SerialException as e:
            raise ScannerError(f"Failed to open scanner at {self.port}: {e}")

    def lines(self) -> Iterator[str]:
        """
        Yield stripped, non-empty scan codes until close().

        Raises ScannerError if reading from the port fails.
        """
        if self.serial_conn is None:
            self.connect()

        while not self.closed:
            try:
                raw = self.serial_conn.readline()
            except serial.SerialException as e:
                if self.closed:
                    break
                raise ScannerError(f"Scanner read failed: {e}")

            # Empty read means the timeout expired with no scan
            token = raw.decode(errors="replace").strip()
            if token:
                yield token

    def close(self) -> None:
        """Close the scanner port."""
        self.closed = True
        try:
            if self.serial_conn and self.serial_conn.is_open:
                self.serial_conn.close()
            self.logger.info("Scanner closed")
        except serial.SerialException as e:
            self.logger.error(f"Error during scanner close: {e}")
