"""External service interfaces for board and scanner communication."""

from .udp_service import UdpTransport
from .indicator_service import IndicatorService
from .scanner_service import ConsoleScanSource, SerialScanSource

__all__ = ["UdpTransport", "IndicatorService", "ConsoleScanSource", "SerialScanSource"]
