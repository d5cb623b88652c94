"""Main LED locator class wiring board, beacon and workflow together."""

import time
import logging
from typing import Callable, Iterable, List, Optional

from ..models.data_models import ScanResult
from ..services.udp_service import UdpTransport
from ..services.indicator_service import IndicatorService
from ..config.settings import Settings
from ..exceptions.custom_exceptions import ConfigurationError, InvalidArgumentError
from ..utils.logging_utils import setup_logger, log_system_status, suppress_debug_output
from ..utils.validation import validate_indicator
from .sequence import SequenceCounter
from .beacon import LocateBeacon
from .workflow import InventoryWorkflow


class LedLocator:
    """Warehouse LED locator for one access-controller board."""

    def __init__(self, settings: Optional[Settings] = None,
                 transport: Optional[UdpTransport] = None,
                 counter: Optional[SequenceCounter] = None):
        """
        Initialize the locator.

        Args:
            settings: Locator configuration (uses defaults if None)
            transport: Frame transport (UDP if None)
            counter: Sequence counter (fresh process counter if None)
        """
        self.settings = settings or Settings()
        self.settings.validate_settings()

        # Package-level handler; module loggers propagate to it
        suppress_debug_output()
        setup_logger("ledlocator", self.settings.log_level)
        self.logger = logging.getLogger(__name__)

        self.board = self.settings.get_board_identity()
        self.counter = counter or SequenceCounter()
        self.transport = transport or UdpTransport()

        try:
            self.indicators = IndicatorService(
                self.board, self.transport, self.counter,
                door=self.settings.door_number,
                duration=self.settings.activate_duration,
                off_policy=self.settings.get_off_policy()
            )
            self.beacon = LocateBeacon(
                self.indicators.activate,
                interval=self.settings.beacon_interval,
                stop_timeout=self.settings.beacon_stop_timeout
            )
            self.workflow = InventoryWorkflow(
                self.settings.product_indicators, self.indicators, self.beacon,
                confirm_token=self.settings.confirm_token,
                product_prefix=self.settings.product_prefix
            )
        except (InvalidArgumentError, ValueError) as e:
            raise ConfigurationError(f"Locator setup failed: {e}")

    def handle(self, token: str) -> ScanResult:
        """Apply one scan token to the workflow."""
        return self.workflow.handle(token)

    def is_exit_token(self, token: str) -> bool:
        return token.strip().lower() == self.settings.exit_token.lower()

    def run(self, tokens: Iterable[str],
            on_result: Optional[Callable[[ScanResult], None]] = None) -> List[ScanResult]:
        """
        Feed scan tokens to the workflow until the exit token or end of input.

        The beacon is always stopped before returning.

        Returns:
            Results for every handled token
        """
        results: List[ScanResult] = []
        log_system_status(self.logger, "Locator",
                          f"ready on {self.board.address}:{self.board.port} "
                          f"(SN {self.board.serial_number})")

        try:
            for token in tokens:
                if self.is_exit_token(token):
                    self.logger.info("Exit requested")
                    break
                result = self.handle(token)
                results.append(result)
                if on_result is not None:
                    on_result(result)
        finally:
            self.shutdown()

        return results

    def shutdown(self) -> None:
        """Stop background activity."""
        self.workflow.shutdown()
        log_system_status(self.logger, "Locator", "stopped")

    def open_door(self, door: Optional[int] = None) -> bytes:
        """Send one open-door command (connectivity test)."""
        return self.indicators.open_door(door)

    def activate(self, indicator: int) -> bytes:
        """Send one activate command."""
        return self.indicators.activate(indicator)

    def locate_product(self, product_id: str) -> int:
        """
        Light a product's indicator once without scanning a tag.

        Returns:
            The indicator that was activated

        Raises InvalidArgumentError if the product code is not configured.
        Raises TransportError if the send fails.
        """
        product_id = product_id.strip()
        indicator = self.settings.product_indicators.get(product_id)
        if indicator is None:
            raise InvalidArgumentError(f"Product '{product_id}' not found")

        self.indicators.activate(indicator)
        self.logger.info(f"Located product '{product_id}' on indicator {indicator}")
        return indicator

    def check_beacon(self, indicator: int, seconds: float) -> List[float]:
        """
        Run a beacon for a fixed time and record when each frame went out.

        Returns:
            Monotonic send timestamps
        """
        validate_indicator(indicator)
        timestamps: List[float] = []

        def timed_send(target: int) -> bytes:
            frame = self.indicators.activate(target)
            timestamps.append(time.monotonic())
            return frame

        beacon = LocateBeacon(timed_send, interval=self.settings.beacon_interval,
                              stop_timeout=self.settings.beacon_stop_timeout)
        beacon.start(indicator)
        try:
            time.sleep(seconds)
        finally:
            beacon.stop()

        return list(timestamps)
