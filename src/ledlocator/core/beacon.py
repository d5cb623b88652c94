"""Locate beacon: keeps one indicator re-activated until stopped."""

import logging
import threading
from typing import Callable, Optional

from ..exceptions.custom_exceptions import LocatorError


class _BeaconRun:
    """One beacon run. Owns its thread and its cancellation token."""

    def __init__(self, indicator: int, send: Callable[[int], object],
                 interval: float, logger: logging.Logger):
        self.indicator = indicator
        self.send = send
        self.interval = interval
        self.logger = logger
        self.cancelled = threading.Event()
        self.frames_sent = 0
        self.thread = threading.Thread(
            target=self._run, name=f"locate-beacon-{indicator}", daemon=True
        )

    def _run(self) -> None:
        self.logger.debug(f"Beacon started for indicator {self.indicator}")

        while not self.cancelled.is_set():
            try:
                self.send(self.indicator)
                self.frames_sent += 1
            except LocatorError as e:
                # A failed tick never ends the beacon
                self.logger.error(f"Beacon send failed for indicator {self.indicator}: {e}")

            if self.cancelled.wait(self.interval):
                break

        self.logger.debug(f"Beacon stopped for indicator {self.indicator} "
                          f"after {self.frames_sent} frames")


class LocateBeacon:
    """
    Cancellable repeating activate task for export locate.

    At most one run exists at a time. The workflow only issues start()
    and stop(); each run checks its own cancellation token before every
    send and between sends, so stop() returns within the stop timeout.
    """

    def __init__(self, send: Callable[[int], object], interval: float = 0.5,
                 stop_timeout: float = 1.0):
        """
        Args:
            send: Sends one activate command for an indicator
            interval: Seconds between frames
            stop_timeout: Longest stop() waits for the run to exit
        """
        if interval <= 0:
            raise ValueError("Beacon interval must be positive")
        if stop_timeout <= 0:
            raise ValueError("Beacon stop timeout must be positive")

        self.send = send
        self.interval = interval
        self.stop_timeout = stop_timeout
        self.logger = logging.getLogger(__name__)

        self._lock = threading.Lock()
        self._run: Optional[_BeaconRun] = None
        self._last_run: Optional[_BeaconRun] = None

    @property
    def is_running(self) -> bool:
        with self._lock:
            return self._run is not None and self._run.thread.is_alive()

    @property
    def indicator(self) -> Optional[int]:
        """Indicator currently beaconing, or None."""
        with self._lock:
            return self._run.indicator if self._run is not None else None

    @property
    def frames_sent(self) -> int:
        """Frames sent by the current (or most recent) run."""
        with self._lock:
            run = self._run or self._last_run
            return run.frames_sent if run is not None else 0

    def start(self, indicator: int) -> None:
        """
        Start beaconing an indicator.

        A run for a different indicator is stopped first. Starting the
        indicator that is already beaconing does nothing.
        """
        with self._lock:
            current = self._run
            if current is not None and current.indicator == indicator and current.thread.is_alive():
                return

            if current is not None:
                self._stop_run(current)

            run = _BeaconRun(indicator, self.send, self.interval, self.logger)
            self._run = run
            run.thread.start()

        self.logger.info(f"Indicator {indicator} is now beaconing every {self.interval:.2f}s")

    def stop(self) -> bool:
        """
        Stop the current run, waiting at most stop_timeout.

        Returns:
            True if the run exited (or nothing was running), False if it
            was abandoned after the timeout
        """
        with self._lock:
            run = self._run
            if run is None:
                return True
            return self._stop_run(run)

    def _stop_run(self, run: _BeaconRun) -> bool:
        run.cancelled.set()
        run.thread.join(self.stop_timeout)
        self._run = None
        self._last_run = run

        if run.thread.is_alive():
            self.logger.warning(f"Beacon for indicator {run.indicator} did not stop "
                                f"within {self.stop_timeout:.1f}s, abandoning it")
            return False

        return True
