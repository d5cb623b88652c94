"""Data models for LED locator package."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class BoardIdentity:
    """Network endpoint and serial number of one access-controller board."""
    address: str
    port: int
    serial_number: int

    def __post_init__(self):
        if not self.address:
            raise ValueError("Board address must be specified")

        if not 1 <= self.port <= 65535:
            raise ValueError("Board port must be between 1 and 65535")

        if not 0 <= self.serial_number <= 0xFFFFFFFF:
            raise ValueError("Board serial number must fit in 32 bits")

    @property
    def endpoint(self) -> Tuple[str, int]:
        """Address tuple for the UDP socket."""
        return (self.address, self.port)


class OffPolicy(str, Enum):
    """How an indicator is turned off after a confirmed export."""
    SIMULATE = "simulate"  # log only, no frame
    RESEND = "resend"      # send the activate frame once more


# Workflow states. Exactly one is held at a time.

@dataclass(frozen=True)
class Idle:
    """No pending multi-step operation."""


@dataclass(frozen=True)
class AwaitingTagForImport:
    """A product was scanned; the next tag completes the import."""
    product_id: str


@dataclass(frozen=True)
class AwaitingExportConfirmation:
    """An associated tag was scanned; its indicator is beaconing."""
    tag_id: str


WorkflowState = Union[Idle, AwaitingTagForImport, AwaitingExportConfirmation]


class ScanOutcome(str, Enum):
    """Result category reported for each scan token."""
    IGNORED = "ignored"
    PRODUCT_SCANNED = "product_scanned"
    IMPORTED = "imported"
    IMPORT_CONFLICT = "import_conflict"
    EXPORT_STARTED = "export_started"
    EXPORT_CONFIRMED = "export_confirmed"
    FREE_TAG = "free_tag"
    UNRECOGNIZED = "unrecognized"
    CONFIRMATION_REQUIRED = "confirmation_required"
    NOTHING_PENDING = "nothing_pending"


@dataclass
class ScanResult:
    """Operator-facing report of how one scan token was handled."""
    outcome: ScanOutcome
    message: str
    state: WorkflowState
    product_id: Optional[str] = None
    tag_id: Optional[str] = None
    indicator: Optional[int] = None
    command_sent: bool = False
    timestamp: float = None

    def __post_init__(self):
        if self.timestamp is None:
            self.timestamp = datetime.now().timestamp()

    @property
    def is_error(self) -> bool:
        """True for outcomes the operator must act on."""
        return self.outcome in (
            ScanOutcome.IMPORT_CONFLICT,
            ScanOutcome.UNRECOGNIZED,
            ScanOutcome.CONFIRMATION_REQUIRED,
        )
