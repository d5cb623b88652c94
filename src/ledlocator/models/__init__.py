"""Data models for LED locator package."""

from .data_models import (
    BoardIdentity,
    OffPolicy,
    Idle,
    AwaitingTagForImport,
    AwaitingExportConfirmation,
    WorkflowState,
    ScanOutcome,
    ScanResult
)

__all__ = [
    "BoardIdentity",
    "OffPolicy",
    "Idle",
    "AwaitingTagForImport",
    "AwaitingExportConfirmation",
    "WorkflowState",
    "ScanOutcome",
    "ScanResult"
]
