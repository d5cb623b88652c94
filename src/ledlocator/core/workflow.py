"""Scan-driven import/export workflow."""

import logging
from typing import Dict, Optional

from ..models.data_models import (
    Idle, AwaitingTagForImport, AwaitingExportConfirmation,
    WorkflowState, ScanOutcome, ScanResult
)
from ..services.indicator_service import IndicatorService
from ..exceptions.custom_exceptions import TransportError, WorkflowConflict
from ..utils.validation import validate_product_table
from ..utils.logging_utils import (
    log_import_complete, log_export_started, log_export_confirmed,
    log_conflict, log_transport_failure
)
from .beacon import LocateBeacon


class InventoryWorkflow:
    """
    Interprets scan tokens and drives indicators.

    Import: scan a product code, then a free tag. The tag is associated
    with the product and the product's indicator is lit once.

    Export: scan an associated tag. The product's indicator beacons
    until the confirmation token is entered, then the association is
    released and the indicator is turned off per the OFF policy.

    Tokens must be handled one at a time from a single thread; only the
    beacon runs concurrently.
    """

    def __init__(self, product_indicators: Dict[str, int], indicators: IndicatorService,
                 beacon: LocateBeacon, confirm_token: str = "confirm",
                 product_prefix: str = "PRD"):
        validate_product_table(product_indicators, product_prefix)

        self.product_indicators = dict(product_indicators)
        self.indicators = indicators
        self.beacon = beacon
        self.confirm_token = confirm_token
        self.product_prefix = product_prefix
        self.logger = logging.getLogger(__name__)

        self._state: WorkflowState = Idle()
        self._associations: Dict[str, str] = {}

    @property
    def state(self) -> WorkflowState:
        return self._state

    @property
    def associations(self) -> Dict[str, str]:
        """Copy of the tag to product associations."""
        return dict(self._associations)

    def handle(self, token: str) -> ScanResult:
        """
        Apply one scan token.

        Never raises for operator mistakes; every outcome is reported on
        the returned ScanResult and logged.
        """
        token = token.strip()
        if not token:
            return self._result(ScanOutcome.IGNORED, "Empty scan ignored")

        if token.lower() == self.confirm_token.lower():
            return self._handle_confirmation()

        try:
            self._require_no_pending_export()
        except WorkflowConflict as e:
            log_conflict(self.logger, str(e))
            return self._result(ScanOutcome.CONFIRMATION_REQUIRED, str(e),
                                tag_id=self._state.tag_id)

        if token in self.product_indicators:
            return self._handle_product_scan(token)

        if token.startswith(self.product_prefix):
            return self._handle_unrecognized(token)

        return self._handle_tag_scan(token)

    def shutdown(self) -> None:
        """Stop any running beacon. Associations are not persisted."""
        self.beacon.stop()
        self.logger.info(f"Workflow stopped with {len(self._associations)} open associations")

    def _require_no_pending_export(self) -> None:
        if isinstance(self._state, AwaitingExportConfirmation):
            raise WorkflowConflict(
                f"An export is pending for tag '{self._state.tag_id}'. "
                f"Find the item and enter '{self.confirm_token}'."
            )

    def _handle_product_scan(self, product_id: str) -> ScanResult:
        # Import step 1; a later product scan replaces this one
        self._state = AwaitingTagForImport(product_id)
        self.logger.info(f"Product '{product_id}' scanned. Now scan the tag to associate.")
        return self._result(ScanOutcome.PRODUCT_SCANNED,
                            f"Product '{product_id}' scanned. Now scan the tag to associate.",
                            product_id=product_id,
                            indicator=self.product_indicators[product_id])

    def _handle_unrecognized(self, token: str) -> ScanResult:
        message = f"Unknown product code '{token}'"
        self.logger.error(message)
        return self._result(ScanOutcome.UNRECOGNIZED, message)

    def _handle_tag_scan(self, tag_id: str) -> ScanResult:
        state = self._state

        if isinstance(state, AwaitingTagForImport):
            try:
                return self._complete_import(tag_id, state.product_id)
            except WorkflowConflict as e:
                self._state = Idle()
                log_conflict(self.logger, str(e))
                return self._result(ScanOutcome.IMPORT_CONFLICT, str(e),
                                    product_id=state.product_id, tag_id=tag_id)

        product_id = self._associations.get(tag_id)
        if product_id is None:
            message = f"Scanned free tag '{tag_id}'. Not associated with any product."
            self.logger.info(message)
            return self._result(ScanOutcome.FREE_TAG, message, tag_id=tag_id)

        return self._start_export(tag_id, product_id)

    def _complete_import(self, tag_id: str, product_id: str) -> ScanResult:
        """
        Associate a tag with the pending product and light its indicator.

        Raises WorkflowConflict if the tag already holds a product.
        """
        existing = self._associations.get(tag_id)
        if existing is not None:
            raise WorkflowConflict(
                f"Tag '{tag_id}' is already associated with product '{existing}'. "
                f"Export it first."
            )

        indicator = self.product_indicators[product_id]
        self._associations[tag_id] = product_id
        self._state = Idle()
        log_import_complete(self.logger, tag_id, product_id, indicator)

        command_sent = self._send(indicator, self.indicators.activate)
        return self._result(ScanOutcome.IMPORTED,
                            f"Tag '{tag_id}' associated with product '{product_id}'",
                            product_id=product_id, tag_id=tag_id,
                            indicator=indicator, command_sent=command_sent)

    def _start_export(self, tag_id: str, product_id: str) -> ScanResult:
        indicator = self.product_indicators[product_id]
        self.beacon.start(indicator)
        self._state = AwaitingExportConfirmation(tag_id)
        log_export_started(self.logger, tag_id, product_id, indicator)

        return self._result(ScanOutcome.EXPORT_STARTED,
                            f"Locating product '{product_id}' on indicator {indicator}. "
                            f"Enter '{self.confirm_token}' after picking it up.",
                            product_id=product_id, tag_id=tag_id, indicator=indicator)

    def _handle_confirmation(self) -> ScanResult:
        state = self._state
        if not isinstance(state, AwaitingExportConfirmation):
            message = "No export operation is waiting for confirmation"
            self.logger.info(message)
            return self._result(ScanOutcome.NOTHING_PENDING, message)

        tag_id = state.tag_id
        product_id = self._associations[tag_id]
        indicator = self.product_indicators[product_id]

        self.beacon.stop()
        command_sent = self._send(indicator, self.indicators.turn_off)

        del self._associations[tag_id]
        self._state = Idle()
        log_export_confirmed(self.logger, tag_id, product_id)

        return self._result(ScanOutcome.EXPORT_CONFIRMED,
                            f"Export of product '{product_id}' complete, tag '{tag_id}' is free",
                            product_id=product_id, tag_id=tag_id,
                            indicator=indicator, command_sent=command_sent)

    def _send(self, indicator: int, command) -> bool:
        # Send failures are reported, never rolled back
        try:
            return command(indicator) is not None
        except TransportError as e:
            log_transport_failure(self.logger, indicator, e)
            return False

    def _result(self, outcome: ScanOutcome, message: str,
                product_id: Optional[str] = None, tag_id: Optional[str] = None,
                indicator: Optional[int] = None, command_sent: bool = False) -> ScanResult:
        return ScanResult(outcome=outcome, message=message, state=self._state,
                          product_id=product_id, tag_id=tag_id,
                          indicator=indicator, command_sent=command_sent)
