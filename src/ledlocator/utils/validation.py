"""Validation utilities for LED locator package - reject before encoding."""

from typing import Dict

from ..exceptions.custom_exceptions import InvalidArgumentError


# Controller ranges
MIN_DOOR = 1
MAX_DOOR = 4
MIN_INDICATOR = 1
MAX_INDICATOR = 80  # 1-40 one polarity, 41-80 the other
MAX_DURATION = 0xFFFF
MAX_UINT32 = 0xFFFFFFFF


def _require_int(name: str, value) -> None:
    # bool is an int subclass but never a valid field value
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")


def validate_door(door: int) -> None:
    """
    Validate door number is within the controller range.

    Raises InvalidArgumentError if out of range.
    """
    _require_int("Door number", door)
    if not MIN_DOOR <= door <= MAX_DOOR:
        raise InvalidArgumentError(
            f"Door number {door} outside range {MIN_DOOR}-{MAX_DOOR}"
        )


def validate_indicator(indicator: int) -> None:
    """
    Validate indicator (relay/LED/floor output) number.

    Raises InvalidArgumentError if out of range.
    """
    _require_int("Indicator number", indicator)
    if not MIN_INDICATOR <= indicator <= MAX_INDICATOR:
        raise InvalidArgumentError(
            f"Indicator number {indicator} outside range {MIN_INDICATOR}-{MAX_INDICATOR}"
        )


def validate_duration(duration: int) -> None:
    """Validate activation duration fits the 16-bit field."""
    _require_int("Duration", duration)
    if not 0 <= duration <= MAX_DURATION:
        raise InvalidArgumentError(f"Duration {duration} outside range 0-{MAX_DURATION}")


def validate_serial_number(serial_number: int) -> None:
    """Validate board serial number fits in 32 bits."""
    _require_int("Serial number", serial_number)
    if not 0 <= serial_number <= MAX_UINT32:
        raise InvalidArgumentError(f"Serial number {serial_number} does not fit in 32 bits")


def validate_sequence_number(sequence_number: int) -> None:
    """Validate frame sequence number fits in 32 bits."""
    _require_int("Sequence number", sequence_number)
    if not 0 <= sequence_number <= MAX_UINT32:
        raise InvalidArgumentError(f"Sequence number {sequence_number} does not fit in 32 bits")


def validate_product_table(product_indicators: Dict[str, int], product_prefix: str) -> None:
    """
    Validate the product to indicator table.

    Every product needs the product prefix so it can never be mistaken
    for a tag, and each indicator may belong to one product only.

    Raises InvalidArgumentError if the table is unusable.
    """
    if not product_indicators:
        raise InvalidArgumentError("Product table is empty")

    seen: Dict[int, str] = {}
    for product_id, indicator in product_indicators.items():
        if not product_id.startswith(product_prefix):
            raise InvalidArgumentError(
                f"Product '{product_id}' does not start with prefix '{product_prefix}'"
            )

        validate_indicator(indicator)

        if indicator in seen:
            raise InvalidArgumentError(
                f"Indicator {indicator} assigned to both '{seen[indicator]}' and '{product_id}'"
            )
        seen[indicator] = product_id
