"""Utility functions and helpers."""

from .validation import validate_door, validate_indicator, validate_product_table
from .logging_utils import setup_logger

__all__ = ["validate_door", "validate_indicator", "validate_product_table", "setup_logger"]
