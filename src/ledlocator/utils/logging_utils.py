"""Logging utilities for LED locator package."""

import logging
import sys
from typing import Optional


def setup_logger(name: str, level: str = "INFO",
                format_string: Optional[str] = None) -> logging.Logger:
    """
    Setup logger for warehouse operators.

    Args:
        name: Logger name
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Clear existing handlers to avoid duplicates
    logger.handlers.clear()

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)

    if format_string is None:
        if level.upper() == "DEBUG":
            format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            # Simplified format for operators
            format_string = "%(levelname)s: %(message)s"

    console_handler.setFormatter(logging.Formatter(format_string))
    logger.addHandler(console_handler)

    # Prevent propagation to avoid duplicate messages
    logger.propagate = False

    return logger


def log_import_complete(logger: logging.Logger, tag_id: str, product_id: str, indicator: int) -> None:
    """Log a completed import."""
    logger.info(f"IMPORT - Tag '{tag_id}' now holds product '{product_id}' (indicator {indicator})")


def log_export_started(logger: logging.Logger, tag_id: str, product_id: str, indicator: int) -> None:
    """Log export start and the operator action it requires."""
    logger.info(f"EXPORT - Tag '{tag_id}' holds product '{product_id}', locating on indicator {indicator}")
    logger.info("OPERATOR ACTION REQUIRED - Pick up the item, then scan or type the confirmation token")


def log_export_confirmed(logger: logging.Logger, tag_id: str, product_id: str) -> None:
    """Log confirmed export."""
    logger.info(f"EXPORT CONFIRMED - Product '{product_id}' removed, tag '{tag_id}' is free")


def log_conflict(logger: logging.Logger, message: str) -> None:
    """Log a workflow conflict for the operator."""
    logger.warning(f"CONFLICT - {message}")


def log_transport_failure(logger: logging.Logger, indicator: int, error: Exception) -> None:
    """Log a failed command send; workflow state is never rolled back."""
    logger.error(f"SEND FAILED - Indicator {indicator}: {error}")


def log_system_status(logger: logging.Logger, component: str, status: str) -> None:
    """Log system component status."""
    logger.info(f"SYSTEM STATUS - {component}: {status}")


def suppress_debug_output() -> None:
    """Suppress debug output from dependencies for cleaner operator interface."""
    logging.getLogger("serial").setLevel(logging.WARNING)
