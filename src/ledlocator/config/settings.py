"""Configuration management for LED locator package."""

import os
from typing import Dict, Optional

from ..models.data_models import BoardIdentity, OffPolicy
from ..exceptions.custom_exceptions import ConfigurationError, InvalidArgumentError
from ..utils.validation import (
    validate_door, validate_duration, validate_serial_number
)
from .product_table import ProductTable


class Settings:
    """Runtime settings for the LED locator."""

    def __init__(self):
        # Board communication settings
        self.board_ip: str = os.getenv("BOARD_IP", "255.255.255.255")
        self.board_port: int = int(os.getenv("BOARD_PORT", "60000"))
        self.board_serial: int = int(os.getenv("BOARD_SERIAL", "175111864"), 0)  # 0x0A6FFEB8
        self.door_number: int = int(os.getenv("DOOR_NUMBER", "1"))
        self.activate_duration: int = int(os.getenv("ACTIVATE_DURATION", "0"))

        # Scan token settings
        self.product_prefix: str = os.getenv("PRODUCT_PREFIX", "PRD")
        self.confirm_token: str = os.getenv("CONFIRM_TOKEN", "confirm")
        self.exit_token: str = os.getenv("EXIT_TOKEN", "exit")

        # Locate beacon settings
        self.beacon_interval: float = float(os.getenv("BEACON_INTERVAL", "0.5"))
        self.beacon_stop_timeout: float = float(os.getenv("BEACON_STOP_TIMEOUT", "1.0"))
        self.off_policy_name: str = os.getenv("OFF_POLICY", OffPolicy.SIMULATE.value)

        # Serial scanner settings
        self.scanner_port: Optional[str] = os.getenv("SCANNER_PORT") or None
        self.scanner_baud: int = int(os.getenv("SCANNER_BAUD", "9600"))
        self.scanner_timeout: float = float(os.getenv("SCANNER_TIMEOUT", "1.0"))

        # Logging settings
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO")

        self.product_indicators: Dict[str, int] = ProductTable.parse(
            os.getenv("PRODUCT_INDICATORS", ProductTable.DEFAULT_TABLE)
        )

    def validate_settings(self) -> bool:
        """Validate all settings before talking to the board."""
        if not self.board_ip:
            raise ConfigurationError("Board IP address must be specified")

        if not 1 <= self.board_port <= 65535:
            raise ConfigurationError("Board port must be between 1 and 65535")

        try:
            validate_serial_number(self.board_serial)
            validate_door(self.door_number)
            validate_duration(self.activate_duration)
        except InvalidArgumentError as e:
            raise ConfigurationError(str(e))

        if not self.product_prefix:
            raise ConfigurationError("Product prefix must be specified")

        ProductTable.validate_table(self.product_indicators, self.product_prefix)

        if not self.confirm_token or not self.exit_token:
            raise ConfigurationError("Confirmation and exit tokens must be specified")

        if self.confirm_token.lower() == self.exit_token.lower():
            raise ConfigurationError("Confirmation and exit tokens must differ")

        if self.confirm_token.lower().startswith(self.product_prefix.lower()):
            raise ConfigurationError("Confirmation token must not look like a product code")

        if self.exit_token.lower().startswith(self.product_prefix.lower()):
            raise ConfigurationError("Exit token must not look like a product code")

        if self.beacon_interval <= 0:
            raise ConfigurationError("Beacon interval must be positive")

        if self.beacon_stop_timeout <= 0:
            raise ConfigurationError("Beacon stop timeout must be positive")

        self.get_off_policy()

        return True

    def get_off_policy(self) -> OffPolicy:
        """Resolve the configured OFF policy."""
        try:
            return OffPolicy(self.off_policy_name.lower())
        except ValueError:
            valid = [p.value for p in OffPolicy]
            raise ConfigurationError(f"OFF policy must be one of {valid}, got '{self.off_policy_name}'")

    def get_board_identity(self) -> BoardIdentity:
        """Get the configured board identity."""
        try:
            return BoardIdentity(self.board_ip, self.board_port, self.board_serial)
        except ValueError as e:
            raise ConfigurationError(str(e))
