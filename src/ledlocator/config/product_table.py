"""Product to indicator table definitions and parsing."""

from typing import Dict

from ..exceptions.custom_exceptions import ConfigurationError, InvalidArgumentError
from ..utils.validation import validate_product_table


class ProductTable:
    """
    Static mapping of product codes to board indicators.

    Each product lights exactly one indicator and no indicator is
    shared, so locating a product always points at one shelf position.
    """

    DEFAULT_TABLE = "PRD1=1,PRD2=2,PRD3=3,PRD4=4,PRD5=5"

    @staticmethod
    def parse(text: str) -> Dict[str, int]:
        """
        Parse a "PRODUCT=INDICATOR,..." string.

        Raises ConfigurationError for malformed entries.
        """
        table: Dict[str, int] = {}

        for entry in text.split(","):
            entry = entry.strip()
            if not entry:
                continue

            product_id, sep, indicator = entry.partition("=")
            product_id = product_id.strip()
            if not sep or not product_id:
                raise ConfigurationError(f"Malformed product table entry '{entry}'")

            if product_id in table:
                raise ConfigurationError(f"Duplicate product '{product_id}'")

            try:
                table[product_id] = int(indicator.strip())
            except ValueError:
                raise ConfigurationError(f"Indicator for '{product_id}' is not a number: '{indicator}'")

        return table

    @staticmethod
    def get_default_table() -> Dict[str, int]:
        """Five sample products on floors 1-5."""
        return ProductTable.parse(ProductTable.DEFAULT_TABLE)

    @staticmethod
    def validate_table(table: Dict[str, int], product_prefix: str) -> None:
        """
        Validate a parsed table.

        Raises ConfigurationError if the table is unusable.
        """
        try:
            validate_product_table(table, product_prefix)
        except InvalidArgumentError as e:
            raise ConfigurationError(f"Invalid product table: {e}")
