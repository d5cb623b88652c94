"""Configuration management for LED locator package."""

from .settings import Settings
from .product_table import ProductTable

__all__ = ["Settings", "ProductTable"]
