"""
Utility Functions

Hex string handling and leaf item parsing shared by the models and the CLI.
"""

from .hex_helpers import (
    normalize_hex,
    hex_to_bytes,
    bytes_to_hex,
    parse_item,
    parse_items,
)

__all__ = [
    'normalize_hex',
    'hex_to_bytes',
    'bytes_to_hex',
    'parse_item',
    'parse_items',
]
