"""
Hex String and Item Parsing Utilities

Hash values travel through JSON and the command line as ``0x``-prefixed hex
strings. These helpers convert between that form and ``bytes``, and turn the
entries of a leaves file into raw items.
"""

from typing import Any, List, Optional

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def normalize_hex(hex_str: str, expected_bytes: Optional[int] = None) -> str:
    """
    Normalize a hex string to lowercase with a ``0x`` prefix and even length.

    Args:
        hex_str: Hex string with or without ``0x`` prefix
        expected_bytes: Optional expected byte length for validation

    Returns:
        Normalized hex string

    Raises:
        ValueError: If the string contains non-hex characters or has the
            wrong length

    Examples:
        >>> normalize_hex("0x123")
        '0x0123'
        >>> normalize_hex("ABCD")
        '0xabcd'
    """
    if not isinstance(hex_str, str):
        raise ValueError(f"Expected a hex string, got {type(hex_str).__name__}")

    hex_part = hex_str[2:] if hex_str.startswith(("0x", "0X")) else hex_str
    if not all(c in _HEX_DIGITS for c in hex_part):
        raise ValueError(f"Invalid hex string: {hex_str}")

    if len(hex_part) % 2 == 1:
        hex_part = "0" + hex_part

    if expected_bytes is not None and len(hex_part) // 2 != expected_bytes:
        raise ValueError(f"Expected {expected_bytes} bytes, got {len(hex_part) // 2} bytes")

    return "0x" + hex_part.lower()


def hex_to_bytes(hex_str: str) -> bytes:
    """
    Convert a hex string to bytes.

    Examples:
        >>> hex_to_bytes("0x1234")
        b'\\x124'
    """
    return bytes.fromhex(normalize_hex(hex_str)[2:])


def bytes_to_hex(data: bytes, prefix: bool = True) -> str:
    """
    Convert bytes to a hex string.

    Examples:
        >>> bytes_to_hex(b'\\x12\\x34')
        '0x1234'
        >>> bytes_to_hex(b'\\x12\\x34', prefix=False)
        '1234'
    """
    hex_str = bytes(data).hex()
    return f"0x{hex_str}" if prefix else hex_str


def parse_item(value: Any) -> bytes:
    """
    Turn one entry of a leaves file into a raw item.

    ``0x``-prefixed strings are decoded as hex, other strings are UTF-8
    encoded, and integers become their decimal text.
    """
    if isinstance(value, bool):
        raise ValueError(f"Unsupported leaf value: {value!r}")
    if isinstance(value, int):
        value = str(value)
    if not isinstance(value, str):
        raise ValueError(f"Unsupported leaf value: {value!r}")
    if value.startswith(("0x", "0X")):
        return hex_to_bytes(value)
    return value.encode("utf-8")


def parse_items(values: List[Any]) -> List[bytes]:
    """Parse every entry of a leaves file with ``parse_item``."""
    if not isinstance(values, list):
        raise ValueError("Leaves file must contain a JSON list")
    return [parse_item(value) for value in values]
