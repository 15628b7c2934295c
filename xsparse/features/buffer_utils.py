"""
Buffer and text-encoding helpers for markup input.
"""

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

# Accepted encoding names (case-insensitive) and the codec each one maps to
BUFFER_ENCODINGS = {
    "utf8": "utf-8",
    "utf-8": "utf-8",
    "ucs2": "utf-16-le",
    "ucs-2": "utf-16-le",
    "utf16le": "utf-16-le",
    "utf-16le": "utf-16-le",
    "latin1": "latin-1",
    "binary": "latin-1",
    "iso-8859-1": "latin-1",
    "ascii": "ascii",
}


def to_buffer_encoding(name: Optional[str]) -> Optional[str]:
    """Map an encoding name to a Python codec name.

    Returns:
        The codec name, or None if the name is not a supported encoding
    """
    if not isinstance(name, str):
        return None
    return BUFFER_ENCODINGS.get(name.strip().lower())


def is_byte_buffer(value: object) -> bool:
    return isinstance(value, (bytes, bytearray, memoryview))


def get_data(value: Union[str, BytesLike]) -> Union[str, bytes]:
    """Materialize a bytes-like value as bytes; strings pass through."""
    if isinstance(value, str):
        return value
    if is_byte_buffer(value):
        return bytes(value)
    raise TypeError(f"Cannot get data from {type(value).__name__}")
