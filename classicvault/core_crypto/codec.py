"""
Codec helpers: moving between text, bytes and integers.

The asymmetric scheme encrypts one small integer ("unit") at a time, so a
message is split into one unit per byte on the way in and reassembled on
the way out.
"""

from typing import Iterable, List, Optional, Union

from ..errors import InvalidParameterError


BYTE_MAX = 255

BytesLike = Union[bytes, bytearray, str]


def to_bytes(data: BytesLike) -> bytes:
    """Return `data` as bytes, UTF-8 encoding it if it is text."""
    if isinstance(data, str):
        return data.encode('utf-8')
    return bytes(data)


def bytes_to_units(message: BytesLike) -> List[int]:
    """
    Map each byte of `message` to its unsigned value.

    >>> bytes_to_units(b"Hi")
    [72, 105]
    """
    return list(to_bytes(message))


def units_to_bytes(units: Iterable[int], strict: bool = False) -> bytes:
    """
    Map each unit back to a byte.

    Units outside [0, 255] cannot be represented. They are dropped, or
    rejected when `strict` is set.

    Raises:
        InvalidParameterError: If strict and a unit is out of range
    """
    result = bytearray()
    for unit in units:
        if 0 <= unit <= BYTE_MAX:
            result.append(unit)
        elif strict:
            raise InvalidParameterError(f"Unit {unit} is not a byte value")
    return bytes(result)


def bytes_to_int(data: BytesLike) -> int:
    """Convert bytes to integer (big-endian)."""
    return int.from_bytes(to_bytes(data), byteorder='big')


def int_to_bytes(n: int, length: Optional[int] = None) -> bytes:
    """Convert integer to bytes (big-endian)."""
    if n < 0:
        raise InvalidParameterError("Cannot encode a negative integer")
    if length is None:
        length = (n.bit_length() + 7) // 8
        length = max(1, length)  # At least 1 byte
    return n.to_bytes(length, byteorder='big')
