"""Fixed-width unsigned integer encoding.

Integers are written most-significant digit first. Decoding accumulates with
Horner's method and checks every step against the target bit width, so a
value that does not fit is rejected before the scan completes.
"""
from __future__ import annotations
from base62_standard import util
from base62_standard.alphabet import Alphabet
from base62_standard.structure import Base62Exception, EmptyException, \
    InvalidCharacterException, OverflowException
import enum
import logging
import typing

_LOGGER = logging.getLogger(__name__)


class Width(enum.IntEnum):
    UINT8 = 8
    UINT16 = 16
    UINT32 = 32
    UINT64 = 64
    UINT128 = 128


def max_value(width: int) -> int:
    if width <= 0:
        raise ValueError("Width must be positive, got {}".format(width))
    return (1 << width) - 1


def encode(value: int, alphabet: Alphabet = Alphabet.standard) -> bytes:
    """
    Encode a non-negative integer
    Args:
        value: Integer to encode
        alphabet: Symbol ordering to use
    Returns:
        Symbol bytes, at least one
    """
    if not isinstance(value, int):
        raise TypeError("Expected int, got {}".format(type(value).__name__))
    if value < 0:
        raise ValueError("Cannot encode negative integer: {}".format(value))
    if value == 0:
        return bytes([alphabet.zero()])
    digits = bytearray()
    while value > 0:
        value, remainder = divmod(value, Alphabet.base)
        digits.append(alphabet.encode(remainder))
    digits.reverse()
    return bytes(digits)


def decode(encoded: util.Symbols, width: int = Width.UINT64,
           alphabet: Alphabet = Alphabet.standard) -> int:
    """
    Decode symbols into an integer of the given bit width
    Args:
        encoded: Symbol bytes or text
        width: Bit width of the target integer
        alphabet: Symbol ordering to use
    Returns:
        Decoded integer
    Raises:
        EmptyException: No symbols
        InvalidCharacterException: A byte outside the alphabet
        OverflowException: Value does not fit in ``width`` bits
    """
    maximum = max_value(width)
    data = util.as_bytes(encoded)
    if len(data) == 0:
        raise EmptyException()
    result = 0
    for byte in data:
        digit = alphabet.decode(byte)
        if digit is None:
            _LOGGER.debug("Invalid byte 0x{:02x} for alphabet {}".format(
                byte, alphabet.name()))
            text = encoded if isinstance(encoded, str) else data.decode(
                "utf-8", "replace")
            raise InvalidCharacterException(text, byte)
        result *= Alphabet.base
        if result > maximum:
            raise OverflowException()
        result += digit
        if result > maximum:
            raise OverflowException()
    return result


def decode_or_none(encoded: util.Symbols, width: int = Width.UINT64,
                   alphabet: Alphabet = Alphabet.standard
                   ) -> typing.Optional[int]:
    try:
        return decode(encoded, width, alphabet)
    except Base62Exception:
        return None
