"""Arbitrary-length byte sequence encoding.

The input is read as one big-endian unsigned integer and converted between
base 256 and base 62 by long division. Each leading zero byte becomes one
leading zero symbol and the other way round, so lengths survive a round trip.
"""
from __future__ import annotations
from base62_standard import util
from base62_standard.alphabet import Alphabet
import logging
import typing

_LOGGER = logging.getLogger(__name__)
standard_base = 256
target_base = Alphabet.base


def _leading(data: bytes, value: int) -> int:
    count = 0
    for b in data:
        if b != value:
            break
        count += 1
    return count


def encode(data: util.Symbols, alphabet: Alphabet = Alphabet.standard) -> bytes:
    """
    Encode bytes as a big-endian integer
    Args:
        data: Bytes to encode
        alphabet: Symbol ordering to use
    Returns:
        Symbol bytes, empty for empty input
    """
    source = bytearray(util.as_bytes(data))
    if len(source) == 0:
        return b""
    zeros = _leading(source, 0)
    if zeros == len(source):
        return bytes([alphabet.zero()]) * zeros
    out = bytearray()
    start = zeros
    while start < len(source):
        remainder = 0
        next_start = len(source)
        for i in range(start, len(source)):
            accumulator = source[i] + remainder * standard_base
            source[i], remainder = divmod(accumulator, target_base)
            if source[i] != 0 and next_start == len(source):
                next_start = i
        out.append(alphabet.encode(remainder))
        start = next_start
    out.extend(bytes([alphabet.zero()]) * zeros)
    out.reverse()
    return bytes(out)


def decode(encoded: util.Symbols,
           alphabet: Alphabet = Alphabet.standard) -> typing.Optional[bytes]:
    """
    Decode symbols back into the original bytes
    Args:
        encoded: Symbol bytes or text
        alphabet: Symbol ordering to use
    Returns:
        Decoded bytes, or None if a byte is not part of the alphabet
    """
    data = util.as_bytes(encoded)
    if len(data) == 0:
        return b""
    zeros = _leading(data, alphabet.zero())
    if zeros == len(data):
        return bytes(zeros)
    # little-endian, reversed once at the end
    buffer = bytearray()
    for byte in data[zeros:]:
        digit = alphabet.decode(byte)
        if digit is None:
            _LOGGER.debug("Invalid byte 0x{:02x} for alphabet {}".format(
                byte, alphabet.name()))
            return None
        carry = digit
        for i in range(len(buffer)):
            value = buffer[i] * target_base + carry
            buffer[i] = value & 0xff
            carry = value >> 8
        while carry > 0:
            buffer.append(carry & 0xff)
            carry >>= 8
    buffer.reverse()
    return bytes(zeros) + bytes(buffer)
