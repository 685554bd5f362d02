from Cryptodome import Random
import binascii
import typing

Symbols = typing.Union[bytes, bytearray, memoryview, str, typing.Iterable[int]]


def as_bytes(data: Symbols) -> bytes:
    """
    Normalise codec input to bytes
    Args:
        data: bytes-like object, iterable of byte values or str (UTF-8)
    Returns:
        bytes
    """
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, int):
        raise TypeError("Expected a byte sequence, got int: {}".format(data))
    return bytes(data)


def bytes_to_hex(buffer: bytes) -> str:
    """
    Convert bytes to hex
    Args:
        buffer: Bytes to convert
    Returns:
        hex
    """
    return binascii.hexlify(buffer).decode()


def hex_to_bytes(s: str) -> bytes:
    return binascii.unhexlify(s)


def random_bytes(length: int) -> bytes:
    if length < 0:
        raise ValueError("Length must be non-negative, got {}".format(length))
    return Random.get_random_bytes(length)
