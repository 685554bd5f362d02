from __future__ import annotations
from base62_standard.alphabet import Alphabet
import typing


class Base62Exception(ValueError):
    def __eq__(self, other):
        return type(self) is type(other) and self.args == other.args

    def __hash__(self):
        return hash((type(self), self.args))


class EmptyException(Base62Exception):
    def __str__(self):
        return "Base62 value cannot be empty"


class InvalidCharacterException(Base62Exception):
    value: str
    byte: int

    def __init__(self, value: str, byte: int):
        super().__init__(value, byte)
        self.value = value
        self.byte = byte

    def __str__(self):
        return "Invalid Base62 byte 0x{:X} in '{}'".format(self.byte, self.value)


class OverflowException(Base62Exception):
    def __str__(self):
        return "Base62 value exceeds maximum representable integer"


class Serializable:
    alphabet: Alphabet = Alphabet.standard

    def serialize(self) -> bytes:
        raise NotImplementedError

    @classmethod
    def parse(cls, data: typing.Union[bytes, str]) -> Serializable:
        raise NotImplementedError
