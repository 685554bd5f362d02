from __future__ import annotations
import logging
import typing


class Alphabet:
    """
    Bijective mapping between digit values 0-61 and symbol bytes

    The encode table maps a digit to its symbol, the decode table maps each
    of the 256 byte values to a digit or to ``Alphabet.invalid``.
    """
    logger = logging.getLogger("Base62:Alphabet")
    base = 62
    invalid = 0xff
    standard: Alphabet
    inverted: Alphabet
    gmp: Alphabet
    __encode_table: bytes
    __decode_table: bytes
    __name: str

    def __init__(self, symbols: typing.Union[bytes, str], name: str = "custom"):
        """
        Create an alphabet from 62 unique symbols
        Args:
            symbols: Symbol for each digit value, in digit order
            name: Human-readable name used in diagnostics
        """
        if isinstance(symbols, str):
            symbols = symbols.encode("utf-8")
        symbols = bytes(symbols)
        if len(symbols) != Alphabet.base:
            raise ValueError(
                "Alphabet must contain exactly {} characters, got {}".format(
                    Alphabet.base, len(symbols)))
        if len(set(symbols)) != Alphabet.base:
            raise ValueError("Alphabet must contain {} unique characters"
                             .format(Alphabet.base))
        lookup = bytearray([Alphabet.invalid]) * 256
        for i in range(len(symbols)):
            lookup[symbols[i]] = i
        self.__encode_table = symbols
        self.__decode_table = bytes(lookup)
        self.__name = name
        self.logger.debug("Created alphabet {}: {}".format(
            name, symbols.decode("latin-1")))

    @staticmethod
    def default() -> Alphabet:
        return Alphabet.standard

    def name(self) -> str:
        return self.__name

    def encode_table(self) -> bytes:
        return self.__encode_table

    def decode_table(self) -> bytes:
        return self.__decode_table

    def encode(self, digit: int) -> int:
        """
        Symbol byte for a digit value, the digit must be in 0..61
        """
        return self.__encode_table[digit]

    def decode(self, byte: int) -> typing.Optional[int]:
        """
        Digit value for a symbol byte
        Args:
            byte: Byte value to look up
        Returns:
            Digit 0..61, or None when the byte is not part of this alphabet
        """
        if not 0 <= byte <= 0xff:
            return None
        value = self.__decode_table[byte]
        return None if value == Alphabet.invalid else value

    def is_valid(self, byte: int) -> bool:
        return self.decode(byte) is not None

    def is_valid_symbols(self, data: typing.Iterable[int]) -> bool:
        return all(self.is_valid(b) for b in data)

    def zero(self) -> int:
        return self.__encode_table[0]

    def __eq__(self, other):
        if not isinstance(other, Alphabet):
            return NotImplemented
        return (self.__encode_table == other.encode_table()
                and self.__name == other.name())

    def __hash__(self):
        return hash((self.__encode_table, self.__name))

    def __repr__(self):
        return "Alphabet({!r}, {!r})".format(
            self.__encode_table.decode("latin-1"), self.__name)

    class CharacterSets:
        standard = b'0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz'
        inverted = b'0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ'
        gmp = b'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789'


Alphabet.standard = Alphabet(Alphabet.CharacterSets.standard, "standard")
Alphabet.inverted = Alphabet(Alphabet.CharacterSets.inverted, "inverted")
Alphabet.gmp = Alphabet(Alphabet.CharacterSets.gmp, "gmp")
