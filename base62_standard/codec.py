from __future__ import annotations
from base62_standard import binary, integer, util
from base62_standard.alphabet import Alphabet
from base62_standard.integer import Width
import logging
import typing


class Base62:
    """
    Codec bound to one alphabet and a default integer width
    """
    logger = logging.getLogger("Base62:Codec")
    __alphabet: Alphabet
    __width: int
    __random_size: int

    def __init__(self,
                 alphabet: Alphabet = Alphabet.standard,
                 width: int = Width.UINT64,
                 random_size: int = 16):
        integer.max_value(width)
        self.__alphabet = alphabet
        self.__width = width
        self.__random_size = random_size

    @staticmethod
    def from_configuration(conf: Base62.Configuration) -> Base62:
        return Base62(conf.alphabet, conf.width, conf.random_size)

    @staticmethod
    def create_instance_with_inverted_character_set() -> Base62:
        return Base62(Alphabet.inverted)

    @staticmethod
    def create_instance_with_gmp_character_set() -> Base62:
        return Base62(Alphabet.gmp)

    def alphabet(self) -> Alphabet:
        return self.__alphabet

    def width(self) -> int:
        return self.__width

    def random_size(self) -> int:
        return self.__random_size

    def encode(self, message: util.Symbols) -> bytes:
        return binary.encode(message, self.__alphabet)

    def encode_str(self, message: util.Symbols) -> str:
        return self.encode(message).decode()

    def decode(self, encoded: util.Symbols) -> typing.Optional[bytes]:
        return binary.decode(encoded, self.__alphabet)

    def encode_int(self, value: int) -> bytes:
        return integer.encode(value, self.__alphabet)

    def encode_int_str(self, value: int) -> str:
        return self.encode_int(value).decode()

    def decode_int(self, encoded: util.Symbols,
                   width: typing.Optional[int] = None) -> int:
        return integer.decode(encoded, self.__width if width is None else width,
                              self.__alphabet)

    def decode_int_or_none(self, encoded: util.Symbols,
                           width: typing.Optional[int] = None
                           ) -> typing.Optional[int]:
        return integer.decode_or_none(encoded,
                                      self.__width if width is None else width,
                                      self.__alphabet)

    def is_valid(self, text: util.Symbols) -> bool:
        return self.__alphabet.is_valid_symbols(util.as_bytes(text))

    def validate(self, text: str) -> typing.Optional[str]:
        """
        Return the text unchanged if every symbol belongs to the alphabet
        """
        return text if self.is_valid(text) else None

    def random(self, size: typing.Optional[int] = None) -> str:
        """
        Encode cryptographically random bytes
        Args:
            size: Number of random bytes, the configured size by default
        Returns:
            Base62 string
        """
        size = self.__random_size if size is None else size
        self.logger.debug("Generating {} random bytes".format(size))
        return self.encode_str(util.random_bytes(size))

    def __repr__(self):
        return "Base62(alphabet={}, width={})".format(
            self.__alphabet.name(), int(self.__width))

    class Configuration:
        alphabet: Alphabet
        width: int
        random_size: int

        def __init__(self, alphabet: Alphabet, width: int, random_size: int):
            self.alphabet = alphabet
            self.width = width
            self.random_size = random_size

        class Builder:
            alphabet: Alphabet = Alphabet.standard
            width: int = Width.UINT64
            random_size: int = 16

            def __init__(self):
                pass

            def set_alphabet(self, alphabet: Alphabet) -> __class__:
                self.alphabet = alphabet
                return self

            def set_width(self, width: int) -> __class__:
                self.width = width
                return self

            def set_random_size(self, random_size: int) -> __class__:
                self.random_size = random_size
                return self

            def build(self) -> Base62.Configuration:
                integer.max_value(self.width)
                if self.random_size < 0:
                    raise ValueError("Random size must be non-negative")
                return Base62.Configuration(self.alphabet, self.width,
                                            self.random_size)
