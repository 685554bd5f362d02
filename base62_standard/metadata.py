from __future__ import annotations
from base62_standard import binary, integer, util
from base62_standard.structure import Base62Exception, Serializable
import logging
import typing


class Base62Id(Serializable):
    """
    Identifier whose canonical form is a Base62 string

    Subclasses provide ``serialize`` and ``parse``; string conversion,
    equality and hashing follow from the serialized bytes.
    """
    logger = logging.getLogger("Base62:Id")

    @classmethod
    def from_base62(cls, base62: str):
        return cls.parse(base62.encode())

    def to_base62(self) -> str:
        return self.serialize().decode()

    def __str__(self):
        return self.to_base62()

    def __bytes__(self):
        return self.serialize()

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.serialize() == other.serialize()

    def __hash__(self):
        return hash((type(self), self.serialize()))

    def __repr__(self):
        return "{}({!r})".format(type(self).__name__, self.to_base62())

    class IdParsingException(Base62Exception):
        pass


class ShortId(Base62Id):
    width: int = integer.Width.UINT64
    __value: int

    def __init__(self, value: int):
        if not 0 <= value <= integer.max_value(self.width):
            raise ValueError("{} out of range for {} bits".format(
                value, int(self.width)))
        self.__value = value

    @classmethod
    def parse(cls, data: typing.Union[bytes, str]) -> ShortId:
        return cls(integer.decode(data, cls.width, cls.alphabet))

    def value(self) -> int:
        return self.__value

    def serialize(self) -> bytes:
        return integer.encode(self.__value, self.alphabet)

    def __int__(self):
        return self.__value


class ByteId(Base62Id):
    size: typing.Optional[int] = None
    __gid: bytes

    def __init__(self, gid: bytes):
        gid = bytes(gid)
        if self.size is not None and len(gid) != self.size:
            raise ValueError("{} must be {} bytes long, got {}".format(
                type(self).__name__, self.size, len(gid)))
        self.__gid = gid

    @classmethod
    def parse(cls, data: typing.Union[bytes, str]) -> ByteId:
        gid = binary.decode(data, cls.alphabet)
        if gid is None:
            cls.logger.debug("Failed parsing {}: {!r}".format(cls.__name__,
                                                              data))
            raise Base62Id.IdParsingException(
                "Not a valid {}: {!r}".format(cls.__name__, data))
        if cls.size is not None and len(gid) != cls.size:
            raise Base62Id.IdParsingException(
                "{} must decode to {} bytes, got {}".format(
                    cls.__name__, cls.size, len(gid)))
        return cls(gid)

    @classmethod
    def from_hex(cls, hex_str: str) -> ByteId:
        return cls(util.hex_to_bytes(hex_str))

    @classmethod
    def random(cls) -> ByteId:
        if cls.size is None:
            raise TypeError("{} has no fixed size".format(cls.__name__))
        return cls(util.random_bytes(cls.size))

    def hex_id(self) -> str:
        return util.bytes_to_hex(self.__gid)

    def get_gid(self) -> bytes:
        return self.__gid

    def serialize(self) -> bytes:
        return binary.encode(self.__gid, self.alphabet)
