from base62_standard import Version
from base62_standard.alphabet import Alphabet
from base62_standard.codec import Base62
from base62_standard.structure import Base62Exception
import logging
import typing

logging.basicConfig(level=logging.DEBUG)

alphabets = {
    "standard": Alphabet.standard,
    "inverted": Alphabet.inverted,
    "gmp": Alphabet.gmp,
}


def execute(codec: Base62,
            argv: typing.List[str]) -> typing.Tuple[Base62, typing.Optional[str]]:
    """
    Run one console command
    Args:
        codec: Codec currently in use
        argv: Command followed by its arguments
    Returns:
        The codec to use from now on and the text to print, if any
    """
    if argv[0] == "encode" or argv[0] == "e":
        try:
            text = argv[1]
        except IndexError:
            return codec, None
        return codec, codec.encode_str(text.encode())
    elif argv[0] == "decode" or argv[0] == "d":
        try:
            encoded = argv[1]
        except IndexError:
            return codec, None
        decoded = codec.decode(encoded)
        if decoded is None:
            return codec, "Invalid Base62: {}".format(encoded)
        return codec, decoded.decode("utf-8", "replace")
    elif argv[0] == "int" or argv[0] == "i":
        try:
            value = int(argv[1])
        except (IndexError, ValueError):
            return codec, None
        try:
            return codec, codec.encode_int_str(value)
        except ValueError as e:
            return codec, str(e)
    elif argv[0] == "uint" or argv[0] == "u":
        try:
            encoded = argv[1]
        except IndexError:
            return codec, None
        try:
            return codec, str(codec.decode_int(encoded))
        except Base62Exception as e:
            return codec, str(e)
    elif argv[0] == "random" or argv[0] == "r":
        try:
            size = int(argv[1])
        except IndexError:
            size = None
        except ValueError:
            return codec, None
        return codec, codec.random(size)
    elif argv[0] == "alphabet" or argv[0] == "a":
        try:
            name = argv[1]
        except IndexError:
            return codec, "Current Alphabet: {}".format(codec.alphabet().name())
        alphabet = alphabets.get(name.lower())
        if alphabet is None:
            return codec, "Unsupported Alphabet: {}".format(name)
        conf = Base62.Configuration.Builder() \
            .set_alphabet(alphabet) \
            .set_width(codec.width()) \
            .set_random_size(codec.random_size()) \
            .build()
        return Base62.from_configuration(conf), None
    return codec, "Unknown command: {}".format(argv[0])


def main():
    print(Version.system_info_string())
    codec = Base62()
    running: bool = True
    while running:
        try:
            command = input("Base62 >>> ")
            argv = command.split(" ")
            if argv[0] == "":
                continue
            if argv[0] == "quit" or argv[0] == "q" or argv[0] == "exit":
                running = False
                continue
            codec, output = execute(codec, argv)
            if output is not None:
                print(output)
        except (KeyboardInterrupt, EOFError):
            running = False


if __name__ == "__main__":
    main()
