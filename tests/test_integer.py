from base62_standard import integer
from base62_standard.alphabet import Alphabet
from base62_standard.integer import Width
from base62_standard.structure import EmptyException, \
    InvalidCharacterException, OverflowException
from hypothesis import given
from hypothesis import strategies as st
import pytest

KNOWN_ENCODINGS = [
    (0, b"0"), (9, b"9"), (10, b"A"), (35, b"Z"), (36, b"a"), (61, b"z"),
    (42, b"g"), (62, b"10"), (63, b"11"), (123, b"1z"), (124, b"20"),
    (255, b"47"), (3844, b"100"), (2 ** 64 - 1, b"LygHa16AHYF"),
]


@pytest.mark.parametrize("value, expected", KNOWN_ENCODINGS)
def test_known_encodings(value, expected):
    assert integer.encode(value) == expected
    assert integer.decode(expected) == value


def test_zero_is_single_zero_symbol(alphabet):
    assert integer.encode(0, alphabet) == bytes([alphabet.zero()])


@pytest.mark.parametrize("value, length", [
    (0, 1), (1, 1), (61, 1), (62, 2), (3843, 2), (3844, 3), (238327, 3),
    (238328, 4),
])
def test_encoded_length(value, length):
    assert len(integer.encode(value)) == length


def test_other_alphabets():
    assert integer.encode(42, Alphabet.inverted) == b"G"
    assert integer.decode(b"A", alphabet=Alphabet.gmp) == 0
    assert integer.decode(b"a", alphabet=Alphabet.gmp) == 26
    assert integer.decode(b"0", alphabet=Alphabet.gmp) == 52


def test_accepts_text():
    assert integer.decode("g") == 42
    assert integer.decode(bytearray(b"10")) == 62


def test_cross_alphabet_decoding_is_permissive():
    encoded = integer.encode(42, Alphabet.standard)
    assert integer.decode(encoded, alphabet=Alphabet.inverted) == 16


def test_empty_input():
    with pytest.raises(EmptyException):
        integer.decode(b"")
    assert integer.decode_or_none(b"") is None


def test_invalid_character():
    with pytest.raises(InvalidCharacterException) as e:
        integer.decode(b"!!")
    assert e.value.byte == ord("!")
    assert e.value.value == "!!"


def test_invalid_character_reports_offending_byte():
    with pytest.raises(InvalidCharacterException) as e:
        integer.decode("abc-d_")
    assert e.value.byte == ord("-")
    assert str(e.value) == "Invalid Base62 byte 0x2D in 'abc-d_'"


def test_non_ascii_text_is_invalid():
    with pytest.raises(InvalidCharacterException) as e:
        integer.decode("café")
    assert e.value.byte == 0xc3
    assert e.value.value == "café"


@pytest.mark.parametrize("encoded, expected", [
    (b"46", 254), (b"47", 255),
])
def test_uint8_boundary(encoded, expected):
    assert integer.decode(encoded, Width.UINT8) == expected


@pytest.mark.parametrize("encoded", [b"48", b"49", b"ZZ", b"100"])
def test_uint8_overflow(encoded):
    with pytest.raises(OverflowException):
        integer.decode(encoded, Width.UINT8)
    assert integer.decode_or_none(encoded, Width.UINT8) is None


def test_overflow_stops_scan_before_invalid_character():
    with pytest.raises(OverflowException):
        integer.decode(b"ZZZ!", Width.UINT8)


def test_invalid_character_before_overflow():
    with pytest.raises(InvalidCharacterException):
        integer.decode(b"Z!ZZZ", Width.UINT8)


@pytest.mark.parametrize("width", list(Width))
def test_maximum_value_round_trip(width):
    maximum = integer.max_value(width)
    encoded = integer.encode(maximum)
    assert integer.decode(encoded, width) == maximum
    with pytest.raises(OverflowException):
        integer.decode(integer.encode(maximum + 1), width)


def test_arbitrary_width():
    assert integer.decode(b"z", 6) == 61
    assert integer.decode(b"11", 6) == 63
    with pytest.raises(OverflowException):
        integer.decode(b"12", 6)


def test_rejects_non_positive_width():
    with pytest.raises(ValueError):
        integer.decode(b"1", 0)


def test_rejects_negative_value():
    with pytest.raises(ValueError, match="negative"):
        integer.encode(-1)


def test_rejects_non_integer():
    with pytest.raises(TypeError):
        integer.encode("42")


@given(st.integers(min_value=0, max_value=2 ** 64 - 1),
       st.sampled_from([Alphabet.standard, Alphabet.inverted, Alphabet.gmp]))
def test_round_trip(value, alphabet):
    encoded = integer.encode(value, alphabet)
    assert alphabet.is_valid_symbols(encoded)
    assert integer.decode(encoded, Width.UINT64, alphabet) == value


@given(st.integers(min_value=1, max_value=2 ** 128 - 1))
def test_no_leading_zero_symbols(value):
    assert integer.encode(value)[0] != Alphabet.standard.zero()
