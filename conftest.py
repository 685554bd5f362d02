from base62_standard.alphabet import Alphabet
import pytest

ALPHABETS = [Alphabet.standard, Alphabet.inverted, Alphabet.gmp]


@pytest.fixture(params=ALPHABETS, ids=lambda a: a.name())
def alphabet(request) -> Alphabet:
    return request.param
