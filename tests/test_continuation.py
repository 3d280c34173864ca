# tests/test_continuation.py
import random
import pytest

from entropy_engine.continuation import decode_cont, encode_cont
from entropy_engine.errors import DecodeError


def test_token_is_url_safe_without_padding():
    tok = encode_cont(b"\xfb\xff")
    assert tok == "-_8"
    assert "=" not in encode_cont(b"1 p1 A B K2 h3")


def test_roundtrip_plain_term():
    term = b"1 p1 A B K2 h3"
    assert decode_cont(encode_cont(term)) == term


def test_roundtrip_bytes_that_hit_plus_and_slash():
    # '+' / '/' in the standard alphabet; the old reader could not resume from these
    raw = b"\xfb\xff\xbf\xfe"
    assert decode_cont(encode_cont(raw)) == raw


def test_roundtrip_random_bytes():
    rnd = random.Random(7)
    for _ in range(200):
        raw = bytes(rnd.randrange(256) for _ in range(rnd.randrange(1, 40)))
        assert decode_cont(encode_cont(raw)) == raw


def test_standard_alphabet_tokens_still_decode():
    assert decode_cont("+/8=") == b"\xfb\xff"
    assert decode_cont("+/8") == b"\xfb\xff"
    assert decode_cont("-_8=") == b"\xfb\xff"


@pytest.mark.parametrize("token", ["", "abcde", "ab*d", "é"])
def test_malformed_tokens(token):
    with pytest.raises(DecodeError):
        decode_cont(token)
