"""Tests for the base32 secret codec."""

from __future__ import annotations

import os

import pytest

from lockit.core.exceptions import InvalidEncodingError, LockitError
from lockit.security import codec

RFC_SECRET = b"12345678901234567890"


def test_encode_known_values():
    assert codec.encode(b"abcd1234") == "MFRGGZBRGI2DI==="
    assert codec.encode(RFC_SECRET) == "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"
    assert codec.encode(b"") == ""


def test_encoded_length_is_multiple_of_eight():
    for n in range(1, 12):
        assert len(codec.encode(b"x" * n)) % 8 == 0


def test_round_trip_random_secrets():
    for n in (0, 1, 5, 10, 16, 20, 33, 64):
        secret = os.urandom(n)
        assert codec.decode(codec.encode(secret)) == secret


def test_decode_is_case_insensitive():
    assert codec.decode("mfrggzbrgi2di===") == b"abcd1234"


def test_decode_ignores_spaces():
    assert codec.decode(" JBSW Y3DP EHPK 3PXP ") == codec.decode("JBSWY3DPEHPK3PXP")


def test_decode_accepts_unpadded():
    assert codec.decode("MFRGGZBRGI2DI") == b"abcd1234"


@pytest.mark.parametrize(
    "text",
    [
        "MFRGGZBRGI2DI==",     # padded but not a multiple of 8
        "MFRG=GZBRGI2DI==",    # pad character in the middle
        "MFRGGZB1",            # '1' is not in the alphabet
        "MFRGGZB!",
        "A=======",            # 7 pad chars never occur
        "A",
        "ÄBCDEFGH",
        "MFRGGZBRGI2DIß",      # would case-fold to ...SS
        "MFRGGZBRGI2ﬀ",        # ligature would case-fold to FF
    ],
)
def test_decode_rejects_invalid(text):
    with pytest.raises(InvalidEncodingError):
        codec.decode(text)


def test_decode_rejects_non_text():
    with pytest.raises(InvalidEncodingError):
        codec.decode(b"MFRGGZBRGI2DI===")


def test_invalid_encoding_is_lockit_error():
    assert issubclass(InvalidEncodingError, LockitError)
    assert issubclass(InvalidEncodingError, ValueError)


def test_generate_secret_is_160_bits():
    secret = codec.generate_secret()
    assert isinstance(secret, bytes)
    assert len(secret) == 20
    assert codec.generate_secret() != secret
