# lockit/security/codec.py
"""
Base32 codec for shared secrets (RFC 4648, '=' padded).

Authenticator apps (Google Authenticator, Authy, Aegis) exchange the shared
secret as base32 text. Internally the OTP engine only works with raw bytes,
so conversion happens here, at the boundary.
"""
import base64
import binascii

import pyotp

from lockit.core.exceptions import InvalidEncodingError

# 32 base32 characters == 20 bytes == 160-bit secret (RFC 4226 recommendation)
SECRET_LENGTH = 32


def encode(secret: bytes) -> str:
    """
    Encode raw secret bytes as upper-case base32, padded to a multiple of 8.

    Example: b"abcd1234" -> "MFRGGZBRGI2DI==="
    """
    return base64.b32encode(bytes(secret)).decode("ascii")


def decode(text: str) -> bytes:
    """
    Decode base32 text back to the raw secret.

    - Case-insensitive
    - Whitespace is ignored (apps often display "JBSW Y3DP EHPK 3PXP")
    - Fully unpadded input is padded before decoding

    Raises:
        InvalidEncodingError: characters outside A-Z / 2-7 or bad padding
    """
    if not isinstance(text, str):
        raise InvalidEncodingError("Base32 secret must be text")

    cleaned = "".join(text.split())
    # upper() would fold "ß" into "SS" before the alphabet check
    if not cleaned.isascii():
        raise InvalidEncodingError("Invalid base32 secret: non-ASCII character")

    cleaned = cleaned.upper()
    if "=" not in cleaned:
        cleaned += "=" * (-len(cleaned) % 8)

    try:
        return base64.b32decode(cleaned)
    except (binascii.Error, ValueError) as e:
        raise InvalidEncodingError(f"Invalid base32 secret: {e}") from e


def generate_secret() -> bytes:
    """
    Generate a new random 160-bit secret.

    pyotp draws the characters from the system CSPRNG.
    """
    return decode(pyotp.random_base32(length=SECRET_LENGTH))
