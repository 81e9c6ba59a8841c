# lockit/security/totp.py
"""
HOTP / TOTP engine
RFC 4226 (HOTP) and RFC 6238 (TOTP) - Compatible with Google Authenticator, Authy, Aegis

Key points:
- HMAC-SHA1 + dynamic truncation done by pyotp.HOTP
- 6-digit codes by default, 30-second time step
- Secrets are raw bytes here; base32 lives in security.codec
- Window search reports the matching offset (pyotp's verify only says yes/no)

All functions are pure: the clock is a parameter (`now`) and only read from
time.time() when the caller leaves it out.
"""
import logging
import time
from typing import Iterator, Optional

import pyotp
from pyotp.utils import strings_equal

from lockit.core.exceptions import InvalidSecretError
from lockit.schemas.otp import VerificationWindow, VerifyResult
from lockit.security import codec

logger = logging.getLogger(__name__)

DEFAULT_DIGITS = 6
DEFAULT_TIME_STEP = 30
MAX_DIGITS = 10  # truncated value is < 2**31, more digits add nothing
MAX_COUNTER = 2 ** 64 - 1


def _check_secret(secret: bytes) -> bytes:
    if not isinstance(secret, (bytes, bytearray, memoryview)):
        raise InvalidSecretError("Secret must be raw bytes (decode base32 first)")
    key = bytes(secret)
    if not key:
        raise InvalidSecretError("Secret must not be empty")
    return key


def generate(secret: bytes, counter: int, digits: int = DEFAULT_DIGITS) -> str:
    """
    Compute the HOTP code for `counter`.

    Args:
        secret: raw shared secret
        counter: 0 <= counter < 2**64 (for TOTP: floor(unix_time / time_step))
        digits: code length, 1..10

    Returns:
        Zero-padded decimal string of length `digits`

    Raises:
        InvalidSecretError: empty or non-bytes secret
        ValueError: counter or digits out of range
    """
    key = _check_secret(secret)
    if not 0 <= counter <= MAX_COUNTER:
        raise ValueError(f"Counter out of range: {counter}")
    if not 1 <= digits <= MAX_DIGITS:
        raise ValueError(f"digits must be between 1 and {MAX_DIGITS}")

    return pyotp.HOTP(codec.encode(key), digits=digits).at(counter)


def counter_at(now: float, time_step: int = DEFAULT_TIME_STEP) -> int:
    """TOTP counter for a unix timestamp."""
    return int(now // time_step)


def totp(
    secret: bytes,
    now: Optional[float] = None,
    time_step: int = DEFAULT_TIME_STEP,
    digits: int = DEFAULT_DIGITS,
) -> str:
    """Current TOTP code. Useful for testing and CLIs - never expose it over the API."""
    if now is None:
        now = time.time()
    return generate(secret, counter_at(now, time_step), digits)


def _search_order(window_size: int) -> Iterator[int]:
    # 0, -1, +1, -2, +2, ...
    yield 0
    for distance in range(1, window_size + 1):
        yield -distance
        yield distance


def _well_formed(code, digits: int) -> bool:
    return (
        isinstance(code, str)
        and len(code) == digits
        and code.isascii()
        and code.isdigit()
    )


def verify(
    submitted_code: str,
    secret: bytes,
    window: Optional[VerificationWindow] = None,
    now: Optional[float] = None,
    digits: int = DEFAULT_DIGITS,
) -> VerifyResult:
    """
    Search the drift window for a counter that produces `submitted_code`.

    The search tries the current step first, then steps further away,
    past before future at equal distance. Comparison is constant-time.

    A malformed code (wrong length, non-digits, None) is simply a
    non-match. Any matching delta inside the window is accepted here;
    callers wanting zero drift must check `result.delta == 0`.

    Raises:
        InvalidSecretError: empty or non-bytes secret
    """
    key = _check_secret(secret)
    if window is None:
        window = VerificationWindow()
    if now is None:
        now = time.time()

    if isinstance(submitted_code, str):
        submitted_code = submitted_code.strip().replace(" ", "")
    if not _well_formed(submitted_code, digits):
        return VerifyResult(matched=False)

    current = counter_at(now, window.time_step)
    for delta in _search_order(window.window_size):
        counter = current + delta
        if not 0 <= counter <= MAX_COUNTER:
            continue
        expected = generate(key, counter, digits)
        if strings_equal(expected, submitted_code):
            if delta:
                logger.debug("OTP matched with clock drift of %d step(s)", delta)
            return VerifyResult(matched=True, delta=delta)

    return VerifyResult(matched=False)

