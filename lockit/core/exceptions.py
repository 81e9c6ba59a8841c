# lockit/core/exceptions.py
"""
Error taxonomy for the two-factor core.

All errors are local and recoverable: they describe input the caller must fix
before calling the OTP engine. A failed verification is NOT an error - it is
reported as ``VerifyResult(matched=False)``.
"""


class LockitError(ValueError):
    """Base class for all Lockit input errors."""


class InvalidEncodingError(LockitError):
    """Base32 text violates the alphabet or padding rules."""


class InvalidSecretError(LockitError):
    """Secret is empty or not a byte sequence."""


class UnrecognizedSchemeError(LockitError):
    """Database connection string uses a scheme with no known adapter."""

    def __init__(self, scheme: str):
        self.scheme = scheme
        super().__init__(f"No database adapter for scheme: {scheme or '<none>'}")
