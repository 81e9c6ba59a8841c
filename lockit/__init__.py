"""Lockit - TOTP two-factor authentication utilities."""

__version__ = "1.0.0"
