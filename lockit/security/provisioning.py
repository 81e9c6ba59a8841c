# lockit/security/provisioning.py
"""
otpauth:// provisioning URIs ("Key URI Format").

Format: otpauth://totp/{issuer}:{account}?secret={base32}&issuer={issuer}

This is what gets encoded in the QR code. Authenticator apps scan it to
add the account.
"""
from typing import Optional
from urllib.parse import quote

from lockit.core.config import settings
from lockit.security import codec

# Same unreserved set as JavaScript's encodeURIComponent
_SAFE = "!~*'()"


def _component(value: str) -> str:
    return quote(value, safe=_SAFE)


def build(secret: bytes, account_label: str, issuer: Optional[str] = None) -> str:
    """
    Build the provisioning URI for `account_label`.

    Every component is percent-encoded, including the base32 padding:
    build(b"abcd1234", "alice@example.com", "Acme") ->
    otpauth://totp/Acme%3Aalice%40example.com?secret=MFRGGZBRGI2DI%3D%3D%3D&issuer=Acme
    """
    if issuer is None:
        issuer = settings.OTP_ISSUER
    encoded = codec.encode(secret)
    label = f"{issuer}:{account_label}"
    return (
        f"otpauth://totp/{_component(label)}"
        f"?secret={_component(encoded)}&issuer={_component(issuer)}"
    )


def chart_url(uri: str, api: Optional[str] = None) -> str:
    """
    Link to an external QR image service for `uri`.

    The whole provisioning URI is passed as a single encoded query value.
    """
    if api is None:
        api = settings.QR_CHART_API
    return api + _component(uri)
