# lockit/api/v1/endpoints/otp.py
"""
API endpoints for TOTP two-factor authentication.

Endpoints:
- POST /otp/provision - Secret + otpauth URI + QR code for an account
- POST /otp/verify - Check a submitted code (stateless)

Security:
- Codes compared in constant time
- Secrets and codes are never logged
- The secret comes from the caller, so a match here never logs a
  session in; that stays with the login flow that owns the stored secret
"""
import logging

from fastapi import APIRouter, HTTPException, status

from lockit.core.config import settings
from lockit.core.exceptions import LockitError
from lockit.schemas.otp import (
    ProvisionRequest,
    ProvisionResponse,
    VerificationWindow,
    VerifyRequest,
    VerifyResponse,
)
from lockit.security import codec, provisioning, qr
from lockit.security import totp as otp_engine

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/provision", response_model=ProvisionResponse)
async def provision(request: ProvisionRequest):
    """
    Produce everything an authenticator app needs to enroll `account`.

    When the client sends no secret, a fresh 160-bit one is generated.
    Storing it is the caller's job.
    """
    try:
        secret = codec.decode(request.secret) if request.secret else codec.generate_secret()
    except LockitError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    if not secret:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Secret must not be empty")

    issuer = request.issuer or settings.OTP_ISSUER
    uri = provisioning.build(secret, request.account, issuer)

    return ProvisionResponse(
        secret=codec.encode(secret),
        uri=uri,
        qr_code=qr.render_png_base64(uri),
        chart_url=provisioning.chart_url(uri),
    )


@router.post("/verify", response_model=VerifyResponse)
async def verify(body: VerifyRequest):
    """
    Verify a submitted code against the drift window.

    `matched` reports any hit inside the window, `valid` only the exact
    step. The session is left untouched.
    """
    default = settings.verification_window
    window = VerificationWindow(
        window_size=default.window_size if body.window_size is None else body.window_size,
        time_step=body.time_step or default.time_step,
    )

    try:
        secret = codec.decode(body.secret)
        result = otp_engine.verify(body.token, secret, window=window, digits=settings.OTP_DIGITS)
    except LockitError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    if result.matched and not result.exact:
        logger.info("OTP rejected: clock drift of %d step(s)", result.delta)

    return VerifyResponse(matched=result.matched, delta=result.delta, valid=result.exact)
