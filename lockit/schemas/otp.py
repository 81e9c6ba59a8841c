# lockit/schemas/otp.py
"""
Pydantic schemas for one-time password configuration, results and endpoints.

Note: secrets travel as base32 text in request/response bodies only.
They are never persisted by this service.
"""
from pydantic import BaseModel, Field
from typing import Optional


class VerificationWindow(BaseModel):
    """
    Clock-drift tolerance for TOTP verification.

    - window_size: steps accepted before AND after the current step
    - time_step: length of one step in seconds

    The default of 6 steps (+/- 3 minutes) favours users with badly
    synchronised phones over a short replay window.
    """
    window_size: int = Field(6, ge=0)
    time_step: int = Field(30, gt=0)


class VerifyResult(BaseModel):
    """
    Outcome of a window search.

    `delta` is the matching counter offset (0 = exact step) and is only
    set when `matched` is True. Callers that refuse any drift check
    `delta == 0` themselves.
    """
    matched: bool
    delta: Optional[int] = None

    @property
    def exact(self) -> bool:
        return self.matched and self.delta == 0


class ProvisionRequest(BaseModel):
    """Request a provisioning URI (and QR) for an account."""
    account: str = Field(..., min_length=1, max_length=254)
    issuer: Optional[str] = Field(None, min_length=1, max_length=64)
    secret: Optional[str] = Field(
        None,
        description="Existing base32 secret; a new one is generated when omitted"
    )


class ProvisionResponse(BaseModel):
    secret: str
    uri: str
    qr_code: str = Field(..., description="Base64-encoded PNG of the provisioning URI")
    chart_url: str


class VerifyRequest(BaseModel):
    token: str = Field(..., max_length=16)
    secret: str = Field(..., min_length=1)
    window_size: Optional[int] = Field(None, ge=0, le=20)
    time_step: Optional[int] = Field(None, gt=0)


class VerifyResponse(BaseModel):
    """`valid` is the strict (zero drift) decision; `matched` tolerates drift."""
    matched: bool
    delta: Optional[int] = None
    valid: bool
