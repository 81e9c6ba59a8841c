# lockit/api/v1/router.py
from fastapi import APIRouter
from lockit.api.v1.endpoints import otp, session

api_router = APIRouter()
api_router.include_router(otp.router, prefix="/otp", tags=["otp"])
api_router.include_router(session.router, prefix="/session", tags=["session"])
