# lockit/api/v1/endpoints/session.py
from fastapi import APIRouter, Depends, Request

from lockit.api.deps import restrict
from lockit.api.session import destroy

router = APIRouter()


@router.get("/me", dependencies=[Depends(restrict())])
async def me():
    return {"logged_in": True}


@router.post("/logout")
async def logout(request: Request):
    destroy(request)
    return {"logged_out": True}
