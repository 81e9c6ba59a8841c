# lockit/api/deps.py
import logging
from typing import Callable, Optional
from urllib.parse import urlencode

from fastapi import HTTPException, Request, status

from lockit.core.config import settings

logger = logging.getLogger(__name__)

SESSION_FLAG = "logged_in"


def is_authenticated(request: Request) -> bool:
    return bool(request.session.get(SESSION_FLAG))


def requested_path(request: Request) -> str:
    path = request.url.path
    if request.url.query:
        path += "?" + request.url.query
    return path


def restrict(login_route: Optional[str] = None, rest: Optional[bool] = None) -> Callable:
    """
    Dependency factory that keeps anonymous sessions out of a route.

    - logged in → route runs
    - REST mode → 401, no redirect (JSON / machine clients)
    - otherwise → 302 to the login route, remembering where the user
      wanted to go in `?redirect=`

    Usage:
        @router.get("/private", dependencies=[Depends(restrict())])
    """
    if login_route is None:
        login_route = settings.LOGIN_ROUTE
    if rest is None:
        rest = settings.REST

    async def require_login(request: Request) -> None:
        if is_authenticated(request):
            return

        if rest:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Not authenticated",
            )

        target = requested_path(request)
        logger.info("Anonymous request to %s, redirecting to %s", request.url.path, login_route)
        raise HTTPException(
            status_code=status.HTTP_302_FOUND,
            detail="Login required",
            headers={"Location": f"{login_route}?{urlencode({'redirect': target})}"},
        )

    return require_login
