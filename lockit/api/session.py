# lockit/api/session.py
"""
Session teardown.

Works with plain cookie sessions (Starlette SessionMiddleware) and with an
optional server-side store keyed by the session's `sid`.
"""
import logging
from typing import Callable, Optional, Protocol

from fastapi import Request

logger = logging.getLogger(__name__)

SESSION_ID_KEY = "sid"


class SessionStore(Protocol):
    """Server-side session storage."""

    def delete(self, session_id: str) -> None:
        ...


def destroy(
    request: Request,
    store: Optional[SessionStore] = None,
    done: Optional[Callable[[], None]] = None,
) -> None:
    """
    Destroy the current session.

    The store record is removed first (when there is one), then the
    session data carried by the request is cleared so the cookie is
    emptied on the response. `done` runs last.
    """
    session_id = request.session.get(SESSION_ID_KEY)
    if store is not None and session_id:
        store.delete(session_id)
        logger.info("Destroyed server-side session")

    request.session.clear()

    if done is not None:
        done()
