"""
Per-browser cart sessions.

A session bundles the engine for one cart namespace, its toast tray and
the cart/checkout pages. Sessions are process-local and kept in an
LRU bounded by CART_SESSION_LIMIT; the cart itself lives in the shared
key-value store.
"""
import re
import time
import uuid
from collections import OrderedDict
from typing import Callable, Optional

from fastapi import Request, Response

from stitches import config
from stitches.cart import CartEngine, CartStorage
from stitches.db import KeyValueStore, get_store
from stitches.logging import get_logger, log_id
from stitches.services.notifications import ToastTray
from stitches.views import Page

logger = get_logger(__name__)


class CartSession:
    def __init__(
        self,
        session_id: str,
        store: KeyValueStore,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.session_id = session_id
        self.toasts = ToastTray(clock=clock)
        self.engine = CartEngine(CartStorage(store, namespace=session_id), notify=self.toasts.notify)
        self.cart_page = Page.cart_view(self.engine)
        self.checkout_page = Page.checkout_view(self.engine)

    def open_cart_page(self) -> Page:
        self.cart_page.open()
        return self.cart_page

    def open_checkout_page(self) -> Page:
        self.checkout_page.open()
        return self.checkout_page


_sessions: "OrderedDict[str, CartSession]" = OrderedDict()

_SESSION_ID = re.compile(r"^[0-9a-f]{32}$")


def get_or_create_session(session_id: Optional[str]) -> CartSession:
    if session_id and not _SESSION_ID.match(session_id):
        session_id = None

    if session_id and session_id in _sessions:
        _sessions.move_to_end(session_id)
        return _sessions[session_id]

    # Unknown ids are reused so a restarted process still finds the stored cart
    session_id = session_id or uuid.uuid4().hex
    session = CartSession(session_id, get_store())
    _sessions[session_id] = session
    logger.info(f"Opened cart session {log_id(session_id)}")

    while len(_sessions) > config.CART_SESSION_LIMIT:
        evicted_id, _ = _sessions.popitem(last=False)
        logger.debug(f"Evicted cart session {log_id(evicted_id)}")
    return session


def session_count() -> int:
    return len(_sessions)


def reset_sessions() -> None:
    """Forget all in-process sessions (tests)."""
    _sessions.clear()


async def get_cart_session(request: Request, response: Response) -> CartSession:
    """FastAPI dependency: resolve the session from its cookie, issuing one if missing."""
    session_id = request.cookies.get(config.CART_SESSION_COOKIE)
    session = get_or_create_session(session_id)
    if session_id != session.session_id:
        response.set_cookie(config.CART_SESSION_COOKIE, session.session_id, httponly=True, samesite="lax")
    return session
