from uuid import uuid4

from fastapi import Request, Response

from shop_cart.config import get_settings


def get_session_id(request: Request, response: Response) -> str:
    """Session id from the session cookie; a new session is started when there is none."""
    cookie = get_settings().session_cookie
    session_id = request.cookies.get(cookie)
    if not session_id:
        session_id = uuid4().hex
        response.set_cookie(cookie, session_id, httponly=True, samesite="lax")
    return session_id
