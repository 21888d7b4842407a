# quillblog/api/deps.py

import logging
from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from quillblog.core.errors import Unauthenticated
from quillblog.core.security import decode_access_token
from quillblog.db.session import get_db  # noqa: F401
from quillblog.schemas.user import CurrentUser

logger = logging.getLogger(__name__)

DEFAULT_CLIENT_IP = "0.0.0.0"

# Upper bound of the INTEGER primary key columns
MAX_ID = 2**31 - 1

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> CurrentUser:
    if credentials is None or not credentials.credentials:
        raise Unauthenticated("Access token required")
    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise Unauthenticated("Invalid token", status_code=403)
    return CurrentUser(id=payload["sub"], username=payload.get("username", ""))


def get_client_ip(request: Request) -> str:
    """
    Source address used to deduplicate anonymous likes.

    Falls back from the peer address to the proxy headers and finally
    to a placeholder.
    """
    if request.client and request.client.host:
        return request.client.host
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip.strip()
    return DEFAULT_CLIENT_IP
