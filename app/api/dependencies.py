"""
app/api/dependencies.py

Purpose: FastAPI dependencies shared by the routers
"""

from typing import Optional

from fastapi import Header, Request

from app.core.exceptions import AuthError
from app.services.identity_store import IdentityStore
from app.services.token_service import extract_bearer_token
from utils.constants import MSG_NO_TOKEN


def get_identity_store(request: Request) -> IdentityStore:
    """The process-wide store created in the app lifespan."""
    return request.app.state.identity_store


def get_bearer_token(authorization: Optional[str] = Header(default=None)) -> str:
    """
    Token from "Authorization: Bearer <token>".

    Raises:
        AuthError: Header missing or without a token part
    """
    token = extract_bearer_token(authorization)
    if not token:
        raise AuthError(MSG_NO_TOKEN)
    return token
