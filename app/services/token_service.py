"""
app/services/token_service.py

Purpose: Bearer token codec

Tokens are "token-<user id>": no signature, no expiry. They are a
reversible encoding of the user id, not a security mechanism. User ids
must never contain the "-" delimiter.
"""

from typing import Optional

TOKEN_PREFIX = "token"
TOKEN_DELIMITER = "-"


def issue_token(user_id: str) -> str:
    """
    Builds the bearer token for a user id.

    Raises:
        ValueError: If the id contains the token delimiter
    """
    if TOKEN_DELIMITER in user_id:
        raise ValueError(f"User id {user_id!r} contains the token delimiter")
    return f"{TOKEN_PREFIX}{TOKEN_DELIMITER}{user_id}"


def parse_token(token: Optional[str]) -> Optional[str]:
    """
    Extracts the user id from a token.

    The token is split on "-" and the second component is the id.
    Returns None when there is no second component.
    """
    if not token:
        return None
    parts = token.split(TOKEN_DELIMITER)
    if len(parts) < 2 or not parts[1]:
        return None
    return parts[1]


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Pulls the token out of an Authorization header ("Bearer <token>").
    """
    if not authorization:
        return None
    parts = authorization.split(" ")
    if len(parts) < 2 or not parts[1]:
        return None
    return parts[1]
