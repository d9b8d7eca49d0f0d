"""
app/api/auth.py

Purpose: Authentication and profile endpoints

- Register / login / logout
- Profile read and update (bearer token)
- Forgot-password acknowledgement (demo)
- Login notification email

Store errors propagate to the handlers in app/core/errors.py.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request

from app.api.dependencies import get_bearer_token, get_identity_store
from app.core.exceptions import ValidationError
from app.core.logging import get_logger
from app.schemas.auth import (
    AuthResponse,
    ForgotPasswordRequest,
    LoginNotificationRequest,
    LoginRequest,
    ProfileResponse,
    ProfileUpdateResponse,
    ProfileView,
    RegisterRequest,
    UpdateProfileRequest,
    UserView,
)
from app.schemas.response import MessageResponse
from app.services.identity_store import IdentityStore
from app.services.notification_service import notification_service
from utils.constants import (
    MSG_EMAIL_REQUIRED,
    MSG_LOGGED_IN,
    MSG_LOGGED_OUT,
    MSG_PROFILE_UPDATED,
    MSG_REGISTERED,
)

logger = get_logger(__name__)
router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(body: Optional[RegisterRequest] = None, store: IdentityStore = Depends(get_identity_store)):
    body = body or RegisterRequest()
    user, token = await store.register(body.email, body.password, body.name)
    return AuthResponse(message=MSG_REGISTERED, token=token, user=UserView.from_user(user))


@router.post("/login", response_model=AuthResponse)
async def login(body: Optional[LoginRequest] = None, store: IdentityStore = Depends(get_identity_store)):
    body = body or LoginRequest()
    user, token = await store.login(body.email, body.password)
    return AuthResponse(message=MSG_LOGGED_IN, token=token, user=UserView.from_user(user))


@router.get("/me", response_model=ProfileResponse)
@router.get("/profile", response_model=ProfileResponse)
async def get_profile(
    token: str = Depends(get_bearer_token),
    store: IdentityStore = Depends(get_identity_store),
):
    user = await store.get_profile(token)
    return ProfileResponse(user=ProfileView.from_user(user))


@router.post("/update-profile", response_model=ProfileUpdateResponse)
async def update_profile(
    body: Optional[UpdateProfileRequest] = None,
    token: str = Depends(get_bearer_token),
    store: IdentityStore = Depends(get_identity_store),
):
    fields = body.provided_fields() if body else {}
    user = await store.update_profile(token, fields)
    return ProfileUpdateResponse(message=MSG_PROFILE_UPDATED, user=ProfileView.from_user(user))


@router.post("/forgot-password", response_model=MessageResponse)
async def forgot_password(body: Optional[ForgotPasswordRequest] = None, store: IdentityStore = Depends(get_identity_store)):
    message = await store.forgot_password(body.email if body else None)
    return MessageResponse(message=message)


@router.post("/logout", response_model=MessageResponse)
async def logout():
    """Tokens are stateless; nothing to revoke."""
    logger.debug("Logout requested")
    return MessageResponse(message=MSG_LOGGED_OUT)


@router.post("/send-login-notification")
async def send_login_notification(
    request: Request,
    body: Optional[LoginNotificationRequest] = None,
):
    """
    Emails the user about a new login. Delivery problems are reported
    in the body but never fail the request.
    """
    body = body or LoginNotificationRequest()
    if not body.email:
        raise ValidationError(MSG_EMAIL_REQUIRED)

    details = notification_service.build_details(
        email=body.email,
        client_ip=request.client.host if request.client else None,
        timestamp=body.timestamp,
        device_type=body.device_type,
        browser=body.browser,
        ip_address=body.ip_address,
        location=body.location,
        login_type=body.login_type,
    )
    return await notification_service.send_login_notification(details)
