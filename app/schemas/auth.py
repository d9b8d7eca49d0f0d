"""
app/schemas/auth.py

Purpose: Request/response schemas for the auth endpoints

- Request bodies accept missing fields so the identity store
  reports them as 400s rather than framework 422s
- Wire names are camelCase; Python attributes are snake_case
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from app.models.user import User


class WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)


class RegisterRequest(WireModel):
    email: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None


class LoginRequest(WireModel):
    email: Optional[str] = None
    password: Optional[str] = None


class ForgotPasswordRequest(WireModel):
    email: Optional[str] = None


class UpdateProfileRequest(WireModel):
    """
    Only keys present in the body are applied; use `provided_fields()`
    to tell an explicit null apart from an absent key.
    """
    name: Optional[str] = None
    email: Optional[str] = None
    mobile_number: Optional[str] = Field(default=None, alias="mobileNumber")
    alternative_number: Optional[str] = Field(default=None, alias="alternativeNumber")
    aadhar_number: Optional[str] = Field(default=None, alias="aadharNumber")
    avatar: Optional[str] = None

    def provided_fields(self) -> dict:
        return {name: getattr(self, name) for name in self.model_fields_set}


class LoginNotificationRequest(WireModel):
    email: Optional[str] = None
    timestamp: Optional[str] = None
    device_type: Optional[str] = Field(default=None, alias="deviceType")
    browser: Optional[str] = None
    ip_address: Optional[str] = Field(default=None, alias="ipAddress")
    location: Optional[str] = None
    login_type: Optional[str] = Field(default=None, alias="loginType")


class UserView(WireModel):
    id: str
    email: str
    name: str

    @classmethod
    def from_user(cls, user: User) -> "UserView":
        return cls(id=user.id, email=user.email, name=user.name)


class ProfileView(UserView):
    mobile_number: str = Field(default="", alias="mobileNumber")
    alternative_number: str = Field(default="", alias="alternativeNumber")
    aadhar_number: str = Field(default="", alias="aadharNumber")
    avatar: Optional[str] = None

    @classmethod
    def from_user(cls, user: User) -> "ProfileView":
        # Empty values collapse to the wire defaults ("" and null)
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            mobile_number=user.mobile_number or "",
            alternative_number=user.alternative_number or "",
            aadhar_number=user.aadhar_number or "",
            avatar=user.avatar or None,
        )


class AuthResponse(WireModel):
    success: bool = True
    message: str
    token: str
    user: UserView


class ProfileResponse(WireModel):
    success: bool = True
    user: ProfileView


class ProfileUpdateResponse(ProfileResponse):
    message: str
