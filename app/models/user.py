"""
app/models/user.py

Purpose: User record model

- Identity (id, email) and credentials (plain password, demo only)
- Optional profile fields shown on the profile page
- Conversion to and from MongoDB documents
"""

from datetime import datetime, timezone
from typing import Optional, Dict, Any

from pydantic import BaseModel, Field

PROFILE_FIELDS = ("mobile_number", "alternative_number", "aadhar_number", "avatar")


class User(BaseModel):
    """
    A registered user. Keyed by email in every backend; id never changes.
    """
    id: str
    email: str
    password: str
    name: str
    mobile_number: Optional[str] = None
    alternative_number: Optional[str] = None
    aadhar_number: Optional[str] = None
    avatar: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def to_document(self) -> Dict[str, Any]:
        """Mongo document; the user id is stored as user_id, _id is left to Mongo."""
        document = self.model_dump()
        document["user_id"] = document.pop("id")
        return document

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "User":
        data = {key: value for key, value in document.items() if key != "_id"}
        data["id"] = data.pop("user_id")
        return cls(**data)
