from pydantic import BaseModel
from typing import Optional, Any

class ErrorResponse(BaseModel):
    """
    Standard error envelope returned by every failing endpoint.
    """
    success: bool = False
    message: str
    code: str
    details: Optional[Any] = None

class MessageResponse(BaseModel):
    success: bool = True
    message: str
