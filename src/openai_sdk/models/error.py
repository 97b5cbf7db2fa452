"""API error payload"""

from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator


class APIErrorDetails(BaseModel):
    """Error details returned by the API"""

    message: str = Field(..., description="Server-authored error message")
    type: Optional[str] = Field(None, description="Error type")
    param: Optional[str] = Field(None, description="Offending parameter")
    code: Optional[str] = Field(None, description="Error code")

    @field_validator("param", "code", mode="before")
    @classmethod
    def stringify_numbers(cls, v: Any) -> Any:
        """Some endpoints send numeric codes (e.g. 429)"""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class APIErrorResponse(BaseModel):
    """Error envelope: {"error": {...}}"""

    error: APIErrorDetails
