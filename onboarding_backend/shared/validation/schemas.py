"""Pydantic schemas for onboarding session requests"""
from pydantic import BaseModel, Field, field_validator, ValidationError
from typing import Optional
from enum import Enum

from shared.database.config import SessionDefaults


class BusinessStatus(str, Enum):
    """Lifecycle states of a business row"""
    ACTIVE = "active"


class SessionStatus(str, Enum):
    """Lifecycle states of an onboarding session"""
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"


class CreateSessionRequest(BaseModel):
    """Body of POST /api/session"""
    businessName: str = Field(
        default=SessionDefaults.BUSINESS_NAME,
        description="Display name of the business being onboarded"
    )

    model_config = {"extra": "ignore"}

    @field_validator('businessName', mode='before')
    @classmethod
    def default_when_null(cls, v):
        """An explicit null means the default name"""
        if v is None:
            return SessionDefaults.BUSINESS_NAME
        return v


def validate_create_session_request(data: Optional[dict]) -> CreateSessionRequest:
    """
    Validate the session creation body.

    Args:
        data: Decoded JSON body, or None when the body was empty or not JSON

    Returns:
        CreateSessionRequest

    Raises:
        ValueError: If the body is not an object or a field has the wrong type
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")

    try:
        return CreateSessionRequest(**data)
    except ValidationError as e:
        errors = [f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()]
        raise ValueError(f"Invalid request: {'; '.join(errors)}") from e
