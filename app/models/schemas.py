"""Pydantic schemas for request/response validation"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime


class UserPayload(BaseModel):
    """Request body for creating or updating a user"""
    name: str = Field(..., min_length=1, description="Display name", examples=["Alice"])
    email: str = Field(..., min_length=1, description="Email address", examples=["a@x.com"])
    password: str = Field(..., min_length=1, description="Account password", examples=["p1"])

    @field_validator("name", "email", "password")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Value cannot be empty or whitespace only")
        return v


class UserDto(BaseModel):
    """Public projection of a user (never includes the password)"""
    id: int = Field(..., description="User identifier")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address")


class FieldError(BaseModel):
    """Single field-level validation failure"""
    field: str = Field(..., description="Name of the offending field")
    message: str = Field(..., description="Why the field was rejected")


class ErrorResponse(BaseModel):
    """Error response schema"""
    Message: str = Field(..., description="Human readable error message")
    Details: Optional[str] = Field(default=None, description="Underlying error text")


class ValidationErrorResponse(BaseModel):
    """Error response carrying field-level validation failures"""
    Message: str = Field(..., description="Human readable error message")
    Errors: List[FieldError] = Field(..., description="Field-level errors")


class HealthCheck(BaseModel):
    """Health check response"""
    status: str = Field(..., description="Service status")
    timestamp: datetime = Field(..., description="Current timestamp")
    user_count: int = Field(..., description="Number of users currently stored")
    version: str = Field(..., description="API version")
