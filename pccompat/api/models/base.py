"""
Base Pydantic models for standard API responses
"""
from typing import Any, Optional
from pydantic import BaseModel, Field


class ErrorBody(BaseModel):
    """Error information"""
    code: str = Field(..., description="Error code", examples=["VALIDATION_ERROR"])
    message: str = Field(..., description="Error message")
    details: Optional[Any] = Field(None, description="Validation details, or the exception text in debug mode")


class StandardErrorResponse(BaseModel):
    """Standard error response schema"""
    error: ErrorBody


ERROR_RESPONSES = {
    422: {"model": StandardErrorResponse, "description": "Validation error"},
    500: {"model": StandardErrorResponse, "description": "Unexpected error"},
}
