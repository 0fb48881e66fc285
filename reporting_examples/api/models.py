"""
Pydantic models for FastAPI request/response schemas.

Request models accept raw JSON values for the fields the core validates, so
that a bad value produces the core's domain error (HTTP 400) rather than a
generic schema error.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


# ============================================================================
# User Models
# ============================================================================

class UserCreateRequest(BaseModel):
    """Request to create a user."""

    name: Any = Field(None, description="Display name (1-100 characters)")
    email: Any = Field(None, description="Unique email address")
    age: Any = Field(None, description="Age in years (0-150)")

    class Config:
        json_schema_extra = {
            "example": {
                "name": "John Doe",
                "email": "john@example.com",
                "age": 30
            }
        }


class UserUpdateRequest(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    name: Any = None
    email: Any = None
    age: Any = None

    class Config:
        json_schema_extra = {
            "example": {"age": 31}
        }


class UserResponse(BaseModel):
    """Serialized user."""

    id: int
    name: str
    email: str
    age: int
    created_at: datetime
    is_active: bool
    is_adult: bool

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "id": 1,
                "name": "John Doe",
                "email": "john@example.com",
                "age": 30,
                "createdAt": "2024-01-01T12:00:00Z",
                "isActive": True,
                "isAdult": True
            }
        }


# ============================================================================
# Calculator Models
# ============================================================================

class BinaryOperands(BaseModel):
    a: Any = None
    b: Any = None

    class Config:
        json_schema_extra = {"example": {"a": 6, "b": 3}}


class PowerOperands(BaseModel):
    base: Any = None
    exponent: Any = None

    class Config:
        json_schema_extra = {"example": {"base": 2, "exponent": 10}}


class UnaryOperand(BaseModel):
    number: Any = None

    class Config:
        json_schema_extra = {"example": {"number": 7}}


# ============================================================================
# Data Processing Models
# ============================================================================

class DataRequest(BaseModel):
    data: Any = None

    class Config:
        json_schema_extra = {"example": {"data": [1, 2, 3, 4, 5]}}


class FilterCondition(BaseModel):
    type: Optional[str] = None
    value: Any = None


class FilterRequest(DataRequest):
    condition: FilterCondition = Field(default_factory=FilterCondition)

    class Config:
        json_schema_extra = {
            "example": {"data": [1, 2, 3, 4, 5], "condition": {"type": "greater", "value": 3}}
        }


class TransformRequest(DataRequest):
    operation: Optional[str] = None

    class Config:
        json_schema_extra = {"example": {"data": [1, 2, 3], "operation": "double"}}


class SortRequest(DataRequest):
    field: Optional[str] = None
    order: str = "asc"

    class Config:
        json_schema_extra = {
            "example": {
                "data": [{"name": "Charlie", "value": 3}, {"name": "Alice", "value": 1}],
                "field": "value",
                "order": "asc"
            }
        }


class GroupRequest(DataRequest):
    key: Optional[str] = None


class FieldRule(BaseModel):
    type: str = Field(..., description="JSON type: string, number, boolean, object, array, null")
    required: bool = False


class ValidateRequest(DataRequest):
    rules: Dict[str, FieldRule] = Field(default_factory=dict, alias="schema")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "data": [{"name": "John", "age": 25}],
                "schema": {
                    "name": {"type": "string", "required": True},
                    "age": {"type": "number", "required": True}
                }
            }
        }


class ValidationResult(BaseModel):
    is_valid: bool
    errors: List[str]

    class Config:
        alias_generator = to_camel
        populate_by_name = True


# ============================================================================
# System Models
# ============================================================================

class HealthStatus(BaseModel):
    """Health check status."""

    status: str = Field(..., description="Always OK while the process serves requests")
    timestamp: datetime = Field(..., description="Current server time")
    uptime: float = Field(..., description="Seconds since application start")


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Detailed error information")
    code: Optional[str] = Field(None, description="Error code")

    class Config:
        json_schema_extra = {
            "example": {
                "error": "User not found",
                "code": "USER_NOT_FOUND"
            }
        }
