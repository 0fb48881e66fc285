"""
API route definitions.

Routes translate HTTP requests into service and utility calls. They do not
catch domain errors themselves: the exception handlers registered in
``reporting_examples.api.app`` map them to status codes.
"""

import logging
import math
import sys
import time
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Response, status

from reporting_examples.core.calculator import Calculator
from reporting_examples.core.data_processor import DataProcessor
from reporting_examples.core.errors import InvalidValue, UserNotFound
from reporting_examples.core.user import User
from reporting_examples.core.user_service import UserService
from reporting_examples.api.models import (
    BinaryOperands,
    DataRequest,
    FilterRequest,
    GroupRequest,
    PowerOperands,
    SortRequest,
    TransformRequest,
    UnaryOperand,
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
    ValidateRequest,
    ValidationResult,
)

logger = logging.getLogger(__name__)

users_router = APIRouter(prefix="/api/users", tags=["Users"])
calculator_router = APIRouter(prefix="/api/calculator", tags=["Calculator"])
data_router = APIRouter(prefix="/api/data", tags=["Data"])


# ============================================================================
# Dependency Injection
# ============================================================================

class ServiceContainer:
    """Container for shared service instances."""

    def __init__(self):
        self.user_service: UserService = UserService()
        self.calculator: Calculator = Calculator()
        self.started_at: float = time.monotonic()

    def initialize(self, latency_ms: Optional[float] = None, failure_rate: Optional[float] = None):
        """Replace the services with fresh instances."""
        logger.info("Initializing services...")
        self.user_service = UserService(latency_ms=latency_ms, failure_rate=failure_rate)
        self.calculator = Calculator()
        self.started_at = time.monotonic()

    def uptime(self) -> float:
        return time.monotonic() - self.started_at

    def cleanup(self):
        """Drop all in-memory state."""
        logger.info("Cleaning up services...")
        self.user_service.users.clear()


# Global service container
services = ServiceContainer()


def get_service_container() -> ServiceContainer:
    """Get the global service container."""
    return services


def get_user_service(container: ServiceContainer = Depends(get_service_container)) -> UserService:
    return container.user_service


def get_calculator(container: ServiceContainer = Depends(get_service_container)) -> Calculator:
    return container.calculator


def _serialize(user: User) -> UserResponse:
    return UserResponse(**user.to_dict())


def _finite(value: Any) -> Any:
    """JSON has no NaN or infinity; report them, and integers past the double range, as null."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, int) and abs(value) > sys.float_info.max:
        return None
    return value


# ============================================================================
# User Endpoints
# ============================================================================

@users_router.get("", response_model=List[UserResponse], summary="List Users")
async def list_users(user_service: UserService = Depends(get_user_service)):
    users = await user_service.get_all_users()
    return [_serialize(user) for user in users]


@users_router.get("/search/{query}", response_model=List[UserResponse], summary="Search Users")
async def search_users(query: str, user_service: UserService = Depends(get_user_service)):
    """Case-insensitive substring search over name and email."""
    users = await user_service.search_users(query)
    return [_serialize(user) for user in users]


@users_router.get("/{user_id}", response_model=UserResponse, summary="Get User")
async def get_user(user_id: int, user_service: UserService = Depends(get_user_service)):
    user = await user_service.get_user_by_id(user_id)
    if user is None:
        raise UserNotFound()
    return _serialize(user)


@users_router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create User"
)
async def create_user(request: UserCreateRequest, user_service: UserService = Depends(get_user_service)):
    """
    Create a new user.

    Returns 400 with the validation message when name, email or age is
    invalid, or when the email is already registered.
    """
    user = await user_service.create_user(request.name, request.email, request.age)
    return _serialize(user)


@users_router.put("/{user_id}", response_model=UserResponse, summary="Update User")
async def update_user(
    user_id: int,
    request: UserUpdateRequest,
    user_service: UserService = Depends(get_user_service)
):
    """Apply the supplied fields; omitted fields are unchanged."""
    updates = request.model_dump(exclude_unset=True)
    user = await user_service.update_user(user_id, updates)
    return _serialize(user)


@users_router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete User")
async def delete_user(user_id: int, user_service: UserService = Depends(get_user_service)):
    await user_service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================================
# Calculator Endpoints
# ============================================================================

@calculator_router.post("/add")
async def add(operands: BinaryOperands, calculator: Calculator = Depends(get_calculator)):
    result = calculator.add(operands.a, operands.b)
    return {"operation": "add", "a": operands.a, "b": operands.b, "result": _finite(result)}


@calculator_router.post("/subtract")
async def subtract(operands: BinaryOperands, calculator: Calculator = Depends(get_calculator)):
    result = calculator.subtract(operands.a, operands.b)
    return {"operation": "subtract", "a": operands.a, "b": operands.b, "result": _finite(result)}


@calculator_router.post("/multiply")
async def multiply(operands: BinaryOperands, calculator: Calculator = Depends(get_calculator)):
    result = calculator.multiply(operands.a, operands.b)
    return {"operation": "multiply", "a": operands.a, "b": operands.b, "result": _finite(result)}


@calculator_router.post("/divide")
async def divide(operands: BinaryOperands, calculator: Calculator = Depends(get_calculator)):
    result = calculator.divide(operands.a, operands.b)
    return {"operation": "divide", "a": operands.a, "b": operands.b, "result": _finite(result)}


@calculator_router.post("/power")
async def power(operands: PowerOperands, calculator: Calculator = Depends(get_calculator)):
    result = calculator.power(operands.base, operands.exponent)
    return {
        "operation": "power",
        "base": operands.base,
        "exponent": operands.exponent,
        "result": _finite(result)
    }


@calculator_router.post("/sqrt")
async def sqrt(operand: UnaryOperand, calculator: Calculator = Depends(get_calculator)):
    result = calculator.sqrt(operand.number)
    return {"operation": "sqrt", "number": operand.number, "result": _finite(result)}


@calculator_router.post("/factorial")
async def factorial(operand: UnaryOperand, calculator: Calculator = Depends(get_calculator)):
    result = calculator.factorial(operand.number)
    return {"operation": "factorial", "number": operand.number, "result": _finite(result)}


@calculator_router.post("/isPrime")
async def is_prime(operand: UnaryOperand, calculator: Calculator = Depends(get_calculator)):
    result = calculator.is_prime(operand.number)
    return {"operation": "isPrime", "number": operand.number, "result": result}


# ============================================================================
# Data Processing Endpoints
# ============================================================================

@data_router.post("/process")
async def process_data(request: DataRequest) -> Dict[str, Any]:
    """Sum, average, min, max, count, median and mode of a list of numbers."""
    stats = DataProcessor.process_array(request.data)
    return {key: _finite(value) for key, value in stats.items()}


@data_router.post("/filter")
async def filter_data(request: FilterRequest):
    predicate = DataProcessor.make_condition(request.condition.type, request.condition.value)
    try:
        filtered = DataProcessor.filter_data(request.data, predicate)
    except TypeError as e:
        raise InvalidValue(f"Cannot apply condition: {e}") from e
    return {"filtered": filtered}


@data_router.post("/transform")
async def transform_data(request: TransformRequest):
    transformer = DataProcessor.make_transformer(request.operation)
    try:
        transformed = DataProcessor.transform_data(request.data, transformer)
    except TypeError as e:
        raise InvalidValue(f"Cannot apply operation: {e}") from e
    return {"transformed": transformed}


@data_router.post("/sort")
async def sort_data(request: SortRequest):
    return {"sorted": DataProcessor.sort_data(request.data, request.field, request.order)}


@data_router.post("/group")
async def group_data(request: GroupRequest):
    return {"grouped": DataProcessor.group_by(request.data, request.key)}


@data_router.post("/validate", response_model=ValidationResult)
async def validate_data(request: ValidateRequest):
    schema = {name: rule.model_dump() for name, rule in request.rules.items()}
    result = DataProcessor.validate_data(request.data, schema)
    return ValidationResult(**result)
