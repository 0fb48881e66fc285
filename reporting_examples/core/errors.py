"""
Exception taxonomy shared by the core services and utilities.

Every error carries a human-readable ``message`` and a machine-readable
``code``. The API layer maps the families to HTTP status codes:

- ValidationError  -> 400
- ConflictError    -> 400
- MathDomainError  -> 400
- NotFoundError    -> 404
- SimulatedError   -> 500
"""

from typing import Optional


class ReportingError(Exception):
    """Base class for all domain errors raised by the core."""

    default_message = "Unexpected error"
    code = "ERROR"
    status_code = 500

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# ============================================================================
# Validation Errors
# ============================================================================

class ValidationError(ReportingError):
    """Bad type, range or format of an input value."""

    default_message = "Invalid input"
    code = "VALIDATION_ERROR"
    status_code = 400


class InvalidName(ValidationError):
    default_message = "Invalid name"
    code = "INVALID_NAME"


class InvalidEmail(ValidationError):
    default_message = "Invalid email"
    code = "INVALID_EMAIL"


class InvalidAge(ValidationError):
    default_message = "Invalid age"
    code = "INVALID_AGE"


class InvalidFormat(ValidationError):
    default_message = "Invalid format"
    code = "INVALID_FORMAT"


class InvalidValue(ValidationError):
    default_message = "Invalid value"
    code = "INVALID_VALUE"


class NotANumber(ValidationError):
    default_message = "Argument must be a number"
    code = "NOT_A_NUMBER"


class NotAnInteger(ValidationError):
    default_message = "Argument must be an integer"
    code = "NOT_AN_INTEGER"


class NotAnArray(ValidationError):
    default_message = "Data must be an array"
    code = "NOT_AN_ARRAY"


class NotAFunction(ValidationError):
    default_message = "Argument must be a function"
    code = "NOT_A_FUNCTION"


class InvalidDate(ValidationError):
    default_message = "Date is required"
    code = "INVALID_DATE"


# ============================================================================
# Lookup / Conflict Errors
# ============================================================================

class NotFoundError(ReportingError):
    default_message = "Not found"
    code = "NOT_FOUND"
    status_code = 404


class UserNotFound(NotFoundError):
    default_message = "User not found"
    code = "USER_NOT_FOUND"


class ConflictError(ReportingError):
    default_message = "Conflict"
    code = "CONFLICT"
    status_code = 400


class DuplicateEmail(ConflictError):
    default_message = "Email already exists"
    code = "DUPLICATE_EMAIL"


# ============================================================================
# Math Domain Errors
# ============================================================================

class MathDomainError(ReportingError):
    """Argument outside the mathematical domain of an operation."""

    default_message = "Math domain error"
    code = "MATH_DOMAIN_ERROR"
    status_code = 400


class DivisionByZero(MathDomainError):
    default_message = "Division by zero is not allowed"
    code = "DIVISION_BY_ZERO"


class NegativeRadicand(MathDomainError):
    default_message = "Cannot calculate square root of negative number"
    code = "NEGATIVE_RADICAND"


class NegativeArgument(MathDomainError):
    default_message = "Cannot calculate factorial of negative number"
    code = "NEGATIVE_ARGUMENT"


# ============================================================================
# Simulated Failures
# ============================================================================

class SimulatedError(ReportingError):
    """Deliberate failure used to exercise error reporting."""

    default_message = "Simulated error for testing"
    code = "SIMULATED_ERROR"
    status_code = 500


class FlakyOperationError(SimulatedError):
    default_message = "Flaky operation failed"
    code = "FLAKY_OPERATION_FAILED"
