"""
Canonical error taxonomy.

Every ErrorKind carries its public message as its value and belongs to
exactly one HTTP status class. The status-class table below is the single
source of truth for both directions of the mapping:
- kind -> default status
- status -> kind set
No framework imports allowed.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of public error labels.

    The member value is the canonical message shown to clients.
    """

    # 400 Bad Request
    ERROR_LOGGING_OUT = "Error logging out"
    INVALID_REQUEST = "Invalid request"
    MISSING_REQUIRED_FIELDS = "Missing required fields"
    INVALID_DATA_FORMAT = "Invalid data format"
    INVALID_REQUEST_FORMAT = "Invalid request format"
    UNSUPPORTED_MEDIA_TYPE = "Unsupported media type"
    TOO_MANY_PARAMETERS = "Too many parameters"
    INVALID_QUERY_PARAMETERS = "Invalid query parameters"
    CART_CREATION_FAILED = "Cart creation failed"
    VALUE_TOO_LONG = "Value too long"
    VALUE_OUT_OF_RANGE = "Value out of range"
    INVALID_RELATION_CONSTRAINT = "Invalid relation constraint"

    # 401 Unauthorized
    UNAUTHORIZED = "Unauthorized"
    INVALID_PASSWORD = "Invalid password"
    INVALID_TOKEN = "Invalid token"
    TOKEN_EXPIRED = "Token expired"
    MISSING_TOKEN = "Missing token"
    INVALID_CREDENTIALS = "Invalid credentials"

    # 403 Forbidden
    FORBIDDEN = "Forbidden"
    INSUFFICIENT_PERMISSIONS = "Insufficient permissions"
    ACCESS_DENIED = "Access denied"

    # 404 Not Found
    RESOURCE_NOT_FOUND = "Resource not found"
    USER_NOT_FOUND = "User not found"
    CART_NOT_FOUND = "Cart not found"
    PRODUCT_NOT_FOUND = "Product not found"

    # 409 Conflict
    RESOURCE_ALREADY_EXISTS = "Resource already exists"
    USER_ALREADY_EXISTS = "User already exists"
    EMAIL_ALREADY_IN_USE = "Email already in use"
    FILE_ALREADY_EXISTS = "File already exists"
    FOREIGN_KEY_CONSTRAINT_FAILED = "Foreign key constraint failed"
    CONSTRAINT_VIOLATION = "Constraint violation"
    CASCADE_DELETE_CONSTRAINT_FAILED = "Cascade delete constraint failed"

    # 413 Payload Too Large
    FILE_TOO_LARGE = "File too large"

    # 422 Unprocessable Entity
    VALIDATION_ERROR = "Validation error"
    INVALID_EMAIL_FORMAT = "Invalid email format"
    PASSWORD_MISMATCH = "Password mismatch"
    PASSWORD_TOO_WEAK = "Password too weak"

    # 429 Too Many Requests
    TOO_MANY_REQUESTS = "Too many requests"
    RATE_LIMIT_EXCEEDED = "Rate limit exceeded"

    # 500 Internal Server Error
    INTERNAL_ERROR = "Internal server error"
    DATABASE_CONNECTION_ERROR = "Database connection error"
    FILE_UPLOAD_ERROR = "File upload error"
    FILE_DELETION_ERROR = "File deletion error"
    FILE_READ_ERROR = "File read error"
    FILE_WRITE_ERROR = "File write error"
    GENERIC_ERROR = "An error occurred while processing your request"


class SuccessMessage(str, Enum):
    """Closed set of public success messages."""

    # 200 OK
    RESOURCE_RETRIEVED = "Resource retrieved successfully"
    RESOURCE_UPDATED = "Resource updated successfully"
    RESOURCE_VALIDATED = "Resource validated successfully"
    RESOURCE_COMPLETED = "Resource completed successfully"
    OPERATION_SUCCEEDED = "Operation succeeded"
    USER_LOGGED_IN = "User logged in successfully"
    USER_LOGGED_OUT = "User logged out successfully"
    USER_REGISTERED = "User registered successfully"
    PROFILE_UPDATED = "Profile updated successfully"

    # 201 Created
    RESOURCE_CREATED = "Resource created successfully"

    # 204 No Content
    RESOURCE_DELETED = "Resource deleted successfully"


HTTP_400 = 400
HTTP_401 = 401
HTTP_403 = 403
HTTP_404 = 404
HTTP_409 = 409
HTTP_413 = 413
HTTP_422 = 422
HTTP_429 = 429
HTTP_500 = 500

MIN_HTTP_STATUS = 100
MAX_HTTP_STATUS = 599

KINDS_BY_STATUS: dict[int, frozenset[ErrorKind]] = {
    HTTP_400: frozenset(
        {
            ErrorKind.ERROR_LOGGING_OUT,
            ErrorKind.INVALID_REQUEST,
            ErrorKind.MISSING_REQUIRED_FIELDS,
            ErrorKind.INVALID_DATA_FORMAT,
            ErrorKind.INVALID_REQUEST_FORMAT,
            ErrorKind.UNSUPPORTED_MEDIA_TYPE,
            ErrorKind.TOO_MANY_PARAMETERS,
            ErrorKind.INVALID_QUERY_PARAMETERS,
            ErrorKind.CART_CREATION_FAILED,
            ErrorKind.VALUE_TOO_LONG,
            ErrorKind.VALUE_OUT_OF_RANGE,
            ErrorKind.INVALID_RELATION_CONSTRAINT,
        }
    ),
    HTTP_401: frozenset(
        {
            ErrorKind.UNAUTHORIZED,
            ErrorKind.INVALID_PASSWORD,
            ErrorKind.INVALID_TOKEN,
            ErrorKind.TOKEN_EXPIRED,
            ErrorKind.MISSING_TOKEN,
            ErrorKind.INVALID_CREDENTIALS,
        }
    ),
    HTTP_403: frozenset(
        {
            ErrorKind.FORBIDDEN,
            ErrorKind.INSUFFICIENT_PERMISSIONS,
            ErrorKind.ACCESS_DENIED,
        }
    ),
    HTTP_404: frozenset(
        {
            ErrorKind.RESOURCE_NOT_FOUND,
            ErrorKind.USER_NOT_FOUND,
            ErrorKind.CART_NOT_FOUND,
            ErrorKind.PRODUCT_NOT_FOUND,
        }
    ),
    HTTP_409: frozenset(
        {
            ErrorKind.RESOURCE_ALREADY_EXISTS,
            ErrorKind.USER_ALREADY_EXISTS,
            ErrorKind.EMAIL_ALREADY_IN_USE,
            ErrorKind.FILE_ALREADY_EXISTS,
            ErrorKind.FOREIGN_KEY_CONSTRAINT_FAILED,
            ErrorKind.CONSTRAINT_VIOLATION,
            ErrorKind.CASCADE_DELETE_CONSTRAINT_FAILED,
        }
    ),
    HTTP_413: frozenset({ErrorKind.FILE_TOO_LARGE}),
    HTTP_422: frozenset(
        {
            ErrorKind.VALIDATION_ERROR,
            ErrorKind.INVALID_EMAIL_FORMAT,
            ErrorKind.PASSWORD_MISMATCH,
            ErrorKind.PASSWORD_TOO_WEAK,
        }
    ),
    HTTP_429: frozenset(
        {
            ErrorKind.TOO_MANY_REQUESTS,
            ErrorKind.RATE_LIMIT_EXCEEDED,
        }
    ),
    HTTP_500: frozenset(
        {
            ErrorKind.INTERNAL_ERROR,
            ErrorKind.DATABASE_CONNECTION_ERROR,
            ErrorKind.FILE_UPLOAD_ERROR,
            ErrorKind.FILE_DELETION_ERROR,
            ErrorKind.FILE_READ_ERROR,
            ErrorKind.FILE_WRITE_ERROR,
            ErrorKind.GENERIC_ERROR,
        }
    ),
}

STATUS_CLASSES: frozenset[int] = frozenset(KINDS_BY_STATUS)

# One non-leaky message per status class.
SAFE_KIND_BY_STATUS: dict[int, ErrorKind] = {
    HTTP_400: ErrorKind.GENERIC_ERROR,
    HTTP_401: ErrorKind.UNAUTHORIZED,
    HTTP_403: ErrorKind.FORBIDDEN,
    HTTP_404: ErrorKind.RESOURCE_NOT_FOUND,
    HTTP_409: ErrorKind.RESOURCE_ALREADY_EXISTS,
    HTTP_413: ErrorKind.FILE_TOO_LARGE,
    HTTP_422: ErrorKind.VALIDATION_ERROR,
    HTTP_429: ErrorKind.TOO_MANY_REQUESTS,
    HTTP_500: ErrorKind.INTERNAL_ERROR,
}

_DEFAULT_STATUS: dict[ErrorKind, int] = {
    kind: status for status, kinds in KINDS_BY_STATUS.items() for kind in kinds
}

_KIND_BY_MESSAGE: dict[str, ErrorKind] = {kind.value: kind for kind in ErrorKind}


def is_http_status(value: object) -> bool:
    """Return True for an int within the HTTP status range."""
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and MIN_HTTP_STATUS <= value <= MAX_HTTP_STATUS
    )


def default_status(kind: ErrorKind) -> int:
    """Return the default HTTP status for an error kind."""
    return _DEFAULT_STATUS[kind]


def canonical_message(kind: ErrorKind) -> str:
    """Return the public message for an error kind."""
    return kind.value


def kinds_for_status(status: int) -> frozenset[ErrorKind]:
    """Return the kinds owned by a status class (empty if none)."""
    return KINDS_BY_STATUS.get(status, frozenset())


def kind_from_message(text: object) -> ErrorKind:
    """Resolve a free-form message to its kind.

    Unrecognized text, or anything that is not a string, resolves to
    GENERIC_ERROR.
    """
    if isinstance(text, ErrorKind):
        return text
    if not isinstance(text, str):
        return ErrorKind.GENERIC_ERROR
    return _KIND_BY_MESSAGE.get(text, ErrorKind.GENERIC_ERROR)


def safe_message(status: int, kind: ErrorKind) -> str:
    """Return the message shown for a status class when details are hidden.

    The 500 class shows INTERNAL_ERROR except for GENERIC_ERROR failures,
    which keep the generic text. Statuses outside the known classes fall
    back to the generic message.
    """
    if status == HTTP_500 and kind is ErrorKind.GENERIC_ERROR:
        return ErrorKind.GENERIC_ERROR.value
    return SAFE_KIND_BY_STATUS.get(status, ErrorKind.GENERIC_ERROR).value
