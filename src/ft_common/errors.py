"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Validation (client input, HTTP 400)
  2xxx: Transaction store
  3xxx: Cache
  9xxx: System

Only the message reaches the client, as {"error": message}.
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Validation ---

class ValidationError(AppError):
    """Client-supplied data failed a precondition. Never retried."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(code, message, 400)


class MissingFieldError(ValidationError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(1001, f"Missing required field: {field}")


class InvalidAmountError(ValidationError):
    def __init__(self) -> None:
        super().__init__(1002, "Invalid amount value")


class InvalidTypeError(ValidationError):
    def __init__(self, value: str) -> None:
        super().__init__(1003, f"Invalid transaction type: {value}")


class InvalidDateError(ValidationError):
    def __init__(self, value: str) -> None:
        super().__init__(1004, f"Invalid date: {value}")


class InvalidFilterError(ValidationError):
    def __init__(self, value: str) -> None:
        super().__init__(1005, f"Invalid filter: {value}")


class MalformedRequestError(ValidationError):
    def __init__(self, detail: str = "Malformed request body") -> None:
        super().__init__(1006, detail)


# --- 2xxx: Transaction store ---

class StoreError(AppError):
    """Persistence or query failure. Fatal to the request."""

    def __init__(self, detail: str = "Transaction store error") -> None:
        super().__init__(2001, detail, 500)


# --- 3xxx: Cache ---

class CacheError(AppError):
    """Cache get/set/delete failure. Recovered locally, never sent to clients."""

    def __init__(self, detail: str = "Cache unavailable") -> None:
        super().__init__(3001, detail, 503)


# --- 9xxx: System ---

class InternalError(AppError):
    def __init__(self, detail: str = "Internal Server Error") -> None:
        super().__init__(9002, detail, 500)
