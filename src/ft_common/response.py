"""Error response body.

Successful endpoints return their payload directly (a transaction object or a
list). Every failure returns:
{
    "error": "Missing required field: amount"
}
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str


def error_response(message: str) -> ErrorResponse:
    return ErrorResponse(error=message)
