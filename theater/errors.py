"""
Domain Errors for the Theater Statement Engine

Both errors abort the statement being generated. They subclass ValueError
so that callers mapping validation failures to a 400 response catch them
along with every other input problem.
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    UNKNOWN_PLAY = "UNKNOWN_PLAY"
    UNKNOWN_PLAY_TYPE = "UNKNOWN_PLAY_TYPE"


class StatementError(ValueError):
    """Base error with a code and a user-safe message."""

    def __init__(self, code: ErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class UnknownPlayError(StatementError):
    """Raised when a performance references a play id missing from the catalog."""

    def __init__(self, play_id: str, customer: str | None = None):
        message = f"unknown play: {play_id}"
        if customer:
            message += f" (invoice for {customer})"
        super().__init__(ErrorCode.UNKNOWN_PLAY, message)
        self.play_id = play_id
        self.customer = customer


class UnknownPlayTypeError(StatementError):
    """Raised when a play's type is not one of the supported genres."""

    def __init__(self, play_type, play_id: str | None = None):
        message = f"unknown type: {play_type}"
        if play_id:
            message += f" (play {play_id})"
        super().__init__(ErrorCode.UNKNOWN_PLAY_TYPE, message)
        self.play_type = play_type
        self.play_id = play_id
