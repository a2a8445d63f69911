"""Result Envelopes — success/failure wrappers returned by every service operation.

Invariants:
    - A result is successful iff error_code is None (0 is a valid failure code)
    - data is populated only on success
    - CollectionResult.count == len(data) on success

Design Decisions:
    - Expected failures (not found, duplicate) travel as data, not exceptions
    - Generic pydantic models: FastAPI renders them as response bodies directly
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, computed_field

from reportdesk.core.errors import ErrorCode, ErrorMessage

T = TypeVar("T")


class BaseResult(BaseModel, Generic[T]):
    """Single-item result: data on success, error_message/error_code on failure."""
    data: T | None = None
    error_message: str | None = None
    error_code: int | None = None

    @computed_field
    @property
    def is_success(self) -> bool:
        return self.error_code is None

    @classmethod
    def failure(
        cls, code: ErrorCode, message: ErrorMessage | str | None = None,
    ) -> "BaseResult[T]":
        """Failed result with the message paired to code unless overridden."""
        if message is None:
            message = ErrorMessage[code.name]
        if isinstance(message, ErrorMessage):
            message = message.value
        return cls(error_message=message, error_code=int(code))


class CollectionResult(BaseResult[list[T]], Generic[T]):
    """Multi-item result carrying the element count alongside the data."""
    count: int = 0
