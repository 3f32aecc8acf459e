"""
Uniform result type for asynchronous operations.

Every action dispatched by the state controller resolves to an
OperationResult, so failures are values on the way back to the state
instead of exceptions escaping a task.
"""

import logging
from dataclasses import dataclass
from typing import Awaitable, Generic, Optional, TypeVar

from application.exceptions import PushPullRunError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class OperationResult(Generic[T]):
    """Result of one asynchronous operation."""

    success: bool
    value: Optional[T] = None
    error: Optional[Exception] = None

    @property
    def error_message(self) -> Optional[str]:
        """Human-readable message for the error, if any."""
        if self.error is None:
            return None
        if isinstance(self.error, PushPullRunError):
            return self.error.message
        return str(self.error) or self.error.__class__.__name__

    @classmethod
    def ok(cls, value: Optional[T] = None) -> "OperationResult[T]":
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: Exception) -> "OperationResult[T]":
        return cls(success=False, error=error)


async def capture(operation: Awaitable[T], description: str = "operation") -> OperationResult[T]:
    """
    Await `operation` and wrap the outcome in an OperationResult.

    Args:
        operation: Awaitable to run
        description: Short label used in log messages

    Returns:
        OperationResult with the value on success or the exception on failure
    """
    try:
        value = await operation
    except PushPullRunError as e:
        logger.warning(f"{description} failed: {e.message}")
        return OperationResult.fail(e)
    except Exception as e:
        logger.exception(f"{description} failed unexpectedly")
        return OperationResult.fail(e)
    return OperationResult.ok(value)
