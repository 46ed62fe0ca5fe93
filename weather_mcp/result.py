"""Success-or-failure values passed between the HTTP layer and the tool handlers."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class FailureReason(str, Enum):
    NETWORK_ERROR = "network-error"
    BAD_STATUS = "bad-status"
    PARSE_ERROR = "parse-error"
    NOT_FOUND = "not-found"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value (`ok` is True) or a tagged failure with a reason and detail."""

    value: T | None = None
    reason: FailureReason | None = None
    detail: str = ""

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, reason: FailureReason, detail: str = "") -> "Result[Any]":
        return cls(reason=reason, detail=detail)

    @property
    def ok(self) -> bool:
        return self.reason is None

    def __str__(self) -> str:
        if self.ok:
            return f"ok({self.value!r})"
        return f"{self.reason.value}: {self.detail}" if self.detail else self.reason.value
