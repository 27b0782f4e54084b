"""
Gateway Result Schemas

Explicit outcome of a call to the generative model. The gateway never raises for
collaborator problems; it returns either a successful value or the reason the call
could not be used, and the route decides what to substitute.

Dependencies:
- dataclasses: For the result container
- enum: For the closed set of failure reasons
"""
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class FailureReason(str, Enum):
    """Why a gateway call produced no usable value."""
    NOT_CONFIGURED = "not_configured"
    INVALID_PROMPT = "invalid_prompt"
    TIMEOUT = "timeout"
    UPSTREAM_ERROR = "upstream_error"
    EMPTY_RESPONSE = "empty_response"
    WRONG_QUESTION_COUNT = "wrong_question_count"
    NO_OPENING_BRACE = "no_opening_brace"
    UNBALANCED_BRACES = "unbalanced_braces"
    PARSE_ERROR = "parse_error"
    MISSING_FIELDS = "missing_fields"


@dataclass(frozen=True)
class GatewayResult(Generic[T]):
    value: Optional[T] = None
    reason: Optional[FailureReason] = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.reason is None

    @classmethod
    def success(cls, value: T) -> "GatewayResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, reason: FailureReason, detail: str = "") -> "GatewayResult[T]":
        return cls(reason=reason, detail=detail)
