"""
Failure classification for the combo API.

Errors the system can explain are raised as KnownError subclasses and
rendered by the application exception handler as a FailureDetail body.
Anything else is an unknown failure and surfaces as a plain 500.

Both sampler errors are terminal: the inputs are fixed for the duration
of a call, so nothing here is ever retried.
"""

from enum import Enum

from pydantic import BaseModel, Field

from tricking.config import MIN_COMBO_SIZE


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Input validation failures
    INVALID_SIZE = "invalid_size"

    # Resource failures
    NOT_FOUND = "not_found"

    # Valid request that the catalog cannot satisfy
    INSUFFICIENT_CANDIDATES = "insufficient_candidates"


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="User-appropriate explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the user",
    )


class FailureResponse(BaseModel):
    """Body returned for every classified failure."""

    failure: FailureDetail


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
        status_code: int = 400,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        self.status_code = status_code
        super().__init__(message)

    def to_response(self) -> FailureResponse:
        """Convert to a FailureResponse."""
        return FailureResponse(
            failure=FailureDetail(
                kind=self.kind,
                message=self.message,
                detail=self.detail,
                suggestion=self.suggestion,
            )
        )


class InvalidSizeError(KnownError):
    """Raised when a combo is requested with fewer than MIN_COMBO_SIZE tricks."""

    def __init__(self, size: int):
        self.size = size
        super().__init__(
            kind=FailureKind.INVALID_SIZE,
            message=f"Combo size must be at least {MIN_COMBO_SIZE}, got {size}.",
            suggestion=f"Request a combo of {MIN_COMBO_SIZE} or more tricks.",
            status_code=400,
        )


class InsufficientCandidatesError(KnownError):
    """
    Raised when the candidate pool is smaller than the requested combo.

    The request itself is well formed; the filtered catalog just cannot
    satisfy it. Short combos are never returned instead.
    """

    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(
            kind=FailureKind.INSUFFICIENT_CANDIDATES,
            message=(
                "Not enough tricks available for requested combo size: "
                f"need {requested} tricks, only {available} available."
            ),
            detail=f"requested={requested} available={available}",
            suggestion="Try a smaller combo or relax the difficulty and category filters.",
            status_code=422,
        )


class TrickNotFoundError(KnownError):
    """Raised when a trick id does not exist in the catalog."""

    def __init__(self, trick_id: int):
        self.trick_id = trick_id
        super().__init__(
            kind=FailureKind.NOT_FOUND,
            message=f"Trick {trick_id} not found",
            suggestion="List tricks with GET /api/v1/tricks to find a valid id.",
            status_code=404,
        )
