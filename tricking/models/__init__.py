from tricking.models.combo import (
    ComboFilters,
    ComboRequest,
    GeneratedCombo,
    SamplingStrategy,
)
from tricking.models.failure import (
    FailureDetail,
    FailureKind,
    FailureResponse,
    InsufficientCandidatesError,
    InvalidSizeError,
    KnownError,
    TrickNotFoundError,
)
from tricking.models.trick import CandidatePool, TrickCandidate, TrickSummary

__all__ = [
    "CandidatePool",
    "ComboFilters",
    "ComboRequest",
    "FailureDetail",
    "FailureKind",
    "FailureResponse",
    "GeneratedCombo",
    "InsufficientCandidatesError",
    "InvalidSizeError",
    "KnownError",
    "SamplingStrategy",
    "TrickCandidate",
    "TrickNotFoundError",
    "TrickSummary",
]
