from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TrickCandidate:
    """
    A trick eligible for combo generation.

    Attributes:
        id: Catalog primary key (unique within a pool)
        name: Display name (e.g., "Butterfly Kick", "Cork")
        weight: Relative selection likelihood; values below 1 count as 1
        takeoff_stance: Stance the trick starts from, if known
        landing_stance: Stance the trick lands in, if known
        difficulty: Numeric difficulty rating, if rated
    """

    id: int
    name: str
    weight: int = 1
    takeoff_stance: int | None = None
    landing_stance: int | None = None
    difficulty: int | None = None

    @property
    def effective_weight(self) -> int:
        """Weight used for sampling; never below 1."""
        return max(self.weight, 1)


@dataclass(frozen=True)
class CandidatePool:
    """
    The filtered set of tricks eligible for one generation request.

    INVARIANT: No two candidates share an id.

    The pool is never mutated. Samplers copy it into their own working
    buffer before drawing.
    """

    candidates: tuple[TrickCandidate, ...] = ()

    def __post_init__(self) -> None:
        seen: set[int] = set()
        for candidate in self.candidates:
            if candidate.id in seen:
                msg = f"Duplicate trick id {candidate.id} in candidate pool"
                raise ValueError(msg)
            seen.add(candidate.id)

    @classmethod
    def of(cls, candidates: Iterable[TrickCandidate]) -> "CandidatePool":
        """Build a pool from any iterable of candidates."""
        return cls(candidates=tuple(candidates))

    def __len__(self) -> int:
        return len(self.candidates)

    def __iter__(self) -> Iterator[TrickCandidate]:
        return iter(self.candidates)

    def ids(self) -> set[int]:
        """All trick ids in the pool."""
        return {c.id for c in self.candidates}


@dataclass(frozen=True, slots=True)
class TrickSummary:
    """Public-facing minimal form of a trick."""

    id: int
    name: str
