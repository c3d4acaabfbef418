"""
Weighted combo sampling without replacement.

Tricks are drawn one at a time; each draw picks a remaining trick with
probability proportional to its effective weight (max(weight, 1)), then
removes it from the working buffer.

INVARIANTS:
- Output length equals the requested count, or the call raises
- Every trick in the output is distinct and comes from the pool
- The pool itself is never mutated
- A trick with weight 0 keeps a positive chance of being drawn

Randomness comes from a random.Random instance owned by the sampler.
Callers create one per request; the module-level generator is never used.
"""

import random
from collections.abc import Sequence
from typing import Protocol

from tricking.config import MIN_COMBO_SIZE
from tricking.models.failure import InsufficientCandidatesError, InvalidSizeError
from tricking.models.trick import CandidatePool, TrickCandidate


class ComboSampler(Protocol):
    """Anything that can draw an ordered combo from a candidate pool."""

    def select(self, pool: CandidatePool, count: int) -> list[TrickCandidate]: ...


def check_preconditions(pool: CandidatePool, count: int) -> None:
    """
    Validate a draw before any trick is picked.

    Raises:
        InvalidSizeError: count is below MIN_COMBO_SIZE
        InsufficientCandidatesError: the pool holds fewer than count tricks
    """
    if count < MIN_COMBO_SIZE:
        raise InvalidSizeError(count)
    if len(pool) < count:
        raise InsufficientCandidatesError(requested=count, available=len(pool))


def pick_weighted_index(candidates: Sequence[TrickCandidate], rng: random.Random) -> int:
    """
    Pick an index into candidates by cumulative-weight inversion.

    Draws target uniformly from [0, total) and walks the candidates in
    order; the first one whose running total exceeds target wins.

    Args:
        candidates: Non-empty sequence to draw from
        rng: Random source for this request

    Returns:
        Index of the chosen candidate
    """
    total_weight = sum(c.effective_weight for c in candidates)
    target = rng.randrange(total_weight)

    cumulative = 0
    for idx, candidate in enumerate(candidates):
        cumulative += candidate.effective_weight
        if cumulative > target:
            return idx

    # cumulative ends at total_weight, which is always > target
    return len(candidates) - 1


def take_at(available: list[TrickCandidate], idx: int) -> TrickCandidate:
    """Remove and return available[idx] by swapping in the last element."""
    chosen = available[idx]
    available[idx] = available[-1]
    available.pop()
    return chosen


class WeightedSampler:
    """
    Plain weighted sampler. Ignores stances entirely.

    Usage:
        sampler = WeightedSampler(random.Random(seed))
        combo = sampler.select(pool, 4)
    """

    def __init__(self, rng: random.Random):
        self._rng = rng

    def select(self, pool: CandidatePool, count: int) -> list[TrickCandidate]:
        """
        Draw count distinct tricks, in draw order.

        Complexity is O(count * len(pool)).
        """
        check_preconditions(pool, count)

        available = list(pool)
        selected: list[TrickCandidate] = []

        for _ in range(count):
            idx = pick_weighted_index(available, self._rng)
            selected.append(take_at(available, idx))

        return selected
