"""
Stance-aware combo sampling.

After the first pick, each draw prefers tricks that take off from the
stance the previous trick landed in. The preference is soft: when no
remaining trick connects, the draw falls back to everything that is left,
so flow never shortens a combo.
"""

import random

from tricking.models.trick import CandidatePool, TrickCandidate
from tricking.sampling.weighted import check_preconditions, pick_weighted_index, take_at


def connects(candidate: TrickCandidate, landing_stance: int | None) -> bool:
    """True if candidate can follow a trick that landed in landing_stance."""
    if landing_stance is None or candidate.takeoff_stance is None:
        return True
    return candidate.takeoff_stance == landing_stance


def compatible_indices(available: list[TrickCandidate], landing_stance: int | None) -> list[int]:
    """Indices into available of tricks that connect to landing_stance."""
    return [idx for idx, c in enumerate(available) if connects(c, landing_stance)]


class FlowAwareSampler:
    """
    Weighted sampler biased toward physically flowable sequences.

    Same preconditions, removal semantics and complexity as WeightedSampler.
    """

    def __init__(self, rng: random.Random):
        self._rng = rng

    def select(self, pool: CandidatePool, count: int) -> list[TrickCandidate]:
        """Draw count distinct tricks, preferring stance-compatible follow-ups."""
        check_preconditions(pool, count)

        available = list(pool)
        selected: list[TrickCandidate] = []

        first = pick_weighted_index(available, self._rng)
        selected.append(take_at(available, first))

        while len(selected) < count:
            landing = selected[-1].landing_stance
            indices = compatible_indices(available, landing)
            if not indices:
                indices = list(range(len(available)))

            # Exactly one connecting trick: no draw needed
            if len(indices) == 1:
                idx = indices[0]
            else:
                restricted = [available[i] for i in indices]
                idx = indices[pick_weighted_index(restricted, self._rng)]

            selected.append(take_at(available, idx))

        return selected
