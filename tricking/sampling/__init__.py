"""
Combo sampling strategies.

Both samplers share one interface, select(pool, count), so callers can
switch strategy without touching request or response shaping.
"""

import random
from collections.abc import Callable

from tricking.models.combo import SamplingStrategy
from tricking.sampling.flow import FlowAwareSampler, compatible_indices, connects
from tricking.sampling.weighted import (
    ComboSampler,
    WeightedSampler,
    check_preconditions,
    pick_weighted_index,
)

_SAMPLERS: dict[SamplingStrategy, Callable[[random.Random], ComboSampler]] = {
    SamplingStrategy.WEIGHTED: WeightedSampler,
    SamplingStrategy.FLOW: FlowAwareSampler,
}


def build_sampler(strategy: SamplingStrategy, rng: random.Random) -> ComboSampler:
    """Create the sampler for strategy, bound to a request-scoped rng."""
    return _SAMPLERS[strategy](rng)


__all__ = [
    "ComboSampler",
    "FlowAwareSampler",
    "WeightedSampler",
    "build_sampler",
    "check_preconditions",
    "compatible_indices",
    "connects",
    "pick_weighted_index",
]
