from dataclasses import dataclass, field
from enum import Enum

from tricking.models.trick import TrickSummary


class SamplingStrategy(str, Enum):
    """How tricks are drawn from the candidate pool."""

    WEIGHTED = "weighted"
    FLOW = "flow"


@dataclass(frozen=True)
class ComboFilters:
    """
    Catalog filters applied before sampling.

    Attributes:
        min_difficulty: Lowest difficulty allowed (inclusive)
        max_difficulty: Highest difficulty allowed (inclusive)
        exclude_category_ids: Categories whose tricks are left out
        trick_ids: When non-empty, only these tricks are eligible
        exclude_trick_ids: Tricks that are never eligible
    """

    min_difficulty: int | None = None
    max_difficulty: int | None = None
    exclude_category_ids: tuple[int, ...] = ()
    trick_ids: tuple[int, ...] = ()
    exclude_trick_ids: tuple[int, ...] = ()

    def is_empty(self) -> bool:
        """True if no filter narrows the catalog."""
        return (
            self.min_difficulty is None
            and self.max_difficulty is None
            and not self.exclude_category_ids
            and not self.trick_ids
            and not self.exclude_trick_ids
        )


@dataclass(frozen=True)
class ComboRequest:
    """Parameters for combo generation."""

    size: int
    filters: ComboFilters = field(default_factory=ComboFilters)
    strategy: SamplingStrategy = SamplingStrategy.WEIGHTED
    seed: int | None = None  # Fixed seed makes the draw reproducible


@dataclass(frozen=True)
class GeneratedCombo:
    """An assembled combo, ready to be serialized."""

    tricks: tuple[TrickSummary, ...]
    total_difficulty: int
    notation: str  # e.g. "Tornado Kick > Butterfly Kick > Cork"

    @property
    def count(self) -> int:
        return len(self.tricks)
