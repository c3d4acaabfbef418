"""
Combo assembly.

Turns the sampler's ordered picks into the public representation.
Pure functions; order is preserved exactly as drawn.
"""

from collections.abc import Sequence

from tricking.config import COMBO_NOTATION_SEPARATOR
from tricking.models.combo import GeneratedCombo
from tricking.models.trick import TrickCandidate, TrickSummary


def assemble(selected: Sequence[TrickCandidate]) -> list[TrickSummary]:
    """Project each selected trick to its (id, name) form, in order."""
    return [TrickSummary(id=t.id, name=t.name) for t in selected]


def format_notation(selected: Sequence[TrickCandidate]) -> str:
    """Render a combo as one line, e.g. "Tornado Kick > Cork"."""
    return COMBO_NOTATION_SEPARATOR.join(t.name for t in selected)


def build_generated_combo(selected: Sequence[TrickCandidate]) -> GeneratedCombo:
    """
    Assemble the full combo response.

    Unrated tricks contribute nothing to total_difficulty.
    """
    return GeneratedCombo(
        tricks=tuple(assemble(selected)),
        total_difficulty=sum(t.difficulty or 0 for t in selected),
        notation=format_notation(selected),
    )
