"""
Tricking services.

Business logic for combo generation.
"""

from tricking.services.combo_assembler import (
    assemble,
    build_generated_combo,
    format_notation,
)
from tricking.services.combo_generator import (
    generate_combo,
    generate_simple_combo,
    load_candidate_pool,
    request_rng,
)

__all__ = [
    "assemble",
    "build_generated_combo",
    "format_notation",
    "generate_combo",
    "generate_simple_combo",
    "load_candidate_pool",
    "request_rng",
]
