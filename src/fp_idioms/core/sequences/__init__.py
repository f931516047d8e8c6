"""
Sequence utilities

Generic map / filter / reduce и пример "сумма квадратов чётных чисел".
"""

from fp_idioms.core.sequences.operations import (
    filter_sequence,
    map_sequence,
    reduce_sequence,
)
from fp_idioms.core.sequences.even_squares import (
    DEFAULT_NUMBERS,
    add_ints,
    functional_style,
    imperative_style,
    is_even,
    square,
)

__all__ = [
    # Operations
    "map_sequence",
    "filter_sequence",
    "reduce_sequence",
    # Even squares — Constants
    "DEFAULT_NUMBERS",
    # Even squares — Functions
    "is_even",
    "square",
    "add_ints",
    "imperative_style",
    "functional_style",
]
