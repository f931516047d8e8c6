"""
Even Squares — сумма квадратов чётных чисел двумя способами

Одна и та же задача, решённая:
- imperative_style: один цикл с накоплением суммы
- functional_style: filter(is_even) → map(square) → reduce(+, 0)

Для DEFAULT_NUMBERS (1..9): 2² + 4² + 6² + 8² = 4 + 16 + 36 + 64 = 120.
"""

from typing import Final, Sequence, Tuple

from fp_idioms.core.sequences.operations import filter_sequence, map_sequence, reduce_sequence

# Входные данные демо по умолчанию
DEFAULT_NUMBERS: Final[Tuple[int, ...]] = (1, 2, 3, 4, 5, 6, 7, 8, 9)


def is_even(n: int) -> bool:
    return n % 2 == 0


def square(n: int) -> int:
    return n * n


def add_ints(acc: int, n: int) -> int:
    return acc + n


def imperative_style(numbers: Sequence[int]) -> int:
    """Сумма квадратов чётных чисел через обычный цикл."""
    total = 0
    for n in numbers:
        if n % 2 == 0:
            total += n * n
    return total


def functional_style(numbers: Sequence[int]) -> int:
    """
    Сумма квадратов чётных чисел через композицию filter / map / reduce.

    1. Отбираем чётные числа
    2. Возводим каждое в квадрат
    3. Складываем квадраты, начиная с 0
    """
    evens = filter_sequence(numbers, is_even)
    squares = map_sequence(evens, square)
    return reduce_sequence(squares, 0, add_ints)
