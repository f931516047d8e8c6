"""
Тесты для Even Squares — imperative vs functional

Проверяемые инварианты:
1. functional_style(1..9) == imperative_style(1..9) == 120
2. Оба способа совпадают на произвольных входах
3. Пустой вход и вход без чётных → 0
"""

import pytest

from fp_idioms.core.sequences import (
    DEFAULT_NUMBERS,
    add_ints,
    functional_style,
    imperative_style,
    is_even,
    square,
)


class TestHelpers:
    """Тесты вспомогательных функций конвейера."""

    def test_is_even(self):
        assert is_even(0) is True
        assert is_even(2) is True
        assert is_even(-4) is True
        assert is_even(7) is False
        assert is_even(-3) is False

    def test_square(self):
        assert square(0) == 0
        assert square(3) == 9
        assert square(-5) == 25

    def test_add_ints(self):
        assert add_ints(3, 4) == 7


class TestEvenSquares:
    """Тесты imperative_style и functional_style."""

    def test_default_numbers(self):
        assert DEFAULT_NUMBERS == tuple(range(1, 10))

    def test_worked_example(self):
        """2² + 4² + 6² + 8² = 120."""
        assert imperative_style(DEFAULT_NUMBERS) == 120
        assert functional_style(DEFAULT_NUMBERS) == 120

    def test_accepts_list(self):
        assert functional_style([1, 2, 3, 4, 5, 6, 7, 8, 9]) == 120

    @pytest.mark.parametrize(
        "numbers, expected",
        [
            ([], 0),
            ([1, 3, 5], 0),
            ([2], 4),
            ([0, 0], 0),
            ([-2, -1, 2], 8),
            ([10, 11, 12], 244),
        ],
    )
    def test_styles_agree(self, numbers, expected):
        assert imperative_style(numbers) == expected
        assert functional_style(numbers) == expected

    def test_input_not_mutated(self):
        numbers = [1, 2, 3, 4]
        functional_style(numbers)
        imperative_style(numbers)
        assert numbers == [1, 2, 3, 4]
