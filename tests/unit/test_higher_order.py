"""
Тесты для Higher-Order Functions — замыкания, currying, composition

Проверяемые инварианты:
1. get_multiplier(2)(5) == 10, factor захвачен при создании
2. curried_add(a)(b) == add(a, b)
3. compose(f, g)(x) == g(f(x)), порядок слева направо
4. Не-callable аргумент → NotCallableError при создании
"""

import dataclasses

import pytest

from fp_idioms.core.functional import (
    GREETING_TARGET,
    Composition,
    CurriedAdd,
    Multiplier,
    NotCallableError,
    add,
    compose,
    curried_add,
    ensure_callable,
    get_multiplier,
    greet,
    my_func,
    say_hello,
)


# =============================================================================
# ТЕСТЫ: функция как значение / параметр
# =============================================================================


class TestGreeting:
    """Тесты say_hello / my_func / greet."""

    def test_say_hello_prints_and_returns(self, capsys):
        line = say_hello("Gopher")
        assert line == "Hello, Gopher"
        assert capsys.readouterr().out == "Hello, Gopher\n"

    def test_my_func_is_function_value(self):
        assert my_func is say_hello

    def test_greet_passes_world(self, capsys):
        result = greet(my_func)
        assert GREETING_TARGET == "World"
        assert result == "Hello, World"
        assert capsys.readouterr().out == "Hello, World\n"

    def test_greet_with_any_greeter(self):
        received = []
        greet(received.append)
        assert received == ["World"]

    def test_greet_rejects_none(self):
        with pytest.raises(NotCallableError, match="greeter"):
            greet(None)


# =============================================================================
# ТЕСТЫ: замыкания
# =============================================================================


class TestMultiplier:
    """Тесты get_multiplier / Multiplier."""

    def test_worked_example(self):
        assert get_multiplier(2)(5) == 10

    @pytest.mark.parametrize("factor, n", [(0, 7), (3, -4), (-2, -2), (10, 0)])
    def test_multiplies(self, factor, n):
        assert get_multiplier(factor)(n) == factor * n

    def test_returns_captured_state_object(self):
        double = get_multiplier(2)
        assert isinstance(double, Multiplier)
        assert double.factor == 2

    def test_factor_captured_by_value(self):
        """Изменение исходной переменной не влияет на созданную функцию."""
        factor = 3
        triple = get_multiplier(factor)
        factor = 100
        assert triple(2) == 6

    def test_captured_state_is_immutable(self):
        double = get_multiplier(2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            double.factor = 5


class TestCurrying:
    """Тесты add / curried_add."""

    def test_add(self):
        assert add(3, 4) == 7

    def test_partial_application(self):
        add3 = curried_add(3)
        assert isinstance(add3, CurriedAdd)
        assert add3(4) == 7
        assert add3(10) == 13

    @pytest.mark.parametrize("a, b", [(3, 4), (0, 0), (-5, 5), (123, -456)])
    def test_curried_equals_plain(self, a, b):
        assert curried_add(a)(b) == add(a, b)


# =============================================================================
# ТЕСТЫ: composition
# =============================================================================


class TestCompose:
    """Тесты compose: x → g(f(x))."""

    def test_worked_example(self):
        """Сначала +5, затем *2: (10 + 5) * 2 = 30."""
        add5_and_multiply_by_2 = compose(curried_add(5), get_multiplier(2))
        assert add5_and_multiply_by_2(10) == 30

    def test_order_is_left_to_right(self):
        """compose(f, g) != compose(g, f) для некоммутирующих функций."""
        add5 = curried_add(5)
        double = get_multiplier(2)
        assert compose(add5, double)(10) == 30
        assert compose(double, add5)(10) == 25

    @pytest.mark.parametrize("x", [-3, 0, 1, 42])
    def test_equals_nested_application(self, x):
        f = lambda n: n * n  # noqa: E731
        g = lambda n: n - 1  # noqa: E731
        assert compose(f, g)(x) == g(f(x))

    def test_works_with_any_types(self):
        to_text = compose(len, str)
        assert to_text("abcd") == "4"

    def test_returns_composition(self):
        f, g = abs, str
        composed = compose(f, g)
        assert isinstance(composed, Composition)
        assert composed.first is f
        assert composed.then is g

    def test_none_rejected_at_creation(self):
        with pytest.raises(NotCallableError, match="f must be callable"):
            compose(None, abs)
        with pytest.raises(NotCallableError, match="g must be callable"):
            compose(abs, None)


class TestEnsureCallable:
    """Тесты ensure_callable."""

    def test_returns_same_object(self):
        assert ensure_callable(abs, "fn") is abs

    def test_error_is_type_error(self):
        with pytest.raises(TypeError) as exc_info:
            ensure_callable(42, "fn")

        err = exc_info.value
        assert isinstance(err, NotCallableError)
        assert err.param == "fn"
        assert err.value == 42
        assert "fn must be callable, got int: 42" in str(err)
