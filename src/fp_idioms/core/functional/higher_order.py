"""
Higher-Order Functions — функции как значения, замыкания, currying, composition

Модуль показывает базовые идиомы функционального программирования:
- Функция как значение (say_hello) и как параметр (greet)
- Фабрика функций с захваченным состоянием (get_multiplier)
- Обычное и каррированное сложение (add, curried_add)
- Композиция двух функций (compose)

Замыкания оформлены явными immutable объектами с __call__:
захваченное значение видно как поле, фиксируется в момент создания
и не меняется после.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. get_multiplier(factor)(n) == factor * n
2. curried_add(a)(b) == add(a, b)
3. compose(f, g)(x) == g(f(x)) — сначала f, затем g
4. Не-callable аргумент → NotCallableError в момент создания
"""

from dataclasses import dataclass
from typing import Any, Callable, Final

from fp_idioms.core.functional.callables import ensure_callable

# Имя, которое greet передаёт в greeter
GREETING_TARGET: Final[str] = "World"


# =============================================================================
# ФУНКЦИЯ КАК ЗНАЧЕНИЕ / КАК ПАРАМЕТР
# =============================================================================


def say_hello(name: str) -> str:
    """
    Печать приветствия.

    Args:
        name: Кого приветствуем

    Returns:
        Напечатанная строка (без перевода строки)
    """
    line = f"Hello, {name}"
    print(line)
    return line


# Переменная, связанная с функцией
my_func: Callable[[str], str] = say_hello


def greet(greeter: Callable[[str], Any]) -> Any:
    """
    Вызов переданной функции с GREETING_TARGET.

    Args:
        greeter: Функция str → Any

    Returns:
        Результат greeter("World")

    Raises:
        NotCallableError: Если greeter не callable
    """
    ensure_callable(greeter, "greeter")
    return greeter(GREETING_TARGET)


# =============================================================================
# ЗАМЫКАНИЯ (CAPTURED STATE)
# =============================================================================


@dataclass(frozen=True)
class Multiplier:
    """Функция n → factor * n с захваченным factor."""

    factor: int

    def __call__(self, n: int) -> int:
        return self.factor * n


@dataclass(frozen=True)
class CurriedAdd:
    """Частично применённое сложение: b → a + b."""

    a: int

    def __call__(self, b: int) -> int:
        return self.a + b


@dataclass(frozen=True)
class Composition:
    """
    Композиция двух функций: x → then(first(x)).

    Порядок слева направо: first применяется первой.
    """

    first: Callable[[Any], Any]
    then: Callable[[Any], Any]

    def __call__(self, x: Any) -> Any:
        return self.then(self.first(x))


# =============================================================================
# ФАБРИКИ
# =============================================================================


def get_multiplier(factor: int) -> Multiplier:
    """
    Фабрика функций умножения.

    Examples:
        >>> get_multiplier(2)(5)
        10
    """
    return Multiplier(factor)


def add(a: int, b: int) -> int:
    return a + b


def curried_add(a: int) -> CurriedAdd:
    """
    Каррированная версия add.

    Examples:
        >>> add3 = curried_add(3)
        >>> add3(4)
        7
        >>> curried_add(3)(4) == add(3, 4)
        True
    """
    return CurriedAdd(a)


def compose(f: Callable[[Any], Any], g: Callable[[Any], Any]) -> Composition:
    """
    Композиция f и g: сначала f, затем g.

    Args:
        f: Применяется первой
        g: Применяется к результату f

    Returns:
        Composition: x → g(f(x))

    Raises:
        NotCallableError: Если f или g не callable

    Examples:
        >>> add5_then_double = compose(curried_add(5), get_multiplier(2))
        >>> add5_then_double(10)
        30
    """
    ensure_callable(f, "f")
    ensure_callable(g, "g")
    return Composition(first=f, then=g)
