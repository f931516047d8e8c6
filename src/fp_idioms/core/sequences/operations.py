"""
Sequence Operations — generic map / filter / reduce

Обобщённые операции над упорядоченными последовательностями,
реализованные без встроенных map/filter/functools.reduce:
- map_sequence: поэлементное преобразование A → B
- filter_sequence: отбор элементов по предикату
- reduce_sequence: левая свёртка с начальным аккумулятором

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входная последовательность никогда не изменяется
2. Результат map/filter — всегда новый list (пустой, но не None)
3. Порядок элементов сохраняется
4. Исключения из переданных функций пропагируют без изменений
5. Не-callable аргумент → NotCallableError до обхода последовательности
"""

from typing import Callable, List, Sequence, TypeVar

from fp_idioms.core.functional.callables import ensure_callable

A = TypeVar("A")
B = TypeVar("B")
T = TypeVar("T")


# =============================================================================
# MAP
# =============================================================================


def map_sequence(collection: Sequence[A], transform: Callable[[A], B]) -> List[B]:
    """
    Преобразование каждого элемента последовательности.

    Args:
        collection: Исходная последовательность
        transform: Функция A → B

    Returns:
        Новый list той же длины, где result[i] == transform(collection[i])

    Raises:
        NotCallableError: Если transform не callable

    Examples:
        >>> map_sequence([1, 2, 3], lambda n: n * n)
        [1, 4, 9]
        >>> map_sequence([], str)
        []
    """
    ensure_callable(transform, "transform")

    result: List[B] = []
    for item in collection:
        result.append(transform(item))
    return result


# =============================================================================
# FILTER
# =============================================================================


def filter_sequence(collection: Sequence[T], predicate: Callable[[T], bool]) -> List[T]:
    """
    Отбор элементов, для которых predicate истинен.

    Args:
        collection: Исходная последовательность
        predicate: Функция T → bool

    Returns:
        Новый list с подходящими элементами в исходном порядке.
        Пустой вход или ни одного совпадения → [] (не None).

    Raises:
        NotCallableError: Если predicate не callable

    Examples:
        >>> filter_sequence([1, 2, 3, 4], lambda n: n % 2 == 0)
        [2, 4]
        >>> filter_sequence([1, 3], lambda n: n % 2 == 0)
        []
    """
    ensure_callable(predicate, "predicate")

    result: List[T] = []
    for item in collection:
        if predicate(item):
            result.append(item)
    return result


# =============================================================================
# REDUCE
# =============================================================================


def reduce_sequence(
    collection: Sequence[A],
    initial: B,
    accumulator: Callable[[B, A], B],
) -> B:
    """
    Левая свёртка последовательности.

    acc_0 = initial
    acc_{i+1} = accumulator(acc_i, collection[i])

    Args:
        collection: Исходная последовательность
        initial: Начальное значение аккумулятора
        accumulator: Функция (B, A) → B

    Returns:
        Финальное значение аккумулятора; initial для пустой последовательности

    Raises:
        NotCallableError: Если accumulator не callable

    Examples:
        >>> reduce_sequence([1, 2, 3], 0, lambda acc, n: acc + n)
        6
        >>> reduce_sequence([], 42, lambda acc, n: acc + n)
        42
    """
    ensure_callable(accumulator, "accumulator")

    result = initial
    for item in collection:
        result = accumulator(result, item)
    return result
