"""
Callables — проверка аргументов-функций

Все higher-order операции проекта принимают функции как аргументы.
Нарушение контракта (None или не-callable вместо функции) должно
проявляться сразу, в момент передачи, а не позже при вызове.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Callable аргумент возвращается без изменений
2. Не-callable аргумент → NotCallableError (подкласс TypeError)
3. Исключения не перехватываются и не подавляются
"""

from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])


class NotCallableError(TypeError):
    """
    Аргумент, который должен быть функцией, не является callable.

    Наследует TypeError, поэтому ловится так же, как ошибка вызова
    None в самом Python.
    """

    def __init__(self, param: str, value: Any):
        self.param = param
        self.value = value
        super().__init__(
            f"{param} must be callable, got {type(value).__name__}: {value!r}"
        )


def ensure_callable(value: F, param: str) -> F:
    """
    Проверка, что value можно вызвать.

    Args:
        value: Проверяемый аргумент
        param: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        NotCallableError: Если value не callable

    Examples:
        >>> ensure_callable(abs, "transform") is abs
        True
        >>> ensure_callable(None, "transform")
        Traceback (most recent call last):
        ...
        NotCallableError: transform must be callable, got NoneType: None
    """
    if not callable(value):
        raise NotCallableError(param, value)
    return value
