"""
Functional idioms

Функции как значения, замыкания, currying, composition и замер времени
через higher-order функции.
"""

from fp_idioms.core.functional.callables import NotCallableError, ensure_callable
from fp_idioms.core.functional.higher_order import (
    GREETING_TARGET,
    Composition,
    CurriedAdd,
    Multiplier,
    add,
    compose,
    curried_add,
    get_multiplier,
    greet,
    my_func,
    say_hello,
)
from fp_idioms.core.functional.timing import (
    WORK_TOOK_PREFIX,
    TimingConfig,
    WorkTiming,
    do_some_work,
    format_duration,
    measure_time,
)

__all__ = [
    # Callables
    "NotCallableError",
    "ensure_callable",
    # Higher-order — Constants
    "GREETING_TARGET",
    # Higher-order — Types
    "Multiplier",
    "CurriedAdd",
    "Composition",
    # Higher-order — Functions
    "say_hello",
    "my_func",
    "greet",
    "get_multiplier",
    "add",
    "curried_add",
    "compose",
    # Timing — Constants
    "WORK_TOOK_PREFIX",
    # Timing — Types
    "TimingConfig",
    "WorkTiming",
    # Timing — Functions
    "format_duration",
    "do_some_work",
    "measure_time",
]
