"""
Closures Demo — функции как значения, замыкания, currying, composition

Печатает по порядку:
    Hello, Gopher
    Hello, World
    10
    Do business logic
    Work took: 1.0001s
    Do business logic with High-Order Function
    Work took: 1.0001s
    sum1: 7
    sum2: 7
    sum3: 7
    Compose Result: 30
"""

import time
from typing import Callable

from fp_idioms.core.contracts import validate_report
from fp_idioms.core.domain import ClosuresReport
from fp_idioms.core.functional import (
    TimingConfig,
    add,
    compose,
    curried_add,
    do_some_work,
    get_multiplier,
    greet,
    measure_time,
    my_func,
)
from fp_idioms.logger import logger

HIGHER_ORDER_WORK_MESSAGE = "Do business logic with High-Order Function"


def run_closures_demo(
    config: TimingConfig | None = None,
    clock: Callable[[], float] = time.perf_counter,
    sleep: Callable[[float], None] = time.sleep,
) -> ClosuresReport:
    """
    Выполнение демо с печатью в stdout.

    Args:
        config: Конфигурация замеряемой работы (опционально)
        clock: Источник времени для замеров
        sleep: Функция ожидания для имитации работы

    Returns:
        ClosuresReport, прошедший проверку контракта closures_report
    """
    config = config or TimingConfig()

    # Функция как значение и как параметр
    greetings = [my_func("Gopher"), greet(my_func)]

    multiplier_result = get_multiplier(2)(5)
    print(multiplier_result)

    # Замер без higher-order функции
    timings = [do_some_work(config, clock=clock, sleep=sleep)]

    # Замер через higher-order функцию
    def business_logic() -> None:
        print(HIGHER_ORDER_WORK_MESSAGE)
        sleep(config.work_sleep_seconds)

    timings.append(measure_time(business_logic, label="business_logic", clock=clock))

    sum1 = add(3, 4)
    print(f"sum1: {sum1}")

    add3 = curried_add(3)
    sum2 = add3(4)
    print(f"sum2: {sum2}")

    sum3 = curried_add(3)(4)
    print(f"sum3: {sum3}")

    # Сначала +5, затем *2: multiply_by_2(add5(10)) = 30
    add5 = curried_add(5)
    multiply_by_2 = get_multiplier(2)
    add5_and_multiply_by_2 = compose(add5, multiply_by_2)

    compose_result = add5_and_multiply_by_2(10)
    print(f"Compose Result: {compose_result}")

    report = ClosuresReport(
        greetings=tuple(greetings),
        multiplier_result=multiplier_result,
        work_timings_sec=tuple(t.elapsed_sec for t in timings),
        sum1=sum1,
        sum2=sum2,
        sum3=sum3,
        compose_result=compose_result,
    )
    validate_report(report)
    return report


def main() -> None:
    logger.debug("closures demo started")
    report = run_closures_demo()
    logger.debug("closures demo finished: %s", report)


if __name__ == "__main__":
    main()
