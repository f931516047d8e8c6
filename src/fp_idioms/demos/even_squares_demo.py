"""
Even Squares Demo — сумма квадратов чётных чисел двумя способами

Печатает:
    使用傳統作法: 120
    使用functional 作法: 120
"""

from typing import Sequence

from fp_idioms.core.contracts import validate_report
from fp_idioms.core.domain import EvenSquaresReport
from fp_idioms.core.sequences import DEFAULT_NUMBERS, functional_style, imperative_style
from fp_idioms.logger import logger

IMPERATIVE_LABEL = "使用傳統作法"
FUNCTIONAL_LABEL = "使用functional 作法"


def run_even_squares_demo(numbers: Sequence[int] = DEFAULT_NUMBERS) -> EvenSquaresReport:
    """
    Вычисление обоими способами и печать результатов в stdout.

    Args:
        numbers: Входная последовательность (по умолчанию 1..9)

    Returns:
        EvenSquaresReport, прошедший проверку контракта even_squares_report

    Raises:
        pydantic.ValidationError: Если способы дали разные суммы
    """
    imperative_sum = imperative_style(numbers)
    functional_sum = functional_style(numbers)

    print(f"{IMPERATIVE_LABEL}: {imperative_sum}")
    print(f"{FUNCTIONAL_LABEL}: {functional_sum}")

    report = EvenSquaresReport(
        numbers=tuple(numbers),
        imperative_sum=imperative_sum,
        functional_sum=functional_sum,
    )
    validate_report(report)
    return report


def main() -> None:
    logger.debug("even squares demo started")
    report = run_even_squares_demo()
    logger.debug("even squares demo finished: %s", report)


if __name__ == "__main__":
    main()
