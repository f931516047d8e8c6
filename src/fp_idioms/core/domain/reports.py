"""
Reports — итоги одного запуска каждого демо

Immutable Pydantic модели, соответствующие схемам из
fp_idioms/core/contracts/schema/ (even_squares_report.json, closures_report.json).

Инварианты проверяются валидаторами:
- EvenSquaresReport: imperative и functional способы дают одну сумму
- ClosuresReport: sum1 == sum2 == sum3, длительности неотрицательны
"""

from typing import Tuple

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# EVEN SQUARES
# =============================================================================


class EvenSquaresReport(BaseModel):
    """
    Итог демо "сумма квадратов чётных чисел".

    Содержит входные числа и результат каждого из двух способов.
    """

    numbers: Tuple[int, ...] = Field(..., description="Входная последовательность")
    imperative_sum: int = Field(..., ge=0, description="Результат imperative_style")
    functional_sum: int = Field(..., ge=0, description="Результат functional_style")

    model_config = {"frozen": True}

    @field_validator("functional_sum")
    @classmethod
    def validate_styles_agree(cls, v: int, info) -> int:
        """Проверка, что оба способа дали одинаковую сумму"""
        if "imperative_sum" in info.data:
            expected = info.data["imperative_sum"]
            if v != expected:
                raise ValueError(
                    f"functional_sum {v} must equal imperative_sum {expected}"
                )
        return v


# =============================================================================
# CLOSURES
# =============================================================================


class ClosuresReport(BaseModel):
    """
    Итог демо замыканий и higher-order функций.

    Собирает значения, напечатанные демо, в порядке вывода.
    """

    greetings: Tuple[str, ...] = Field(..., min_length=1, description="Напечатанные приветствия")
    multiplier_result: int = Field(..., description="get_multiplier(2)(5)")
    work_timings_sec: Tuple[float, ...] = Field(
        ..., min_length=1, description="Замеры do_some_work / measure_time (секунды)"
    )

    # Сложение: обычное, через add3, цепочкой
    sum1: int = Field(..., description="add(3, 4)")
    sum2: int = Field(..., description="curried_add(3) затем (4)")
    sum3: int = Field(..., description="curried_add(3)(4)")

    compose_result: int = Field(..., description="compose(add5, multiply_by_2)(10)")

    model_config = {"frozen": True}

    @field_validator("work_timings_sec")
    @classmethod
    def validate_timings_non_negative(cls, v: Tuple[float, ...]) -> Tuple[float, ...]:
        """Длительность не может быть отрицательной"""
        for elapsed in v:
            if elapsed < 0:
                raise ValueError(f"work timing must be >= 0, got {elapsed}")
        return v

    @field_validator("sum3")
    @classmethod
    def validate_sums_agree(cls, v: int, info) -> int:
        """Проверка, что все три способа сложения совпадают"""
        for name in ("sum1", "sum2"):
            if name in info.data and info.data[name] != v:
                raise ValueError(f"sum3 {v} must equal {name} {info.data[name]}")
        return v
