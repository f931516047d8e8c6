"""
Timing — замер времени работы: обычная и higher-order версии

- do_some_work: замер "зашит" внутрь функции вместе с бизнес-логикой
- measure_time: замер вынесен в higher-order функцию, бизнес-логика
  передаётся как callback без аргументов

Callback выполняется синхронно в том же потоке управления.
Часы и sleep передаются параметрами (по умолчанию time.perf_counter
и time.sleep), чтобы замер можно было воспроизвести в тестах.

ФОРМАТ ДЛИТЕЛЬНОСТИ (format_duration):
    < 1µs  → "80ns"
    < 1ms  → "250µs", "1.5µs"
    < 1s   → "1.5ms"
    >= 1s  → "1.0001s", "1m1s", "1h0m0s"
    Дробная часть до 9 знаков, хвостовые нули отбрасываются.
"""

import time
from dataclasses import dataclass
from typing import Callable, Final

from fp_idioms.core.functional.callables import ensure_callable
from fp_idioms.logger import logger

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

NANOS_PER_MICRO: Final[int] = 1_000
NANOS_PER_MILLI: Final[int] = 1_000_000
NANOS_PER_SECOND: Final[int] = 1_000_000_000
NANOS_PER_MINUTE: Final[int] = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: Final[int] = 60 * NANOS_PER_MINUTE

WORK_TOOK_PREFIX: Final[str] = "Work took: "


# =============================================================================
# CONFIG / RESULT
# =============================================================================


@dataclass(frozen=True)
class TimingConfig:
    """Конфигурация демонстрационной работы."""

    # Длительность имитации бизнес-логики
    work_sleep_seconds: float = 1.0

    # Сообщение, печатаемое "бизнес-логикой"
    work_message: str = "Do business logic"


@dataclass(frozen=True)
class WorkTiming:
    """Результат замера одной единицы работы."""

    label: str
    elapsed_sec: float

    @property
    def display(self) -> str:
        return format_duration(self.elapsed_sec)


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def _format_fraction(value: int, precision: int) -> str:
    """value / 10**precision без хвостовых нулей в дробной части."""
    whole, frac = divmod(value, 10**precision)
    frac_digits = f"{frac:0{precision}d}".rstrip("0")
    if frac_digits:
        return f"{whole}.{frac_digits}"
    return str(whole)


def format_duration(seconds: float) -> str:
    """
    Человекочитаемая длительность.

    Args:
        seconds: Длительность в секундах (может быть отрицательной)

    Returns:
        Строка вида "1.0001s", "1.5ms", "250µs", "80ns", "1m1s", "0s"

    Examples:
        >>> format_duration(1.5)
        '1.5s'
        >>> format_duration(0.0015)
        '1.5ms'
        >>> format_duration(61)
        '1m1s'
        >>> format_duration(0)
        '0s'
    """
    nanos = round(seconds * NANOS_PER_SECOND)
    if nanos == 0:
        return "0s"

    sign = "-" if nanos < 0 else ""
    nanos = abs(nanos)

    if nanos < NANOS_PER_MICRO:
        return f"{sign}{nanos}ns"
    if nanos < NANOS_PER_MILLI:
        return f"{sign}{_format_fraction(nanos, 3)}µs"
    if nanos < NANOS_PER_SECOND:
        return f"{sign}{_format_fraction(nanos, 6)}ms"

    hours, rest = divmod(nanos, NANOS_PER_HOUR)
    minutes, rest = divmod(rest, NANOS_PER_MINUTE)
    secs = f"{_format_fraction(rest, 9)}s"

    if hours:
        return f"{sign}{hours}h{minutes}m{secs}"
    if minutes:
        return f"{sign}{minutes}m{secs}"
    return f"{sign}{secs}"


def _report(timing: WorkTiming) -> None:
    print(f"{WORK_TOOK_PREFIX}{timing.display}")
    logger.debug("timed %s: %.9fs", timing.label, timing.elapsed_sec)


# =============================================================================
# ЗАМЕР ВРЕМЕНИ
# =============================================================================


def do_some_work(
    config: TimingConfig | None = None,
    clock: Callable[[], float] = time.perf_counter,
    sleep: Callable[[float], None] = time.sleep,
) -> WorkTiming:
    """
    Бизнес-логика и замер времени в одной функции (не higher-order).

    Args:
        config: Конфигурация работы (опционально, используется default)
        clock: Источник времени в секундах
        sleep: Функция ожидания

    Returns:
        WorkTiming с label "do_some_work"
    """
    config = config or TimingConfig()

    start = clock()
    print(config.work_message)
    sleep(config.work_sleep_seconds)

    timing = WorkTiming(label="do_some_work", elapsed_sec=clock() - start)
    _report(timing)
    return timing


def measure_time(
    work: Callable[[], object],
    label: str = "callback",
    clock: Callable[[], float] = time.perf_counter,
) -> WorkTiming:
    """
    Замер времени выполнения произвольного callback (higher-order).

    Args:
        work: Функция без аргументов; результат игнорируется
        label: Имя работы для WorkTiming и логов
        clock: Источник времени в секундах

    Returns:
        WorkTiming с переданным label

    Raises:
        NotCallableError: Если work не callable (до старта замера)
    """
    ensure_callable(work, "work")

    start = clock()
    work()

    timing = WorkTiming(label=label, elapsed_sec=clock() - start)
    _report(timing)
    return timing
