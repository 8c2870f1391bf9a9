"""
Arithmetic — порядок величины и арифметические последовательности

Базовые примитивы для построения тиков:
- get_digit_count: классификатор порядка величины числа
- range_step: генератор последовательности [start, end) с фиксированным шагом

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. get_digit_count(0) == 1 (масштабирование ниже никогда не получает 10**-inf)
2. range_step всегда завершается: не более MAX_RANGE_STEP_ITERATIONS элементов
"""

import logging
import math
from typing import Final

logger = logging.getLogger(__name__)

# =============================================================================
# ОГРАНИЧЕНИЯ
# =============================================================================

# Жёсткий предел длины последовательности range_step.
# Защита от бесконечного цикла, когда step ничтожно мал относительно
# (end - start), например после float cancellation. Это известное
# ограничение, а не функциональность: достижение предела логируется.
MAX_RANGE_STEP_ITERATIONS: Final[int] = 100_000


def get_digit_count(value: float) -> int:
    """
    Количество цифр до десятичной точки.

    - |value| в [1, 10)     → 1
    - |value| в [0.1, 1)    → 0
    - |value| в [0.01, 0.1) → -1
    - value == 0            → 1 (фиксированная конвенция)

    Формула: floor(log10(|value|)) + 1

    Args:
        value: Конечное число

    Returns:
        Порядок величины (int)

    Examples:
        >>> get_digit_count(100)
        3
        >>> get_digit_count(0.05)
        -1
        >>> get_digit_count(0)
        1
    """
    if value == 0:
        return 1

    return math.floor(math.log10(abs(value))) + 1


def range_step(start: float, end: float, step: float) -> list[float]:
    """
    Последовательность start, start + step, ... пока значение < end.

    Значения накапливаются сложением (num += step), поэтому повторяют
    float-дрейф последовательного суммирования; верхняя граница end
    не включается.

    Args:
        start: Начальное значение (включается)
        end: Верхняя граница (не включается)
        step: Шаг

    Returns:
        Список значений, не длиннее MAX_RANGE_STEP_ITERATIONS

    Examples:
        >>> range_step(0, 10, 2.5)
        [0, 2.5, 5.0, 7.5]
        >>> range_step(5, 5, 1)
        []
    """
    result: list[float] = []
    num = start

    while num < end and len(result) < MAX_RANGE_STEP_ITERATIONS:
        result.append(num)
        num += step

    if num < end:
        logger.warning(
            "range_step truncated at %d values: start=%r end=%r step=%r",
            MAX_RANGE_STEP_ITERATIONS,
            start,
            end,
            step,
        )

    return result
