"""
Numerical Safeguards — Safe Math Primitives для тиков оси

Модуль обеспечивает численную устойчивость вычислений шага и тиков:
- NaN/Inf проверки для предотвращения распространения невалидных значений
- Округление "half up" (как Math.round), независимое от banker's rounding
- Проверка целочисленности float значений
- Валидация границ домена (min, max)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN никогда не принимается валидаторами как граница домена
2. ±Infinity — допустимая граница (неограниченная ось), не ошибка
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Доля шага, добавляемая к верхней границе при генерации "nice" тиков.
# Компенсирует дрейф float сложения, из-за которого может потеряться
# последний тик ровно на tick_max. Эвристика, не формальная оценка ошибки.
TICK_EPSILON_FACTOR: Final[float] = 0.1


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def is_integral(value: float) -> bool:
    """
    Проверка, что значение конечное и не имеет дробной части.

    Examples:
        >>> is_integral(5.0)
        True
        >>> is_integral(5.5)
        False
        >>> is_integral(float('inf'))
        False
    """
    return is_valid_float(value) and float(value).is_integer()


# =============================================================================
# ОКРУГЛЕНИЕ И ОГРАНИЧЕНИЕ
# =============================================================================


def round_half_up(value: float) -> float:
    """
    Округление до ближайшего целого, половина — вверх (к +inf).

    Встроенный round() использует banker's rounding (round(0.5) == 0),
    здесь же 0.5 → 1, -2.5 → -2.

    Args:
        value: Значение для округления

    Returns:
        Округлённое значение (float). NaN/Inf возвращаются без изменений.

    Examples:
        >>> round_half_up(0.5)
        1.0
        >>> round_half_up(6.5)
        7.0
        >>> round_half_up(-2.5)
        -2.0
    """
    if not is_valid_float(value):
        return value

    return float(math.floor(value + 0.5))


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(1, 2)
        2
        >>> clamp(15.0, 0.0, 10.0)
        10.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_domain(domain: tuple[float, float], name: str) -> None:
    """
    Валидация границ домена оси.

    ±Infinity допустимы (неограниченная ось), NaN — нет.

    Args:
        domain: Пара (min, max) в любом порядке
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если domain не пара или содержит NaN
    """
    if len(domain) != 2:
        raise ValueError(f"{name} must be a (min, max) pair, got {len(domain)} values")

    for bound in domain:
        if math.isnan(bound):
            raise ValueError(f"{name} must not contain NaN, got {tuple(domain)}")
