"""
Nice Ticks — "красивые" значения тиков числовой оси

Модуль вычисляет упорядоченную последовательность круглых чисел (кратных
шагу 1, 2, 2.5, 5, 10 × 10^k), которая покрывает интервал [min, max]:
- get_valid_interval: нормализация (min, max) в возрастающий порядок
- get_format_step: округление грубого шага до "красивого"
- get_tick_of_single_value: тики для вырожденного домена (min == max)
- calculate_step: поиск шага с фиксированной точкой по числу тиков
- get_nice_tick_values: тики могут выходить за [min, max] ради круглых значений
- get_tick_values_fixed_domain: тики строго внутри [min, max]

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Порядок результата совпадает с порядком аргументов (min > max → убывание)
2. Если min ≤ 0 ≤ max, ноль всегда является тиком (get_nice_tick_values)
3. Исключения не используются: невалидный шаг → sentinel 0 / StepResult.zero()
4. Все циклы ограничены (MAX_STEP_CORRECTIONS, MAX_RANGE_STEP_ITERATIONS)

ФОРМУЛЫ:
    rough_step = (max - min) / (tick_count - 1)
    digit_count = floor(log10(rough_step)) + 1
    step_ratio = rough_step / 10^(digit_count - 1)           ∈ [1, 10)
    nice_step = (ceil(step_ratio / scale) + correction) × scale × 10^(digit_count - 1)
    scale = 0.1 если digit_count == 1, иначе 0.05
"""

import logging
import math
from typing import Final, NamedTuple

from nicescale.core.math.arithmetic import get_digit_count, range_step
from nicescale.core.math.numerical_safeguards import (
    TICK_EPSILON_FACTOR,
    clamp,
    is_integral,
    is_valid_float,
    round_half_up,
)

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Число тиков по умолчанию для get_nice_tick_values
DEFAULT_TICK_COUNT: Final[int] = 6

# Минимальное число тиков, с которым работает поиск шага
MIN_SOLVER_TICK_COUNT: Final[int] = 2

# Гранулярность step_ratio для однозначного порядка (digit_count == 1)
STEP_RATIO_SCALE_COARSE: Final[float] = 0.1

# Гранулярность step_ratio для остальных порядков
STEP_RATIO_SCALE_FINE: Final[float] = 0.05

# Предел числа попыток огрубления шага в calculate_step.
# Каждая попытка сдвигает шаг на одну ступень гранулярности, для step_ratio
# около 10 это до ~200 ступеней на удвоение шага.
MAX_STEP_CORRECTIONS: Final[int] = 1000


# =============================================================================
# TYPES
# =============================================================================


class StepResult(NamedTuple):
    """
    Результат calculate_step: шаг и выровненный диапазон тиков.

    tick_min/tick_max могут лежать вне исходного [min, max].
    """
    step: float  # Расстояние между соседними тиками (0 = sentinel)
    tick_min: float  # Первый тик
    tick_max: float  # Последний тик

    @classmethod
    def zero(cls) -> "StepResult":
        """Sentinel "нет пригодного шага"."""
        return cls(step=0.0, tick_min=0.0, tick_max=0.0)

    @property
    def is_zero(self) -> bool:
        return self.step == 0


# =============================================================================
# INTERVAL NORMALIZER
# =============================================================================


def get_valid_interval(domain: tuple[float, float]) -> tuple[float, float]:
    """
    Упорядочивание пары (min, max) по возрастанию.

    Только перестановка, без других преобразований. Вызывающий код сам
    восстанавливает исходный порядок результата.

    Examples:
        >>> get_valid_interval((10, 0))
        (0, 10)
        >>> get_valid_interval((-1, 1))
        (-1, 1)
    """
    min_value, max_value = domain

    if min_value > max_value:
        return max_value, min_value

    return min_value, max_value


def _restore_order(values: list[float], domain: tuple[float, float]) -> list[float]:
    # Возрастающий результат → порядок аргументов вызывающего кода
    min_value, max_value = domain
    if min_value > max_value:
        values.reverse()
    return values


# =============================================================================
# STEP FORMATTER
# =============================================================================


def get_format_step(
    rough_step: float,
    allow_decimals: bool,
    correction_factor: int,
) -> float:
    """
    Округление грубого шага до понятного человеку шага (10, 20, 25 ...).

    Единственное место, где определяется "красивость" шага.

    Args:
        rough_step: Грубый шаг, (max - min) / (tick_count - 1)
        allow_decimals: Допустимы ли дробные шаги
        correction_factor: Число ступеней гранулярности, на которые шаг
            огрубляется (растёт с каждой попыткой calculate_step)

    Returns:
        Красивый шаг, либо 0 если rough_step ≤ 0 или NaN/Inf

    Examples:
        >>> get_format_step(20, True, 0)
        20.0
        >>> get_format_step(0.25, True, 0)
        0.25
        >>> get_format_step(0, True, 0)
        0
        >>> get_format_step(0.25, False, 0)
        1
    """
    if rough_step <= 0 or not is_valid_float(rough_step):
        return 0

    # Порядок величины rough_step
    digit_count = get_digit_count(rough_step)
    pow10 = 10 ** (digit_count - 1)
    if pow10 == 0:
        # Underflow для субнормальных rough_step
        return 0
    step_ratio = rough_step / pow10

    # Выбор красивого шага
    if digit_count != 1:
        step_ratio_scale = STEP_RATIO_SCALE_FINE
    else:
        step_ratio_scale = STEP_RATIO_SCALE_COARSE
    step_ratio_amend = math.ceil(step_ratio / step_ratio_scale) + correction_factor
    nice_step = step_ratio_amend * step_ratio_scale * pow10
    if not is_valid_float(nice_step):
        # Overflow при огрублении около float max
        return 0

    if not allow_decimals:
        nice_step = math.ceil(nice_step)

    return nice_step


# =============================================================================
# DEGENERATE DOMAIN
# =============================================================================


def get_tick_of_single_value(
    value: float,
    tick_count: int,
    allow_decimals: bool,
) -> list[float]:
    """
    Тики для домена из одного значения (min == max).

    Генерирует tick_count последовательных кратных step так, что value
    (или ближайшее к нему кратное) стоит на индексе floor((tick_count - 1) / 2).

    Args:
        value: Минимум домена, совпадающий с максимумом
        tick_count: Число тиков (≤ 1 → только [value])
        allow_decimals: Допустимы ли дробные тики

    Returns:
        Список тиков по возрастанию

    Examples:
        >>> get_tick_of_single_value(5, 4, True)
        [4.0, 5.0, 6.0, 7.0]
        >>> get_tick_of_single_value(2.5, 1, True)
        [2.5]
    """
    if tick_count <= 1:
        return [value]

    step = 1
    middle = value

    if allow_decimals and abs(value) < 1 and value != 0:
        # Шаг в порядке величины самого значения
        step = 10 ** (get_digit_count(value) - 1)
        if step == 0:
            # Underflow для субнормальных value
            step = 1
            middle = math.floor(value)
        else:
            middle = math.floor(value / step) * step
    elif not allow_decimals or is_integral(value):
        middle = math.floor(value)
    elif value == 0:
        middle = math.floor((tick_count - 1) / 2)

    middle_index = math.floor((tick_count - 1) / 2)

    return [float(middle + (n - middle_index) * step) for n in range(tick_count)]


# =============================================================================
# STEP SOLVER
# =============================================================================


def calculate_step(
    min_value: float,
    max_value: float,
    tick_count: int,
    allow_decimals: bool,
    correction_factor: int = 0,
) -> StepResult:
    """
    Поиск шага, при котором число тиков сходится к tick_count.

    Алгоритм:
    1. step = get_format_step(rough_step, allow_decimals, correction_factor)
    2. Якорь middle: 0 если интервал содержит ноль, иначе середина интервала,
       выровненная вниз по границе шага
    3. below_count/up_count — число шагов от якоря до min/max
    4. Если тиков больше tick_count → correction_factor + 1 (шаг грубее)
    5. Если меньше → добавить тики сверху (max > 0) или снизу

    Каждая коррекция строго огрубляет шаг; число попыток ограничено
    MAX_STEP_CORRECTIONS, после чего возвращается sentinel.

    Args:
        min_value: Нижняя граница (min ≤ max)
        max_value: Верхняя граница
        tick_count: Целевое число тиков (≥ 2)
        allow_decimals: Допустимы ли дробные шаги
        correction_factor: Начальная коррекция (default: 0)

    Returns:
        StepResult(step, tick_min, tick_max) или StepResult.zero()

    Examples:
        >>> calculate_step(0, 100, 6, True)
        StepResult(step=20.0, tick_min=0.0, tick_max=100.0)
        >>> calculate_step(0, float('inf'), 6, True)
        StepResult(step=0.0, tick_min=0.0, tick_max=0.0)
    """
    if tick_count - 1 == 0:
        return StepResult.zero()

    rough_step = (max_value - min_value) / (tick_count - 1)
    if not is_valid_float(rough_step):
        return StepResult.zero()

    for correction in range(correction_factor, correction_factor + MAX_STEP_CORRECTIONS):
        step = get_format_step(rough_step, allow_decimals, correction)
        if step == 0 or not is_valid_float(step):
            return StepResult.zero()

        # Если ноль внутри интервала, он должен быть тиком
        if min_value <= 0 <= max_value:
            middle = 0
        else:
            middle = (min_value + max_value) / 2
            middle -= ((middle % step) + step) % step

        below_count = math.ceil((middle - min_value) / step)
        up_count = math.ceil((max_value - middle) / step)
        scale_count = below_count + up_count + 1

        if scale_count > tick_count:
            logger.debug(
                "step %r gives %d ticks > %d, coarsening (correction=%d)",
                step,
                scale_count,
                tick_count,
                correction + 1,
            )
            continue

        if scale_count < tick_count:
            if max_value > 0:
                up_count += tick_count - scale_count
            else:
                below_count += tick_count - scale_count

        return StepResult(
            step=step,
            tick_min=middle - below_count * step,
            tick_max=middle + up_count * step,
        )

    logger.warning(
        "No step converged to %d ticks for [%r, %r] after %d corrections",
        tick_count,
        min_value,
        max_value,
        MAX_STEP_CORRECTIONS,
    )
    return StepResult.zero()


# =============================================================================
# PUBLIC ENTRY POINTS
# =============================================================================


def get_nice_tick_values(
    domain: tuple[float, float],
    tick_count: int = DEFAULT_TICK_COUNT,
    allow_decimals: bool = True,
) -> list[float]:
    """
    Тики интервала; могут выходить за [min, max], если так они круглее.

    Неограниченный домен (±Infinity): конечная граница фиксируется,
    остальные tick_count - 1 позиций заполняются бесконечным значением.

    Args:
        domain: Пара (min, max) в любом порядке
        tick_count: Желаемое число тиков (default: 6)
        allow_decimals: Допустимы ли дробные тики

    Returns:
        Список тиков в порядке аргументов domain

    Examples:
        >>> get_nice_tick_values((0, 100), 6)
        [0.0, 20.0, 40.0, 60.0, 80.0, 100.0]
        >>> get_nice_tick_values((100, 0), 6)
        [100.0, 80.0, 60.0, 40.0, 20.0, 0.0]
        >>> get_nice_tick_values((float('-inf'), 5), 4)
        [-inf, -inf, -inf, 5]
    """
    count = clamp(tick_count, min_value=MIN_SOLVER_TICK_COUNT)
    cormin, cormax = get_valid_interval(domain)

    if cormin == -math.inf or cormax == math.inf:
        if cormax == math.inf:
            values = [cormin] + [math.inf] * (tick_count - 1)
        else:
            values = [-math.inf] * (tick_count - 1) + [cormax]
        return _restore_order(values, domain)

    if cormin == cormax:
        return get_tick_of_single_value(cormin, tick_count, allow_decimals)

    step, tick_min, tick_max = calculate_step(cormin, cormax, count, allow_decimals)
    logger.debug("nice ticks for %r: step=%r range=[%r, %r]", domain, step, tick_min, tick_max)

    # Epsilon компенсирует float-дрейф, иначе может пропасть тик на tick_max
    epsilon = TICK_EPSILON_FACTOR * step
    values = range_step(tick_min, tick_max + epsilon, step)

    return _restore_order(values, domain)


def get_tick_values_fixed_domain(
    domain: tuple[float, float],
    tick_count: int,
    allow_decimals: bool = True,
) -> list[float]:
    """
    Тики, ограниченные интервалом [min, max], даже ценой "красивости".

    Последний тик всегда равен max, даже если он не лежит на границе шага.
    При узком интервале относительно шага тиков может быть меньше tick_count.

    Args:
        domain: Пара (min, max) в любом порядке
        tick_count: Желаемое число тиков
        allow_decimals: Допустимы ли дробные тики (False → округление
            каждого тика до целого, половина вверх)

    Returns:
        Список тиков в порядке аргументов domain

    Examples:
        >>> get_tick_values_fixed_domain((0, 10), 5)
        [0, 2.5, 5.0, 7.5, 10]
        >>> get_tick_values_fixed_domain((3, 3), 5)
        [3]
    """
    cormin, cormax = get_valid_interval(domain)

    if cormin == -math.inf or cormax == math.inf:
        return list(domain)

    if cormin == cormax:
        return [cormin]

    count = clamp(tick_count, min_value=MIN_SOLVER_TICK_COUNT)
    step = get_format_step((cormax - cormin) / (count - 1), allow_decimals, 0)
    values = range_step(cormin, cormax, step) + [cormax]

    if not allow_decimals:
        # Шаг целый, но старт с дробного cormin даёт дробные тики
        values = [round_half_up(value) for value in values]

    return _restore_order(values, domain)
