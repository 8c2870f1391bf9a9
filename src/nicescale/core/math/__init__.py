"""
Core math modules для nicescale

Математические примитивы и алгоритм подбора "красивых" тиков оси.
"""

# Numerical Safeguards
from nicescale.core.math.numerical_safeguards import (
    # Epsilon constants
    TICK_EPSILON_FACTOR,
    # NaN/Inf checks
    is_integral,
    is_valid_float,
    # Utilities
    clamp,
    round_half_up,
    # Validation
    validate_domain,
)

# Arithmetic
from nicescale.core.math.arithmetic import (
    MAX_RANGE_STEP_ITERATIONS,
    get_digit_count,
    range_step,
)

# Nice Ticks
from nicescale.core.math.nice_ticks import (
    DEFAULT_TICK_COUNT,
    MAX_STEP_CORRECTIONS,
    MIN_SOLVER_TICK_COUNT,
    STEP_RATIO_SCALE_COARSE,
    STEP_RATIO_SCALE_FINE,
    StepResult,
    calculate_step,
    get_format_step,
    get_nice_tick_values,
    get_tick_of_single_value,
    get_tick_values_fixed_domain,
    get_valid_interval,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "TICK_EPSILON_FACTOR",
    # Numerical Safeguards — NaN/Inf checks
    "is_integral",
    "is_valid_float",
    # Numerical Safeguards — Utilities
    "clamp",
    "round_half_up",
    # Numerical Safeguards — Validation
    "validate_domain",
    # Arithmetic
    "MAX_RANGE_STEP_ITERATIONS",
    "get_digit_count",
    "range_step",
    # Nice Ticks — Constants
    "DEFAULT_TICK_COUNT",
    "MAX_STEP_CORRECTIONS",
    "MIN_SOLVER_TICK_COUNT",
    "STEP_RATIO_SCALE_COARSE",
    "STEP_RATIO_SCALE_FINE",
    # Nice Ticks — Types
    "StepResult",
    # Nice Ticks — Functions
    "calculate_step",
    "get_format_step",
    "get_nice_tick_values",
    "get_tick_of_single_value",
    "get_tick_values_fixed_domain",
    "get_valid_interval",
]
