"""
nicescale — "nice" tick values for numeric chart axes.
"""

from nicescale.core.domain import TickMode, TickRequest, compute_ticks
from nicescale.core.math import (
    StepResult,
    calculate_step,
    get_format_step,
    get_nice_tick_values,
    get_tick_of_single_value,
    get_tick_values_fixed_domain,
    get_valid_interval,
)

__version__ = "0.1.0"

__all__ = [
    "StepResult",
    "TickMode",
    "TickRequest",
    "calculate_step",
    "compute_ticks",
    "get_format_step",
    "get_nice_tick_values",
    "get_tick_of_single_value",
    "get_tick_values_fixed_domain",
    "get_valid_interval",
]
