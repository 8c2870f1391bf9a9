"""
Contract Validation Module

Модуль для валидации JSON контрактов nicescale.
"""

from .validators import (
    SchemaLoader,
    TickRequestValidator,
    validate_tick_request,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "TickRequestValidator",
    # Functions
    "validate_tick_request",
]
