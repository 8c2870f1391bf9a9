"""
TickRequest — Модель запроса на построение тиков оси

Immutable Pydantic модель, объединяющая domain, число тиков и режим.
Совместима с JSON Schema (contracts/schema/tick_request.json).
"""

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

from nicescale.core.contracts import validate_tick_request
from nicescale.core.math.nice_ticks import (
    DEFAULT_TICK_COUNT,
    get_nice_tick_values,
    get_tick_values_fixed_domain,
)
from nicescale.core.math.numerical_safeguards import validate_domain


# =============================================================================
# ENUMS
# =============================================================================


class TickMode(str, Enum):
    """Режим построения тиков"""

    NICE = "nice"
    FIXED_DOMAIN = "fixed_domain"


# =============================================================================
# TICK REQUEST MODEL
# =============================================================================


class TickRequest(BaseModel):
    """
    Запрос на построение тиков числовой оси.

    Immutable модель (frozen=True):
    - domain: пара (min, max) в любом порядке, ±Infinity допустимы, NaN — нет
    - tick_count: желаемое число тиков (≥ 1)
    - allow_decimals: допустимы ли дробные тики
    - mode: NICE (тики могут выходить за domain) или FIXED_DOMAIN
    """

    schema_version: str = Field(
        "1", pattern="^1$", description="Версия схемы для tracking совместимости"
    )
    domain: tuple[float, float] = Field(..., description="Пара (min, max)")
    tick_count: int = Field(DEFAULT_TICK_COUNT, ge=1, description="Желаемое число тиков")
    allow_decimals: bool = Field(True, description="Допустимы ли дробные тики")
    mode: TickMode = Field(TickMode.NICE, description="Режим построения тиков")

    model_config = {"frozen": True}

    @field_validator("domain")
    @classmethod
    def validate_domain_bounds(cls, v: tuple[float, float]) -> tuple[float, float]:
        """Проверка, что границы domain не NaN"""
        validate_domain(v, "domain")
        return v

    @classmethod
    def from_contract(cls, data: Dict[str, Any]) -> "TickRequest":
        """
        Создание запроса из dict после проверки tick_request контракта.

        Raises:
            jsonschema.ValidationError: Если data не соответствует схеме
            pydantic.ValidationError: Если domain содержит NaN
        """
        validate_tick_request(data)
        return cls(**data)


# =============================================================================
# DISPATCH
# =============================================================================


def compute_ticks(request: TickRequest) -> list[float]:
    """
    Построение тиков по запросу.

    Args:
        request: Валидированный TickRequest

    Returns:
        Список тиков в порядке request.domain
    """
    if request.mode == TickMode.FIXED_DOMAIN:
        return get_tick_values_fixed_domain(
            request.domain, request.tick_count, request.allow_decimals
        )

    return get_nice_tick_values(request.domain, request.tick_count, request.allow_decimals)
