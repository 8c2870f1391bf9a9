"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. NaN/Inf проверки
2. Проверку целочисленности
3. Округление half up
4. Ограничение диапазоном
5. Валидацию домена
"""

import math

import pytest

from nicescale.core.math.numerical_safeguards import (
    TICK_EPSILON_FACTOR,
    clamp,
    is_integral,
    is_valid_float,
    round_half_up,
    validate_domain,
)


class TestConstants:
    """Тесты epsilon-параметров"""

    def test_tick_epsilon_factor(self) -> None:
        """Доля шага для компенсации float-дрейфа"""
        assert TICK_EPSILON_FACTOR == 0.1


# =============================================================================
# ТЕСТЫ NaN/Inf ПРОВЕРОК
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_values(self) -> None:
        """Конечные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-1e308)
        assert is_valid_float(5e-324)

    def test_non_finite_values(self) -> None:
        """NaN и ±Inf невалидны"""
        assert not is_valid_float(math.nan)
        assert not is_valid_float(math.inf)
        assert not is_valid_float(-math.inf)


class TestIsIntegral:
    """Тесты для is_integral"""

    def test_integral_values(self) -> None:
        """Целые значения (int и float)"""
        assert is_integral(5)
        assert is_integral(5.0)
        assert is_integral(-3.0)
        assert is_integral(0)

    def test_fractional_values(self) -> None:
        """Дробные значения"""
        assert not is_integral(5.5)
        assert not is_integral(0.05)

    def test_non_finite_values(self) -> None:
        """NaN/Inf не считаются целыми"""
        assert not is_integral(math.inf)
        assert not is_integral(math.nan)


# =============================================================================
# ТЕСТЫ ОКРУГЛЕНИЯ
# =============================================================================


class TestRoundHalfUp:
    """Тесты для round_half_up"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0.5, 1.0),
            (1.5, 2.0),
            (2.5, 3.0),
            (6.5, 7.0),
            (-2.5, -2.0),
            (-0.4, 0.0),
            (3.49, 3.0),
            (10.2, 10.0),
        ],
    )
    def test_half_rounds_up(self, value: float, expected: float) -> None:
        """Половина округляется к +inf (не banker's rounding)"""
        assert round_half_up(value) == expected

    def test_differs_from_builtin_round(self) -> None:
        """Встроенный round() даёт banker's rounding"""
        assert round(0.5) == 0
        assert round_half_up(0.5) == 1.0

    def test_non_finite_passthrough(self) -> None:
        """NaN/Inf возвращаются без изменений"""
        assert round_half_up(math.inf) == math.inf
        assert math.isnan(round_half_up(math.nan))


class TestClamp:
    """Тесты для clamp"""

    def test_lower_bound_only(self) -> None:
        """Только нижняя граница"""
        assert clamp(1, min_value=2) == 2
        assert clamp(6, min_value=2) == 6

    def test_both_bounds(self) -> None:
        """Обе границы"""
        assert clamp(-1.0, 0.0, 10.0) == 0.0
        assert clamp(15.0, 0.0, 10.0) == 10.0
        assert clamp(5.0, 0.0, 10.0) == 5.0

    def test_no_bounds(self) -> None:
        """Без границ значение не меняется"""
        assert clamp(42.0) == 42.0


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidateDomain:
    """Тесты для validate_domain"""

    def test_finite_domain_valid(self) -> None:
        """Конечный домен валиден в любом порядке"""
        validate_domain((0.0, 100.0), "domain")
        validate_domain((100.0, 0.0), "domain")

    def test_infinite_bounds_valid(self) -> None:
        """±Infinity — допустимые границы"""
        validate_domain((-math.inf, 5.0), "domain")
        validate_domain((-math.inf, math.inf), "domain")

    def test_nan_raises(self) -> None:
        """NaN вызывает ошибку"""
        with pytest.raises(ValueError, match="must not contain NaN"):
            validate_domain((math.nan, 1.0), "domain")

        with pytest.raises(ValueError, match="must not contain NaN"):
            validate_domain((0.0, math.nan), "domain")

    def test_wrong_length_raises(self) -> None:
        """Не пара → ошибка"""
        with pytest.raises(ValueError, match="must be a \\(min, max\\) pair"):
            validate_domain((1.0, 2.0, 3.0), "domain")  # type: ignore[arg-type]
