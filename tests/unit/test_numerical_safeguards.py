"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Безопасные доли и нормировочную сумму
2. NaN/Inf санитизацию
3. Проверку распределений вероятностей
4. Округление half away from zero
5. Ограничение диапазоном
"""

import math

import pytest

from pixelforge.core.math.numerical_safeguards import (
    EPS_PROBABILITY_SUM,
    clamp,
    is_close,
    is_probability_distribution,
    is_valid_float,
    non_negative_float,
    nonzero_total,
    round_half_away,
    safe_ratio,
    sanitize_float,
    to_float,
)

# =============================================================================
# ТЕСТЫ БЕЗОПАСНОГО ДЕЛЕНИЯ
# =============================================================================


class TestSafeRatio:
    """Тесты для safe_ratio"""

    def test_regular_ratio(self) -> None:
        assert safe_ratio(512, 1024) == 0.5
        assert safe_ratio(2, 16) == 0.125

    def test_zero_denominator_returns_fallback(self) -> None:
        assert safe_ratio(10, 0) == 0.0
        assert safe_ratio(10, 0, fallback=1.0) == 1.0

    def test_negative_denominator_returns_fallback(self) -> None:
        """Знаменатель по смыслу положительный"""
        assert safe_ratio(10, -4) == 0.0

    def test_nan_inputs_sanitized(self) -> None:
        assert safe_ratio(float("nan"), 10) == 0.0
        assert safe_ratio(10, float("nan")) == 0.0
        assert safe_ratio(10, float("inf")) == 0.0

    def test_upper_bound(self) -> None:
        assert safe_ratio(5000, 1024, upper=1.0) == 1.0
        assert safe_ratio(8, 16, upper=1.0) == 0.5

    def test_infinite_numerator_hits_upper(self) -> None:
        """Без upper бесконечная доля заменяется на fallback, с upper даёт максимум"""
        assert safe_ratio(float("inf"), 16) == 0.0
        assert safe_ratio(float("inf"), 16, upper=1.0) == 1.0

    def test_huge_int_inputs(self) -> None:
        assert safe_ratio(10**400, 16, upper=1.0) == 1.0
        assert safe_ratio(10, 10**400) == 0.0
        assert safe_ratio(10**400, 10**400, upper=1.0) == 0.0

    def test_invalid_eps_raises(self) -> None:
        with pytest.raises(ValueError, match="eps must be positive"):
            safe_ratio(1, 2, eps=0.0)


class TestNonzeroTotal:
    """Тесты для nonzero_total"""

    def test_regular_sum(self) -> None:
        assert nonzero_total([0.36, 0.3, 0.16, 0.08, 0.025]) == pytest.approx(0.925)

    def test_zero_sum_substituted(self) -> None:
        assert nonzero_total([0.0, 0.0, 0.0]) == 1.0
        assert nonzero_total([]) == 1.0

    def test_custom_substitute(self) -> None:
        assert nonzero_total([0.0], substitute=2.0) == 2.0


# =============================================================================
# ТЕСТЫ САНИТИЗАЦИИ
# =============================================================================


class TestSanitization:
    """Тесты для is_valid_float / sanitize_float"""

    def test_finite_values_valid(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-1e300)

    def test_non_finite_values_invalid(self) -> None:
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))

    def test_sanitize_converts_int(self) -> None:
        result = sanitize_float(10)
        assert result == 10.0
        assert isinstance(result, float)

    def test_sanitize_replaces_non_finite(self) -> None:
        assert sanitize_float(float("nan")) == 0.0
        assert sanitize_float(float("inf"), fallback=-1.0) == -1.0

    def test_sanitize_huge_int(self) -> None:
        assert sanitize_float(10**400, fallback=-1.0) == -1.0

    def test_to_float_saturates(self) -> None:
        assert to_float(10**400) == math.inf
        assert to_float(-(10**400)) == -math.inf
        assert to_float(3) == 3.0

    def test_non_negative_float(self) -> None:
        assert non_negative_float(-3) == 0.0
        assert non_negative_float(float("nan")) == 0.0
        assert non_negative_float(float("-inf")) == 0.0
        assert non_negative_float(float("inf")) == math.inf
        assert non_negative_float(10**400) == math.inf
        assert non_negative_float(7) == 7.0


# =============================================================================
# ТЕСТЫ РАСПРЕДЕЛЕНИЙ
# =============================================================================


class TestProbabilityDistribution:
    """Тесты для is_probability_distribution"""

    def test_base_table_is_distribution(self) -> None:
        assert is_probability_distribution([0.6, 0.25, 0.1, 0.04, 0.01])

    def test_sum_within_tolerance(self) -> None:
        values = [0.5, 0.5 + EPS_PROBABILITY_SUM / 2]
        assert is_probability_distribution(values)

    def test_sum_outside_tolerance(self) -> None:
        assert not is_probability_distribution([0.5, 0.4])
        assert not is_probability_distribution([0.5, 0.5 + 1e-6])

    def test_negative_value_rejected(self) -> None:
        assert not is_probability_distribution([1.1, -0.1])

    def test_nan_rejected(self) -> None:
        assert not is_probability_distribution([math.nan, 1.0])

    def test_empty_rejected(self) -> None:
        assert not is_probability_distribution([])


# =============================================================================
# ТЕСТЫ ОКРУГЛЕНИЯ И ОГРАНИЧЕНИЯ
# =============================================================================


class TestRoundHalfAway:
    """Тесты для round_half_away"""

    def test_quality_score_rounding(self) -> None:
        assert round_half_away(0.0443359375, 2) == 0.04
        assert round_half_away(0.5, 2) == 0.5

    def test_half_rounds_away_from_zero(self) -> None:
        """В отличие от round(): 0.5 → 1, 2.5 → 3"""
        assert round_half_away(0.5, 0) == 1.0
        assert round_half_away(2.5, 0) == 3.0
        assert round_half_away(-2.5, 0) == -3.0

    def test_negative_decimals_raises(self) -> None:
        with pytest.raises(ValueError, match="decimals must be non-negative"):
            round_half_away(1.0, -1)


class TestClamp:
    """Тесты для clamp"""

    def test_inside_range(self) -> None:
        assert clamp(0.5, 0.0, 1.0) == 0.5

    def test_outside_range(self) -> None:
        assert clamp(-0.1, 0.0, 1.0) == 0.0
        assert clamp(1.7, 0.0, 1.0) == 1.0

    def test_open_bounds(self) -> None:
        assert clamp(-5.0, min_value=0.0) == 0.0
        assert clamp(5.0, max_value=1.0) == 1.0
        assert clamp(5.0) == 5.0


def test_is_close_tolerances() -> None:
    assert is_close(1.0, 1.0 + 1e-12)
    assert not is_close(1.0, 1.001)
