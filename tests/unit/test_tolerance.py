"""
Тесты для tolerance-примитивов

Проверяет:
1. Абсолютное epsilon-сравнение
2. IEEE 754 деление
"""

import math

import pytest

from src.core.math import ieee_divide, is_close

# =============================================================================
# EPSILON-СРАВНЕНИЕ
# =============================================================================


class TestIsClose:
    """Тесты для is_close"""

    def test_is_close(self) -> None:
        """Абсолютная толерантность"""
        assert is_close(10.0, 10.0000000002, abs_tol=1e-9)
        assert not is_close(10.0, 10.002, abs_tol=1e-9)

    def test_is_close_symmetric(self) -> None:
        """Симметричность"""
        assert is_close(1.0, 1.0 + 1e-13) == is_close(1.0 + 1e-13, 1.0)

    def test_is_close_negative_tolerance(self) -> None:
        """Отрицательная толерантность невалидна"""
        with pytest.raises(ValueError, match="abs_tol must be non-negative"):
            is_close(1.0, 1.0, abs_tol=-1.0)


# =============================================================================
# IEEE 754 ДЕЛЕНИЕ
# =============================================================================


class TestIeeeDivide:
    """Тесты IEEE 754 деления"""

    def test_normal_division(self) -> None:
        """Обычное деление"""
        assert ieee_divide(10.0, 4.0) == 2.5

    def test_division_by_zero(self) -> None:
        """±inf и nan вместо исключения"""
        assert ieee_divide(2.0, 0.0) == math.inf
        assert ieee_divide(-2.0, 0.0) == -math.inf
        assert ieee_divide(2.0, -0.0) == -math.inf
        assert math.isnan(ieee_divide(0.0, 0.0))
        assert math.isnan(ieee_divide(math.nan, 0.0))
