"""
Tolerance — Epsilon-сравнения и IEEE-деление

Модуль содержит примитивы, на которых построены числовые value objects:
- Абсолютное epsilon-сравнение float (равенство с допуском)
- Деление с семантикой IEEE 754 (Python бросает ZeroDivisionError даже для float)

ИНВАРИАНТЫ:
1. Сравнения с допуском симметричны: is_close(a, b) == is_close(b, a)
2. ieee_divide никогда не бросает исключение для конечных входов
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Абсолютная толерантность для сравнения float по умолчанию
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(a: float, b: float, abs_tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """
    Сравнение float с абсолютной толерантностью.

    В отличие от math.isclose, относительная толерантность не применяется:
    допуск одинаков для любых величин.

    Args:
        a: Первое значение
        b: Второе значение
        abs_tol: Абсолютная толерантность (default: EPS_FLOAT_COMPARE_ABS)

    Returns:
        True если abs(a - b) <= abs_tol

    Examples:
        >>> is_close(10.0, 10.0000000002, abs_tol=1e-9)
        True
        >>> is_close(10.0, 10.002, abs_tol=1e-9)
        False
    """
    if abs_tol < 0:
        raise ValueError(f"abs_tol must be non-negative, got {abs_tol}")

    return abs(a - b) <= abs_tol


# =============================================================================
# IEEE 754 ДЕЛЕНИЕ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление float по правилам IEEE 754.

    Python бросает ZeroDivisionError для x / 0.0, тогда как IEEE 754
    возвращает бесконечность со знаком (или NaN для 0 / 0).

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        numerator / denominator; для denominator == 0:
        - ±inf (знак = знак числителя * знак нуля)
        - nan если числитель 0 или NaN

    Examples:
        >>> ieee_divide(2.0, 0.0)
        inf
        >>> ieee_divide(-2.0, 0.0)
        -inf
        >>> ieee_divide(2.0, -0.0)
        -inf
    """
    if denominator != 0.0:
        return numerator / denominator

    if numerator == 0.0 or math.isnan(numerator):
        return math.nan

    # Знак нуля в знаменателе учитывается (0.0 vs -0.0)
    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return math.copysign(math.inf, sign)
