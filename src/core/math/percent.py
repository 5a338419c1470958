"""
Percent — Процент как value object

Percent хранит процентную величину (а не долю): Percent(25) означает 25%,
доля (ratio) = 0.25. Участвует в арифметике с int, float и Decimal:

    2 / Percent(8)    == 25.0        (число / доля)
    10 + Percent(30)  == 13.0        (число, увеличенное на процент)
    200 * Percent(15) == 30.0        (доля от числа)

ИНВАРИАНТЫ:
1. Равенство (==, !=) с абсолютной толерантностью PERCENT_EQUALITY_EPS
2. Порядок (<, >) по сырым величинам, без толерантности
3. float / Percent.ZERO → ±inf (IEEE 754), без исключения
4. Decimal / Percent.ZERO → ZeroDivisionError (у Decimal нет бесконечности в контракте)
5. Parse/format не зависят от глобальной locale: разделитель задаёт провайдер
"""

import logging
import math
import re
from decimal import Decimal
from typing import Any, ClassVar, Final, Optional, Union

from pydantic import BaseModel, Field, field_validator

from src.core.math.number_format import INVARIANT, NumberFormatProvider
from src.core.math.tolerance import ieee_divide, is_close

logger = logging.getLogger(__name__)

Number = Union[int, float, Decimal]


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Абсолютная толерантность равенства процентов (поглощает шум float ~1e-10)
PERCENT_EQUALITY_EPS: Final[float] = 1e-9

# Масштаб: процент = доля * 100
PERCENT_SCALE: Final[int] = 100


# =============================================================================
# EXCEPTIONS
# =============================================================================


class PercentFormatError(ValueError):
    """Строка не является корректной записью процента (например ".5%" или "7.%")."""

    pass


# =============================================================================
# PERCENT MODEL
# =============================================================================


class Percent(BaseModel):
    """
    Процентная величина.

    Immutable модель (frozen=True). Все операции возвращают новые значения.
    """

    ZERO: ClassVar["Percent"]

    value: float = Field(..., allow_inf_nan=False, description="Процентная величина (25 = 25%)")

    model_config = {"frozen": True}

    def __init__(self, value: Number = 0.0, **data: Any) -> None:
        super().__init__(value=value, **data)

    @field_validator("value", mode="before")
    @classmethod
    def validate_number_type(cls, v: Any) -> Any:
        """
        Только int, float и Decimal; строки не приводятся к числу.

        Текст процента разбирается через Percent.parse.
        """
        if isinstance(v, bool) or not isinstance(v, (int, float, Decimal)):
            raise ValueError(
                f"Percent value must be int, float or Decimal, got {type(v).__name__}"
            )
        return v

    @field_validator("value")
    @classmethod
    def normalize_negative_zero(cls, v: float) -> float:
        """-0.0 → 0.0: знак бесконечности при делении на 0% задаёт только числитель."""
        return v + 0.0

    # --- Фабрики ---

    @classmethod
    def from_decimal(cls, ratio: Number) -> "Percent":
        """
        Процент из доли: Percent(ratio * 100).

        Examples:
            >>> Percent.from_decimal(0.25)
            Percent(25.0)
        """
        return cls(float(ratio) * PERCENT_SCALE)

    @classmethod
    def from_coefficient(cls, coefficient: Number) -> "Percent":
        """
        Процент прироста из коэффициента: 1.3 → 30%, 0.8 → -20%.

        Examples:
            >>> Percent.from_coefficient(1.3) == Percent(30)
            True
        """
        return cls((float(coefficient) - 1.0) * PERCENT_SCALE)

    @property
    def ratio(self) -> float:
        """Доля, которую представляет процент (value / 100)."""
        return self.value / PERCENT_SCALE

    def _decimal_ratio(self) -> Decimal:
        return Decimal(repr(self.value)) / PERCENT_SCALE

    # --- Арифметика с числами ---

    def __rtruediv__(self, other: Any) -> Number:
        """
        число / процент = число / доля.

        float/int → IEEE 754 (деление на 0% даёт ±inf);
        Decimal → ZeroDivisionError при делении на 0%.
        """
        if isinstance(other, Decimal):
            ratio = self._decimal_ratio()
            if ratio == 0:
                logger.debug("Decimal %s divided by zero percent", other)
                raise ZeroDivisionError(f"Decimal {other} divided by zero percent")
            return other / ratio
        if isinstance(other, (int, float)):
            return ieee_divide(float(other), self.ratio)
        return NotImplemented

    def __radd__(self, other: Any) -> Number:
        """число + процент = число, увеличенное на свой процент."""
        if isinstance(other, Decimal):
            return other + other * self._decimal_ratio()
        if isinstance(other, (int, float)):
            return other + other * self.ratio
        return NotImplemented

    def __rsub__(self, other: Any) -> Number:
        """число - процент = число, уменьшенное на свой процент."""
        if isinstance(other, Decimal):
            return other - other * self._decimal_ratio()
        if isinstance(other, (int, float)):
            return other - other * self.ratio
        return NotImplemented

    def __mul__(self, other: Any) -> Number:
        """процент * число = доля от числа."""
        if isinstance(other, Decimal):
            return other * self._decimal_ratio()
        if isinstance(other, (int, float)):
            return other * self.ratio
        return NotImplemented

    __rmul__ = __mul__

    # --- Арифметика процентных пунктов ---

    def __add__(self, other: Any) -> "Percent":
        if not isinstance(other, Percent):
            return NotImplemented
        return Percent(self.value + other.value)

    def __sub__(self, other: Any) -> "Percent":
        if not isinstance(other, Percent):
            return NotImplemented
        return Percent(self.value - other.value)

    def __neg__(self) -> "Percent":
        return Percent(-self.value)

    # --- Сравнения ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Percent):
            return NotImplemented
        return is_close(self.value, other.value, abs_tol=PERCENT_EQUALITY_EPS)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        # Равенство с допуском нетранзитивно: согласован с ним только
        # постоянный хэш (все проценты в одной корзине)
        return hash(Percent)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Percent):
            return NotImplemented
        return self.value < other.value

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Percent):
            return NotImplemented
        return self.value > other.value

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Percent):
            return NotImplemented
        return self.value < other.value or self == other

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Percent):
            return NotImplemented
        return self.value > other.value or self == other

    # --- Парсинг и форматирование ---

    @classmethod
    def parse(cls, text: str, provider: NumberFormatProvider = INVARIANT) -> "Percent":
        """
        Парсинг строки вида "20%" или "2.35%".

        Десятичный разделитель и символ процента берутся у провайдера.
        Целая и дробная части обязательны при наличии разделителя.

        Args:
            text: Строка с процентом
            provider: Провайдер числового формата (default: INVARIANT)

        Returns:
            Percent с величиной, равной распарсенному числу

        Raises:
            PercentFormatError: Если строка не соответствует формату

        Examples:
            >>> Percent.parse("20%")
            Percent(20.0)
        """
        match = _percent_pattern(provider).match(text.strip())
        if match is None:
            logger.debug("Rejected percent text %r", text)
            raise PercentFormatError(f"Invalid percent format: {text!r}")

        try:
            number = provider.parse_float(match.group("number"))
        except ValueError as exc:
            raise PercentFormatError(f"Invalid percent number in {text!r}: {exc}") from exc

        if not math.isfinite(number):
            raise PercentFormatError(f"Percent out of range: {text!r}")

        return cls(number)

    @classmethod
    def try_parse(
        cls, text: str, provider: NumberFormatProvider = INVARIANT
    ) -> Optional["Percent"]:
        """Как parse, но возвращает None вместо исключения."""
        try:
            return cls.parse(text, provider)
        except PercentFormatError:
            return None

    def format(self, provider: NumberFormatProvider = INVARIANT) -> str:
        """Строка вида "2.35%" с разделителем провайдера (обратно parse)."""
        return f"{provider.format_float(self.value)}{provider.percent_symbol}"

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Percent({self.value!r})"


Percent.ZERO = Percent(0)


def _percent_pattern(provider: NumberFormatProvider) -> "re.Pattern[str]":
    sep = re.escape(provider.decimal_separator)
    symbol = re.escape(provider.percent_symbol)
    return re.compile(rf"^(?P<number>[+-]?[0-9]+(?:{sep}[0-9]+)?)\s*{symbol}$")
