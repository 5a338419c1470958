"""
NumberFormat — Провайдер числового формата (decimal separator, percent symbol)

Узкий контракт, через который Percent парсит и форматирует строки.
Сами locale-данные здесь не реализуются: хост либо передаёт NumberFormat
с нужными разделителями, либо берёт их из текущей locale процесса
(NumberFormat.from_locale).

Любой объект, удовлетворяющий NumberFormatProvider, может использоваться
вместо NumberFormat.
"""

import locale
import logging
from decimal import Decimal
from typing import Protocol

from pydantic import BaseModel, Field, model_validator

logger = logging.getLogger(__name__)


# =============================================================================
# PROTOCOL
# =============================================================================


class NumberFormatProvider(Protocol):
    """Минимальный контракт провайдера числового формата."""

    @property
    def decimal_separator(self) -> str: ...

    @property
    def percent_symbol(self) -> str: ...

    def parse_float(self, text: str) -> float: ...

    def format_float(self, value: float) -> str: ...


# =============================================================================
# MODEL
# =============================================================================


class NumberFormat(BaseModel):
    """
    Числовой формат с настраиваемыми разделителями.

    Immutable модель (frozen=True); разделители обязаны различаться,
    иначе строка "1,000" неоднозначна.
    """

    decimal_separator: str = Field(".", min_length=1, description="Десятичный разделитель")
    group_separator: str = Field(",", min_length=1, description="Разделитель групп разрядов")
    percent_symbol: str = Field("%", min_length=1, description="Символ процента")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_separators(self) -> "NumberFormat":
        """Десятичный и групповой разделители не должны совпадать."""
        if self.decimal_separator == self.group_separator:
            raise ValueError(
                f"decimal_separator and group_separator must differ, "
                f"both are {self.decimal_separator!r}"
            )
        return self

    @classmethod
    def from_locale(cls) -> "NumberFormat":
        """
        Формат текущей locale процесса (stdlib locale.localeconv).

        Пустой разделитель групп (типично для locale "C") заменяется
        неразрывным пробелом, чтобы пройти валидацию.
        """
        conv = locale.localeconv()
        decimal_separator = conv.get("decimal_point") or "."
        group_separator = conv.get("thousands_sep") or " "
        logger.debug(
            "Number format from locale: decimal=%r group=%r",
            decimal_separator,
            group_separator,
        )
        return cls(decimal_separator=decimal_separator, group_separator=group_separator)

    def parse_float(self, text: str) -> float:
        """
        Парсинг числа с учётом разделителей.

        Разделители групп удаляются, десятичный разделитель приводится к ".".

        Raises:
            ValueError: Если строка не является числом
        """
        normalized = text.strip().replace(self.group_separator, "")
        normalized = normalized.replace(self.decimal_separator, ".")
        return float(normalized)

    def format_float(self, value: float) -> str:
        """
        Кратчайшее десятичное представление без экспоненты и без групп.

        Examples:
            >>> INVARIANT.format_float(2.35)
            '2.35'
            >>> INVARIANT.format_float(20.0)
            '20'
            >>> NumberFormat(decimal_separator=",", group_separator=".").format_float(0.00001)
            '0,00001'
        """
        # repr даёт кратчайшую строку, однозначно восстанавливающую float
        text = format(Decimal(repr(value)).normalize(), "f")
        if text in ("-0", "-0.0"):
            text = "0"
        return text.replace(".", self.decimal_separator)


# Culture-invariant формат
INVARIANT: NumberFormat = NumberFormat()
