"""
Тесты для NumberFormat

Проверяет:
1. Парсинг/форматирование float с разделителями провайдера
2. Валидацию разделителей
3. Immutability и формат из locale
"""

import pytest
from pydantic import ValidationError

from src.core.math import INVARIANT, NumberFormat

# =============================================================================
# NUMBER FORMAT
# =============================================================================


class TestNumberFormat:
    """Тесты для NumberFormat"""

    def test_invariant_defaults(self) -> None:
        """Культурно-независимый формат"""
        assert INVARIANT.decimal_separator == "."
        assert INVARIANT.group_separator == ","
        assert INVARIANT.percent_symbol == "%"

    def test_parse_float(self) -> None:
        """Разделители групп удаляются, десятичный приводится к '.'"""
        assert INVARIANT.parse_float("1,234.5") == pytest.approx(1234.5)
        comma = NumberFormat(decimal_separator=",", group_separator=".")
        assert comma.parse_float("1.234,5") == pytest.approx(1234.5)

    def test_parse_float_invalid(self) -> None:
        """Нечисловая строка → ValueError"""
        with pytest.raises(ValueError):
            INVARIANT.parse_float("abc")

    def test_format_float_shortest(self) -> None:
        """Кратчайшее представление без экспоненты"""
        assert INVARIANT.format_float(2.35) == "2.35"
        assert INVARIANT.format_float(20.0) == "20"
        assert INVARIANT.format_float(1e-5) == "0.00001"
        assert INVARIANT.format_float(-0.0) == "0"

    def test_format_float_separator(self) -> None:
        """Десятичный разделитель провайдера"""
        comma = NumberFormat(decimal_separator=",", group_separator=" ")
        assert comma.format_float(2.5) == "2,5"

    def test_same_separators_rejected(self) -> None:
        """Одинаковые разделители неоднозначны"""
        with pytest.raises(ValidationError, match="must differ"):
            NumberFormat(decimal_separator=",", group_separator=",")

    def test_empty_separator_rejected(self) -> None:
        """Пустой разделитель отклоняется"""
        with pytest.raises(ValidationError):
            NumberFormat(decimal_separator="")

    def test_immutable(self) -> None:
        """NumberFormat immutable (frozen=True)"""
        with pytest.raises(ValidationError):
            INVARIANT.decimal_separator = ","  # type: ignore

    def test_from_locale(self) -> None:
        """Формат из текущей locale процесса валиден"""
        fmt = NumberFormat.from_locale()
        assert fmt.decimal_separator
        assert fmt.decimal_separator != fmt.group_separator

