"""
Interval — Упорядоченные интервалы над любым сравнимым типом

Каждый интервал — неизменяемый классификатор на упорядоченной прямой T:
значение лежит либо до интервала (is_value_before), либо внутри (contains),
либо после (is_value_after). Ровно одно из трёх для всех вариантов, кроме
AnyInterval (всё внутри) и EmptyInterval (ничего внутри; до и после —
оба True по соглашению).

Варианты:
- AtMostInterval(e)       (-∞,e]
- AtLeastInterval(e)      [e,∞)
- BoundedInterval(lo,hi)  [lo,hi]  — композиция AtLeast + AtMost
- DegenerateInterval(e)   [e,e]
- AnyInterval             (-∞,∞)
- EmptyInterval           ∅

Ни одна операция не бросает исключений для значений, сравнимых с T.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Final, Generic, Optional

from src.core.math.ordering import T, compare

# =============================================================================
# ФОРМАТЫ ОТОБРАЖЕНИЯ
# =============================================================================

AT_MOST_FORMAT: Final[str] = "(-∞,{0}]"
AT_LEAST_FORMAT: Final[str] = "[{0},∞)"
BOUNDED_FORMAT: Final[str] = "[{0},{1}]"
DEGENERATE_FORMAT: Final[str] = "[{0},{0}]"
ANY_FORMAT: Final[str] = "(-∞,∞)"
EMPTY_FORMAT: Final[str] = "∅"


# =============================================================================
# БАЗОВЫЙ КОНТРАКТ
# =============================================================================


class Interval(ABC, Generic[T]):
    """Интервал над T: классификация значений и проекция на интервал."""

    @abstractmethod
    def is_value_before(self, value: T) -> bool:
        """True, если value лежит до интервала (например -2 до [1,4])."""

    @abstractmethod
    def is_value_after(self, value: T) -> bool:
        """True, если value лежит после интервала (например 5 после [1,4])."""

    @abstractmethod
    def contains(self, value: T) -> bool:
        """True, если value принадлежит интервалу."""

    @abstractmethod
    def closest(self, value: T) -> Optional[T]:
        """Ближайшая к value точка интервала (сам value, если он внутри)."""

    def __contains__(self, value: T) -> bool:
        return self.contains(value)


# =============================================================================
# ИНТЕРВАЛЫ С ОДНИМ КОНЦОМ
# =============================================================================


@dataclass(frozen=True)
class HalfBoundedInterval(Interval[T]):
    """Интервал с одним конечным концом и одним бесконечным."""

    endpoint: T
    fmt: str = field(default="{0}", compare=False, repr=False)

    def closest(self, value: T) -> T:
        return value if self.contains(value) else self.endpoint

    def __str__(self) -> str:
        return self.fmt.format(self.endpoint)


@dataclass(frozen=True)
class AtMostInterval(HalfBoundedInterval[T]):
    """(-∞,e]: все значения ≤ e. Ничего не лежит до него."""

    fmt: str = field(default=AT_MOST_FORMAT, compare=False, repr=False)

    def is_value_before(self, value: T) -> bool:
        return False

    def is_value_after(self, value: T) -> bool:
        return not self.contains(value)

    def contains(self, value: T) -> bool:
        return compare(value, self.endpoint) <= 0


@dataclass(frozen=True)
class AtLeastInterval(HalfBoundedInterval[T]):
    """[e,∞): все значения ≥ e. Ничего не лежит после него."""

    fmt: str = field(default=AT_LEAST_FORMAT, compare=False, repr=False)

    def is_value_before(self, value: T) -> bool:
        return not self.contains(value)

    def is_value_after(self, value: T) -> bool:
        return False

    def contains(self, value: T) -> bool:
        return compare(value, self.endpoint) >= 0


# =============================================================================
# ОГРАНИЧЕННЫЙ ИНТЕРВАЛ
# =============================================================================


@dataclass(frozen=True)
class BoundedInterval(Interval[T]):
    """
    [lo,hi] как пересечение [lo,∞) и (-∞,hi].

    Прямой конструктор принимает готовые полуинтервалы и не проверяет
    порядок (lo ≤ hi — ответственность вызывающего). Для сырых концов
    используйте BoundedInterval.between, который упорядочивает их сам.
    """

    lower: AtLeastInterval[T]
    upper: AtMostInterval[T]
    fmt: str = field(default=BOUNDED_FORMAT, compare=False, repr=False)

    @classmethod
    def between(cls, lower: T, upper: T, fmt: str = BOUNDED_FORMAT) -> "BoundedInterval[T]":
        """
        Интервал по двум концам; при lower > upper концы меняются местами.

        Examples:
            >>> BoundedInterval.between(10, 1) == BoundedInterval.between(1, 10)
            True
        """
        if compare(lower, upper) > 0:
            lower, upper = upper, lower
        return cls(AtLeastInterval(lower), AtMostInterval(upper), fmt)

    def is_value_before(self, value: T) -> bool:
        return self.lower.is_value_before(value)

    def is_value_after(self, value: T) -> bool:
        return self.upper.is_value_after(value)

    def contains(self, value: T) -> bool:
        return self.lower.contains(value) and self.upper.contains(value)

    def closest(self, value: T) -> T:
        if not self.lower.contains(value):
            return self.lower.endpoint
        if not self.upper.contains(value):
            return self.upper.endpoint
        return value

    def __str__(self) -> str:
        return self.fmt.format(self.lower.endpoint, self.upper.endpoint)


@dataclass(frozen=True)
class DegenerateInterval(Interval[T]):
    """[e,e]: единственная точка. closest всегда возвращает e."""

    endpoint: T
    fmt: str = field(default=DEGENERATE_FORMAT, compare=False, repr=False)

    def is_value_before(self, value: T) -> bool:
        return compare(value, self.endpoint) < 0

    def is_value_after(self, value: T) -> bool:
        return compare(value, self.endpoint) > 0

    def contains(self, value: T) -> bool:
        return compare(value, self.endpoint) == 0

    def closest(self, value: T) -> T:
        return self.endpoint

    def __str__(self) -> str:
        return self.fmt.format(self.endpoint)


# =============================================================================
# УНИВЕРСАЛЬНЫЙ И ПУСТОЙ ИНТЕРВАЛЫ
# =============================================================================


@dataclass(frozen=True)
class AnyInterval(Interval[T]):
    """(-∞,∞): содержит любое значение."""

    def is_value_before(self, value: T) -> bool:
        return False

    def is_value_after(self, value: T) -> bool:
        return False

    def contains(self, value: T) -> bool:
        return True

    def closest(self, value: T) -> T:
        return value

    def __str__(self) -> str:
        return ANY_FORMAT


@dataclass(frozen=True)
class EmptyInterval(Interval[T]):
    """
    ∅: не содержит ни одного значения.

    У пустого множества нет ближайшей точки, поэтому closest возвращает
    заглушку `default` (None, если не задана). Полагаться на неё как на
    проекцию нельзя.
    """

    default: Optional[T] = None

    def is_value_before(self, value: T) -> bool:
        return True

    def is_value_after(self, value: T) -> bool:
        return True

    def contains(self, value: T) -> bool:
        return False

    def closest(self, value: T) -> Optional[T]:
        return self.default

    def __str__(self) -> str:
        return EMPTY_FORMAT


ANY_INTERVAL: Final[AnyInterval] = AnyInterval()
EMPTY_INTERVAL: Final[EmptyInterval] = EmptyInterval()


# =============================================================================
# ФАБРИКА
# =============================================================================


def interval_between(lower: Optional[T] = None, upper: Optional[T] = None) -> Interval[T]:
    """
    Интервал по необязательным концам (None = бесконечность).

    Examples:
        >>> interval_between()
        AnyInterval()
        >>> str(interval_between(upper=5))
        '(-∞,5]'
        >>> str(interval_between(3, 3))
        '[3,3]'
        >>> str(interval_between(7, 2))
        '[2,7]'
    """
    if lower is None and upper is None:
        return ANY_INTERVAL
    if lower is None:
        return AtMostInterval(upper)
    if upper is None:
        return AtLeastInterval(lower)
    if compare(lower, upper) == 0:
        return DegenerateInterval(lower)
    return BoundedInterval.between(lower, upper)
