"""
Ordering — Возможность сравнения для обобщённых интервалов

Интервалы параметризуются типом T, поддерживающим `<`. Предусловие:
`<` задаёт строгий полный порядок (NaN для float его нарушает и
делает классификацию интервалов неопределённой).
"""

from typing import Any, Protocol, TypeVar


class Comparable(Protocol):
    """Тип со строгим полным порядком."""

    def __lt__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=Comparable)


def compare(a: T, b: T) -> int:
    """
    Трёхзначное сравнение на основе `<`.

    Returns:
        -1 если a < b, +1 если b < a, иначе 0

    Examples:
        >>> compare(1, 2)
        -1
        >>> compare("b", "a")
        1
        >>> compare(3.0, 3)
        0
    """
    if a < b:
        return -1
    if b < a:
        return 1
    return 0
