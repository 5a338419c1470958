"""
Core math modules

Числовые value objects: Percent и семейство Interval.
"""

# Tolerance
from src.core.math.tolerance import (
    EPS_FLOAT_COMPARE_ABS,
    ieee_divide,
    is_close,
)

# Number format provider
from src.core.math.number_format import (
    INVARIANT,
    NumberFormat,
    NumberFormatProvider,
)

# Percent
from src.core.math.percent import (
    PERCENT_EQUALITY_EPS,
    PERCENT_SCALE,
    Percent,
    PercentFormatError,
)

# Ordering
from src.core.math.ordering import Comparable, compare

# Intervals
from src.core.math.interval import (
    ANY_INTERVAL,
    EMPTY_INTERVAL,
    AnyInterval,
    AtLeastInterval,
    AtMostInterval,
    BoundedInterval,
    DegenerateInterval,
    EmptyInterval,
    HalfBoundedInterval,
    Interval,
    interval_between,
)

__all__ = [
    # Tolerance
    "EPS_FLOAT_COMPARE_ABS",
    "ieee_divide",
    "is_close",
    # Number format
    "INVARIANT",
    "NumberFormat",
    "NumberFormatProvider",
    # Percent — Constants
    "PERCENT_EQUALITY_EPS",
    "PERCENT_SCALE",
    # Percent — Types
    "Percent",
    "PercentFormatError",
    # Ordering
    "Comparable",
    "compare",
    # Intervals — Types
    "Interval",
    "HalfBoundedInterval",
    "AtMostInterval",
    "AtLeastInterval",
    "BoundedInterval",
    "DegenerateInterval",
    "AnyInterval",
    "EmptyInterval",
    # Intervals — Singletons
    "ANY_INTERVAL",
    "EMPTY_INTERVAL",
    # Intervals — Functions
    "interval_between",
]
