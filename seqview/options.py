"""
Option Vocabulary

Closed enumerations shared by every engine operation:

- Mode:   how a needle is matched (scalar, sequence, set; predicate for trim)
- Option: one flat vocabulary of policy words. Each operation accepts its own
          subset (COUNT_POLICIES, PARTITION_POLICIES, TRIM_DIRECTIONS,
          SORT_DIRECTIONS).
- Order:  result of lexicographic comparison

Strings are accepted wherever an enum is expected:

    >>> Mode.coerce("any") is Mode.SET
    True
    >>> Option.coerce("around") is Option.AROUND
    True
"""

from __future__ import annotations
from enum import Enum
from typing import FrozenSet, Union


class Mode(str, Enum):
    """Needle matching mode."""
    SCALAR = "scalar"        # one element, equality
    SEQUENCE = "sequence"    # contiguous ordered run
    SET = "set"              # membership in an unordered collection
    PREDICATE = "predicate"  # callable test (trim only)

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            lowered = value.lower()
            if lowered == "any":
                return cls.SET
            for member in cls:
                if member.value == lowered:
                    return member
        return None

    @classmethod
    def coerce(cls, value: Union["Mode", str]) -> "Mode":
        return value if isinstance(value, cls) else cls(value)


class Option(str, Enum):
    """Policy words for count, partition, trim and sort."""
    LEFT = "left"
    LEADING = "leading"
    RIGHT = "right"
    TRAILING = "trailing"
    BOTH = "both"
    ALL = "all"
    AROUND = "around"
    INSIDE = "inside"
    UNTIL = "until"
    STABLE = "stable"
    UNSTABLE = "unstable"
    ASCENDING = "ascending"
    DESCENDING = "descending"
    INVERSE = "inverse"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            lowered = value.lower()
            if lowered == "asc":
                return cls.ASCENDING
            if lowered == "desc":
                return cls.DESCENDING
            for member in cls:
                if member.value == lowered:
                    return member
        return None

    @classmethod
    def coerce(cls, value: Union["Option", str]) -> "Option":
        return value if isinstance(value, cls) else cls(value)


class Order(Enum):
    """Three-way comparison result."""
    LESS = -1
    EQUAL = 0
    GREATER = 1


COUNT_POLICIES: FrozenSet[Option] = frozenset({
    Option.ALL,
    Option.LEADING, Option.LEFT,
    Option.TRAILING, Option.RIGHT,
    Option.UNTIL,
    Option.BOTH, Option.AROUND,
    Option.INSIDE,
    Option.INVERSE,
})

PARTITION_POLICIES: FrozenSet[Option] = frozenset({Option.STABLE, Option.UNSTABLE})

TRIM_DIRECTIONS: FrozenSet[Option] = frozenset({
    Option.LEFT, Option.LEADING,
    Option.RIGHT, Option.TRAILING,
    Option.BOTH,
})

SORT_DIRECTIONS: FrozenSet[Option] = frozenset({Option.ASCENDING, Option.DESCENDING})


def require_option(value: Union[Option, str], allowed: FrozenSet[Option], what: str) -> Option:
    """Coerce ``value`` and reject members outside ``allowed``."""
    option = Option.coerce(value)
    if option not in allowed:
        names = ", ".join(sorted(o.value for o in allowed))
        raise ValueError(f"{what} does not accept '{option.value}' (expected one of: {names})")
    return option


__all__ = [
    'Mode',
    'Option',
    'Order',
    'COUNT_POLICIES',
    'PARTITION_POLICIES',
    'TRIM_DIRECTIONS',
    'SORT_DIRECTIONS',
    'require_option',
]
