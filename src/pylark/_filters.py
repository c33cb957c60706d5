"""Value filters for Skylark query parameters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Constraint(StrEnum):
    """Comparison operator of a filter, as it appears in the parameter key."""

    EQUALS = ""
    GREATER_THAN = "gt"
    LESS_THAN = "lt"


@dataclass(frozen=True)
class Filter:
    """Constrains a request by a field's value.

    Usage:
        Filter.equals("video")          # set_type_slug=video
        Filter.greater_than(2017)       # year__gt=2017
        Filter.less_than("2020-01-01")  # date__lt=2020-01-01

        # Several objects at once
        Filter.equals("Bob,Lucas,Sue")
    """

    constraint: Constraint
    value: str

    @classmethod
    def equals(cls, value: int | float | str) -> Filter:
        return cls(Constraint.EQUALS, str(value))

    @classmethod
    def greater_than(cls, value: int | float | str) -> Filter:
        return cls(Constraint.GREATER_THAN, str(value))

    @classmethod
    def less_than(cls, value: int | float | str) -> Filter:
        return cls(Constraint.LESS_THAN, str(value))

    @property
    def is_equality(self) -> bool:
        return self.constraint is Constraint.EQUALS

    def param_key(self, name: str) -> str:
        """Return the query parameter key this filter uses for ``name``."""
        if self.is_equality:
            return name
        return f"{name}__{self.constraint.value}"
