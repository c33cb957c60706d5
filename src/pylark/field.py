"""Field tree for sparse fieldset requests."""

from __future__ import annotations

from pylark._filters import Filter
from pylark._query import FIELDS, FIELDS_TO_EXPAND, append_value

SEPARATOR = "__"


class Field:
    """A requested field and, for related resources, its sub-fields.

    Names are stored unqualified. The double-underscore path of a field
    (``team_url__driver_urls__name``) is derived from its position in the
    tree each time the tree is applied to a parameter set, so a subtree can
    be attached under a different parent and still serialize correctly.

    Usage:
        Field("team_url").with_sub_field(Field("name")).with_sub_field(Field("colour"))
        # fields=team_url,team_url__name,team_url__colour&fields_to_expand=team_url

        Field("year").with_filter(Filter.greater_than(2017))
        # fields=year&year__gt=2017
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.is_included = True
        self.is_expanded = False
        self.sub_fields: dict[str, Field] = {}
        self.filters: list[Filter] = []

    def __repr__(self) -> str:
        return (
            f"Field(name={self.name!r}, is_included={self.is_included}, "
            f"is_expanded={self.is_expanded}, sub_fields={list(self.sub_fields)})"
        )

    def with_sub_field(self, sub_field: Field) -> Field:
        """Expand this field and request ``sub_field`` from the related resource.

        Only use this if the field is a reference to a different object.
        """
        self.is_expanded = True
        self.sub_fields[sub_field.name] = sub_field
        return self

    def with_filter(self, filter: Filter) -> Field:
        self.filters.append(filter)
        return self

    def expand(self, sub_field: Field) -> Field:
        """Expand ``sub_field`` without listing it as a field to return.

        Useful to get all fields of a related resource.
        """
        sub_field.is_expanded = True
        sub_field.is_included = False
        self.sub_fields[sub_field.name] = sub_field
        return self

    def qualified_name(self, parent_name: str = "") -> str:
        if parent_name:
            return f"{parent_name}{SEPARATOR}{self.name}"
        return self.name

    def apply(self, params: dict[str, str], parent_name: str = "") -> dict[str, str]:
        """Write this field and its subtree into ``params``."""
        name = self.qualified_name(parent_name)
        if self.is_included:
            append_value(params, FIELDS, name)
        if self.is_expanded:
            append_value(params, FIELDS_TO_EXPAND, name)
        for flt in self.filters:
            # Equality filters are keyed on the bare field name by the API.
            if flt.is_equality:
                params[flt.param_key(self.name)] = flt.value
            else:
                params[flt.param_key(name)] = flt.value
        for sub_field in self.sub_fields.values():
            sub_field.apply(params, name)
        return params
