"""Property domain schema models.

A property domain describes what a class of devices looks like: the
state it reports, the command payload it accepts, the features it may
advertise and the roles it may take. Domains are frozen once built.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

FieldType = Literal["boolean", "number", "string", "object"]


def _read_only(fields: Mapping[str, FieldDef]) -> Mapping[str, FieldDef]:
    """Copy a field map into a read-only view."""
    return MappingProxyType(dict(fields))


class FieldDef(BaseModel):
    """Schema of one state, command or query field.

    Examples:
        >>> FieldDef(type="number", description="Brightness 0-100", min=0, max=100)
    """

    model_config = ConfigDict(frozen=True)

    type: FieldType = Field(..., description="Value type tag")

    description: str | None = Field(default=None, description="What the field means")

    values: tuple[float | str, ...] | None = Field(
        default=None,
        description="Allowed values, if the field is an enumeration",
    )

    min: float | None = Field(default=None, description="Lower bound for numeric fields")

    max: float | None = Field(default=None, description="Upper bound for numeric fields")


class QueryableDef(BaseModel):
    """Range-query extension for domains whose state is a collection."""

    model_config = ConfigDict(frozen=True)

    params: Mapping[str, FieldDef] = Field(
        default_factory=dict,
        description="Accepted query parameters",
    )

    item_fields: Mapping[str, FieldDef] = Field(
        default_factory=dict,
        description="Shape of each returned item",
    )

    description: str | None = None

    @field_validator("params", "item_fields")
    @classmethod
    def freeze_fields(cls, value: Mapping[str, FieldDef]) -> Mapping[str, FieldDef]:
        return _read_only(value)


class PropertyDomain(BaseModel):
    """A named capability schema shared by a class of devices.

    Attributes:
        name: Unique domain key (water, schedule, ...)
        display_name: Human-readable name
        state_fields: Fields a device reports in its state snapshot
        command_fields: Fields accepted in a command payload; empty for
            read-only domains
        features: Capability tags a device may advertise
        roles: Semantic role tags a device may declare
        queryable: Optional range-query extension
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Unique domain key")

    display_name: str = Field(..., description="Human-readable domain name")

    state_fields: Mapping[str, FieldDef] = Field(default_factory=dict)

    command_fields: Mapping[str, FieldDef] = Field(default_factory=dict)

    features: frozenset[str] = Field(default_factory=frozenset)

    roles: frozenset[str] = Field(default_factory=frozenset)

    queryable: QueryableDef | None = None

    @field_validator("state_fields", "command_fields")
    @classmethod
    def freeze_fields(cls, value: Mapping[str, FieldDef]) -> Mapping[str, FieldDef]:
        return _read_only(value)

    @property
    def is_read_only(self) -> bool:
        """Check if the domain accepts no commands."""
        return not self.command_fields

    @property
    def is_queryable(self) -> bool:
        """Check if the domain exposes a range query."""
        return self.queryable is not None
