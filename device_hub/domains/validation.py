"""Validation of device state, command payloads and range queries.

The catalog does not enforce these rules itself. They are applied by
the layers that issue commands or ingest state, before anything reaches
a provider.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from device_hub.core.models.domain import FieldDef, PropertyDomain

logger = logging.getLogger(__name__)


def _type_matches(field: FieldDef, value: Any) -> bool:
    """Check a value against a field type tag."""
    if field.type == "boolean":
        return isinstance(value, bool)
    if field.type == "number":
        # bool is a subclass of int
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if field.type == "string":
        return isinstance(value, str)
    return isinstance(value, Mapping)


def check_field(name: str, field: FieldDef, value: Any) -> list[str]:
    """Validate one value against its field definition.

    Args:
        name: Field name, used in messages
        field: Field definition
        value: Value to check

    Returns:
        List of problems, empty if the value is valid
    """
    if not _type_matches(field, value):
        return [f"{name}: expected {field.type}, got {type(value).__name__}"]

    errors: list[str] = []
    if field.type == "number":
        if field.min is not None and value < field.min:
            errors.append(f"{name}: {value} is below minimum {field.min:g}")
        if field.max is not None and value > field.max:
            errors.append(f"{name}: {value} is above maximum {field.max:g}")
    if field.values is not None and value not in field.values:
        allowed = ", ".join(str(v) for v in field.values)
        errors.append(f"{name}: {value!r} is not one of {allowed}")
    return errors


def _check_payload(
    fields: Mapping[str, FieldDef],
    payload: Any,
    allow_extra: bool,
) -> list[str]:
    if not isinstance(payload, Mapping):
        return [f"payload: expected object, got {type(payload).__name__}"]

    errors: list[str] = []
    for key, value in payload.items():
        field = fields.get(key)
        if field is None:
            if not allow_extra:
                errors.append(f"{key}: unknown field")
            continue
        if value is None:
            continue
        errors.extend(check_field(key, field, value))
    return errors


def validate_state(domain: PropertyDomain, state: Any) -> list[str]:
    """Validate a device state snapshot against its domain.

    Declared fields are type- and range-checked. Fields the domain does
    not declare are tolerated and left unvalidated. ``None`` values mean
    "unknown" and are accepted.

    Args:
        domain: Property domain of the device
        state: Reported state object

    Returns:
        List of problems, empty if the state is valid
    """
    return _check_payload(domain.state_fields, state, allow_extra=True)


def validate_command(domain: PropertyDomain, params: Any) -> list[str]:
    """Validate a command payload against its domain.

    Every field must be declared in the domain's command fields, match
    its type and lie within its declared bounds. Read-only domains
    reject any non-empty payload.

    Args:
        domain: Property domain of the target device
        params: Command payload

    Returns:
        List of problems, empty if the payload is acceptable
    """
    if domain.is_read_only and params:
        return [f"{domain.name}: domain is read-only and accepts no commands"]
    errors = _check_payload(domain.command_fields, params, allow_extra=False)
    if errors:
        logger.debug(f"Rejected {domain.name} command payload: {errors}")
    return errors


def validate_query(domain: PropertyDomain, params: Any) -> list[str]:
    """Validate range-query parameters against a queryable domain.

    Args:
        domain: Property domain of the target device
        params: Query parameters (e.g. {"from": ..., "to": ...})

    Returns:
        List of problems, empty if the query is acceptable
    """
    if domain.queryable is None:
        return [f"{domain.name}: domain does not support range queries"]
    errors = _check_payload(domain.queryable.params, params, allow_extra=False)
    if not errors:
        start, end = params.get("from"), params.get("to")
        if start is not None and end is not None and start > end:
            errors.append("from: range start is after range end")
    return errors
