"""Property domain catalog.

Static registry of the capability schemas devices are described by.
Domains are defined once at import time and never change.
"""

from device_hub.domains.catalog import domain_names, get_domain, list_domains
from device_hub.domains.validation import (
    check_field,
    validate_command,
    validate_query,
    validate_state,
)

__all__ = [
    "get_domain",
    "list_domains",
    "domain_names",
    "check_field",
    "validate_state",
    "validate_command",
    "validate_query",
]
