"""Process-wide, read-only property domain catalog."""

from __future__ import annotations

from types import MappingProxyType

from device_hub.core.models.domain import PropertyDomain
from device_hub.domains.definitions import ALL_DOMAINS


def _build_catalog(domains: tuple[PropertyDomain, ...]) -> MappingProxyType[str, PropertyDomain]:
    catalog: dict[str, PropertyDomain] = {}
    for domain in domains:
        if domain.name in catalog:
            raise ValueError(f"Duplicate property domain: {domain.name}")
        catalog[domain.name] = domain
    return MappingProxyType(catalog)


_CATALOG = _build_catalog(ALL_DOMAINS)


def get_domain(name: str) -> PropertyDomain | None:
    """Look up a property domain by name.

    Args:
        name: Domain name (e.g., 'water', 'schedule')

    Returns:
        PropertyDomain, or None if no domain has that name
    """
    return _CATALOG.get(name)


def list_domains() -> list[PropertyDomain]:
    """List all property domains in catalog order."""
    return list(_CATALOG.values())


def domain_names() -> list[str]:
    """List all property domain names in catalog order."""
    return list(_CATALOG.keys())
