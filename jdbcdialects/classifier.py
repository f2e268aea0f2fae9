"""Reverse lookup from a saved driver class to its built-in dialect."""

from __future__ import annotations

from .registry import DialectRegistry, resolve_registry

NO_PRE_CONFIGURED_DIALECT = "NO_PRE_CONFIGURED_DRIVER"


def classify(driver_class: str, registry: DialectRegistry | None = None) -> str:
    """Return the built-in dialect id using ``driver_class``.

    Custom dialects are not consulted; anything outside the built-in table
    yields :data:`NO_PRE_CONFIGURED_DIALECT`.
    """

    for descriptor in resolve_registry(registry).builtins():
        if descriptor.driver_class == driver_class:
            return descriptor.id
    return NO_PRE_CONFIGURED_DIALECT


def is_pre_configured(dialect_id: str) -> bool:
    return dialect_id != NO_PRE_CONFIGURED_DIALECT


__all__ = ["NO_PRE_CONFIGURED_DIALECT", "classify", "is_pre_configured"]
