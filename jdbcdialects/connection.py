"""Saved database connection record as read back from a properties file."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .classifier import NO_PRE_CONFIGURED_DIALECT, classify, is_pre_configured
from .codec import build_url, parse_url
from .models import UrlParts
from .registry import DialectRegistry, resolve_registry

REFERENCE_PREFIX = "reference"


@dataclass(frozen=True, slots=True)
class DatabaseConnection:
    """Credentials, URL and driver of one (possibly reference) connection.

    ``database_type`` is a built-in dialect id, or the no-pre-configured
    sentinel when ``driver`` holds a class outside the built-in table.
    """

    username: str = ""
    password: str = ""
    url: str = ""
    driver: str = ""
    database_type: str = NO_PRE_CONFIGURED_DIALECT

    @classmethod
    def from_saved(
        cls,
        username: str,
        password: str,
        url: str,
        driver: str,
        registry: DialectRegistry | None = None,
    ) -> DatabaseConnection:
        """Create a connection and classify its driver class."""

        return cls(username=username, password=password, url=url).with_driver(driver, registry)

    def with_driver(self, driver: str, registry: DialectRegistry | None = None) -> DatabaseConnection:
        """Return a copy whose database type reflects ``driver``."""

        dialect_id = classify(driver, registry)
        if is_pre_configured(dialect_id):
            return replace(self, driver="", database_type=dialect_id)
        return replace(self, driver=driver, database_type=NO_PRE_CONFIGURED_DIALECT)

    def has_data(self) -> bool:
        return bool(
            self.username
            or self.password
            or self.url
            or self.driver
            or (self.database_type and is_pre_configured(self.database_type))
        )

    def driver_class(self, registry: DialectRegistry | None = None) -> str:
        """Driver class to persist for this connection."""

        if is_pre_configured(self.database_type):
            return resolve_registry(registry).lookup(self.database_type).driver_class
        return self.driver

    def url_parts(self, registry: DialectRegistry | None = None) -> UrlParts:
        """Parse the URL with the dialect of this connection.

        Connections without a built-in dialect yield empty parts.
        """

        if not is_pre_configured(self.database_type):
            return UrlParts()
        descriptor = resolve_registry(registry).lookup(self.database_type)
        return parse_url(descriptor, self.url)

    def with_url_parts(self, parts: UrlParts, registry: DialectRegistry | None = None) -> DatabaseConnection:
        """Return a copy with its URL rebuilt from ``parts``.

        Parts missing from ``parts`` keep their current value; parameters of
        the current URL are preserved. Raises DialectNotFoundError for
        connections without a built-in dialect.
        """

        descriptor = resolve_registry(registry).lookup(self.database_type)
        current = parse_url(descriptor, self.url) if self.url else UrlParts(port=descriptor.default_port)
        url = build_url(
            descriptor,
            self.url or None,
            parts,
            current.server_address or "",
            current.port if current.port is not None else descriptor.default_port,
            current.database_name or "",
        )
        return replace(self, url=url)


def reference_key(key: str) -> str:
    """``username`` -> ``referenceUsername``."""

    return REFERENCE_PREFIX + key[:1].upper() + key[1:]


def dereference_key(key: str) -> str:
    """``referenceUsername`` -> ``username``."""

    if key.startswith(REFERENCE_PREFIX):
        key = key[len(REFERENCE_PREFIX) :]
    return key[:1].lower() + key[1:]


__all__ = ["DatabaseConnection", "dereference_key", "reference_key"]
