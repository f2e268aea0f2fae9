"""Parse JDBC URLs into parts and rebuild them from edited parts."""

from __future__ import annotations

import logging

from .models import DialectDescriptor, UrlParts
from .registry import DialectRegistry, resolve_registry
from .strategies import build_database_name, extract_database_name, extract_parameters

LOG = logging.getLogger(__name__)


def strip_prefix(descriptor: DialectDescriptor, url: str) -> str:
    """Remove the dialect's JDBC prefix from the start of ``url`` if present."""

    if url.startswith(descriptor.jdbc_prefix):
        return url[len(descriptor.jdbc_prefix) :]
    return url


def parse_url(descriptor: DialectDescriptor, url: str) -> UrlParts:
    """Split ``url`` into server address, port and database name.

    Malformed input never raises: when the address segment does not hold exactly
    ``host:port`` (numeric port), only the dialect's default port is returned.
    """

    remainder = strip_prefix(descriptor, url)
    index, database_name = extract_database_name(remainder, descriptor)
    if index >= 0:
        segments = remainder[:index].split(":")
        if len(segments) == 2 and all(segments):
            server_address, port = segments
            if port.isascii() and port.isdecimal():
                return UrlParts(server_address=server_address, port=int(port), database_name=database_name)
    LOG.debug(
        "Falling back to default port for malformed url",
        extra={"dialect": descriptor.id, "url": url},
    )
    return UrlParts(port=descriptor.default_port)


def build_url(
    descriptor: DialectDescriptor,
    old_url: str | None,
    new_parts: UrlParts,
    address_fallback: str,
    port_fallback: int,
    database_name_fallback: str,
) -> str:
    """Assemble a URL from ``new_parts``, keeping the parameters of ``old_url``.

    Absent parts are replaced by the matching fallback; no content validation is done.
    """

    parameters = extract_parameters(descriptor, old_url) if old_url else ""
    database_name = new_parts.database_name if new_parts.database_name is not None else database_name_fallback
    server_address = new_parts.server_address if new_parts.server_address is not None else address_fallback
    port = new_parts.port if new_parts.port is not None else port_fallback
    database_segment = build_database_name(descriptor, database_name)
    return f"{descriptor.jdbc_prefix}{server_address}:{port}{database_segment}{parameters}"


def parse(dialect_id: str, url: str, registry: DialectRegistry | None = None) -> UrlParts:
    """Parse ``url`` using the dialect registered under ``dialect_id``."""

    descriptor = resolve_registry(registry).lookup(dialect_id)
    return parse_url(descriptor, url)


def build(
    dialect_id: str,
    old_url: str | None,
    parts: UrlParts,
    address_fallback: str,
    port_fallback: int,
    database_name_fallback: str,
    registry: DialectRegistry | None = None,
) -> str:
    """Build a URL for the dialect registered under ``dialect_id``."""

    descriptor = resolve_registry(registry).lookup(dialect_id)
    return build_url(descriptor, old_url, parts, address_fallback, port_fallback, database_name_fallback)


__all__ = ["build", "build_url", "parse", "parse_url", "strip_prefix"]
