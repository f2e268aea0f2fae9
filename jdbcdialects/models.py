"""Shared dataclasses describing dialects and parsed connection URLs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class Strategy(str, Enum):
    """How a dialect places the database name inside its URL."""

    SEPARATOR_POSITIONAL = "separator_positional"
    KEY_VALUE_EMBEDDED = "key_value_embedded"


@dataclass(frozen=True, slots=True)
class DialectDescriptor:
    """Immutable description of one database kind."""

    id: str
    driver_class: str
    jdbc_prefix: str
    default_port: int
    separator: str
    strategy: Strategy = Strategy.SEPARATOR_POSITIONAL
    download_url: str = ""

    def __post_init__(self) -> None:
        if len(self.separator) != 1:
            raise ValueError(f"Dialect '{self.id}' separator must be a single character, got {self.separator!r}")
        if self.default_port <= 0:
            raise ValueError(f"Dialect '{self.id}' default port must be positive, got {self.default_port}")

    @property
    def file_name(self) -> str:
        """Name under which the driver jar would be downloaded."""

        return self.download_url.rsplit("/", 1)[-1]


@dataclass(frozen=True, slots=True)
class UrlParts:
    """Structured parts of a connection URL; absent parts are None."""

    server_address: str | None = None
    port: int | None = None
    database_name: str | None = None


class DatabaseNameExtraction(NamedTuple):
    """Where the database name starts in a URL and what it is."""

    index: int
    database_name: str


__all__ = ["DatabaseNameExtraction", "DialectDescriptor", "Strategy", "UrlParts"]
