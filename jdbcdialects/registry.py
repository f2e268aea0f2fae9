"""Built-in dialect table and immutable registry snapshots."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from .models import DialectDescriptor, Strategy

LOG = logging.getLogger(__name__)

MAVEN_CENTRAL = "https://repo1.maven.org/maven2"


class DialectNotFoundError(LookupError):
    """Raised when a dialect id is not part of the registry snapshot."""

    def __init__(self, dialect_id: str) -> None:
        super().__init__(f"Unknown dialect '{dialect_id}'")
        self.dialect_id = dialect_id


BUILTIN_DIALECTS: tuple[DialectDescriptor, ...] = (
    DialectDescriptor(
        id="MariaDB",
        driver_class="org.mariadb.jdbc.Driver",
        jdbc_prefix="jdbc:mariadb://",
        default_port=3306,
        separator="/",
        download_url=f"{MAVEN_CENTRAL}/org/mariadb/jdbc/mariadb-java-client/2.5.3/mariadb-java-client-2.5.3.jar",
    ),
    DialectDescriptor(
        id="MySQL",
        driver_class="com.mysql.cj.jdbc.Driver",
        jdbc_prefix="jdbc:mysql://",
        default_port=3306,
        separator="/",
        download_url=f"{MAVEN_CENTRAL}/com/mysql/mysql-connector-j/8.2.0/mysql-connector-j-8.2.0.jar",
    ),
    DialectDescriptor(
        id="MS SQL",
        driver_class="com.microsoft.sqlserver.jdbc.SQLServerDriver",
        jdbc_prefix="jdbc:sqlserver://",
        default_port=1443,
        separator=";",
        strategy=Strategy.KEY_VALUE_EMBEDDED,
        download_url=(
            f"{MAVEN_CENTRAL}/com/microsoft/sqlserver/mssql-jdbc/12.2.0.jre11/mssql-jdbc-12.2.0.jre11.jar"
        ),
    ),
    DialectDescriptor(
        id="PostgreSQL",
        driver_class="org.postgresql.Driver",
        jdbc_prefix="jdbc:postgresql://",
        default_port=5432,
        separator="/",
        download_url=f"{MAVEN_CENTRAL}/org/postgresql/postgresql/42.6.0/postgresql-42.6.0.jar",
    ),
    DialectDescriptor(
        id="Oracle",
        driver_class="oracle.jdbc.driver.OracleDriver",
        jdbc_prefix="jdbc:oracle:thin:@",
        default_port=1521,
        separator=":",
        download_url=f"{MAVEN_CENTRAL}/com/oracle/database/jdbc/ojdbc11/23.2.0.0/ojdbc11-23.2.0.0.jar",
    ),
)


class DialectRegistry:
    """Snapshot of built-in dialects plus any custom dialects merged in.

    Instances are never mutated; :meth:`with_custom` returns a new snapshot.
    """

    __slots__ = ("_builtins", "_customs")

    def __init__(
        self,
        builtins: Iterable[DialectDescriptor] = BUILTIN_DIALECTS,
        customs: Iterable[DialectDescriptor] = (),
    ) -> None:
        self._builtins: tuple[DialectDescriptor, ...] = tuple(builtins)
        self._customs: tuple[DialectDescriptor, ...] = _merge_customs(self._builtins, customs)

    def lookup(self, dialect_id: str) -> DialectDescriptor:
        """Return the descriptor for ``dialect_id`` or raise DialectNotFoundError."""

        descriptor = self.get(dialect_id)
        if descriptor is None:
            raise DialectNotFoundError(dialect_id)
        return descriptor

    def get(self, dialect_id: str) -> DialectDescriptor | None:
        for descriptor in self.all():
            if descriptor.id == dialect_id:
                return descriptor
        return None

    def all(self) -> tuple[DialectDescriptor, ...]:
        """Built-ins in table order followed by customs in load order."""

        return self._builtins + self._customs

    def builtins(self) -> tuple[DialectDescriptor, ...]:
        return self._builtins

    def customs(self) -> tuple[DialectDescriptor, ...]:
        return self._customs

    def ids(self) -> tuple[str, ...]:
        return tuple(descriptor.id for descriptor in self.all())

    def with_custom(self, descriptors: Iterable[DialectDescriptor]) -> DialectRegistry:
        """Return a copy with custom descriptors merged in.

        Built-in ids are reserved. Among customs the last definition of an id wins.
        """

        return DialectRegistry(self._builtins, self._customs + tuple(descriptors))

    def __contains__(self, dialect_id: object) -> bool:
        return any(descriptor.id == dialect_id for descriptor in self.all())

    def __iter__(self) -> Iterator[DialectDescriptor]:
        return iter(self.all())

    def __len__(self) -> int:
        return len(self._builtins) + len(self._customs)

    def __repr__(self) -> str:
        return f"DialectRegistry(ids={self.ids()!r})"


def _merge_customs(
    builtins: tuple[DialectDescriptor, ...],
    customs: Iterable[DialectDescriptor],
) -> tuple[DialectDescriptor, ...]:
    reserved = {descriptor.id for descriptor in builtins}
    merged: dict[str, DialectDescriptor] = {}
    for descriptor in customs:
        if descriptor.id in reserved:
            LOG.warning(
                "Ignoring custom dialect that shadows a built-in",
                extra={"dialect": descriptor.id},
            )
            continue
        if descriptor.id in merged:
            LOG.debug("Replacing custom dialect", extra={"dialect": descriptor.id})
        merged[descriptor.id] = descriptor
    return tuple(merged.values())


_DEFAULT_REGISTRY = DialectRegistry()


def default_registry() -> DialectRegistry:
    """Registry holding only the built-in dialects."""

    return _DEFAULT_REGISTRY


def resolve_registry(registry: DialectRegistry | None) -> DialectRegistry:
    return registry if registry is not None else _DEFAULT_REGISTRY


__all__ = [
    "BUILTIN_DIALECTS",
    "DialectNotFoundError",
    "DialectRegistry",
    "default_registry",
    "resolve_registry",
]
