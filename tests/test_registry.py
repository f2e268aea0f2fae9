"""Tests for the dialect registry snapshots."""

from __future__ import annotations

import logging

import pytest

from jdbcdialects.custom import custom_descriptor
from jdbcdialects.models import DialectDescriptor, Strategy
from jdbcdialects.registry import BUILTIN_DIALECTS, DialectNotFoundError, DialectRegistry, default_registry


@pytest.mark.parametrize(
    ("dialect_id", "prefix", "port", "separator", "strategy"),
    [
        ("MariaDB", "jdbc:mariadb://", 3306, "/", Strategy.SEPARATOR_POSITIONAL),
        ("MySQL", "jdbc:mysql://", 3306, "/", Strategy.SEPARATOR_POSITIONAL),
        ("MS SQL", "jdbc:sqlserver://", 1443, ";", Strategy.KEY_VALUE_EMBEDDED),
        ("PostgreSQL", "jdbc:postgresql://", 5432, "/", Strategy.SEPARATOR_POSITIONAL),
        ("Oracle", "jdbc:oracle:thin:@", 1521, ":", Strategy.SEPARATOR_POSITIONAL),
    ],
)
def test_builtin_table(dialect_id: str, prefix: str, port: int, separator: str, strategy: Strategy) -> None:
    descriptor = default_registry().lookup(dialect_id)

    assert descriptor.jdbc_prefix == prefix
    assert descriptor.default_port == port
    assert descriptor.separator == separator
    assert descriptor.strategy is strategy
    assert descriptor.download_url.startswith("https://repo1.maven.org/maven2/")


def test_all_keeps_table_order() -> None:
    assert default_registry().ids() == ("MariaDB", "MySQL", "MS SQL", "PostgreSQL", "Oracle")


def test_lookup_unknown_raises() -> None:
    registry = DialectRegistry()

    with pytest.raises(DialectNotFoundError):
        registry.lookup("DB2")
    assert registry.get("DB2") is None
    assert "DB2" not in registry


def test_with_custom_returns_new_snapshot() -> None:
    base = DialectRegistry()
    h2 = custom_descriptor("org.h2.Driver", "jdbc:h2:tcp://", 9092, "/", name="H2")

    merged = base.with_custom([h2])

    assert "H2" in merged
    assert "H2" not in base
    assert len(base) == len(BUILTIN_DIALECTS)
    assert len(merged) == len(BUILTIN_DIALECTS) + 1
    assert merged.all()[-1] is h2
    assert merged.customs() == (h2,)
    assert merged.builtins() == BUILTIN_DIALECTS


def test_custom_cannot_shadow_builtin(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="jdbcdialects.registry")
    fake = custom_descriptor("com.example.Driver", "jdbc:example://", 1, "/", name="MySQL")

    merged = DialectRegistry().with_custom([fake])

    assert merged.lookup("MySQL").driver_class == "com.mysql.cj.jdbc.Driver"
    assert merged.customs() == ()
    assert "shadows a built-in" in caplog.text


def test_last_custom_definition_wins() -> None:
    first = custom_descriptor("org.h2.Driver", "jdbc:h2:tcp://", 9092, "/", name="H2")
    second = custom_descriptor("org.h2.Driver", "jdbc:h2:ssl://", 9093, "/", name="H2")

    merged = DialectRegistry().with_custom([first]).with_custom([second])

    assert merged.customs() == (second,)
    assert merged.lookup("H2").default_port == 9093


def test_descriptor_file_name() -> None:
    assert default_registry().lookup("PostgreSQL").file_name == "postgresql-42.6.0.jar"
    assert custom_descriptor("a.B", "jdbc:b://", 1, "/").file_name == ""


@pytest.mark.parametrize(("separator", "port"), [("", 1), ("//", 1), ("/", 0), ("/", -5)])
def test_descriptor_rejects_invalid_shape(separator: str, port: int) -> None:
    with pytest.raises(ValueError):
        DialectDescriptor(
            id="Broken",
            driver_class="x.Y",
            jdbc_prefix="jdbc:x://",
            default_port=port,
            separator=separator,
        )


def test_constructor_applies_custom_merge_rules(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="jdbcdialects.registry")
    shadow = custom_descriptor("com.example.Driver", "jdbc:example://", 1, "/", name="MariaDB")
    first = custom_descriptor("org.h2.Driver", "jdbc:h2:tcp://", 9092, "/", name="H2")
    second = custom_descriptor("org.h2.Driver", "jdbc:h2:ssl://", 9093, "/", name="H2")

    registry = DialectRegistry(customs=[shadow, first, second])

    assert registry.ids() == ("MariaDB", "MySQL", "MS SQL", "PostgreSQL", "Oracle", "H2")
    assert len(registry) == len(set(registry.ids()))
    assert registry.lookup("MariaDB").driver_class == "org.mariadb.jdbc.Driver"
    assert registry.lookup("H2") is second
    assert "shadows a built-in" in caplog.text
