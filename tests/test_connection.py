"""Tests for saved connection records."""

from __future__ import annotations

import pytest

from jdbcdialects.classifier import NO_PRE_CONFIGURED_DIALECT
from jdbcdialects.connection import DatabaseConnection, dereference_key, reference_key
from jdbcdialects.models import UrlParts
from jdbcdialects.registry import DialectNotFoundError


def test_from_saved_classifies_builtin_driver() -> None:
    connection = DatabaseConnection.from_saved(
        "sa", "secret", "jdbc:mariadb://localhost:3306/data", "org.mariadb.jdbc.Driver"
    )

    assert connection.database_type == "MariaDB"
    assert connection.driver == ""
    assert connection.driver_class() == "org.mariadb.jdbc.Driver"


def test_from_saved_keeps_unknown_driver() -> None:
    connection = DatabaseConnection.from_saved("sa", "", "jdbc:h2:tcp://h:9092/db", "org.h2.Driver")

    assert connection.database_type == NO_PRE_CONFIGURED_DIALECT
    assert connection.driver == "org.h2.Driver"
    assert connection.driver_class() == "org.h2.Driver"
    assert connection.url_parts() == UrlParts()


def test_has_data() -> None:
    assert not DatabaseConnection().has_data()
    assert DatabaseConnection(database_type="MySQL").has_data()
    assert DatabaseConnection(username="root").has_data()


def test_url_parts_uses_dialect() -> None:
    connection = DatabaseConnection.from_saved(
        "", "", "jdbc:sqlserver://sql01:1443;databaseName=sales;encrypt=true", "com.microsoft.sqlserver.jdbc.SQLServerDriver"
    )

    assert connection.url_parts() == UrlParts(server_address="sql01", port=1443, database_name="sales")


def test_with_url_parts_rebuilds_url() -> None:
    connection = DatabaseConnection.from_saved(
        "", "", "jdbc:postgresql://a:5432/old?ssl=true", "org.postgresql.Driver"
    )

    updated = connection.with_url_parts(UrlParts(database_name="new"))

    assert updated.url == "jdbc:postgresql://a:5432/new?ssl=true"
    assert connection.url == "jdbc:postgresql://a:5432/old?ssl=true"


def test_with_url_parts_from_empty_url() -> None:
    connection = DatabaseConnection(database_type="Oracle")

    updated = connection.with_url_parts(UrlParts(server_address="ora", database_name="orcl"))

    assert updated.url == "jdbc:oracle:thin:@ora:1521:orcl"


def test_with_url_parts_requires_builtin_dialect() -> None:
    with pytest.raises(DialectNotFoundError):
        DatabaseConnection(driver="org.h2.Driver").with_url_parts(UrlParts(database_name="x"))


def test_reference_keys() -> None:
    assert reference_key("username") == "referenceUsername"
    assert dereference_key("referenceUsername") == "username"
    assert dereference_key(reference_key("url")) == "url"
