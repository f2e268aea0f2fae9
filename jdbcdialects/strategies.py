"""Database name extraction/build algorithms shared by all dialects.

Two shapes are supported:

* ``SEPARATOR_POSITIONAL``: the database name is the last segment after the
  dialect separator, e.g. ``host:3306/sales?ssl=true``.
* ``KEY_VALUE_EMBEDDED``: the database name is a ``databaseName=...`` entry in
  a ``;`` separated parameter list, e.g. ``host:1443;databaseName=sales``.
"""

from __future__ import annotations

from .models import DatabaseNameExtraction, DialectDescriptor, Strategy

QUERY_MARKER = "?"
PARAMETER_SEPARATOR = ";"
DATABASE_NAME_PARAMETER = "databaseName"


def extract_database_name(url: str, descriptor: DialectDescriptor) -> DatabaseNameExtraction:
    """Locate the database name in a prefix-less URL."""

    match descriptor.strategy:
        case Strategy.SEPARATOR_POSITIONAL:
            return _extract_by_separator(url, descriptor.separator)
        case Strategy.KEY_VALUE_EMBEDDED:
            return _extract_from_parameters(url)
    raise ValueError(f"Unsupported strategy: {descriptor.strategy!r}")


def build_database_name(descriptor: DialectDescriptor, database_name: str) -> str:
    """Render the database name segment, including its leading separator."""

    match descriptor.strategy:
        case Strategy.SEPARATOR_POSITIONAL:
            return f"{descriptor.separator}{database_name}"
        case Strategy.KEY_VALUE_EMBEDDED:
            return f"{PARAMETER_SEPARATOR}{DATABASE_NAME_PARAMETER}={database_name}"
    raise ValueError(f"Unsupported strategy: {descriptor.strategy!r}")


def extract_parameters(descriptor: DialectDescriptor, url: str) -> str:
    """Return the trailing driver parameters of ``url`` that must survive a rebuild."""

    match descriptor.strategy:
        case Strategy.SEPARATOR_POSITIONAL:
            return _query_parameters(url)
        case Strategy.KEY_VALUE_EMBEDDED:
            return _embedded_parameters(url)
    raise ValueError(f"Unsupported strategy: {descriptor.strategy!r}")


def _extract_by_separator(url: str, separator: str) -> DatabaseNameExtraction:
    # rightmost separator; -1 when absent
    index = url.rfind(separator)
    database_name = url[index + 1 :]
    if QUERY_MARKER in database_name:
        database_name = database_name[: database_name.index(QUERY_MARKER)]
    return DatabaseNameExtraction(index, database_name)


def _query_parameters(url: str) -> str:
    if QUERY_MARKER in url:
        return url[url.index(QUERY_MARKER) :]
    return ""


def _parameter_name(parameter: str) -> str:
    return parameter.split("=", 1)[0]


def _extract_from_parameters(url: str) -> DatabaseNameExtraction:
    index = url.find(PARAMETER_SEPARATOR)
    if index < 0:
        return DatabaseNameExtraction(index, "")
    for parameter in url[index + 1 :].split(PARAMETER_SEPARATOR):
        if _parameter_name(parameter) == DATABASE_NAME_PARAMETER:
            _, _, value = parameter.partition("=")
            return DatabaseNameExtraction(index, value)
    return DatabaseNameExtraction(index, "")


def _embedded_parameters(url: str) -> str:
    if PARAMETER_SEPARATOR not in url:
        return ""
    remainder = url[url.index(PARAMETER_SEPARATOR) + 1 :]
    kept = [
        parameter
        for parameter in remainder.split(PARAMETER_SEPARATOR)
        if _parameter_name(parameter) != DATABASE_NAME_PARAMETER
    ]
    joined = PARAMETER_SEPARATOR.join(kept)
    if joined:
        return PARAMETER_SEPARATOR + joined
    return ""


__all__ = [
    "DATABASE_NAME_PARAMETER",
    "build_database_name",
    "extract_database_name",
    "extract_parameters",
]
