"""Command line front end for inspecting and rewriting JDBC URLs."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

from .classifier import classify
from .codec import build_url, parse_url
from .config import DialectConfig, load_config
from .custom import CustomDialectRecord, write_custom_dialect
from .models import DialectDescriptor, UrlParts
from .registry import DialectNotFoundError, DialectRegistry

LOG = logging.getLogger(__name__)


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="jdbcdialects", description=__doc__)
    parser.add_argument("--custom-dir", type=Path, help="Directory holding custom dialect JSON files")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="List known dialects")

    parse_cmd = commands.add_parser("parse", help="Split a URL into its parts")
    parse_cmd.add_argument("dialect")
    parse_cmd.add_argument("url")

    build_cmd = commands.add_parser("build", help="Build a URL from parts")
    build_cmd.add_argument("dialect")
    build_cmd.add_argument("--host", help="Server address")
    build_cmd.add_argument("--port", type=int, help="Server port")
    build_cmd.add_argument("--database", help="Database name")
    build_cmd.add_argument("--old-url", help="Existing URL whose parameters are kept")

    classify_cmd = commands.add_parser("classify", help="Find the built-in dialect of a driver class")
    classify_cmd.add_argument("driver_class")

    add_cmd = commands.add_parser("add-custom", help="Store a custom dialect definition")
    add_cmd.add_argument("name")
    add_cmd.add_argument("--driver-class", required=True)
    add_cmd.add_argument("--jdbc-prefix", required=True)
    add_cmd.add_argument("--port", type=int, required=True)
    add_cmd.add_argument("--separator", required=True)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    config = load_config()
    if args.custom_dir is not None:
        config = config.with_custom_dialects_dir(args.custom_dir)
    try:
        result = _dispatch(args, config)
    except DialectNotFoundError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    print(json.dumps(result, indent=2))
    return 0


def _dispatch(args: argparse.Namespace, config: DialectConfig) -> object:
    if args.command == "add-custom":
        return _add_custom(args, config)
    registry = config.registry()
    if args.command == "list":
        return [_describe(descriptor, registry) for descriptor in registry]
    if args.command == "parse":
        return asdict(parse_url(registry.lookup(args.dialect), args.url))
    if args.command == "build":
        return {"url": _build(args, registry)}
    if args.command == "classify":
        return {"dialect": classify(args.driver_class, registry)}
    raise ValueError(f"Unknown command: {args.command}")


def _describe(descriptor: DialectDescriptor, registry: DialectRegistry) -> dict[str, object]:
    return {
        "id": descriptor.id,
        "driver_class": descriptor.driver_class,
        "jdbc_prefix": descriptor.jdbc_prefix,
        "default_port": descriptor.default_port,
        "separator": descriptor.separator,
        "strategy": descriptor.strategy.value,
        "custom": descriptor in registry.customs(),
    }


def _build(args: argparse.Namespace, registry: DialectRegistry) -> str:
    descriptor = registry.lookup(args.dialect)
    current = parse_url(descriptor, args.old_url) if args.old_url else UrlParts()
    parts = UrlParts(server_address=args.host, port=args.port, database_name=args.database)
    return build_url(
        descriptor,
        args.old_url,
        parts,
        current.server_address or "localhost",
        current.port if current.port is not None else descriptor.default_port,
        current.database_name or "",
    )


def _add_custom(args: argparse.Namespace, config: DialectConfig) -> dict[str, str]:
    if config.custom_dialects_dir is None:
        raise ValueError("No custom dialect directory configured; pass --custom-dir")
    record = CustomDialectRecord(
        name=args.name,
        driverClass=args.driver_class,
        defaultPort=args.port,
        jdbcName=args.jdbc_prefix,
        separator=args.separator,
    )
    path = write_custom_dialect(config.custom_dialects_dir, record)
    LOG.info("Stored custom dialect", extra={"dialect": record.name, "path": str(path)})
    return {"dialect": record.name, "path": str(path)}


__all__ = ["main", "parse_args"]
