"""Loading user-defined dialects from a directory of JSON records."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .models import DialectDescriptor, Strategy

LOG = logging.getLogger(__name__)

RECORD_SUFFIX = ".json"


class CustomDialectError(ValueError):
    """Raised when a custom dialect file cannot be read or validated."""


class CustomDialectRecord(BaseModel):
    """On-disk shape of one custom dialect (one file per dialect)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = Field(min_length=1)
    driverClass: str = Field(min_length=1)
    defaultPort: int = Field(gt=0)
    jdbcName: str = Field(min_length=1)
    separator: str = Field(min_length=1, max_length=1)

    @field_validator("name")
    @classmethod
    def _name_is_file_name(cls, value: str) -> str:
        if "/" in value or "\\" in value or value in {".", ".."}:
            raise ValueError(f"Custom dialect name {value!r} must be usable as a file name")
        return value

    def to_descriptor(self) -> DialectDescriptor:
        return custom_descriptor(
            self.driverClass,
            self.jdbcName,
            self.defaultPort,
            self.separator,
            name=self.name,
        )


def custom_descriptor(
    driver_class: str,
    jdbc_prefix: str,
    default_port: int,
    separator: str,
    *,
    name: str | None = None,
) -> DialectDescriptor:
    """Build a custom descriptor; customs always use the positional strategy."""

    return DialectDescriptor(
        id=name or driver_class,
        driver_class=driver_class,
        jdbc_prefix=jdbc_prefix,
        default_port=default_port,
        separator=separator,
        strategy=Strategy.SEPARATOR_POSITIONAL,
    )


def read_custom_dialect(path: Path) -> CustomDialectRecord:
    """Read and validate a single custom dialect file."""

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CustomDialectError(f"Failed to read custom dialect '{path}': {exc}") from exc
    try:
        return CustomDialectRecord.model_validate_json(raw)
    except ValidationError as exc:
        raise CustomDialectError(f"Invalid custom dialect '{path}': {exc}") from exc


def load_custom_dialects(directory: Path | None) -> tuple[DialectDescriptor, ...]:
    """Load every valid ``*.json`` dialect in ``directory`` sorted by file name.

    Unreadable or invalid files are skipped with a warning.
    """

    if directory is None or not directory.is_dir():
        return ()
    descriptors: list[DialectDescriptor] = []
    for path in sorted(directory.glob(f"*{RECORD_SUFFIX}")):
        if not path.is_file():
            continue
        try:
            record = read_custom_dialect(path)
        except CustomDialectError as exc:
            LOG.warning("Skipping custom dialect", extra={"path": str(path), "error": str(exc)})
            continue
        descriptors.append(record.to_descriptor())
    LOG.debug("Loaded custom dialects", extra={"directory": str(directory), "count": len(descriptors)})
    return tuple(descriptors)


def write_custom_dialect(directory: Path, record: CustomDialectRecord) -> Path:
    """Persist ``record`` as ``<name>.json`` inside ``directory``."""

    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{record.name}{RECORD_SUFFIX}"
    if path.resolve().parent != directory.resolve():
        raise CustomDialectError(f"Custom dialect name {record.name!r} escapes {directory}")
    path.write_text(json.dumps(record.model_dump(), indent=2) + "\n", encoding="utf-8")
    return path


__all__ = [
    "CustomDialectError",
    "CustomDialectRecord",
    "custom_descriptor",
    "load_custom_dialects",
    "read_custom_dialect",
    "write_custom_dialect",
]
