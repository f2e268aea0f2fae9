"""Parse and rebuild vendor JDBC connection URLs."""

from __future__ import annotations

__version__ = "0.1.0"

from .classifier import NO_PRE_CONFIGURED_DIALECT, classify
from .codec import build, build_url, parse, parse_url
from .connection import DatabaseConnection
from .custom import CustomDialectError, CustomDialectRecord, custom_descriptor, load_custom_dialects
from .models import DatabaseNameExtraction, DialectDescriptor, Strategy, UrlParts
from .registry import BUILTIN_DIALECTS, DialectNotFoundError, DialectRegistry, default_registry

__all__ = [
    "BUILTIN_DIALECTS",
    "CustomDialectError",
    "CustomDialectRecord",
    "DatabaseConnection",
    "DatabaseNameExtraction",
    "DialectDescriptor",
    "DialectNotFoundError",
    "DialectRegistry",
    "NO_PRE_CONFIGURED_DIALECT",
    "Strategy",
    "UrlParts",
    "__version__",
    "build",
    "build_url",
    "classify",
    "custom_descriptor",
    "default_registry",
    "load_custom_dialects",
    "parse",
    "parse_url",
]
