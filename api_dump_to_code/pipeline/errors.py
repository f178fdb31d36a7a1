"""
Error types.

The generator itself never raises on schema content; these errors cover
the I/O edges around it.
"""

from __future__ import annotations


class ApiDumpToCodeError(Exception):
    """Base error for api_dump_to_code."""


class SchemaLoadError(ApiDumpToCodeError):
    """Raised when an input file cannot be read or decoded."""


class OutputValidationError(ApiDumpToCodeError):
    """Raised when generated code fails validation or cannot be written."""
