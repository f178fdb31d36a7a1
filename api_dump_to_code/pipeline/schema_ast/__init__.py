"""
Schema AST module.

Contains the API dump node definitions, tag normalization and the parser.
"""

from __future__ import annotations

from .nodes import (
    NULLABLE_MARKER,
    ROOT_SENTINEL,
    ApiDump,
    ClassDescriptor,
    DocEntry,
    DocParam,
    DocReturn,
    EnumDescriptor,
    EnumItem,
    MemberDescriptor,
    MemberKind,
    ParameterDescriptor,
    SecurityToken,
    ValueTypeRef,
)
from .parser import ApiDumpParser
from .tags import normalize_tags

__all__ = [
    "ApiDump",
    "ApiDumpParser",
    "ClassDescriptor",
    "DocEntry",
    "DocParam",
    "DocReturn",
    "EnumDescriptor",
    "EnumItem",
    "MemberDescriptor",
    "MemberKind",
    "NULLABLE_MARKER",
    "ParameterDescriptor",
    "ROOT_SENTINEL",
    "SecurityToken",
    "ValueTypeRef",
    "normalize_tags",
]
