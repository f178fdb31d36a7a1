"""
API dump parser.

Phase 1 of the pipeline: turn the decoded API dump JSON and the decoded
documentation JSON into read-only nodes. Unexpected shapes degrade to
defaults; the parser never raises on content.
"""

from __future__ import annotations

from typing import Any

from .nodes import (
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


def _as_str(value: Any, default: str = "") -> str:
    return value if isinstance(value, str) else default


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _as_int(value: Any, default: int = 0) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return default


class ApiDumpParser:
    """Parses a decoded API dump and documentation map into nodes."""

    def parse(self, raw: Any) -> ApiDump:
        """
        Parse a decoded API dump.

        Args:
            raw: The decoded API dump ({"Classes": [...], "Enums": [...], "Version": n})

        Returns:
            ApiDump with parsed classes and enums
        """
        if not isinstance(raw, dict):
            return ApiDump()

        classes = [self._parse_class(c) for c in _as_list(raw.get("Classes")) if isinstance(c, dict)]
        enums = [self._parse_enum(e) for e in _as_list(raw.get("Enums")) if isinstance(e, dict)]
        return ApiDump(classes=classes, enums=enums, version=_as_int(raw.get("Version")))

    def parse_docs(self, raw: Any) -> dict[str, DocEntry]:
        """
        Parse a decoded documentation map.

        Args:
            raw: Mapping of documentation key to raw entry

        Returns:
            Mapping of documentation key to DocEntry
        """
        if not isinstance(raw, dict):
            return {}
        return {key: self._parse_doc_entry(entry) for key, entry in raw.items() if isinstance(key, str) and isinstance(entry, dict)}

    def parse_value_type(self, raw: Any) -> ValueTypeRef | None:
        """Parse a ValueType/ReturnType/Type value. A bare string is a Primitive."""
        if isinstance(raw, dict):
            return ValueTypeRef(category=_as_str(raw.get("Category")), name=_as_str(raw.get("Name")))
        if isinstance(raw, str):
            return ValueTypeRef(category="Primitive", name=raw)
        return None

    def _parse_class(self, raw: dict[str, Any]) -> ClassDescriptor:
        return ClassDescriptor(
            name=_as_str(raw.get("Name")),
            superclass=_as_str(raw.get("Superclass"), ROOT_SENTINEL) or ROOT_SENTINEL,
            raw_tags=_as_list(raw.get("Tags")),
            members=[self._parse_member(m) for m in _as_list(raw.get("Members")) if isinstance(m, dict)],
        )

    def _parse_member(self, raw: dict[str, Any]) -> MemberDescriptor:
        read_security, write_security = self._parse_security(raw.get("Security"))
        return MemberDescriptor(
            kind=MemberKind.parse(raw.get("MemberType")),
            name=_as_str(raw.get("Name")),
            category=_as_str(raw.get("Category")),
            value_type=self.parse_value_type(raw.get("ValueType")),
            return_type=self.parse_value_type(raw.get("ReturnType")),
            parameters=[self._parse_parameter(p) for p in _as_list(raw.get("Parameters")) if isinstance(p, dict)],
            read_security=read_security,
            write_security=write_security,
            thread_safety=_as_str(raw.get("ThreadSafety")),
            raw_tags=_as_list(raw.get("Tags")),
        )

    def _parse_security(self, raw: Any) -> tuple[str, str]:
        """Security is either one string for both accessors or {"Read": .., "Write": ..}."""
        open_token = SecurityToken.OPEN.value
        if isinstance(raw, str):
            return raw, raw
        if isinstance(raw, dict):
            return _as_str(raw.get("Read"), open_token), _as_str(raw.get("Write"), open_token)
        return open_token, open_token

    def _parse_parameter(self, raw: dict[str, Any]) -> ParameterDescriptor:
        return ParameterDescriptor(
            name=_as_str(raw.get("Name")),
            type=self.parse_value_type(raw.get("Type")) or ValueTypeRef(),
        )

    def _parse_enum(self, raw: dict[str, Any]) -> EnumDescriptor:
        items = [
            EnumItem(name=_as_str(item.get("Name")), value=_as_int(item.get("Value")))
            for item in _as_list(raw.get("Items"))
            if isinstance(item, dict)
        ]
        return EnumDescriptor(name=_as_str(raw.get("Name")), items=items)

    def _parse_doc_entry(self, raw: dict[str, Any]) -> DocEntry:
        params = [
            DocParam(name=_as_str(p.get("name")), documentation=_as_str(p.get("documentation")))
            for p in _as_list(raw.get("params"))
            if isinstance(p, dict)
        ]

        returns: list[DocReturn] = []
        for item in _as_list(raw.get("returns")):
            # String entries are references like "@roblox/globaltype/DateTime.ToUniversalTime/return/0"
            if isinstance(item, str):
                returns.append(DocReturn(documentation=item))
            elif isinstance(item, dict):
                returns.append(DocReturn(documentation=_as_str(item.get("documentation"))))

        return DocEntry(
            documentation=_as_str(raw.get("documentation")),
            params=params,
            returns=returns,
        )
