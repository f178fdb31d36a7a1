"""
Node definitions for the API dump.

These nodes are read-only views of the parsed API dump and documentation
map. They are built once per generation run by the parser and are never
mutated by the generator. Superclasses are referenced by name and resolved
through ApiDump.class_index.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from typing import Any

from .tags import normalize_tags

# Superclass name of the top of the class hierarchy
ROOT_SENTINEL = "<<<ROOT>>>"

# Trailing marker for nullable value types (e.g. "CFrame?")
NULLABLE_MARKER = "?"


class MemberKind(str, Enum):
    """Kind of class member."""

    PROPERTY = "Property"
    FUNCTION = "Function"
    EVENT = "Event"
    CALLBACK = "Callback"

    @classmethod
    def parse(cls, raw: Any) -> MemberKind | None:
        """Parse a raw MemberType, returning None for unknown kinds."""
        try:
            return cls(raw)
        except ValueError:
            return None


class SecurityToken(str, Enum):
    """Known security levels of the API dump."""

    OPEN = "None"
    ELEVATED = "PluginSecurity"
    ENGINE_ONLY = "RobloxSecurity"
    FORBIDDEN = "NotAccessibleSecurity"


@dataclass
class ValueTypeRef:
    """A (category, name) type reference, e.g. ("DataType", "CFrame?")."""

    category: str = ""  # "Primitive", "DataType", "Enum", "Class", "Group"
    name: str = ""

    @property
    def is_nullable(self) -> bool:
        return self.name.endswith(NULLABLE_MARKER)

    @property
    def base_name(self) -> str:
        """Name with the nullability marker stripped."""
        return self.name[: -len(NULLABLE_MARKER)] if self.is_nullable else self.name


@dataclass
class ParameterDescriptor:
    """A function, event or callback parameter."""

    name: str = ""
    type: ValueTypeRef = field(default_factory=ValueTypeRef)


@dataclass
class MemberDescriptor:
    """A Property, Function, Event or Callback of a class."""

    kind: MemberKind | None = None
    name: str = ""
    category: str = ""

    # Property type
    value_type: ValueTypeRef | None = None

    # Function/Callback return type
    return_type: ValueTypeRef | None = None

    parameters: list[ParameterDescriptor] = field(default_factory=list)

    # Raw security strings; "None" means open
    read_security: str = SecurityToken.OPEN.value
    write_security: str = SecurityToken.OPEN.value

    thread_safety: str = ""
    raw_tags: list[Any] = field(default_factory=list)

    @cached_property
    def tags(self) -> frozenset[str]:
        return normalize_tags(self.raw_tags)

    @property
    def is_read_only(self) -> bool:
        return "ReadOnly" in self.tags

    @property
    def is_write_only(self) -> bool:
        return "WriteOnly" in self.tags

    @property
    def is_deprecated(self) -> bool:
        return "Deprecated" in self.tags

    @property
    def is_not_scriptable(self) -> bool:
        return "NotScriptable" in self.tags

    @property
    def is_hidden(self) -> bool:
        return "Hidden" in self.tags

    @property
    def can_yield(self) -> bool:
        return "CanYield" in self.tags or "Yields" in self.tags

    def referenced_types(self) -> list[ValueTypeRef]:
        """Value, return and parameter types, in that order."""
        types = [t for t in (self.value_type, self.return_type) if t is not None]
        types.extend(p.type for p in self.parameters)
        return types


@dataclass
class ClassDescriptor:
    """A class of the scripting API."""

    name: str = ""
    superclass: str = ROOT_SENTINEL
    raw_tags: list[Any] = field(default_factory=list)
    members: list[MemberDescriptor] = field(default_factory=list)

    @cached_property
    def tags(self) -> frozenset[str]:
        return normalize_tags(self.raw_tags)

    @property
    def is_deprecated(self) -> bool:
        return "Deprecated" in self.tags

    @property
    def has_root_superclass(self) -> bool:
        return not self.superclass or self.superclass == ROOT_SENTINEL


@dataclass
class EnumItem:
    """An item of an enum."""

    name: str = ""
    value: int = 0


@dataclass
class EnumDescriptor:
    """An enum of the scripting API."""

    name: str = ""
    items: list[EnumItem] = field(default_factory=list)


@dataclass
class DocParam:
    """Documentation for one parameter."""

    name: str = ""
    documentation: str = ""


@dataclass
class DocReturn:
    """Documentation for one return value."""

    documentation: str = ""


@dataclass
class DocEntry:
    """A documentation entry, keyed by e.g. "@roblox/globaltype/Part.Size"."""

    documentation: str = ""
    params: list[DocParam] = field(default_factory=list)
    returns: list[DocReturn] = field(default_factory=list)


@dataclass
class ApiDump:
    """Root of the parsed API dump."""

    classes: list[ClassDescriptor] = field(default_factory=list)
    enums: list[EnumDescriptor] = field(default_factory=list)
    version: int = 0

    @cached_property
    def class_index(self) -> dict[str, ClassDescriptor]:
        """Classes by name. Later duplicates never replace the first entry."""
        index: dict[str, ClassDescriptor] = {}
        for cls in self.classes:
            index.setdefault(cls.name, cls)
        return index

    def get_class(self, name: str | None) -> ClassDescriptor | None:
        if not name:
            return None
        return self.class_index.get(name)

    def is_class(self, name: str | None) -> bool:
        return bool(name) and name != ROOT_SENTINEL and name in self.class_index
