"""
C# AST node definitions.

These nodes represent the structure of C# source files for code generation.
They are used to build a C# AST which is then serialized to source code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class AccessModifier(str, Enum):
    """C# access modifiers."""

    PUBLIC = "public"


@dataclass
class CSharpNode:
    """Base class for all C# AST nodes."""

    pass


@dataclass
class CSharpAttribute(CSharpNode):
    """Represents a C# attribute (e.g., [System.Obsolete("...")])."""

    name: str = ""
    arguments: list[str] = field(default_factory=list)

    def to_string(self) -> str:
        """Convert to attribute string."""
        if self.arguments:
            args_str = ", ".join(self.arguments)
            return f"[{self.name}({args_str})]"
        return f"[{self.name}]"


@dataclass
class CSharpDocComment(CSharpNode):
    """Represents an XML documentation comment."""

    summary: str = ""
    params: list[tuple[str, str]] = field(default_factory=list)
    returns: str | None = None
    remarks: str | None = None


@dataclass
class CSharpParameter(CSharpNode):
    """Represents a method parameter."""

    name: str = ""
    type_name: str = ""


@dataclass
class CSharpProperty(CSharpNode):
    """Represents an interface property with get/set."""

    name: str = ""
    type_name: str = ""
    has_getter: bool = True
    has_setter: bool = True
    attributes: list[CSharpAttribute] = field(default_factory=list)
    doc: CSharpDocComment | None = None


@dataclass
class CSharpMethod(CSharpNode):
    """Represents an interface method signature."""

    name: str = ""
    return_type: str = "void"
    parameters: list[CSharpParameter] = field(default_factory=list)
    attributes: list[CSharpAttribute] = field(default_factory=list)
    doc: CSharpDocComment | None = None


@dataclass
class CSharpInterface(CSharpNode):
    """Represents a partial interface declaration."""

    name: str = ""
    access: AccessModifier = AccessModifier.PUBLIC
    base_types: list[str] = field(default_factory=list)
    attributes: list[CSharpAttribute] = field(default_factory=list)
    doc: CSharpDocComment | None = None
    # Properties and methods, in emission order
    members: list[CSharpProperty | CSharpMethod] = field(default_factory=list)


@dataclass
class CSharpEnumMember(CSharpNode):
    """Represents an enum member."""

    name: str = ""
    value: str | None = None
    doc: CSharpDocComment | None = None


@dataclass
class CSharpEnum(CSharpNode):
    """Represents an enum declaration."""

    name: str = ""
    access: AccessModifier = AccessModifier.PUBLIC
    members: list[CSharpEnumMember] = field(default_factory=list)
    doc: CSharpDocComment | None = None


@dataclass
class UsingDirective(CSharpNode):
    """Represents a using directive."""

    namespace: str = ""


@dataclass
class CSharpFile(CSharpNode):
    """Represents a complete C# source file."""

    header: str = ""  # Rendered auto-generated header and directives
    using_directives: list[UsingDirective] = field(default_factory=list)
    namespace: str | None = None  # File-scoped namespace
    interfaces: list[CSharpInterface] = field(default_factory=list)
    enums: list[CSharpEnum] = field(default_factory=list)
