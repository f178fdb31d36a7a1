"""
IR (Intermediate Representation) node definitions.

These nodes represent the generated declarations, ready for a
language-specific backend. All types are mapped and all identifiers
are already safe.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ..schema_ast.nodes import MemberKind
from .security import Tier


class DeclarationShape(Enum):
    """Shape of a generated class declaration."""

    FULL = "full"  # All tier-visible members of the class
    STUB = "stub"  # Empty body, keeps an inheritance chain connected
    EXTENSION = "extension"  # Elevated-only members atop the base declaration
    PLUGIN_ONLY = "plugin_only"  # Class visible only at the elevated tier


@dataclass
class DocComment:
    """Synthesized documentation of a declaration or member."""

    summary: str = ""
    params: list[tuple[str, str]] = field(default_factory=list)  # [(name, documentation), ...]
    returns: str | None = None
    remarks: str | None = None


@dataclass
class ParameterDecl:
    """A method parameter."""

    name: str = ""
    type_name: str = ""


@dataclass
class MemberDecl:
    """A member of a declaration.

    Properties, events and callbacks carry accessors; functions carry a
    return type and parameters.
    """

    kind: MemberKind = MemberKind.PROPERTY
    name: str = ""
    original_name: str = ""
    type_name: str = ""  # Property/signal/delegate type, or method return type
    has_getter: bool = True
    has_setter: bool = False
    parameters: list[ParameterDecl] = field(default_factory=list)
    doc: DocComment | None = None
    obsolete_message: str | None = None

    @property
    def is_method(self) -> bool:
        return self.kind is MemberKind.FUNCTION


@dataclass
class Declaration:
    """A generated interface declaration."""

    name: str = ""
    original_name: str = ""  # Class name in the API dump
    shape: DeclarationShape = DeclarationShape.FULL
    base_type: str | None = None
    base_namespace: str | None = None  # Set when base_type must be qualified
    members: list[MemberDecl] = field(default_factory=list)
    doc: DocComment | None = None
    obsolete_message: str | None = None


@dataclass
class EnumItemDecl:
    """An enum item."""

    name: str = ""
    value: int = 0
    doc: DocComment | None = None


@dataclass
class EnumDecl:
    """A generated enum declaration."""

    name: str = ""
    original_name: str = ""
    items: list[EnumItemDecl] = field(default_factory=list)
    doc: DocComment | None = None


@dataclass
class Artifact:
    """All declarations of one output file."""

    name: str = ""  # Output file stem, e.g. "Classes"
    namespace: str = ""
    tier: Tier | None = None
    usings: list[str] = field(default_factory=list)
    declarations: list[Declaration] = field(default_factory=list)
    enums: list[EnumDecl] = field(default_factory=list)

    def get(self, name: str) -> Declaration | None:
        """Find a declaration by name."""
        return next((d for d in self.declarations if d.name == name), None)

    @property
    def names(self) -> list[str]:
        return [d.name for d in self.declarations] + [e.name for e in self.enums]


@dataclass
class GenerationResult:
    """Output of one generation run."""

    base: Artifact = field(default_factory=Artifact)
    elevated: Artifact | None = None
    enums: Artifact | None = None
    version: int = 0

    @property
    def artifacts(self) -> list[Artifact]:
        return [a for a in (self.base, self.elevated, self.enums) if a is not None]
