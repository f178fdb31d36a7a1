"""
C# AST-based code generation backend.

Generates C# interface and enum declarations from the declaration IR
using custom AST nodes.
"""

from __future__ import annotations

from pathlib import Path

import jinja2

from ..analyzer.ir_nodes import Artifact, Declaration, DocComment, EnumDecl, MemberDecl
from ..config import GeneratorConfig
from .base import AstBackend
from .csharp_ast_nodes import (
    CSharpAttribute,
    CSharpDocComment,
    CSharpEnum,
    CSharpEnumMember,
    CSharpFile,
    CSharpInterface,
    CSharpMethod,
    CSharpParameter,
    CSharpProperty,
    UsingDirective,
)
from .csharp_serializer import CSharpSerializer

TEMPLATES_DIR = Path(__file__).parent.parent.parent.resolve() / "templates"

# CS0108: member hides inherited member (interfaces re-declare inherited names)
DISABLED_WARNINGS = ["CS0108"]


class CSharpAstBackend(AstBackend):
    """C# code generation backend using custom AST."""

    FILE_EXTENSION = "cs"

    OBSOLETE_ATTRIBUTE = "System.Obsolete"

    def __init__(self, config: GeneratorConfig):
        super().__init__(config)
        self.serializer = CSharpSerializer()
        self.jinja_env = jinja2.Environment(lstrip_blocks=True, trim_blocks=True, keep_trailing_newline=True)
        self.prefix = self.jinja_env.from_string((TEMPLATES_DIR / "cs" / "prefix.cs.jinja2").read_text(encoding="utf-8"))

    def generate(self, artifact: Artifact, generation_comment: str = "", api_version: int = 0) -> str:
        """Generate C# code for an artifact using AST."""
        file = CSharpFile()

        file.header = self.prefix.render(
            generation_comment=generation_comment,
            api_version=api_version,
            disabled_warnings=DISABLED_WARNINGS,
        )

        for ns in artifact.usings:
            file.using_directives.append(UsingDirective(namespace=ns))

        if artifact.namespace:
            file.namespace = artifact.namespace

        for enum_decl in artifact.enums:
            file.enums.append(self._generate_enum(enum_decl))

        for declaration in artifact.declarations:
            file.interfaces.append(self._generate_interface(declaration))

        return self.serializer.serialize(file)

    def _generate_interface(self, declaration: Declaration) -> CSharpInterface:
        """Generate an interface AST node from a Declaration."""
        interface = CSharpInterface(name=declaration.name, doc=self._generate_doc(declaration.doc))

        if declaration.base_type:
            interface.base_types.append(self.qualify(declaration.base_type, declaration.base_namespace))

        if declaration.obsolete_message:
            interface.attributes.append(self._obsolete_attribute(declaration.obsolete_message))

        for member in declaration.members:
            interface.members.append(self._generate_member(member))

        return interface

    def _generate_member(self, member: MemberDecl) -> CSharpProperty | CSharpMethod:
        attributes = [self._obsolete_attribute(member.obsolete_message)] if member.obsolete_message else []
        doc = self._generate_doc(member.doc)

        if member.is_method:
            return CSharpMethod(
                name=member.name,
                return_type=member.type_name,
                parameters=[CSharpParameter(name=p.name, type_name=p.type_name) for p in member.parameters],
                attributes=attributes,
                doc=doc,
            )

        return CSharpProperty(
            name=member.name,
            type_name=member.type_name,
            has_getter=member.has_getter,
            has_setter=member.has_setter,
            attributes=attributes,
            doc=doc,
        )

    def _generate_enum(self, enum_decl: EnumDecl) -> CSharpEnum:
        """Generate an enum AST node from an EnumDecl."""
        return CSharpEnum(
            name=enum_decl.name,
            members=[CSharpEnumMember(name=item.name, value=str(item.value), doc=self._generate_doc(item.doc)) for item in enum_decl.items],
            doc=self._generate_doc(enum_decl.doc),
        )

    def _generate_doc(self, doc: DocComment | None) -> CSharpDocComment | None:
        if doc is None:
            return None
        return CSharpDocComment(summary=doc.summary, params=list(doc.params), returns=doc.returns, remarks=doc.remarks)

    def _obsolete_attribute(self, message: str) -> CSharpAttribute:
        escaped = message.replace("\\", "\\\\").replace('"', '\\"')
        return CSharpAttribute(name=self.OBSOLETE_ATTRIBUTE, arguments=[f'"{escaped}"'])

    @staticmethod
    def qualify(type_name: str, namespace: str | None) -> str:
        """Fully qualify a type name with the global alias (Widget -> global::Roblox.Widget)."""
        if not namespace:
            return type_name
        return f"global::{namespace}.{type_name}"
