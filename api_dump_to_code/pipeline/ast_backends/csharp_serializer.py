"""
C# AST Serializer.

Converts C# AST nodes to properly-formatted C# source code.
Follows C# style guidelines:
- Braces on new lines (Allman style)
- 4-space indentation
- Blank line between members
- XML doc comments and attributes on separate lines above declarations
"""

from __future__ import annotations

from ...utils import escape_xml_doc
from .csharp_ast_nodes import (
    CSharpDocComment,
    CSharpEnum,
    CSharpFile,
    CSharpInterface,
    CSharpMethod,
    CSharpProperty,
    UsingDirective,
)


class CSharpSerializer:
    """Serializes C# AST nodes to source code."""

    INDENT = "    "  # 4 spaces

    def serialize(self, file: CSharpFile) -> str:
        """Serialize a complete C# file to source code."""
        lines: list[str] = []

        if file.header:
            lines.extend(file.header.rstrip("\n").split("\n"))
            lines.append("")

        # Using directives
        for using in file.using_directives:
            lines.append(self._serialize_using(using))

        if file.using_directives:
            lines.append("")

        # File-scoped namespace
        if file.namespace:
            lines.append(f"namespace {file.namespace};")
            lines.append("")

        for enum in file.enums:
            lines.extend(self._serialize_enum(enum))

        for interface in file.interfaces:
            lines.extend(self._serialize_interface(interface))

        # Drop trailing blank lines, end with a single newline
        while lines and not lines[-1]:
            lines.pop()
        return "\n".join(lines) + "\n"

    def _serialize_using(self, using: UsingDirective) -> str:
        """Serialize a using directive."""
        return f"using {using.namespace};"

    def _serialize_doc(self, doc: CSharpDocComment | None, indent: int) -> list[str]:
        """Serialize an XML doc comment."""
        if doc is None:
            return []
        prefix = self.INDENT * indent
        lines = self._serialize_doc_element(prefix, "<summary>", "</summary>", doc.summary)
        for name, text in doc.params:
            lines.extend(self._serialize_doc_element(prefix, f'<param name="{escape_xml_doc(name)}">', "</param>", text))
        if doc.returns:
            lines.extend(self._serialize_doc_element(prefix, "<returns>", "</returns>", doc.returns))
        if doc.remarks:
            lines.extend(self._serialize_doc_element(prefix, "<remarks>", "</remarks>", doc.remarks))
        return lines

    def _serialize_doc_element(self, prefix: str, open_tag: str, close_tag: str, text: str | None) -> list[str]:
        """Serialize one doc element; every line of multi-line text keeps the /// marker."""
        text_lines = escape_xml_doc(text).replace("\r\n", "\n").replace("\r", "\n").split("\n")
        text_lines[0] = open_tag + text_lines[0]
        text_lines[-1] = text_lines[-1] + close_tag
        return [f"{prefix}/// {line}".rstrip() for line in text_lines]

    def _serialize_interface(self, interface: CSharpInterface, indent: int = 0) -> list[str]:
        """Serialize a partial interface declaration."""
        lines: list[str] = []
        prefix = self.INDENT * indent

        lines.extend(self._serialize_doc(interface.doc, indent))

        # Attributes
        for attr in interface.attributes:
            lines.append(f"{prefix}{attr.to_string()}")

        declaration = f"{prefix}{interface.access.value} partial interface {interface.name}"
        if interface.base_types:
            declaration += f" : {', '.join(interface.base_types)}"

        lines.append(declaration)
        lines.append(f"{prefix}{{")

        for i, member in enumerate(interface.members):
            if i > 0:
                lines.append("")
            if isinstance(member, CSharpMethod):
                lines.extend(self._serialize_method(member, indent + 1))
            else:
                lines.extend(self._serialize_property(member, indent + 1))

        lines.append(f"{prefix}}}")
        lines.append("")

        return lines

    def _serialize_property(self, prop: CSharpProperty, indent: int) -> list[str]:
        """Serialize a property declaration."""
        lines: list[str] = []
        prefix = self.INDENT * indent

        lines.extend(self._serialize_doc(prop.doc, indent))

        # Attributes
        for attr in prop.attributes:
            lines.append(f"{prefix}{attr.to_string()}")

        accessors = []
        if prop.has_getter:
            accessors.append("get;")
        if prop.has_setter:
            accessors.append("set;")
        accessor_str = " ".join(accessors)

        lines.append(f"{prefix}{prop.type_name} {prop.name} {{ {accessor_str} }}")

        return lines

    def _serialize_method(self, method: CSharpMethod, indent: int) -> list[str]:
        """Serialize a method signature."""
        lines: list[str] = []
        prefix = self.INDENT * indent

        lines.extend(self._serialize_doc(method.doc, indent))

        for attr in method.attributes:
            lines.append(f"{prefix}{attr.to_string()}")

        # Parameter list
        params = ", ".join(f"{p.type_name} {p.name}" for p in method.parameters)

        lines.append(f"{prefix}{method.return_type} {method.name}({params});")

        return lines

    def _serialize_enum(self, enum: CSharpEnum, indent: int = 0) -> list[str]:
        """Serialize an enum with explicit values."""
        lines: list[str] = []
        prefix = self.INDENT * indent

        lines.extend(self._serialize_doc(enum.doc, indent))

        lines.append(f"{prefix}{enum.access.value} enum {enum.name}")
        lines.append(f"{prefix}{{")

        # Members
        for i, member in enumerate(enum.members):
            comma = "," if i < len(enum.members) - 1 else ""
            lines.extend(self._serialize_doc(member.doc, indent + 1))
            if member.value is not None:
                lines.append(f"{prefix}{self.INDENT}{member.name} = {member.value}{comma}")
            else:
                lines.append(f"{prefix}{self.INDENT}{member.name}{comma}")

        lines.append(f"{prefix}}}")
        lines.append("")

        return lines
