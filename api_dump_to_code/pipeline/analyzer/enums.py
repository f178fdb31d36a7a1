"""
Enum emitter.

Maps API dump enums to enum declarations. Enums are independent of the
tier logic and are emitted once, in the base namespace.
"""

from __future__ import annotations

from ...utils import make_safe_identifier
from ..config import GeneratorConfig
from ..schema_ast.nodes import DocEntry, EnumDescriptor
from .ir_nodes import DocComment, EnumDecl, EnumItemDecl


class EnumEmitter:
    """Builds enum declarations with documentation."""

    def __init__(self, docs: dict[str, DocEntry], config: GeneratorConfig):
        self.docs = docs
        self.config = config

    def emit_all(self, enums: list[EnumDescriptor]) -> list[EnumDecl]:
        """Enum declarations sorted by name."""
        return [self.emit(e) for e in sorted(enums, key=lambda e: e.name)]

    def emit(self, enum: EnumDescriptor) -> EnumDecl:
        key = f"{self.config.enum_doc_key_prefix}{enum.name}"
        entry = self.docs.get(key)
        summary = entry.documentation if entry is not None and entry.documentation else f"The {enum.name} enum."

        items = []
        for item in enum.items:
            item_entry = self.docs.get(f"{key}.{item.name}")
            item_doc = DocComment(summary=item_entry.documentation) if item_entry is not None and item_entry.documentation else None
            items.append(EnumItemDecl(name=make_safe_identifier(item.name), value=item.value, doc=item_doc))

        return EnumDecl(
            name=make_safe_identifier(enum.name),
            original_name=enum.name,
            items=items,
            doc=DocComment(summary=summary),
        )
