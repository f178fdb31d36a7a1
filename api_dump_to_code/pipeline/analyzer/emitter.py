"""
Declaration emitter.

Builds the declaration IR for one class at one tier: full, stub,
elevated extension and plugin-only declarations, with synthesized
documentation and deprecation markers.
"""

from __future__ import annotations

from collections.abc import Callable

from ...utils import make_safe_identifier
from ..config import GeneratorConfig
from ..schema_ast.nodes import ApiDump, ClassDescriptor, DocEntry, MemberDescriptor, MemberKind
from .ir_nodes import Declaration, DeclarationShape, DocComment, MemberDecl, ParameterDecl
from .security import Tier, member_accessors, visible_members
from .type_mapper import TypeMapper

THREAD_SAFETY_REMARKS = {
    "Safe": "Thread-safe for read and write.",
    "ReadSafe": "Thread-safe for reading only.",
    "Unsafe": "Main thread only.",
}

YIELD_REMARK = "This method can yield."

FALLBACK_SUMMARIES = {
    MemberKind.PROPERTY: "Gets or sets the {name} property.",
    MemberKind.FUNCTION: "{name} method.",
    MemberKind.EVENT: "The {name} event.",
    MemberKind.CALLBACK: "The {name} callback.",
}

OBSOLETE_MESSAGES = {
    MemberKind.PROPERTY: "This property is deprecated.",
    MemberKind.FUNCTION: "This method is deprecated.",
    MemberKind.EVENT: "This event is deprecated.",
    MemberKind.CALLBACK: "This callback is deprecated.",
}

CLASS_OBSOLETE_MESSAGE = "This class is deprecated."


class DeclarationEmitter:
    """Builds declarations for the classes of an API dump."""

    def __init__(self, dump: ApiDump, docs: dict[str, DocEntry], config: GeneratorConfig, type_mapper: TypeMapper | None = None):
        """
        Initialize the emitter.

        Args:
            dump: The parsed API dump
            docs: Documentation entries by key
            config: Generator configuration
            type_mapper: Type mapper (a default one is created if None)
        """
        self.dump = dump
        self.docs = docs
        self.config = config
        self.type_mapper = type_mapper or TypeMapper()
        self._member_emitters: dict[MemberKind, Callable[[str, MemberDescriptor, Tier], MemberDecl | None]] = {
            MemberKind.PROPERTY: self._emit_property,
            MemberKind.FUNCTION: self._emit_function,
            MemberKind.EVENT: self._emit_event,
            MemberKind.CALLBACK: self._emit_callback,
        }

    # Declarations

    def emit_full(self, cls: ClassDescriptor) -> Declaration:
        """Full base-tier declaration with all base-visible members."""
        return Declaration(
            name=make_safe_identifier(cls.name),
            original_name=cls.name,
            shape=DeclarationShape.FULL,
            base_type=self.base_type(cls),
            members=self.emit_members(cls, Tier.BASE),
            doc=self.class_doc(cls),
            obsolete_message=CLASS_OBSOLETE_MESSAGE if cls.is_deprecated else None,
        )

    def emit_stub(self, cls: ClassDescriptor) -> Declaration:
        """Empty declaration that only keeps the inheritance chain connected."""
        return Declaration(
            name=make_safe_identifier(cls.name),
            original_name=cls.name,
            shape=DeclarationShape.STUB,
            base_type=self.base_type(cls),
            doc=DocComment(summary=f"Base type for {cls.name} hierarchy."),
        )

    def emit_extension(self, cls: ClassDescriptor) -> Declaration | None:
        """Elevated extension of the base declaration, or None if no member survives."""
        members = self.emit_members(cls, Tier.ELEVATED)
        if not members:
            return None

        safe_name = make_safe_identifier(cls.name)
        return Declaration(
            name=safe_name + self.config.extension_suffix,
            original_name=cls.name,
            shape=DeclarationShape.EXTENSION,
            base_type=safe_name,
            base_namespace=self.config.base_namespace,
            members=members,
            doc=DocComment(summary=f"Elevated extension for {cls.name}. Provides elevated-only members."),
            obsolete_message=CLASS_OBSOLETE_MESSAGE if cls.is_deprecated else None,
        )

    def emit_plugin_only(self, cls: ClassDescriptor) -> Declaration | None:
        """Full declaration of a class only visible at the elevated tier, or None if no member survives."""
        members = self.emit_members(cls, Tier.ELEVATED)
        if not members:
            return None

        return Declaration(
            name=make_safe_identifier(cls.name),
            original_name=cls.name,
            shape=DeclarationShape.PLUGIN_ONLY,
            base_type=self.config.root_type,
            base_namespace=self.config.base_namespace,
            members=members,
            doc=self.class_doc(cls),
            obsolete_message=CLASS_OBSOLETE_MESSAGE if cls.is_deprecated else None,
        )

    def base_type(self, cls: ClassDescriptor) -> str | None:
        """Superclass link: the schema superclass if it is a real class, else the root type."""
        if self.dump.is_class(cls.superclass) and cls.superclass != self.config.root_sentinel:
            return make_safe_identifier(cls.superclass)
        if cls.name != self.config.root_type:
            return self.config.root_type
        return None

    # Members

    def emit_members(self, cls: ClassDescriptor, tier: Tier) -> list[MemberDecl]:
        """Tier-visible members sorted by (kind, name), skipping those with nothing to emit."""
        candidates = [m for m in visible_members(cls, tier) if m.kind is not None]
        candidates.sort(key=lambda m: (m.kind.value, m.name))

        members = []
        for member in candidates:
            member_decl = self._member_emitters[member.kind](cls.name, member, tier)
            if member_decl is not None:
                members.append(member_decl)
        return members

    def _emit_property(self, class_name: str, member: MemberDescriptor, tier: Tier) -> MemberDecl | None:
        accessors = member_accessors(member, tier)
        if not accessors.any:
            return None
        return MemberDecl(
            kind=MemberKind.PROPERTY,
            name=make_safe_identifier(member.name),
            original_name=member.name,
            type_name=self.type_mapper.map_property_type(member.value_type, self.config.nullable_class_properties),
            has_getter=accessors.can_read,
            has_setter=accessors.can_write,
            doc=self.member_doc(class_name, member),
            obsolete_message=self._obsolete(member),
        )

    def _emit_function(self, class_name: str, member: MemberDescriptor, tier: Tier) -> MemberDecl:
        return MemberDecl(
            kind=MemberKind.FUNCTION,
            name=make_safe_identifier(member.name),
            original_name=member.name,
            type_name=self.type_mapper.map_type(member.return_type),
            has_getter=False,
            parameters=[ParameterDecl(name=make_safe_identifier(p.name), type_name=self.type_mapper.map_type(p.type)) for p in member.parameters],
            doc=self.member_doc(class_name, member),
            obsolete_message=self._obsolete(member),
        )

    def _emit_event(self, class_name: str, member: MemberDescriptor, tier: Tier) -> MemberDecl:
        return MemberDecl(
            kind=MemberKind.EVENT,
            name=make_safe_identifier(member.name),
            original_name=member.name,
            type_name=self.type_mapper.build_signal_type(member.parameters),
            doc=self.member_doc(class_name, member),
            obsolete_message=self._obsolete(member),
        )

    def _emit_callback(self, class_name: str, member: MemberDescriptor, tier: Tier) -> MemberDecl | None:
        accessors = member_accessors(member, tier)
        if not accessors.any:
            return None
        return MemberDecl(
            kind=MemberKind.CALLBACK,
            name=make_safe_identifier(member.name),
            original_name=member.name,
            type_name=self.type_mapper.build_delegate_type(member.parameters, member.return_type),
            has_getter=accessors.can_read,
            has_setter=accessors.can_write,
            doc=self.member_doc(class_name, member),
            obsolete_message=self._obsolete(member),
        )

    def _obsolete(self, member: MemberDescriptor) -> str | None:
        return OBSOLETE_MESSAGES[member.kind] if member.is_deprecated else None

    # Documentation

    def class_doc(self, cls: ClassDescriptor) -> DocComment:
        entry = self.docs.get(f"{self.config.doc_key_prefix}{cls.name}")
        summary = entry.documentation if entry is not None and entry.documentation else f"Represents the {cls.name} class."
        return DocComment(summary=summary)

    def member_doc(self, class_name: str, member: MemberDescriptor) -> DocComment:
        """
        Documentation of a member.

        The summary comes from the documentation map or falls back to a
        sentence keyed by member kind. Functions also carry parameter and
        return documentation. Remarks hold thread safety and, for functions,
        whether the method can yield.
        """
        entry = self.docs.get(f"{self.config.doc_key_prefix}{class_name}.{member.name}")
        if entry is not None and entry.documentation:
            summary = entry.documentation
        else:
            summary = FALLBACK_SUMMARIES[member.kind].format(name=member.name)

        doc = DocComment(summary=summary)

        remarks = []
        thread_remark = THREAD_SAFETY_REMARKS.get(member.thread_safety)
        if thread_remark:
            remarks.append(thread_remark)

        if member.kind is MemberKind.FUNCTION:
            if entry is not None:
                doc.params = [(p.name, p.documentation) for p in entry.params]
                if entry.returns:
                    doc.returns = entry.returns[0].documentation or None
            if member.can_yield:
                remarks.append(YIELD_REMARK)

        if remarks:
            doc.remarks = " ".join(remarks)
        return doc
