"""
Analyzer module.

Contains tier filtering, type mapping, stub closure resolution and
declaration IR building.
"""

from __future__ import annotations

from .closure import StubClosureResolver
from .composer import OutputComposer
from .emitter import DeclarationEmitter
from .enums import EnumEmitter
from .ir_nodes import (
    Artifact,
    Declaration,
    DeclarationShape,
    DocComment,
    EnumDecl,
    EnumItemDecl,
    GenerationResult,
    MemberDecl,
    ParameterDecl,
)
from .security import (
    Accessors,
    FilteredClass,
    FilteredMember,
    Tier,
    build_filtered_model,
    has_visible_members,
    is_member_visible,
    member_accessors,
)
from .type_mapper import OPAQUE_TYPE, TypeMapper

__all__ = [
    "Accessors",
    "Artifact",
    "Declaration",
    "DeclarationEmitter",
    "DeclarationShape",
    "DocComment",
    "EnumDecl",
    "EnumEmitter",
    "EnumItemDecl",
    "FilteredClass",
    "FilteredMember",
    "GenerationResult",
    "MemberDecl",
    "OPAQUE_TYPE",
    "OutputComposer",
    "ParameterDecl",
    "StubClosureResolver",
    "Tier",
    "TypeMapper",
    "build_filtered_model",
    "has_visible_members",
    "is_member_visible",
    "member_accessors",
]
