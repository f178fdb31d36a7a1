"""
Tier visibility filter.

Decides, per access tier, which members and classes are emitted and which
property/callback accessors are included. The same filtered model is
exposed for external consumers (e.g. a runtime metadata emitter).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ..schema_ast.nodes import ApiDump, ClassDescriptor, MemberDescriptor, MemberKind, SecurityToken

_OPEN = SecurityToken.OPEN.value
_ELEVATED = SecurityToken.ELEVATED.value
_BLOCKED = {SecurityToken.ENGINE_ONLY.value, SecurityToken.FORBIDDEN.value}

# Kinds whose read and write accessors are decided independently
ACCESSOR_KINDS = {MemberKind.PROPERTY, MemberKind.CALLBACK}


class Tier(str, Enum):
    """Access tier of a generation pass."""

    BASE = "base"
    ELEVATED = "elevated"


@dataclass(frozen=True)
class Accessors:
    """Which accessors of a member pass a tier."""

    can_read: bool = True
    can_write: bool = True

    @property
    def any(self) -> bool:
        return self.can_read or self.can_write


def is_token_accessible(token: str, tier: Tier) -> bool:
    """Whether a single security token can be used at a tier."""
    if tier is Tier.BASE:
        return token == _OPEN
    return token in (_OPEN, _ELEVATED)


def is_member_visible(member: MemberDescriptor, tier: Tier) -> bool:
    """
    Whether a member is generated at a tier.

    Args:
        member: The member to check
        tier: The access tier

    Returns:
        True if the member passes the tier test
    """
    if member.is_not_scriptable or member.is_hidden:
        return False

    read, write = member.read_security, member.write_security
    if tier is Tier.BASE:
        return read == _OPEN or write == _OPEN

    return (read == _ELEVATED or write == _ELEVATED) and read not in _BLOCKED and write not in _BLOCKED


def member_accessors(member: MemberDescriptor, tier: Tier) -> Accessors:
    """Read/write accessors of a property or callback at a tier.

    Functions and events always report both accessors; their shape does not
    depend on them.
    """
    if member.kind not in ACCESSOR_KINDS:
        return Accessors()
    return Accessors(
        can_read=not member.is_write_only and is_token_accessible(member.read_security, tier),
        can_write=not member.is_read_only and is_token_accessible(member.write_security, tier),
    )


def visible_members(cls: ClassDescriptor, tier: Tier) -> list[MemberDescriptor]:
    """Members of a class visible at a tier, in declaration order."""
    return [m for m in cls.members if is_member_visible(m, tier)]


def has_visible_members(cls: ClassDescriptor, tier: Tier) -> bool:
    """Whether a class has at least one own member visible at a tier."""
    return any(is_member_visible(m, tier) for m in cls.members)


@dataclass
class FilteredMember:
    """A member that survives a tier, with its accessor decision."""

    member: MemberDescriptor
    accessors: Accessors = field(default_factory=Accessors)


@dataclass
class FilteredClass:
    """A class with its members visible at a tier."""

    descriptor: ClassDescriptor
    members: list[FilteredMember] = field(default_factory=list)


def build_filtered_model(dump: ApiDump, tier: Tier, exclude: frozenset[str] = frozenset()) -> list[FilteredClass]:
    """
    Build the filtered (class, member) model of a tier.

    Classes are sorted by name; classes without visible members and classes
    named in ``exclude`` are left out. Properties and callbacks with no
    accessor at the tier are dropped.

    Args:
        dump: The parsed API dump
        tier: The access tier
        exclude: Class names to leave out

    Returns:
        Filtered classes, sorted by name
    """
    model: list[FilteredClass] = []
    for cls in sorted(dump.classes, key=lambda c: c.name):
        if cls.name in exclude:
            continue
        members = []
        for member in visible_members(cls, tier):
            accessors = member_accessors(member, tier)
            if accessors.any:
                members.append(FilteredMember(member=member, accessors=accessors))
        if members:
            model.append(FilteredClass(descriptor=cls, members=members))
    return model
