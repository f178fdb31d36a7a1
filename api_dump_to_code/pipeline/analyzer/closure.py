"""
Stub closure resolver.

When only classes with base-visible members are generated, some ancestors
and some class types referenced by member signatures would be missing
from the output. This resolver computes the minimal set of classes that
need an empty stub declaration to keep the inheritance chain connected.
"""

from __future__ import annotations

import logging

from ..schema_ast.nodes import ApiDump
from .security import Tier, has_visible_members, visible_members

logger = logging.getLogger(__name__)


class StubClosureResolver:
    """Computes the required stub classes for the base tier."""

    def __init__(self, dump: ApiDump, hand_authored: frozenset[str]):
        """
        Initialize the resolver.

        Args:
            dump: The parsed API dump
            hand_authored: Names of classes declared by hand
        """
        self.dump = dump
        self.hand_authored = hand_authored

    def generated_classes(self) -> set[str]:
        """Classes with own base-visible members, excluding hand-authored ones."""
        return {cls.name for cls in self.dump.classes if cls.name not in self.hand_authored and has_visible_members(cls, Tier.BASE)}

    def resolve(self, generated: set[str] | None = None) -> list[str]:
        """
        Compute the names of classes that need stub declarations.

        Args:
            generated: Classes that get full declarations (computed if None)

        Returns:
            Stub class names, sorted
        """
        if generated is None:
            generated = self.generated_classes()

        required: set[str] = set()

        for cls in sorted(self.dump.classes, key=lambda c: c.name):
            if cls.name not in generated:
                continue
            self._add_required(cls.superclass, generated, required)
            for member in visible_members(cls, Tier.BASE):
                for value_type in member.referenced_types():
                    if value_type.category == "Class":
                        self._add_required(value_type.base_name, generated, required)

        # Walk superclass links of required classes until nothing new is added
        added = True
        while added:
            added = False
            for name in sorted(required):
                cls = self.dump.get_class(name)
                if cls is not None and self._add_required(cls.superclass, generated, required):
                    added = True

        logger.debug("Resolved %d stub classes for %d generated classes", len(required), len(generated))
        return sorted(required)

    def _add_required(self, name: str | None, generated: set[str], required: set[str]) -> bool:
        if not self.dump.is_class(name) or name in generated or name in required or name in self.hand_authored:
            return False
        required.add(name)
        return True
