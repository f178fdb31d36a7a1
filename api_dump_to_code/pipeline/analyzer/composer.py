"""
Output composer.

Runs the tier passes over the API dump and groups the resulting
declarations into per-tier artifacts with deterministic ordering:

- base: stub declarations (name-sorted), then full declarations (name-sorted)
- elevated: extension and plugin-only declarations, sorted by class name
- enums: enum declarations, sorted by name
"""

from __future__ import annotations

import logging

from ..config import GeneratorConfig
from ..schema_ast.nodes import ApiDump, DocEntry
from .closure import StubClosureResolver
from .emitter import DeclarationEmitter
from .enums import EnumEmitter
from .ir_nodes import Artifact, Declaration, GenerationResult
from .security import Tier, has_visible_members

logger = logging.getLogger(__name__)

BASE_ARTIFACT_NAME = "Classes"
ELEVATED_ARTIFACT_NAME = "ElevatedClasses"
ENUMS_ARTIFACT_NAME = "Enums"


class OutputComposer:
    """Builds the artifacts of one generation run."""

    def __init__(self, dump: ApiDump, docs: dict[str, DocEntry], config: GeneratorConfig):
        self.dump = dump
        self.docs = docs
        self.config = config
        self.hand_authored = config.hand_authored
        self.emitter = DeclarationEmitter(dump, docs, config)
        self.closure = StubClosureResolver(dump, self.hand_authored)

    def compose(self) -> GenerationResult:
        """Run all passes."""
        base, base_generated = self.compose_base()
        result = GenerationResult(base=base, version=self.dump.version)
        if self.config.generate_elevated:
            result.elevated = self.compose_elevated(base_generated)
        if self.config.generate_enums:
            result.enums = self.compose_enums()
        return result

    def compose_base(self) -> tuple[Artifact, set[str]]:
        """
        Base tier pass.

        Returns:
            The base artifact and the names of classes it declares (stubs included)
        """
        generated = self.closure.generated_classes()
        stub_names = self.closure.resolve(generated)

        stubs = [self.emitter.emit_stub(self.dump.class_index[name]) for name in stub_names]

        full: list[Declaration] = []
        for cls in self._sorted_classes():
            if cls.name in self.hand_authored or cls.name not in generated:
                continue
            full.append(self.emitter.emit_full(cls))
            logger.debug("Base: full declaration for %s", cls.name)

        logger.info("Base tier: %d stub and %d full declarations", len(stubs), len(full))
        artifact = Artifact(
            name=BASE_ARTIFACT_NAME,
            namespace=self.config.base_namespace,
            tier=Tier.BASE,
            declarations=stubs + full,
        )
        return artifact, generated | set(stub_names)

    def compose_elevated(self, base_generated: set[str]) -> Artifact:
        """
        Elevated tier pass.

        Classes that already have a base declaration (generated or hand-authored)
        get an extension; classes only visible at this tier get a plugin-only
        declaration rooted at the generic root type.

        Args:
            base_generated: Classes declared by the base pass
        """
        declarations: list[Declaration] = []
        for cls in self._sorted_classes():
            if cls.name == self.config.root_sentinel or not has_visible_members(cls, Tier.ELEVATED):
                continue

            has_base = cls.name in base_generated or cls.name in self.hand_authored or has_visible_members(cls, Tier.BASE)
            declaration = self.emitter.emit_extension(cls) if has_base else self.emitter.emit_plugin_only(cls)
            if declaration is None:
                logger.debug("Elevated: nothing to emit for %s", cls.name)
                continue
            declarations.append(declaration)
            logger.debug("Elevated: %s declaration %s", declaration.shape.value, declaration.name)

        logger.info("Elevated tier: %d declarations", len(declarations))
        return Artifact(
            name=ELEVATED_ARTIFACT_NAME,
            namespace=self.config.elevated_namespace,
            tier=Tier.ELEVATED,
            usings=[self.config.base_namespace],
            declarations=declarations,
        )

    def compose_enums(self) -> Artifact:
        enums = EnumEmitter(self.docs, self.config).emit_all(self.dump.enums)
        logger.info("Enums: %d declarations", len(enums))
        return Artifact(name=ENUMS_ARTIFACT_NAME, namespace=self.config.base_namespace, enums=enums)

    def _sorted_classes(self):
        return sorted(self.dump.classes, key=lambda c: c.name)
