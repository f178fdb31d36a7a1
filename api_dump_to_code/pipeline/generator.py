"""
Pipeline generator.

One generation run is a pure function of (API dump, documentation map,
config): identical inputs produce byte-identical output.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .. import __version__
from .analyzer.composer import OutputComposer
from .analyzer.ir_nodes import GenerationResult
from .analyzer.security import FilteredClass, Tier, build_filtered_model
from .ast_backends.csharp_ast_backend import CSharpAstBackend
from .config import GeneratorConfig, OutputConfig
from .schema_ast.nodes import ApiDump, DocEntry
from .writer.atomic_writer import AtomicWriter

logger = logging.getLogger(__name__)


class PipelineGenerator:
    """Generates C# declarations from a parsed API dump."""

    def __init__(
        self,
        dump: ApiDump,
        docs: dict[str, DocEntry] | None = None,
        config: GeneratorConfig | None = None,
        command_line: str = "api_dump_to_code",
    ):
        """
        Initialize the generator.

        Args:
            dump: The parsed API dump
            docs: Documentation entries by key
            config: Generator configuration (defaults if None)
            command_line: Command line mentioned in the generation comment
        """
        self.dump = dump
        self.docs = docs or {}
        self.config = config or GeneratorConfig()
        self.command_line = command_line
        self.backend = CSharpAstBackend(self.config)

    def generate(self) -> GenerationResult:
        """Build the declaration artifacts."""
        logger.info("Generating declarations for %d classes and %d enums (API version %d)", len(self.dump.classes), len(self.dump.enums), self.dump.version)
        return OutputComposer(self.dump, self.docs, self.config).compose()

    def render(self, result: GenerationResult | None = None) -> dict[str, str]:
        """
        Render the artifacts to C# source.

        Args:
            result: Artifacts to render (generated if None)

        Returns:
            Mapping of file name to source code, in artifact order
        """
        if result is None:
            result = self.generate()

        comment = self.generation_comment()
        return {self.backend.file_name(artifact): self.backend.generate(artifact, comment, result.version) for artifact in result.artifacts}

    def write(self, output_dir: Path, output_config: OutputConfig | None = None) -> list[Path]:
        """
        Generate, render and write all files into a directory.

        No file is written unless every file can be written.

        Returns:
            Paths of the written files
        """
        outputs = {Path(output_dir) / file_name: code for file_name, code in self.render().items()}
        return AtomicWriter(output_config).write_outputs(outputs)

    def filtered_model(self, tier: Tier) -> list[FilteredClass]:
        """The filtered (class, member) model of a tier, for external consumers."""
        exclude = frozenset({self.config.root_sentinel})
        return build_filtered_model(self.dump, tier, exclude)

    def generation_comment(self) -> str:
        if not self.config.add_generation_comment:
            return ""
        return f"Generated by api_dump_to_code v{__version__} : {self.command_line}"
