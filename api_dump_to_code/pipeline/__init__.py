"""
Pipeline - API dump to C# declarations generator.

This module provides a multi-phase architecture for generating
typed declarations from an API dump:

1. Phase 1 (Parser): Parse the decoded API dump and docs into nodes
2. Phase 2 (Analyzer): Filter by tier, resolve stubs and build declaration IR
3. Phase 3 (AST Backend): Generate a C# AST from the IR
4. Phase 4 (Serializer): Convert the AST to source code
5. Phase 5 (Writer): Validate and write files atomically
"""

from __future__ import annotations

from .analyzer import DeclarationShape, GenerationResult, Tier
from .config import GeneratorConfig, OutputConfig, OutputMode
from .errors import ApiDumpToCodeError, OutputValidationError, SchemaLoadError
from .generator import PipelineGenerator
from .schema_ast import ApiDump, ApiDumpParser
from .writer import AtomicWriter

__all__ = [
    "ApiDump",
    "ApiDumpParser",
    "ApiDumpToCodeError",
    "AtomicWriter",
    "DeclarationShape",
    "GenerationResult",
    "GeneratorConfig",
    "OutputConfig",
    "OutputMode",
    "OutputValidationError",
    "PipelineGenerator",
    "SchemaLoadError",
    "Tier",
]
