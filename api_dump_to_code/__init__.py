"""API Dump to Code Generator

A Python package for generating typed C# declarations from a game-engine
API dump. Supports per-access-tier output, stub closure of ancestor
declarations, synthesized documentation and atomic file output.
"""

__version__ = "1.0.0"

from .pipeline import (
    ApiDump,
    ApiDumpParser,
    ApiDumpToCodeError,
    AtomicWriter,
    GeneratorConfig,
    OutputConfig,
    OutputMode,
    PipelineGenerator,
    Tier,
)

__all__ = [
    "ApiDump",
    "ApiDumpParser",
    "ApiDumpToCodeError",
    "AtomicWriter",
    "GeneratorConfig",
    "OutputConfig",
    "OutputMode",
    "PipelineGenerator",
    "Tier",
]
