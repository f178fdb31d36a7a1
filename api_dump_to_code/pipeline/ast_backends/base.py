"""
Base class for AST-based code generation backends.

Defines the interface that all language-specific AST backends must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..analyzer.ir_nodes import Artifact
from ..config import GeneratorConfig


class AstBackend(ABC):
    """Abstract base class for AST-based code generation backends."""

    # File extension
    FILE_EXTENSION: str = ""

    def __init__(self, config: GeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Generator configuration
        """
        self.config = config

    @abstractmethod
    def generate(self, artifact: Artifact, generation_comment: str = "", api_version: int = 0) -> str:
        """
        Generate code for one artifact.

        Args:
            artifact: The declarations of one output file
            generation_comment: Text of the auto-generated header ("" for none)
            api_version: API dump version to mention in the header

        Returns:
            Generated code as a string
        """

    def file_name(self, artifact: Artifact) -> str:
        """Output file name of an artifact."""
        return f"{artifact.name}.{self.FILE_EXTENSION}"
