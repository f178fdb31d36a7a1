"""
Atomic file writer for safe code generation.

Ensures that file writes are atomic to prevent data corruption
from interrupted operations.
"""

from __future__ import annotations

import logging
import tempfile
from collections.abc import Callable
from pathlib import Path

from ..config import OutputConfig, OutputMode
from ..errors import OutputValidationError

logger = logging.getLogger(__name__)


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file

    This ensures that an interrupted write operation never leaves
    the target file in an incomplete state.
    """

    def __init__(
        self,
        output_config: OutputConfig | None = None,
        validate_csharp: Callable[[str], None] | None = None,
    ):
        """Initialize the atomic writer.

        Args:
            output_config: Output handling options (defaults if None)
            validate_csharp: Optional validation function for C# code
        """
        self.output_config = output_config or OutputConfig()
        self._validate_csharp = validate_csharp or self._default_validate_csharp

    def write_outputs(self, outputs: dict[Path, str]) -> list[Path]:
        """Write a set of generated files according to the output config.

        Every target is checked, and every file validated, before the first
        write, so a refused or invalid file leaves no other file behind.

        Args:
            outputs: Mapping of target path to content

        Returns:
            The written paths, in mapping order

        Raises:
            FileExistsError: If a file exists and the mode forbids overwriting
            OutputValidationError: If validation fails
        """
        for path in outputs:
            self._check_target(path)
        if self.output_config.validate_before_write:
            for content in outputs.values():
                self._validate_csharp(content)

        for path, content in outputs.items():
            self._commit(path, content, validate=False)
        return list(outputs)

    def write_output(self, path: Path, content: str) -> None:
        """Write one generated file according to the output config.

        Raises:
            FileExistsError: If the file exists and the mode forbids overwriting
            OutputValidationError: If validation fails
        """
        self._check_target(path)
        self._commit(path, content, validate=self.output_config.validate_before_write)

    def _check_target(self, path: Path) -> None:
        if self.output_config.mode == OutputMode.ERROR_IF_EXISTS and path.exists():
            raise FileExistsError(f"Output file already exists: {path}. Use force mode to overwrite.")

    def _commit(self, path: Path, content: str, validate: bool) -> None:
        if self.output_config.atomic_write:
            self.write(path, content, validate=validate)
            return

        if validate:
            self._validate_csharp(content)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        logger.info("Wrote %s", path)

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            OutputValidationError: If validation fails
            OSError: If file operations fail
        """
        # Ensure parent directory exists
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )

        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)

            if validate:
                self._validate_csharp(content)

            temp_path.replace(path)

        except Exception:
            # Clean up temp file on any error
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    logger.warning("Could not remove temporary file %s", temp_path)
            raise

        logger.info("Wrote %s", path)

    def _default_validate_csharp(self, content: str) -> None:
        """Default C# validation.

        Args:
            content: C# code to validate

        Raises:
            OutputValidationError: If validation fails
        """
        code_lines = [line for line in content.splitlines() if not line.lstrip().startswith("//")]
        code = "\n".join(code_lines)

        if "namespace " not in code:
            raise OutputValidationError("Generated C# code is missing namespace declaration")

        # Check for balanced braces outside of comments (simple heuristic)
        open_braces = code.count("{")
        close_braces = code.count("}")
        if open_braces != close_braces:
            raise OutputValidationError(f"Generated C# code has unbalanced braces: {open_braces} open, {close_braces} close")
