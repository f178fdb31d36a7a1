"""
Configuration for the declaration generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum

from .schema_ast.nodes import ROOT_SENTINEL

# Classes declared by hand in the core bindings. The generator never emits
# full or stub declarations for them, only elevated extensions.
DEFAULT_HAND_AUTHORED_CLASSES = [
    ROOT_SENTINEL,
    # Core types
    "Instance",
    "DataModel",
    # Services
    "Players",
    "Player",
    "Workspace",
    "ReplicatedStorage",
    "ServerStorage",
    "ServerScriptService",
    "StarterGui",
    "StarterPlayer",
    "Lighting",
    "SoundService",
    "TweenService",
    "RunService",
    "UserInputService",
    "HttpService",
    "Camera",
    "Tween",
    "InputObject",
    # Parts and physics
    "PVInstance",
    "BasePart",
    "Part",
    "WedgePart",
    "CornerWedgePart",
    "TrussPart",
    "MeshPart",
    "UnionOperation",
    "Model",
    "Humanoid",
    "JointInstance",
    "Weld",
    "WeldConstraint",
    "Motor6D",
    # Scripts
    "LuaSourceContainer",
    "BaseScript",
    "Script",
    "LocalScript",
    "ModuleScript",
]


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists
    FORCE = "force"  # Overwrite


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to validate code before writing
        atomic_write: Whether to use atomic file writes
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    validate_before_write: bool = True
    atomic_write: bool = True


@dataclass
class GeneratorConfig:
    """Configuration options for declaration generation."""

    # Classes with hand-written declarations
    hand_authored_classes: list[str] = field(default_factory=lambda: list(DEFAULT_HAND_AUTHORED_CLASSES))

    # Superclass name marking the top of the hierarchy
    root_sentinel: str = ROOT_SENTINEL

    # Generic root type every declaration ultimately inherits from
    root_type: str = "Instance"

    # Namespace of the base tier declarations and enums
    base_namespace: str = "Roblox"

    # Namespace of the elevated tier declarations
    elevated_namespace: str = "Roblox.Elevated"

    # Suffix for elevated extension declarations (Widget -> WidgetElevated)
    extension_suffix: str = "Elevated"

    # Documentation key prefixes
    doc_key_prefix: str = "@roblox/globaltype/"
    enum_doc_key_prefix: str = "@roblox/enum/"

    # Which artifacts to produce
    generate_elevated: bool = True
    generate_enums: bool = True

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # Class-typed properties may be nil at runtime
    nullable_class_properties: bool = True

    @property
    def hand_authored(self) -> frozenset[str]:
        return frozenset(self.hand_authored_classes)

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary. Unknown keys are ignored."""
        config = GeneratorConfig()
        for k, v in d.items():
            if hasattr(config, k) and k != "hand_authored":
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}
