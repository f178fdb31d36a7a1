"""
AST-based code generation backends.
"""

from __future__ import annotations

from .base import AstBackend
from .csharp_ast_backend import CSharpAstBackend
from .csharp_serializer import CSharpSerializer

__all__ = [
    "AstBackend",
    "CSharpAstBackend",
    "CSharpSerializer",
]
