"""
Models package for nausicaa

Contains data structures and type definitions for the generation pipeline.
"""

from .state import ProgramState, pipeline
from .tokens import Token, TokenKind, VOID_ELEMENTS
from .reserved import GO_KEYWORDS
from .component import (
    Component,
    ScopeFrame,
    RefEntry,
    CompiledComponent,
    GenerateOptions,
    GenerateResult,
)

__all__ = [
    "ProgramState",
    "pipeline",
    "Token",
    "TokenKind",
    "VOID_ELEMENTS",
    "GO_KEYWORDS",
    "Component",
    "ScopeFrame",
    "RefEntry",
    "CompiledComponent",
    "GenerateOptions",
    "GenerateResult",
]
