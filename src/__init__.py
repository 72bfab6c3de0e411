"""
nausicaa - HTML component to Go source generator

Compiles HTML component files into Go code that builds the same element
trees through a UI-binding API, plus an extracted stylesheet.
"""

__version__ = "1.0.0"

from .lib import (
    Generator,
    generate,
    ComponentCompiler,
    BindingTable,
    NausicaaError,
    FormatterError,
    BindingsError,
    LOG,
    state_connectToLogger,
)
from .models import GenerateOptions, GenerateResult

__all__ = [
    "Generator",
    "generate",
    "ComponentCompiler",
    "BindingTable",
    "NausicaaError",
    "FormatterError",
    "BindingsError",
    "GenerateOptions",
    "GenerateResult",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
