"""
nausicaa - HTML component to Go source generator

Compiles HTML component files into Go code that builds the same element
trees through a UI-binding API, plus an extracted stylesheet.
"""

__version__ = "1.0.0"

from .generator import Generator, generate
from .compiler import ComponentCompiler
from .bindings import BindingTable
from .errors import NausicaaError, FormatterError, BindingsError
from .log import LOG, state_connectToLogger

__all__ = [
    "Generator",
    "generate",
    "ComponentCompiler",
    "BindingTable",
    "NausicaaError",
    "FormatterError",
    "BindingsError",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
