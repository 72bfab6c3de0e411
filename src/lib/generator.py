"""
Generator: compiles a set of component files into one Go source file and
one stylesheet

The generator owns all state shared across a run: the set of components
already generated (so each is emitted exactly once, however many times it
is included) and the two output buffers. Components are emitted in the
order their compilation completes, so included components always precede
the components that include them.
"""

from typing import Iterable, List, Optional, Set

from ..config import appsettings
from ..models.component import CompiledComponent, GenerateOptions, GenerateResult
from .bindings import table_default
from .compiler import ComponentCompiler
from .emitter import header_render
from .errors import FileOpenError
from .formatter import formatter_resolve, stylesheet_format
from .includes import cycle_check, path_canonicalize
from .log import LOG
from .scope import IncludeHistory


def file_open(path: str):
    """Default opener: the file at path, for binary reading"""
    return open(path, 'rb')


class Generator:
    """
    Generates Go source and a stylesheet from component files

    Responsibilities:
    - Seed the output with the fixed header
    - Compile each requested file, and transitively its includes, once
    - Collect type definitions, constructors and stylesheet blocks
    - Run the final formatting pass
    """

    def __init__(self, options: Optional[GenerateOptions] = None) -> None:
        """
        Initialize generator

        Args:
            options: Run options; unset fields fall back to appsettings
        """
        options = options or GenerateOptions()
        self.package_name = options.package_name or appsettings.package_name
        self.root_directory = options.root_directory or appsettings.root_directory
        self.formatter = formatter_resolve(options.formatter)
        self.bindings = options.bindings or table_default()
        self.opener = options.opener or file_open
        self.reset()

    def reset(self) -> None:
        """Forget everything generated so far"""
        self.seen: Set[str] = set()
        self.source_parts: List[str] = []
        self.style_blocks: List[str] = []
        self.components: List[CompiledComponent] = []

    def run(self, input_paths: Iterable[str]) -> GenerateResult:
        """
        Generate output for the given component files

        Args:
            input_paths: Component files, in the order to generate them

        Returns:
            GenerateResult with formatted source, stylesheet and the
            compiled components in emission order

        Raises:
            NausicaaError: For any input error; nothing is returned
            FormatterError: If the generated source does not format
        """
        self.reset()
        LOG(f"Generating package '{self.package_name}' with {self.bindings.name} bindings", level=2)
        self.source_parts.append(header_render(self.package_name, self.bindings))

        for path in input_paths:
            # Cycle detection is scoped to one top-level input
            self.file_generate(path, IncludeHistory())

        source = self.formatter("\n".join(self.source_parts).encode("utf-8"))
        styles = stylesheet_format(
            f"/* Code generated by {appsettings.generated_by}. DO NOT EDIT. */",
            self.style_blocks,
        )
        LOG(f"Generated {len(self.components)} component(s)", level=2)
        return GenerateResult(source=source, styles=styles, components=list(self.components))

    def file_generate(self, path: str, history: IncludeHistory) -> None:
        """
        Compile a component file unless this run already has

        Used for top-level inputs and, recursively, for includes.

        Args:
            path: Component path
            history: Include chain of the current top-level input

        Raises:
            IncludeCycleError: If the path is already on the include chain
            NausicaaError: For any error compiling the file
        """
        path = path_canonicalize(path)
        if path in self.seen:
            LOG("Skipping (already generated)", level=3, component=path)
            return

        cycle_check(path, history)
        history.add(path)
        try:
            compiled = self.component_compile(path, history)
        finally:
            history.remove(path)

        self.component_emit(compiled)
        self.seen.add(path)

    def component_compile(self, path: str, history: IncludeHistory) -> CompiledComponent:
        """Open a component file and compile it"""
        LOG("Compiling", level=2, component=path)
        try:
            stream = self.opener(path)
        except OSError as e:
            raise FileOpenError(path, e) from e

        with stream:
            try:
                return ComponentCompiler(self, path, history, self.bindings).compile(stream)
            except OSError as e:
                raise FileOpenError(path, e) from e

    def component_emit(self, compiled: CompiledComponent) -> None:
        """Append a compiled component to the output buffers"""
        self.source_parts.append(compiled.definition)
        self.source_parts.append(compiled.constructor)
        if compiled.stylesheet is not None:
            self.style_blocks.append(f"/* source: {compiled.component.path} */\n{compiled.stylesheet}")
        self.components.append(compiled)
        LOG(f"Generated type {compiled.component.type_name}", level=2, component=compiled.component.path)


def generate(input_paths: Iterable[str], options: Optional[GenerateOptions] = None) -> GenerateResult:
    """
    Generate Go source and stylesheet from component files

    Args:
        input_paths: Component files, in the order to generate them
        options: Run options (package name, include root, formatter, ...)

    Returns:
        GenerateResult with source and styles as bytes

    Example:
        >>> result = generate(["components/Button.html"], GenerateOptions(package_name="ui"))
        >>> result.source.startswith(b"package ui")
        True
    """
    return Generator(options).run(input_paths)
