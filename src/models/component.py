"""
Component compilation data models

Type-safe structures shared by the compiler, the include resolver and the
generator.
"""

from dataclasses import dataclass, field
from typing import Any, BinaryIO, Callable, List, Optional, Union


@dataclass
class Component:
    """
    One compiled input file

    Attributes:
        path: Canonical (normalized) source path; identity of the component
        type_name: Generated Go type name (base name without extension)
        constructor_name: Generated constructor function name

    Example:
        For "components/Button.html":
        Component(path="components/Button.html", type_name="Button",
                  constructor_name="NewButton")
    """
    path: str
    type_name: str
    constructor_name: str


@dataclass
class ScopeFrame:
    """
    An element whose end tag has not been seen yet

    Attributes:
        tag_name: Lower-cased tag name (e.g., "div", "include")
        var_name: Generated Go variable bound to the element (e.g., "div0")
    """
    tag_name: str
    var_name: str

    def include_is(self) -> bool:
        """Check if this frame holds an <include> component"""
        return self.tag_name == 'include'


@dataclass
class RefEntry:
    """
    A named handle surfaced as a field of the component type

    Attributes:
        tag_name: Tag of the declaring element
        var_name: Variable holding the element
        type_name: Included component type when declared on <include>,
                   None for regular elements
    """
    tag_name: str
    var_name: str
    type_name: Optional[str] = None


@dataclass
class CompiledComponent:
    """
    Output of compiling one component file

    Attributes:
        component: Naming information for the component
        definition: Go type definition (with its "// source:" comment)
        constructor: Go constructor function and roots accessor
        stylesheet: Trimmed body of a top-level <style>, if one was present
        refs: Ref name -> entry, in declaration order
        roots: Root element frames, in document order
    """
    component: Component
    definition: str
    constructor: str
    stylesheet: Optional[str] = None
    refs: dict = field(default_factory=dict)
    roots: List[ScopeFrame] = field(default_factory=list)


Formatter = Callable[[bytes], bytes]
Opener = Callable[[str], BinaryIO]


@dataclass
class GenerateOptions:
    """
    Options for one generator run

    Any field left as None falls back to config.appsettings.

    Attributes:
        package_name: Package name for the generated source header
        root_directory: Base directory for absolute-style include paths
        formatter: 'gofmt', 'builtin', 'auto', or a callable bytes -> bytes
        bindings: BindingTable to use (None loads the configured table)
        opener: Callable opening a path for binary reading
    """
    package_name: Optional[str] = None
    root_directory: Optional[str] = None
    formatter: Union[str, Formatter, None] = None
    bindings: Optional[Any] = None   # lib.bindings.BindingTable at runtime
    opener: Optional[Opener] = None


@dataclass
class GenerateResult:
    """
    Output of a successful generator run

    Attributes:
        source: Formatted Go source for all components
        styles: Stylesheet collected from top-level <style> blocks
        components: Compiled components in emission order
    """
    source: bytes
    styles: bytes
    components: List[CompiledComponent] = field(default_factory=list)
