"""
<include> resolution

An include embeds another component: the referenced file is compiled
(once per run) and the including component calls its constructor.
"""

import os
from typing import TYPE_CHECKING, List, Optional, Tuple

from ..models.component import Component
from .errors import (
    IncludeCycleError,
    InvalidIncludeAttributeError,
    MissingPathAttributeError,
)
from .log import LOG
from .names import component_describe
from .scope import IncludeHistory

if TYPE_CHECKING:
    from .generator import Generator


def path_canonicalize(path: str) -> str:
    """Canonical form of a component path, used as its identity"""
    return os.path.normpath(path)


def includePath_resolve(value: str, including_path: str, root_directory: str) -> str:
    """
    Resolve an include path attribute to a component path

    Absolute-style paths are taken relative to the root directory; all
    other paths relative to the directory of the including file.

    Args:
        value: The include's path attribute
        including_path: Path of the component containing the <include>
        root_directory: Root for absolute-style paths

    Returns:
        Canonical path of the included component

    Example:
        >>> includePath_resolve('x.html', '/a/b/c.html', '.')
        '/a/b/x.html'
        >>> includePath_resolve('/x.html', '/a/b/c.html', '/r')
        '/r/x.html'
    """
    if value.startswith('/'):
        return path_canonicalize(os.path.join(root_directory, value.lstrip('/')))
    return path_canonicalize(os.path.join(os.path.dirname(including_path), value))


def cycle_check(path: str, history: IncludeHistory) -> None:
    """
    Fail if a component is re-entered while it is still being compiled

    Raises:
        IncludeCycleError: Naming the cycle from the oldest ancestor to
                           the repeated component
    """
    if path in history:
        cycle = [os.path.basename(p) for p in history]
        cycle.append(os.path.basename(path))
        raise IncludeCycleError(path, cycle)


class IncludeResolver:
    """
    Resolves <include> tags found while compiling one component

    Attributes:
        generator: Generator owning the run (compiles included files)
        path: Path of the including component
        history: Include chain of the current top-level input
    """

    def __init__(self, generator: "Generator", path: str, history: IncludeHistory) -> None:
        self.generator = generator
        self.path = path
        self.history = history

    def attributes_parse(self, attrs: List[Tuple[str, str]]) -> Tuple[str, Optional[str]]:
        """
        Validate <include> attributes

        Args:
            attrs: Attribute (name, value) pairs

        Returns:
            (path attribute value, ref attribute value or None)

        Raises:
            InvalidIncludeAttributeError: For attributes other than path and
                                          ref, or either given twice
            MissingPathAttributeError: If there is no path attribute
        """
        path_value: Optional[str] = None
        ref_value: Optional[str] = None
        for key, value in attrs:
            if key == 'path':
                if path_value is not None:
                    raise InvalidIncludeAttributeError(self.path, key, repeated=True)
                path_value = value
            elif key == 'ref':
                if ref_value is not None:
                    raise InvalidIncludeAttributeError(self.path, key, repeated=True)
                ref_value = value
            else:
                raise InvalidIncludeAttributeError(self.path, key)

        if path_value is None:
            raise MissingPathAttributeError(self.path)
        return path_value, ref_value

    def resolve(self, value: str) -> Component:
        """
        Compile the included component unless this run already has

        Args:
            value: The include's path attribute

        Returns:
            Naming information of the included component

        Raises:
            IncludeCycleError: If the include closes a cycle
            NausicaaError: Any error from compiling the included file
        """
        include_path = includePath_resolve(value, self.path, self.generator.root_directory)
        LOG(f"<include path=\"{value}\"> -> {include_path}", level=3, component=self.path)
        self.generator.file_generate(include_path, self.history)
        return component_describe(include_path)
