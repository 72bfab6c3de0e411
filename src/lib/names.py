"""
Naming for generated Go source

- NameAllocator hands out collision-free variable names per component
- typeName_derive / constructorName_derive turn a file name into the
  component's Go type and constructor names
"""

import os
import re
from typing import Dict, Set

from ..models.component import Component


class NameAllocator:
    """
    Successive variable names for one component's constructor function

    Names are the kind followed by an ordinal that starts at 0 and grows
    independently per kind. A kind ending in a digit can spell a name
    another kind already has (a_1 + 10, a_11 + 0); such ordinals are
    skipped, so names stay unique within the component.

    Example:
        >>> namer = NameAllocator()
        >>> [namer.next(k) for k in ('div', 'div', 'span', 'div')]
        ['div0', 'div1', 'span0', 'div2']
    """

    def __init__(self) -> None:
        self.counters: Dict[str, int] = {}
        self.issued: Set[str] = set()

    def next(self, kind: str) -> str:
        """Return the next unused name for a kind"""
        n = self.counters.get(kind, 0)
        while f"{kind}{n}" in self.issued:
            n += 1
        self.counters[kind] = n + 1
        name = f"{kind}{n}"
        self.issued.add(name)
        return name


_identifier_unsafe = re.compile(r'[^0-9A-Za-z_]')


def kind_fromTagName(tag_name: str) -> str:
    """
    Naming kind for an element, safe to use as a Go identifier prefix

    Example:
        >>> kind_fromTagName('my-widget')
        'my_widget'
    """
    return _identifier_unsafe.sub('_', tag_name)


def typeName_derive(filename: str) -> str:
    """
    Component type name: the base name with its final extension removed

    Case and separators are preserved verbatim.

    Example:
        >>> typeName_derive('SegmentedControl.html')
        'SegmentedControl'
        >>> typeName_derive('button.v2.html')
        'button.v2'
    """
    idx = filename.rfind('.')
    if idx != -1:
        filename = filename[:idx]
    return filename


def firstCharacter_upper(name: str) -> str:
    """Upper-case the first character of a name"""
    return name[:1].upper() + name[1:]


def exported_is(name: str) -> bool:
    """Check if a Go name is exported (starts with an upper-case letter)"""
    return bool(name) and name[0].isupper()


def constructorName_derive(type_name: str) -> str:
    """
    Constructor function name, exported when the type name is

    Example:
        >>> constructorName_derive('Button')
        'NewButton'
        >>> constructorName_derive('button')
        'newButton'
    """
    if exported_is(type_name):
        return "New" + type_name
    return "new" + firstCharacter_upper(type_name)


def component_describe(path: str) -> Component:
    """
    Derive naming information for the component at a path

    Args:
        path: Canonical component path

    Returns:
        Component with type and constructor names filled in
    """
    type_name = typeName_derive(os.path.basename(path))
    return Component(
        path=path,
        type_name=type_name,
        constructor_name=constructorName_derive(type_name),
    )
