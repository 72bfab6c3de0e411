"""
Reserved identifiers for generated Go source

Ref names become struct fields of the generated component type, so they
must not collide with Go keywords or with the fields and methods the
generator writes itself.
"""

from typing import FrozenSet, Optional

from ..config import appsettings


# Go language keywords (https://go.dev/ref/spec#Keywords)
GO_KEYWORDS: FrozenSet[str] = frozenset({
    'break', 'case', 'chan', 'const', 'continue',
    'default', 'defer', 'else', 'fallthrough', 'for',
    'func', 'go', 'goto', 'if', 'import',
    'interface', 'map', 'package', 'range', 'return',
    'select', 'struct', 'switch', 'type', 'var',
})


def keyword_is(name: str) -> bool:
    """Check if a name is a Go keyword"""
    return name in GO_KEYWORDS


def refName_disallowedReason(name: str) -> Optional[str]:
    """
    Explain why a ref name cannot be used as a struct field

    Args:
        name: User-supplied ref attribute value

    Returns:
        Reason string for the error message, or None if the name is allowed

    Example:
        >>> refName_disallowedReason('select')
        'Go keyword'
        >>> refName_disallowedReason('roots')
        'reserved for internal use'
        >>> refName_disallowedReason('header') is None
        True
    """
    if keyword_is(name):
        return 'Go keyword'
    if name in (appsettings.roots_field, appsettings.rootsAccessor_name()):
        return 'reserved for internal use'
    if not name.isidentifier() or name == '_':
        return 'not a valid identifier'
    return None
