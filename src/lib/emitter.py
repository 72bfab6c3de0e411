"""
Go source emission for compiled components

Builds the text of the generated file: the fixed header, and for every
component a type definition plus a constructor function whose statements
create the component's elements through the binding API.

The text is already laid out the way gofmt would lay it out, apart from
column alignment, so it reads well even without the formatting pass.
"""

from typing import Iterable, List, Optional

from ..config import appsettings
from ..models.component import Component, RefEntry, ScopeFrame
from .bindings import BindingTable


DOCUMENT_VAR = "_document"

_go_escapes = {
    '\a': '\\a',
    '\b': '\\b',
    '\f': '\\f',
    '\n': '\\n',
    '\r': '\\r',
    '\t': '\\t',
    '\v': '\\v',
    '\\': '\\\\',
    '"': '\\"',
}


def goString_quote(text: str) -> str:
    """
    Quote a string as a Go interpreted string literal (like Go's %q)

    Printable characters are kept as-is; everything else is escaped.

    Example:
        >>> goString_quote('say "hi"\\n')
        '"say \\\\"hi\\\\"\\\\n"'
        >>> goString_quote('a\\u00a0b')
        '"a\\\\u00a0b"'
    """
    parts = ['"']
    for ch in text:
        escaped = _go_escapes.get(ch)
        if escaped is not None:
            parts.append(escaped)
        elif ch == ' ' or ch.isprintable():
            parts.append(ch)
        else:
            code = ord(ch)
            if code < 0x20 or code == 0x7f:
                parts.append(f"\\x{code:02x}")
            elif code < 0x10000:
                parts.append(f"\\u{code:04x}")
            else:
                parts.append(f"\\U{code:08x}")
    parts.append('"')
    return ''.join(parts)


def space_isTrimmable(ch: str) -> bool:
    """Whitespace that text normalization trims (everything but NBSP)"""
    return ch.isspace() and ch != '\xa0'


def textContent_normalize(text: str) -> str:
    """
    Normalize element text before it is bound to the parent

    Newlines are removed and surrounding whitespace trimmed, except the
    no-break space which is significant.

    Example:
        >>> textContent_normalize('\\n   Hello\\n world  ')
        'Hello world'
        >>> textContent_normalize('\\xa0 ')
        '\\xa0'
    """
    text = text.replace('\n', '')
    start, end = 0, len(text)
    while start < end and space_isTrimmable(text[start]):
        start += 1
    while end > start and space_isTrimmable(text[end - 1]):
        end -= 1
    return text[start:end]


def header_render(package_name: str, bindings: BindingTable) -> str:
    """
    Fixed header of the generated source

    Args:
        package_name: Go package name
        bindings: Binding table supplying imports and the document handle

    Returns:
        Package clause, banner, imports, anchor types and document variable
    """
    lines = [
        f"package {package_name}",
        "",
        f"// Code generated by {appsettings.generated_by}. DO NOT EDIT.",
        "",
    ]

    if bindings.imports:
        lines.append("import (")
        lines.extend(f"\t{goString_quote(entry['path'])}" for entry in bindings.imports)
        lines.extend([")", ""])

    anchors = [entry["anchor"] for entry in bindings.imports if entry["anchor"]]
    if anchors:
        lines.append("type (")
        for i, anchor in enumerate(anchors):
            comment = " // prevent unused import errors" if i == 0 else ""
            lines.append(f"\t_ *{anchor}{comment}")
        lines.extend([")", ""])

    lines.extend([
        "var (",
        f"\t{DOCUMENT_VAR} = {bindings.document}",
        ")",
        "",
    ])
    return "\n".join(lines)


def typeDefinition_render(
    component: Component, refs: Iterable, bindings: BindingTable
) -> str:
    """
    Go struct for a component

    One field per ref, typed by the included component type or the tag's
    binding type, followed by the roots field.

    Args:
        component: Component naming information
        refs: (ref name, RefEntry) pairs in declaration order
        bindings: Binding table for field types

    Returns:
        Source comment and struct definition
    """
    lines = [
        f"// source: {component.path}",
        f"type {component.type_name} struct {{",
    ]
    for ref, entry in refs:
        if entry.type_name:
            field_type = "*" + entry.type_name
        else:
            field_type = bindings.fieldType_get(entry.tag_name)
        lines.append(f"\t{ref} {field_type}")
    lines.append(f"\t{appsettings.roots_field} []*{bindings.generic_element}")
    lines.append("}")
    return "\n".join(lines) + "\n"


class ConstructorWriter:
    """
    Statements of one component's constructor function

    The compiler calls one method per emitted element, attribute, text run
    and include, in document order; function_render() wraps them into the
    finished function.
    """

    def __init__(self, component: Component, bindings: BindingTable) -> None:
        self.component = component
        self.bindings = bindings
        self.lines: List[str] = []

    def statement_add(self, statement: str, depth: int = 1) -> None:
        self.lines.append("\t" * depth + statement)

    def element_create(self, var_name: str, tag_name: str) -> None:
        self.statement_add(
            f"{var_name} := {DOCUMENT_VAR}.CreateElement({goString_quote(tag_name)}, nil)"
        )

    def attribute_set(self, var_name: str, key: str, value: str) -> None:
        self.statement_add(
            f"{var_name}.SetAttribute({goString_quote(key)}, {goString_quote(value)})"
        )

    def text_set(self, parent_var: str, literal_var: str, text: str) -> None:
        self.statement_add(f"{literal_var} := {goString_quote(text)}")
        self.statement_add(f"{parent_var}.SetTextContent(&{literal_var})")

    def include_construct(self, var_name: str, constructor_name: str) -> None:
        self.statement_add(f"{var_name} := {constructor_name}()")

    def child_append(self, parent_var: str, child_var: str) -> None:
        self.statement_add(f"{parent_var}.AppendChild(&{child_var}.Node)")

    def includeRoots_append(self, parent_var: str, include_var: str) -> None:
        """Append every root of an included component to the parent"""
        self.statement_add(f"for _, r := range {include_var}.{appsettings.roots_field} {{")
        self.statement_add(f"{parent_var}.AppendChild(&r.Node)", depth=2)
        self.statement_add("}")

    def returnValue_render(self, ref: str, entry: RefEntry) -> str:
        """Field value for a ref, converted to the tag's binding type"""
        if entry.type_name:
            return entry.var_name
        names = self.bindings.names_get(entry.tag_name)
        if names is None:
            return entry.var_name
        return f"{names[1]}({entry.var_name})"

    def function_render(self, refs: Iterable, roots: List[ScopeFrame]) -> str:
        """
        Finished constructor function and roots accessor

        Args:
            refs: (ref name, RefEntry) pairs in declaration order
            roots: Root frames in document order

        Returns:
            Go source for the constructor and the roots accessor method
        """
        component = self.component
        roots_field = appsettings.roots_field
        element_type = f"[]*{self.bindings.generic_element}"
        body = list(self.lines)

        roots_value: Optional[str]
        if any(frame.include_is() for frame in roots):
            body.append(f"\tvar {roots_field} {element_type}")
            for frame in roots:
                spread = f".{roots_field}..." if frame.include_is() else ""
                body.append(f"\t{roots_field} = append({roots_field}, {frame.var_name}{spread})")
            roots_value = roots_field
        else:
            roots_value = f"{element_type}{{{', '.join(frame.var_name for frame in roots)}}}"

        body.append(f"\treturn &{component.type_name}{{")
        for ref, entry in refs:
            body.append(f"\t\t{ref}: {self.returnValue_render(ref, entry)},")
        body.append(f"\t\t{roots_field}: {roots_value},")
        body.append("\t}")

        accessor = appsettings.rootsAccessor_name()
        return "\n".join([
            f"func {component.constructor_name}() *{component.type_name} {{",
            *body,
            "}",
            "",
            f"func (v *{component.type_name}) {accessor}() {element_type} {{",
            f"\treturn v.{roots_field}",
            "}",
        ]) + "\n"
