"""
Formatting passes for generated output

Source formatters take the whole generated Go file as bytes and return it
formatted, raising FormatterError when the source is not valid. Since the
generator must only ever produce valid source, a FormatterError is a
generator defect.

Formatters:
- gofmt: pipe through the gofmt binary
- builtin: whitespace normalization plus a bracket balance check, for
  machines without a Go toolchain
- auto: gofmt when it is on PATH, builtin otherwise
"""

import re
import shutil
import subprocess
from typing import Callable, Dict, List, Optional, Union

from ..config import appsettings
from .errors import FormatterError
from .log import LOG


Formatter = Callable[[bytes], bytes]

_closers = {')': '(', ']': '[', '}': '{'}


def gofmt_format(source: bytes, binary: Optional[str] = None) -> bytes:
    """
    Format Go source with gofmt

    Args:
        source: Go source
        binary: gofmt executable (default: settings.gofmt_binary)

    Returns:
        Formatted source

    Raises:
        FormatterError: If gofmt is missing or rejects the source
    """
    executable = binary or appsettings.gofmt_binary
    try:
        result = subprocess.run(
            [executable],
            input=source,
            capture_output=True,
            check=False,
        )
    except OSError as e:
        raise FormatterError(f"cannot run {executable}: {e}") from e

    if result.returncode != 0:
        message = result.stderr.decode("utf-8", errors="replace").strip()
        raise FormatterError(f"{executable} rejected generated source: {message}")
    return result.stdout


def brackets_check(text: str) -> None:
    """
    Check that brackets balance outside strings and comments

    Raises:
        FormatterError: On the first unbalanced or mismatched bracket
    """
    stack: List[str] = []
    i, n, line = 0, len(text), 1
    while i < n:
        ch = text[i]
        if ch == '\n':
            line += 1
        elif text.startswith('//', i):
            end = text.find('\n', i)
            i = n if end < 0 else end
            continue
        elif text.startswith('/*', i):
            end = text.find('*/', i + 2)
            if end < 0:
                raise FormatterError(f"line {line}: unterminated comment")
            line += text.count('\n', i, end)
            i = end + 2
            continue
        elif ch in ('"', "'"):
            j = i + 1
            while j < n and text[j] != ch:
                if text[j] == '\n':
                    raise FormatterError(f"line {line}: newline in string literal")
                j += 2 if text[j] == '\\' else 1
            if j >= n:
                raise FormatterError(f"line {line}: unterminated literal")
            i = j + 1
            continue
        elif ch == '`':
            end = text.find('`', i + 1)
            if end < 0:
                raise FormatterError(f"line {line}: unterminated raw string")
            line += text.count('\n', i, end)
            i = end + 1
            continue
        elif ch in '([{':
            stack.append(ch)
        elif ch in _closers:
            if not stack or stack[-1] != _closers[ch]:
                raise FormatterError(f"line {line}: unexpected '{ch}'")
            stack.pop()
        i += 1

    if stack:
        raise FormatterError(f"unclosed '{stack[-1]}' at end of source")


def builtin_format(source: bytes) -> bytes:
    """
    Normalize generated Go source without a Go toolchain

    Strips trailing whitespace, collapses runs of blank lines, and ends the
    file with exactly one newline, after checking bracket balance.

    Raises:
        FormatterError: If the source is not UTF-8 or brackets do not balance
    """
    try:
        text = source.decode("utf-8")
    except UnicodeDecodeError as e:
        raise FormatterError(f"generated source is not UTF-8: {e}") from e

    brackets_check(text)

    lines = [line.rstrip() for line in text.splitlines()]
    text = "\n".join(lines).strip("\n")
    text = re.sub(r'\n{3,}', '\n\n', text)
    return (text + "\n").encode("utf-8")


def gofmt_available(binary: Optional[str] = None) -> bool:
    """Check if the gofmt executable is on PATH"""
    return shutil.which(binary or appsettings.gofmt_binary) is not None


def auto_format(source: bytes) -> bytes:
    """Format with gofmt when available, builtin otherwise"""
    if gofmt_available():
        return gofmt_format(source)
    return builtin_format(source)


FORMATTERS: Dict[str, Formatter] = {
    "gofmt": gofmt_format,
    "builtin": builtin_format,
    "auto": auto_format,
}


def formatter_resolve(spec: Union[str, Formatter, None] = None) -> Formatter:
    """
    Turn a formatter name (or callable) into a formatter

    Args:
        spec: 'gofmt', 'builtin', 'auto', a callable, or None for
              settings.formatter

    Returns:
        Formatter callable

    Raises:
        ValueError: For an unknown formatter name
    """
    if callable(spec):
        return spec
    name = spec or appsettings.formatter
    if name not in FORMATTERS:
        raise ValueError(f"unknown formatter '{name}' (expected one of: {', '.join(FORMATTERS)})")
    if name == "auto":
        LOG(f"Source formatter: {'gofmt' if gofmt_available() else 'builtin'}", level=2)
    else:
        LOG(f"Source formatter: {name}", level=2)
    return FORMATTERS[name]


def stylesheet_format(header: str, blocks: List[str]) -> bytes:
    """
    Assemble and normalize the stylesheet output

    Args:
        header: Banner comment written first
        blocks: Stylesheet blocks, each starting with its source comment

    Returns:
        Header and blocks separated by exactly one blank line, without
        trailing whitespace, ending in a single newline
    """
    parts = []
    for part in [header, *blocks]:
        lines = [line.rstrip() for line in part.strip().splitlines()]
        parts.append("\n".join(lines))
    return ("\n\n".join(parts) + "\n").encode("utf-8")
