"""
Shared fixtures

Components are served from memory through the generator's opener hook, so
paths in generated output are stable across machines.
"""

import io
from typing import Callable, Dict

import pytest

from nausicaa.lib import generate
from nausicaa.models import GenerateOptions, GenerateResult


class MemoryFiles:
    """In-memory component files keyed by path, with an open counter"""

    def __init__(self, files: Dict[str, str]) -> None:
        self.files = {path: content.encode("utf-8") for path, content in files.items()}
        self.opened: Dict[str, int] = {}

    def open(self, path: str) -> io.BytesIO:
        if path not in self.files:
            raise FileNotFoundError(2, "No such file or directory", path)
        self.opened[path] = self.opened.get(path, 0) + 1
        return io.BytesIO(self.files[path])

    def options(self, **kwargs) -> GenerateOptions:
        kwargs.setdefault("package_name", "ui")
        kwargs.setdefault("formatter", "builtin")
        return GenerateOptions(opener=self.open, **kwargs)

    def generate(self, *paths: str, **kwargs) -> GenerateResult:
        return generate(list(paths), self.options(**kwargs))


@pytest.fixture
def memory_files() -> Callable[[Dict[str, str]], MemoryFiles]:
    """Factory: MemoryFiles serving the given {path: html} components"""
    return MemoryFiles


def _constructor_body(source: bytes, constructor_name: str) -> str:
    """Text of one generated constructor function, up to its closing brace"""
    text = source.decode("utf-8")
    start = text.index(f"func {constructor_name}()")
    end = text.index("\n}\n", start)
    return text[start:end + 2]


@pytest.fixture
def constructor_body() -> Callable[[bytes, str], str]:
    """Function extracting one constructor from generated source"""
    return _constructor_body
