"""
Element binding tables for generated source

A binding table maps HTML tag names to the concrete element types of the
target UI-binding API, and describes the header the generated source needs
(imports and the document handle). Tables are YAML files:

  - assets/bindings/webapi.yaml: github.com/gowebapi/webapi (default)
  - any other file with the same keys, selected via settings or options
"""

import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ..config import appsettings
from .errors import BindingsError


DEFAULT_BINDINGS_FILE = Path(__file__).parent.parent / "assets" / "bindings" / "webapi.yaml"

REQUIRED_KEYS = (
    "document",
    "generic_element",
    "imports",
    "type_format",
    "constructor_format",
    "elements",
)


class BindingTable:
    """
    Represents one element binding table.

    Attributes:
        name: Table name (e.g., "webapi")
        document: Go expression yielding the document handle
        generic_element: Type used for unmapped tags and for roots
        imports: List of {"path": ..., "anchor": ...} dicts
        elements: Tag name -> (package, type)
    """

    def __init__(self, config: Dict[str, Any], source: str = "<memory>") -> None:
        """
        Build a binding table from parsed configuration.

        Args:
            config: Parsed YAML mapping
            source: Where the configuration came from, for error messages

        Raises:
            BindingsError: If required keys are missing or malformed
        """
        self.source = source
        if not isinstance(config, dict):
            raise BindingsError(f"{source}: binding table must be a mapping")

        missing = [key for key in REQUIRED_KEYS if key not in config]
        if missing:
            raise BindingsError(f"{source}: binding table missing keys: {', '.join(missing)}")

        self.name: str = str(config.get("name", Path(source).stem))
        self.document: str = str(config["document"])
        self.generic_element: str = str(config["generic_element"])
        self.type_format: str = str(config["type_format"])
        self.constructor_format: str = str(config["constructor_format"])

        self.imports: List[Dict[str, str]] = []
        for entry in config["imports"] or []:
            if not isinstance(entry, dict) or "path" not in entry:
                raise BindingsError(f"{source}: malformed import entry: {entry!r}")
            self.imports.append({"path": str(entry["path"]), "anchor": str(entry.get("anchor", ""))})

        self.elements: Dict[str, Tuple[str, str]] = {}
        for tag, value in (config["elements"] or {}).items():
            if not isinstance(value, (list, tuple)) or len(value) != 2:
                raise BindingsError(f"{source}: element '{tag}' must map to [package, type]")
            self.elements[str(tag)] = (str(value[0]), str(value[1]))

    @classmethod
    def table_load(cls, path: Optional[str] = None) -> "BindingTable":
        """
        Load a binding table from a YAML file.

        Args:
            path: Table file; None uses settings.bindings_file, then the
                  packaged webapi table

        Returns:
            Loaded BindingTable

        Raises:
            BindingsError: If the file is missing, unparsable, or malformed
        """
        table_path = Path(path or appsettings.bindings_file or DEFAULT_BINDINGS_FILE)
        if not table_path.exists():
            raise BindingsError(f"Binding table not found: {table_path}")
        try:
            with open(table_path, 'r', encoding='utf-8') as f:
                config: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise BindingsError(f"Failed to parse {table_path}: {e}")
        except OSError as e:
            raise BindingsError(f"Failed to load {table_path}: {e}")
        return cls(config or {}, source=str(table_path))

    def names_get(self, tag_name: str) -> Optional[Tuple[str, str]]:
        """
        Concrete type and converter function for a tag.

        Args:
            tag_name: Lower-cased tag name

        Returns:
            (type name, constructor-from-handle function name), or None when
            the tag has no specific binding

        Example:
            >>> BindingTable.table_load().names_get('a')
            ('html.HTMLAnchorElement', 'html.HTMLAnchorElementFromJS')
        """
        binding = self.elements.get(tag_name)
        if binding is None:
            return None
        package, type_ = binding
        return (
            self.type_format.format(package=package, type=type_),
            self.constructor_format.format(package=package, type=type_),
        )

    def fieldType_get(self, tag_name: str) -> str:
        """Go field type for a ref on a tag (generic element when unmapped)"""
        names = self.names_get(tag_name)
        if names is None:
            return "*" + self.generic_element
        return "*" + names[0]

    def __repr__(self) -> str:
        return f"BindingTable(name='{self.name}', source='{self.source}')"


_default_table: Optional[BindingTable] = None


def table_default() -> BindingTable:
    """The configured binding table, loaded once per process"""
    global _default_table
    if _default_table is None:
        _default_table = BindingTable.table_load()
    return _default_table
