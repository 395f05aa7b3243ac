# compdocs/registry/registry.py
"""
Component registry for the docs generator.

The registry is a read-only JSON manifest (shadcn registry.json format):

    {
        "$schema": "https://ui.shadcn.com/schema/registry.json",
        "name": "fasu",
        "homepage": "https://registry.fasu.dev",
        "items": [
            {
                "name": "snippet",
                "title": "Snippet",
                "type": "registry:component",
                "files": [{"path": "src/registry/snippet/snippet.tsx", ...}],
                ...
            }
        ]
    }
"""

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)

KIND_UI = "registry:ui"
KIND_COMPONENT = "registry:component"

KIND_ALIASES = {
    "ui-primitive": KIND_UI,
    "ui": KIND_UI,
    "component": KIND_COMPONENT,
}


class RegistryError(ValueError):
    """Registry file is malformed."""


def _list_field(data: Dict[str, Any], key: str) -> list:
    """Read an optional list field; a string or other scalar is an error."""
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise RegistryError(f"Registry item {data.get('name')!r}: '{key}' must be a list, got {value!r}")
    return list(value)


def normalize_kind(kind: Optional[str]) -> str:
    """Map kind aliases onto registry kinds; unknown kinds are kept."""
    if not kind:
        return ""
    return KIND_ALIASES.get(kind, kind)


@dataclass
class ComponentFile:
    """A source file belonging to a registry entry."""
    path: str
    file_type: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"path": self.path, "type": self.file_type}

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | str) -> "ComponentFile":
        if isinstance(data, str):
            return cls(path=data)
        if not isinstance(data, dict) or not isinstance(data.get("path"), str):
            raise RegistryError(f"Registry file without a path: {data!r}")
        return cls(path=data["path"], file_type=data.get("type", data.get("kind", "")))


@dataclass
class ComponentEntry:
    """
    One documentable item in the registry.

    Attributes:
        name: Unique slug, used for file names and URLs
        title: Display name (may contain spaces)
        kind: Normalized registry kind (registry:ui, registry:component, ...)
        categories: First entry is the index bucket for unmapped kinds
        dependencies: External package names
        registry_dependencies: Names of other registry entries
        files: Source files; the first is documented
    """
    name: str
    title: str = ""
    description: str = ""
    author: str = ""
    docs: str = ""
    kind: str = ""
    categories: List[str] = field(default_factory=list)
    dependencies: List[str] = field(default_factory=list)
    registry_dependencies: List[str] = field(default_factory=list)
    files: List[ComponentFile] = field(default_factory=list)

    def __post_init__(self):
        self.kind = normalize_kind(self.kind)
        if not self.title:
            self.title = self.name

    @property
    def component_name(self) -> str:
        """Title usable as a JSX tag: whitespace removed."""
        return re.sub(r"\s+", "", self.title)

    @property
    def primary_file(self) -> Optional[ComponentFile]:
        return self.files[0] if self.files else None

    @property
    def is_ui(self) -> bool:
        return self.kind == KIND_UI

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "title": self.title,
            "description": self.description,
            "author": self.author,
            "docs": self.docs,
            "type": self.kind,
            "categories": self.categories,
            "dependencies": self.dependencies,
            "registryDependencies": self.registry_dependencies,
            "files": [f.to_dict() for f in self.files],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ComponentEntry":
        if not isinstance(data, dict) or not data.get("name"):
            raise RegistryError(f"Registry item without a name: {data!r}")
        return cls(
            name=data["name"],
            title=data.get("title") or "",
            description=data.get("description") or "",
            author=data.get("author") or "",
            docs=data.get("docs") or "",
            kind=data.get("type") or data.get("kind") or "",
            categories=_list_field(data, "categories"),
            dependencies=_list_field(data, "dependencies"),
            registry_dependencies=_list_field(data, "registryDependencies"),
            files=[ComponentFile.from_dict(f) for f in _list_field(data, "files")],
        )


class Registry:
    """
    An ordered, read-only collection of component entries.

    Entry names are unique; order follows the manifest.
    """

    def __init__(
        self,
        items: Iterable[ComponentEntry] = (),
        name: str = "",
        homepage: str = "",
        schema: str = "",
    ):
        self.name = name
        self.homepage = homepage
        self.schema = schema
        self._items: Dict[str, ComponentEntry] = {}
        for item in items:
            if item.name in self._items:
                raise RegistryError(f"Duplicate registry item: {item.name}")
            self._items[item.name] = item

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Registry":
        if not isinstance(data, dict):
            raise RegistryError("Registry must be a JSON object")
        items = data.get("items") or []
        if not isinstance(items, list):
            raise RegistryError("Registry 'items' must be a list")
        return cls(
            items=[ComponentEntry.from_dict(item) for item in items],
            name=data.get("name", ""),
            homepage=data.get("homepage", ""),
            schema=data.get("$schema", ""),
        )

    @classmethod
    def from_file(cls, path: Path | str) -> "Registry":
        path = Path(path)
        with open(path, encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise RegistryError(f"Invalid JSON in {path}: {e}") from e
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "$schema": self.schema,
            "name": self.name,
            "homepage": self.homepage,
            "items": [item.to_dict() for item in self._items.values()],
        }

    def get(self, name: str) -> Optional[ComponentEntry]:
        """Get an entry by name."""
        return self._items.get(name)

    def list(self) -> List[ComponentEntry]:
        """List all entries in manifest order."""
        return list(self._items.values())

    def documentable(self, kinds: Iterable[str]) -> List[ComponentEntry]:
        """Entries whose kind is in the documentable set, manifest order kept."""
        kinds = {normalize_kind(k) for k in kinds}
        return [item for item in self._items.values() if item.kind in kinds]

    def __contains__(self, name: str) -> bool:
        return name in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items.values())


def load_registry(path: Path | str) -> Registry:
    """
    Load a registry manifest.

    Raises:
        FileNotFoundError: the manifest does not exist
        RegistryError: the manifest is not a well-formed registry
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Registry file not found: {path}")
    registry = Registry.from_file(path)
    logger.debug(f"Loaded {len(registry)} registry items from {path}")
    return registry
