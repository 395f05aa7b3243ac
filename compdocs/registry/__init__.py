# compdocs/registry/__init__.py
"""
Component registry.

Loads the registry.json manifest that lists every published component
along with its source files and dependencies.

Example:
    registry = load_registry("registry.json")
    for entry in registry.documentable(["registry:ui", "registry:component"]):
        print(entry.name, entry.primary_file.path)
"""

from .registry import (
    KIND_COMPONENT,
    KIND_UI,
    ComponentEntry,
    ComponentFile,
    Registry,
    RegistryError,
    load_registry,
    normalize_kind,
)

__all__ = [
    "KIND_COMPONENT",
    "KIND_UI",
    "ComponentEntry",
    "ComponentFile",
    "Registry",
    "RegistryError",
    "load_registry",
    "normalize_kind",
]
