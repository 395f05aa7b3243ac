# compdocs/config.py
"""
Generator configuration.

A config is a flat YAML mapping whose keys match DocgenConfig fields:

    registry_path: registry.json
    output_dir: src/content/components
    registry_url: https://registry.fasu.dev/r
    layout_config: src/app/layout.config.tsx

Relative paths are resolved against project_root (the config file's
directory when loaded with from_file).
"""

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_KINDS = ["registry:component", "registry:ui"]
DEFAULT_LAYOUT_MARKER = "// compdocs:first-component"

_PATH_FIELDS = ("registry_path", "output_dir", "meta_template", "layout_config")


@dataclass
class DocgenConfig:
    """
    Settings for a generation run.

    Attributes:
        project_root: Directory all relative paths resolve against
        registry_path: registry.json location
        output_dir: Directory that is cleared and rebuilt on each run
        doc_extension: Extension of generated documents
        source_root: Path prefix replaced by source_alias in import paths
        source_alias: Import alias for the source root
        registry_url: Base URL of published registry items
        docs_route: Site route the generated pages are served under
        documentable_kinds: Entry kinds that get a document
        meta_template: Static meta.json copied into output_dir, if present
        layout_config: Layout source file with a placeholder line to patch
        layout_marker: Trailing comment marking the placeholder line
    """
    project_root: Path = field(default_factory=Path.cwd)
    registry_path: Path = Path("registry.json")
    output_dir: Path = Path("src/content/components")
    doc_extension: str = ".mdx"
    source_root: str = "src/"
    source_alias: str = "@/"
    registry_url: str = "https://registry.fasu.dev/r"
    docs_route: str = "/components"
    documentable_kinds: List[str] = field(default_factory=lambda: list(DEFAULT_KINDS))
    meta_template: Optional[Path] = Path("docs-meta.json")
    layout_config: Optional[Path] = None
    layout_marker: str = DEFAULT_LAYOUT_MARKER

    def __post_init__(self):
        self.project_root = Path(self.project_root)
        for name in _PATH_FIELDS:
            value = getattr(self, name)
            if value is not None:
                setattr(self, name, Path(value))
        if not self.doc_extension.startswith("."):
            self.doc_extension = f".{self.doc_extension}"
        self.registry_url = self.registry_url.rstrip("/")
        self.docs_route = "/" + self.docs_route.strip("/")

    def resolve(self, path: Path | str) -> Path:
        """Resolve a path against the project root."""
        path = Path(path)
        if path.is_absolute():
            return path
        return self.project_root / path

    @property
    def registry_file(self) -> Path:
        return self.resolve(self.registry_path)

    @property
    def docs_dir(self) -> Path:
        return self.resolve(self.output_dir)

    def doc_path(self, name: str) -> Path:
        """Output path of the document for an entry name."""
        return self.docs_dir / f"{name}{self.doc_extension}"

    def with_overrides(self, **overrides: Any) -> "DocgenConfig":
        """Return a copy with the non-None overrides applied."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data.update({k: v for k, v in overrides.items() if v is not None})
        return DocgenConfig(**data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], project_root: Path | str = None) -> "DocgenConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        data = dict(data)
        if project_root is not None and "project_root" not in data:
            data["project_root"] = project_root
        return cls(**data)

    @classmethod
    def from_yaml(cls, yaml_content: str, project_root: Path | str = None) -> "DocgenConfig":
        """Parse config from a YAML string."""
        data = yaml.safe_load(yaml_content) or {}
        if not isinstance(data, dict):
            raise ValueError("Config must be a YAML mapping")
        return cls.from_dict(data, project_root=project_root)

    @classmethod
    def from_file(cls, path: Path | str) -> "DocgenConfig":
        """Load config from a YAML file; relative paths resolve against its directory."""
        path = Path(path)
        logger.debug(f"Loading config from {path}")
        config = cls.from_yaml(path.read_text(encoding="utf-8"), project_root=path.parent)
        if not config.project_root.is_absolute():
            config.project_root = (path.parent / config.project_root).resolve()
        return config
