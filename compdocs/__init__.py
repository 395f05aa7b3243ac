# compdocs - Documentation generator for shadcn-style component registries
#
# Reads registry.json and the component sources it lists, and writes one
# MDX page per component plus a navigation index.
#
# Core concepts:
# - Registry: The manifest of published components
# - Extractor: Regex heuristics that find props, types and usage comments
# - Synthesizer: Builds a usage example when none is authored
# - Renderer: Assembles the MDX page for one component
# - Generator: Runs the whole pipeline over an output directory

from .config import DocgenConfig
from .registry import ComponentEntry, ComponentFile, Registry, RegistryError, load_registry
from .extract import PropField, SourceExtract, extract_source
from .synthesis import create_example_usage
from .render import render_document, resolve_import_path
from .index import group_entries, render_index
from .engine import Generator, GenerationEvent, GenerationResult, generate_docs

__all__ = [
    # Registry
    "ComponentEntry",
    "ComponentFile",
    "Registry",
    "RegistryError",
    "load_registry",
    # Extraction and rendering
    "PropField",
    "SourceExtract",
    "extract_source",
    "create_example_usage",
    "render_document",
    "resolve_import_path",
    "group_entries",
    "render_index",
    # Running
    "DocgenConfig",
    "Generator",
    "GenerationEvent",
    "GenerationResult",
    "generate_docs",
]

__version__ = "0.1.0"
