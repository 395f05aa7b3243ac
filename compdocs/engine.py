# compdocs/engine.py
"""
Documentation generation engine.

A run goes through:
1. Loading and filtering the registry
2. Clearing and recreating the output directory
3. Rendering every entry concurrently (one task per entry)
4. Writing the index, meta.json and the layout config patch

Only a failed source read is handled per entry (the page gets a
placeholder and the run reports success=False); every other error
aborts the run.
"""

import asyncio
import logging
import shutil
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from .config import DocgenConfig
from .index import render_index
from .layout import patch_layout_config
from .registry import ComponentEntry, load_registry
from .render import SOURCE_UNAVAILABLE, render_document

logger = logging.getLogger(__name__)

META_FILE = "meta.json"


def read_entry_source(entry: ComponentEntry, config: DocgenConfig) -> Tuple[Optional[str], Optional[Exception]]:
    """
    Read the entry's primary file.

    Returns (None, None) when the entry has no files. A file that cannot
    be read or decoded gives the placeholder source and the error.
    """
    primary = entry.primary_file
    if primary is None:
        return None, None
    try:
        return config.resolve(primary.path).read_text(encoding="utf-8"), None
    except (OSError, UnicodeDecodeError) as e:
        return SOURCE_UNAVAILABLE, e


@dataclass
class GenerationEvent:
    """Progress update for a run or a single entry."""
    stage: str    # "registry", "output", "entry", "index", "meta", "layout", "run"
    status: str   # "started", "completed", "skipped", "failed"
    message: str = ""
    entry: Optional[str] = None


# Progress callback type
ProgressCallback = Callable[[GenerationEvent], None]


@dataclass
class GenerationResult:
    """Result of a generation run."""
    success: bool
    documents: List[Path] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)  # entries rendered with the placeholder
    index_path: Optional[Path] = None
    skipped: bool = False
    elapsed: float = 0.0


class Generator:
    """
    Generates one document per documentable registry entry.

    All output goes under config.docs_dir, which is owned by the
    generator for the duration of a run.
    """

    def __init__(self, config: DocgenConfig, progress_callback: ProgressCallback = None):
        self.config = config
        self._progress_callback = progress_callback
        self._failed: List[str] = []

    def set_progress_callback(self, callback: ProgressCallback):
        """Set callback for progress updates."""
        self._progress_callback = callback

    def _report(self, stage: str, status: str, message: str = "", entry: str = None):
        event = GenerationEvent(stage=stage, status=status, message=message, entry=entry)
        level = logging.WARNING if status == "failed" else logging.INFO
        logger.log(level, f"[{stage}] {message}")
        if self._progress_callback:
            try:
                self._progress_callback(event)
            except Exception as e:
                logger.warning(f"Progress callback error: {e}")

    def load_entries(self) -> List[ComponentEntry]:
        """Load the registry and keep the documentable entries."""
        registry = load_registry(self.config.registry_file)
        entries = registry.documentable(self.config.documentable_kinds)
        self._report("registry", "completed", f"Found {len(entries)} components to document")
        return entries

    def check_output_dir(self, entries: List[ComponentEntry]):
        """
        Refuse an output directory that would take inputs with it.

        Raises ValueError when docs_dir is the project root or one of its
        parents, or when it holds the registry, the meta template, the
        layout config or an entry's file.
        """
        docs_dir = self.config.docs_dir.resolve()
        root = self.config.project_root.resolve()
        if docs_dir == root or docs_dir in root.parents:
            raise ValueError(f"Output directory {docs_dir} contains the project root {root}")

        inputs = [self.config.registry_file]
        for extra in (self.config.meta_template, self.config.layout_config):
            if extra is not None:
                inputs.append(self.config.resolve(extra))
        inputs.extend(self.config.resolve(f.path) for entry in entries for f in entry.files)
        for path in inputs:
            if path.resolve().is_relative_to(docs_dir):
                raise ValueError(f"Output directory {docs_dir} contains input file {path}")

    def prepare_output_dir(self, entries: List[ComponentEntry] = ()) -> Path:
        """Remove the output directory if present and recreate it empty."""
        self.check_output_dir(entries)
        docs_dir = self.config.docs_dir
        try:
            shutil.rmtree(docs_dir)
            self._report("output", "completed", "Removed existing docs directory")
        except FileNotFoundError:
            pass
        docs_dir.mkdir(parents=True, exist_ok=True)
        self._report("output", "completed", "Created docs directory")
        return docs_dir

    async def read_source(self, entry: ComponentEntry) -> Optional[str]:
        source, error = await asyncio.to_thread(read_entry_source, entry, self.config)
        if error is not None:
            self._failed.append(entry.name)
            self._report("entry", "failed", f"Failed to read file for {entry.name}: {error}", entry.name)
        return source

    async def generate_document(self, entry: ComponentEntry) -> Path:
        source = await self.read_source(entry)
        document = render_document(entry, source, self.config)
        doc_path = self.config.doc_path(entry.name)
        await asyncio.to_thread(doc_path.write_text, document, encoding="utf-8")
        self._report("entry", "completed", f"Generated docs for {entry.name}", entry.name)
        return doc_path

    async def generate_documents(self, entries: List[ComponentEntry]) -> List[Path]:
        """Render all entries concurrently; waits for every task before raising."""
        results = await asyncio.gather(
            *(self.generate_document(entry) for entry in entries),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result
        return list(results)

    def write_index(self, entries: List[ComponentEntry]) -> Path:
        index_path = self.config.doc_path("index")
        index_path.write_text(render_index(entries, self.config), encoding="utf-8")
        self._report("index", "completed", "Generated component index page")
        return index_path

    def copy_meta(self) -> Optional[Path]:
        """Copy the static meta.json template into the output directory."""
        if self.config.meta_template is None:
            return None
        template = self.config.resolve(self.config.meta_template)
        if not template.exists():
            self._report("meta", "skipped", f"No meta template at {template}")
            return None
        target = self.config.docs_dir / META_FILE
        shutil.copyfile(template, target)
        self._report("meta", "completed", f"Copied {template.name} to {target}")
        return target

    def patch_layout(self, entries: List[ComponentEntry]) -> bool:
        if self.config.layout_config is None or not entries:
            return False
        url = f"{self.config.docs_route}/{entries[0].name}"
        changed = patch_layout_config(
            self.config.resolve(self.config.layout_config),
            url,
            self.config.layout_marker,
        )
        self._report("layout", "completed" if changed else "skipped", f"Layout link -> {url}")
        return changed

    async def run_async(self) -> GenerationResult:
        start_time = time.time()
        self._report("run", "started", "Starting documentation generation...")

        entries = self.load_entries()
        if not entries:
            self._report("run", "skipped", "No components found in registry")
            return GenerationResult(success=True, skipped=True, elapsed=time.time() - start_time)

        self._failed = []
        self.prepare_output_dir(entries)
        documents = await self.generate_documents(entries)
        index_path = self.write_index(entries)
        self.copy_meta()
        self.patch_layout(entries)

        self._report("run", "completed", "Documentation generation completed successfully!")
        failed = [entry.name for entry in entries if entry.name in self._failed]
        return GenerationResult(
            success=not failed,
            documents=documents,
            failed=failed,
            index_path=index_path,
            elapsed=time.time() - start_time,
        )

    def run(self) -> GenerationResult:
        """Run a full generation; fatal errors propagate to the caller."""
        return asyncio.run(self.run_async())


def generate_docs(config: DocgenConfig, progress_callback: ProgressCallback = None) -> GenerationResult:
    """Convenience wrapper: build a Generator and run it."""
    return Generator(config, progress_callback).run()
