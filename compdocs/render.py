# compdocs/render.py
"""
MDX document rendering for registry entries.

A document is assembled from:
- front-matter (title, description)
- preview/code tabs (example and verbatim source)
- installation command
- usage snippet
- props or, failing that, standalone type definitions
- free-text docs and dependency lists
"""

import json
import logging
from pathlib import PurePosixPath
from typing import List, Optional

from .config import DocgenConfig
from .extract import SourceExtract, extract_source
from .registry import ComponentEntry
from .synthesis import create_example_usage, preview_usage

logger = logging.getLogger(__name__)

SOURCE_UNAVAILABLE = "// Component source code not available"
SOURCE_EXTENSIONS = (".tsx", ".ts", ".jsx", ".js")

_TAB_IMPORTS = (
    'import { Tabs as STabs, TabsContent as STabsContent, TabsList as STabsList, '
    'TabsTrigger as STabsTrigger } from "@/components/ui/tabs";\n'
    'import { Card, CardContent } from "@/components/ui/card";'
)


def install_import_path(entry: ComponentEntry) -> str:
    """Path the component lands at after `shadcn add`."""
    if entry.is_ui:
        return f"@/components/ui/{entry.name}"
    return f"@/components/{entry.name}"


def resolve_import_path(entry: ComponentEntry, config: DocgenConfig = None) -> str:
    """
    Import path of the component inside this project.

    Uses the file named `<name>.<ext>` when the entry has one, with the
    source root swapped for its alias and the extension dropped.
    Otherwise falls back to the kind-based install path.
    """
    config = config or DocgenConfig()
    for file in entry.files:
        path = PurePosixPath(file.path)
        if path.stem == entry.name and path.suffix in SOURCE_EXTENSIONS:
            import_path = str(path.with_suffix(""))
            if import_path.startswith(config.source_root):
                import_path = config.source_alias + import_path[len(config.source_root):]
            return import_path
    return install_import_path(entry)


def _fence(lang: str, body: str) -> str:
    return f"```{lang}\n{body}\n```"


def _front_matter(entry: ComponentEntry) -> str:
    title = json.dumps(entry.title, ensure_ascii=False)
    description = json.dumps(entry.description, ensure_ascii=False)
    return f"---\ntitle: {title}\ndescription: {description}\n---"


def _tabs(preview: str, source: str) -> str:
    return "\n".join([
        '<STabs defaultValue="preview">',
        "  <STabsList>",
        '    <STabsTrigger value="preview">Preview</STabsTrigger>',
        '    <STabsTrigger value="code">Code</STabsTrigger>',
        "  </STabsList>",
        '  <STabsContent value="preview">',
        "    <Card>",
        '      <CardContent className="grid place-content-center min-h-96">',
        f"        {preview}",
        "      </CardContent>",
        "    </Card>",
        "  </STabsContent>",
        '  <STabsContent value="code">',
        _fence("tsx", source.strip()),
        "  </STabsContent>",
        "</STabs>",
    ])


def _installation(entry: ComponentEntry, config: DocgenConfig) -> str:
    command = f"npx shadcn@latest add {config.registry_url}/{entry.name}.json"
    return "## Installation\n\n" + _fence("package-install", command)


def _usage(entry: ComponentEntry, example: str) -> str:
    body = (
        f'import {{ {entry.component_name} }} from "{install_import_path(entry)}";\n'
        "\n"
        "export default function Example() {\n"
        f"  return {example}\n"
        "}"
    )
    return "## Usage\n\n" + _fence("tsx", body)


def _props(extract: SourceExtract) -> Optional[str]:
    if extract.props_interface:
        return "## Props\n\n" + _fence("tsx", extract.props_interface)
    if extract.type_definitions:
        return "## Types\n\n" + _fence("tsx", "\n\n".join(extract.type_definitions))
    return None


def _dependencies(entry: ComponentEntry, config: DocgenConfig) -> List[str]:
    sections = []
    if entry.dependencies:
        items = "\n".join(f"- `{dep}`" for dep in entry.dependencies)
        sections.append(f"## Dependencies\n\nThis component depends on:\n\n{items}")
    if entry.registry_dependencies:
        items = "\n".join(
            f"- [{dep}]({config.docs_route}/{dep})" for dep in entry.registry_dependencies
        )
        sections.append(f"## Registry dependencies\n\nInstalled alongside:\n\n{items}")
    return sections


def render_document(entry: ComponentEntry, source: Optional[str], config: DocgenConfig = None) -> str:
    """
    Render the MDX page for one entry.

    Args:
        entry: Registry entry being documented
        source: Raw text of the entry's primary file; None when it has none
        config: Generator settings (registry URL, import aliases)

    Returns:
        Document text ending in a single newline
    """
    config = config or DocgenConfig()
    if source is None:
        source = SOURCE_UNAVAILABLE

    extract = extract_source(source)
    name = entry.component_name
    example = create_example_usage(name, extract.props_interface, source)
    logger.debug(f"{entry.name}: {len(extract.props)} props, example of {len(example)} chars")

    header = "\n".join([
        _TAB_IMPORTS,
        f'import {{ {name} }} from "{resolve_import_path(entry, config)}";',
    ])

    sections = [
        _front_matter(entry),
        header,
        _tabs(preview_usage(name, example), source),
        _installation(entry, config),
        _usage(entry, example),
        _props(extract),
        entry.docs.strip(),
        *_dependencies(entry, config),
    ]
    return "\n\n".join(s for s in sections if s) + "\n"
