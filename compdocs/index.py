# compdocs/index.py
"""Navigation index: entries grouped by kind or first category."""

from typing import Dict, Iterable, List

from .config import DocgenConfig
from .registry import KIND_COMPONENT, KIND_UI, ComponentEntry

KIND_BUCKETS = {
    KIND_COMPONENT: "Components",
    KIND_UI: "UI",
}
DEFAULT_BUCKET = "Uncategorized"


INDEX_FRONT_MATTER = (
    "---\n"
    'title: "All Components"\n'
    'description: "Browse all available components in the collection"\n'
    "---\n"
)


def sort_key(entry: ComponentEntry) -> str:
    """Case-insensitive name order within a bucket."""
    return entry.name.lower()


def group_entries(entries: Iterable[ComponentEntry]) -> Dict[str, List[ComponentEntry]]:
    """
    Partition entries into index buckets.

    Buckets come in order: kind buckets, the default bucket, then
    categories as first seen. Mapped kinds go to their kind bucket
    whatever their categories; other entries go to their first
    category, else the default bucket. Empty buckets are dropped.
    """
    groups: Dict[str, List[ComponentEntry]] = {bucket: [] for bucket in KIND_BUCKETS.values()}
    groups[DEFAULT_BUCKET] = []

    for entry in entries:
        if entry.kind in KIND_BUCKETS:
            groups[KIND_BUCKETS[entry.kind]].append(entry)
        elif entry.categories:
            groups.setdefault(entry.categories[0], []).append(entry)
        else:
            groups[DEFAULT_BUCKET].append(entry)

    return {bucket: items for bucket, items in groups.items() if items}


def render_index(entries: Iterable[ComponentEntry], config: DocgenConfig = None) -> str:
    config = config or DocgenConfig()
    sections = []
    for bucket, items in group_entries(entries).items():
        lines = [
            f"- [{e.title}]({config.docs_route}/{e.name}) - {e.description}".rstrip()
            for e in sorted(items, key=sort_key)
        ]
        sections.append(f"## {bucket}\n\n" + "\n".join(lines) + "\n")
    return INDEX_FRONT_MATTER + "\n" + "\n".join(sections)
