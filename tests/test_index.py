# tests/test_index.py
"""Tests for the navigation index."""

from compdocs.config import DocgenConfig
from compdocs.index import DEFAULT_BUCKET, group_entries, render_index
from compdocs.registry import ComponentEntry


class TestGroupEntries:
    """Test bucket assignment."""

    def test_ui_primitive_ignores_categories(self):
        """ui-primitive entries always land in UI."""
        groups = group_entries([ComponentEntry(name="badge", kind="ui-primitive", categories=["forms"])])
        assert list(groups) == ["UI"]
        assert groups["UI"][0].name == "badge"

    def test_component_bucket(self):
        groups = group_entries([ComponentEntry(name="snippet", kind="component", categories=["display"])])
        assert list(groups) == ["Components"]

    def test_unmapped_kind_uses_first_category(self):
        groups = group_entries([
            ComponentEntry(name="hero", kind="registry:block", categories=["marketing", "layout"]),
        ])
        assert list(groups) == ["marketing"]

    def test_default_bucket(self):
        """No mapped kind and no categories: default bucket."""
        groups = group_entries([ComponentEntry(name="misc", kind="registry:block")])
        assert list(groups) == [DEFAULT_BUCKET]

    def test_empty_buckets_dropped_and_order(self):
        """Kind buckets, then the default bucket, then categories."""
        groups = group_entries([
            ComponentEntry(name="misc", kind="registry:block"),
            ComponentEntry(name="hero", kind="registry:block", categories=["marketing"]),
            ComponentEntry(name="badge", kind="registry:ui"),
        ])
        assert list(groups) == ["UI", DEFAULT_BUCKET, "marketing"]

    def test_default_bucket_before_categories(self):
        """Uncategorized precedes category buckets even when seen last."""
        groups = group_entries([
            ComponentEntry(name="hero", kind="registry:block", categories=["marketing"]),
            ComponentEntry(name="footer", kind="registry:block", categories=["layout"]),
            ComponentEntry(name="misc", kind="registry:block"),
            ComponentEntry(name="snippet", kind="component"),
        ])
        assert list(groups) == ["Components", DEFAULT_BUCKET, "marketing", "layout"]

    def test_no_entries(self):
        assert group_entries([]) == {}


class TestRenderIndex:
    """Test index rendering."""

    def test_render(self):
        entries = [
            ComponentEntry(name="terminal", title="Terminal", kind="component", description="Animated shell."),
            ComponentEntry(name="snippet", title="Snippet", kind="component", description="Copyable command."),
            ComponentEntry(name="badge", title="Badge", kind="ui", description="Inline label."),
        ]
        content = render_index(entries, DocgenConfig())

        assert content == (
            "---\n"
            'title: "All Components"\n'
            'description: "Browse all available components in the collection"\n'
            "---\n"
            "\n"
            "## Components\n"
            "\n"
            "- [Snippet](/components/snippet) - Copyable command.\n"
            "- [Terminal](/components/terminal) - Animated shell.\n"
            "\n"
            "## UI\n"
            "\n"
            "- [Badge](/components/badge) - Inline label.\n"
        )

    def test_custom_route(self):
        config = DocgenConfig(docs_route="docs/ui/")
        content = render_index([ComponentEntry(name="a", kind="ui", description="x")], config)
        assert "- [a](/docs/ui/a) - x" in content

    def test_sort_is_case_insensitive(self):
        """Mixed-case names sort alphabetically, not by code point."""
        entries = [
            ComponentEntry(name="Zeta", kind="component", description="z"),
            ComponentEntry(name="alpha", kind="component", description="a"),
            ComponentEntry(name="Beta", kind="component", description="b"),
        ]
        content = render_index(entries, DocgenConfig())
        lines = [line for line in content.splitlines() if line.startswith("- ")]
        assert lines == [
            "- [alpha](/components/alpha) - a",
            "- [Beta](/components/Beta) - b",
            "- [Zeta](/components/Zeta) - z",
        ]
