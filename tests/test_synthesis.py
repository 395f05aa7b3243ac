# tests/test_synthesis.py
"""Tests for usage example synthesis."""

import pytest

from compdocs.extract import PropField
from compdocs.synthesis import (
    create_example_usage,
    narrow_to_markup,
    preview_usage,
    prop_value,
)


class TestCreateExampleUsage:
    """Test create_example_usage."""

    def test_usage_comment_is_authoritative(self):
        """An authored usage comment wins over declared props."""
        source = (
            "type Props = { command: string; loud: boolean }\n"
            '/* Usage:\n<Snippet command="ls" />\n*/\n'
        )
        result = create_example_usage("Snippet", "type Props = { command: string; loud: boolean }", source)
        assert result == '<Snippet command="ls" />'

    def test_usage_comment_narrowed_to_markup(self):
        """Only the first tag of a full snippet is kept."""
        source = "/* Usage:\nexport default function Demo() {\n  return <Badge tone=\"info\" />;\n}\n*/"
        assert create_example_usage("Badge", None, source) == '<Badge tone="info" />'

    def test_usage_comment_without_markup(self):
        """Snippets without a tag are returned verbatim."""
        source = "/* Example: call Badge() directly */"
        assert create_example_usage("Badge", None, source) == "call Badge() directly"

    def test_no_props(self):
        """No props block gives a bare self-closing tag."""
        assert create_example_usage("StatusDot", None, "export const x = 1;") == "<StatusDot />"

    def test_props_without_fields(self):
        """A props block with no parsed fields also gives a bare tag."""
        assert create_example_usage("Empty", "type Props = {}", "type Props = {}") == "<Empty />"

    def test_props_synthesized(self):
        """Each prop gets one attribute line."""
        source = (
            "type StatusDotProps = {\n"
            "  isOnline: boolean;\n"
            "  label?: string;\n"
            "  size?: number;\n"
            "  onToggle?: () => void;\n"
            "};\n"
            "export function StatusDot({ isOnline, label, size = 8, onToggle }: StatusDotProps) {}\n"
        )
        props_interface = (
            "type StatusDotProps = {\n"
            "  isOnline: boolean;\n"
            "  label?: string;\n"
            "  size?: number;\n"
            "  onToggle?: () => void;\n"
            "}"
        )
        assert create_example_usage("StatusDot", props_interface, source) == (
            "<StatusDot\n"
            "  isOnline={true}\n"
            '  label="example"\n'
            "  size=8\n"
            "  onToggle={() => {}}\n"
            "/>"
        )

    def test_unknown_type_placeholder(self):
        """Unknown types get a placeholder comment."""
        result = create_example_usage("Card", "type Props = {\n  icon: ReactNode;\n}", "")
        assert result == "<Card\n  icon={/* Add your icon */}\n/>"

    def test_deterministic(self):
        """Same inputs, same snippet."""
        props = "type Props = {\n  items: string[];\n  open: boolean;\n}"
        assert create_example_usage("List", props, "") == create_example_usage("List", props, "")


class TestPropValue:
    """Test per-prop value heuristics."""

    @pytest.mark.parametrize("name,expected", [
        ("isOpen", "{true}"),
        ("enabledByDefault", "{true}"),
        ("active", "{true}"),
        ("visible", "{true}"),
        ("disabled", "{false}"),
        ("loud", "{false}"),
    ])
    def test_boolean(self, name, expected):
        assert prop_value(PropField(name, True, "boolean")) == expected

    @pytest.mark.parametrize("name,expected", [
        ("className", '"p-4 border rounded"'),
        ("children", '"Content goes here"'),
        ("id", '"example-id"'),
        ("title", '"example"'),
    ])
    def test_string(self, name, expected):
        assert prop_value(PropField(name, True, "string")) == expected

    def test_other_labels(self):
        assert prop_value(PropField("count", True, "number")) == "{10}"
        assert prop_value(PropField("items", True, "Item[]")) == "{[]}"
        assert prop_value(PropField("style", True, "{}")) == "{{}}"
        assert prop_value(PropField("onClose", True, "() => void")) == "{() => {}}"

    def test_default_reused(self):
        """A detected default beats the heuristics."""
        assert prop_value(PropField("size", False, "number"), {"size": "{24}"}) == "{24}"

    def test_empty_default_ignored(self):
        assert prop_value(PropField("size", False, "number"), {"size": ""}) == "{10}"


def test_narrow_to_markup():
    assert narrow_to_markup("<A>\n  <B />\n</A>") == "<A>"
    assert narrow_to_markup("no markup") == "no markup"


def test_preview_usage():
    assert preview_usage("A", '<A x="1" />') == '<A x="1" />'
    assert preview_usage("A", "<A\n  x={1}\n/>") == "<A />"
