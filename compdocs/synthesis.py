# compdocs/synthesis.py
"""
Usage example synthesis.

An authored `/* Usage: */` comment always wins. Otherwise a JSX
invocation is built from the discovered props, reusing detected
defaults and falling back to placeholder values chosen by type label.
Output is a pure function of the inputs.
"""

import re
from typing import Dict, List, Optional

from .extract import (
    PropField,
    extract_default_props,
    extract_prop_details,
    extract_usage_example,
)

# First tag of an authored snippet; allows one level of nested tag.
_MARKUP = re.compile(r"<([^>]*|[^<]*<[^>]*>[^<]*)>", re.S)


def _boolean_value(name: str) -> str:
    if name.startswith("is") or any(s in name for s in ("enabled", "active", "visible")):
        return "{true}"
    return "{false}"


def _string_value(name: str) -> str:
    if "class" in name:
        return '"p-4 border rounded"'
    if "children" in name:
        return '"Content goes here"'
    if "id" in name:
        return '"example-id"'
    return '"example"'


_PLACEHOLDERS = {
    "number": "{10}",
    "array": "{[]}",
    "object": "{{}}",
    "function": "{() => {}}",
}


def prop_value(prop: PropField, defaults: Dict[str, str] = None) -> str:
    """Attribute value for a prop: the detected default or a placeholder."""
    defaults = defaults or {}
    if defaults.get(prop.name):
        return defaults[prop.name]

    label = prop.label
    if label == "boolean":
        return _boolean_value(prop.name)
    if label == "string":
        return _string_value(prop.name)
    if label in _PLACEHOLDERS:
        return _PLACEHOLDERS[label]
    return f"{{/* Add your {prop.name} */}}"


def narrow_to_markup(example: str) -> str:
    """Reduce an authored snippet to its first markup tag, if it has one."""
    match = _MARKUP.search(example)
    return match.group(0) if match else example


def render_invocation(component_name: str, props: List[PropField], defaults: Dict[str, str] = None) -> str:
    if not props:
        return f"<{component_name} />"
    attributes = "\n  ".join(f"{prop.name}={prop_value(prop, defaults)}" for prop in props)
    return f"<{component_name}\n  {attributes}\n/>"


def create_example_usage(component_name: str, props_interface: Optional[str], source: str) -> str:
    """
    Build the usage snippet for a component.

    Args:
        component_name: JSX tag name (whitespace-free title)
        props_interface: Extracted props block, if any
        source: Raw component source

    Returns:
        The authored usage example, or a synthesized invocation
    """
    usage = extract_usage_example(source)
    if usage:
        return narrow_to_markup(usage)

    if not props_interface:
        return f"<{component_name} />"

    return render_invocation(
        component_name,
        extract_prop_details(props_interface),
        extract_default_props(source),
    )


def preview_usage(component_name: str, example: str) -> str:
    """Single-line examples are previewed as-is; multi-line ones collapse to a bare tag."""
    if "\n" in example:
        return f"<{component_name} />"
    return example
