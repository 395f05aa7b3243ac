# compdocs/extract.py
"""
Heuristic extraction of props, types and usage examples from component source.

This is structural regex matching over a short list of authoring
conventions, not a TypeScript parser. Brace matching is not balanced:
a props body ends at the first closing brace, so nested object types
truncate the extracted block.
"""

import re
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

_BASES = (r"ComponentProps", r"HTMLAttributes", r"React\.ComponentProps")


def _props_patterns() -> List[re.Pattern]:
    patterns = [
        r"interface\s+(\w+Props)\s*{([^}]*)}",
        r"type\s+(\w+Props)\s*=\s*{([^}]*)}",
        r"interface\s+Props\s*{([^}]*)}",
        r"type\s+Props\s*=\s*{([^}]*)}",
    ]
    for base in _BASES:
        patterns += [
            rf"type\s+(\w+Props)\s*=\s*{base}<[^>]*>\s*&\s*{{([^}}]*)}}",
            rf"type\s+Props\s*=\s*{base}<[^>]*>\s*&\s*{{([^}}]*)}}",
            rf"interface\s+(\w+Props)\s*extends\s+{base}<[^>]*>\s*{{([^}}]*)}}",
            rf"interface\s+Props\s*extends\s+{base}<[^>]*>\s*{{([^}}]*)}}",
        ]
    return [re.compile(p, re.S) for p in patterns]


def _whole_match(match: re.Match) -> str:
    return match.group(0)


def _inline_props(match: re.Match) -> str:
    return f"type Props = {{\n  {match.group(1).strip()}\n}}"


# Ordered (pattern, handler) pairs; the first pattern that matches wins.
PROPS_MATCHERS: List[Tuple[re.Pattern, Callable[[re.Match], str]]] = [
    (pattern, _whole_match) for pattern in _props_patterns()
] + [
    (re.compile(r"(type|interface)\s+(\w+Props|Props)\s*=?\s*([^;]*?{[^{}]*})", re.S), _whole_match),
    (re.compile(r"function\s+\w+\(\s*{\s*([^}]*)\s*}(\s*:\s*\w+)?\s*\)", re.S), _inline_props),
]

_TYPE_DEFINITION = re.compile(r"(type|interface)\s+\w+\s*=?\s*([^;]*?{[^{}]*})", re.S)
_PROPS_BODY = re.compile(r"{([^}]*)}", re.S)
_PROP_LINE = re.compile(r"(\w+)(\?)?:\s*([^;]+)")
_FUNCTION_PARAMS = re.compile(r"function\s+\w+\(\s*{\s*([^}]*)\s*}")
_PARAM_DEFAULT = re.compile(r"(\w+)\s*=\s*([^,)]+)")
_DEFAULT_CONST = re.compile(r"const\s+DEFAULT_(\w+)\s*=\s*([^;]+)")
_USAGE_COMMENT = re.compile(r"/\*\s*Usage:([\s\S]*?)\*/")
_EXAMPLE_COMMENT = re.compile(r"/\*\s*Example:([\s\S]*?)\*/")

# Label order matters: "() => string" is a string, "boolean[]" a boolean.
_LABEL_RULES = (
    ("boolean", ("boolean",)),
    ("string", ("string",)),
    ("number", ("number",)),
    ("array", ("array", "[]")),
    ("object", ("object", "{}")),
    ("function", ("function", "=>")),
)


@dataclass
class PropField:
    """A field discovered in a props declaration."""
    name: str
    required: bool
    type: str

    @property
    def label(self) -> str:
        """Coarse type label: boolean, string, number, array, object, function or unknown."""
        for label, needles in _LABEL_RULES:
            if any(needle in self.type for needle in needles):
                return label
        return "unknown"


@dataclass
class SourceExtract:
    """Everything the extractor found in one source file."""
    props_interface: Optional[str] = None
    props: List[PropField] = field(default_factory=list)
    type_definitions: List[str] = field(default_factory=list)
    usage_example: Optional[str] = None
    default_props: Dict[str, str] = field(default_factory=dict)


def extract_props_interface(source: str) -> Optional[str]:
    """Find the component's props declaration, or None."""
    for pattern, handler in PROPS_MATCHERS:
        match = pattern.search(source)
        if match:
            return handler(match)
    return None


def extract_prop_details(props_interface: Optional[str]) -> List[PropField]:
    """Parse `name?: type` lines from the first braced body of a props block."""
    if not props_interface:
        return []

    body = _PROPS_BODY.search(props_interface)
    if not body:
        return []

    props = []
    for line in body.group(1).split("\n"):
        line = line.strip()
        if not line or line.startswith("//"):
            continue
        match = _PROP_LINE.search(line)
        if match:
            props.append(PropField(
                name=match.group(1),
                required=not match.group(2),
                type=match.group(3).strip(),
            ))
    return props


def extract_default_props(source: str) -> Dict[str, str]:
    """
    Collect default values for props.

    Looks at `name = value` pairs in the first destructured function
    parameter list, then at `const DEFAULT_<NAME> = value` constants
    (keyed by the lowercased name).
    """
    defaults: Dict[str, str] = {}

    params = _FUNCTION_PARAMS.search(source)
    if params and params.group(1):
        for match in _PARAM_DEFAULT.finditer(params.group(1)):
            defaults[match.group(1)] = match.group(2).strip()

    for match in _DEFAULT_CONST.finditer(source):
        defaults[match.group(1).lower()] = match.group(2).strip()

    return defaults


def extract_type_definitions(source: str) -> List[str]:
    """All standalone type/interface declarations with a braced body."""
    return [
        match.group(0)
        for match in _TYPE_DEFINITION.finditer(source)
        if "{" in match.group(0) and "}" in match.group(0)
    ]


def extract_usage_example(source: str) -> Optional[str]:
    """Content of the first `/* Usage: */` comment, else the first `/* Example: */`."""
    for pattern in (_USAGE_COMMENT, _EXAMPLE_COMMENT):
        match = pattern.search(source)
        if match and match.group(1).strip():
            return match.group(1).strip()
    return None


def extract_source(source: str) -> SourceExtract:
    props_interface = extract_props_interface(source)
    return SourceExtract(
        props_interface=props_interface,
        props=extract_prop_details(props_interface),
        type_definitions=extract_type_definitions(source),
        usage_example=extract_usage_example(source),
        default_props=extract_default_props(source),
    )
