# compdocs/layout.py
"""
Placeholder patching for the site's layout config.

The layout source carries one line ending in a marker comment:

    url: "/components", // compdocs:first-component

Each generation run rewrites the quoted URL on that line to point at the
first generated page. Only marked lines are touched.
"""

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

_URL_VALUE = re.compile(r"""(url\s*:\s*)(["'`])(.*?)\2""")


def patch_line(line: str, url: str) -> str:
    """Replace the first quoted `url:` value on a line."""
    return _URL_VALUE.sub(lambda m: f"{m.group(1)}{m.group(2)}{url}{m.group(2)}", line, count=1)


def patch_layout_config(path: Path | str, url: str, marker: str) -> bool:
    """
    Point every marked line of a layout config at url.

    Returns:
        True if the file was rewritten
    """
    path = Path(path)
    if not path.exists():
        logger.warning(f"Layout config not found, skipping: {path}")
        return False

    original = path.read_text(encoding="utf-8")
    lines = original.splitlines(keepends=True)
    patched = [
        patch_line(line, url) if line.rstrip().endswith(marker) else line
        for line in lines
    ]
    content = "".join(patched)
    if content == original:
        return False

    path.write_text(content, encoding="utf-8")
    logger.info(f"Patched {path} -> {url}")
    return True
