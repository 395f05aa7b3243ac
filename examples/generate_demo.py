#!/usr/bin/env python3
"""
Generate the demo project's component docs.

Runs the full pipeline against examples/demo and prints the files it
wrote, without installing the CLI.
"""

import sys
from pathlib import Path

# Add compdocs to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from compdocs import DocgenConfig, Generator


def main():
    demo_dir = Path(__file__).parent / "demo"
    config_path = demo_dir / "docgen.yaml"
    if not config_path.exists():
        print(f"Config not found: {config_path}")
        return 1

    config = DocgenConfig.from_file(config_path)
    print(f"Registry: {config.registry_file}")
    print(f"Output: {config.docs_dir}")
    print()

    generator = Generator(config, progress_callback=lambda e: print(f"  [{e.stage}] {e.message}"))
    result = generator.run()

    print()
    for path in result.documents:
        print(f"Wrote {path.relative_to(demo_dir)}")
    if result.index_path:
        print(f"Index {result.index_path.relative_to(demo_dir)}")
    if result.failed:
        print(f"Placeholder source used for: {', '.join(result.failed)}")
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
