#!/usr/bin/env python3
"""
compdocs CLI

Generate component documentation from a shadcn-style registry:
  compdocs generate - Rebuild every component page and the index
  compdocs render - Print one component page to stdout
  compdocs list - Show the index grouping

Usage:
  compdocs generate [--config docgen.yaml] [--root <dir>] [--output <dir>]
  compdocs render <name> [--config docgen.yaml]
  compdocs list [--config docgen.yaml]
"""

import argparse
import logging
import sys
from pathlib import Path

from .config import DocgenConfig

DEFAULT_CONFIG_FILE = "docgen.yaml"


def load_config(args) -> DocgenConfig:
    """
    Build the config from the config file and command-line overrides.

    An explicit --config must exist; otherwise docgen.yaml in the
    project root is used when present.
    """
    root = Path(args.root).resolve() if args.root else Path.cwd()

    if args.config:
        config = DocgenConfig.from_file(args.config)
    elif (root / DEFAULT_CONFIG_FILE).exists():
        config = DocgenConfig.from_file(root / DEFAULT_CONFIG_FILE)
    else:
        config = DocgenConfig(project_root=root)

    return config.with_overrides(
        project_root=root if args.root else None,
        registry_path=args.registry,
        output_dir=getattr(args, "output", None),
        layout_config=getattr(args, "layout_config", None),
    )


def _print_event(event):
    if event.status == "failed":
        print(f"  [FAILED] {event.message}", file=sys.stderr)
    elif event.stage == "entry":
        print(f"  [DONE] {event.message}")
    else:
        print(event.message)


def cmd_generate(args):
    """Run a full generation."""
    from .engine import Generator

    config = load_config(args)
    generator = Generator(config, progress_callback=_print_event)
    result = generator.run()

    if not result.skipped:
        print(f"\nDocuments: {len(result.documents)}")
        if result.failed:
            print(f"Failed: {', '.join(result.failed)}")
        print(f"Output: {config.docs_dir}")
        print(f"Elapsed: {result.elapsed:.2f}s")


def cmd_render(args):
    """Render one entry to stdout."""
    from .engine import read_entry_source
    from .registry import load_registry
    from .render import render_document

    config = load_config(args)
    entry = load_registry(config.registry_file).get(args.name)
    if entry is None:
        print(f"Error: no registry item named '{args.name}'", file=sys.stderr)
        sys.exit(1)

    source, error = read_entry_source(entry, config)
    if error is not None:
        print(f"Warning: failed to read file for {entry.name}: {error}", file=sys.stderr)

    sys.stdout.write(render_document(entry, source, config))


def cmd_list(args):
    """Print documentable entries grouped as in the index."""
    from .index import group_entries, sort_key
    from .registry import load_registry

    config = load_config(args)
    entries = load_registry(config.registry_file).documentable(config.documentable_kinds)
    if not entries:
        print("No components found in registry")
        return

    for bucket, items in group_entries(entries).items():
        print(f"{bucket}:")
        for entry in sorted(items, key=sort_key):
            print(f"  {entry.name:<24} {entry.title}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="compdocs",
        description="compdocs - Component registry documentation generator",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", help=f"Config YAML file (default: <root>/{DEFAULT_CONFIG_FILE})")
    common.add_argument("--root", help="Project root (default: current directory)")
    common.add_argument("--registry", help="Registry JSON file (default: registry.json)")

    # generate command
    generate_parser = subparsers.add_parser("generate", parents=[common],
                                            help="Rebuild all component docs")
    generate_parser.add_argument("-o", "--output", help="Output directory (cleared on each run)")
    generate_parser.add_argument("--layout-config", help="Layout config file to patch")

    # render command
    render_parser = subparsers.add_parser("render", parents=[common],
                                          help="Print one component page")
    render_parser.add_argument("name", help="Registry item name")

    # list command
    subparsers.add_parser("list", parents=[common], help="List documentable components")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    commands = {
        "generate": cmd_generate,
        "render": cmd_render,
        "list": cmd_list,
    }
    command = commands.get(args.command)
    if command is None:
        parser.print_help()
        sys.exit(1)

    try:
        command(args)
    except Exception as e:
        print(f"Error generating documentation: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
