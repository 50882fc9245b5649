"""
CLI interface for docmap.

Reads the JSON export of a resolved symbol tree and prints the document
map, per-symbol output fields and navigation tree as JSON.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import yaml

from docmap import __version__
from docmap.config import DEFAULT_CONFIG, get_config_template, load_config
from docmap.models.loader import load_project_file
from docmap.output.theme import DefaultTheme
from docmap.pipeline import DocumentationPipeline
from docmap.utils import write_json

if TYPE_CHECKING:
    from typing import Any

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description="Map a resolved symbol tree to documentation pages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
QUICK START
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
  docmap tree.json                        # Print the site map
  docmap tree.json -o site-map.json       # Write it to a file
  docmap tree.json --entry-point mylib    # Document only the mylib container
  docmap tree.json --readme none          # Render the entry point as index.html

━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
OUTPUT
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
  options       {ga_id, ga_site, hide_generator} for the renderer
  documents     [{url, id, name, template}] in render order
  reflections   {id: {name, kind, url, anchor, hasOwnDocument, cssClasses, flags, comment}}
  navigation    {title, url, cssClasses, isGlobals, dedicatedUrls, children}
        """,
    )

    parser.add_argument(
        "tree",
        nargs="?",
        help="JSON export of the resolved symbol tree",
    )
    parser.add_argument(
        "-o", "--output",
        help="Output file (default: stdout)",
    )

    config_group = parser.add_argument_group("Configuration")
    config_group.add_argument(
        "--config",
        help="YAML config file",
    )
    config_group.add_argument(
        "--init-config",
        action="store_true",
        help="Print a config template and exit",
    )

    theme_group = parser.add_argument_group("Theme")
    theme_group.add_argument(
        "--entry-point",
        help="Fully qualified name of the root symbol (default: the whole project)",
    )
    theme_group.add_argument(
        "--readme",
        help='Readme path, or "none" to render the entry point as index.html',
    )
    theme_group.add_argument(
        "--list-parameters",
        action="store_true",
        help="List the theme options and exit",
    )
    theme_group.add_argument(
        "--skip-comments",
        action="store_true",
        help="Do not move deep comments (tree comments are already resolved)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"docmap {__version__}",
    )

    return parser


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def resolve_config(args: argparse.Namespace) -> dict[str, Any]:
    """Load the config file (if any) and apply CLI overrides."""
    config = DEFAULT_CONFIG
    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: Config file '{config_path}' does not exist", file=sys.stderr)
            sys.exit(1)
        try:
            config = load_config(config_path)
        except (yaml.YAMLError, ValueError) as e:
            print(f"Error: Invalid config file '{config_path}': {e}", file=sys.stderr)
            sys.exit(1)
        if args.verbose:
            print(f"Loaded config: {config_path}", file=sys.stderr)

    theme = dict(config.get("theme") or {})
    if args.entry_point is not None:
        theme["entry_point"] = args.entry_point
    if args.readme is not None:
        theme["readme"] = args.readme
    return {**config, "theme": theme}


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.init_config:
        print(get_config_template())
        return

    config = resolve_config(args)

    if args.list_parameters:
        print(json.dumps(DefaultTheme(config["theme"]).get_parameters(), indent=2))
        return

    if not args.tree:
        parser.error("the tree argument is required")

    tree_path = Path(args.tree)
    if not tree_path.exists():
        print(f"Error: Tree file '{tree_path}' does not exist", file=sys.stderr)
        sys.exit(1)

    try:
        project = load_project_file(tree_path)
    except ValueError as e:
        print(f"Error: Invalid symbol tree '{tree_path}': {e}", file=sys.stderr)
        sys.exit(1)

    if args.verbose:
        print(f"Loaded symbol tree: {tree_path}", file=sys.stderr)

    pipeline = DocumentationPipeline(project, config)
    if not args.skip_comments:
        pipeline.resolve_begin()
    result = pipeline.render_begin()

    indent = (config.get("output") or {}).get("indent", 2)
    output_path = Path(args.output) if args.output else None
    output = write_json(result.to_dict(), output_path, indent=indent)

    if output_path is not None:
        if args.verbose:
            print(f"Output written to: {output_path}", file=sys.stderr)
    else:
        print(output)


if __name__ == "__main__":
    main()
