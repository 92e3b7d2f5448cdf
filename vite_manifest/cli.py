#!/usr/bin/env python3
"""
Vite Manifest CLI Tool

Usage:
    python -m vite_manifest.cli tags main.js            # Print tags for an entry
    python -m vite_manifest.cli tags main.js --json     # JSON format output
    python -m vite_manifest.cli url views/foo.js        # Print the URL of a chunk
    python -m vite_manifest.cli chunks main.js          # Print resolved chunks
    python -m vite_manifest.cli --dev tags main.js      # Development mode tags
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from loguru import logger

from .errors import ManifestError


def _configure_logging(settings) -> None:
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level.upper(), serialize=settings.log_format == "json")


def _build_settings(args):
    """Apply command line overrides on top of configured settings"""
    from config import settings

    updates = {}
    if args.manifest is not None:
        updates["manifest_path"] = Path(args.manifest)
    if args.base is not None:
        updates["base_path"] = args.base
    if args.dev:
        updates["dev"] = True

    preload_updates = {}
    if args.images:
        preload_updates["images"] = True
    if args.fonts:
        preload_updates["fonts"] = True
    if preload_updates:
        updates["preload"] = settings.preload.model_copy(update=preload_updates)

    return settings.model_copy(update=updates) if updates else settings


def cmd_tags(resolver, args) -> int:
    """Print tags for the given entries"""
    tags = resolver.create_tags(*args.entries)
    if args.json:
        print(json.dumps(tags.model_dump(), indent=2, ensure_ascii=False))
    else:
        groups = [group for group in (tags.preload, tags.css, tags.js) if group]
        print("\n\n".join(groups))
    return 0


def cmd_url(resolver, args) -> int:
    """Print the public URL of a chunk"""
    print(resolver.get_url(args.name))
    return 0


def cmd_chunks(resolver, args) -> int:
    """Print resolved chunks in resolution order"""
    for name, chunk in resolver.resolve_chunks(args.entries).items():
        print(f"{name}\t{chunk.published_file}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Vite Manifest Tag Tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m vite_manifest.cli tags main.js               Print tags for main.js
  python -m vite_manifest.cli --images tags main.js      Also preload images
  python -m vite_manifest.cli url views/foo.js           Print a chunk URL
  python -m vite_manifest.cli chunks main.js admin.js    Print resolved chunks
        """,
    )
    parser.add_argument("--manifest", help="Path to manifest.json (overrides VITE_MANIFEST_MANIFEST_PATH)")
    parser.add_argument("--base", help="Public base path (overrides VITE_MANIFEST_BASE_PATH)")
    parser.add_argument("--dev", action="store_true", help="Development mode (Vite dev server)")
    parser.add_argument("--images", action="store_true", help="Preload common image formats")
    parser.add_argument("--fonts", action="store_true", help="Preload common web font formats")

    subparsers = parser.add_subparsers(dest="command", help="Subcommands")

    # tags command
    tags_parser = subparsers.add_parser("tags", help="Print preload, CSS and JS tags")
    tags_parser.add_argument("entries", nargs="+", help="Entry point names")
    tags_parser.add_argument("--json", action="store_true", help="JSON format output")

    # url command
    url_parser = subparsers.add_parser("url", help="Print the URL of a published chunk")
    url_parser.add_argument("name", help="Chunk name")

    # chunks command
    chunks_parser = subparsers.add_parser("chunks", help="Print chunks resolved for entries")
    chunks_parser.add_argument("entries", nargs="+", help="Entry point names")

    args = parser.parse_args(argv)

    commands = {"tags": cmd_tags, "url": cmd_url, "chunks": cmd_chunks}
    if args.command not in commands:
        parser.print_help()
        return 2

    settings = _build_settings(args)
    _configure_logging(settings)

    from .services import create_resolver

    try:
        resolver = create_resolver(settings)
        return commands[args.command](resolver, args)
    except ManifestError as exc:
        logger.error(str(exc))
        return 1


if __name__ == "__main__":
    sys.exit(main())
