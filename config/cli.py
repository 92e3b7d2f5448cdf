#!/usr/bin/env python3
"""
Configuration Management CLI Tool

Usage:
    python -m config.cli show          # Show current configuration
    python -m config.cli show --json   # JSON format output
    python -m config.cli validate      # Validate configuration
    python -m config.cli env           # Generate environment variable template
"""

from __future__ import annotations

import argparse
import json
import sys


def cmd_show(args):
    """Show current configuration"""
    from config.settings import settings

    if args.json:
        data = settings.model_dump(mode="json")
        print(json.dumps(data, indent=2, ensure_ascii=False))
    else:
        print("=" * 60)
        print("Vite Manifest Configuration")
        print("=" * 60)

        print("\n📦 Manifest:")
        print(f"  dev:           {settings.dev}")
        print(f"  manifest_path: {settings.manifest_path}")
        print(f"  base_path:     {settings.base_path}")

        print("\n🖼️  Preload Types:")
        print(f"  images:        {settings.preload.images}")
        print(f"  fonts:         {settings.preload.fonts}")
        extra = settings.preload.extra_types
        if extra:
            for ext, (mime_type, as_attribute) in extra.items():
                print(f"  .{ext:<12} {mime_type} (as={as_attribute})")
        else:
            print("  extra:         (none)")

        print("\n📋 Log Configuration:")
        print(f"  log_level:     {settings.log_level}")
        print(f"  log_format:    {settings.log_format}")

        print("\n" + "=" * 60)


def cmd_validate(args):
    """Validate configuration"""
    from config.settings import settings

    errors = []
    warnings = []

    # Check manifest file (only read in production mode)
    if not settings.dev:
        if not settings.manifest_path.exists():
            errors.append(f"Manifest file not found: {settings.manifest_path} (run `vite build` or set VITE_MANIFEST_DEV=true)")
        elif not settings.manifest_path.is_file():
            errors.append(f"Manifest path is not a file: {settings.manifest_path}")

    # URLs are joined without a separator
    if not settings.base_path.endswith("/"):
        warnings.append(f"Base path does not end with '/': {settings.base_path!r}")

    if settings.dev and (settings.preload.images or settings.preload.fonts or settings.preload.extra):
        warnings.append("Preload types are configured but ignored in development mode")

    # Output results
    if errors:
        print("❌ Configuration validation failed:")
        for e in errors:
            print(f"  - {e}")
        print()

    if warnings:
        print("⚠️  Configuration warnings:")
        for w in warnings:
            print(f"  - {w}")
        print()

    if not errors and not warnings:
        print("✅ Configuration validation passed")
    elif not errors:
        print("✅ Configuration validation passed (with warnings)")

    return 1 if errors else 0


def cmd_env(args):
    """Generate environment variable template"""
    from config.settings import settings

    print("# Environment variable representation of current configuration")
    print("# Can be copied to .env file")
    print()

    print(f"VITE_MANIFEST_DEV={str(settings.dev).lower()}")
    print(f"VITE_MANIFEST_MANIFEST_PATH={settings.manifest_path}")
    print(f"VITE_MANIFEST_BASE_PATH={settings.base_path}")
    print(f"VITE_MANIFEST_LOG_LEVEL={settings.log_level}")
    print(f"VITE_MANIFEST_LOG_FORMAT={settings.log_format}")
    print()

    print(f"VITE_MANIFEST_PRELOAD_IMAGES={str(settings.preload.images).lower()}")
    print(f"VITE_MANIFEST_PRELOAD_FONTS={str(settings.preload.fonts).lower()}")
    print(f"VITE_MANIFEST_PRELOAD_EXTRA={settings.preload.extra}")


def main():
    parser = argparse.ArgumentParser(
        description="Vite Manifest Configuration Management Tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m config.cli show          Show current configuration
  python -m config.cli show --json   JSON format output
  python -m config.cli validate      Validate configuration
  python -m config.cli env           Generate environment variables
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Subcommands")

    # show command
    show_parser = subparsers.add_parser("show", help="Show current configuration")
    show_parser.add_argument("--json", action="store_true", help="JSON format output")

    # validate command
    subparsers.add_parser("validate", help="Validate configuration")

    # env command
    subparsers.add_parser("env", help="Generate environment variable template")

    args = parser.parse_args()

    if args.command == "show":
        cmd_show(args)
    elif args.command == "validate":
        sys.exit(cmd_validate(args))
    elif args.command == "env":
        cmd_env(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
