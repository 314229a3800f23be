#!/usr/bin/env python3
"""Rewrite legacy themeColors in stored landing pages into the canonical theme"""
import argparse
import logging
import sys
from pathlib import Path

# Make the backend package importable when run from a checkout
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "backend"))

from launchgen_api.core.migrations import migrate_theme_colors
from launchgen_api.core.repository import get_repository
from launchgen_api.models.errors import ApplicationError


def main():
    parser = argparse.ArgumentParser(description="Migrate legacy themeColors to theme {mode, accentColor}")
    parser.add_argument('--dry-run', action='store_true', help="Report what would change without writing")
    parser.add_argument('--verbose', action='store_true', help="Log every page")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    print("🎨 Theme migration" + (" (dry run)" if args.dry_run else ""))
    print("=" * 50)

    try:
        repository = get_repository()
        counts = migrate_theme_colors(repository, dry_run=args.dry_run)
    except ApplicationError as e:
        print(f"❌ {e.message}")
        return 1

    print(f"Scanned:  {counts['scanned']}")
    print(f"Migrated: {counts['migrated']}")
    print(f"Skipped:  {counts['skipped']}")
    print(f"Failed:   {counts['failed']}")

    if counts["failed"]:
        print("❌ Some pages could not be migrated")
        return 1
    print("✓ Done")
    return 0


if __name__ == "__main__":
    sys.exit(main())
