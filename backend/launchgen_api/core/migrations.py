"""One-off data migrations for stored pages"""

import logging
from typing import Dict

from launchgen_api.core.repository import PageRepository
from launchgen_api.core.theme import migrate_page_style

logger = logging.getLogger(__name__)


def migrate_theme_colors(repository: PageRepository, dry_run: bool = False) -> Dict[str, int]:
    """
    Replace legacy ``themeColors`` in every stored page_style with a canonical theme.

    Args:
        repository: Datastore access
        dry_run: Count the pages that would change without writing them

    Returns:
        Counts: scanned, migrated, skipped, failed
    """
    counts = {"scanned": 0, "migrated": 0, "skipped": 0, "failed": 0}

    for page in repository.list_pages():
        counts["scanned"] += 1
        style, changed = migrate_page_style(page.get("page_style"))
        if not changed:
            counts["skipped"] += 1
            continue

        if dry_run:
            logger.info(f"[Migration] Would migrate page {page.get('id')} -> {style['theme']}")
            counts["migrated"] += 1
            continue

        try:
            repository.update_page(page["id"], {"page_style": style})
        except Exception as e:
            # Keep going; one bad row should not block the rest
            logger.error(f"[Migration] Page {page.get('id')} failed: {e}")
            counts["failed"] += 1
            continue
        logger.info(f"[Migration] ✓ Migrated page {page.get('id')}")
        counts["migrated"] += 1

    return counts
