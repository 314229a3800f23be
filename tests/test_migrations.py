"""
Tests for the stored theme migration
"""
from conftest import OWNER_ID, make_config
from launchgen_api.core.migrations import migrate_theme_colors


def _add_page(repository, style):
    return repository.save_page({
        "owner_id": OWNER_ID,
        "slug": f"page-{len(repository.pages)}",
        "page_content": make_config(),
        "page_style": style,
        "published": True,
    })


def test_migrates_only_legacy_pages(repository):
    legacy = _add_page(repository, {"themeColors": {"primaryColor": "#2563eb"}})
    modern = _add_page(repository, {"theme": {"mode": "black", "accentColor": "#10b981"}})

    counts = migrate_theme_colors(repository)

    assert counts == {"scanned": 2, "migrated": 1, "skipped": 1, "failed": 0}
    assert repository.pages[legacy["id"]]["page_style"] == {"theme": {"mode": "white", "accentColor": "#2563eb"}}
    assert repository.pages[modern["id"]]["page_style"]["theme"]["mode"] == "black"


def test_dry_run_writes_nothing(repository):
    legacy = _add_page(repository, {"themeColors": {"primaryColor": "#2563eb"}})

    counts = migrate_theme_colors(repository, dry_run=True)

    assert counts["migrated"] == 1
    assert "themeColors" in repository.pages[legacy["id"]]["page_style"]
