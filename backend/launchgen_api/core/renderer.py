"""Server-side rendering of a landing page config"""

import logging
from pathlib import Path
from typing import Dict, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from launchgen_api.core.highlights import cleanup_highlights, split_highlighted
from launchgen_api.core.theme import classes_for, css_text, rgba
from launchgen_api.models.page_config import LandingPageConfig, Theme

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_page(
    config: LandingPageConfig,
    theme: Theme,
    visibility: Optional[Dict[str, bool]] = None,
    page_id: Optional[str] = None,
) -> str:
    """
    Render a config as a complete HTML document.

    Args:
        config: Validated page config
        theme: Resolved theme; the config's own theme field is ignored
        visibility: Per-section show/hide flags, sections default to shown
        page_id: When given, the page reports views/clicks and posts leads

    Returns:
        HTML string
    """
    hero = config.hero
    highlights = cleanup_highlights(hero.headlineHighlights, hero.headline)
    sections = config.ordered_sections(visibility)

    context = {
        "config": config,
        "hero": hero,
        "headline_segments": split_highlighted(hero.headline, highlights),
        "sections": sections,
        "theme": theme,
        "classes": classes_for(theme),
        "css_variables": css_text(theme),
        "accent_soft": rgba(theme.accentColor, 0.1),
        "accent_strong": rgba(theme.accentColor, 0.5),
        "page_id": page_id,
        "business_name": (config.business.name if config.business else "") or "",
    }
    logger.debug(f"Rendering page {page_id} | sections={sections} | mode={theme.mode}")
    return _env.get_template("landing_page.html").render(**context)
