"""Theme resolution: light/dark mode and accent color handling"""

import logging
import re
from typing import Any, Dict, Mapping, Optional, Tuple

from launchgen_api.models.errors import InvalidColorFormat
from launchgen_api.models.page_config import Theme

logger = logging.getLogger(__name__)

DEFAULT_ACCENT_COLOR = "#6366f1"

_HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_RGB_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")

# Base palette per mode, in CSS variable order
MODE_PALETTES: Dict[str, Dict[str, str]] = {
    "white": {
        "background": "#ffffff",
        "surface": "#f8fafc",
        "text": "#0f172a",
        "text-secondary": "#64748b",
        "border": "#e2e8f0",
        "muted": "#f1f5f9",
        "muted-foreground": "#64748b",
    },
    "black": {
        "background": "#000000",
        "surface": "#1e293b",
        "text": "#f8fafc",
        "text-secondary": "#cbd5e1",
        "border": "#334155",
        "muted": "#1e293b",
        "muted-foreground": "#94a3b8",
    },
}

MODE_CLASSES: Dict[str, Dict[str, str]] = {
    "white": {
        "background": "bg-white",
        "surface": "bg-slate-50",
        "muted": "bg-white",
        "text": "text-slate-900",
        "textSecondary": "text-slate-600",
        "border": "border-slate-200",
        "mutedText": "text-slate-500",
    },
    "black": {
        "background": "bg-black",
        "surface": "bg-gray-900",
        "muted": "bg-black",
        "text": "text-gray-50",
        "textSecondary": "text-gray-400",
        "border": "border-gray-600",
        "mutedText": "text-gray-400",
    },
}

# Accent opacity steps (percent -> 2-hex-digit alpha suffix)
ACCENT_ALPHA_STEPS: Tuple[Tuple[int, str], ...] = (
    (10, "1a"),
    (20, "33"),
    (30, "4d"),
    (40, "66"),
    (50, "80"),
)


def default_theme() -> Theme:
    return Theme(mode="white", accentColor=DEFAULT_ACCENT_COLOR)


def _normalize_accent(color: Any) -> str:
    """Return a 6-digit hex accent, or the default when the value is empty or not hex."""
    if not color:
        return DEFAULT_ACCENT_COLOR
    if not isinstance(color, str) or not _HEX_COLOR_RE.match(color.strip()):
        logger.warning(f"Ignoring non-hex accent color {color!r}, using {DEFAULT_ACCENT_COLOR}")
        return DEFAULT_ACCENT_COLOR
    color = color.strip()
    if len(color) == 4:
        color = "#" + "".join(ch * 2 for ch in color[1:])
    return color


def resolve_theme(raw_theme: Optional[Any] = None, legacy_theme_colors: Optional[Any] = None) -> Theme:
    """
    Derive the one canonical theme for a config.

    Args:
        raw_theme: The config's ``theme`` value, possibly missing or malformed
        legacy_theme_colors: Old-style ``themeColors`` mapping, used only
            when ``raw_theme`` is not a mapping

    Returns:
        A resolved Theme; never raises
    """
    if isinstance(raw_theme, Theme):
        raw_theme = raw_theme.model_dump()

    if isinstance(raw_theme, Mapping):
        return Theme(
            mode="black" if raw_theme.get("mode") == "black" else "white",
            accentColor=_normalize_accent(raw_theme.get("accentColor")),
        )

    if isinstance(legacy_theme_colors, Mapping):
        accent = legacy_theme_colors.get("accentColor") or legacy_theme_colors.get("primaryColor")
        return Theme(mode="white", accentColor=_normalize_accent(accent))

    return default_theme()


def resolve_config_theme(config: Mapping[str, Any]) -> Theme:
    """Resolve the theme embedded in a raw config or page_style mapping."""
    legacy = config.get("themeColors") or config.get("theme_colors")
    return resolve_theme(config.get("theme"), legacy)


def classes_for(theme: Theme) -> Dict[str, str]:
    """Display class names for the 7 semantic roles of the theme's mode."""
    return dict(MODE_CLASSES[theme.mode])


def css_variables_for(theme: Theme) -> Dict[str, str]:
    """Ordered CSS custom properties for a theme."""
    variables = {f"--{name}": value for name, value in MODE_PALETTES[theme.mode].items()}
    accent = theme.accentColor
    variables["--accent"] = accent
    variables["--accent-foreground"] = "#ffffff" if theme.mode == "white" else "#000000"
    for percent, alpha in ACCENT_ALPHA_STEPS:
        variables[f"--accent-{percent}"] = f"{accent}{alpha}"
    return variables


def css_text(theme: Theme) -> str:
    """CSS variables joined for use in a style attribute."""
    return " ".join(f"{name}: {value};" for name, value in css_variables_for(theme).items())


def rgba(color: str, opacity: float = 1) -> str:
    """
    Convert a hex color to an rgba() string at the given opacity.

    Raises:
        InvalidColorFormat: If the color is not 6 hex digits (``#`` optional)
    """
    if opacity == 1:
        return color

    match = _RGB_HEX_RE.match(color or "")
    if not match:
        raise InvalidColorFormat(f"Invalid color format: {color!r}. Expected a 6-digit hex color like #6366f1.")

    r, g, b = (int(part, 16) for part in match.groups())
    return f"rgba({r}, {g}, {b}, {opacity})"


def migrate_page_style(style: Optional[Dict[str, Any]]) -> Tuple[Dict[str, Any], bool]:
    """
    Rewrite a stored page_style that still carries legacy themeColors.

    Returns:
        The (possibly new) style dict and whether it changed
    """
    if not style or "themeColors" not in style:
        return style or {}, False

    migrated = {k: v for k, v in style.items() if k != "themeColors"}
    migrated["theme"] = resolve_theme(style.get("theme"), style["themeColors"]).model_dump()
    return migrated, True
