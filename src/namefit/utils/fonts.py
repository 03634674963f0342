"""
Font file resolution utilities.

Maps a CSS-style font description (family, weight, style) onto a font
file installed on this machine, using matplotlib's font manager.
"""

from pathlib import Path

import matplotlib.font_manager as fm

from ..config.constants import FONT_WEIGHT_NUMBERS

# CSS generic families and their matplotlib equivalents
_GENERIC_FAMILIES = {
    "system-ui": "sans-serif",
    "-apple-system": "sans-serif",
    "ui-sans-serif": "sans-serif",
    "ui-serif": "serif",
    "ui-monospace": "monospace",
    "sans-serif": "sans-serif",
    "serif": "serif",
    "monospace": "monospace",
    "cursive": "cursive",
    "fantasy": "fantasy",
}

_STYLES = ("normal", "italic", "oblique")


def _css_weight(weight: str) -> int:
    """Convert a CSS weight keyword or number to a numeric weight."""
    weight = (weight or "normal").strip().lower()
    if weight.isdigit():
        return max(1, min(1000, int(weight)))
    return FONT_WEIGHT_NUMBERS.get(weight, 400)


def _match_family(name: str, available_fonts: set[str]) -> str | None:
    """
    Match a family name against installed font names.

    Exact match first, then case-insensitive, then the shortest installed
    name containing the requested one (or vice versa).
    """
    if name in available_fonts:
        return name

    lower_name = name.lower()
    for af in available_fonts:
        if af.lower() == lower_name:
            return af

    candidates = [
        af
        for af in available_fonts
        if lower_name in af.lower() or af.lower() in lower_name
    ]
    if candidates:
        return min(candidates, key=len)
    return None


def resolve_family(family_list: str) -> str:
    """
    Pick the first usable family from a CSS family list.

    Args:
        family_list: e.g. '"Inter", system-ui, sans-serif'

    Returns:
        An installed family name or a matplotlib generic family
    """
    available_fonts = {f.name for f in fm.fontManager.ttflist}

    for raw in family_list.split(","):
        name = raw.strip().strip("\"'")
        if not name:
            continue
        generic = _GENERIC_FAMILIES.get(name.lower())
        if generic:
            return generic
        matched = _match_family(name, available_fonts)
        if matched:
            return matched

    return "sans-serif"


def resolve_font_file(
    family: str,
    weight: str = "normal",
    style: str = "normal",
    overrides: dict[str, str] | None = None,
) -> Path | None:
    """
    Find the font file that best matches a font description.

    Args:
        family: CSS family list
        weight: CSS weight keyword or number
        style: CSS style keyword
        overrides: family -> font file mapping that wins over lookup

    Returns:
        Path to a font file, or None if nothing usable is installed
    """
    if overrides and family in overrides:
        path = Path(overrides[family]).expanduser()
        return path if path.exists() else None

    style = style if style in _STYLES else "normal"
    prop = fm.FontProperties(
        family=resolve_family(family), weight=_css_weight(weight), style=style
    )

    try:
        found = fm.findfont(prop, fallback_to_default=True)
    except ValueError:
        return None

    path = Path(found)
    return path if path.exists() else None
