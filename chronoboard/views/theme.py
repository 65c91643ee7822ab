# File: chronoboard/views/theme.py

"""
Design tokens shared by the layout's Tailwind config and the mood board.

Change a colour here and both the generated utility classes and the
swatches on /site/mood-board follow.
"""

from typing import Any, Dict, List

COLORS: Dict[str, str] = {
    # Main brand colors
    "primary-dark": "#272727",
    "primary-blue": "#90A9B7",
    "primary-light": "#D2D8B3",
    # Soft palette for alerts and notifications
    "soft-warning": "#FEF3C7",
    "soft-warning-text": "#92400E",
    "soft-error": "#FEE2E2",
    "soft-error-text": "#991B1B",
    "soft-success": "#D1FAE5",
    "soft-success-text": "#065F46",
    "soft-info": "#DBEAFE",
    "soft-info-text": "#1E40AF",
}

FONT_FAMILIES: Dict[str, List[str]] = {
    "display": ["Playfair Display", "serif"],  # h1, h2, h3
    "body": ["Source Sans Pro", "sans-serif"],
}

BORDER_RADIUS: Dict[str, str] = {
    "card": "5px",
}

GOOGLE_FONTS_URL = (
    "https://fonts.googleapis.com/css2?family=Playfair+Display:wght@400;700"
    "&family=Source+Sans+Pro:wght@300;400;600&display=swap"
)

# Brand swatches shown on the mood board, in display order
BRAND_SWATCHES = ("primary-dark", "primary-blue", "primary-light")

ALERT_KINDS = ("success", "info", "warning", "error")

# icon shown on the soft alert buttons
ALERT_ICONS: Dict[str, str] = {
    "success": "✓",
    "info": "ⓘ",
    "warning": "⚠",
    "error": "✕",
}

# hover shade used by the soft alert buttons
ALERT_HOVER: Dict[str, str] = {
    "success": "hover:bg-green-200",
    "info": "hover:bg-blue-200",
    "warning": "hover:bg-yellow-200",
    "error": "hover:bg-red-200",
}


def tailwind_config() -> Dict[str, Any]:
    """The ``tailwind.config`` object rendered into the page head."""
    return {
        "theme": {
            "extend": {
                "colors": dict(COLORS),
                "fontFamily": {k: list(v) for k, v in FONT_FAMILIES.items()},
                "borderRadius": dict(BORDER_RADIUS),
            }
        }
    }


def swatch_title(color_name: str) -> str:
    """``primary-dark`` -> ``Primary Dark``"""
    return " ".join(part.capitalize() for part in color_name.split("-"))


def brand_swatches() -> List[Dict[str, str]]:
    return [
        {
            "title": swatch_title(name),
            "hex": COLORS[name],
            "swatch_class": f"bg-{name}",
            "code": f"bg-{name}",
        }
        for name in BRAND_SWATCHES
    ]
