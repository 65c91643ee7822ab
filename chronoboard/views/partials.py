# File: chronoboard/views/partials.py

"""
Registry of reusable view partials.

A partial is a small template plus the defaults for each of its variables.
Callers pass only what they want to change; a missing or ``None`` value
falls back to the default, the same way ``$var ?? 'default'`` would.
Rendering itself lives in ``chronoboard.views.templating.render_partial``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

from chronoboard.core.exceptions import PartialNotFoundError

BUTTON_CLASS = "bg-gray-200 px-6 py-3 rounded-card font-body font-semibold text-gray-800 transition-colors"

# Submit / Reset / Cancel, in the palette colours
BUTTON_GROUP = (
    {
        "label": "Submit",
        "type": "submit",
        "btn_class": "bg-primary-dark hover:bg-gray-800 px-6 py-2 rounded-card font-body font-semibold text-white transition-colors",
    },
    {
        "label": "Reset",
        "type": "reset",
        "btn_class": "bg-primary-blue hover:bg-blue-400 px-6 py-2 rounded-card font-body font-semibold text-white transition-colors",
    },
    {
        "label": "Cancel",
        "type": "button",
        "btn_class": "bg-primary-light hover:bg-yellow-300 px-6 py-2 rounded-card font-body font-semibold text-primary-dark transition-colors",
    },
)


@dataclass(frozen=True)
class Partial:
    template: str
    defaults: Mapping[str, Any] = field(default_factory=dict)

    def context(self, params: Mapping[str, Any]) -> Dict[str, Any]:
        ctx = dict(self.defaults)
        for key, value in params.items():
            if value is None and key in self.defaults:
                continue
            ctx[key] = value
        return ctx


PARTIALS: Dict[str, Partial] = {
    "button": Partial(
        "site/components/_button.html",
        {"label": "Button", "icon": "", "btn_class": BUTTON_CLASS, "type": "button"},
    ),
    "button_group": Partial(
        "site/components/_button_group.html",
        {"buttons": BUTTON_GROUP},
    ),
    "simple_card": Partial(
        "site/components/cards/_simple_card.html",
        {"title": "Card Title", "body": "", "code": ""},
    ),
    "color_card": Partial(
        "site/components/cards/_color_card.html",
        {"title": "Color", "hex": "", "swatch_class": "bg-gray-200", "code": ""},
    ),
    "image_card": Partial(
        "site/components/cards/_image_card.html",
        {"title": "Card with Header", "body": "", "swatch_class": "bg-primary-blue", "image_text": "Image Area"},
    ),
    "colored_card": Partial(
        "site/components/cards/_colored_card.html",
        {"title": "Colored Card", "body": "", "bg_class": "bg-primary-light", "code": ""},
    ),
    "alert": Partial(
        "site/components/_alert.html",
        {"kind": "info", "title": "", "body": ""},
    ),
}


def get_partial(name: str) -> Partial:
    try:
        return PARTIALS[name]
    except KeyError:
        raise PartialNotFoundError(name) from None
