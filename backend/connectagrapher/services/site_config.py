from __future__ import annotations

import re
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict

from ..utils.json_utils import deep_merge

DEFAULT_SITE_CONFIG: Dict[str, Any] = {
    "branding": {
        "app_name": "Connectagrapher",
        "tagline": "Capture Your Perfect Moment",
        "logo_url": "",
        "favicon_url": "",
    },
    "theme": {
        "primary": "hsl(120, 100%, 20%)",
        "secondary": "hsl(51, 100%, 50%)",
        "accent": "hsl(42, 100%, 62%)",
        "background": "hsl(210, 40%, 98%)",
        "foreground": "hsl(222, 84%, 5%)",
        "font_sans": "'Inter', system-ui, sans-serif",
        "font_serif": "'Playfair Display', serif",
        "font_mono": "Menlo, monospace",
        "base_font_size": "16px",
        "extra_vars": {},
        "custom_css": "",
    },
    "layout": {
        "home": {"section_order": ["hero", "services", "portfolio", "reviews"], "hidden_sections": []},
        "about": {"section_order": ["about", "mission", "highlights"], "hidden_sections": []},
        "portfolio": {"section_order": ["portfolio", "cta"], "hidden_sections": []},
    },
    "home": {
        "hero": {
            "title": "Capture Your",
            "highlight": "Perfect Moment",
            "subtitle": "Professional Photography Services across Beautiful Jamaica",
            "cover_image": "/uploads/_ATC9768_4.jpg",
            "primary_cta_label": "Book Your Session",
            "primary_cta_href": "/booking",
            "secondary_cta_label": "View Portfolio",
            "secondary_cta_href": "/portfolio",
        },
        "services": {
            "title": "Our Services",
            "subtitle": "Professional photography and videography services for every special moment",
            "items": [
                {
                    "title": "Portrait Sessions",
                    "description": "Personal and professional portraits in stunning Jamaican locations",
                    "price_label": "Starting from $150",
                    "href": "/booking?service=photoshoot",
                },
                {
                    "title": "Wedding Photography",
                    "description": "Capture your special day with our comprehensive wedding packages",
                    "price_label": "Starting from $500",
                    "href": "/booking?service=wedding",
                },
                {
                    "title": "Event Photography",
                    "description": "Professional coverage for corporate events, parties, and celebrations",
                    "price_label": "Starting from $150/hour",
                    "href": "/booking?service=event",
                },
            ],
        },
        "portfolio": {
            "title": "Featured Work",
            "subtitle": "A glimpse into our portfolio of captured memories",
        },
        "reviews": {
            "title": "What Our Clients Say",
            "subtitle": "Real experiences from real clients who trusted us with their special moments",
        },
    },
    "about": {
        "title": "About The Connector",
        "paragraphs": [
            "Based in the heart of Jamaica, The Connector Photography specializes in capturing "
            "life's most precious moments against the backdrop of our beautiful island.",
            "With years of experience and a passion for storytelling through imagery, we bring "
            "creativity, professionalism, and the vibrant spirit of Jamaica to every session.",
        ],
        "stats": [
            {"value": "500+", "label": "Sessions Completed"},
            {"value": "50+", "label": "Weddings Captured"},
            {"value": "5★", "label": "Client Rating"},
            {"value": "14", "label": "Parishes Covered"},
        ],
        "image": "/uploads/_ATC8022_1.jpg",
        "mission": {
            "title": "Our Mission",
            "body": "To preserve your most cherished memories through the art of photography, "
            "celebrating the natural beauty of Jamaica while creating timeless images that tell "
            "your unique story.",
        },
        "highlights": {
            "title": "What Sets Us Apart",
            "items": [
                {
                    "title": "Local Expertise",
                    "description": "Deep knowledge of Jamaica's most breathtaking locations and hidden gems.",
                    "icon": "fas fa-map-marked-alt",
                },
                {
                    "title": "Professional Quality",
                    "description": "State-of-the-art equipment and advanced post-processing techniques.",
                    "icon": "fas fa-award",
                },
                {
                    "title": "Personal Service",
                    "description": "Tailored approach to each client, so your vision shines through.",
                    "icon": "fas fa-heart",
                },
            ],
        },
    },
    "portfolio": {
        "title": "Our Portfolio",
        "subtitle": "Explore our collection of captured moments across Jamaica's most beautiful locations",
        "cta_label": "Book Your Session Now",
        "cta_href": "/booking",
    },
}

# theme key -> CSS custom property
THEME_VARIABLES = (
    ("primary", "--primary"),
    ("secondary", "--secondary"),
    ("accent", "--accent"),
    ("background", "--background"),
    ("foreground", "--foreground"),
    ("font_sans", "--font-sans"),
    ("font_serif", "--font-serif"),
    ("font_mono", "--font-mono"),
)

_UNSAFE_CSS_VALUE = re.compile(r"[;{}<>]")
_VAR_NAME = re.compile(r"^--[A-Za-z0-9_-]+$")


class ThemeSettings(BaseModel):
    model_config = ConfigDict(extra="allow")

    primary: str = ""
    secondary: str = ""
    accent: str = ""
    background: str = ""
    foreground: str = ""
    font_sans: str = ""
    font_serif: str = ""
    font_mono: str = ""
    base_font_size: str = ""
    extra_vars: Dict[str, Union[str, int, float]] = {}
    custom_css: str = ""


class SectionLayout(BaseModel):
    model_config = ConfigDict(extra="allow")

    section_order: List[str] = []
    hidden_sections: List[str] = []


class SiteConfig(BaseModel):
    """Shape check for a merged site configuration; page copy stays free-form."""

    model_config = ConfigDict(extra="allow")

    branding: Dict[str, Any]
    theme: ThemeSettings
    layout: Dict[str, SectionLayout]
    home: Dict[str, Any]
    about: Dict[str, Any]
    portfolio: Dict[str, Any]


def merge_site_config(overrides: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Overlay a stored (possibly partial) config onto the defaults.

    Raises ``pydantic.ValidationError`` when the result has the wrong shape.
    """
    merged = deep_merge(DEFAULT_SITE_CONFIG, overrides or {})
    SiteConfig.model_validate(merged)
    return merged


def _css_value(value: Any) -> str:
    return _UNSAFE_CSS_VALUE.sub("", str(value)).strip()


def theme_css(config: Mapping[str, Any]) -> str:
    """Render the theme block as a ``:root`` rule followed by custom CSS."""
    theme = config.get("theme") or {}
    lines = []
    for key, var in THEME_VARIABLES:
        value = theme.get(key)
        if value:
            lines.append(f"  {var}: {_css_value(value)};")
    for name, value in (theme.get("extra_vars") or {}).items():
        var = name if str(name).startswith("--") else f"--{name}"
        if not _VAR_NAME.match(var):
            continue
        lines.append(f"  {var}: {_css_value(value)};")
    if theme.get("base_font_size"):
        lines.append(f"  font-size: {_css_value(theme['base_font_size'])};")

    css = ":root {\n" + "\n".join(lines) + "\n}\n"
    custom = (theme.get("custom_css") or "").strip()
    if custom:
        css += "\n" + custom + "\n"
    return css
