"""
Style declaration tables.

Two lookups feed the style index:
- resolve_style: a small curated map from utility class tokens to inline
  declarations. Unknown tokens resolve to empty text.
- preset_for: the fixed wrapper-section presets used by the section
  template. Returns None for names that are not presets.
"""

import re
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Tuple

# --- Spacing scale (rem) ---
SPACING_SCALE: Dict[str, str] = {
    "0": "0rem",
    "1": "0.25rem",
    "2": "0.5rem",
    "3": "0.75rem",
    "4": "1rem",
    "5": "1.25rem",
    "6": "1.5rem",
    "8": "2rem",
    "10": "2.5rem",
    "12": "3rem",
    "16": "4rem",
    "20": "5rem",
    "24": "6rem",
    "32": "8rem",
}

_PADDING_RE = re.compile(r"^(p|px|py|pt|pr|pb|pl)-(\d+)$")
_GAP_RE = re.compile(r"^gap-(\d+)$")

_PADDING_TEMPLATES: Dict[str, str] = {
    "p": "padding: {v};",
    "px": "padding-left: {v}; padding-right: {v};",
    "py": "padding-top: {v}; padding-bottom: {v};",
    "pt": "padding-top: {v};",
    "pr": "padding-right: {v};",
    "pb": "padding-bottom: {v};",
    "pl": "padding-left: {v};",
}

_BLUE_500 = "#3B82F6"

STATIC_TOKENS: Dict[str, str] = {
    "w-full": "width: 100%;",
    "max-w-7xl": "max-width: 80rem;",
    "mx-auto": "margin-left: auto; margin-right: auto;",
    "flex": "display: flex;",
    "grid": "display: grid;",
    "items-center": "align-items: center;",
    "justify-center": "justify-content: center;",
    "text-center": "text-align: center;",
    "border": "border-style: solid; border-width: 1px;",
    "rounded-md": (
        "border-top-left-radius: 6px; border-top-right-radius: 6px; "
        "border-bottom-left-radius: 6px; border-bottom-right-radius: 6px;"
    ),
    "bg-blue-500": f"background-color: {_BLUE_500};",
    "border-blue-500": (
        f"border-top-color: {_BLUE_500}; border-right-color: {_BLUE_500}; "
        f"border-bottom-color: {_BLUE_500}; border-left-color: {_BLUE_500};"
    ),
    "text-white": "color: #fff;",
    "transition-colors": "transition-property: border-color, background-color;",
    "duration-200": "transition-duration: 200ms;",
    "ease-in-out": "transition-timing-function: ease;",
}


def token_declaration(token: str) -> str:
    """Declaration text for a single utility token, or "" if unknown."""
    match = _PADDING_RE.match(token)
    if match:
        value = SPACING_SCALE.get(match.group(2))
        if not value:
            return ""
        return _PADDING_TEMPLATES[match.group(1)].format(v=value)

    if token in STATIC_TOKENS:
        return STATIC_TOKENS[token]

    match = _GAP_RE.match(token)
    if match:
        value = SPACING_SCALE.get(match.group(1))
        if value:
            return f"grid-row-gap: {value}; grid-column-gap: {value};"
    return ""


def resolve_style(name: str) -> str:
    """Translate a (possibly multi-token) class name into declaration text."""
    if not name:
        return ""
    declarations = (token_declaration(token) for token in name.split())
    return " ".join(d for d in declarations if d)


# --- Section template presets ---

@dataclass(frozen=True)
class Preset:
    declaration: str = ""
    variants: Dict[str, str] = field(default_factory=dict)


SECTION_PRESETS: Dict[str, Preset] = {
    "section_table": Preset(),
    "padding-global": Preset("padding-right: 5%; padding-left: 5%;"),
    "container-large": Preset(
        "width: 100%; max-width: 80rem; margin-right: auto; margin-left: auto;"
    ),
    "padding-section-medium": Preset(
        "padding-top: 5rem; padding-bottom: 5rem;",
        variants={
            "medium": "padding-top: 4rem; padding-bottom: 4rem;",
            "small": "padding-top: 3rem; padding-bottom: 3rem;",
        },
    ),
    "table_component": Preset(),
}

# Outermost first; the table becomes the only child of the last wrapper.
WRAPPER_CHAIN: Tuple[str, ...] = (
    "section_table",
    "padding-global",
    "container-large",
    "padding-section-medium",
    "table_component",
)


def preset_for(name: str) -> Optional[Preset]:
    return SECTION_PRESETS.get(name)


StyleResolver = Callable[[str], str]
PresetResolver = Callable[[str], Optional[Preset]]
