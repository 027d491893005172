"""
Style resolution and per-build deduplication.
"""

from .index import StyleIndex
from .tokens import (
    SECTION_PRESETS, WRAPPER_CHAIN, Preset, preset_for, resolve_style,
    token_declaration,
)

__all__ = [
    "StyleIndex",
    "Preset", "SECTION_PRESETS", "WRAPPER_CHAIN",
    "preset_for", "resolve_style", "token_declaration",
]
