"""
Per-build style dedup index.

Maps a style name to a stable style id, creating at most one Style record
per distinct name. An index belongs to exactly one build; builders create a
fresh one per call so two builds never share style ids.
"""

import logging
from typing import Dict, Iterable, List, Optional

from ..core.types import Style, StyleVariant, make_id
from .tokens import PresetResolver, StyleResolver, preset_for, resolve_style

logger = logging.getLogger(__name__)


class StyleIndex:
    """
    Name -> id cache plus the ordered list of Style records it created.

    Records are appended in first-request order.
    """

    def __init__(
        self,
        resolver: StyleResolver = resolve_style,
        presets: PresetResolver = preset_for,
    ):
        self._resolver = resolver
        self._presets = presets
        self._ids_by_name: Dict[str, str] = {}
        self._styles: List[Style] = []

    def ensure(self, name: str | None) -> Optional[str]:
        """
        Return the style id for `name`, creating the record on first use.

        Empty or whitespace-only names yield None.
        """
        if not name or not name.strip():
            return None
        existing = self._ids_by_name.get(name)
        if existing is not None:
            return existing

        preset = self._presets(name)
        if preset is not None:
            declaration = preset.declaration or ""
            variants = {
                key: StyleVariant(declaration=text)
                for key, text in (preset.variants or {}).items()
            }
        else:
            declaration = self._resolver(name)
            variants = {}

        style = Style(id=make_id("cls_"), name=name, declaration=declaration, variants=variants)
        self._styles.append(style)
        self._ids_by_name[name] = style.id
        logger.debug(f"New style {name!r} -> {style.id} (preset={preset is not None})")
        return style.id

    def class_ids(self, names: Iterable[str | None]) -> List[str]:
        """
        Split space-separated class strings and map every token to a style id.

        Order follows first appearance; a token repeated in the input is
        applied once.
        """
        tokens = [
            token
            for entry in names
            if entry
            for token in str(entry).split()
        ]
        ids: List[str] = []
        for token in tokens:
            style_id = self.ensure(token)
            if style_id is not None and style_id not in ids:
                ids.append(style_id)
        return ids

    @property
    def styles(self) -> List[Style]:
        return list(self._styles)

    def __len__(self) -> int:
        return len(self._styles)

    def __contains__(self, name: object) -> bool:
        return name in self._ids_by_name
