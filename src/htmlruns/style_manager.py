"""Tag style presets.

Manages style presets (plain, default, compact) that map tag names
(h1, strong, code, ...) to the style dictionaries the renderer merges
under each element's inline ``style`` attribute.
"""

from __future__ import annotations

from copy import deepcopy
from typing import Mapping, Optional

from htmlruns.styles import StyleDict

MONOSPACE = "monospace"
LINK_COLOR = "#0645ad"


# ---------------------------------------------------------------------------
# Preset definitions
# ---------------------------------------------------------------------------

def _build_plain_styles() -> dict[str, StyleDict]:
    """Build the **plain** preset -- no tag styling at all."""
    return {}


def _build_default_styles() -> dict[str, StyleDict]:
    """Build the **default** preset, close to browser defaults."""

    # Heading sizes relative to the ambient font: H1=2em ... H6=0.67em
    heading_sizes = {1: "2em", 2: "1.5em", 3: "1.17em", 4: "1em", 5: "0.83em", 6: "0.67em"}

    styles: dict[str, StyleDict] = {}

    for level in range(1, 7):
        styles[f"h{level}"] = {
            "fontSize": heading_sizes[level],
            "fontWeight": "bold",
        }

    for tag in ("b", "strong", "th"):
        styles[tag] = {"fontWeight": "bold"}
    for tag in ("i", "em", "cite", "dfn", "var", "address"):
        styles[tag] = {"fontStyle": "italic"}
    for tag in ("s", "del", "strike"):
        styles[tag] = {"textDecorationLine": "line-through"}
    for tag in ("u", "ins"):
        styles[tag] = {"textDecorationLine": "underline"}
    for tag in ("code", "kbd", "samp", "pre"):
        styles[tag] = {"fontFamily": MONOSPACE}

    styles["a"] = {"color": LINK_COLOR, "textDecorationLine": "underline"}
    styles["blockquote"] = {"fontStyle": "italic", "color": "#555555"}
    styles["small"] = {"fontSize": "0.8em"}
    styles["mark"] = {"backgroundColor": "#ffff00"}
    styles["sub"] = {"fontSize": "0.75em", "textAlignVertical": "bottom"}
    styles["sup"] = {"fontSize": "0.75em", "textAlignVertical": "top"}

    return styles


def _build_compact_styles() -> dict[str, StyleDict]:
    """Build the **compact** preset -- smaller headings in points."""

    base = _build_default_styles()

    heading_sizes = {1: "22pt", 2: "18pt", 3: "15pt", 4: "13pt", 5: "12pt", 6: "11pt"}

    for level in range(1, 7):
        base[f"h{level}"] = {
            "fontSize": heading_sizes[level],
            "fontWeight": "bold",
        }

    base["blockquote"] = {"fontStyle": "italic"}
    base["small"] = {"fontSize": "0.85em"}

    return base


# ---------------------------------------------------------------------------
# Preset registry
# ---------------------------------------------------------------------------

_PRESET_BUILDERS = {
    "plain": _build_plain_styles,
    "default": _build_default_styles,
    "compact": _build_compact_styles,
}


# ---------------------------------------------------------------------------
# StyleManager
# ---------------------------------------------------------------------------

class StyleManager:
    """Manages tag style presets and provides per-tag style dictionaries.

    Usage::

        sm = StyleManager("compact")
        heading_style = sm.get_style("h1")
        table = sm.with_overrides({"a": {"color": "red"}}).tag_styles()
    """

    PRESETS = list(_PRESET_BUILDERS.keys())

    def __init__(self, preset: str = "default") -> None:
        if preset not in _PRESET_BUILDERS:
            raise ValueError(
                f"Unknown preset {preset!r}. Choose from: {', '.join(_PRESET_BUILDERS)}"
            )
        self.preset = preset
        self._styles: dict[str, StyleDict] = {}
        self._load_preset(preset)

    # -- public API ---------------------------------------------------------

    def get_style(self, tag_name: str) -> StyleDict:
        """Get a copy of the style for *tag_name*, ``{}`` when unstyled."""
        return dict(self._styles.get(tag_name.lower(), {}))

    def tag_styles(self) -> dict[str, StyleDict]:
        """Return a copy of the whole tag -> style table."""
        return deepcopy(self._styles)

    def with_overrides(self, overrides: Optional[Mapping[str, StyleDict]]) -> StyleManager:
        """Return a new manager with *overrides* merged per tag.

        Override properties replace preset properties of the same name;
        other preset properties are kept.
        """
        clone = StyleManager(self.preset)
        clone._styles = self.tag_styles()
        for tag, style in (overrides or {}).items():
            merged = clone._styles.setdefault(tag.lower(), {})
            merged.update(style)
        return clone

    def list_style_names(self) -> list[str]:
        """Return all tag names styled by this preset."""
        return sorted(self._styles.keys())

    # -- internals ----------------------------------------------------------

    def _load_preset(self, preset: str) -> None:
        builder = _PRESET_BUILDERS[preset]
        self._styles = builder()
