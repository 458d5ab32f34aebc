"""Style dictionaries: inline ``style`` attribute parsing and normalization.

Style dictionaries use camel-cased property names (``fontSize``,
``lineHeight``, ...) whose values are numbers or strings.  Relative units
are resolved against the ambient font size by :func:`normalize`, so the
dictionaries handed to the host text primitive only hold plain numbers and
enumerated strings.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional, Union

StyleValue = Union[int, float, str]
StyleDict = dict[str, StyleValue]

_EM_RE = re.compile(r"^[-+]?\d+(\.\d+)?em$", re.IGNORECASE)
_PT_RE = re.compile(r"^[-+]?\d+(\.\d+)?pt$", re.IGNORECASE)
_PX_RE = re.compile(r"^[-+]?\d+(\.\d+)?px$", re.IGNORECASE)
_NUMBER_RE = re.compile(r"^[-+]?\d+(\.\d+)?$")

# Fonts larger than this get a line height so glyphs are not clipped
LARGE_FONT_THRESHOLD = 23
LARGE_FONT_LINE_GAP = 4


@dataclass
class NormalizedStyle:
    """Result of :func:`normalize`."""

    font_size: Union[int, float]
    style: StyleDict = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _number(text: str) -> Union[int, float]:
    return _tidy(float(text))


def _tidy(value: float) -> Union[int, float]:
    return int(value) if value.is_integer() else value


def _camel_case(name: str) -> str:
    head, *rest = name.split("-")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _resolve_value(value: StyleValue, base_font_size: Union[int, float]) -> StyleValue:
    text = str(value)
    if _EM_RE.fullmatch(text):
        return _tidy(float(text[:-2]) * base_font_size)
    if _PT_RE.fullmatch(text):
        return _number(text[:-2])
    return value


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_style_attribute(css: Optional[str]) -> StyleDict:
    """Convert an inline CSS declaration list into a style dictionary.

    ``"font-size: 12px; color: red"`` becomes ``{"fontSize": 12,
    "color": "red"}``.  Bare numbers and ``px`` lengths become numbers;
    ``em`` and ``pt`` lengths are left for :func:`normalize`.  Declarations
    without a name or value are skipped.
    """
    style: StyleDict = {}
    if not css:
        return style

    for declaration in css.split(";"):
        name, _, value = declaration.partition(":")
        name = name.strip().lower()
        value = value.replace("!important", "").strip()
        if not name or not value:
            continue

        parsed: StyleValue = value
        if _PX_RE.fullmatch(value):
            parsed = _number(value[:-2])
        elif _NUMBER_RE.fullmatch(value):
            parsed = _number(value)
        style[_camel_case(name)] = parsed

    return style


def normalize(
    base_font_size: Union[int, float],
    styles: Iterable[Optional[Mapping[str, StyleValue]]],
) -> NormalizedStyle:
    """Merge *styles* (outer to inner) and resolve relative units.

    Later dictionaries override earlier keys.  ``em`` values are multiplied
    by *base_font_size*, ``pt`` values are taken as plain numbers.  A large
    ``fontSize`` gets ``lineHeight = fontSize + 4`` unless some input set
    ``lineHeight`` itself.  The returned ``font_size`` is what descendants
    inherit: the merged ``fontSize``, or *base_font_size* when unset.
    """
    merged: StyleDict = {}
    explicit_line_height = False

    for style in styles:
        if not style:
            continue
        if "lineHeight" in style:
            explicit_line_height = True
        for key, value in style.items():
            merged[key] = _resolve_value(value, base_font_size)

    font_size = merged.get("fontSize")
    if not _is_number(font_size):
        return NormalizedStyle(font_size=base_font_size, style=merged)

    if font_size > LARGE_FONT_THRESHOLD and not explicit_line_height:
        merged["lineHeight"] = font_size + LARGE_FONT_LINE_GAP
    return NormalizedStyle(font_size=font_size, style=merged)
