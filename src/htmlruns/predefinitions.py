"""Per-tag formatting directives.

Maps lower-cased tag names to a :class:`Directive` describing the literal
text a tag injects around (or instead of) its rendered content.  Tags that
are not listed here are rendered inline without injected whitespace.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Directive:
    """Formatting directive for a single tag."""

    content: Optional[str] = None         # replaces the element entirely
    before_content: Optional[str] = None
    after_content: Optional[str] = None
    can_activate: bool = False            # element may carry a link handler


_BLOCK = Directive(after_content="\n")

# Block-level containers end with a newline
_BLOCK_TAGS = (
    "address", "article", "aside", "blockquote", "body", "dd", "details",
    "div", "dl", "dt", "fieldset", "figcaption", "figure", "footer", "form",
    "h1", "h2", "h3", "h4", "h5", "h6", "header", "legend", "li", "menu",
    "nav", "ol", "p", "pre", "section", "summary", "tr", "ul",
)

PREDEFINITIONS: dict[str, Directive] = {tag: _BLOCK for tag in _BLOCK_TAGS}
PREDEFINITIONS.update({
    "a": Directive(can_activate=True),
    "br": Directive(content="\n"),
    "hr": Directive(content="\n\n"),
    "img": Directive(before_content="\n", after_content="\n"),
    "table": Directive(before_content="\n", after_content="\n"),
})


def lookup(tag_name: str) -> Optional[Directive]:
    """Return the directive for *tag_name*, or ``None`` for unlisted tags."""
    if not tag_name:
        return None
    return PREDEFINITIONS.get(tag_name.lower())
