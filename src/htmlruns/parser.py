"""Markup parser that produces a light node tree for the renderer.

HTML is parsed with BeautifulSoup's ``html5lib`` builder, which applies the
HTML5 tree rules (implied ``</li>``, ``</p>``, ...), keeps whitespace inside
the body and resolves character references.  The children of the resulting
``<body>`` are converted into :class:`ElementNode` / :class:`TextNode`
objects.  Markdown sources are first turned into HTML with mistune v3.
"""

from __future__ import annotations

import html as html_entities
import logging
import weakref
from dataclasses import dataclass, field
from typing import Optional, Union

import mistune
from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

logger = logging.getLogger(__name__)

# Raw text elements: the tokenizer leaves their character references alone
_RAW_TEXT_TAGS = ("script", "style")


# ---------------------------------------------------------------------------
# Node definitions
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class TextNode:
    """Character data with entities already decoded."""

    text: str


@dataclass(eq=False)
class ElementNode:
    """An element with its attributes and ordered children.

    ``parent`` is a weak back-reference, so holding a child does not keep
    the rest of the tree alive.  The document root has an empty tag name.
    """

    tag_name: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[MarkupNode] = field(default_factory=list)
    _parent: Optional[weakref.ReferenceType] = field(default=None, repr=False)

    @property
    def parent(self) -> Optional[ElementNode]:
        return self._parent() if self._parent is not None else None

    def append(self, child: MarkupNode) -> None:
        if isinstance(child, ElementNode):
            child._parent = weakref.ref(self)
        self.children.append(child)

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name.lower())


MarkupNode = Union[ElementNode, TextNode]


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

class MarkupParser:
    """Parse HTML (or Markdown) text into an :class:`ElementNode` tree."""

    SOURCES = ["html", "markdown"]

    def __init__(self, source: str = "html") -> None:
        if source not in self.SOURCES:
            raise ValueError(
                f"Unknown source format {source!r}. Choose from: {', '.join(self.SOURCES)}"
            )
        self.source = source
        self._md = None
        if source == "markdown":
            self._md = mistune.create_markdown(
                escape=False,
                plugins=["table", "strikethrough", "footnotes", "task_lists"],
            )

    # -- public API ---------------------------------------------------------

    def parse(self, text: str) -> ElementNode:
        """Return the root :class:`ElementNode` for *text*."""
        html = self.to_html(text)
        soup = BeautifulSoup(html, "html5lib", multi_valued_attributes=None)
        root = ElementNode(tag_name="")
        self._convert_children(soup.body or soup, root)
        logger.debug(
            "Parsed %d characters of %s into %d top-level nodes",
            len(text), self.source, len(root.children),
        )
        return root

    def to_html(self, text: str) -> str:
        """Return *text* as HTML, converting Markdown when configured."""
        if self._md is None:
            return text
        return str(self._md(text))

    # -- soup conversion ----------------------------------------------------

    def _convert_children(self, tag: Tag, parent: ElementNode) -> None:
        raw_text = tag.name in _RAW_TEXT_TAGS
        for child in tag.children:
            node = self._convert(child, raw_text)
            if node is None:
                continue
            last = parent.children[-1] if parent.children else None
            if isinstance(node, TextNode) and isinstance(last, TextNode):
                last.text += node.text
            else:
                parent.append(node)

    def _convert(self, item, raw_text: bool = False) -> Optional[MarkupNode]:
        # Comments, doctypes, CDATA and processing instructions carry no text
        if isinstance(item, PreformattedString):
            return None
        if isinstance(item, NavigableString):
            text = str(item)
            return TextNode(text=html_entities.unescape(text) if raw_text else text)
        if isinstance(item, Tag):
            element = ElementNode(
                tag_name=item.name.lower(),
                attributes={k.lower(): str(v) for k, v in item.attrs.items()},
            )
            self._convert_children(item, element)
            return element
        return None
