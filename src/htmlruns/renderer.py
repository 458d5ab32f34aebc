"""Tree renderer - converts a markup tree to nested text fragments.

This module walks an :class:`~htmlruns.parser.ElementNode` tree (produced by
:mod:`htmlruns.parser`) and emits the fragments a single text primitive can
display as contiguous inline text.  Block structure is flattened into
injected newlines (see :mod:`htmlruns.predefinitions`), list items get their
bullet or number, and each element's tag style and inline style are merged
into the style of the run that wraps its content.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional, Union

from htmlruns.fragments import Fragment, Group, StyledRun
from htmlruns.lists import resolve_prefix
from htmlruns.navigation import LinkBinder
from htmlruns.parser import ElementNode, MarkupNode, MarkupParser, TextNode
from htmlruns.predefinitions import lookup
from htmlruns.styles import StyleDict, normalize, parse_style_attribute

logger = logging.getLogger(__name__)

DEFAULT_FONT_SIZE = 16


@dataclass(frozen=True)
class RenderContext:
    """Settings shared, read-only, by every step of a render."""

    base_font_size: Union[int, float] = DEFAULT_FONT_SIZE
    tag_styles: Mapping[str, StyleDict] = field(default_factory=dict)
    allow_links: bool = False


# ---------------------------------------------------------------------------
# Renderer
# ---------------------------------------------------------------------------

class Renderer:
    """Render an :class:`ElementNode` tree to a list of fragments.

    The tree is never modified and each call builds new fragments, so
    rendering the same tree twice gives equal results.  Anchors only get a
    press handler when *context* allows links; validation of the target
    happens in the background through *binder*.
    """

    def __init__(
        self,
        context: Optional[RenderContext] = None,
        binder: Optional[LinkBinder] = None,
    ) -> None:
        self.context: RenderContext = context or RenderContext()
        self.binder: Optional[LinkBinder] = binder
        if self.binder is None and self.context.allow_links:
            self.binder = LinkBinder()

    # ======================================================================
    # Public API
    # ======================================================================

    def render(self, root: ElementNode) -> list[Fragment]:
        """Return the fragments for the children of *root*."""
        return self.render_children(root, self.context.base_font_size)

    def render_children(
        self, node: ElementNode, font_size: Union[int, float],
    ) -> list[Fragment]:
        """Render each child of *node* with *font_size* as the ambient size."""
        fragments: list[Fragment] = []
        for child in node.children:
            fragments.extend(self._render_node(child, font_size))
        return fragments

    # ======================================================================
    # Node dispatch
    # ======================================================================

    def _render_node(self, node: MarkupNode, font_size: Union[int, float]) -> list[Fragment]:
        if isinstance(node, TextNode):
            return [node.text]
        if isinstance(node, ElementNode):
            return self._render_element(node, font_size)
        return []

    def _render_element(self, node: ElementNode, font_size: Union[int, float]) -> list[Fragment]:
        directive = lookup(node.tag_name)
        if directive is not None and directive.content:
            return [directive.content]

        normalized = normalize(font_size, [
            self.context.tag_styles.get(node.tag_name),
            parse_style_attribute(node.get_attribute("style")),
        ])
        children = self.render_children(node, normalized.font_size)

        prefix = resolve_prefix(node)
        content: list[Fragment] = [prefix, *children] if prefix else children

        wrapper: Fragment
        if normalized.style:
            wrapper = StyledRun(style=normalized.style, children=content)
            if directive is not None and directive.can_activate:
                self._bind_link(node, wrapper)
        else:
            wrapper = Group(children=content)

        fragments: list[Fragment] = []
        if directive is not None and directive.before_content:
            fragments.append(directive.before_content)
        fragments.append(wrapper)
        if directive is not None and directive.after_content:
            fragments.append(directive.after_content)
        return fragments

    def _bind_link(self, node: ElementNode, run: StyledRun) -> None:
        if not self.context.allow_links or self.binder is None:
            return
        href = node.get_attribute("href")
        if href:
            self.binder.bind(run, href)


# ---------------------------------------------------------------------------
# Convenience entry point
# ---------------------------------------------------------------------------

def render_markup(
    text: str,
    context: Optional[RenderContext] = None,
    *,
    parser: Optional[MarkupParser] = None,
    binder: Optional[LinkBinder] = None,
) -> list[Fragment]:
    """Parse *text* and render it in one step.

    When *context* allows links a *binder* must be passed, so the caller
    owns it and can wait for or close it; otherwise ``ValueError`` is raised.
    """
    if context is not None and context.allow_links and binder is None:
        raise ValueError("render_markup with allow_links requires a LinkBinder")
    root = (parser or MarkupParser()).parse(text)
    fragments = Renderer(context, binder).render(root)
    logger.debug("Rendered %d top-level fragments", len(fragments))
    return fragments
