"""Bullet and number prefixes for list items."""

from __future__ import annotations

from htmlruns.parser import ElementNode

BULLET_PREFIX = "• "
FALLBACK_PREFIX = "- "


def resolve_prefix(node: ElementNode) -> str:
    """Return the list marker to put in front of *node*'s content.

    Children of ``ul`` get a bullet, children of ``ol`` their 1-based
    position among the list's ``li`` children.  Anything else gets no
    prefix.
    """
    parent = node.parent
    if parent is None:
        return ""

    if parent.tag_name == "ul":
        return BULLET_PREFIX

    if parent.tag_name == "ol":
        items = [
            child for child in parent.children
            if isinstance(child, ElementNode) and child.tag_name == "li"
        ]
        for position, item in enumerate(items):
            if item is node:
                return f"{position + 1}. "
        return FALLBACK_PREFIX

    return ""
