"""Render fragments: the nested text runs handed to a text primitive.

A fragment is either a plain ``str``, a :class:`StyledRun` carrying a style
dictionary (and possibly a press handler), or a :class:`Group` that only
groups children without styling them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional, Union

from htmlruns.styles import StyleDict


@dataclass
class StyledRun:
    """A run of children rendered with *style*.

    ``target`` is the link destination for anchors when link activation is
    enabled.  ``activation`` is filled in asynchronously once a link target has been
    validated, so it is left out of equality and ``repr``.
    """

    style: StyleDict
    children: list[Fragment] = field(default_factory=list)
    target: Optional[str] = None
    activation: Optional[Callable[[], None]] = field(
        default=None, compare=False, repr=False,
    )

    def activate(self) -> bool:
        """Invoke the press handler if one is attached."""
        if self.activation is None:
            return False
        self.activation()
        return True


@dataclass
class Group:
    """Unstyled grouping of children."""

    children: list[Fragment] = field(default_factory=list)


Fragment = Union[str, StyledRun, Group]


def iter_text(fragments: Iterable[Fragment]):
    """Yield the text leaves of *fragments* in display order."""
    for fragment in fragments:
        if isinstance(fragment, str):
            yield fragment
        else:
            yield from iter_text(fragment.children)


def to_plain_text(fragments: Iterable[Fragment]) -> str:
    """Flatten *fragments* to the string a text primitive would display."""
    return "".join(iter_text(fragments))


def to_data(fragments: Iterable[Fragment]) -> list[Any]:
    """Return a JSON-serializable representation of *fragments*."""
    data: list[Any] = []
    for fragment in fragments:
        if isinstance(fragment, StyledRun):
            data.append({
                "type": "styled",
                "style": dict(fragment.style),
                "children": to_data(fragment.children),
            })
            if fragment.target is not None:
                data[-1]["link"] = {
                    "target": fragment.target,
                    "active": fragment.activation is not None,
                }
        elif isinstance(fragment, Group):
            data.append({"type": "group", "children": to_data(fragment.children)})
        else:
            data.append(fragment)
    return data
