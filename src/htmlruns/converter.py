"""High-level markup-to-fragments orchestrator.

Ties together the parser, style manager, and renderer into a single
public API for rendering HTML or Markdown text or files.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Optional, Union

from htmlruns.fragments import Fragment, to_data, to_plain_text
from htmlruns.navigation import LinkBinder, Navigator
from htmlruns.parser import MarkupParser
from htmlruns.renderer import DEFAULT_FONT_SIZE, RenderContext, Renderer
from htmlruns.style_manager import StyleManager
from htmlruns.styles import StyleDict


class Converter:
    """Render markup content to text fragments.

    Usage::

        converter = Converter(style_preset="default")
        fragments = converter.convert_text("<p>Hello <b>world</b></p>")

        # or from a file
        fragments = converter.convert_file("input.html")
    """

    STYLE_PRESETS = StyleManager.PRESETS
    SOURCES = MarkupParser.SOURCES

    def __init__(
        self,
        style_preset: str = "default",
        *,
        base_font_size: Union[int, float] = DEFAULT_FONT_SIZE,
        allow_links: bool = False,
        source: str = "html",
        navigator: Optional[Navigator] = None,
        tag_styles: Optional[Mapping[str, StyleDict]] = None,
    ) -> None:
        if base_font_size <= 0:
            raise ValueError(f"base_font_size must be positive, got {base_font_size!r}")
        self.style_manager = StyleManager(style_preset).with_overrides(tag_styles)
        self.parser = MarkupParser(source)
        self.context = RenderContext(
            base_font_size=base_font_size,
            tag_styles=self.style_manager.tag_styles(),
            allow_links=allow_links,
        )
        self.binder = LinkBinder(navigator) if allow_links else None
        self.renderer = Renderer(self.context, self.binder)

    def convert_text(self, markup: str) -> list[Fragment]:
        """Convert markup text to fragments.

        Args:
            markup: HTML (or Markdown) source string.

        Returns:
            The rendered fragments, in display order.
        """
        root = self.parser.parse(markup)
        return self.renderer.render(root)

    def convert_to_data(self, markup: str) -> list:
        """Convert markup text to JSON-serializable fragment data."""
        return to_data(self.convert_text(markup))

    def convert_to_text(self, markup: str) -> str:
        """Convert markup text to the plain text it displays as."""
        return to_plain_text(self.convert_text(markup))

    def convert_file(
        self,
        input_path: str | Path,
        *,
        encoding: str = "utf-8",
    ) -> list[Fragment]:
        """Read a markup file and return its fragments.

        Args:
            input_path: Path to the input file.
            encoding: Text encoding of the source file.
        """
        text = Path(input_path).read_text(encoding=encoding)
        return self.convert_text(text)
