"""htmlruns - render HTML fragments as nested styled text runs."""

from htmlruns.converter import Converter
from htmlruns.fragments import Group, StyledRun, to_data, to_plain_text
from htmlruns.renderer import RenderContext, Renderer, render_markup

__version__ = "0.1.0"

__all__ = [
    "Converter",
    "Group",
    "RenderContext",
    "Renderer",
    "StyledRun",
    "__version__",
    "render_markup",
    "to_data",
    "to_plain_text",
]
