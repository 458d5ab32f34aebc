"""Tests for link validation and press-handler binding."""

from __future__ import annotations

import asyncio

import pytest

from htmlruns.fragments import StyledRun
from htmlruns.navigation import BrowserNavigator, LinkBinder
from htmlruns.parser import MarkupParser
from htmlruns.renderer import RenderContext, Renderer

LINK_STYLES = {"a": {"color": "blue"}}


def render_links(parser: MarkupParser, markup: str, binder: LinkBinder) -> list:
    context = RenderContext(tag_styles=LINK_STYLES, allow_links=True)
    return Renderer(context, binder).render(parser.parse(markup))


# ---------------------------------------------------------------------------
# BrowserNavigator
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
class TestBrowserNavigator:

    @pytest.mark.parametrize(
        "target",
        ["https://example.org", "http://example.org/a?b=1", "mailto:me@example.org", "tel:+123"],
    )
    async def test_accepts(self, target: str) -> None:
        assert await BrowserNavigator().can_open(target) is True

    @pytest.mark.parametrize(
        "target",
        ["", "javascript:alert(1)", "/relative/path", "https://", "ftp://example.org", "mailto:"],
    )
    async def test_rejects(self, target: str) -> None:
        assert await BrowserNavigator().can_open(target) is False

    async def test_open_uses_webbrowser(self, monkeypatch) -> None:
        opened: list[str] = []
        monkeypatch.setattr("webbrowser.open", opened.append)
        BrowserNavigator().open(" https://example.org ")
        assert opened == ["https://example.org"]


# ---------------------------------------------------------------------------
# Binding inside a running loop
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
class TestBindInLoop:

    async def test_handler_attached_after_validation(self, parser, navigator) -> None:
        binder = LinkBinder(navigator)
        (run,) = render_links(parser, '<a href="https://example.org">x</a>', binder)

        # rendering returned before validation ran
        assert isinstance(run, StyledRun)
        assert run.target == "https://example.org"
        assert run.activation is None
        assert binder.pending == 1

        await binder.settle()
        assert binder.pending == 0
        assert navigator.checked == ["https://example.org"]
        assert run.activate() is True
        assert navigator.opened == ["https://example.org"]

    async def test_rejected_target_never_activates(self, parser, navigator) -> None:
        navigator.usable = False
        binder = LinkBinder(navigator)
        (run,) = render_links(parser, '<a href="nope">x</a>', binder)
        await binder.settle()
        assert run.activation is None
        assert run.activate() is False
        assert navigator.opened == []

    async def test_validation_error_swallowed(self, parser, navigator) -> None:
        navigator.error = RuntimeError("boom")
        binder = LinkBinder(navigator)
        fragments = render_links(parser, '<a href="https://example.org">x</a>', binder)
        await binder.settle()
        assert fragments[0].activation is None

    async def test_anchor_without_href(self, parser, navigator) -> None:
        binder = LinkBinder(navigator)
        (run,) = render_links(parser, "<a>x</a>", binder)
        await asyncio.sleep(0)
        assert binder.pending == 0
        assert run.target is None
        assert navigator.checked == []

    async def test_unstyled_anchor_not_bound(self, parser, navigator) -> None:
        binder = LinkBinder(navigator)
        context = RenderContext(allow_links=True)
        Renderer(context, binder).render(parser.parse('<a href="https://example.org">x</a>'))
        assert binder.pending == 0

    async def test_only_anchors_bound(self, parser, navigator) -> None:
        binder = LinkBinder(navigator)
        markup = '<p style="color: red" href="https://example.org">x</p>'
        render_links(parser, markup, binder)
        assert binder.pending == 0

    async def test_structure_unaffected_by_handler(self, parser, navigator) -> None:
        markup = '<p>see <a href="https://example.org">docs</a></p>'
        binder = LinkBinder(navigator)
        before = render_links(parser, markup, binder)
        await binder.settle()
        after = render_links(parser, markup, binder)
        await binder.settle()
        assert before == after


# ---------------------------------------------------------------------------
# Binding without a loop
# ---------------------------------------------------------------------------

class TestBindWithoutLoop:

    def test_worker_thread(self, parser, navigator) -> None:
        binder = LinkBinder(navigator)
        try:
            (run,) = render_links(parser, '<a href="https://example.org">x</a>', binder)
            binder.wait(timeout=5)
        finally:
            binder.close()
        assert binder.pending == 0
        assert run.activate() is True
        assert navigator.opened == ["https://example.org"]

    def test_renderer_creates_binder_when_links_allowed(self) -> None:
        assert Renderer(RenderContext(allow_links=True)).binder is not None
        assert Renderer(RenderContext()).binder is None
