"""Link activation: target validation and fire-and-forget handler binding.

Rendering never waits for a link target to be validated.  The renderer
hands each anchor run to a :class:`LinkBinder`, which validates the target
in the background and, when the target is usable, stores a press handler
in the run's ``activation`` slot.  Until then (or forever, when validation
fails) pressing the run does nothing.
"""

from __future__ import annotations

import asyncio
import logging
import webbrowser
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import wait as wait_futures
from typing import Optional, Protocol
from urllib.parse import urlparse

from htmlruns.fragments import StyledRun

logger = logging.getLogger(__name__)


class Navigator(Protocol):
    """Opens link targets on behalf of activated runs."""

    async def can_open(self, target: str) -> bool: ...

    def open(self, target: str) -> None: ...


class BrowserNavigator:
    """Open web, mail and phone links with the :mod:`webbrowser` module."""

    SCHEMES = ("http", "https", "mailto", "tel")

    async def can_open(self, target: str) -> bool:
        if not target:
            return False
        parsed = urlparse(target.strip())
        if parsed.scheme not in self.SCHEMES:
            return False
        if parsed.scheme in ("http", "https"):
            return bool(parsed.netloc)
        return bool(parsed.path)

    def open(self, target: str) -> None:
        webbrowser.open(target.strip())


class LinkBinder:
    """Validate link targets in the background and attach press handlers.

    Inside a running event loop validation is scheduled as a task on that
    loop.  Without one it runs on a private worker thread.
    """

    def __init__(self, navigator: Optional[Navigator] = None) -> None:
        self.navigator: Navigator = navigator or BrowserNavigator()
        self._tasks: set[asyncio.Task] = set()
        self._futures: set[Future] = set()
        self._executor: Optional[ThreadPoolExecutor] = None

    # -- public API ---------------------------------------------------------

    def bind(self, run: StyledRun, target: str) -> None:
        """Schedule validation of *target*; returns immediately."""
        run.target = target
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        if loop is not None:
            task = loop.create_task(self._attach(run, target))
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)
        else:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=1, thread_name_prefix="htmlruns-links",
                )
            future = self._executor.submit(asyncio.run, self._attach(run, target))
            self._futures = {f for f in self._futures if not f.done()}
            self._futures.add(future)
        logger.debug("Scheduled link validation for %r", target)

    @property
    def pending(self) -> int:
        """Number of validations that have not finished yet."""
        tasks = [t for t in self._tasks if not t.done()]
        futures = [f for f in self._futures if not f.done()]
        return len(tasks) + len(futures)

    async def settle(self) -> None:
        """Wait until every validation scheduled on the current loop is done."""
        pending = [task for task in self._tasks if not task.done()]
        while pending:
            await asyncio.wait(pending)
            pending = [task for task in self._tasks if not task.done()]

    def wait(self, timeout: Optional[float] = None) -> None:
        """Block until validations running on the worker thread are done."""
        if self._futures:
            wait_futures(list(self._futures), timeout=timeout)
        self._futures = {f for f in self._futures if not f.done()}

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    # -- internals ----------------------------------------------------------

    async def _attach(self, run: StyledRun, target: str) -> None:
        try:
            usable = await self.navigator.can_open(target)
        except Exception as exc:
            logger.debug("Link target %r failed validation: %s", target, exc)
            return
        if not usable:
            logger.debug("Link target %r cannot be opened", target)
            return

        navigator = self.navigator
        run.activation = lambda: navigator.open(target)
