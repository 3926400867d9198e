"""Blocking adapter over a coroutine-only validator."""

from __future__ import annotations

import asyncio
import threading
from collections.abc import Awaitable, Callable

from valid_class_name.logging import get_logger, warn

AsyncValidate = Callable[[str], Awaitable[bool]]

LOGGER = get_logger(__name__)


class AsyncValidatorBridge:
    """Runs an async validator on a private event loop and blocks for each answer."""

    def __init__(self, validate: AsyncValidate) -> None:
        self._validate = validate
        self._loop = asyncio.new_event_loop()
        self._thread = threading.Thread(
            target=self._run_loop,
            name="utility-validator-bridge",
            daemon=True,
        )
        self._closed = False
        self._thread.start()

    def _run_loop(self) -> None:
        asyncio.set_event_loop(self._loop)
        self._loop.run_forever()

    def is_valid_class_name(self, class_name: str) -> bool:
        """Block the calling thread until the async validator answers."""
        if self._closed:
            return False
        future = asyncio.run_coroutine_threadsafe(self._run(class_name), self._loop)
        return future.result()

    async def _run(self, class_name: str) -> bool:
        try:
            return bool(await self._validate(class_name))
        except Exception as error:
            warn(LOGGER, f'Utility validator failed for "{class_name}"', error)
            return False

    def close(self) -> None:
        """Stop the loop thread; later calls answer False."""
        if self._closed:
            return
        self._closed = True
        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join()
        self._loop.close()

    def __enter__(self) -> AsyncValidatorBridge:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
