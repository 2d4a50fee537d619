"""One-shot stateful fetch primitive.

A `FetchHook` owns a single `FetchState` and runs its fetch coroutine exactly
once, on first activation. Re-activating (a redraw of the consumer) returns
the task already in flight instead of fetching again. Presentation code reads
`snapshot()`, a `{<data_field>, loading, error}` mapping.

There is no cancellation and no timeout: a request that never completes keeps
`loading=True`. `dispose()` marks the owner as torn down so a late completion
does not touch the state.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, TypeVar

from loguru import logger

T = TypeVar("T")


@dataclass
class FetchState(Generic[T]):
    data: T
    loading: bool = False
    error: str | None = None


def error_message(exc: BaseException) -> str | None:
    """Message carried by `exc`, or None when it has none.

    A failure without a message is exposed as `error=None` on purpose; the
    state still stops loading and keeps its initial data.
    """

    message = getattr(exc, "message", None)
    if message is None and exc.args:
        message = exc.args[0]
    return None if message is None else str(message)


class FetchHook(Generic[T]):
    def __init__(
        self,
        fetch: Callable[[], Awaitable[T]],
        *,
        data_field: str,
        initial: Callable[[], T],
    ) -> None:
        self._fetch = fetch
        self.data_field = data_field
        self.state: FetchState[T] = FetchState(data=initial())
        self._task: asyncio.Task[None] | None = None
        self._disposed = False

    @property
    def started(self) -> bool:
        return self._task is not None

    @property
    def disposed(self) -> bool:
        return self._disposed

    def activate(self) -> asyncio.Task[None]:
        """Start the fetch on first call; later calls return the same task.

        Must be called with a running event loop.
        """

        if self._task is None:
            self.state.loading = True
            self._task = asyncio.get_running_loop().create_task(self._run())
        return self._task

    async def load(self) -> FetchState[T]:
        await self.activate()
        return self.state

    def dispose(self) -> None:
        self._disposed = True

    async def _run(self) -> None:
        try:
            result = await self._fetch()
        except Exception as exc:
            self._complete_error(exc)
        else:
            self._complete(result)

    def _complete(self, result: T) -> None:
        if self._disposed:
            logger.debug(f"Discarding '{self.data_field}' result: owner was disposed")
            return
        self.state.data = result
        self.state.loading = False

    def _complete_error(self, exc: Exception) -> None:
        if self._disposed:
            logger.debug(f"Discarding '{self.data_field}' failure: owner was disposed")
            return
        self.state.error = error_message(exc)
        self.state.loading = False
        logger.info(f"Fetch for '{self.data_field}' failed: {self.state.error}")

    def snapshot(self) -> dict[str, Any]:
        return {
            self.data_field: self.state.data,
            "loading": self.state.loading,
            "error": self.state.error,
        }
