"""
Serial Queue - Runs asynchronous tasks one after another.

Tasks submitted through `SerialQueue.serie` start only once every
task submitted before them on the same queue has settled, even when
the submissions come from call sites that run concurrently on the
event loop. A failing task resets the whole queue.

Example - b starts once a is finished, despite its shorter delay:

    async def a():
        await asyncio.sleep(0.150)
        return "a"

    async def b():
        await asyncio.sleep(0.025)
        return "b"

    queue = SerialQueue()
    first = queue.serie(a)
    second = queue.serie(b)
    await asyncio.gather(first, second)
"""

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable, Optional, Union

from ..core.config import settings
from ..core.utils import unique_entry_id

# Configure logging
logger = logging.getLogger(__name__)

TaskFn = Callable[[], Any]


class SerialQueue:
    """
    A FIFO queue of pending asynchronous results.

    The queue keeps a table of identifier -> future for every result
    that has not settled yet. Submitting a task snapshots that table
    as the task's wait-list and registers the task itself in the same
    synchronous step, so a later submission always sees the earlier
    one. The event loop is single-threaded, which is what keeps the
    table consistent without locks.

    Ordering is scoped to one instance: two queues never wait on
    each other.
    """

    def __init__(
        self,
        id_prefix: Optional[str] = None,
        id_length: Optional[int] = None
    ):
        """Initialize an empty queue."""
        self.id_prefix = settings.queue.id_prefix if id_prefix is None else id_prefix
        self.id_length = settings.queue.id_length if id_length is None else id_length
        self._pending: dict[str, asyncio.Future] = {}

    def __len__(self) -> int:
        return len(self._pending)

    def add(self, pending: Union[Awaitable[Any], Any]) -> "SerialQueue":
        """
        Register an already started asynchronous operation.

        The entry is removed once the result succeeds. A failed or
        cancelled result stays registered until the queue is cleared.

        Args:
            pending: A coroutine, future or task. Any other value is
                registered as an already resolved result.

        Returns:
            The queue itself, to chain calls
        """
        if inspect.isawaitable(pending):
            future = asyncio.ensure_future(pending)
        else:
            future = asyncio.get_running_loop().create_future()
            future.set_result(pending)
        entry_id = self._get_id()
        self._pending[entry_id] = future
        future.add_done_callback(
            lambda done: self._on_added_settled(entry_id, done)
        )
        logger.debug(f"Added pending result {entry_id}")
        return self

    def get_values(self) -> list[asyncio.Future]:
        """
        Get the pending results.

        Returns:
            A snapshot list of the futures currently in the queue
        """
        return list(self._pending.values())

    def clear(self) -> "SerialQueue":
        """
        Drop every pending entry without waiting for it.

        The underlying operations keep running, the queue only stops
        tracking them.

        Returns:
            The queue itself, to chain calls
        """
        self._pending = {}
        return self

    def serie(self, task: Optional[TaskFn] = None) -> "asyncio.Task[Any]":
        """
        Run the given task at the end of the queue.

        Must be called from a running event loop. Everything up to the
        returned task is done synchronously: the wait-list snapshot and
        the registration of this submission happen before any other
        coroutine can submit.

        Args:
            task: A zero-argument callable returning an awaitable (or a
                plain value). Anything not callable is a no-op.

        Returns:
            A task resolving to the value produced by `task`. It raises
            whatever `task`, or a result it waited on, failed with.
        """
        loop = asyncio.get_running_loop()
        entry_id = self._get_id()
        wait_list = self.get_values()

        # resolved when this submission is over, for the ones behind it
        turn = loop.create_future()
        self._pending[entry_id] = turn
        logger.debug(f"Queued {entry_id} behind {len(wait_list)} pending result(s)")

        runner = loop.create_task(
            self._run_in_turn(entry_id, turn, wait_list, task)
        )
        runner.add_done_callback(
            lambda done: self._on_turn_over(entry_id, turn, done)
        )
        return runner

    async def _run_in_turn(
        self,
        entry_id: str,
        turn: asyncio.Future,
        wait_list: list[asyncio.Future],
        task: Optional[TaskFn]
    ) -> Any:
        """
        Wait for the wait-list, run the task, then release the turn.

        Args:
            entry_id: Identifier registered for this submission
            turn: The future later submissions are waiting on
            wait_list: Results submitted before this one
            task: The task to run

        Returns:
            The task's result
        """
        try:
            await self._wait_for(wait_list)
            result = await self._invoke(task)
        except Exception as e:
            logger.warning(
                f"Queued task {entry_id} failed, dropping "
                f"{len(self._pending)} pending entries: {e!r}"
            )
            self.clear()
            raise
        else:
            self._discard(entry_id, turn)
            logger.debug(f"Settled {entry_id}")
            return result
        finally:
            if not turn.done():
                turn.set_result(None)

    @staticmethod
    async def _wait_for(wait_list: list[asyncio.Future]) -> None:
        """
        Wait until every result of the wait-list has settled.

        Nothing in the wait-list is cancelled if the waiter is. Once
        all have settled, the first failure found is raised.

        Args:
            wait_list: The futures to wait on
        """
        if not wait_list:
            return

        await asyncio.wait(wait_list)

        for future in wait_list:
            if future.cancelled():
                continue
            error = future.exception()
            if error is not None:
                raise error

    @staticmethod
    async def _invoke(task: Optional[TaskFn]) -> Any:
        """Call the task and await its result when it is awaitable."""
        if not callable(task):
            return None

        result = task()
        if inspect.isawaitable(result):
            result = await result
        return result

    def _get_id(self) -> str:
        return unique_entry_id(self._pending, self.id_prefix, self.id_length)

    def _discard(self, entry_id: str, future: asyncio.Future) -> None:
        # the table may have been cleared and the id reused since
        if self._pending.get(entry_id) is future:
            del self._pending[entry_id]

    def _on_turn_over(
        self,
        entry_id: str,
        turn: asyncio.Future,
        runner: asyncio.Future
    ) -> None:
        # also covers a runner cancelled before it ever started
        if runner.cancelled():
            self._discard(entry_id, turn)
            logger.debug(f"Cancelled {entry_id}")
        if not turn.done():
            turn.set_result(None)

    def _on_added_settled(self, entry_id: str, future: asyncio.Future) -> None:
        if future.cancelled() or future.exception() is not None:
            return
        self._discard(entry_id, future)
        logger.debug(f"Settled added result {entry_id}")
