"""Fork points: spawn child execution contexts with derived context-local values.

Python's own propagation is not enough here. ``asyncio`` copies the context
shallowly when a task is created, so parent and child would share the same
span objects, and a new ``threading.Thread`` starts with an empty context.
These helpers derive every registered cell in the parent, synchronously, and
run the child inside the resulting context.
"""

from __future__ import annotations

import asyncio
import contextvars
import logging
import threading
from concurrent.futures import Executor, Future
from typing import Any, Callable, Coroutine, Optional

from forkspan import runtime_config
from forkspan.context.local import derive_values, install_values

logger = logging.getLogger(__name__)


def fork_context() -> contextvars.Context:
    """
    Create the context a child execution unit should run in.

    Every context-local cell holding a value in the caller's
    context is replaced by its ``derive_child_value()``. The returned
    context must be entered by exactly one child.

    Returns:
        A new contextvars.Context
    """
    derived = derive_values()
    ctx = contextvars.copy_context()
    ctx.run(install_values, derived)

    if runtime_config.get_debug():
        logger.debug(f"forked {len(derived)} context locals")
    return ctx


def start_thread(
    target: Callable[..., Any],
    *args: Any,
    name: Optional[str] = None,
    daemon: Optional[bool] = None,
    **kwargs: Any,
) -> threading.Thread:
    """
    Start a thread running ``target`` in a context forked from the caller's.

    Args:
        target: Callable to run on the new thread
        name: Optional thread name
        daemon: Optional daemon flag

    Returns:
        The started thread
    """
    ctx = fork_context()
    thread = threading.Thread(
        target=ctx.run,
        args=(target, *args),
        kwargs=kwargs,
        name=name,
        daemon=daemon,
    )
    thread.start()
    return thread


def create_task(
    coro: Coroutine[Any, Any, Any],
    *,
    name: Optional[str] = None,
) -> asyncio.Task:
    """
    Schedule ``coro`` on the running loop in a context forked from the caller's.

    Raises:
        RuntimeError: if called without a running event loop
    """
    loop = asyncio.get_running_loop()
    return loop.create_task(coro, name=name, context=fork_context())


def submit(executor: Executor, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
    """Submit ``fn`` to ``executor`` to run in a context forked from the caller's."""
    ctx = fork_context()
    return executor.submit(ctx.run, fn, *args, **kwargs)
