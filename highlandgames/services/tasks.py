"""
Background dispatch for work the HTTP response does not wait for
(confirmation emails, removal of replaced images).
"""
import logging
import threading
from typing import Callable, Any

logger = logging.getLogger(__name__)


class TaskRunner:
    """
    Runs fire-and-forget callables on daemon threads.
    With inline=True the callable runs immediately in the caller's thread.
    Errors are logged and never propagated.
    """

    def __init__(self, inline: bool = False):
        self.inline = inline

    def submit(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        if self.inline:
            self._run(func, *args, **kwargs)
            return
        thread = threading.Thread(
            target=self._run,
            args=(func,) + args,
            kwargs=kwargs,
            name=f"task-{getattr(func, '__name__', 'anonymous')}",
            daemon=True,
        )
        thread.start()

    @staticmethod
    def _run(func: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        try:
            func(*args, **kwargs)
        except Exception:
            logger.exception("Background task %s failed", getattr(func, '__name__', func))
