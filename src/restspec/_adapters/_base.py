import threading
from abc import ABC, abstractmethod
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Optional, TypeVar

from .._request import RestRequest
from ..models.response import ResponseEnvelope

T = TypeVar("T")

_default_executor: Optional[ThreadPoolExecutor] = None
_default_executor_lock = threading.Lock()


def get_default_executor(max_workers: Optional[int] = None) -> ThreadPoolExecutor:
    """Return the process-wide worker pool used by ``send_async``.

    The pool is created on first use; ``max_workers`` only applies then.
    """
    global _default_executor
    with _default_executor_lock:
        if _default_executor is None:
            _default_executor = ThreadPoolExecutor(
                max_workers=max_workers, thread_name_prefix="restspec"
            )
        return _default_executor


class RestClientAdapter(ABC):
    """Sends :class:`RestRequest` objects over a concrete HTTP client.

    Implementations only provide :meth:`send`. Errors raised by the
    underlying client are propagated unmodified.
    """

    max_workers: Optional[int] = None

    @abstractmethod
    def send(self, request: RestRequest[T]) -> ResponseEnvelope[T]:
        """Send ``request`` and wait for the response."""

    def send_for_body(self, request: RestRequest[T]) -> Optional[T]:
        """Send ``request`` and return only the decoded body, if any."""
        return self.send(request).body

    def _executor(self, executor: Optional[Executor]) -> Executor:
        return executor or get_default_executor(self.max_workers)

    def send_async(
        self, request: RestRequest[T], executor: Optional[Executor] = None
    ) -> "Future[ResponseEnvelope[T]]":
        """Schedule :meth:`send` on a worker pool.

        Failures are delivered through the returned future. Cancelling the
        future only prevents a send that has not started yet.
        """
        return self._executor(executor).submit(self.send, request)

    def send_for_body_async(
        self, request: RestRequest[T], executor: Optional[Executor] = None
    ) -> "Future[Optional[T]]":
        return self._executor(executor).submit(self.send_for_body, request)
