"""
Thread-safe initialize-once cell.

:class:`Lazy` runs its factory the first time :meth:`Lazy.get` is called and
hands the same object to every later caller, from any thread. A factory that
raises is not retried: the exception is stored and raised again on each call.
"""
import logging
import threading
from types import TracebackType
from typing import Callable, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Lazy(Generic[T]):
    """
    Holds a value produced on first use by ``factory``.

    :param factory: Zero-argument callable building the value.
    :type factory: Callable[[], T]
    """

    def __init__(self, factory: Callable[[], T]):
        self._factory = factory
        self._lock = threading.Lock()
        self._done = False
        self._value: Optional[T] = None
        self._error: Optional[BaseException] = None
        self._traceback: Optional[TracebackType] = None

    @property
    def initialized(self) -> bool:
        return self._done

    def get(self) -> T:
        """
        Return the value, building it on the first call.

        :raises Exception: Whatever the factory raised, on every call once it failed.
        :return: The cached value.
        """
        if not self._done:
            with self._lock:
                if not self._done:
                    try:
                        self._value = self._factory()
                    except Exception as e:
                        logger.error("Initialization failed, caching error: %s", e)
                        self._error = e
                        self._traceback = e.__traceback__
                    self._done = True

        if self._error is not None:
            # Each raise starts again from the traceback of the failed build
            raise self._error.with_traceback(self._traceback)
        return self._value
