import threading


class AbortScope:
    """
    Cancellation token tied to one request.

    A view opens a scope per fetch; aborting it (new fetch, unmount) marks the
    eventual response as stale so it is dropped instead of applied.
    """

    def __init__(self):
        self._aborted = threading.Event()

    def abort(self) -> None:
        self._aborted.set()

    @property
    def aborted(self) -> bool:
        return self._aborted.is_set()


class ScopeOwner:
    """Holds the current scope of a view; opening a new one aborts the old."""

    def __init__(self):
        self._lock = threading.Lock()
        self._current: AbortScope | None = None

    def open(self) -> AbortScope:
        scope = AbortScope()
        with self._lock:
            if self._current is not None:
                self._current.abort()
            self._current = scope
        return scope

    def abort(self) -> None:
        with self._lock:
            if self._current is not None:
                self._current.abort()
            self._current = None
