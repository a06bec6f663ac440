"""Permit pool bounding how many page fetches run at once."""

import threading


class PermitPool:
    """Counting permits over a bounded semaphore.

    Usable as a context manager: ``with permits:`` holds one permit for the block.
    """

    def __init__(self, size: int):
        if not isinstance(size, int) or isinstance(size, bool) or size < 1:
            raise ValueError(f"Permit pool size must be a positive integer, got {size!r}")
        self.size = size
        self._semaphore = threading.BoundedSemaphore(size)

    def acquire(self) -> None:
        """Block the calling thread until a permit is free."""
        self._semaphore.acquire()

    def release(self) -> None:
        self._semaphore.release()

    def __enter__(self):
        self.acquire()
        return self

    def __exit__(self, *exc_info):
        self.release()
