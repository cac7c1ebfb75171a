"""Tracking of resources that become available once their assets load."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Hashable
from typing import Any

InsertLoaded = Callable[[Any], None]


class ResourceHandles:
    """Queue of requested resources, moved to finished once loaded."""

    def __init__(self) -> None:
        self._waiting: deque[tuple[Hashable, InsertLoaded]] = deque()
        self._finished: list[Hashable] = []

    def request(self, handle: Hashable, insert: InsertLoaded) -> None:
        """Wait for ``handle``; call ``insert(handle)`` once it has loaded."""
        self._waiting.append((handle, insert))

    def poll(self, is_loaded: Callable[[Hashable], bool]) -> list[Hashable]:
        """Cycle once through the waiting handles, inserting those that loaded.

        Returns the handles that finished during this call, in queue order.
        """
        done: list[Hashable] = []
        for _ in range(len(self._waiting)):
            handle, insert = self._waiting.popleft()
            if is_loaded(handle):
                insert(handle)
                self._finished.append(handle)
                done.append(handle)
            else:
                self._waiting.append((handle, insert))
        return done

    def is_all_done(self) -> bool:
        """True when every requested resource has been inserted."""
        return not self._waiting

    @property
    def waiting(self) -> tuple[Hashable, ...]:
        return tuple(handle for handle, _ in self._waiting)

    @property
    def finished(self) -> tuple[Hashable, ...]:
        return tuple(self._finished)