"""Multicast events that call every bound handler on broadcast."""

from __future__ import annotations

from typing import Any, Callable, Iterator

Handler = Callable[..., Any]


class Event:
    """A list of handlers that are all called, in order of binding, on broadcast."""

    def __init__(self) -> None:
        self._handlers: list[Handler] = []

    def add(self, handler: Handler) -> None:
        """Bind a handler; binding one that is already bound does nothing."""
        if handler not in self._handlers:
            self._handlers.append(handler)

    def remove(self, handler: Handler) -> None:
        """Unbind a handler; unbinding one that is not bound does nothing."""
        if handler in self._handlers:
            self._handlers.remove(handler)

    def broadcast(self, *args: Any) -> None:
        """Call every handler bound at the time of the call with the given arguments."""
        for handler in list(self._handlers):
            handler(*args)

    def clear(self) -> None:
        """Unbind every handler."""
        self._handlers.clear()

    def __contains__(self, handler: object) -> bool:
        return handler in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    def __iter__(self) -> Iterator[Handler]:
        return iter(list(self._handlers))