"""A list of event handlers keyed by cancellation tokens."""

from __future__ import annotations

from typing import Any, Callable

from saffron2d.identifier import UUID

Handler = Callable[..., Any]


class SubscriberList:
    """Handlers invoked in turn until one returns a true value."""

    def __init__(self) -> None:
        self._subscribers: dict[UUID, Handler] = {}

    def invoke(self, *args: Any) -> None:
        """Call each handler with ``args``; stop at the first that returns true."""
        for handler in list(self._subscribers.values()):
            if handler(*args):
                break

    def subscribe(self, handler: Handler) -> UUID:
        """Add a handler and return the token that removes it."""
        token = UUID()
        self._subscribers[token] = handler
        return token

    def unsubscribe(self, token: UUID) -> None:
        """Remove the handler for ``token``; unknown tokens are ignored."""
        self._subscribers.pop(token, None)

    def is_empty(self) -> bool:
        return not self._subscribers

    def __len__(self) -> int:
        return len(self._subscribers)