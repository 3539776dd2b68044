"""Pure Python signals for the view-model layer (no Qt dependency).

``Signal`` implements observer callbacks and ``ObservableProperty`` a value
that announces its changes.  Both are what the rendering layer (Qt widgets or
the CLI) binds to.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

_logger = logging.getLogger(__name__)


class Signal:
    """Observer list invoked synchronously by :meth:`emit`.

    Handlers are called in connection order.  An exception raised by one
    handler is logged and does not stop the remaining handlers, matching the
    semantics of ``EventBus.publish``.
    """

    def __init__(self, name: str = "") -> None:
        self._name = name
        self._handlers: list[Callable] = []

    def connect(self, handler: Callable) -> None:
        if handler not in self._handlers:
            self._handlers.append(handler)

    def disconnect(self, handler: Callable) -> None:
        self._handlers.remove(handler)

    def emit(self, *args: Any, **kwargs: Any) -> None:
        # Copy so handlers may connect or disconnect while being notified.
        for handler in list(self._handlers):
            try:
                handler(*args, **kwargs)
            except Exception as exc:
                _logger.error("Signal %s handler %r failed: %s", self._name or "?", handler, exc)

    @property
    def handler_count(self) -> int:
        return len(self._handlers)


class ObservableProperty:
    """Value holder emitting ``changed(new_value, old_value)`` on change."""

    def __init__(self, initial_value: Any = None) -> None:
        self._value = initial_value
        self.changed = Signal("changed")

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, new_value: Any) -> None:
        if self._value != new_value:
            old_value = self._value
            self._value = new_value
            self.changed.emit(new_value, old_value)
