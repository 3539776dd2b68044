"""Shared lifetime handling for the editor's view models.

A view model listens to the application ``EventBus`` for as long as a window
or a CLI command uses it.  Subscriptions made through
:meth:`BaseViewModel.subscribe_event` are removed from their bus again by
:meth:`BaseViewModel.dispose`, so a closed window stops reacting to errors and
reloads published afterwards.
"""

from __future__ import annotations

from typing import Callable, Type

from scenes_in_build.events.bus import Event, EventBus, Subscription


class BaseViewModel:
    """Owns the bus subscriptions of one view model instance."""

    def __init__(self) -> None:
        self._bus_subscriptions: list[tuple[EventBus, Subscription]] = []
        self._disposed = False

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def subscribe_event(
        self,
        event_bus: EventBus,
        event_type: Type[Event],
        handler: Callable[[Event], None],
    ) -> Subscription:
        """Route *event_type* from *event_bus* to *handler* until disposal."""
        subscription = event_bus.subscribe(event_type, handler)
        self._bus_subscriptions.append((event_bus, subscription))
        return subscription

    def dispose(self) -> None:
        """Detach from every bus; calling it again does nothing."""
        while self._bus_subscriptions:
            event_bus, subscription = self._bus_subscriptions.pop()
            event_bus.unsubscribe(subscription)
        self._disposed = True
