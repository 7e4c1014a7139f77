from __future__ import annotations

import logging
from typing import Callable, Dict, List

from notifications.models.notification import EventKind, Notification

logger = logging.getLogger(__name__)

Observer = Callable[[Notification], None]

# Desk that receives each kind of notice.
DESK_LABELS: Dict[EventKind, str] = {
    EventKind.ADMISSION: "Reception",
    EventKind.BILLING: "Accounts",
}


class Notifier:
    """In-process multicast channel for admission and billing notices.

    Observers run synchronously in the order they subscribed.  Errors raised
    by an observer reach the publisher unchanged.
    """

    def __init__(self) -> None:
        self._observers: Dict[EventKind, List[Observer]] = {kind: [] for kind in EventKind}

    def subscribe(self, kind: EventKind, observer: Observer) -> None:
        self._observers[EventKind(kind)].append(observer)

    def observers(self, kind: EventKind) -> List[Observer]:
        return list(self._observers[EventKind(kind)])

    def publish(self, kind: EventKind, message: str) -> Notification:
        note = Notification(kind=EventKind(kind), message=message)
        observers = self._observers[note.kind]
        logger.debug("Publishing %s notice to %d observer(s): %s", note.kind.value, len(observers), message)
        for observer in list(observers):
            observer(note)
        return note


def console_observer(label: str, write: Callable[[str], None] = print) -> Observer:
    """Return an observer that writes ``[label] message`` lines."""

    def _observer(note: Notification) -> None:
        write(f"[{label}] {note.message}")

    return _observer
