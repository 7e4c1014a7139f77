from .notifier import DESK_LABELS, Notifier, Observer, console_observer

__all__ = [
    "DESK_LABELS",
    "Notifier",
    "Observer",
    "console_observer",
]
