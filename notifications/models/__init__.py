from .notification import EventKind, Notification

__all__ = ["EventKind", "Notification"]
