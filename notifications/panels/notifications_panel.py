from __future__ import annotations

from PySide6.QtWidgets import QWidget, QVBoxLayout, QListWidget, QListWidgetItem

from notifications.models.notification import EventKind, Notification
from notifications.services.notifier import DESK_LABELS, Notifier


class NotificationsPanel(QWidget):
    """Panel showing the admission and billing activity feed."""

    def __init__(self, notifier: Notifier, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.notifier = notifier
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self.list = QListWidget()
        layout.addWidget(self.list)

        for kind in EventKind:
            self.notifier.subscribe(kind, self._append)

    def _append(self, note: Notification) -> None:
        text = f"[{DESK_LABELS[note.kind]}] {note.message}"
        QListWidgetItem(text, self.list)
        self.list.scrollToBottom()

    def entries(self) -> list[str]:
        return [self.list.item(row).text() for row in range(self.list.count())]


def get_notifications_panel(notifier: Notifier, parent: QWidget | None = None) -> NotificationsPanel:
    return NotificationsPanel(notifier, parent)
