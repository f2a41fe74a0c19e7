from __future__ import annotations

from typing import Sequence

from PySide6.QtCore import QAbstractListModel, QModelIndex, Qt
from PySide6.QtGui import QColor

from barcode_scanner.domain.models import HistoryEntry


class HistoryListModel(QAbstractListModel):
    """Newest-first scan history. Rows are replaced wholesale from session snapshots."""

    CodeRole = Qt.UserRole + 1
    SucceededRole = Qt.UserRole + 2

    def __init__(self) -> None:
        super().__init__()
        self._entries: list[HistoryEntry] = []

    def set_entries(self, entries: Sequence[HistoryEntry]) -> None:
        if len(entries) == len(self._entries) and all(a is b for a, b in zip(entries, self._entries)):
            return
        self.beginResetModel()
        self._entries = list(entries)
        self.endResetModel()

    def rowCount(self, parent=QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(self._entries)

    def entry(self, row: int) -> HistoryEntry | None:
        if row < 0 or row >= len(self._entries):
            return None
        return self._entries[row]

    def data(self, index: QModelIndex, role: int = Qt.DisplayRole):
        if not index.isValid():
            return None
        e = self._entries[index.row()]

        if role == Qt.DisplayRole:
            mark = "✔" if e.succeeded else "✘"
            when = e.timestamp.astimezone().strftime("%H:%M:%S")
            return f"{mark} {e.code}  {e.message}  ({when})"
        if role == Qt.ForegroundRole:
            return QColor("#2e7d32") if e.succeeded else QColor("#c62828")
        if role == Qt.ToolTipRole:
            return f"{e.code}\n{e.message}\n{e.timestamp.isoformat()}"
        if role == self.CodeRole:
            return e.code
        if role == self.SucceededRole:
            return e.succeeded
        return None
