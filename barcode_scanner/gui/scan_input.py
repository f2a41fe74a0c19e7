from __future__ import annotations

from typing import List

from PySide6.QtWidgets import QLineEdit

from barcode_scanner.ports.scan_source import RecognizedCallback, ScanEventSource, Unsubscribe


class KeyboardWedgeScanSource(ScanEventSource):
    """
    Recognized-code events from a keyboard-wedge scanner (or a person typing).

    The scanner types the payload followed by Enter into the line edit; each
    Enter yields one event with the stripped text, and the field is cleared.
    """

    def __init__(self, field: QLineEdit) -> None:
        self._field = field
        self._callbacks: List[RecognizedCallback] = []
        self._field.returnPressed.connect(self._on_return)

    def subscribe(self, callback: RecognizedCallback) -> Unsubscribe:
        self._callbacks.append(callback)

        def _unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return _unsubscribe

    def _on_return(self) -> None:
        code = self._field.text().strip()
        self._field.clear()
        if not code:
            return
        for callback in list(self._callbacks):
            callback(code)
