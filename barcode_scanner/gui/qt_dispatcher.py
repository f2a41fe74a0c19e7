from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Any, Callable, Dict

from PySide6.QtCore import QObject, QThread, Signal, Slot

from barcode_scanner.ports.dispatcher import TaskDispatcher


class _SubmitWorker(QObject):
    finished = Signal(int, object)
    failed = Signal(int, object)

    def __init__(self, job_id: int, work: Callable[[], Any]) -> None:
        super().__init__()
        self._job_id = job_id
        self._work = work

    def run(self) -> None:
        try:
            result = self._work()
        except Exception as e:
            self.failed.emit(self._job_id, e)
            return
        self.finished.emit(self._job_id, result)


@dataclass
class _Job:
    thread: QThread
    worker: _SubmitWorker
    on_done: Callable[[Any], None]
    on_error: Callable[[BaseException], None]


class _GuiThreadReceiver(QObject):
    """Lives on the GUI thread so worker signals arrive through queued connections."""

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.jobs: Dict[int, _Job] = {}

    @Slot(int, object)
    def on_finished(self, job_id: int, result: object) -> None:
        job = self.release(job_id)
        if job is not None:
            job.on_done(result)

    @Slot(int, object)
    def on_failed(self, job_id: int, error: object) -> None:
        job = self.release(job_id)
        if job is not None:
            job.on_error(error)

    def release(self, job_id: int) -> _Job | None:
        job = self.jobs.pop(job_id, None)
        if job is None:
            return None
        job.thread.quit()
        job.thread.wait()
        return job


class QtTaskDispatcher(TaskDispatcher):
    """Runs each job on its own QThread; callbacks run back on the GUI thread."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._ids = itertools.count(1)
        self._receiver = _GuiThreadReceiver(parent)

    def dispatch(
            self,
            work: Callable[[], Any],
            on_done: Callable[[Any], None],
            on_error: Callable[[BaseException], None],
    ) -> None:
        job_id = next(self._ids)
        thread = QThread(self._receiver)
        worker = _SubmitWorker(job_id, work)
        worker.moveToThread(thread)

        thread.started.connect(worker.run)
        worker.finished.connect(self._receiver.on_finished)
        worker.failed.connect(self._receiver.on_failed)

        worker.finished.connect(worker.deleteLater)
        worker.failed.connect(worker.deleteLater)
        thread.finished.connect(thread.deleteLater)

        self._receiver.jobs[job_id] = _Job(thread=thread, worker=worker, on_done=on_done, on_error=on_error)
        thread.start()

    def shutdown(self) -> None:
        for job_id in list(self._receiver.jobs):
            self._receiver.release(job_id)
