import logging
import threading

from dataclasses import dataclass
from typing import Any, Callable

from PyQt5 import QtCore

from hashpass.report import build_report

logger = logging.getLogger(__name__)


# =========================
#     BACKGROUND TASKS
# =========================

@dataclass(frozen=True)
class TaskOutcome:
    """Single completion message: either a result or the error that stopped the task."""

    result: Any = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class TaskSignals(QtCore.QObject):
    completed = QtCore.pyqtSignal(object)


class AnalysisTask(QtCore.QRunnable):
    """
    Run a CPU-bound analysis callable off the UI thread.

    - The callable receives ``cancelled=<callable>`` and should poll it
      between iterations.
    - Exactly one ``signals.completed`` emission carries a TaskOutcome;
      exceptions are delivered there instead of escaping the pool.
    """

    def __init__(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        super().__init__()
        self.fn = fn
        self.args = args
        self.kwargs = kwargs
        self.signals = TaskSignals()
        self._cancel_event = threading.Event()
        # The Python object owns the runnable; keep Qt from deleting it under us.
        self.setAutoDelete(False)

    @classmethod
    def for_report(cls, kind: Any, iterations: int) -> "AnalysisTask":
        return cls(build_report, kind, iterations)

    def cancel(self) -> None:
        logger.info("Cancellation requested for %s", getattr(self.fn, "__name__", self.fn))
        self._cancel_event.set()

    def is_cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def run(self) -> None:
        try:
            result = self.fn(*self.args, cancelled=self.is_cancelled, **self.kwargs)
        except Exception as e:
            logger.warning("Background task failed: %s", e)
            self.signals.completed.emit(TaskOutcome(error=e))
        else:
            self.signals.completed.emit(TaskOutcome(result=result))


def submit(task: AnalysisTask, pool: QtCore.QThreadPool | None = None) -> AnalysisTask:
    """Start ``task`` on ``pool`` (the global thread pool by default) and return it."""
    (pool or QtCore.QThreadPool.globalInstance()).start(task)
    return task
