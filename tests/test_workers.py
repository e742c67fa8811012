from PyQt5 import QtCore

from hashpass.errors import AnalysisCancelled, UnsupportedAlgorithm
from hashpass.benchmark import benchmark
from hashpass.report import ReportKind
from hashpass.workers import AnalysisTask, TaskOutcome, submit


def _collect(task):
    outcomes = []
    task.signals.completed.connect(outcomes.append)
    return outcomes


def test_task_emits_result(qapp):
    task = AnalysisTask.for_report(ReportKind.CONTAINERS, 100)
    outcomes = _collect(task)

    task.run()

    assert len(outcomes) == 1
    assert outcomes[0].ok
    assert "Data Structure Performance Analysis" in outcomes[0].result


def test_task_reports_errors_through_signal(qapp):
    task = AnalysisTask(benchmark, ["universal", "crc32"], (8,), 10)
    outcomes = _collect(task)

    task.run()

    assert len(outcomes) == 1
    assert not outcomes[0].ok
    assert isinstance(outcomes[0].error, UnsupportedAlgorithm)


def test_cancelled_task_reports_cancellation(qapp):
    task = AnalysisTask.for_report(ReportKind.DISTRIBUTION, 100000)
    outcomes = _collect(task)

    task.cancel()
    task.run()

    assert task.is_cancelled()
    assert isinstance(outcomes[0].error, AnalysisCancelled)


def test_submit_runs_on_pool(qapp):
    pool = QtCore.QThreadPool()
    task = AnalysisTask.for_report(ReportKind.PERFORMANCE, 100)
    outcomes = _collect(task)

    submit(task, pool)
    assert pool.waitForDone(60000)
    for _ in range(10):
        QtCore.QCoreApplication.processEvents()
        QtCore.QCoreApplication.sendPostedEvents()
        if outcomes:
            break

    assert len(outcomes) == 1
    assert outcomes[0].ok


def test_outcome_ok_flag():
    assert TaskOutcome(result="x").ok
    assert not TaskOutcome(error=ValueError("boom")).ok
