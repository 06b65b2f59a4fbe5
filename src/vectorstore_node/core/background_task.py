"""Background execution of the backend phase of a setup run."""

import logging
from typing import Callable, Dict, Optional, TYPE_CHECKING

from PyQt6.QtCore import QThread, pyqtSignal

from vectorstore_node.model import EntryStatus

if TYPE_CHECKING:
    from vectorstore_node.services.setup_orchestrator import SetupOrchestrator, SetupPlan, SetupResult

logger = logging.getLogger(__name__)


class SetupTask(QThread):
    """
    Runs SetupOrchestrator.setup_entries() for one plan on a worker thread.

    Usage:
        task = SetupTask(orchestrator, plan)
        task.result_ready.connect(on_statuses)   # Dict[str, EntryStatus]
        task.error_occurred.connect(on_error)    # Receives Exception, not str
        task.start()

        # Later:
        task.cancel()  # Signals won't emit after this
    """

    result_ready = pyqtSignal(object)
    error_occurred = pyqtSignal(Exception)

    def __init__(self, orchestrator: 'SetupOrchestrator', plan: 'SetupPlan', parent=None):
        super().__init__(parent)
        self._orchestrator = orchestrator
        self._plan = plan
        self.cancelled = False

    @property
    def plan(self) -> 'SetupPlan':
        return self._plan

    def run(self):
        """Execute the backend phase, respecting cancellation."""
        try:
            statuses = self._orchestrator.setup_entries(self._plan)
            if not self.cancelled:
                self.result_ready.emit(statuses)
        except Exception as e:
            if not self.cancelled:
                self.error_occurred.emit(e)

    def cancel(self):
        """Cancel task — signals won't emit after this."""
        self.cancelled = True


class SetupTaskRunner:
    """
    Drives a setup run with the backend phase off the UI thread.

    prepare() runs on the calling thread so LOADING shows immediately,
    setup_entries() runs in a SetupTask, and finish() is applied when the
    task's signal is delivered back. Only one run is in flight at a time;
    the orchestrator rejects a second one while the status is LOADING.

    Usage in a node widget:
        self._runner = SetupTaskRunner(controller.orchestrator)
        run_button.clicked.connect(lambda: self._runner.start())

        def closeEvent(self, event):
            self._runner.cleanup()
            super().closeEvent(event)
    """

    def __init__(self, orchestrator: 'SetupOrchestrator'):
        self._orchestrator = orchestrator
        self._current_task: Optional[SetupTask] = None

    @property
    def current_task(self) -> Optional[SetupTask]:
        return self._current_task

    def start(self, on_finished: Callable[['SetupResult'], None] = None) -> Optional[SetupTask]:
        """
        Start a setup run.

        Args:
            on_finished: Called with the SetupResult once the run has ended

        Returns:
            SetupTask if the backend phase started, None if the run ended in prepare()
        """
        plan = self._orchestrator.prepare()
        if plan is None:
            if on_finished:
                on_finished(self._orchestrator.last_result)
            return None

        def handle_result(statuses: Dict[str, EntryStatus]):
            result = self._orchestrator.finish(plan, statuses)
            if on_finished:
                on_finished(result)

        def handle_error(error: Exception):
            logger.error(f"Setup task failed: {error}", exc_info=error)
            handle_result({entry.key: EntryStatus.ERROR for entry in plan.entries})

        task = SetupTask(self._orchestrator, plan)
        task.result_ready.connect(handle_result)
        task.error_occurred.connect(handle_error)

        self._current_task = task
        task.start()
        return task

    def cleanup(self):
        """Teardown: cancel the task, wait for it, drop any late result. Call from closeEvent."""
        self._orchestrator.dispose()
        if self._current_task is not None and self._current_task.isRunning():
            self._current_task.cancel()
            self._current_task.wait(self._orchestrator.config.cleanup_wait_ms)
        self._current_task = None
