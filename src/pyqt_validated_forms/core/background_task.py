"""Background task with cancellation, used by collaborators doing slow I/O."""

from typing import Callable, Any, List, Tuple
from PyQt6.QtCore import QThread, pyqtSignal

# --- Module-level constants ---
CLEANUP_WAIT_MS = 200     # Wait time during cleanup


class BackgroundTask(QThread):
    """
    Background task with cancellation.

    Results are reported through signals, so callbacks connected from the UI
    thread run on the UI thread.

    Usage:
        task = BackgroundTask(target=load_thumbnail, args=(path, 200, 200))
        task.result_ready.connect(on_loaded)
        task.error_occurred.connect(on_failed)  # Receives Exception, not str
        task.start()
    """

    result_ready = pyqtSignal(object)
    error_occurred = pyqtSignal(Exception)

    def __init__(
        self,
        target: Callable[..., Any],
        args: Tuple = (),
        kwargs: dict = None,
        parent=None
    ):
        super().__init__(parent)
        self._target = target
        self._args = args
        self._kwargs = kwargs or {}
        self.cancelled = False

    def run(self):
        """Execute target in background, respecting cancellation."""
        try:
            result = self._target(*self._args, **self._kwargs)
            if not self.cancelled:
                self.result_ready.emit(result)
        except Exception as e:
            if not self.cancelled:
                self.error_occurred.emit(e)

    def cancel(self):
        """Cancel task; signals won't emit after this."""
        self.cancelled = True


class BackgroundTaskManager:
    """
    Keeps running tasks alive until they finish.

    Each run() starts its own task; earlier tasks are left running, so
    several owners can share one manager. Owners that only want the latest
    result drop stale ones themselves.

    Usage:
        self._task_manager = BackgroundTaskManager()

        def refresh(self):
            self._task_manager.run(
                target=load_thumbnail,
                args=(path, size, size),
                on_success=self._on_loaded,
                on_error=self._on_failed,
            )
    """

    def __init__(self):
        self._tasks: List[BackgroundTask] = []

    @property
    def tasks(self) -> List[BackgroundTask]:
        """Tasks started and not yet finished."""
        return list(self._tasks)

    def run(
        self,
        target: Callable[..., Any],
        args: Tuple = (),
        kwargs: dict = None,
        on_success: Callable[[Any], None] = None,
        on_error: Callable[[Exception], None] = None,
    ) -> BackgroundTask:
        """
        Run a background task alongside any already running.

        Args:
            target: Function to execute in background
            args: Positional arguments for target
            kwargs: Keyword arguments for target
            on_success: Callback for successful result
            on_error: Callback for error (receives Exception, not str)

        Returns:
            The started BackgroundTask
        """
        task = BackgroundTask(target=target, args=args, kwargs=kwargs)
        if on_success:
            task.result_ready.connect(on_success)
        if on_error:
            task.error_occurred.connect(on_error)
        task.finished.connect(lambda: self._forget(task))

        self._tasks.append(task)
        task.start()
        return task

    def _forget(self, task: BackgroundTask) -> None:
        if task in self._tasks:
            self._tasks.remove(task)

    def cleanup(self):
        """Cancel and wait for every running task."""
        for task in self._tasks:
            if task.isRunning():
                task.cancel()
                task.wait(CLEANUP_WAIT_MS)
        self._tasks.clear()
