import logging

from PyQt6.QtCore import QObject, QThread

logger = logging.getLogger(__name__)


class WorkerController(QObject):
    """
    Keeps refresh worker threads referenced until they finish.
    A QThread collected while running aborts the process.
    """

    _instance = None

    def __init__(self):
        super().__init__()
        self._workers: list[QThread] = []

    @classmethod
    def get_instance(cls) -> "WorkerController":
        if not cls._instance:
            cls._instance = cls()
        return cls._instance

    def register_worker(self, worker: QThread):
        """Track a worker until its finished signal fires."""
        if worker not in self._workers:
            self._workers.append(worker)
            worker.finished.connect(lambda: self._on_worker_finished(worker))
            logger.debug(f"Worker registered: {worker}")

    def _on_worker_finished(self, worker: QThread):
        logger.debug(f"Worker finished: {worker}")

        if worker in self._workers:
            self._workers.remove(worker)

        worker.deleteLater()

    def cleanup_all(self, timeout_ms: int = 1000):
        """Wait briefly for in-flight workers (e.g. on app exit)."""
        logger.info(f"Cleaning up {len(self._workers)} worker(s)...")
        still_running = []
        for worker in self._workers:
            # Fetches cannot be interrupted; give them a bounded wait
            if worker.isRunning() and not worker.wait(timeout_ms):
                logger.warning(f"Worker still running after {timeout_ms}ms: {worker}")
                still_running.append(worker)
                continue
            worker.deleteLater()

        self._workers = still_running
