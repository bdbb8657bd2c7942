"""Periodic check of a folder, handing every entry found to a callback."""

from __future__ import annotations

import threading
from collections.abc import Callable
from datetime import timedelta
from pathlib import Path


class FileWatcher:
    """Calls a callback for every entry under a folder, at a fixed interval.

    An entry left in place by the callback is reported again at the next check.
    The checks run on a background thread until stop() is called.
    """

    def __init__(
        self,
        folder: str | Path,
        delay: timedelta | float,
        callback: Callable[[Path], object],
    ) -> None:
        self.folder = Path(folder)
        self.delay = delay.total_seconds() if isinstance(delay, timedelta) else float(delay)
        self.callback = callback
        self._stopped = threading.Event()
        self._thread = threading.Thread(target=self._run, name="file-watcher", daemon=True)
        self._thread.start()

    def _run(self) -> None:
        while not self._stopped.wait(self.delay):
            self.check()

    def check(self) -> None:
        """Hand every file and folder under the watched folder to the callback."""
        if not self.folder.is_dir():
            raise NotADirectoryError(str(self.folder))
        for path in sorted(self.folder.rglob("*")):
            self.callback(path)

    def stop(self) -> None:
        """Stop the background checks and wait for the thread to end."""
        self._stopped.set()
        if self._thread is not threading.current_thread():
            self._thread.join()

    def __enter__(self) -> FileWatcher:
        return self

    def __exit__(self, *args: object) -> None:
        self.stop()