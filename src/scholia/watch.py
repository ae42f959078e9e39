"""Preview mode for scholia - re-render a draft whenever it changes on disk."""

import logging
import time
from pathlib import Path
from typing import Callable

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

logger = logging.getLogger(__name__)


class DebounceHandler(FileSystemEventHandler):
    """Collect change events for one draft file and flush them in a batch."""

    def __init__(
        self,
        draft_path: Path,
        on_change: Callable[[str], None],
        debounce_ms: int = 150,
    ):
        super().__init__()
        self.draft_path = draft_path.resolve()
        self.on_change = on_change
        self.debounce_ms = debounce_ms

        self.pending = False
        self.last_event_time = 0.0

    def _is_draft(self, event: FileSystemEvent) -> bool:
        if event.is_directory:
            return False
        paths = [event.src_path, getattr(event, "dest_path", "")]
        return any(p and Path(str(p)).resolve() == self.draft_path for p in paths)

    def on_created(self, event: FileSystemEvent) -> None:
        if self._is_draft(event):
            self._touch()

    def on_modified(self, event: FileSystemEvent) -> None:
        if self._is_draft(event):
            self._touch()

    def on_moved(self, event: FileSystemEvent) -> None:
        # Editors that save via rename-over land here.
        if self._is_draft(event):
            self._touch()

    def _touch(self) -> None:
        self.pending = True
        self.last_event_time = time.time()

    def check_and_flush(self) -> None:
        """Flush if the debounce period has elapsed since the last event."""
        if not self.pending:
            return
        elapsed = (time.time() - self.last_event_time) * 1000
        if elapsed >= self.debounce_ms:
            self.flush()

    def flush(self) -> None:
        if not self.pending:
            return
        self.pending = False

        try:
            text = self.draft_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("draft %s disappeared, waiting for it to come back", self.draft_path)
            return
        self.on_change(text)


def watch_draft(
    draft_path: Path,
    on_change: Callable[[str], None],
    debounce_ms: int = 150,
    poll_interval: float = 0.05,
    stop: Callable[[], bool] | None = None,
) -> None:
    """
    Watch a draft file and call ``on_change(text)`` after each burst of edits.

    Renders once at startup. Runs until interrupted or until ``stop()``
    returns True.
    """
    handler = DebounceHandler(draft_path, on_change, debounce_ms=debounce_ms)
    if handler.draft_path.exists():
        on_change(handler.draft_path.read_text(encoding="utf-8"))

    observer = Observer()
    observer.schedule(handler, str(handler.draft_path.parent), recursive=False)
    observer.start()
    logger.info("watching %s (debounce %dms)", handler.draft_path, debounce_ms)

    try:
        while stop is None or not stop():
            handler.check_and_flush()
            time.sleep(poll_interval)
    except KeyboardInterrupt:
        logger.info("stopping watcher")
    finally:
        observer.stop()
        observer.join()
        handler.flush()
