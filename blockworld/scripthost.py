"""Script host: loads scripts from registered folders and dispatches events."""

from __future__ import annotations

import itertools
import logging
import os
import platform
import threading
from pathlib import Path

from .events import EventType, ScriptEvent
from .scriptthread import Loader, ScriptThread, ThreadStatus

log = logging.getLogger(__name__)

NOT_FOUND = "\u00a7cCan't find specified script!"


class ScriptHost:
    """Keeps every loaded script and routes server events to them."""

    def __init__(self, loader: Loader, extension: str = ".lua") -> None:
        self._loader = loader
        self._extension = extension
        self._lock = threading.RLock()
        self._threads: list[ScriptThread] = []
        self._directories: list[Path] = []
        self._ids = itertools.count(1)

    @property
    def scripts(self) -> tuple[ScriptThread, ...]:
        """Currently loaded scripts in load order."""
        with self._lock:
            return tuple(self._threads)

    def _is_valid(self, entry: Path) -> bool:
        return entry.is_file() and entry.suffix == self._extension

    def _open(self, path: Path) -> bool:
        thread = ScriptThread(path, next(self._ids), self._loader)
        self._threads.append(thread)
        thread.post_event(ScriptEvent(EventType.ON_START))
        return True

    def register_directory(self, path: str | os.PathLike[str]) -> None:
        """Add a script folder, creating it if needed, and load its scripts."""
        directory = Path(path)
        with self._lock:
            directory.mkdir(parents=True, exist_ok=True)
            self._directories.append(directory)
            for entry in sorted(directory.iterdir()):
                if self._is_valid(entry):
                    self._open(entry)

    def open_script(self, path: str | os.PathLike[str]) -> bool:
        """Load one script by path or bare name; False if it cannot be loaded."""
        script = Path(path)
        with self._lock:
            if script.suffix and script.suffix != self._extension:
                log.warning("Attempt to load a file of the wrong type as script!")
                return False
            if any(thread.paths_equal(script) for thread in self._threads):
                log.warning("Attempt to load already loaded script!")
                return False

            parent = script.parent
            if str(parent) != "." and parent in self._directories:
                return self._open(script)

            if script.name:
                wanted = script.with_suffix(self._extension).name
                for directory in self._directories:
                    if not directory.is_dir():
                        continue
                    for entry in sorted(directory.iterdir()):
                        if self._is_valid(entry) and entry.name == wanted:
                            return self.open_script(entry)

            log.warning("Attempt to load script from unknown folder!")
            return False

    def get_by_name(self, name: str | os.PathLike[str]) -> ScriptThread | None:
        """Find a loaded script by file name, with or without extension."""
        base = Path(name).name
        if not base:
            return None
        file_name = Path(base).with_suffix(self._extension).name
        with self._lock:
            for thread in self._threads:
                if thread.names_equal(file_name):
                    return thread
        return None

    def reload_all(self) -> None:
        with self._lock:
            for thread in self._threads:
                thread.reload()

    def reload(self, name: str | os.PathLike[str]) -> bool:
        """Reload the named script; False when no such script is loaded."""
        with self._lock:
            thread = self.get_by_name(name)
            if thread is None:
                return False
            thread.reload()
            return True

    def status(self) -> str:
        """Summary of the host for chat output."""
        with self._lock:
            dead = sum(1 for t in self._threads if t.status is not ThreadStatus.ALIVE)
            return (
                f"Compiled with: {platform.python_implementation()} "
                f"{platform.python_version()}\n"
                f"Loaded scripts: \u00a7a{len(self._threads)}\u00a7f "
                f"({dead} \u00a7cdead\u00a7f)"
            )

    def script_status(self, name: str | os.PathLike[str]) -> str:
        with self._lock:
            thread = self.get_by_name(name)
            return thread.status_text() if thread is not None else NOT_FOUND

    def post_event(self, event: ScriptEvent) -> None:
        """Deliver ``event`` to live scripts and drop closed ones."""
        with self._lock:
            kept: list[ScriptThread] = []
            for thread in self._threads:
                if thread.status is ThreadStatus.CLOSED:
                    continue
                if thread.status is ThreadStatus.ALIVE:
                    thread.post_event(event)
                kept.append(thread)
            self._threads = kept

    def close(self) -> None:
        """Send every script the stop event and unload them all."""
        with self._lock:
            for thread in self._threads:
                thread.post_event(ScriptEvent(EventType.ON_STOP))
            self._threads.clear()

    def __enter__(self) -> ScriptHost:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()