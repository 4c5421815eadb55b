"""A single loaded script driven as a coroutine by the script host."""

from __future__ import annotations

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Generator

from .events import EventArguments, EventType, ScriptEvent

log = logging.getLogger(__name__)

ScriptRoutine = Generator[Any, Any, Any]
ScriptEntry = Callable[[dict], ScriptRoutine]
Loader = Callable[[Path], ScriptEntry]

INFO_DEFAULTS = {
    "name": "Script Name",
    "description": "Script Description",
    "version": "1.0.0",
}
MISSING_INFO = "N/A"

_PAYLOAD_EVENTS = frozenset(
    {
        EventType.PRE_BLOCK_PLACE,
        EventType.ON_BLOCK_DESTROYED,
        EventType.ON_MESSAGE,
        EventType.ON_PLAYER_CONNECTED,
    }
)


class ThreadStatus(Enum):
    """Lifecycle state of a script; the value is its display name."""

    ALIVE = "Alive"
    DEAD = "Dead"
    CLOSED = "Closed"


def _info_text(value: Any) -> str:
    return MISSING_INFO if value is None else str(value)


class ScriptThread:
    """One script file run as a generator.

    ``loader`` turns the script path into an entry callable. The entry is
    called with a mutable info dict (name, description, version) and must
    return a generator. The generator runs to its first ``yield`` on load;
    every event is then delivered with ``send`` as a tuple whose first item
    is the event name. A generator that returns closes the script; one that
    raises leaves it dead until reloaded.
    """

    def __init__(self, path: str | os.PathLike[str], thread_id: int, loader: Loader) -> None:
        self.path = Path(path)
        self.id = thread_id
        self._loader = loader
        self._routine: ScriptRoutine | None = None
        self._status = ThreadStatus.DEAD
        self.name = ""
        self.description = ""
        self.version = ""
        self.reload()

    @property
    def status(self) -> ThreadStatus:
        return self._status

    def reload(self) -> None:
        """Discard the running routine and start the script afresh."""
        self._status = ThreadStatus.DEAD
        if self._routine is not None:
            routine, self._routine = self._routine, None
            try:
                routine.close()
            except Exception:
                log.warning("Failed to close script %s", self.path)
                return

        try:
            entry = self._loader(self.path)
        except Exception as exc:
            log.error("Syntax error in %s: %s", self.path, exc)
            return

        info = dict(INFO_DEFAULTS)
        try:
            routine = entry(info)
            next(routine)
        except StopIteration:
            log.warning("Script %s does not contain a main loop, closing...", self.path)
            self._status = ThreadStatus.CLOSED
            return
        except Exception as exc:
            log.error("Script %s got runtime error: %s", self.path, exc)
            return

        self._routine = routine
        self._status = ThreadStatus.ALIVE
        self.name = _info_text(info.get("name"))
        self.description = _info_text(info.get("description"))
        self.version = _info_text(info.get("version"))

    def names_equal(self, name: str | os.PathLike[str]) -> bool:
        """True when the script's file name equals ``name``."""
        return self.path.name == os.fspath(name)

    def paths_equal(self, path: str | os.PathLike[str]) -> bool:
        """True when the script was loaded from ``path``."""
        return self.path == Path(path)

    def status_text(self) -> str:
        """Multi-line summary of the script for chat output."""
        header = f"**** {self.name} v{self.version} ****"
        return (
            f"{header}\nStatus: {self._status.value}\n"
            f"Description: {self.description}\n" + "~" * len(header)
        )

    @staticmethod
    def _arguments(event: ScriptEvent) -> tuple[tuple[Any, ...], EventArguments | None]:
        name = event.type.value
        if event.type in _PAYLOAD_EVENTS:
            args = EventArguments(event.args)
            return (name, args), args
        if event.type is EventType.ON_ENTITY_DESTROYED:
            return (name, event.args), None
        return (name,), None

    def post_event(self, event: ScriptEvent) -> None:
        """Deliver ``event`` to a live script; argument objects expire afterwards."""
        if self._status is not ThreadStatus.ALIVE or self._routine is None:
            return
        message, root = self._arguments(event)
        try:
            self._routine.send(message)
        except StopIteration:
            self._status = ThreadStatus.CLOSED
            self._routine = None
        except Exception as exc:
            log.error("Runtime error in %s: %s", self.path, exc)
            self._status = ThreadStatus.DEAD
            self._routine = None
        finally:
            if root is not None:
                root.invalidate()