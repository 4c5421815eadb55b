"""Handles to host objects that scripts may hold past their lifetime."""

from __future__ import annotations

from typing import Any


class InvalidatedHandleError(RuntimeError):
    """Raised when a script touches a handle that was invalidated."""


class ScriptHandle:
    """Wraps a payload handed to scripts.

    Once invalidated, the payload can no longer be reached. Linked handles
    are invalidated together with the handle they are linked to.
    """

    def __init__(self, payload: Any) -> None:
        self._payload = payload
        self._invalidated = False
        self._linked: list[ScriptHandle] = []

    def get(self) -> Any:
        """Return the payload, or raise if the handle was invalidated."""
        if self._invalidated:
            raise InvalidatedHandleError(
                f"An attempt to access invalidated handle {id(self):#x} was made!"
            )
        return self._payload

    def invalidate(self) -> None:
        """Invalidate this handle and every handle linked to it."""
        pending = [self]
        seen: set[int] = set()
        while pending:
            handle = pending.pop()
            if id(handle) in seen:
                continue
            seen.add(id(handle))
            handle._invalidated = True
            pending.extend(handle._linked)

    def link(self, other: ScriptHandle) -> None:
        """Tie ``other``'s lifetime to this handle."""
        if other is self or any(existing is other for existing in self._linked):
            return
        self._linked.append(other)

    @property
    def invalidated(self) -> bool:
        return self._invalidated