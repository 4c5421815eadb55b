"""Events posted to scripts and the argument objects scripts receive."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .handle import ScriptHandle
from .vector import ScriptVector, VectorType

DEFAULT_KICK_REASON = "Kicked by Server"


class EventType(Enum):
    """Event kinds; the value is the name scripts see."""

    ON_START = "onStart"
    ON_STOP = "onStop"
    PRE_BLOCK_PLACE = "preBlockPlace"
    ON_BLOCK_DESTROYED = "onBlockDestroyed"
    ON_MESSAGE = "onMessage"
    ON_PLAYER_CONNECTED = "onPlayerConnected"
    ON_ENTITY_DESTROYED = "onEntityDestroyed"


@dataclass
class ScriptEvent:
    type: EventType
    args: Any = None


@dataclass
class BlockPlaceEvent:
    item_stack: Any
    block_id: int
    user: Any
    position: tuple[int, int, int]
    direction: int
    cancelled: bool = False


@dataclass
class BlockDestroyedEvent:
    item_stack: Any
    user: Any
    position: tuple[int, int, int]
    block_id: int


@dataclass
class MessageEvent:
    sender: Any
    message: str
    final_message: str = ""
    cancelled: bool = False


@dataclass
class PlayerConnectedEvent:
    entity: Any
    cancelled: bool = False
    reason: str = ""


_KINDS = {
    BlockPlaceEvent: "preBlockPlaceEvent",
    BlockDestroyedEvent: "onBlockDestroyedEvent",
    MessageEvent: "onMessageEvent",
    PlayerConnectedEvent: "onPlayerConnectedEvent",
}


class EventArguments:
    """Script-facing view of an event payload.

    Each payload kind exposes its own set of methods; the rest raise
    AttributeError. After invalidation every method raises
    InvalidatedHandleError, as do item stacks obtained from it.
    """

    def __init__(self, event: Any) -> None:
        if type(event) not in _KINDS:
            raise TypeError(f"no script arguments for {type(event).__name__}")
        self._handle = ScriptHandle(event)

    @property
    def kind(self) -> str:
        """Name of the argument type as scripts know it."""
        return _KINDS[type(self._handle.get())]

    @property
    def handle(self) -> ScriptHandle:
        return self._handle

    def __str__(self) -> str:
        return f"EventArguments: {id(self._handle):#x}"

    def _payload(self, method: str, *kinds: type) -> Any:
        event = self._handle.get()
        if not isinstance(event, kinds):
            raise AttributeError(f"'{method}' is not available on {_KINDS[type(event)]}")
        return event

    def cancel(self, reason: str | None = None) -> None:
        """Cancel the event; a refused connection carries ``reason``."""
        event = self._payload("cancel", BlockPlaceEvent, MessageEvent, PlayerConnectedEvent)
        if isinstance(event, PlayerConnectedEvent):
            event.reason = DEFAULT_KICK_REASON if reason is None else str(reason)
        event.cancelled = True

    def is_cancelled(self) -> bool:
        event = self._payload(
            "isCancelled", BlockPlaceEvent, MessageEvent, PlayerConnectedEvent
        )
        return event.cancelled

    def position(self) -> ScriptVector:
        """Block position as a constant integer vector."""
        event = self._payload("position", BlockPlaceEvent, BlockDestroyedEvent)
        return ScriptVector(VectorType.IVEC3, event.position, True)

    def direction(self) -> int:
        return self._payload("direction", BlockPlaceEvent).direction

    def placer(self) -> Any:
        return self._payload("placer", BlockPlaceEvent).user

    def destroyer(self) -> Any:
        return self._payload("destroyer", BlockDestroyedEvent).user

    def item_stack(self) -> ScriptHandle:
        """Handle to the involved item stack, invalidated with these arguments."""
        event = self._payload("itemStack", BlockPlaceEvent, BlockDestroyedEvent)
        stack = ScriptHandle(event.item_stack)
        self._handle.link(stack)
        return stack

    def message(self) -> str:
        return self._payload("message", MessageEvent).message

    def sender(self) -> Any:
        return self._payload("sender", MessageEvent).sender

    def final_message(self, text: str) -> None:
        """Replace the text that will actually be delivered."""
        if not isinstance(text, str):
            raise TypeError(f"string expected, got {type(text).__name__}")
        self._payload("finalMessage", MessageEvent).final_message = text

    def entity(self) -> Any:
        return self._payload("entity", PlayerConnectedEvent).entity

    def invalidate(self) -> None:
        """Cut off access to the payload and everything obtained from it."""
        self._handle.invalidate()