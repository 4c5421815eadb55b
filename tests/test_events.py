import pytest

from blockworld.events import (
    BlockDestroyedEvent,
    BlockPlaceEvent,
    EventArguments,
    EventType,
    MessageEvent,
    PlayerConnectedEvent,
    ScriptEvent,
)
from blockworld.handle import InvalidatedHandleError
from blockworld.vector import ConstantVectorError, VectorType


@pytest.fixture
def place_event():
    return BlockPlaceEvent(
        item_stack={"id": 1}, block_id=4, user="alice", position=(3, 64, -2), direction=5
    )


def test_script_event_defaults():
    event = ScriptEvent(EventType.ON_START)
    assert event.args is None
    assert event.type is EventType.ON_START


def test_kind_names():
    assert EventArguments(MessageEvent("bob", "hi")).kind == "onMessageEvent"


def test_place_cancel(place_event):
    args = EventArguments(place_event)
    assert args.is_cancelled() is False
    args.cancel()
    assert args.is_cancelled() is True
    assert place_event.cancelled is True


def test_place_accessors(place_event):
    args = EventArguments(place_event)
    assert args.direction() == 5
    assert args.placer() == "alice"
    vec = args.position()
    assert vec.get() == (3, 64, -2)
    assert vec.vtype is VectorType.IVEC3
    with pytest.raises(ConstantVectorError):
        vec.set(0, 0, 0)


def test_item_stack_invalidated_with_arguments(place_event):
    args = EventArguments(place_event)
    stack = args.item_stack()
    assert stack.get() is place_event.item_stack
    args.invalidate()
    with pytest.raises(InvalidatedHandleError):
        stack.get()


def test_invalidated_arguments_raise(place_event):
    args = EventArguments(place_event)
    args.invalidate()
    with pytest.raises(InvalidatedHandleError):
        args.direction()


def test_destroyed_event():
    event = BlockDestroyedEvent(item_stack="pick", user="carol", position=(1, 2, 3), block_id=1)
    args = EventArguments(event)
    assert args.destroyer() == "carol"
    assert args.position().get() == (1, 2, 3)
    assert args.item_stack().get() == "pick"
    with pytest.raises(AttributeError):
        args.cancel()


def test_message_event():
    event = MessageEvent(sender="dave", message="hello")
    args = EventArguments(event)
    assert args.message() == "hello"
    assert args.sender() == "dave"
    args.final_message("HELLO")
    assert event.final_message == "HELLO"
    args.cancel()
    assert event.cancelled is True


def test_final_message_requires_string():
    args = EventArguments(MessageEvent(sender=None, message="x"))
    with pytest.raises(TypeError):
        args.final_message(5)


def test_player_connected_default_reason():
    event = PlayerConnectedEvent(entity="erin")
    args = EventArguments(event)
    assert args.entity() == "erin"
    args.cancel()
    assert event.cancelled is True
    assert event.reason == "Kicked by Server"


def test_player_connected_custom_reason():
    event = PlayerConnectedEvent(entity="erin")
    EventArguments(event).cancel("Server full")
    assert event.reason == "Server full"
    assert event.cancelled is True


def test_method_of_other_kind_raises():
    args = EventArguments(PlayerConnectedEvent(entity=None))
    with pytest.raises(AttributeError):
        args.message()


def test_unknown_payload_rejected():
    with pytest.raises(TypeError):
        EventArguments("not an event")


def test_str_prefix(place_event):
    assert str(EventArguments(place_event)).startswith("EventArguments: 0x")