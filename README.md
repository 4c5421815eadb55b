# blockworld

Building blocks for a voxel game server world and its scripting:

- `blockworld.nibble.NibbleArray`: signed 4-bit values packed two per
  byte, low nibble first, with `get`, `set`, `fill`, `tobytes` and `load`.
- `blockworld.chunk.Chunk`: a 16×128×16 column of blocks (`blocks`, a
  `bytearray`) with `meta`, `light` and `sky` nibble arrays. A chunk is
  also a reentrant lock (`with chunk: ...`). `Chunk.block_offset`,
  `Chunk.to_chunk_coords` and `Chunk.to_local_chunk_coords` convert
  coordinates.
- `blockworld.generator`: the `Generator` base class and
  `create_flat(seed)`, a flat terrain generator (a bedrock layer, dirt,
  a grass top at height 12, full brightness, spawn point `(0, 15, 0)`).
- `blockworld.aabb.AABB`: axis-aligned boxes with strict intersection and
  point tests and in-place `offset`.
- `blockworld.vector`: typed vectors for scripts (`bvec3`, `ivec2`,
  `ivec3`, `dvec3`), optionally constant; byte and integer members wrap
  like 8- and 32-bit signed fields.
- `blockworld.handle.ScriptHandle`: a wrapper around a payload that can
  be invalidated, together with every handle linked to it.
- `blockworld.events`: event types (`EventType`, `ScriptEvent`), the
  payloads `BlockPlaceEvent`, `BlockDestroyedEvent`, `MessageEvent` and
  `PlayerConnectedEvent`, and `EventArguments`, the view of a payload a
  script receives.
- `blockworld.scriptthread.ScriptThread` and
  `blockworld.scripthost.ScriptHost`: script loading, reloading, status
  text and event dispatch, through a loader you provide.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Chunks and terrain

```python
from blockworld.chunk import Chunk
from blockworld.generator import create_flat

chunk = Chunk(500, (0, 0))
create_flat(0).fill_chunk((0, 0), chunk)

chunk.blocks[Chunk.block_offset((0, 0, 0))]   # 7, bedrock
chunk.blocks[Chunk.block_offset((0, 12, 0))]  # 2, grass
chunk.light.get(0)                            # -1: 15 read back as a signed nibble
```

## Scripts

A script is anything your loader can turn into an entry callable. The
loader receives the script's path; the entry receives a dict with
`name`, `description` and `version` that it may change, and returns a
generator. The generator runs to its first `yield` when loaded. Every
event is then sent to it as a tuple whose first item is the event name
(`"onStart"`, `"onMessage"`, ...) and, for events with a payload, whose
second item is an `EventArguments`. Returning closes the script; raising
leaves it dead until it is reloaded.

```python
from blockworld.events import EventType, MessageEvent, ScriptEvent
from blockworld.scripthost import ScriptHost


def loader(path):
    def entry(info):
        info["name"] = path.stem
        while True:
            event = yield
            if event[0] == "onMessage" and "spam" in event[1].message():
                event[1].cancel()
    return entry


host = ScriptHost(loader, extension=".script")
host.register_directory("scripts")  # created if missing; loads every *.script file

message = MessageEvent(sender=None, message="spam spam")
host.post_event(ScriptEvent(EventType.ON_MESSAGE, message))
message.cancelled      # True if a script cancelled it

print(host.status())
host.close()           # sends onStop and unloads every script
```

`EventArguments` objects, and item-stack handles taken from them with
`item_stack()`, are invalidated once the event has been delivered; using
them afterwards raises `blockworld.handle.InvalidatedHandleError`.

## What this package does not do

Chunks live in memory only. There is no on-disk world storage (no region
files, no chunk compression), no world object that tracks loaded chunks,
keeps time or unloads and saves chunks on a ticker, and no network
server. The script host does not embed a scripting language: how a
script file becomes code is left to the loader passed to `ScriptHost`.