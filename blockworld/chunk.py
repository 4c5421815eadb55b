"""In-memory chunk storage."""

from __future__ import annotations

import threading

from .nibble import NibbleArray

CHUNK_DIMS = (15, 125, 15)
CHUNK_WIDTH = CHUNK_DIMS[0] + 1
CHUNK_HEIGHT = CHUNK_DIMS[1] + 1
CHUNK_DEPTH = CHUNK_DIMS[2] + 1
CHUNK_SIZE = CHUNK_WIDTH * CHUNK_HEIGHT * CHUNK_WIDTH


class Chunk:
    """A column of blocks with metadata and light arrays.

    The chunk is also a reentrant lock: ``with chunk:`` holds it.
    """

    def __init__(self, unload_timer: float, position: tuple[int, int]) -> None:
        self.blocks = bytearray(CHUNK_SIZE)
        self.meta = NibbleArray(CHUNK_SIZE)
        self.light = NibbleArray(CHUNK_SIZE)
        self.sky = NibbleArray(CHUNK_SIZE)
        self.lock = threading.RLock()
        self.uses = 0
        self.unload_timer = float(unload_timer)
        self.was_updated = False
        self.position = tuple(position)

    @staticmethod
    def block_offset(position: tuple[int, int, int]) -> int:
        """Index of a block within the chunk arrays."""
        x, y, z = position
        return (
            y
            + (z & CHUNK_DIMS[2]) * CHUNK_HEIGHT
            + (x & CHUNK_DIMS[0]) * CHUNK_HEIGHT * CHUNK_DEPTH
        )

    def start_block(self) -> tuple[int, int, int]:
        """World coordinates of the chunk's first block."""
        x, z = self.position
        return (x << 4, 0, z << 4)

    @staticmethod
    def to_chunk_coords(position: tuple[int, int]) -> tuple[int, int]:
        """Chunk coordinates holding the block column at ``(x, z)``."""
        x, z = position
        return (x >> 4, z >> 4)

    @staticmethod
    def to_local_chunk_coords(position: tuple[int, int, int]) -> tuple[int, int, int]:
        """Block coordinates relative to their chunk."""
        x, y, z = position
        return (x & CHUNK_DIMS[0], y, z & CHUNK_DIMS[2])

    def __enter__(self) -> Chunk:
        self.lock.acquire()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.lock.release()