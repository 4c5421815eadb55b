"""Terrain generators that fill freshly created chunks."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .chunk import CHUNK_WIDTH, Chunk

BEDROCK = 7
DIRT = 3
GRASS = 2
FULL_BRIGHT = 15


class Generator(ABC):
    """Base class of world generators; a generator is bound to one seed."""

    def __init__(self, seed: int) -> None:
        self._seed = int(seed)

    @property
    def seed(self) -> int:
        return self._seed

    @property
    @abstractmethod
    def spawn_point(self) -> tuple[int, int, int]:
        """Block coordinates where players appear."""

    @abstractmethod
    def fill_chunk(self, position: tuple[int, int], chunk: Chunk) -> None:
        """Populate ``chunk``, located at chunk coordinates ``position``."""


class FlatGenerator(Generator):
    """Flat terrain: one bedrock layer, dirt, and a grass top, fully lit."""

    def __init__(self, seed: int) -> None:
        super().__init__(seed)
        self._spawn_point = (0, 15, 0)

    @property
    def spawn_point(self) -> tuple[int, int, int]:
        return self._spawn_point

    def _column(self) -> bytes:
        height = self._spawn_point[1] - 2
        grass_from = self._spawn_point[1] - 3
        return bytes(
            BEDROCK if y < 1 else DIRT if y < grass_from else GRASS
            for y in range(max(height, 0))
        )

    def fill_chunk(self, position: tuple[int, int], chunk: Chunk) -> None:
        column = self._column()
        with chunk:
            chunk.light.fill(FULL_BRIGHT, FULL_BRIGHT)
            chunk.sky.fill(FULL_BRIGHT, FULL_BRIGHT)
            for x in range(CHUNK_WIDTH):
                for z in range(CHUNK_WIDTH):
                    start = Chunk.block_offset((x, 0, z))
                    chunk.blocks[start : start + len(column)] = column


def create_flat(seed: int) -> FlatGenerator:
    """Return a flat generator for ``seed``."""
    return FlatGenerator(seed)