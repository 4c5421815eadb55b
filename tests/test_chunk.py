import threading

from blockworld.chunk import CHUNK_HEIGHT, CHUNK_SIZE, Chunk


def test_new_chunk_state():
    chunk = Chunk(500, (3, -4))
    assert len(chunk.blocks) == CHUNK_SIZE
    assert not any(chunk.blocks)
    assert len(chunk.meta) == CHUNK_SIZE
    assert len(chunk.light) == CHUNK_SIZE
    assert len(chunk.sky) == CHUNK_SIZE
    assert chunk.uses == 0
    assert chunk.was_updated is False
    assert chunk.unload_timer == 500
    assert chunk.position == (3, -4)


def test_block_offset_origin():
    assert Chunk.block_offset((0, 0, 0)) == 0


def test_block_offsets_cover_chunk_exactly_once():
    offsets = {
        Chunk.block_offset((x, y, z))
        for x in range(16)
        for z in range(16)
        for y in range(CHUNK_HEIGHT)
    }
    assert offsets == set(range(CHUNK_SIZE))


def test_block_offset_ignores_chunk_bits():
    assert Chunk.block_offset((16 + 3, 7, -16 + 2)) == Chunk.block_offset((3, 7, 2))


def test_to_chunk_coords():
    assert Chunk.to_chunk_coords((-1, 17)) == (-1, 1)


def test_to_local_chunk_coords():
    assert Chunk.to_local_chunk_coords((-1, 70, 33)) == (15, 70, 1)


def test_start_block_is_inside_own_chunk():
    chunk = Chunk(0, (2, -3))
    x, y, z = chunk.start_block()
    assert y == 0
    assert Chunk.to_chunk_coords((x, z)) == chunk.position
    assert Chunk.to_local_chunk_coords((x, y, z)) == (0, 0, 0)


def test_context_manager_locks_chunk():
    chunk = Chunk(0, (0, 0))
    results = []

    def try_lock():
        got = chunk.lock.acquire(blocking=False)
        results.append(got)
        if got:
            chunk.lock.release()

    with chunk as held:
        assert held is chunk
        with chunk:
            worker = threading.Thread(target=try_lock)
            worker.start()
            worker.join()
    assert results == [False]

    worker = threading.Thread(target=try_lock)
    worker.start()
    worker.join()
    assert results == [False, True]