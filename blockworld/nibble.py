"""Packed arrays of signed 4-bit values."""

from __future__ import annotations


class NibbleArray:
    """Array of signed 4-bit values packed two per byte, low nibble first.

    Values are stored modulo 16 and read back as signed numbers in the
    range -8..7, the way a signed 4-bit field behaves.
    """

    __slots__ = ("_data",)

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._data = bytearray(size >> 1)

    def _locate(self, index: int) -> tuple[int, bool]:
        if not 0 <= index < len(self):
            raise IndexError(f"nibble index {index} out of range")
        return index >> 1, bool(index & 1)

    def get(self, index: int) -> int:
        """Return the signed value stored at ``index``."""
        byte_index, high = self._locate(index)
        byte = self._data[byte_index]
        raw = byte >> 4 if high else byte & 0x0F
        return raw - 16 if raw >= 8 else raw

    def set(self, index: int, value: int) -> None:
        """Store the low four bits of ``value`` at ``index``."""
        byte_index, high = self._locate(index)
        byte = self._data[byte_index]
        nibble = value & 0x0F
        if high:
            self._data[byte_index] = (byte & 0x0F) | (nibble << 4)
        else:
            self._data[byte_index] = (byte & 0xF0) | nibble

    def fill(self, low: int, high: int | None = None) -> None:
        """Set every even index to ``low`` and every odd one to ``high``.

        When ``high`` is omitted both halves receive ``low``.
        """
        if high is None:
            high = low
        byte = (low & 0x0F) | ((high & 0x0F) << 4)
        self._data[:] = bytes([byte]) * len(self._data)

    @property
    def nbytes(self) -> int:
        """Number of bytes backing the array."""
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data) * 2

    def tobytes(self) -> bytes:
        """Return a copy of the packed storage."""
        return bytes(self._data)

    def load(self, data: bytes) -> None:
        """Overwrite the packed storage from its start with ``data``.

        ``data`` may be shorter than the array; the remaining bytes are
        left untouched.
        """
        view = memoryview(data).cast("B")
        if len(view) > len(self._data):
            raise ValueError(
                f"{len(view)} bytes do not fit into {len(self._data)} bytes of storage"
            )
        self._data[: len(view)] = view