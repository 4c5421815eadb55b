"""Vectors handed to scripts, with optional write protection."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable


class VectorType(IntEnum):
    BVEC3 = 0
    IVEC2 = 1
    IVEC3 = 2
    DVEC3 = 3
    FANGLE = 4


class ConstantVectorError(RuntimeError):
    """Raised when a script tries to modify a constant vector."""


@dataclass(frozen=True)
class _Spec:
    label: str
    count: int
    kind: str


_SPECS = {
    VectorType.BVEC3: _Spec("ByteVector", 3, "byte"),
    VectorType.IVEC2: _Spec("IntVector2", 2, "int"),
    VectorType.IVEC3: _Spec("IntVector3", 3, "int"),
    VectorType.DVEC3: _Spec("DoubleVector3", 3, "double"),
    VectorType.FANGLE: _Spec("FloatAngle", 2, "float"),
}


def _is_integer(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: object) -> bool:
    return _is_integer(value) or isinstance(value, float)


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _accepts(kind: str, value: object) -> bool:
    return _is_integer(value) if kind in ("byte", "int") else _is_number(value)


def _convert(kind: str, value: int | float) -> int | float:
    if kind == "byte":
        return ((value + 0x80) & 0xFF) - 0x80
    if kind == "int":
        return ((value + 0x80000000) & 0xFFFFFFFF) - 0x80000000
    if kind == "double":
        return float(value)
    return _to_float32(float(value))


class ScriptVector:
    """A typed vector of two or three members, optionally constant.

    Byte and integer members wrap around like 8- and 32-bit signed fields;
    angle members are kept at single precision.
    """

    def __init__(
        self,
        vtype: VectorType,
        values: Iterable[int | float] | None = None,
        constant: bool = False,
    ) -> None:
        self._type = VectorType(vtype)
        spec = _SPECS[self._type]
        items = [0] * spec.count if values is None else list(values)
        if len(items) != spec.count:
            raise ValueError(
                f"{spec.label} takes {spec.count} members, got {len(items)}"
            )
        for value in items:
            if not _accepts(spec.kind, value):
                raise TypeError(
                    f"{spec.label} member must be "
                    f"{'an integer' if spec.kind in ('byte', 'int') else 'a number'}, "
                    f"got {type(value).__name__}"
                )
        self._values = [_convert(spec.kind, value) for value in items]
        self._const = bool(constant)

    @property
    def vtype(self) -> VectorType:
        return self._type

    def __str__(self) -> str:
        spec = _SPECS[self._type]
        prefix = "const " if self._const else ""
        if spec.kind in ("byte", "int"):
            body = ",".join(str(int(value)) for value in self._values)
        else:
            body = ",".join(f"{value:f}" for value in self._values)
        return f"{prefix}{spec.label}({body})"

    def __repr__(self) -> str:
        return f"ScriptVector({self._type.name}, {tuple(self._values)!r}, {self._const})"

    def set(self, *args: object) -> None:
        """Assign members positionally; arguments of the wrong kind are skipped."""
        if self._const:
            raise ConstantVectorError("Attempt to change values of constant vector")
        spec = _SPECS[self._type]
        for index, value in enumerate(args[: spec.count]):
            if _accepts(spec.kind, value):
                self._values[index] = _convert(spec.kind, value)

    def get(self) -> tuple[int | float, ...]:
        """Return all members in order."""
        return tuple(self._values)

    def is_const(self) -> bool:
        return self._const


def _build(
    vtype: VectorType, members: tuple[object, ...], constant: object
) -> ScriptVector:
    values = None if any(member is None for member in members) else members
    return ScriptVector(vtype, values, bool(constant))


def bvec3(x=None, y=None, z=None, constant=False) -> ScriptVector:
    """Byte vector; zeros unless all three members are given."""
    return _build(VectorType.BVEC3, (x, y, z), constant)


def ivec2(x=None, z=None, constant=False) -> ScriptVector:
    """Two-member integer vector; zeros unless both members are given."""
    return _build(VectorType.IVEC2, (x, z), constant)


def ivec3(x=None, y=None, z=None, constant=False) -> ScriptVector:
    """Integer vector; zeros unless all three members are given."""
    return _build(VectorType.IVEC3, (x, y, z), constant)


def dvec3(x=None, y=None, z=None, constant=False) -> ScriptVector:
    """Double vector; zeros unless all three members are given."""
    return _build(VectorType.DVEC3, (x, y, z), constant)