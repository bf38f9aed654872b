"""
Output receivers.

A receiver is the only place a parsed or converted color is delivered to.
Six variants exist, selected by ``RecvTag``: by-value storage of 8-bit,
single-precision or double-precision channels, and by-reference variants
that write into caller-owned numpy buffers. A reference variant may be given
``None`` for any channel; that channel is skipped.

Receivers are written only on success. A failed parse or conversion leaves
the receiver untouched.
"""
from __future__ import annotations
from enum import Enum
from typing import ClassVar, Optional, Tuple
import numpy as np
from numpy import ndarray

from .errors import VibrantError
from .types.constants import U8_MAX


class RecvTag(str, Enum):
    VAL_U8 = "val_u8"
    VAL_F32 = "val_f32"
    VAL_F64 = "val_f64"
    REF_U8 = "ref_u8"
    REF_F32 = "ref_f32"
    REF_F64 = "ref_f64"


def unit_to_u8(x) -> int:
    """Quantize a unit-interval value to a byte: add 0.5 and truncate."""
    return int(x * U8_MAX + 0.5)


class Receiver:
    __slots__ = ()

    tag: ClassVar[RecvTag]
    dtype: ClassVar[type]

    def _from_u8(self, byte: int):
        if self.dtype is np.uint8:
            return np.uint8(byte)
        return self.dtype(byte) / self.dtype(U8_MAX)

    def _from_unit(self, x):
        if self.dtype is np.uint8:
            return np.uint8(unit_to_u8(x))
        return self.dtype(x)

    def write_u8(self, r: int, g: int, b: int, a: int) -> None:
        """Deliver byte channels, widening to unit floats for float receivers."""
        self._store(tuple(self._from_u8(c) for c in (r, g, b, a)))

    def write_unit(self, r, g, b, a) -> None:
        """Deliver unit-interval channels, quantizing for byte receivers."""
        self._store(tuple(self._from_unit(c) for c in (r, g, b, a)))

    def _store(self, channels: Tuple) -> None:
        raise NotImplementedError


class ValueReceiver(Receiver):
    __slots__ = ('_value',)

    def __init__(self) -> None:
        self._value = (self.dtype(0),) * 4

    def _store(self, channels: Tuple) -> None:
        self._value = channels

    @property
    def value(self) -> Tuple:
        return self._value

    @property
    def r(self):
        return self._value[0]

    @property
    def g(self):
        return self._value[1]

    @property
    def b(self):
        return self._value[2]

    @property
    def a(self):
        return self._value[3]

    def __iter__(self):
        return iter(self._value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({', '.join(str(c) for c in self._value)})"


class ReferenceReceiver(Receiver):
    __slots__ = ('_refs',)

    def __init__(
        self,
        r: Optional[ndarray] = None,
        g: Optional[ndarray] = None,
        b: Optional[ndarray] = None,
        a: Optional[ndarray] = None,
    ) -> None:
        refs = (r, g, b, a)
        for name, buf in zip("rgba", refs):
            if buf is None:
                continue
            if not isinstance(buf, ndarray) or buf.dtype != self.dtype:
                got = buf.dtype if isinstance(buf, ndarray) else type(buf).__name__
                raise TypeError(
                    f"{self.__class__.__name__} expects {np.dtype(self.dtype)} buffer for {name}, got {got}"
                )
            if not buf.flags.writeable:
                raise ValueError(f"{self.__class__.__name__} buffer for {name} is read-only")
        self._refs = refs

    @property
    def refs(self) -> Tuple[Optional[ndarray], ...]:
        return self._refs

    def _store(self, channels: Tuple) -> None:
        for buf, c in zip(self._refs, channels):
            if buf is not None:
                buf[...] = c

    def __repr__(self) -> str:
        present = "".join(n for n, buf in zip("rgba", self._refs) if buf is not None)
        return f"{self.__class__.__name__}(channels={present!r})"


class ValReceiverU8(ValueReceiver):
    __slots__ = ()
    tag: ClassVar[RecvTag] = RecvTag.VAL_U8
    dtype: ClassVar[type] = np.uint8


class ValReceiverF32(ValueReceiver):
    __slots__ = ()
    tag: ClassVar[RecvTag] = RecvTag.VAL_F32
    dtype: ClassVar[type] = np.float32


class ValReceiverF64(ValueReceiver):
    __slots__ = ()
    tag: ClassVar[RecvTag] = RecvTag.VAL_F64
    dtype: ClassVar[type] = np.float64


class RefReceiverU8(ReferenceReceiver):
    __slots__ = ()
    tag: ClassVar[RecvTag] = RecvTag.REF_U8
    dtype: ClassVar[type] = np.uint8


class RefReceiverF32(ReferenceReceiver):
    __slots__ = ()
    tag: ClassVar[RecvTag] = RecvTag.REF_F32
    dtype: ClassVar[type] = np.float32


class RefReceiverF64(ReferenceReceiver):
    __slots__ = ()
    tag: ClassVar[RecvTag] = RecvTag.REF_F64
    dtype: ClassVar[type] = np.float64


def build_registry(*classes: type[Receiver]):
    return {cls.tag: cls for cls in classes}


recv_tag_to_class = build_registry(
    ValReceiverU8,
    ValReceiverF32,
    ValReceiverF64,
    RefReceiverU8,
    RefReceiverF32,
    RefReceiverF64,
)


def recv_init(tag: RecvTag | str = RecvTag.VAL_U8) -> Receiver:
    """
    Create an empty receiver for ``tag``.

    Reference variants are created with every channel skipped; use the
    ``recv_init_ref_*`` helpers to attach buffers.

    Raises:
        VibrantError: if ``tag`` names no receiver mode.
    """
    try:
        cls = recv_tag_to_class[RecvTag(tag)]
    except ValueError as exc:
        raise VibrantError(f"Unknown receiver mode: {tag!r}") from exc
    return cls()


def recv_init_ref_u8(r=None, g=None, b=None, a=None) -> RefReceiverU8:
    return RefReceiverU8(r, g, b, a)


def recv_init_ref_f32(r=None, g=None, b=None, a=None) -> RefReceiverF32:
    return RefReceiverF32(r, g, b, a)


def recv_init_ref_f64(r=None, g=None, b=None, a=None) -> RefReceiverF64:
    return RefReceiverF64(r, g, b, a)
