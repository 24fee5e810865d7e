# -*- coding: utf-8 -*-
# Copyright (c) 2005-2012 Stephen John Machin, Lingfo Pty Ltd
# This module is part of the xlscore package, which is released under a
# BSD-style licence.
"""
Little-endian fixed-width field readers.

Each reader takes the record bytes and an optional offset ``pos``
(default 0, the start of the slice) and returns one decoded value.
Short buffers raise :class:`~xlscore.biffh.OutOfBounds` instead of
letting :mod:`struct` complain.
"""

import sys
from struct import Struct

from .biffh import Misaligned, NarrowingFailure, OutOfBounds

__all__ = [
    'read_u8', 'read_bool', 'read_u16', 'read_u32', 'read_i32',
    'read_u64', 'read_f64', 'read_usize', 'to_u32', 'U32Words',
    'MAX_USIZE',
]

#: Largest value :func:`read_usize` accepts unless told otherwise.
MAX_USIZE = sys.maxsize

_u8 = Struct('<B')
_u16 = Struct('<H')
_u32 = Struct('<I')
_i32 = Struct('<i')
_u64 = Struct('<Q')
_f64 = Struct('<d')


def _unpack(fmt, data, pos):
    sz = fmt.size
    if pos < 0 or len(data) - pos < sz:
        raise OutOfBounds(sz, len(data), pos)
    return fmt.unpack_from(data, pos)[0]


def read_u8(data, pos=0):
    return _unpack(_u8, data, pos)


def read_bool(data, pos=0):
    return _unpack(_u8, data, pos) != 0


def read_u16(data, pos=0):
    """``b'\\x34\\x12'`` => ``0x1234``"""
    return _unpack(_u16, data, pos)


def read_u32(data, pos=0):
    return _unpack(_u32, data, pos)


def read_i32(data, pos=0):
    """Two's-complement: ``b'\\xff\\xff\\xff\\xff'`` => ``-1``"""
    return _unpack(_i32, data, pos)


def read_u64(data, pos=0):
    return _unpack(_u64, data, pos)


def read_f64(data, pos=0):
    # NaN payloads and infinities come back exactly as stored.
    return _unpack(_f64, data, pos)


def read_usize(data, pos=0, limit=MAX_USIZE):
    """
    Read a ``u32`` meant to be used as a length or count.

    Raises :class:`~xlscore.biffh.NarrowingFailure` if the value is larger
    than ``limit``. With the default limit this can only happen where
    ``sys.maxsize`` is below ``0xFFFFFFFF``.
    """
    value = _unpack(_u32, data, pos)
    if value > limit:
        raise NarrowingFailure(value, limit)
    return value


class U32Words(object):
    """
    Read-only view of a buffer as consecutive little-endian ``u32`` words.

    The view is sized, indexable and can be iterated any number of times;
    it never copies the underlying bytes.
    """

    def __init__(self, data):
        if len(data) % 4:
            raise Misaligned(len(data))
        self._data = data

    def __len__(self):
        return len(self._data) // 4

    def __iter__(self):
        for (word, ) in _u32.iter_unpack(self._data):
            yield word

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self)))]
        n = len(self)
        if index < 0:
            index += n
        if not 0 <= index < n:
            raise IndexError("word index %d not in range(%d)" % (index, n))
        return _u32.unpack_from(self._data, index * 4)[0]

    def __eq__(self, other):
        if isinstance(other, (U32Words, list, tuple)):
            return list(self) == list(other)
        return NotImplemented

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __repr__(self):
        return "U32Words(%r)" % (list(self), )


def to_u32(data):
    """``b'ABCDEFGH'`` => ``[0x44434241, 0x48474645]``"""
    return U32Words(data)
