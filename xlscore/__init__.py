# Copyright (c) 2005-2012 Stephen John Machin, Lingfo Pty Ltd
# This module is part of the xlscore package, which is released under a
# BSD-style licence.
"""
Low-level primitives for decoding BIFF8 / XLSB formula records:
little-endian field readers, column labels and the built-in function
table.
"""

from .info import __VERSION__
from .biffh import (
    XLSCoreError, OutOfBounds, Misaligned, IndexOutOfRange,
    NarrowingFailure, ArgumentCountError, hex_char_dump,
)
from .bytesio import (
    read_u8, read_bool, read_u16, read_u32, read_i32, read_u64, read_f64,
    read_usize, to_u32, U32Words,
)
from .cellnames import push_column, colname, cellname, cellnameabs, rangename2d
from .ftab import (
    ARITY_EXACT, ARITY_VARIADIC, ARITY_SPECIAL,
    ArityPolicy, FuncDef, FuncToken, FTAB, FTAB_LEN,
    resolve, func_def, check_nargs, lookup_name,
    decode_func, decode_funcvar, dump_ftab,
)

#: Same view as :func:`to_u32`.
words_le = to_u32

__version__ = __VERSION__

__all__ = [
    'XLSCoreError', 'OutOfBounds', 'Misaligned', 'IndexOutOfRange',
    'NarrowingFailure', 'ArgumentCountError', 'hex_char_dump',
    'read_u8', 'read_bool', 'read_u16', 'read_u32', 'read_i32',
    'read_u64', 'read_f64', 'read_usize', 'to_u32', 'words_le', 'U32Words',
    'push_column', 'colname', 'cellname', 'cellnameabs', 'rangename2d',
    'ARITY_EXACT', 'ARITY_VARIADIC', 'ARITY_SPECIAL',
    'ArityPolicy', 'FuncDef', 'FuncToken', 'FTAB', 'FTAB_LEN',
    'resolve', 'func_def', 'check_nargs', 'lookup_name',
    'decode_func', 'decode_funcvar', 'dump_ftab',
]
