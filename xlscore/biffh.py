# -*- coding: utf-8 -*-
# Copyright (c) 2005-2012 Stephen John Machin, Lingfo Pty Ltd
# This module is part of the xlscore package, which is released under a
# BSD-style licence.
"""
Errors and debugging helpers shared by the byte readers and the
function registry.
"""

import sys


class XLSCoreError(Exception):
    """Base class for every error raised by xlscore."""


class OutOfBounds(XLSCoreError, IndexError):
    """A fixed-width field does not fit in the bytes available."""

    def __init__(self, need, have, pos=0):
        self.need = need
        self.have = have
        self.pos = pos
        XLSCoreError.__init__(
            self,
            "need %d bytes at offset %d, only %d available"
            % (need, pos, max(have - pos, 0)))


class Misaligned(XLSCoreError, ValueError):
    """A word view was requested over a buffer not a multiple of 4 long."""

    def __init__(self, length):
        self.length = length
        XLSCoreError.__init__(
            self, "buffer length %d is not a multiple of 4" % length)


class IndexOutOfRange(XLSCoreError, IndexError):
    """A function identifier is outside the built-in function table."""

    def __init__(self, funcx, limit):
        self.funcx = funcx
        self.limit = limit
        XLSCoreError.__init__(
            self, "FuncID %d not in range(%d)" % (funcx, limit))


class NarrowingFailure(XLSCoreError, OverflowError):
    def __init__(self, value, limit):
        self.value = value
        self.limit = limit
        XLSCoreError.__init__(
            self, "value 0x%08x exceeds limit 0x%x" % (value, limit))


class ArgumentCountError(XLSCoreError, ValueError):
    """A function was given a count its arity policy rejects."""

    def __init__(self, funcx, name, nargs, expected):
        self.funcx = funcx
        self.name = name
        self.nargs = nargs
        self.expected = expected
        XLSCoreError.__init__(
            self, "FuncID %d (%s) takes %s args, got %s"
            % (funcx, name or "?reserved?", expected,
               "a fixed count" if nargs is None else nargs))


def hex_char_dump(strg, ofs, dlen, base=0, fout=sys.stdout, unnumbered=False):
    """
    Write ``dlen`` bytes of ``strg`` starting at ``ofs`` to ``fout``,
    16 to a line, as hex followed by the printable characters.
    """
    endpos = min(ofs + dlen, len(strg))
    pos = ofs
    numbered = not unnumbered
    num_prefix = ''
    while pos < endpos:
        endsub = min(pos + 16, endpos)
        substrg = bytes(strg[pos:endsub])
        lensub = endsub - pos
        if lensub <= 0 or lensub != len(substrg):
            fprintf(
                sys.stdout,
                '??? hex_char_dump: ofs=%d dlen=%d base=%d -> endpos=%d pos=%d endsub=%d substrg=%r\n',
                ofs, dlen, base, endpos, pos, endsub, substrg)
            break
        hexd = ''.join("%02x " % c for c in substrg)
        chard = ''
        for c in substrg:
            c = chr(c)
            if c == '\0':
                c = '~'
            elif not (' ' <= c <= '~'):
                c = '?'
            chard += c
        if numbered:
            num_prefix = "%5d: " % (base + pos - ofs)
        fprintf(fout, "%s     %-48s %s\n", num_prefix, hexd, chard)
        pos = endsub


def fprintf(f, fmt, *vargs):
    fmt = fmt.replace("\n", "")
    print(fmt % vargs, file=f)
