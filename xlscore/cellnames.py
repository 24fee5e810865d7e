# -*- coding: utf-8 -*-
# Copyright (c) 2005-2012 Stephen John Machin, Lingfo Pty Ltd
# This module is part of the xlscore package, which is released under a
# BSD-style licence.
"""
Spreadsheet-style column labels and A1 / R1C1 cell names.
"""

__all__ = [
    'push_column', 'colname', 'cellname', 'cellnameabs', 'rangename2d',
]

_alphabet = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def push_column(colx, buf):
    """
    Append the letters for zero-based column ``colx`` to ``buf``.

    ``buf`` is either a list of string pieces or a writable text stream
    (``io.StringIO``, an open file, ...). Labels run A..Z, AA..AZ,
    BA..ZZ, AAA and so on: there is no zero digit, so every position
    contributes at least an ``A``.
    """
    if colx < 0:
        raise ValueError("column index must be >= 0, got %d" % colx)
    if colx < 26:
        label = _alphabet[colx]
    else:
        rev = []
        colx += 1
        while colx:
            colx, digit = divmod(colx - 1, 26)
            rev.append(_alphabet[digit])
        rev.reverse()
        label = ''.join(rev)
    write = getattr(buf, 'write', None)
    if write is None:
        buf.append(label)
    else:
        write(label)


def colname(colx):
    """Utility function: ``7`` => ``'H'``, ``27`` => ``'AB'``"""
    buf = []
    push_column(colx, buf)
    return buf[0]


def cellname(rowx, colx):
    """Utility function: ``(5, 7)`` => ``'H6'``"""
    return "%s%d" % (colname(colx), rowx+1)


def cellnameabs(rowx, colx, r1c1=0):
    """Utility function: ``(5, 7)`` => ``'$H$6'``"""
    if r1c1:
        return "R%dC%d" % (rowx+1, colx+1)
    return "$%s$%d" % (colname(colx), rowx+1)


def rangename2d(rlo, rhi, clo, chi, r1c1=0):
    """ ``(5, 20, 7, 10)`` => ``'$H$6:$J$20'`` """
    if rhi == rlo+1 and chi == clo+1:
        return cellnameabs(rlo, clo, r1c1)
    return "%s:%s" % (cellnameabs(rlo, clo, r1c1), cellnameabs(rhi-1, chi-1, r1c1))
