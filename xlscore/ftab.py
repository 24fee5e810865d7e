# -*- coding: utf-8 -*-
# Copyright (c) 2005-2012 Stephen John Machin, Lingfo Pty Ltd
# This module is part of the xlscore package, which is released under a
# BSD-style licence.
"""
Built-in function table for BIFF8 / XLSB formulas.

A ``tFunc`` or ``tFuncVar`` token carries a 16-bit index into this table
([MS-XLS] 2.5.198.17, [MS-XLSB] 2.5.97.10). :func:`resolve` maps that index
to the function's name and its :class:`ArityPolicy`; :func:`decode_func`
and :func:`decode_funcvar` pull the index out of a single token first.
"""

import sys
from collections import namedtuple

from .biffh import (
    ArgumentCountError, IndexOutOfRange, XLSCoreError, hex_char_dump,
)
from .bytesio import read_u8, read_u16

__all__ = [
    'ARITY_EXACT', 'ARITY_VARIADIC', 'ARITY_SPECIAL',
    'ArityPolicy', 'FuncDef', 'FuncToken',
    'FTAB', 'FTAB_LEN',
    'resolve', 'func_def', 'check_nargs', 'lookup_name',
    'decode_func', 'decode_funcvar',
    'dump_ftab',
]

ARITY_EXACT = 0
ARITY_VARIADIC = 1
ARITY_SPECIAL = 2

arity_kind_dict = {
    0: "EXACT",
    1: "VARIADIC",
    2: "SPECIAL",
}

ARGC_VARIADIC = 255
# GETPIVOTDATA, COUNTIFS (128); SUMIFS, AVERAGEIFS (129)
ARGC_SPECIAL = (128, 129)


class ArityPolicy(namedtuple('ArityPolicy', 'kind raw nargs')):
    """
    How many arguments a built-in function takes.

    ``raw`` is the count byte exactly as tabulated. ``kind`` is one of
    ``ARITY_EXACT`` (``nargs == raw``), ``ARITY_VARIADIC`` (raw 255, any
    count) or ``ARITY_SPECIAL`` (raw 128 or 129: a function-specific
    minimum that only a caller knowing the function's field layout can
    apply). ``nargs`` is None unless the kind is ``ARITY_EXACT``.
    """

    __slots__ = ()

    @classmethod
    def from_argc(cls, raw):
        if not 0 <= raw <= 255:
            raise ValueError("argument count byte out of range: %d" % raw)
        if raw == ARGC_VARIADIC:
            return cls(ARITY_VARIADIC, raw, None)
        if raw in ARGC_SPECIAL:
            return cls(ARITY_SPECIAL, raw, None)
        return cls(ARITY_EXACT, raw, raw)

    @property
    def is_exact(self):
        return self.kind == ARITY_EXACT

    @property
    def is_variadic(self):
        return self.kind == ARITY_VARIADIC

    def accepts(self, nargs):
        """
        True or False when this policy can decide whether ``nargs``
        arguments are allowed; None for ``ARITY_SPECIAL``.
        """
        if nargs < 0:
            return False
        if self.kind == ARITY_EXACT:
            return nargs == self.nargs
        if self.kind == ARITY_VARIADIC:
            return True
        return None

    def __repr__(self):
        kind_text = arity_kind_dict.get(self.kind, "?Unknown kind?")
        return "ArityPolicy(%s, raw=%d)" % (kind_text, self.raw)


class FuncDef(namedtuple('FuncDef', 'index name arity')):
    """One row of :data:`FTAB`. ``name`` is ``''`` for a reserved slot."""

    __slots__ = ()

    @property
    def reserved(self):
        return not self.name


#: Result of decoding one function token. ``name`` is None for
#: command-equivalent (macro) ids, which are not in :data:`FTAB`.
#: ``size`` is the number of bytes the token occupies.
FuncToken = namedtuple('FuncToken', 'funcx name nargs prompt macro size')


# index: (name, argc)
# https://docs.microsoft.com/en-us/openspecs/office_file_formats/ms-xls/00b5dd7d-51ca-4938-b7b7-483fe0e5933b
ftab_defs = {
    0  : ('COUNT',                   255),
    1  : ('IF',                        3),
    2  : ('ISNA',                      1),
    3  : ('ISERROR',                   1),
    4  : ('SUM',                     255),
    5  : ('AVERAGE',                 255),
    6  : ('MIN',                     255),
    7  : ('MAX',                     255),
    8  : ('ROW',                       1),
    9  : ('COLUMN',                    1),
    10 : ('NA',                        0),
    11 : ('NPV',                     254),
    12 : ('STDEV',                   255),
    13 : ('DOLLAR',                    2),
    14 : ('FIXED',                     3),
    15 : ('SIN',                       1),
    16 : ('COS',                       1),
    17 : ('TAN',                       1),
    18 : ('ATAN',                      1),
    19 : ('PI',                        0),
    20 : ('SQRT',                      1),
    21 : ('EXP',                       1),
    22 : ('LN',                        1),
    23 : ('LOG10',                     1),
    24 : ('ABS',                       1),
    25 : ('INT',                       1),
    26 : ('SIGN',                      1),
    27 : ('ROUND',                     2),
    28 : ('LOOKUP',                    3),
    29 : ('INDEX',                     4),
    30 : ('REPT',                      2),
    31 : ('MID',                       3),
    32 : ('LEN',                       1),
    33 : ('VALUE',                     1),
    34 : ('TRUE',                      0),
    35 : ('FALSE',                     0),
    36 : ('AND',                     255),
    37 : ('OR',                      255),
    38 : ('NOT',                       1),
    39 : ('MOD',                       2),
    40 : ('DCOUNT',                    3),
    41 : ('DSUM',                      3),
    42 : ('DAVERAGE',                  3),
    43 : ('DMIN',                      3),
    44 : ('DMAX',                      3),
    45 : ('DSTDEV',                    3),
    46 : ('VAR',                     255),
    47 : ('DVAR',                      3),
    48 : ('TEXT',                      2),
    49 : ('LINEST',                    4),
    50 : ('TREND',                     4),
    51 : ('LOGEST',                    4),
    52 : ('GROWTH',                    4),
    53 : ('GOTO',                      1),
    54 : ('HALT',                      1),
    55 : ('RETURN',                    1),
    56 : ('PV',                        5),
    57 : ('FV',                        5),
    58 : ('NPER',                      5),
    59 : ('PMT',                       5),
    60 : ('RATE',                      6),
    61 : ('MIRR',                      3),
    62 : ('IRR',                       2),
    63 : ('RAND',                      0),
    64 : ('MATCH',                     3),
    65 : ('DATE',                      3),
    66 : ('TIME',                      3),
    67 : ('DAY',                       1),
    68 : ('MONTH',                     1),
    69 : ('YEAR',                      1),
    70 : ('WEEKDAY',                   2),
    71 : ('HOUR',                      1),
    72 : ('MINUTE',                    1),
    73 : ('SECOND',                    1),
    74 : ('NOW',                       0),
    75 : ('AREAS',                     1),
    76 : ('ROWS',                      1),
    77 : ('COLUMNS',                   1),
    78 : ('OFFSET',                    5),
    79 : ('ABSREF',                    2),
    80 : ('RELREF',                    2),
    81 : ('ARGUMENT',                  3),
    82 : ('SEARCH',                    3),
    83 : ('TRANSPOSE',                 1),
    84 : ('ERROR',                     2),
    85 : ('STEP',                      0),
    86 : ('TYPE',                      1),
    87 : ('ECHO',                      1),
    88 : ('SET.NAME',                  2),
    89 : ('CALLER',                    0),
    90 : ('DEREF',                     1),
    91 : ('WINDOWS',                   2),
    92 : ('SERIES',                    2),
    93 : ('DOCUMENTS',                 2),
    94 : ('ACTIVE.CELL',               0),
    95 : ('SELECTION',                 0),
    96 : ('RESULT',                    1),
    97 : ('ATAN2',                     2),
    98 : ('ASIN',                      1),
    99 : ('ACOS',                      1),
    100: ('CHOOSE',                  255),
    101: ('HLOOKUP',                   4),
    102: ('VLOOKUP',                   4),
    103: ('LINKS',                     2),
    104: ('INPUT',                     7),
    105: ('ISREF',                     1),
    106: ('GET.FORMULA',               1),
    107: ('GET.NAME',                  2),
    108: ('SET.VALUE',                 2),
    109: ('LOG',                       2),
    110: ('EXEC',                      4),
    111: ('CHAR',                      1),
    112: ('LOWER',                     1),
    113: ('UPPER',                     1),
    114: ('PROPER',                    1),
    115: ('LEFT',                      2),
    116: ('RIGHT',                     2),
    117: ('EXACT',                     2),
    118: ('TRIM',                      1),
    119: ('REPLACE',                   4),
    120: ('SUBSTITUTE',                4),
    121: ('CODE',                      1),
    122: ('NAMES',                     3),
    123: ('DIRECTORY',                 1),
    124: ('FIND',                      3),
    125: ('CELL',                      2),
    126: ('ISERR',                     1),
    127: ('ISTEXT',                    1),
    128: ('ISNUMBER',                  1),
    129: ('ISBLANK',                   1),
    130: ('T',                         1),
    131: ('N',                         1),
    132: ('FOPEN',                     2),
    133: ('FCLOSE',                    1),
    134: ('FSIZE',                     1),
    135: ('FREADLN',                   1),
    136: ('FREAD',                     2),
    137: ('FWRITELN',                  2),
    138: ('FWRITE',                    2),
    139: ('FPOS',                      2),
    140: ('DATEVALUE',                 1),
    141: ('TIMEVALUE',                 1),
    142: ('SLN',                       3),
    143: ('SYD',                       4),
    144: ('DDB',                       5),
    145: ('GET.DEF',                   3),
    146: ('REFTEXT',                   2),
    147: ('TEXTREF',                   2),
    148: ('INDIRECT',                  2),
    149: ('REGISTER',                255),
    150: ('CALL',                    255),
    151: ('ADD.BAR',                   1),
    152: ('ADD.MENU',                  4),
    153: ('ADD.COMMAND',               5),
    154: ('ENABLE.COMMAND',            5),
    155: ('CHECK.COMMAND',             5),
    156: ('RENAME.COMMAND',            5),
    157: ('SHOW.BAR',                  1),
    158: ('DELETE.MENU',               3),
    159: ('DELETE.COMMAND',            4),
    160: ('GET.CHART.ITEM',            3),
    161: ('DIALOG.BOX',                1),
    162: ('CLEAN',                     1),
    163: ('MDETERM',                   1),
    164: ('MINVERSE',                  1),
    165: ('MMULT',                     1),
    166: ('FILES',                     2),
    167: ('IPMT',                      6),
    168: ('PPMT',                      6),
    169: ('COUNTA',                  255),
    170: ('CANCEL.KEY',                2),
    171: ('FOR',                       4),
    172: ('WHILE',                     1),
    173: ('BREAK',                     0),
    174: ('NEXT',                      0),
    175: ('INITIATE',                  2),
    176: ('REQUEST',                   2),
    177: ('POKE',                      3),
    178: ('EXECUTE',                   2),
    179: ('TERMINATE',                 1),
    180: ('RESTART',                   1),
    181: ('HELP',                      1),
    182: ('GET.BAR',                   4),
    183: ('PRODUCT',                 255),
    184: ('FACT',                      1),
    185: ('GET.CELL',                  2),
    186: ('GET.WORKSPACE',             1),
    187: ('GET.WINDOW',                2),
    188: ('GET.DOCUMENT',              2),
    189: ('DPRODUCT',                  3),
    190: ('ISNONTEXT',                 1),
    191: ('GET.NOTE',                  3),
    192: ('NOTE',                      4),
    193: ('STDEVP',                  255),
    194: ('VARP',                    255),
    195: ('DSTDEVP',                   3),
    196: ('DVARP',                     3),
    197: ('TRUNC',                     2),
    198: ('ISLOGICAL',                 1),
    199: ('DCOUNTA',                   3),
    200: ('DELETE.BAR',                1),
    201: ('UNREGISTER',                1),
    202: ('',                          0),
    203: ('',                          0),
    204: ('USDOLLAR',                  2),
    205: ('FINDB',                     3),
    206: ('SEARCHB',                   3),
    207: ('REPLACEB',                  4),
    208: ('LEFTB',                     2),
    209: ('RIGHTB',                    2),
    210: ('MIDB',                      3),
    211: ('LENB',                      3),
    212: ('ROUNDUP',                   2),
    213: ('ROUNDDOWN',                 2),
    214: ('ASC',                       1),
    215: ('DBCS',                      1),
    216: ('RANK',                      3),
    217: ('',                          0),
    218: ('',                          0),
    219: ('ADDRESS',                   5),
    220: ('DAYS360',                   3),
    221: ('TODAY',                     0),
    222: ('VDB',                       7),
    223: ('ELSE',                      0),
    224: ('ELSE.IF',                   1),
    225: ('END.IF',                    0),
    226: ('FOR.CELL',                  3),
    227: ('MEDIAN',                  255),
    228: ('SUMPRODUCT',              255),
    229: ('SINH',                      1),
    230: ('COSH',                      1),
    231: ('TANH',                      1),
    232: ('ASINH',                     1),
    233: ('ACOSH',                     1),
    234: ('ATANH',                     1),
    235: ('DGET',                      3),
    236: ('CREATE.OBJECT',            11),
    237: ('VOLATILE',                  1),
    238: ('LAST.ERROR',                0),
    239: ('CUSTOM.UNDO',               2),
    240: ('CUSTOM.REPEAT',             3),
    241: ('FORMULA.CONVERT',           5),
    242: ('GET.LINK.INFO',             4),
    243: ('TEXT.BOX',                  4),
    244: ('INFO',                      1),
    245: ('GROUP',                     0),
    246: ('GET.OBJECT',                5),
    247: ('DB',                        5),
    248: ('PAUSE',                     1),
    249: ('',                          0),
    250: ('',                          0),
    251: ('RESUME',                    1),
    252: ('FREQUENCY',                 2),
    253: ('ADD.TOOLBAR',               2),
    254: ('DELETE.TOOLBAR',            1),
    255: ('User',                    255),
    256: ('RESET.TOOLBAR',             1),
    257: ('EVALUATE',                  1),
    258: ('GET.TOOLBAR',               2),
    259: ('GET.TOOL',                  3),
    260: ('SPELLING.CHECK',            3),
    261: ('ERROR.TYPE',                1),
    262: ('APP.TITLE',                 1),
    263: ('WINDOW.TITLE',              1),
    264: ('SAVE.TOOLBAR',              2),
    265: ('ENABLE.TOOL',               3),
    266: ('PRESS.TOOL',                3),
    267: ('REGISTER.ID',               3),
    268: ('GET.WORKBOOK',              2),
    269: ('AVEDEV',                  255),
    270: ('BETADIST',                  5),
    271: ('GAMMALN',                   1),
    272: ('BETAINV',                   5),
    273: ('BINOMDIST',                 4),
    274: ('CHIDIST',                   2),
    275: ('CHIINV',                    2),
    276: ('COMBIN',                    2),
    277: ('CONFIDENCE',                3),
    278: ('CRITBINOM',                 3),
    279: ('EVEN',                      1),
    280: ('EXPONDIST',                 3),
    281: ('FDIST',                     3),
    282: ('FINV',                      3),
    283: ('FISHER',                    1),
    284: ('FISHERINV',                 1),
    285: ('FLOOR',                     2),
    286: ('GAMMADIST',                 4),
    287: ('GAMMAINV',                  3),
    288: ('CEILING',                   2),
    289: ('HYPGEOMDIST',               4),
    290: ('LOGNORMDIST',               3),
    291: ('LOGINV',                    3),
    292: ('NEGBINOMDIST',              3),
    293: ('NORMDIST',                  4),
    294: ('NORMSDIST',                 1),
    295: ('NORMINV',                   3),
    296: ('NORMSINV',                  1),
    297: ('STANDARDIZE',               3),
    298: ('ODD',                       1),
    299: ('PERMUT',                    2),
    300: ('POISSON',                   3),
    301: ('TDIST',                     3),
    302: ('WEIBULL',                   4),
    303: ('SUMXMY2',                   2),
    304: ('SUMX2MY2',                  2),
    305: ('SUMX2PY2',                  2),
    306: ('CHITEST',                   2),
    307: ('CORREL',                    2),
    308: ('COVAR',                     2),
    309: ('FORECAST',                  3),
    310: ('FTEST',                     2),
    311: ('INTERCEPT',                 2),
    312: ('PEARSON',                   2),
    313: ('RSQ',                       2),
    314: ('STEYX',                     2),
    315: ('SLOPE',                     2),
    316: ('TTEST',                     4),
    317: ('PROB',                      4),
    318: ('DEVSQ',                   255),
    319: ('GEOMEAN',                 255),
    320: ('HARMEAN',                 255),
    321: ('SUMSQ',                   255),
    322: ('KURT',                    255),
    323: ('SKEW',                    255),
    324: ('ZTEST',                     3),
    325: ('LARGE',                     2),
    326: ('SMALL',                     2),
    327: ('QUARTILE',                  2),
    328: ('PERCENTILE',                2),
    329: ('PERCENTRANK',               3),
    330: ('MODE',                    255),
    331: ('TRIMMEAN',                  2),
    332: ('TINV',                      2),
    333: ('',                          4),
    334: ('MOVIE.COMMAND',             4),
    335: ('GET.MOVIE',                 3),
    336: ('CONCATENATE',             255),
    337: ('POWER',                     2),
    338: ('PIVOT.ADD.DATA',            9),
    339: ('GET.PIVOT.TABLE',           2),
    340: ('GET.PIVOT.FIELD',           3),
    341: ('GET.PIVOT.ITEM',            4),
    342: ('RADIANS',                   1),
    343: ('DEGREES',                   1),
    344: ('SUBTOTAL',                255),
    345: ('SUMIF',                     3),
    346: ('COUNTIF',                   2),
    347: ('COUNTBLANK',                1),
    348: ('SCENARIO.GET',              2),
    349: ('OPTIONS.LISTS.GET',         1),
    350: ('ISPMT',                     4),
    351: ('DATEDIF',                   3),
    352: ('DATESTRING',                1),
    353: ('NUMBERSTRING',              2),
    354: ('ROMAN',                     2),
    355: ('OPEN.DIALOG',               4),
    356: ('SAVE.DIALOG',               5),
    357: ('VIEW.GET',                  2),
    358: ('GETPIVOTDATA',            128),
    359: ('HYPERLINK',                 2),
    360: ('PHONETIC',                  1),
    361: ('AVERAGEA',                255),
    362: ('MAXA',                    255),
    363: ('MINA',                    255),
    364: ('STDEVPA',                 255),
    365: ('VARPA',                   255),
    366: ('STDEVA',                  255),
    367: ('VARA',                    255),
    368: ('BAHTTEXT',                  1),
    369: ('THAIDAYOFWEEK',             1),
    370: ('THAIDIGIT',                 1),
    371: ('THAIMONTHOFYEAR',           1),
    372: ('THAINUMSOUND',              1),
    373: ('THAINUMSTRING',             1),
    374: ('THAISTRINGLENGTH',          1),
    375: ('ISTHAIDIGIT',               1),
    376: ('ROUNDBAHTDOWN',             1),
    377: ('ROUNDBAHTUP',               1),
    378: ('THAIYEAR',                  1),
    379: ('RTD',                     255),
    380: ('CUBEVALUE',               255),
    381: ('CUBEMEMBER',                3),
    382: ('CUBEMEMBERPROPERTY',        3),
    383: ('CUBERANKEDMEMBER',          4),
    384: ('HEX2BIN',                   2),
    385: ('HEX2DEC',                   1),
    386: ('HEX2OCT',                   2),
    387: ('DEC2BIN',                   2),
    388: ('DEC2HEX',                   2),
    389: ('DEC2OCT',                   2),
    390: ('OCT2BIN',                   2),
    391: ('OCT2HEX',                   2),
    392: ('OCT2DEC',                   1),
    393: ('BIN2DEC',                   1),
    394: ('BIN2OCT',                   2),
    395: ('BIN2HEX',                   2),
    396: ('IMSUB',                     2),
    397: ('IMDIV',                     2),
    398: ('IMPOWER',                   2),
    399: ('IMABS',                     1),
    400: ('IMSQRT',                    1),
    401: ('IMLN',                      1),
    402: ('IMLOG2',                    1),
    403: ('IMLOG10',                   1),
    404: ('IMSIN',                     1),
    405: ('IMCOS',                     1),
    406: ('IMEXP',                     1),
    407: ('IMARGUMENT',                1),
    408: ('IMCONJUGATE',               1),
    409: ('IMAGINARY',                 1),
    410: ('IMREAL',                    1),
    411: ('COMPLEX',                   3),
    412: ('IMSUM',                   255),
    413: ('IMPRODUCT',               255),
    414: ('SERIESSUM',                 4),
    415: ('FACTDOUBLE',                1),
    416: ('SQRTPI',                    1),
    417: ('QUOTIENT',                  2),
    418: ('DELTA',                     2),
    419: ('GESTEP',                    2),
    420: ('ISEVEN',                    1),
    421: ('ISODD',                     1),
    422: ('MROUND',                    2),
    423: ('ERF',                       2),
    424: ('ERFC',                      1),
    425: ('BESSELJ',                   2),
    426: ('BESSELK',                   2),
    427: ('BESSELY',                   2),
    428: ('BESSELI',                   2),
    429: ('XIRR',                      3),
    430: ('XNPV',                      3),
    431: ('PRICEMAT',                  6),
    432: ('YIELDMAT',                  6),
    433: ('INTRATE',                   5),
    434: ('RECEIVED',                  5),
    435: ('DISC',                      5),
    436: ('PRICEDISC',                 5),
    437: ('YIELDDISC',                 5),
    438: ('TBILLEQ',                   3),
    439: ('TBILLPRICE',                3),
    440: ('TBILLYIELD',                3),
    441: ('PRICE',                     7),
    442: ('YIELD',                     7),
    443: ('DOLLARDE',                  2),
    444: ('DOLLARFR',                  2),
    445: ('NOMINAL',                   2),
    446: ('EFFECT',                    2),
    447: ('CUMPRINC',                  6),
    448: ('CUMIPMT',                   6),
    449: ('EDATE',                     2),
    450: ('EOMONTH',                   2),
    451: ('YEARFRAC',                  3),
    452: ('COUPDAYBS',                 4),
    453: ('COUPDAYS',                  4),
    454: ('COUPDAYSNC',                4),
    455: ('COUPNCD',                   4),
    456: ('COUPNUM',                   4),
    457: ('COUPPCD',                   4),
    458: ('DURATION',                  6),
    459: ('MDURATION',                 6),
    460: ('ODDLPRICE',                 8),
    461: ('ODDLYIELD',                 8),
    462: ('ODDFPRICE',                 8),
    463: ('ODDFYIELD',                 8),
    464: ('RANDBETWEEN',               2),
    465: ('WEEKNUM',                   2),
    466: ('AMORDEGRC',                 7),
    467: ('AMORLINC',                  7),
    468: ('CONVERT',                   8),
    469: ('ACCRINT',                   8),
    470: ('ACCRINTM',                  5),
    471: ('WORKDAY',                   3),
    472: ('NETWORKDAYS',               3),
    473: ('GCD',                     255),
    474: ('MULTINOMIAL',             255),
    475: ('LCM',                     255),
    476: ('FVSCHEDULE',                2),
    477: ('CUBEKPIMEMBER',             4),
    478: ('CUBESET',                   5),
    479: ('CUBESETCOUNT',              1),
    480: ('IFERROR',                   2),
    481: ('COUNTIFS',                128),
    482: ('SUMIFS',                  129),
    483: ('AVERAGEIF',                 3),
    484: ('AVERAGEIFS',              129),
}

FTAB_LEN = 485

assert sorted(ftab_defs) == list(range(FTAB_LEN))

FTAB = tuple(
    FuncDef(funcx, name, ArityPolicy.from_argc(argc))
    for funcx, (name, argc) in sorted(ftab_defs.items())
)

_name_map = dict(
    (fdef.name.upper(), fdef.index) for fdef in FTAB if fdef.name
)


def func_def(funcx):
    if not 0 <= funcx < FTAB_LEN:
        raise IndexOutOfRange(funcx, FTAB_LEN)
    return FTAB[funcx]


def resolve(funcx):
    """
    Utility function: ``1`` => ``('IF', ArityPolicy(EXACT, raw=3))``

    Reserved identifiers come back with an empty name and whatever count
    the table holds for them. Raises
    :class:`~xlscore.biffh.IndexOutOfRange` outside ``range(FTAB_LEN)``.
    """
    fdef = func_def(funcx)
    return fdef.name, fdef.arity


def check_nargs(funcx, nargs):
    """
    Raise :class:`~xlscore.biffh.ArgumentCountError` if function ``funcx``
    cannot be called with ``nargs`` arguments in its fixed-argument form.

    Variadic functions accept any count. The 128/129 sentinels are left to
    the caller and always pass here. Returns the resolved :class:`FuncDef`.
    """
    fdef = func_def(funcx)
    if fdef.arity.accepts(nargs) is False:
        if fdef.arity.is_exact:
            expected = "%d" % fdef.arity.nargs
        else:
            expected = "a non-negative number of"
        raise ArgumentCountError(funcx, fdef.name, nargs, expected)
    return fdef


def lookup_name(name):
    """Utility function: ``'sum'`` => ``4``; unknown or blank => None"""
    if not name:
        return None
    return _name_map.get(name.upper())


def _check_ptg(data, pos, want, tname):
    op = read_u8(data, pos)
    if op & 0x1f != want or not op & 0x60:
        raise XLSCoreError(
            "expected %s token at offset %d, got ptg 0x%02x" % (tname, pos, op))


def decode_func(data, pos=0, verbosity=0, logfile=sys.stdout):
    """
    Decode a ``tFunc`` token (``ptg, iftab``) starting at ``data[pos]``.

    ``tFunc`` is only emitted for functions with a fixed argument count,
    so ``nargs`` comes from the table. A variadic or sentinel entry here
    raises :class:`~xlscore.biffh.ArgumentCountError`.
    """
    _check_ptg(data, pos, 0x01, 'tFunc')
    funcx = read_u16(data, pos+1)
    if verbosity:
        hex_char_dump(data, pos, 3, fout=logfile)
        print("   FuncID=%d" % funcx, file=logfile)
    fdef = func_def(funcx)
    if not fdef.arity.is_exact:
        raise ArgumentCountError(
            funcx, fdef.name, None, "a variable number of")
    if verbosity:
        print("    name=%s nargs=%d" % (fdef.name, fdef.arity.nargs),
              file=logfile)
    return FuncToken(funcx, fdef.name, fdef.arity.nargs, 0, 0, 3)


def decode_funcvar(data, pos=0, verbosity=0, logfile=sys.stdout):
    """
    Decode a ``tFuncVar`` token (``ptg, cparams, tab``) starting at
    ``data[pos]``.

    The low 7 bits of ``cparams`` are the argument count and the high bit
    is the user-prompt flag. The low 15 bits of ``tab`` are the function
    index and the high bit marks a command-equivalent (macro) id, which is
    returned with ``name=None`` rather than looked up in :data:`FTAB`.
    """
    _check_ptg(data, pos, 0x02, 'tFuncVar')
    prompt, nargs = divmod(read_u8(data, pos+1), 128)
    macro, funcx = divmod(read_u16(data, pos+2), 32768)
    if verbosity:
        hex_char_dump(data, pos, 4, fout=logfile)
        print("   FuncID=%d nargs=%d macro=%d prompt=%d"
              % (funcx, nargs, macro, prompt), file=logfile)
    if macro:
        name = None
    else:
        name = func_def(funcx).name
        if verbosity:
            print("    name: %r" % name, file=logfile)
    return FuncToken(funcx, name, nargs, prompt, macro, 4)


def dump_ftab(logfile=sys.stdout):
    for fdef in FTAB:
        arity = fdef.arity
        if arity.is_exact:
            argdesc = "%d" % arity.nargs
        elif arity.is_variadic:
            argdesc = "var"
        else:
            argdesc = "var(%d)" % arity.raw
        print("%3d  %-20s %s" % (fdef.index, fdef.name or "<reserved>", argdesc),
              file=logfile)
