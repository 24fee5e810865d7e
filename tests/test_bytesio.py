import math
import sys
from unittest import TestCase

import xlscore
from xlscore.bytesio import (
    read_bool, read_f64, read_i32, read_u8, read_u16, read_u32, read_u64,
    read_usize, to_u32,
)

from .base import le


class TestFixedWidthReaders(TestCase):

    def test_u16(self):
        self.assertEqual(read_u16(b'\x34\x12'), 0x1234)
        self.assertEqual(read_u16(le('H', 0)), 0)
        self.assertEqual(read_u16(le('H', 0xFFFF)), 0xFFFF)

    def test_u32(self):
        self.assertEqual(read_u32(le('I', 0)), 0)
        self.assertEqual(read_u32(le('I', 0xFFFFFFFF)), 0xFFFFFFFF)
        self.assertEqual(read_u32(b'\x78\x56\x34\x12'), 0x12345678)

    def test_i32(self):
        self.assertEqual(read_i32(b'\xff\xff\xff\xff'), -1)
        self.assertEqual(read_i32(le('i', -2**31)), -2**31)
        self.assertEqual(read_i32(le('i', 2**31 - 1)), 2**31 - 1)

    def test_u64(self):
        self.assertEqual(read_u64(le('Q', 0)), 0)
        self.assertEqual(read_u64(le('Q', 2**64 - 1)), 2**64 - 1)

    def test_f64(self):
        self.assertEqual(read_f64(le('d', 0.0)), 0.0)
        self.assertEqual(read_f64(le('d', -1.5)), -1.5)
        self.assertTrue(math.isinf(read_f64(le('d', float('inf')))))
        self.assertTrue(math.isnan(read_f64(le('d', float('nan')))))

    def test_u8_and_bool(self):
        self.assertEqual(read_u8(b'\x80'), 0x80)
        self.assertTrue(read_bool(b'\x02'))
        self.assertFalse(read_bool(b'\x00'))

    def test_trailing_bytes_ignored(self):
        self.assertEqual(read_u16(b'\x01\x00\xff\xff'), 1)
        self.assertEqual(read_u32(b'\x01\x00\x00\x00\xff'), 1)
        self.assertEqual(read_u64(le('Q', 7) + b'junk'), 7)

    def test_pos(self):
        data = b'\xaa' + le('H', 0x0102) + le('I', 0x03040506)
        self.assertEqual(read_u16(data, 1), 0x0102)
        self.assertEqual(read_u32(data, 3), 0x03040506)

    def test_accepts_bytearray_and_memoryview(self):
        self.assertEqual(read_u16(bytearray(b'\x01\x02')), 0x0201)
        self.assertEqual(read_u32(memoryview(b'xx\x01\x00\x00\x00')[2:]), 1)


class TestOutOfBounds(TestCase):

    def test_short_slices(self):
        for reader, width in (
                (read_u16, 2), (read_u32, 4), (read_i32, 4),
                (read_u64, 8), (read_f64, 8), (read_usize, 4)):
            for n in range(width):
                with self.assertRaises(xlscore.OutOfBounds) as context:
                    reader(b'\x00' * n)
                self.assertEqual(context.exception.need, width)
                self.assertEqual(context.exception.have, n)
            reader(b'\x00' * width)

    def test_pos_past_end(self):
        with self.assertRaises(xlscore.OutOfBounds):
            read_u16(b'\x00\x00\x00', 2)
        with self.assertRaises(xlscore.OutOfBounds):
            read_u8(b'', 0)

    def test_negative_pos(self):
        with self.assertRaises(xlscore.OutOfBounds):
            read_u16(b'\x00\x00\x00\x00', -1)

    def test_is_recoverable_error(self):
        with self.assertRaises(IndexError):
            read_u32(b'\x00')
        with self.assertRaises(xlscore.XLSCoreError) as context:
            read_u64(b'\x00\x00')
        self.assertTrue('need 8 bytes' in str(context.exception))


class TestUsize(TestCase):

    def test_default_limit(self):
        self.assertEqual(read_usize(le('I', 0xFFFFFFFF)), 0xFFFFFFFF)

    def test_narrowing_failure(self):
        with self.assertRaises(xlscore.NarrowingFailure) as context:
            read_usize(le('I', 0x10000), limit=0xFFFF)
        self.assertEqual(context.exception.value, 0x10000)
        self.assertEqual(context.exception.limit, 0xFFFF)
        self.assertEqual(read_usize(le('I', 0xFFFF), limit=0xFFFF), 0xFFFF)

    def test_default_limit_is_maxsize(self):
        self.assertEqual(xlscore.bytesio.MAX_USIZE, sys.maxsize)


class TestWords(TestCase):

    def test_two_words(self):
        data = b"ABCDEFGH"
        words = to_u32(data)
        self.assertEqual(
            list(words),
            [int.from_bytes(b"ABCD", 'little'), int.from_bytes(b"EFGH", 'little')])
        self.assertEqual(len(words), 2)

    def test_restartable(self):
        words = to_u32(le('II', 1, 0xDEADBEEF))
        self.assertEqual(list(words), [1, 0xDEADBEEF])
        self.assertEqual(list(words), [1, 0xDEADBEEF])
        self.assertEqual(words, [1, 0xDEADBEEF])
        self.assertEqual(words[1], 0xDEADBEEF)
        self.assertEqual(words[-1], 0xDEADBEEF)
        self.assertEqual(words[0:1], [1])

    def test_index_error(self):
        with self.assertRaises(IndexError):
            to_u32(le('I', 1))[1]

    def test_empty(self):
        self.assertEqual(list(to_u32(b'')), [])

    def test_misaligned(self):
        with self.assertRaises(xlscore.Misaligned) as context:
            to_u32(b'\x00' * 6)
        self.assertEqual(context.exception.length, 6)

    def test_words_le_alias(self):
        self.assertIs(xlscore.words_le, xlscore.to_u32)
