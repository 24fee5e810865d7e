import io
from unittest import TestCase

from xlscore.cellnames import (
    cellname, cellnameabs, colname, push_column, rangename2d,
)


class TestColumnLabels(TestCase):

    def test_known_labels(self):
        for colx, label in (
                (0, 'A'), (7, 'H'), (25, 'Z'), (26, 'AA'), (27, 'AB'),
                (51, 'AZ'), (52, 'BA'), (255, 'IV'), (701, 'ZZ'),
                (702, 'AAA'), (16383, 'XFD')):
            self.assertEqual(colname(colx), label)

    def test_sequence_has_no_gaps(self):
        labels = [colname(i) for i in range(26 + 26 * 26 + 1)]
        self.assertEqual(len(set(labels)), len(labels))
        self.assertEqual(labels[26:29], ['AA', 'AB', 'AC'])
        self.assertEqual(labels[-2:], ['ZZ', 'AAA'])

    def test_push_to_list(self):
        buf = ['=SUM(']
        push_column(26, buf)
        buf.append('1)')
        self.assertEqual(''.join(buf), '=SUM(AA1)')

    def test_push_to_stream(self):
        buf = io.StringIO()
        buf.write('$')
        push_column(701, buf)
        self.assertEqual(buf.getvalue(), '$ZZ')

    def test_negative(self):
        with self.assertRaises(ValueError):
            colname(-1)


class TestCellNames(TestCase):

    def test_cellname(self):
        self.assertEqual(cellname(5, 7), 'H6')
        self.assertEqual(cellname(0, 26), 'AA1')

    def test_cellnameabs(self):
        self.assertEqual(cellnameabs(5, 7), '$H$6')
        self.assertEqual(cellnameabs(5, 7, r1c1=1), 'R6C8')

    def test_rangename2d(self):
        self.assertEqual(rangename2d(5, 20, 7, 10), '$H$6:$J$20')
        self.assertEqual(rangename2d(5, 6, 7, 8), '$H$6')
        self.assertEqual(rangename2d(0, 2, 0, 2, r1c1=1), 'R1C1:R2C2')
