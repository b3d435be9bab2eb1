#! /usr/bin/env python
# A part of pdftemplate
# Copyright (C) 2006-2015 Patrick Maupin, Austin, Texas
# MIT license -- See LICENSE.txt for details

'''
Run from the directory above like so:
python -m unittest discover tests -p test_xref.py
'''

import unittest

import minipdf

from pdftemplate import (PdfReader, PdfTokens, PdfParseError,
                         PdfNotImplementedError)


XREF = '''xref
0 4
0000000000 65535 f
0000000010 00000 n
0000000020 00000 n
0000000030 00000 n
%s
trailer
<< /Size 4 /Root 1 0 R >>
startxref
0
%%%%EOF
'''


class XrefTestCase(unittest.TestCase):

    def setUp(self):
        self.reader = PdfReader(fdata=minipdf.simple_pdf())

    def read(self, extra_lines='', table=XREF):
        reader = self.reader
        reader.source = PdfTokens(table % extra_lines, verbose=False)
        reader.max_object = 0
        reader.obj_offsets = {}
        reader.trailer = None
        reader.read_xref_table(0)
        return reader


class TestXrefTable(XrefTestCase):

    def test_offsets(self):
        reader = self.read()
        self.assertEqual(reader.obj_offsets,
                         {(1, 0): 10, (2, 0): 20, (3, 0): 30})
        self.assertEqual(reader.xref_location, 0)

    def test_free_entries_not_stored(self):
        reader = self.read()
        self.assertTrue((0, 65535) not in reader.obj_offsets)

    def test_max_object(self):
        reader = self.read('7 2\n0000000070 00000 n \n0000000080 00000 n ')
        self.assertEqual(reader.max_object, 4)
        self.assertEqual(reader.obj_offsets[(8, 0)], 80)
        reader = self.read('3 9')
        self.assertEqual(reader.max_object, 9)

    def test_first_entry_wins(self):
        reader = self.read('2 1\n0000000099 00000 n ')
        self.assertEqual(reader.obj_offsets[(2, 0)], 20)

    def test_generation_is_part_of_key(self):
        reader = self.read('2 1\n0000000099 00001 n ')
        self.assertEqual(reader.obj_offsets[(2, 0)], 20)
        self.assertEqual(reader.obj_offsets[(2, 1)], 99)

    def test_unknown_flag(self):
        reader = self.read('5 1\n0000000050 00000 x ')
        self.assertTrue((5, 0) not in reader.obj_offsets)

    def test_bad_line(self):
        self.assertRaises(PdfParseError, self.read, 'this is bad data')
        self.assertRaises(PdfParseError, self.read, 'x y')

    def test_trailer(self):
        reader = self.read()
        self.assertEqual(reader.trailer, {'/Size': 4, '/Root': (1, 0)})


class TestTrailerErrors(XrefTestCase):

    def test_trailer_not_dict(self):
        table = 'xref\n0 1\n0000000000 65535 f \ntrailer\n[1 2]\n%s'
        self.assertRaises(PdfParseError, self.read, table=table)

    def test_no_trailer(self):
        table = 'xref\n0 1\n0000000000 65535 f \n%s'
        self.assertRaises(PdfParseError, self.read, table=table)

    def test_xref_stream(self):
        table = '5 0 obj\n<< /Type /XRef >>\nstream\n%s'
        self.assertRaises(PdfNotImplementedError, self.read, table=table)

    def test_prev_ignored(self):
        table = 'xref\n0 1\n0000000000 65535 f \ntrailer\n<< /Prev 5 >>%s'
        reader = self.read(table=table)
        self.assertEqual(reader.trailer.Prev, 5)


def main():
    unittest.main()


if __name__ == '__main__':
    main()
