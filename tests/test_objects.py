#! /usr/bin/env python
# encoding: utf-8
# A part of pdftemplate
# Copyright (C) 2006-2017 Patrick Maupin, Austin, Texas
#                    2016 James Laird-Wah, Sydney, Australia
# MIT license -- See LICENSE.txt for details

'''
Run from the directory above like so:
python -m unittest discover tests -p test_objects.py
'''


from pdftemplate import PdfDict, PdfName, PdfParseError
from pdftemplate.objects import (PdfObjRef, ObjectDeclaration, PdfHexString,
                                 PdfToken, PdfNumeric, PdfReal, PdfArray,
                                 PdfNull, PdfStream, PdfTrue, PdfFalse,
                                 PdfPage, kind_of)

import unittest


class TestPdfDicts(unittest.TestCase):

    def test_attribute_get(self):
        d = PdfDict()
        d[PdfName.Type] = PdfName.Page
        self.assertEqual(d.Type, '/Page')
        self.assertEqual(d['/Type'], '/Page')
        self.assertEqual(d.Missing, None)
        test, = d
        self.assertEqual(type(test), type(PdfName.Name))

    def test_keys_must_be_names(self):
        d = PdfDict()
        self.assertRaises(PdfParseError, d.__setitem__, 'Type', 1)
        self.assertRaises(PdfParseError, d.__setitem__, '/', 1)

    def test_private_attributes(self):
        d = PdfDict()
        self.assertRaises(AttributeError, getattr, d, '_stream')

    def test_page(self):
        page = PdfPage({'/Type': PdfName.Page}, 3)
        self.assertEqual(page.number, 3)
        self.assertEqual(page.Type, '/Page')
        self.assertEqual(page.kind, 'dictionary')


class TestObjRef(unittest.TestCase):

    def test_is_a_key(self):
        ref = PdfObjRef(('12', '0'))
        self.assertEqual(ref, (12, 0))
        self.assertEqual({(12, 0): 'x'}[ref], 'x')
        self.assertEqual((ref.objnum, ref.gennum), (12, 0))
        self.assertEqual(repr(ref), '12 0 R')

    def test_negative(self):
        self.assertRaises(ValueError, PdfObjRef, (-1, 0))
        self.assertRaises(ValueError, PdfObjRef, (1, -2))

    def test_declaration(self):
        obj = ObjectDeclaration(4, 0, [PdfNumeric(7)])
        self.assertEqual(obj.value, 7)
        self.assertEqual(obj.ref, (4, 0))
        self.assertEqual(ObjectDeclaration(4, 0).value, None)


class TestHexString(unittest.TestCase):

    def test_to_bytes(self):
        self.assertEqual(PdfHexString(b'4E6F').to_bytes(), b'No')
        self.assertEqual(PdfHexString(b'4e 6f\n70').to_bytes(), b'Nop')

    def test_odd_digits(self):
        # See PDF 1.7 ref section 3.2.3
        self.assertEqual(PdfHexString(b'901FA').to_bytes(), b'\x90\x1f\xa0')

    def test_invalid(self):
        self.assertRaises(ValueError, PdfHexString(b'zz').to_bytes)


class TestKinds(unittest.TestCase):

    def test_kinds(self):
        self.assertEqual(kind_of(PdfNull), 'null')
        self.assertEqual(kind_of(PdfTrue), 'boolean')
        self.assertEqual(kind_of(PdfNumeric(1)), 'numeric')
        self.assertEqual(kind_of(PdfReal(1.5)), 'real')
        self.assertEqual(kind_of(PdfArray()), 'array')
        self.assertEqual(kind_of(PdfDict()), 'dictionary')
        self.assertEqual(kind_of(PdfObjRef((1, 0))), 'objref')
        self.assertEqual(kind_of(PdfStream), 'stream')
        self.assertEqual(kind_of(PdfToken('endobj')), 'token')
        self.assertEqual(kind_of(None), 'nothing')
        self.assertEqual(kind_of(3), 'int')

    def test_null_and_stream_are_distinct(self):
        self.assertFalse(PdfNull)
        self.assertTrue(PdfStream is not PdfNull)
        self.assertNotEqual(PdfStream, PdfNull)

    def test_booleans(self):
        self.assertTrue(PdfTrue)
        self.assertFalse(PdfFalse)
        self.assertNotEqual(PdfTrue, PdfFalse)


def main():
    unittest.main()


if __name__ == '__main__':
    main()
