# A part of pdftemplate
# Copyright (C) 2006-2017 Patrick Maupin, Austin, Texas
#                    2016 James Laird-Wah, Sydney, Australia
# MIT license -- See LICENSE.txt for details

'''
PDF strings come in two flavors.  A literal string is delimited
by parentheses, and the decoder has already dealt with its escapes
by the time a PdfString is built, so the object holds the bytes
between the outer parentheses.

A hexadecimal string is delimited by angle brackets.  PdfHexString
holds the raw text between the brackets; whitespace may appear
anywhere in it, and a missing final digit is taken to be zero
(PDF reference 1.7, section 3.2.3).
'''

import re
import binascii

from .pdfobject import STRING, HEX


class PdfString(bytes):
    kind = STRING

    def to_bytes(self):
        return bytes(self)


class PdfHexString(bytes):
    kind = HEX

    remove_whitespace = re.compile(br'[\x00 \t\f\r\n]+').sub

    def to_bytes(self):
        ''' Return the binary data the hex digits encode.
            Raises ValueError on a non-hex character.
        '''
        digits = self.remove_whitespace(b'', self)
        if len(digits) % 2:
            digits += b'0'
        try:
            return binascii.unhexlify(digits)
        except (binascii.Error, TypeError):
            raise ValueError('Invalid hex string: %r' % bytes(self))
