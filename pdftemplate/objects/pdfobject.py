# A part of pdftemplate
# Copyright (C) 2006-2015 Patrick Maupin, Austin, Texas
# MIT license -- See LICENSE.txt for details

'''
Discriminants shared by every decoded value, and the
simple (non-container) values that have no Python builtin
to lean on.
'''

NULL = 'null'
BOOLEAN = 'boolean'
NUMERIC = 'numeric'
REAL = 'real'
STRING = 'string'
HEX = 'hex'
ARRAY = 'array'
DICTIONARY = 'dictionary'
OBJREF = 'objref'
STREAM = 'stream'
TOKEN = 'token'


def kind_of(value):
    ''' Return the discriminant of a decoded value, for use
        in diagnostics and type checks.
    '''
    if value is None:
        return 'nothing'
    return getattr(value, 'kind', None) or type(value).__name__


class PdfToken(str):
    ''' A PdfToken is a lexical atom that the decoder did not
        classify further:  names, keywords such as endobj, and
        stray delimiters.
    '''
    kind = TOKEN


class PdfBoolean(object):
    kind = BOOLEAN
    __slots__ = ('value',)

    def __init__(self, value):
        self.value = bool(value)

    def __bool__(self):
        return self.value

    def __eq__(self, other):
        if isinstance(other, PdfBoolean):
            return self.value == other.value
        return NotImplemented

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __hash__(self):
        return hash((BOOLEAN, self.value))

    def __repr__(self):
        return 'true' if self.value else 'false'


PdfTrue = PdfBoolean(True)
PdfFalse = PdfBoolean(False)


class _PdfNull(object):
    kind = NULL

    def __bool__(self):
        return False

    def __repr__(self):
        return 'null'

PdfNull = _PdfNull()


class _PdfStream(object):
    ''' Stands in for a content stream.  The stream keyword was
        seen, but neither the length nor the body were read.
    '''
    kind = STREAM

    def __repr__(self):
        return '<undecoded stream>'

PdfStream = _PdfStream()
