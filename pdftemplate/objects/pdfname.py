# A part of pdftemplate
# Copyright (C) 2006-2015 Patrick Maupin, Austin, Texas
# MIT license -- See LICENSE.txt for details

from .pdfobject import PdfToken


def is_name(token):
    ''' A name is a token starting with a slash, with at
        least one character after the slash.
    '''
    return isinstance(token, str) and len(token) > 1 and token[0] == '/'


class PdfName(object):
    ''' Two simple ways to get a PDF name from a string:

                x = PdfName.FooBar
                x = pdfName('FooBar')

        Either technique will return "/FooBar"

    '''

    def __getattr__(self, name, PdfToken=PdfToken):
        if name.startswith('__'):
            raise AttributeError(name)
        return PdfToken('/' + name)

    def __call__(self, name, PdfToken=PdfToken):
        return PdfToken('/' + name)

PdfName = PdfName()
