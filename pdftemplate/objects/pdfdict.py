# A part of pdftemplate
# Copyright (C) 2006-2015 Patrick Maupin, Austin, Texas
# MIT license -- See LICENSE.txt for details

from .pdfobject import DICTIONARY
from .pdfname import PdfName, is_name
from ..errors import PdfParseError


class PdfDict(dict):
    ''' PdfDict objects are subclassed dictionaries
        with the following features:

        - Every key in the dictionary starts with "/"

        - Keys that (after the initial "/") conform to Python
          naming conventions can also be retrieved as attributes
          of the dictionary.  E.g.  mydict.Page is the same thing
          as mydict.get('/Page'), so a missing key reads as None.

        Values are stored exactly as decoded; indirect references
        stay PdfObjRef until a reader resolves them.
    '''
    kind = DICTIONARY

    def __setitem__(self, name, value, setter=dict.__setitem__):
        if not is_name(name):
            raise PdfParseError('Dict key %s is not a PdfName' % repr(name))
        setter(self, name, value)

    def __getattr__(self, name, PdfName=PdfName):
        ''' If the attribute doesn't exist on the dictionary object,
            try to slap a '/' in front of it and get it out
            of the actual dictionary itself.
        '''
        if name.startswith('_'):
            raise AttributeError(name)
        return self.get(PdfName(name))


class PdfPage(PdfDict):
    ''' A page dictionary, tagged with its 1-based position
        in the document.
    '''

    def __init__(self, source=(), number=0):
        dict.__init__(self, source)
        self.number = number
