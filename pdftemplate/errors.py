# A part of pdftemplate
# Copyright (C) 2006-2015 Patrick Maupin, Austin, Texas
# MIT license -- See LICENSE.txt for details

'''
PDF Exceptions and error handling

Structural problems that make a document unusable are raised
when it is opened.  Problems the reader can work around (stale
xref offsets, references to missing objects, odd xref entries)
are only logged, on the "pdftemplate" logger.
'''

import logging


fmt = logging.Formatter('[%(levelname)s] %(filename)s:%(lineno)d %(message)s')

handler = logging.StreamHandler()
handler.setFormatter(fmt)

log = logging.getLogger('pdftemplate')
log.setLevel(logging.WARNING)
log.addHandler(handler)


class PdfError(Exception):
    "Abstract base class of exceptions thrown by this module"

    def __init__(self, msg):
        self.msg = msg

    def __str__(self):
        return self.msg


class PdfParseError(PdfError):
    ''' Malformed xref table or trailer, or a required entry
        (/Root, /Pages, /Kids) that is missing, of the wrong
        type, or cannot be resolved.
    '''


class PdfNotImplementedError(PdfError):
    "Document uses a feature this reader does not handle"


class PdfEncryptedError(PdfNotImplementedError):
    "Trailer has an /Encrypt entry; decryption is not supported"
