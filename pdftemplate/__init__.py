# A part of pdftemplate
# Copyright (C) 2006-2015 Patrick Maupin, Austin, Texas
# MIT license -- See LICENSE.txt for details

from .pdfreader import PdfReader
from .objects import (PdfToken, PdfName, PdfArray, PdfDict, PdfPage,
                      PdfObjRef, ObjectDeclaration, PdfString, PdfHexString,
                      PdfNumeric, PdfReal, PdfNull, PdfStream, kind_of)
from .tokens import PdfTokens
from .errors import (PdfError, PdfParseError, PdfNotImplementedError,
                     PdfEncryptedError)
from .pageboxes import PageBox, PageBoxes, BOX_NAMES, DEFAULT_BOX

__version__ = '0.1'

__all__ = """PdfReader PdfToken PdfName PdfArray PdfDict PdfPage
             PdfObjRef ObjectDeclaration PdfString PdfHexString
             PdfNumeric PdfReal PdfNull PdfStream kind_of PdfTokens
             PdfError PdfParseError PdfNotImplementedError
             PdfEncryptedError PageBox PageBoxes BOX_NAMES
             DEFAULT_BOX""".split()
