# A part of pdftemplate
# Copyright (C) 2006-2015 Patrick Maupin, Austin, Texas
# MIT license -- See LICENSE.txt for details

'''
Objects that can occur in PDF files.  Every decoded value
carries its variant in a "kind" attribute; the containers
are arrays and dicts, and indirect objects are linked by
PdfObjRef rather than embedded.
'''
from .pdfobject import (kind_of, PdfToken, PdfBoolean, PdfTrue, PdfFalse,
                        PdfNull, PdfStream)
from .pdfnumber import PdfNumeric, PdfReal
from .pdfstring import PdfString, PdfHexString
from .pdfname import PdfName, is_name
from .pdfarray import PdfArray
from .pdfdict import PdfDict, PdfPage
from .pdfindirect import PdfObjRef, ObjectDeclaration

__all__ = """kind_of PdfToken PdfBoolean PdfTrue PdfFalse PdfNull
             PdfStream PdfNumeric PdfReal PdfString PdfHexString
             PdfName is_name PdfArray PdfDict PdfPage PdfObjRef
             ObjectDeclaration""".split()
