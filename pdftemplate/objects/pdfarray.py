# A part of pdftemplate
# Copyright (C) 2006-2015 Patrick Maupin, Austin, Texas
# MIT license -- See LICENSE.txt for details

from .pdfobject import ARRAY


class PdfArray(list):
    ''' A PdfArray maps the PDF file array object into a Python list.
        Members are kept exactly as decoded; indirect references
        are not followed.
    '''
    kind = ARRAY
