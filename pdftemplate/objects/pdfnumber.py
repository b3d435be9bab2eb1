# A part of pdftemplate
# Copyright (C) 2006-2015 Patrick Maupin, Austin, Texas
# MIT license -- See LICENSE.txt for details

from .pdfobject import NUMERIC, REAL


class PdfNumeric(int):
    kind = NUMERIC


class PdfReal(float):
    kind = REAL
