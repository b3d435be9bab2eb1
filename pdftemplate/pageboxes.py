# A part of pdftemplate
# Copyright (C) 2006-2015 Patrick Maupin, Austin, Texas
# MIT license -- See LICENSE.txt for details

'''
Page boundary boxes.

Reference for content:   Adobe PDF reference, sixth edition, version 1.7

        Page boundaries discussed chapter 10.10.1, page 962

A box is stored in the PDF as an array of two opposite corners,
[x0 y0 x1 y1].  The corners are not necessarily lower left and
upper right, so they are normalized here.
'''

import collections

from .objects import PdfName, PdfNumeric, PdfReal
from .errors import log

Point = collections.namedtuple('Point', 'x y')
Size = collections.namedtuple('Size', 'w h')
PageBox = collections.namedtuple('PageBox',
                                 'position size lower_left upper_right')

MediaBox = PdfName.MediaBox
CropBox = PdfName.CropBox
BleedBox = PdfName.BleedBox
TrimBox = PdfName.TrimBox
ArtBox = PdfName.ArtBox

BOX_NAMES = MediaBox, CropBox, BleedBox, TrimBox, ArtBox

DEFAULT_BOX = CropBox

# A missing box defaults to the next one in line
fallbacks = {BleedBox: CropBox, TrimBox: CropBox, ArtBox: CropBox,
             CropBox: MediaBox}


def make_box(coords, k=1.0, name='box'):
    ''' Given a PDF rectangle array and a scale factor,
        return a PageBox, or None if the array is not
        four numbers.
    '''
    if len(coords) != 4 or not all(isinstance(x, (PdfNumeric, PdfReal))
                                   for x in coords):
        log.warning('Invalid %s %r: expected four numbers', name, coords)
        return None
    x0, y0, x1, y1 = [float(x) for x in coords]
    llx, lly = min(x0, x1) / k, min(y0, y1) / k
    urx, ury = max(x0, x1) / k, max(y0, y1) / k
    return PageBox(Point(llx, lly),
                   Size(abs(x1 - x0) / k, abs(y1 - y0) / k),
                   Point(llx, lly),
                   Point(urx, ury))


class PageBoxes(dict):
    ''' All the boxes found for one page, keyed by box name.
    '''

    def __init__(self, boxes=(), default_box=DEFAULT_BOX):
        dict.__init__(self, boxes)
        self.default_box = default_box

    def select(self, name=None):
        ''' Return (name, box) for the requested box,
            or for the box it defaults to if the page does
            not have it.  box is None if nothing is left.
        '''
        if name is None:
            name = self.default_box
        while name not in self:
            fallback = fallbacks.get(name)
            if fallback is None:
                return name, None
            name = fallback
        return name, self[name]
