#!/usr/bin/env python
"""
usage:   pageboxes.py my.pdf [page[range] ...]
         eg. pageboxes.py my.pdf 1-3 5 7-9

Prints the bounding boxes and rotation of the selected pages,
in points.  Prints all pages by default.
"""
import sys

from pdftemplate import PdfReader, BOX_NAMES


def describe(name, box):
    return ('%-10s x=%g y=%g w=%g h=%g  (%g %g) - (%g %g)' %
            ((name[1:], box.position.x, box.position.y,
              box.size.w, box.size.h) + box.lower_left + box.upper_right))


def pageboxes(inpfn, *ranges):
    ranges = [[int(y) for y in x.split('-')] for x in ranges]
    with PdfReader(inpfn) as reader:
        if not ranges:
            ranges = [[1, reader.page_count]]
        for onerange in ranges:
            onerange = (onerange + onerange[-1:])[:2]
            for pagenum in range(onerange[0], onerange[1] + 1):
                boxes = reader.get_page_boxes(pagenum)
                print('page %d: rotate %d' %
                      (pagenum, reader.get_page_rotation(pagenum)))
                for name in BOX_NAMES:
                    if name in boxes:
                        print('    ' + describe(name, boxes[name]))
                name, box = boxes.select()
                if box is not None:
                    print('    using %s' % name[1:])


if __name__ == '__main__':
    if len(sys.argv) < 2:
        sys.exit(__doc__)
    pageboxes(*sys.argv[1:])
