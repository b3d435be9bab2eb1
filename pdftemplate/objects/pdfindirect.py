# A part of pdftemplate
# Copyright (C) 2006-2015 Patrick Maupin, Austin, Texas
# MIT license -- See LICENSE.txt for details

from .pdfobject import OBJREF


class PdfObjRef(tuple):
    ''' A link to an indirect object.  The object itself is the
        (object number, generation number) tuple, so it can be
        used directly as a key into the cross-reference table.
        The target is only loaded when a reader resolves it.
    '''
    kind = OBJREF

    def __new__(cls, key):
        objnum, gennum = key
        objnum, gennum = int(objnum), int(gennum)
        if objnum < 0 or gennum < 0:
            raise ValueError('Invalid object reference %d %d' %
                             (objnum, gennum))
        return tuple.__new__(cls, (objnum, gennum))

    @property
    def objnum(self):
        return self[0]

    @property
    def gennum(self):
        return self[1]

    def __repr__(self):
        return '%d %d R' % self


class ObjectDeclaration(object):
    ''' The body of one indirect object, as read between
        its "N G obj" header and the endobj keyword.
    '''

    def __init__(self, objnum, gennum, values=None):
        self.objnum = objnum
        self.gennum = gennum
        self.values = [] if values is None else values

    @property
    def ref(self):
        return PdfObjRef((self.objnum, self.gennum))

    @property
    def value(self):
        values = self.values
        return values[0] if values else None

    def __repr__(self):
        return '<ObjectDeclaration %d %d obj %r>' % (
            self.objnum, self.gennum, self.values)
