# A part of pdftemplate
# Copyright (C) 2006-2015 Patrick Maupin, Austin, Texas
# Copyright (C) 2012-2015 Nerijus Mika
# MIT license -- See LICENSE.txt for details

'''
The PdfReader class reads the object model of an existing PDF
file:  the cross-reference table, the trailer, the document
catalog, and the list of pages.  Everything else is loaded on
demand.  Indirect objects are decoded each time they are
resolved, by seeking to the offset the cross-reference table
gives for them, so the reader holds no object cache.

Content streams are not read.  The stream keyword is recognized
and represented by the PdfStream placeholder.
'''

import re

from .errors import (PdfParseError, PdfNotImplementedError,
                     PdfEncryptedError, log)
from .tokens import PdfTokens
from .objects import (PdfToken, PdfNumeric, PdfReal, PdfString,
                      PdfHexString, PdfArray, PdfDict, PdfPage, PdfObjRef,
                      ObjectDeclaration, PdfName, PdfNull, PdfStream,
                      PdfTrue, PdfFalse, is_name, kind_of)
from .pageboxes import PageBoxes, BOX_NAMES, make_box


class PdfReader(object):

    # Longest literal string the decoder will accumulate
    max_string_length = 16 * 1024 * 1024

    # Most /Parent links followed when looking up an inherited attribute
    max_tree_depth = 256

    # Deepest nesting of arrays and dictionaries inside one value
    max_nesting_depth = 100

    keywords = {'true': PdfTrue, 'false': PdfFalse, 'null': PdfNull}

    intmatch = re.compile(r'[+-]?[0-9]+').fullmatch
    uintmatch = re.compile(r'[0-9]+').fullmatch
    realmatch = re.compile(r'[+-]?(?:[0-9]+\.[0-9]*|\.[0-9]+)').fullmatch

    def readvalue(self, token=None):
        ''' Decode one value.  If token is None, the first
            token is pulled from the source.  Returns None if
            nothing usable could be decoded.
        '''
        source = self.source
        if token is None:
            token = source.read_token()
            if token is None:
                return None

        func = self.special.get(token)
        if func is not None:
            return func(source)

        if self.intmatch(token):
            # A numeric token.  Make sure it is not the
            # start of "N G R" or "N G obj".
            if self.uintmatch(token):
                more = source.peek_tokens(2)
                if (len(more) == 2 and self.uintmatch(more[0]) and
                        more[1] in ('obj', 'R')):
                    source.read_tokens(2)
                    return PdfObjRef((token, more[0]))
            return PdfNumeric(token)

        if self.realmatch(token):
            return PdfReal(token)

        # Everything else (names, keywords, stray delimiters)
        # goes back to the caller as is.
        return self.keywords.get(token, token)

    def readhex(self, source):
        ''' Found a < token.  Read up to the closing >.
        '''
        data = source.read_bytes_to_token('>')
        if data is None:
            source.error('Unterminated hex string')
            return None
        return PdfHexString(data.encode('latin-1'))

    def nested(self, source, reader):
        ''' Run a container reader one nesting level down.
            Gives up, returning None, once the nesting is
            deeper than max_nesting_depth.
        '''
        if self.nesting >= self.max_nesting_depth:
            source.error('Arrays and dictionaries nested more than %d deep',
                         self.max_nesting_depth)
            return None
        self.nesting += 1
        try:
            return reader(source)
        finally:
            self.nesting -= 1

    def readdict(self, source):
        return self.nested(source, self._readdict)

    def readarray(self, source):
        return self.nested(source, self._readarray)

    def _readdict(self, source, PdfDict=PdfDict):
        ''' Found a << token.  Parse the tokens after that.
        '''
        result = PdfDict()
        while 1:
            key = source.read_token()
            if key is None:
                source.error('Unterminated dictionary')
                return None
            if key == '>>':
                break
            if not is_name(key):
                source.error('Expected PDF /name object')
                continue

            value = self.readvalue()
            if value is None:
                return None

            # Catch missing value
            if isinstance(value, PdfToken) and value == '>>':
                result[key] = PdfNull
                break

            result[key] = value
        return result

    def _readarray(self, source, PdfArray=PdfArray):
        ''' Found a [ token.  Parse the tokens after that.
        '''
        result = PdfArray()
        while 1:
            token = source.read_token()
            if token is None:
                source.error('Unterminated array')
                return None
            if token == ']':
                break
            value = self.readvalue(token)
            if value is None:
                return None
            result.append(value)
        return result

    def readstring(self, source):
        ''' Found a ( token.  Read bytes up to the matching ),
            keeping track of nested parentheses.  A backslash
            takes the following byte as is.
        '''
        nesting = 1
        result = []
        append = result.append
        read_byte = source.read_byte
        limit = self.max_string_length
        while 1:
            ch = read_byte()
            if not ch:
                source.warning('Unterminated literal string')
                break
            if ch == '(':
                nesting += 1
            elif ch == ')':
                nesting -= 1
                if not nesting:
                    break
            elif ch == '\\':
                ch = read_byte()
                if not ch:
                    source.warning('Unterminated literal string')
                    break
            append(ch)
            if len(result) > limit:
                source.error('Literal string longer than %d bytes', limit)
                return None
        return PdfString(''.join(result).encode('latin-1'))

    def readstream(self, source):
        ''' Found a stream keyword.  The body is not decoded.
        '''
        return PdfStream

    def read_xref_table(self, offset):
        ''' Read the cross-reference table at offset, then the
            trailer dictionary that follows it.
        '''
        source = self.source

        # first read in the Xref table data and the trailer dictionary
        source.seek(offset)
        first = source.peek_tokens(3)
        if (len(first) == 3 and self.uintmatch(first[0]) and
                first[2] == 'obj'):
            raise PdfNotImplementedError(
                'Cross-reference streams are not supported')

        lines = source.read_lines_to_token('trailer')
        if lines is None:
            raise PdfParseError('Cannot read end of xref table')

        self.xref_location = offset
        offsets = self.obj_offsets
        uintmatch = self.uintmatch

        # read the lines, store the xref table data
        start = 1
        for line in lines:
            pieces = line.split()
            if not pieces or pieces == ['xref']:
                continue
            if len(pieces) == 2 and all(uintmatch(x) for x in pieces):
                start, end = int(pieces[0]), int(pieces[1])
                if end > self.max_object:
                    self.max_object = end
            elif len(pieces) == 3 and all(uintmatch(x) for x in pieces[:2]):
                ref = PdfObjRef((start, pieces[1]))
                inuse = pieces[2]
                if inuse == 'n':
                    if ref not in offsets:
                        offsets[ref] = int(pieces[0])
                elif inuse != 'f':
                    log.warning('Invalid entry type %r for object %d in '
                                'xref table', inuse, start)
                start += 1
            else:
                raise PdfParseError('Unexpected data in xref table: %r' %
                                    line.strip())

        source.seek(offset)
        if not source.skip_to_token('trailer'):
            raise PdfParseError('Cannot skip to trailer')
        source.read_token()

        trailer = self.readvalue()
        if not isinstance(trailer, PdfDict):
            raise PdfParseError('Trailer is not a dictionary (got %s)' %
                                kind_of(trailer))
        if trailer.Prev is not None:
            log.warning('Ignoring earlier xref sections (/Prev %r); '
                        'only the last section is read', trailer.Prev)
        self.trailer = trailer

    def resolve(self, ref):
        ''' Return the ObjectDeclaration for an indirect reference,
            or None if it cannot be found.  A declaration is
            returned unchanged.  The source position is the
            same on return as it was on entry.
        '''
        if isinstance(ref, ObjectDeclaration):
            return ref
        if not isinstance(ref, PdfObjRef):
            return None

        offset = self.obj_offsets.get(ref)
        if offset is None:
            log.warning('Did not find PDF object %r in xref table', ref)
            return None

        source = self.source
        with source.saved_position():
            source.seek(offset)
            header = self.readvalue()

            # Check to see if we got the correct object.
            if not (isinstance(header, PdfObjRef) and header == ref):
                objheader = '%d %d obj' % ref
                source.seek(0)
                if not source.skip_to_token(objheader):
                    source.warning("Expected indirect object '%s'",
                                   objheader)
                    return None
                source.warning('Indirect object %s found at incorrect '
                               'offset %d (expected offset %d)',
                               objheader, source.floc, offset)
                source.skip_bytes(len(objheader))

            # Read values until endobj.  Stop early on broken objects
            # that have no endobj, and never read into a stream body.
            values = []
            while len(values) < 2:
                value = self.readvalue()
                if value is None:
                    break
                if isinstance(value, PdfToken) and value == 'endobj':
                    break
                values.append(value)
                if value is PdfStream:
                    break

        return ObjectDeclaration(ref.objnum, ref.gennum, values)

    def dereference(self, value):
        ''' Return the first value of a reference or declaration,
            or the value itself if it is neither.
        '''
        if isinstance(value, (PdfObjRef, ObjectDeclaration)):
            obj = self.resolve(value)
            return None if obj is None else obj.value
        return value

    def _readindirectdict(self, container, key, what):
        ''' Look up a key that must hold a reference to a
            dictionary, and return the dictionary.
        '''
        ref = container.get(key)
        if ref is None:
            raise PdfParseError('Could not find %s in %s' % (key, what))
        if not isinstance(ref, PdfObjRef):
            raise PdfParseError('Wrong type of %s element (%s): must be '
                                'an indirect reference' %
                                (key, kind_of(ref)))
        obj = self.resolve(ref)
        if obj is None:
            raise PdfParseError('Could not find reference to %s (%r)' %
                                (key, ref))
        result = obj.value
        if not isinstance(result, PdfDict):
            raise PdfParseError('%s object %r is not a dictionary (got %s)' %
                                (key, ref, kind_of(result)))
        return result

    def read_root(self):
        self.root = self._readindirectdict(self.trailer, PdfName.Root,
                                           'trailer')

    def is_encrypted(self):
        return PdfName.Encrypt in self.trailer
    is_encrypted = property(is_encrypted)

    def read_pages_root(self):
        self.pages_root = self._readindirectdict(self.root, PdfName.Pages,
                                                 '/Root dictionary')

    def read_pages(self, node):
        ''' Walk the /Kids of the page tree root, in order.
            Kids are taken to be leaf pages.
        '''
        kids = node.Kids
        if kids is None:
            raise PdfParseError('Cannot find /Kids in /Pages dictionary')
        if not isinstance(kids, PdfArray):
            raise PdfParseError('Wrong type of /Kids element (%s): must '
                                'be an array' % kind_of(kids))

        pages = []
        for number, kid in enumerate(kids, 1):
            page = kid if isinstance(kid, PdfDict) else self.dereference(kid)
            if not isinstance(page, PdfDict):
                raise PdfParseError('Could not find reference to page %d '
                                    '(%r)' % (number, kid))
            if page.Type == PdfName.Pages:
                log.warning('Page %d is an intermediate /Pages node; '
                            'nested page trees are not expanded', number)
            pages.append(PdfPage(page, number))
        self.pages = pages

    def page_count(self):
        return len(self.pages)
    page_count = property(page_count)

    def inherited(self, node, key):
        ''' Look key up in a page tree node, and then in its
            ancestors.  Returns None if no node has it, or
            if the /Parent chain is broken or circular.
        '''
        visited = set()
        depth = 0
        while 1:
            value = node.get(key)
            if value is not None:
                return value
            parent = node.Parent
            if parent is None:
                return None
            depth += 1
            isref = isinstance(parent, PdfObjRef)
            if (isref and parent in visited) or depth > self.max_tree_depth:
                log.error('Circular or too deep /Parent chain looking up '
                          '%s (at %r)', key, parent)
                return None
            if isref:
                visited.add(parent)
            node = self.dereference(parent)
            if not isinstance(node, PdfDict):
                log.warning('Could not resolve /Parent %r', parent)
                return None

    def get_page_box(self, node, name, k=1.0):
        ''' Return one named box of a page, or None.
        '''
        box = self.dereference(self.inherited(node, name))
        if box is None:
            return None
        if not isinstance(box, PdfArray):
            log.warning('Expected array for %s, got %s', name, kind_of(box))
            return None
        return make_box(box, k, name)

    def get_page_boxes(self, page_number, k=1.0):
        ''' Get all the bounding boxes of a page.

            page_number is 1-based.
            k is a scaling factor from user space units to output units.
        '''
        if not k > 0:
            raise ValueError('Scale factor must be positive (got %r)' % k)
        boxes = PageBoxes()
        if not 1 <= page_number <= len(self.pages):
            return boxes
        page = self.pages[page_number - 1]
        for name in BOX_NAMES:
            box = self.get_page_box(page, name, k)
            if box is not None:
                boxes[name] = box
        return boxes

    def get_page_rotation(self, page_number):
        ''' Return clockwise page rotation in degrees:
            0, 90, 180 or 270.
        '''
        if not 1 <= page_number <= len(self.pages):
            return 0
        page = self.pages[page_number - 1]
        rotate = self.dereference(self.inherited(page, PdfName.Rotate))
        if not isinstance(rotate, (PdfNumeric, PdfReal)):
            return 0
        if rotate % 90 != 0:
            log.warning('Ignoring /Rotate %r on page %d: not a multiple '
                        'of 90', rotate, page_number)
            return 0
        return int(rotate) % 360

    def close(self):
        self.source.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def __init__(self, fname=None, fdata=None, verbose=True,
                 max_string_length=None, max_tree_depth=None,
                 max_nesting_depth=None):
        if max_string_length is not None:
            self.max_string_length = max_string_length
        if max_tree_depth is not None:
            self.max_tree_depth = max_tree_depth
        if max_nesting_depth is not None:
            self.max_nesting_depth = max_nesting_depth

        if fname is not None:
            assert fdata is None
            # Allow reading preexisting streams
            if hasattr(fname, 'read'):
                fdata = fname.read()
            else:
                try:
                    with open(fname, 'rb') as f:
                        fdata = f.read()
                except IOError:
                    raise PdfParseError('Could not read PDF file %s' %
                                        fname)

        assert fdata is not None
        if isinstance(fdata, bytes):
            fdata = fdata.decode('latin-1')

        startloc = fdata.find('%PDF-')
        if startloc < 0:
            lines = fdata.lstrip().splitlines()
            if not lines:
                raise PdfParseError('Empty PDF file!')
            raise PdfParseError('Invalid PDF header: %s' % repr(lines[0]))
        if startloc:
            log.warning('PDF header not at beginning of file')
        self.version = fdata[startloc + 5:startloc + 8]

        if fdata.rfind('%EOF') < 0:
            log.warning('EOF mark not found: %s' % repr(fdata[-20:]))

        self.max_object = 0
        self.xref_location = 0
        self.obj_offsets = {}
        self.trailer = self.root = self.pages_root = None
        self.pages = []
        self.nesting = 0
        self.special = {'<': self.readhex,
                        '<<': self.readdict,
                        '[': self.readarray,
                        '(': self.readstring,
                        'stream': self.readstream,
                        }

        self.source = source = PdfTokens(fdata, 0, True, verbose)
        try:
            self.read_xref_table(source.find_xref_table())
            self.read_root()
            if self.is_encrypted:
                raise PdfEncryptedError('File is encrypted')
            self.read_pages_root()
            self.read_pages(self.pages_root)
        except Exception:
            source.close()
            raise
