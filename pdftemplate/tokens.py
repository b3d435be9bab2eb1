# A part of pdftemplate
# Copyright (C) 2006-2015 Patrick Maupin, Austin, Texas
# MIT license -- See LICENSE.txt for details

'''
A tokenizer for PDF files, with random access.

In general, documentation used was "PDF reference",
sixth edition, for PDF version 1.7, dated November 2006.

The whole file is held as a Latin-1 decoded string, so every
file byte is exactly one character and string offsets are
file offsets.

Unlike a general purpose PDF tokenizer, literal strings and hex
strings are not swallowed whole:  the opening ( or < is returned
as a token of its own, and the caller reads the body with
read_byte() or read_bytes_to_token().
'''

import re
import contextlib

from .objects import PdfToken
from .errors import log, PdfParseError


def linepos(fdata, loc):
    line = fdata.count('\n', 0, loc) + 1
    line += fdata.count('\r', 0, loc) - fdata.count('\r\n', 0, loc)
    col = loc - max(fdata.rfind('\n', 0, loc), fdata.rfind('\r', 0, loc))
    return line, col


class PdfTokens(object):

    # Table 3.1, page 50 of reference, defines whitespace
    eol = '\n\r'
    whitespace = '\x00 \t\f' + eol

    # Text on page 50 defines delimiter characters
    # Escape the ]
    delimiters = r'()<>{}[\]/%'

    # Token boundaries for skip_to_token (no regex escaping here)
    boundary = whitespace + '()<>{}[]/%'

    # "normal" stuff is all but delimiters or whitespace.

    p_normal = r'(?:[^\\%s%s]+|\\[^%s])+' % (whitespace, delimiters,
                                             whitespace)

    p_comment = r'\%%[^%s]*' % eol

    p_dictdelim = r'\<\<|\>\>'
    p_name = r'/[^%s%s]*' % (delimiters, whitespace)

    # Single delimiters:  ( < [ ] and friends
    p_catchall = '[^%s]' % whitespace

    pattern = '|'.join([p_normal, p_name, p_dictdelim,
                        p_comment, p_catchall])
    findtok = re.compile('[%s]*(%s)' % (whitespace, pattern),
                         re.DOTALL).match

    def __init__(self, fdata, startloc=0, strip_comments=True, verbose=True):
        self.fdata = fdata
        self.strip_comments = strip_comments
        self.msgs_dumped = None if verbose else set()
        self.cache = {}
        self._floc = self._tokstart = startloc

    def setstart(self, startloc):
        ''' Change the starting location.
        '''
        self._floc = self._tokstart = startloc

    def floc(self):
        ''' Return the current file position
            (where the next token will be retrieved)
        '''
        return self._floc
    floc = property(floc, setstart)

    def tokstart(self):
        ''' Return the file position of the most
            recently retrieved token.
        '''
        return self._tokstart
    tokstart = property(tokstart, setstart)

    def tell(self):
        return self._floc

    def seek(self, offset, whence=0):
        ''' Move to a new position, file-object style:
            whence is 0 (absolute), 1 (relative) or 2 (from the end).
            The position is clamped to the data.
        '''
        fdata = self.fdata
        if fdata is None:
            raise ValueError('I/O operation on closed PDF source')
        if whence == 1:
            offset += self._floc
        elif whence == 2:
            offset += len(fdata)
        elif whence != 0:
            raise ValueError('Invalid whence (%r)' % whence)
        self.floc = min(max(offset, 0), len(fdata))
        return self._floc

    @contextlib.contextmanager
    def saved_position(self):
        ''' Restore the current position when the block exits,
            however it exits.
        '''
        floc, tokstart = self._floc, self._tokstart
        try:
            yield floc
        finally:
            self._floc, self._tokstart = floc, tokstart

    def read_token(self, findtok=findtok, PdfToken=PdfToken):
        ''' Return the next token, or None at the end of the data.
        '''
        fdata = self.fdata
        while 1:
            match = findtok(fdata, self._floc)
            if match is None:
                self._tokstart = self._floc = len(fdata)
                return None
            self._floc = match.end()
            self._tokstart = match.start(1)
            token = match.group(1)
            if token[0] == '%' and self.strip_comments:
                continue
            newtok = self.cache.get(token)
            if newtok is None:
                newtok = self.cache[token] = PdfToken(token)
            return newtok

    def peek_tokens(self, count):
        ''' Return up to count tokens without consuming them.
        '''
        result = []
        with self.saved_position():
            while len(result) < count:
                token = self.read_token()
                if token is None:
                    break
                result.append(token)
        return result

    def read_tokens(self, count):
        for _ in range(count):
            if self.read_token() is None:
                break

    def read_byte(self):
        ''' Return the next raw character, or '' at the end of the data.
        '''
        floc = self._floc
        result = self.fdata[floc:floc + 1]
        self._floc = floc + len(result)
        return result

    def skip_bytes(self, count):
        self._floc = min(self._floc + count, len(self.fdata))

    def read_bytes_to_token(self, delim):
        ''' Return the raw text up to delim, and consume
            delim as well.  Returns None if delim never appears.
        '''
        floc = self._floc
        loc = self.fdata.find(delim, floc)
        if loc < 0:
            return None
        self._floc = loc + len(delim)
        return self.fdata[floc:loc]

    def read_lines_to_token(self, delim):
        ''' Return the lines between the current position and
            the next delim token, leaving the position on delim.
            Returns None if delim never appears.
        '''
        floc = self._floc
        loc = self.find_token(delim, floc)
        if loc < 0:
            return None
        self.floc = loc
        return self.fdata[floc:loc].splitlines()

    def find_token(self, literal, startloc=0):
        ''' Find literal in the data, but only where it starts and
            ends on token boundaries, so that "1 0 obj" is not
            found inside "11 0 obj".
        '''
        fdata = self.fdata
        boundary = self.boundary
        size = len(literal)
        head = literal[:1] in boundary
        tail = literal[-1:] in boundary
        loc = fdata.find(literal, startloc)
        while loc >= 0:
            end = loc + size
            if ((head or not loc or fdata[loc - 1] in boundary) and
                    (tail or end >= len(fdata) or fdata[end] in boundary)):
                break
            loc = fdata.find(literal, loc + 1)
        return loc

    def skip_to_token(self, literal):
        ''' Move to the start of the next occurrence of literal.
            The position is unchanged if it is not found.
        '''
        loc = self.find_token(literal, self._floc)
        if loc < 0:
            return False
        self.floc = loc
        return True

    def find_xref_table(self):
        ''' Find the cross reference section location recorded
            at the end of a file
        '''
        startloc = self.fdata.rfind('startxref')
        if startloc < 0:
            raise PdfParseError('Did not find "startxref" at end of file')
        self.floc = startloc
        tok = self.read_token()
        assert tok == 'startxref'  # (We just checked this...)
        tableloc = self.read_token()
        if tableloc is None or not tableloc.isdigit():
            self.exception('Expected table location')
        return int(tableloc)

    def close(self):
        self.fdata = None
        self.cache.clear()

    def msg(self, msg, *arg):
        dumped = self.msgs_dumped
        if dumped is not None:
            if msg in dumped:
                return
            dumped.add(msg)
        if arg:
            msg %= arg
        fdata = self.fdata
        if fdata is None:
            return msg
        begin, end = self._tokstart, self._floc
        if begin >= len(fdata):
            return '%s (filepos %s past EOF %s)' % (msg, begin, len(fdata))
        line, col = linepos(fdata, begin)
        if end > begin:
            tok = fdata[begin:end].rstrip()
            if len(tok) > 30:
                tok = tok[:26] + ' ...'
            return ('%s (line=%d, col=%d, token=%s)' %
                    (msg, line, col, repr(tok)))
        return '%s (line=%d, col=%d)' % (msg, line, col)

    def warning(self, *arg):
        s = self.msg(*arg)
        if s:
            log.warning(s)

    def error(self, *arg):
        s = self.msg(*arg)
        if s:
            log.error(s)

    def exception(self, *arg):
        raise PdfParseError(self.msg(*arg))
