# -*- coding: utf-8 -*-
# vim: set fileencoding=utf-8 :

__all__ = [
        'chars_parser',
        'unescape_string',
        ]

from .errors import CueSyntaxError


def unescape_string(s):
    '''Strip one pair of surrounding double quotes and unescape \\" sequences.

    A string with neither is returned unchanged.
    '''
    if len(s) >= 2 and s[0] == '"' and s[-1] == '"':
        s = s[1:-1]
    return s.replace('\\"', '"')


class chars_parser(object):
    '''Positional reader over the characters of a single line.'''

    text = None
    pos = 0

    def __init__(self, text):
        self.text = text
        self.pos = 0

    @property
    def at_end(self):
        return self.pos >= len(self.text)

    def peek(self):
        if self.at_end:
            return None
        return self.text[self.pos]

    def advance(self):
        ch = self.peek()
        if ch is not None:
            self.pos += 1
        return ch

    def skip_whitespace(self):
        while not self.at_end and self.text[self.pos].isspace():
            self.pos += 1

    def next_token(self):
        '''Characters up to the next whitespace; the whitespace itself is consumed.

        Leading whitespace is not skipped.
        '''
        token = []
        while True:
            ch = self.advance()
            if ch is None or ch.isspace():
                break
            token.append(ch)
        return ''.join(token)

    def next_string(self, error_message):
        '''A bare word, or a double-quoted string with \\" escapes.

        Quoted strings are returned as written, quotes and escapes included;
        see unescape_string().
        '''
        self.skip_whitespace()
        ch = self.advance()
        if ch is None:
            raise CueSyntaxError(error_message)
        if ch != '"':
            return ch + self.next_token()
        string = [ch]
        escaped = False
        while True:
            ch = self.advance()
            if ch is None:
                break
            string.append(ch)
            if escaped:
                escaped = False
            elif ch == '\\':
                escaped = True
            elif ch == '"':
                break
        return ''.join(string)

    def next_text(self, error_message):
        '''A quoted string, or the unquoted remainder of the line.'''
        self.skip_whitespace()
        if self.at_end:
            raise CueSyntaxError(error_message)
        if self.peek() == '"':
            return self.next_string(error_message)
        text = self.text[self.pos:].rstrip()
        self.pos = len(self.text)
        return text

    def next_values(self):
        '''The rest of the line, split on runs of whitespace.'''
        values = self.text[self.pos:].split()
        self.pos = len(self.text)
        return values

    def __iter__(self):
        while not self.at_end:
            yield self.advance()

# vim: ft=python ts=8 sw=4 sts=4 ai et fdm=marker
