# -*- coding: utf-8 -*-
# vim: set fileencoding=utf-8 :

__all__ = [
        'Command',
        'Rem',
        'Catalog',
        'CdTextFile',
        'Title',
        'Performer',
        'Songwriter',
        'File',
        'Flags',
        'Isrc',
        'Track',
        'Pregap',
        'Postgap',
        'Index',
        'Unknown',
        'tokenize_line',
        ]

import collections

from .errors import CueSyntaxError
from .tokens import chars_parser, unescape_string


class Command(object):
    '''Base of all tokenized CUE sheet lines.

    Variants are namedtuples; two commands are equal only if they are the same
    variant with the same fields.
    '''

    __slots__ = ()

    keyword = None

    def __eq__(self, other):
        if isinstance(other, Command):
            return type(self) is type(other) and tuple.__eq__(self, other)
        if isinstance(other, tuple):
            return False
        return NotImplemented

    def __ne__(self, other):
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return eq
        return not eq

    def __hash__(self):
        return hash((type(self).__name__, tuple(self)))


class Rem(Command, collections.namedtuple('Rem', ['key', 'value'])):
    '''Comment, conventionally a key/value pair (REM GENRE Rock)'''
    __slots__ = ()
    keyword = 'REM'


class Catalog(Command, collections.namedtuple('Catalog', ['catalog'])):
    '''Media Catalog Number (MCN) of the disc'''
    __slots__ = ()
    keyword = 'CATALOG'


class CdTextFile(Command, collections.namedtuple('CdTextFile', ['path'])):
    '''Path to the file containing the CD-Text meta-data of the disc'''
    __slots__ = ()
    keyword = 'CDTEXTFILE'


class Title(Command, collections.namedtuple('Title', ['title'])):
    __slots__ = ()
    keyword = 'TITLE'


class Performer(Command, collections.namedtuple('Performer', ['performer'])):
    __slots__ = ()
    keyword = 'PERFORMER'


class Songwriter(Command, collections.namedtuple('Songwriter', ['songwriter'])):
    __slots__ = ()
    keyword = 'SONGWRITER'


class File(Command, collections.namedtuple('File', ['path', 'format'])):
    __slots__ = ()
    keyword = 'FILE'


class Flags(Command, collections.namedtuple('Flags', ['flags'])):
    '''Track special sub-code flags (DCP, 4CH, PRE, SCMS)'''
    __slots__ = ()
    keyword = 'FLAGS'

    def __new__(cls, flags):
        # Tuple, to keep the command hashable
        return super().__new__(cls, tuple(flags))


class Isrc(Command, collections.namedtuple('Isrc', ['isrc'])):
    # CCOOOYYSSSSS
    # C: country code (upper case letters or digits)
    # O: owner code (upper case letters or digits)
    # Y: year (digits)
    # S: serial number (digits)
    __slots__ = ()
    keyword = 'ISRC'


class Track(Command, collections.namedtuple('Track', ['number', 'mode'])):
    __slots__ = ()
    keyword = 'TRACK'


class Pregap(Command, collections.namedtuple('Pregap', ['timestamp'])):
    __slots__ = ()
    keyword = 'PREGAP'


class Postgap(Command, collections.namedtuple('Postgap', ['timestamp'])):
    __slots__ = ()
    keyword = 'POSTGAP'


class Index(Command, collections.namedtuple('Index', ['number', 'timestamp'])):
    __slots__ = ()
    keyword = 'INDEX'


class Unknown(Command, collections.namedtuple('Unknown', ['line'])):
    '''A line whose command is not recognized, kept verbatim'''
    __slots__ = ()


# Argument kinds:
#   word       bare token, unescaped
#   timestamp  bare token, as written
#   string     quoted string or bare word, unescaped
#   text       quoted string or rest of line, unescaped
#   values     rest of line split on whitespace
_grammar = {
    cmd_cls.keyword: (cmd_cls, args)
    for cmd_cls, args in (
        (Rem, (('word', 'missing REM key'), ('text', 'missing REM value'))),
        (Catalog, (('text', 'missing CATALOG'),)),
        (CdTextFile, (('text', 'missing CDTEXTFILE'),)),
        (Title, (('text', 'missing TITLE'),)),
        (Performer, (('text', 'missing PERFORMER'),)),
        (Songwriter, (('text', 'missing SONGWRITER'),)),
        (File, (('string', 'missing FILE path'), ('word', 'missing FILE format'))),
        (Flags, (('values', None),)),
        (Isrc, (('word', 'missing ISRC code'),)),
        (Track, (('word', 'missing TRACK number'), ('word', 'missing TRACK mode'))),
        (Pregap, (('timestamp', 'missing PREGAP timestamp'),)),
        (Postgap, (('timestamp', 'missing POSTGAP timestamp'),)),
        (Index, (('word', 'missing INDEX number'), ('timestamp', 'missing INDEX timestamp'))),
    )
}


def _next_arg(parser, kind, error_message):
    if kind in ('word', 'timestamp'):
        parser.skip_whitespace()
        value = parser.next_token()
        if not value:
            raise CueSyntaxError(error_message)
        if kind == 'word':
            value = unescape_string(value)
        return value
    if kind == 'string':
        return unescape_string(parser.next_string(error_message))
    if kind == 'text':
        return unescape_string(parser.next_text(error_message))
    if kind == 'values':
        return parser.next_values()
    raise ValueError(kind)


def tokenize_line(line):
    '''Classify one line of a CUE sheet.

    Returns a Command, or None for a blank line. Raises CueSyntaxError when a
    recognized command lacks a required argument.
    '''
    parser = chars_parser(line.strip())
    if parser.at_end:
        return None
    keyword = parser.next_token()
    # ASCII-only case folding; never alter non-ASCII text
    if not keyword.isascii():
        return Unknown(line)
    try:
        cmd_cls, args = _grammar[keyword.upper()]
    except KeyError:
        return Unknown(line)
    try:
        values = [_next_arg(parser, kind, error_message)
                  for kind, error_message in args]
    except CueSyntaxError as e:
        e.keyword = cmd_cls.keyword
        raise
    return cmd_cls(*values)

# vim: ft=python ts=8 sw=4 sts=4 ai et fdm=marker
