# -*- coding: utf-8 -*-
# vim: set fileencoding=utf-8 :

__all__ = [
        'lines_parser',
        'CueParser',
        'parse',
        'parse_from_file',
        ]

import collections.abc
import io

import logging
log = logging.getLogger(__name__)

from . import commands
from .commands import tokenize_line
from .cue import Disc, CueFile, Track
from .errors import CueIOError, CueParseError, CueSyntaxError
from .msf import parse_timestamp
from .utils import env_flag

DEBUG_ENV_VAR = 'CUESHEET_DEBUG'

# Commands that open a context; malformed ones can't be skipped without
# misattributing what follows.
FATAL_KEYWORDS = frozenset((
    commands.File.keyword,
))


class lines_parser(object):
    '''Iterate the lines of a byte (or text) source, tracking line numbers.

    Lines are decoded as UTF-8 and stripped of their terminator.
    '''

    lines_iter = None

    line = None
    line_no = 0
    next_line_no = 1

    def __init__(self, lines):
        if isinstance(lines, (str, bytes)):
            lines = io.StringIO(lines) if isinstance(lines, str) else io.BytesIO(lines)
        self.lines_iter = lines if isinstance(lines, collections.abc.Iterator) else iter(lines)

    def advance(self):
        try:
            line = next(self.lines_iter)
        except StopIteration:
            self.line = None
            return False
        except OSError as e:
            raise CueIOError(e) from e
        self.line_no = self.next_line_no
        self.next_line_no += 1
        if isinstance(line, (bytes, bytearray)):
            try:
                line = bytes(line).decode('utf-8')
            except UnicodeDecodeError as e:
                raise CueIOError(e) from e
        if self.line_no == 1 and line.startswith('\ufeff'):
            line = line[1:]
        if line.endswith('\n'):
            line = line[:-1]
            if line.endswith('\r'):
                line = line[:-1]
        self.line = line
        return True

    def __iter__(self):
        while self.advance():
            yield self.line


class CueParser(object):
    '''Assemble a Disc from the lines of a CUE sheet.

    In strict mode the first line that can't be fully accounted for raises
    CueParseError. Otherwise such lines are dropped, or, for unknown commands,
    kept verbatim in the unknown list of the current track (or the disc).

    Indentation is not significant: a REM following a TRACK belongs to that
    track whatever its indentation.
    '''

    strict = False
    debug = False
    disc = None

    def __init__(self, strict=False):
        self.strict = bool(strict)
        self.disc = Disc()
        self.debug = env_flag(DEBUG_ENV_VAR)
        self.handlers = {
            commands.Rem: self.on_rem,
            commands.Catalog: self.on_catalog,
            commands.CdTextFile: self.on_cd_text_file,
            commands.Title: self.on_title,
            commands.Performer: self.on_performer,
            commands.Songwriter: self.on_songwriter,
            commands.File: self.on_file,
            commands.Flags: self.on_flags,
            commands.Isrc: self.on_isrc,
            commands.Track: self.on_track,
            commands.Pregap: self.on_pregap,
            commands.Postgap: self.on_postgap,
            commands.Index: self.on_index,
            commands.Unknown: self.on_unknown,
        }

    def parse(self, lines):
        parser = lines_parser(lines)
        while parser.advance():
            try:
                self.parse_line(parser.line)
            except CueParseError as e:
                if e.lineno is None:
                    e.lineno = parser.line_no
                raise
        return self.disc

    def parse_line(self, line):
        try:
            command = tokenize_line(line)
        except CueSyntaxError as e:
            if self.strict or e.keyword in FATAL_KEYWORDS:
                raise
            log.debug('Ignoring malformed line %r: %s', line, e.reason)
            return
        if self.debug:
            log.debug('%-60s %r', line, command)
        if command is None:
            self.violation('empty line')
            return
        self.handlers[type(command)](command)

    def violation(self, reason):
        if self.strict:
            raise CueParseError('strict mode failure: %s' % (reason,))
        log.debug('Ignoring line: %s', reason)

    @property
    def current_file(self):
        return self.disc.last_file

    @property
    def current_track(self):
        return self.disc.last_track

    def require_track(self, command):
        track = self.current_track
        if track is None:
            self.violation('%s assigned to no TRACK' % (command.keyword,))
        return track

    def timestamp(self, command, value):
        try:
            return parse_timestamp(value)
        except CueParseError as e:
            if self.strict:
                raise CueParseError('bad %s timestamp: %s' % (command.keyword, e.reason)) from e
            log.debug('Ignoring %s: %s', command.keyword, e.reason)
            return None

    def on_rem(self, command):
        target = self.current_track or self.current_file or self.disc
        target.comments.append((command.key, command.value))

    def on_catalog(self, command):
        self.disc.catalog = command.catalog

    def on_cd_text_file(self, command):
        self.disc.cd_text_file = command.path

    def on_title(self, command):
        (self.current_track or self.disc).title = command.title

    def on_performer(self, command):
        (self.current_track or self.disc).performer = command.performer

    def on_songwriter(self, command):
        (self.current_track or self.disc).songwriter = command.songwriter

    def on_file(self, command):
        self.disc.files.append(CueFile(command.path, command.format))

    def on_track(self, command):
        cue_file = self.current_file
        if cue_file is None:
            self.violation('%s assigned to no FILE' % (command.keyword,))
            return
        cue_file.tracks.append(Track(command.number, command.mode))

    def on_index(self, command):
        track = self.require_track(command)
        if track is None:
            return
        position = self.timestamp(command, command.timestamp)
        if position is not None:
            track.indices.append((command.number, position))

    def on_pregap(self, command):
        track = self.require_track(command)
        if track is None:
            return
        duration = self.timestamp(command, command.timestamp)
        if duration is not None:
            track.pregap = duration

    def on_postgap(self, command):
        track = self.require_track(command)
        if track is None:
            return
        duration = self.timestamp(command, command.timestamp)
        if duration is not None:
            track.postgap = duration

    def on_flags(self, command):
        track = self.require_track(command)
        if track is not None:
            track.flags = list(command.flags)

    def on_isrc(self, command):
        track = self.require_track(command)
        if track is not None:
            track.isrc = command.isrc

    def on_unknown(self, command):
        if self.strict:
            self.violation('unknown command: %s' % (command.line,))
            return
        (self.current_track or self.disc).unknown.append(command.line)


def parse(stream, strict=False):
    '''Parse a CUE sheet from any source yielding lines (bytes or str).

    The source is read to exhaustion but not closed; it is never seeked.
    '''
    return CueParser(strict=strict).parse(stream)


def parse_from_file(path, strict=False):
    '''Parse the CUE sheet at path; the file is closed on every exit path.'''
    try:
        fp = open(path, 'rb')
    except OSError as e:
        raise CueIOError(e) from e
    with fp:
        return parse(fp, strict=strict)

# vim: ft=python ts=8 sw=4 sts=4 ai et fdm=marker
