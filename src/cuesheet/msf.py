# -*- coding: utf-8 -*-
# vim: set fileencoding=utf-8 :

__all__ = (
    'CDDA_TIMECODE_FRAME_PER_SECOND',
    'Duration',
    'MSF',
    'parse_timestamp',
)

from fractions import Fraction
import functools
import re

from .errors import CueParseError

CDDA_BYTES_PER_SECTOR = 2352  # bytes
CDDA_CHANNELS = 2  # channels
CDDA_SAMPLE_BITS = 16  # bits/sample
CDDA_BYTES_PER_SAMPLE = CDDA_CHANNELS * CDDA_SAMPLE_BITS // 8
CDDA_SAMPLE_RATE = 44100  # samples/s/channel
CDDA_BYTES_PER_SECOND = CDDA_SAMPLE_RATE * CDDA_BYTES_PER_SAMPLE
CDDA_SECTORS_PER_SECOND = CDDA_BYTES_PER_SECOND // CDDA_BYTES_PER_SECTOR
# 1 timecode frame = 1 sector
CDDA_TIMECODE_FRAME_PER_SECOND = CDDA_SECTORS_PER_SECOND
assert CDDA_TIMECODE_FRAME_PER_SECOND == 75

NANOS_PER_SECOND = 1000000000

# Exactly 2 ASCII digits per field; fullmatch so '$' can't accept a trailing newline
_re_msf = re.compile(r'(?P<mm>[0-9]{2}):(?P<ss>[0-9]{2}):(?P<ff>[0-9]{2})')

# class Duration {{{

@functools.total_ordering
class Duration(object):
    '''Non-negative span of time with nanosecond resolution'''

    __slots__ = ('_seconds', '_nanos')

    def __init__(self, seconds=0, nanos=0):
        seconds = int(seconds)
        nanos = int(nanos)
        seconds += nanos // NANOS_PER_SECOND
        nanos = nanos % NANOS_PER_SECOND
        if seconds < 0:
            raise ValueError('Negative duration: %ds %dns' % (seconds, nanos))
        self._seconds = seconds
        self._nanos = nanos

    @classmethod
    def from_frames(cls, frames):
        frames = int(frames)
        return cls(
            seconds=frames // CDDA_TIMECODE_FRAME_PER_SECOND,
            nanos=(frames % CDDA_TIMECODE_FRAME_PER_SECOND) * NANOS_PER_SECOND // CDDA_TIMECODE_FRAME_PER_SECOND,
        )

    @property
    def seconds(self):
        return self._seconds

    @property
    def nanos(self):
        return self._nanos

    @property
    def total_nanos(self):
        return self._seconds * NANOS_PER_SECOND + self._nanos

    @property
    def total_seconds(self):
        return Fraction(self.total_nanos, NANOS_PER_SECOND)

    @property
    def frames(self):
        # Rounded; from_frames() truncates nanos
        return (self.total_nanos * CDDA_TIMECODE_FRAME_PER_SECOND + NANOS_PER_SECOND // 2) // NANOS_PER_SECOND

    @property
    def msf_triplet(self):
        frames = self.frames
        return (
                (frames // CDDA_TIMECODE_FRAME_PER_SECOND // 60),
                (frames // CDDA_TIMECODE_FRAME_PER_SECOND) % 60,
                (frames) % CDDA_TIMECODE_FRAME_PER_SECOND,
                )

    @property
    def msf(self):
        return '%02d:%02d:%02d' % self.msf_triplet

    def __str__(self):
        if self._nanos:
            return '%d.%09ds' % (self._seconds, self._nanos)
        return '%ds' % (self._seconds,)

    def __repr__(self):
        return '%s(seconds=%d, nanos=%d)' % (self.__class__.__name__, self._seconds, self._nanos)

    def __float__(self):
        return self._seconds + self._nanos / NANOS_PER_SECOND

    def __bool__(self):
        return bool(self._seconds or self._nanos)

    def __hash__(self):
        return hash((self._seconds, self._nanos))

    def __add__(self, other):
        if isinstance(other, Duration):
            return self.__class__(nanos=self.total_nanos + other.total_nanos)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Duration):
            return self.__class__(nanos=self.total_nanos - other.total_nanos)
        return NotImplemented

    def __eq__(self, other):
        if isinstance(other, Duration):
            return (self._seconds, self._nanos) == (other._seconds, other._nanos)
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, Duration):
            return (self._seconds, self._nanos) < (other._seconds, other._nanos)
        return NotImplemented

# }}}
# class MSF {{{

@functools.total_ordering
class MSF(object):
    '''mm:ss:ff (minute-second-frame) format

    Fields are not range checked: 99:99:99 is 6040 seconds and 24 frames.
    '''

    def __init__(self, value):
        if isinstance(value, MSF):
            frames = value.frames
        elif isinstance(value, int):
            if value < 0:
                raise CueParseError('invalid timestamp: negative frame count %d' % (value,))
            frames = value
        elif isinstance(value, str):
            m = _re_msf.fullmatch(value)
            if not m:
                raise CueParseError('invalid timestamp: %r' % (value,))
            try:
                mm = int(m.group('mm'))
                ss = int(m.group('ss'))
                ff = int(m.group('ff'))
            except ValueError as e:
                raise CueParseError('invalid timestamp: %s' % (e,)) from e
            frames = ((mm * 60) + ss) * CDDA_TIMECODE_FRAME_PER_SECOND + ff
        else:
            raise TypeError(value)
        self.frames = frames

    @property
    def duration(self):
        return Duration.from_frames(self.frames)

    @property
    def seconds(self):
        return Fraction(self.frames, CDDA_TIMECODE_FRAME_PER_SECOND)

    @property
    def bytes(self):
        return (self.frames # 1 timeframe per sector
                * CDDA_BYTES_PER_SECTOR)

    def __str__(self):
        return self.duration.msf

    def __repr__(self):
        return '%s(%s)' % (self.__class__.__name__, self)

    def __int__(self):
        return self.frames

    def __hash__(self):
        return hash(self.frames)

    def __eq__(self, other):
        if isinstance(other, MSF):
            return self.frames == other.frames
        if isinstance(other, int):
            return self.frames == other
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, MSF):
            return self.frames < other.frames
        if isinstance(other, int):
            return self.frames < other
        return NotImplemented

# }}}

def parse_timestamp(value):
    '''Convert a CUE "mm:ss:ff" timestamp (75 frames per second) to a Duration.'''
    if not isinstance(value, str):
        raise CueParseError('invalid timestamp: %r' % (value,))
    return MSF(value).duration

# vim: ft=python ts=8 sw=4 sts=4 ai et fdm=marker
