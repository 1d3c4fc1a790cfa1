# -*- coding: utf-8 -*-
# vim: set fileencoding=utf-8 :

__all__ = [
        'Disc',
        'CueFile',
        'Track',
        ]

from .utils import KwVarsObject


def _duration_to_dict(duration):
    if duration is None:
        return None
    return {
        'msf': duration.msf,
        'seconds': duration.seconds,
        'nanos': duration.nanos,
    }


class Track(KwVarsObject):
    '''A TRACK within a FILE'''

    def __init__(self, no, format):
        self.no = no  # As written: '01'
        self.format = format  # AUDIO, MODE1/2352, ...
        self.title = None
        self.performer = None
        self.songwriter = None
        self.pregap = None  # Duration
        self.postgap = None  # Duration
        self.isrc = None
        self.indices = []  # [(number, Duration)]
        self.flags = []
        self.comments = []  # [(key, value)]
        self.unknown = []  # raw lines

    def index(self, number):
        '''Position of the first matching index, or None.

        number may be the string as written ('01') or an int (1).
        '''
        for index_no, position in self.indices:
            if isinstance(number, int):
                try:
                    if int(index_no) != number:
                        continue
                except ValueError:
                    continue
            elif index_no != number:
                continue
            return position
        return None

    @property
    def begin(self):
        return self.index(1)

    def to_dict(self):
        return {
            'no': self.no,
            'format': self.format,
            'title': self.title,
            'performer': self.performer,
            'songwriter': self.songwriter,
            'pregap': _duration_to_dict(self.pregap),
            'postgap': _duration_to_dict(self.postgap),
            'isrc': self.isrc,
            'indices': [
                {'number': number, 'position': _duration_to_dict(position)}
                for number, position in self.indices],
            'flags': list(self.flags),
            'comments': [list(comment) for comment in self.comments],
            'unknown': list(self.unknown),
        }


class CueFile(KwVarsObject):
    '''A FILE referenced by the disc'''

    def __init__(self, file, format):
        self.file = file
        # WAVE, MP3, AIFF, BINARY (little endian), MOTOROLA (big endian)
        self.format = format
        self.tracks = []
        self.comments = []

    def to_dict(self):
        return {
            'file': self.file,
            'format': self.format,
            'tracks': [track.to_dict() for track in self.tracks],
            'comments': [list(comment) for comment in self.comments],
        }


class Disc(KwVarsObject):
    '''A parsed CUE sheet'''

    def __init__(self):
        self.title = None
        self.performer = None
        self.songwriter = None
        self.cd_text_file = None
        self.catalog = None  # Media Catalog Number
        self.files = []
        self.comments = []
        self.unknown = []

    @property
    def last_file(self):
        try:
            return self.files[-1]
        except IndexError:
            return None

    @property
    def last_track(self):
        cue_file = self.last_file
        if cue_file is None or not cue_file.tracks:
            return None
        return cue_file.tracks[-1]

    def tracks(self):
        for cue_file in self.files:
            yield from cue_file.tracks

    def to_dict(self):
        return {
            'title': self.title,
            'performer': self.performer,
            'songwriter': self.songwriter,
            'cd_text_file': self.cd_text_file,
            'catalog': self.catalog,
            'files': [cue_file.to_dict() for cue_file in self.files],
            'comments': [list(comment) for comment in self.comments],
            'unknown': list(self.unknown),
        }

# vim: ft=python ts=8 sw=4 sts=4 ai et fdm=marker
