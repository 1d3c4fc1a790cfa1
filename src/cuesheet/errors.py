# -*- coding: utf-8 -*-
# vim: set fileencoding=utf-8 :

__all__ = (
    'CueError',
    'CueIOError',
    'CueParseError',
    'CueSyntaxError',
)


class CueError(Exception):
    '''Base class of all CUE sheet reading errors.'''
    pass


class CueIOError(CueError, OSError):
    '''The byte source failed or could not be opened.'''

    def __init__(self, cause):
        self.cause = cause
        super().__init__(str(cause))

    def __str__(self):
        return 'Io error: %s' % (self.cause,)


class CueParseError(CueError, ValueError):
    '''The CUE sheet could not be understood.'''

    lineno = None

    def __init__(self, reason, lineno=None):
        self.reason = reason
        if lineno is not None:
            self.lineno = lineno
        super().__init__(reason)

    def __str__(self):
        s = 'Parse error: %s' % (self.reason,)
        if self.lineno is not None:
            s += ' (line %d)' % (self.lineno,)
        return s


class CueSyntaxError(CueParseError):
    '''A known command line is missing a required argument.'''

    def __init__(self, reason, keyword=None, lineno=None):
        self.keyword = keyword
        super().__init__(reason, lineno=lineno)

# vim: ft=python ts=8 sw=4 sts=4 ai et fdm=marker
