# -*- coding: utf-8 -*-
# vim: set fileencoding=utf-8 :

__all__ = (
    'KwVarsObject',
    'env_flag',
)

import os


class KwVarsObject(object):

    def __repr__(self):
        '''Generic namedtuple-like repr'''
        return '%s(%s)' % (
            self.__class__.__name__,
            ', '.join('%s=%r' % (k, v)
                      for k, v in self.__dict__.items()))

    def __eq__(self, other):
        if type(self) is type(other):
            return vars(self) == vars(other)
        return NotImplemented

    __hash__ = None

    def _replace(self, **kwargs):
        '''Generic namedtuple-like _replace'''
        obj = self.__class__.__new__(self.__class__)
        obj.__dict__.update(vars(self))
        obj.__dict__.update(kwargs)
        return obj


def env_flag(name, default=False):
    '''True if the environment variable is set to anything but "", "0", "false", "no" or "off".'''
    try:
        value = os.environ[name]
    except KeyError:
        # Not set
        return default
    return value.strip().lower() not in ('', '0', 'false', 'no', 'off')

# vim: ft=python ts=8 sw=4 sts=4 ai et fdm=marker
