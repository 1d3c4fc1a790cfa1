# -*- coding: utf-8 -*-
# vim: set fileencoding=utf-8 :

import argparse as _argparse
from argparse import *

__all__ = list(_argparse.__all__)


class _BoolArgumentMixin(object):

    def add_bool_argument(self, option_string, *, dest=None, default=False, help=None):
        '''Add an --opt / --no-opt pair storing True / False into the same dest.'''
        if not option_string.startswith('--'):
            raise ValueError('%s: long option expected' % (option_string,))
        name = option_string[2:]
        if dest is None:
            dest = name.replace('-', '_')
        self.add_argument(option_string, dest=dest,
                          action='store_true', default=default,
                          help=help)
        # The first action's default is the one applied
        self.add_argument('--no-' + name, dest=dest,
                          action='store_false', default=SUPPRESS,
                          help=None if help is None else 'do not %s' % (help,))


class _ArgumentGroup(_BoolArgumentMixin, _argparse._ArgumentGroup):
    pass


class ArgumentParser(_BoolArgumentMixin, _argparse.ArgumentParser):

    def add_argument_group(self, *args, **kwargs):
        group = _ArgumentGroup(self, *args, **kwargs)
        self._action_groups.append(group)
        return group

    def find_option(self, option_string):
        '''The action registered for option_string, or None.'''
        for action in self._actions:
            if option_string in action.option_strings:
                return action
        return None

# vim: ft=python ts=8 sw=4 sts=4 ai et fdm=marker
