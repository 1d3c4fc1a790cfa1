__all__ = [
        'App',
        'app',
        'VERBOSE',
        ]

from pathlib import Path
import configparser
import functools
import logging
import os
import sys

import argcomplete
import coloredlogs

from . import argparse

LOG_FORMAT = '%(asctime)s %(name)s %(levelname)s %(message)s'

LEVEL_STYLES = dict(coloredlogs.DEFAULT_LEVEL_STYLES,
                    debug=dict(color='magenta'))

# Progress messages, between INFO and DEBUG
VERBOSE = (logging.INFO + logging.DEBUG) // 2
logging.addLevelName(VERBOSE, 'VERBOSE')


class App(object):
    '''Command-line scaffolding shared by the cuesheet tools.

    Options may also be set in the [options] section of an INI config file,
    one per line: "format = json", or a bare "strict" for a switch. Switches
    also accept yes/no values. Command-line arguments override the config.
    '''

    prog = None
    log = logging.getLogger('__main__')

    parser = None
    config_parser = None
    args = None

    def init(self, description=None, version=None, prog=None):
        self.prog = prog or Path(sys.argv[0]).stem
        self.log = logging.getLogger(self.prog)

        # Only --config/--no-config; read before the full command line
        self.config_parser = argparse.ArgumentParser(
                add_help=False,
                fromfile_prefix_chars='@')
        self.add_config_arguments(self.config_parser)

        self.parser = argparse.ArgumentParser(
                prog=self.prog,
                description=description,
                formatter_class=argparse.ArgumentDefaultsHelpFormatter,
                fromfile_prefix_chars='@')
        self.parser.version = version
        self.add_config_arguments(self.parser.add_argument_group('Configuration'))

        coloredlogs.install(
                level=logging.INFO,
                fmt=LOG_FORMAT,
                level_styles=LEVEL_STYLES)

    def add_config_arguments(self, container):
        config_files = ' or '.join(str(f) for f in self.config_file_candidates())
        container.add_argument('--config', '-c', metavar='FILE',
                               dest='config_file', default=None,
                               help='read options from FILE instead of %s' % (config_files.replace('%', '%%'),))
        container.add_argument('--no-config',
                               dest='config_file', action='store_const', const=False,
                               help='do not read any config file')

    def config_file_candidates(self):
        config_home = os.environ.get('XDG_CONFIG_HOME') or Path.home() / '.config'
        yield Path(config_home) / self.prog / 'config'
        yield Path.home() / ('%s.conf' % (self.prog,))

    def default_config_file(self):
        for config_file in self.config_file_candidates():
            if config_file.exists():
                return config_file
        return None

    def set_logging_level(self, level):
        if isinstance(level, str):
            level = int(level) if level.isdigit() else level.upper()
        logging.getLogger().setLevel(level)
        coloredlogs.set_level(level)

    def parse_args(self, args=None):
        argcomplete.autocomplete(self.parser)
        args = sys.argv[1:] if args is None else list(args)

        config_file, _ = self.config_parser.parse_known_args(args)
        config_file = config_file.config_file
        if config_file is None:
            config_file = self.default_config_file()
        if config_file:
            self.read_config_file(config_file)

        self.args = self.parser.parse_args(args)
        return self.args

    def read_config_file(self, config_file):
        '''Turn the [options] of config_file into parser defaults.'''
        self.log.debug('Reading config file %s', config_file)
        config = configparser.ConfigParser(allow_no_value=True)
        with open(config_file, encoding='utf-8') as fp:
            config.read_file(fp)
        if not config.has_section('options'):
            return
        defaults = {}
        for key, value in config.items('options'):
            action = self.parser.find_option('--' + key)
            if action is None or action.dest in (None, argparse.SUPPRESS):
                raise ValueError('%s: unknown option %r' % (config_file, key))
            if action.nargs == 0:
                if value is None:
                    defaults[action.dest] = action.const
                elif isinstance(action.const, bool):
                    enabled = config.getboolean('options', key)
                    defaults[action.dest] = action.const if enabled else not action.const
                else:
                    raise ValueError('%s: option %r takes no value' % (config_file, key))
            else:
                if value is None:
                    raise ValueError('%s: option %r needs a value' % (config_file, key))
                if action.choices is not None and value not in action.choices:
                    raise ValueError('%s: invalid %s: %r (choose from %s)' % (
                        config_file, key, value, ', '.join(map(str, action.choices))))
                defaults[action.dest] = value
        self.parser.set_defaults(**defaults)

    def main_wrapper(self, func):
        '''Run func as the program; exit 1 on error or a False return.'''
        @functools.wraps(func)
        def wrapper():
            try:
                ret = func()
            except Exception as e:
                self.log.error('%s: %s', e.__class__.__name__, e)
                self.log.debug('Traceback:', exc_info=True)
                sys.exit(1)
            if ret is None or ret is True:
                ret = 0
            elif ret is False:
                ret = 1
            sys.exit(ret)
        return wrapper


app = App()

# vim: ft=python ts=8 sw=4 sts=4 ai et fdm=marker
