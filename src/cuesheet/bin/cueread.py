#!/usr/bin/env python3
# PYTHON_ARGCOMPLETE_OK

import json
import logging
import sys

from cuesheet import argparse
from cuesheet.app import app, VERBOSE
from cuesheet.parser import parse, parse_from_file, DEBUG_ENV_VAR
from cuesheet.utils import env_flag

@app.main_wrapper
def main():

    app.init(
            version='1.0',
            description='CUE sheet reader',
            )

    app.parser.add_argument('--version', '-V', action='version')

    pgroup = app.parser.add_argument_group('Program Control')
    xgroup = pgroup.add_mutually_exclusive_group()
    xgroup.add_argument('--logging_level', default=argparse.SUPPRESS, help='set logging level')
    xgroup.add_argument('--quiet', '-q', dest='logging_level', default=argparse.SUPPRESS, action='store_const', const=logging.WARNING, help='quiet mode')
    xgroup.add_argument('--verbose', '-v', dest='logging_level', default=argparse.SUPPRESS, action='store_const', const=VERBOSE, help='verbose mode')
    xgroup.add_argument('--debug', '-d', dest='logging_level', default=argparse.SUPPRESS, action='store_const', const=logging.DEBUG, help='debug mode')

    pgroup = app.parser.add_argument_group('Parsing Control')
    pgroup.add_bool_argument('--strict', default=False, help='fail on the first line that can\'t be accounted for')

    pgroup = app.parser.add_argument_group('Output Control')
    pgroup.add_argument('--format', dest='output_format', default='text', choices=('text', 'json'), help='output format')

    app.parser.add_argument('cue_files', nargs='+', help='cue file names ("-" for stdin)')

    app.parse_args()

    if not hasattr(app.args, 'logging_level'):
        app.args.logging_level = logging.DEBUG if env_flag(DEBUG_ENV_VAR) else logging.INFO
    app.set_logging_level(app.args.logging_level)

    for cue_file in app.args.cue_files:
        cueread(cue_file)

def cueread(cue_file):
    app.log.log(VERBOSE, 'Reading %s%s...', cue_file, ' (strict)' if app.args.strict else '')
    if cue_file == '-':
        disc = parse(sys.stdin.buffer, strict=app.args.strict)
    else:
        disc = parse_from_file(cue_file, strict=app.args.strict)
    if app.args.output_format == 'json':
        print(json.dumps(disc.to_dict(), indent=2, ensure_ascii=False))
    else:
        print_disc(disc)

def quote(s):
    return s if ' ' not in s else '"%s"' % (s,)

def print_attrs(obj, attrs, indent):
    for attr in attrs:
        v = getattr(obj, attr)
        if v is not None:
            print('%s%s = %s' % (indent, attr, quote(str(v))))

def print_comments_and_unknown(obj, indent):
    for key, value in obj.comments:
        print('%sRem %s %s' % (indent, key, quote(value)))
    for line in getattr(obj, 'unknown', ()):
        print('%sUnknown %s' % (indent, line.strip()))

def print_disc(disc):
    print('Cue attributes:')
    print_attrs(disc, ('title', 'performer', 'songwriter', 'catalog', 'cd_text_file'), '\t')
    print_comments_and_unknown(disc, '\t')
    for cue_file in disc.files:
        print('File %s %s' % (quote(cue_file.file), cue_file.format))
        print_comments_and_unknown(cue_file, '\t')
        for track in cue_file.tracks:
            print('\tTrack %s %s' % (track.no, track.format))
            print_attrs(track, ('title', 'performer', 'songwriter', 'isrc'), '\t\t')
            if track.flags:
                print('\t\tFlags %s' % (' '.join(track.flags),))
            if track.pregap is not None:
                print('\t\tPregap %s' % (track.pregap.msf,))
            for number, position in track.indices:
                print('\t\tIndex %s %s' % (number, position.msf))
            if track.postgap is not None:
                print('\t\tPostgap %s' % (track.postgap.msf,))
            print_comments_and_unknown(track, '\t\t')

if __name__ == "__main__":
    main()

# vim: ft=python ts=8 sw=4 sts=4 ai et fdm=marker
