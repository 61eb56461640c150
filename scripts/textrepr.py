#!/usr/bin/env python3

"""
Classify the text of JSON records into typed token representations.

Reads one {"id": ..., "text": ...} object per line and writes one
{"id": ..., "words": [...]} object per line, in the same order.
"""

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
import os
import sys

from argparse import ArgumentParser, FileType

from textrepr import __version__
from textrepr.nlp.classifier import Classifier
from textrepr.nlp.stemmer import GetLanguage, Normalizer, ReadExceptions
from textrepr.records import Process, RecordError
from textrepr.text.scanner import MAX_DEPTH, Scanner

epilog = 'input and output encoding: UTF-8'
parser = ArgumentParser(
    usage='%(prog)s [options] [FILE ...]',
    description=__doc__, epilog=epilog,
    prog=os.path.basename(sys.argv[0])
)

parser.set_defaults(loglevel=logging.WARNING)
parser.add_argument(
    'files', metavar='FILE', nargs='*', type=FileType(encoding='utf-8'),
    help='JSON lines input file(s); if absent, read from <STDIN>'
)
parser.add_argument(
    '-l', '--language', metavar='NAME', default='russian',
    help='stemmer and exceptions language [russian]'
)
parser.add_argument(
    '-e', '--exceptions', metavar='FILE', type=FileType(encoding='utf-8'),
    help='additional stemming exceptions (word TAB normal form per line)'
)
parser.add_argument(
    '--max-depth', metavar='N', type=int, default=MAX_DEPTH,
    help='maximum markup nesting depth [%i]' % MAX_DEPTH
)
parser.add_argument('--version', action='version', version=__version__)
parser.add_argument(
    '-v', '--verbose', action='store_const', const=logging.INFO,
    dest='loglevel', help='INFO log level [WARN]'
)
parser.add_argument(
    '-q', '--quiet', action='store_const', const=logging.ERROR,
    dest='loglevel', help='ERROR log level [WARN]'
)
parser.add_argument(
    '--debug', action='store_const', const=logging.DEBUG,
    dest='loglevel', help='DEBUG log level [WARN]'
)
parser.add_argument('--logfile', metavar='FILE',
                    help='log to file instead of <STDERR>')

args = parser.parse_args()
logging.basicConfig(
    filename=args.logfile, level=args.loglevel,
    format='%(asctime)s %(name)s %(levelname)s: %(message)s'
)

try:
    language = GetLanguage(args.language)

    if args.exceptions is not None:
        language = language.extend(ReadExceptions(args.exceptions))

    classifier = Classifier(Normalizer(language), Scanner(args.max_depth))
except (KeyError, ValueError) as e:
    logging.exception('invalid configuration')
    parser.error(str(e))

sys.stdin.reconfigure(encoding='utf-8')
sys.stdout.reconfigure(encoding='utf-8')
streams = args.files if args.files else (sys.stdin,)

for input_stream in streams:
    try:
        Process(input_stream, sys.stdout, classifier.classify_text)
    except RecordError as e:
        logging.exception('malformed input record in %s', input_stream.name)
        parser.error(str(e))
    except Exception:
        logging.exception('unexpected program error')
        parser.error('could not process %s' % input_stream.name)
