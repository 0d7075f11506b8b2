import logging
from argparse import ArgumentParser, FileType

from ezc import logger

base_argparser = ArgumentParser(add_help=False, epilog='Look at the ezc documentation for more info on the options')

base_argparser.add_argument('-o', '--out', type=FileType('w', encoding='utf-8'), default=None, help='the output file (default=stdout)')
base_argparser.add_argument('-d', '--debug', action='store_true', help='log every token and statement to stderr')
base_argparser.add_argument('-e', '--encoding', default='utf-8', help='encoding of the source file (default=utf-8)')
base_argparser.add_argument('source_file', help='A valid .ezc file')

options = ['debug', 'encoding']


def build_options(namespace):
    if namespace.debug:
        logger.setLevel(logging.DEBUG)
    return {n: getattr(namespace, n) for n in options}
