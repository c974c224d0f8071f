"""Command-line interface to cssruleset."""

import argparse
import logging
import sys

from . import DEFAULT_OPTIONS, LOGGER, RuleSet, __version__


PARSER = argparse.ArgumentParser(
    prog='cssruleset',
    description='Parse a CSS declaration block and expand its shorthands.')
PARSER.add_argument(
    'input', help='filename of the declaration block, or - for stdin')
PARSER.add_argument(
    'output', nargs='?', default='-',
    help='filename where output is written, or - for stdout')
PARSER.add_argument(
    '--encoding', default='utf-8', help='character encoding of the files')
PARSER.add_argument(
    '-s', '--selectors',
    help='comma-separated selectors, print one rule per selector')
PARSER.add_argument(
    '-e', '--expand', action='store_true',
    help='expand margin, padding, font and background shorthands')
PARSER.add_argument(
    '--force-important', action='store_true',
    help='mark all the declarations as important')
PARSER.add_argument(
    '--escape', action='store_true',
    help='replace double quotes by single quotes in values')
PARSER.add_argument(
    '-v', '--verbose', action='store_true',
    help='show warnings and information messages')
PARSER.add_argument(
    '-d', '--debug', action='store_true', help='show debugging messages')
PARSER.add_argument(
    '-q', '--quiet', action='store_true', help='hide logging messages')
PARSER.add_argument(
    '--version', action='version',
    version=f'cssruleset version {__version__}',
    help='print cssruleset’s version number and exit')
PARSER.set_defaults(**DEFAULT_OPTIONS)


def main(argv=None, stdout=None, stdin=None):
    """The ``cssruleset`` program takes at least one argument:

    .. code-block:: sh

        cssruleset [options] <input> [<output>]

    """
    args = PARSER.parse_args(argv)

    options = {
        key: value for key, value in vars(args).items() if key in DEFAULT_OPTIONS}

    # Default to logging to stderr.
    if args.debug:
        LOGGER.setLevel(logging.DEBUG)
    elif args.verbose:
        LOGGER.setLevel(logging.INFO)
    if not args.quiet:
        handler = logging.StreamHandler()
        if args.debug:
            # Add extra information when debug logging
            handler.setFormatter(
                logging.Formatter(
                    '%(levelname)s: %(filename)s:%(lineno)d '
                    '(%(funcName)s): %(message)s'))
        else:
            handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        LOGGER.addHandler(handler)

    if args.input == '-':
        block = (stdin or sys.stdin).read()
    else:
        with open(args.input, encoding=args.encoding) as fd:
            block = fd.read()

    ruleset = RuleSet(args.selectors or '', block)
    if args.expand:
        ruleset.expand_shorthand()
    if args.escape:
        ruleset.escape_declarations()

    if args.selectors:
        lines = [
            f'{selector} {{ {declarations} }} /* {specificity} */'
            for selector, declarations, specificity
            in ruleset.iter_selectors(**options)]
    else:
        lines = [ruleset.declarations_to_string(**options)]
    text = ''.join(f'{line}\n' for line in lines)

    if args.output == '-':
        (stdout or sys.stdout).write(text)
    else:
        with open(args.output, 'w', encoding=args.encoding) as fd:
            fd.write(text)


if __name__ == '__main__':  # pragma: no cover
    main()
