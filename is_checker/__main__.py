"""is-checker — evaluate a predicate against JSON values from the shell.

Usage: is-checker <predicate> [--not] [--json] [values...]

Predicates are the ones registered by the bundles in is_checker/bundles/.
Each value is parsed as a JSON literal; `undefined` is the absent value and
anything that is not valid JSON is taken as a plain string.
Exit status is 0 when the result is true and 1 when it is false.
Run `is-checker help <predicate>` for a predicate's full docs.

Environment variables / .env loading:
  IS_CHECKER_LOG_LEVEL  logging level (default WARNING)
  IS_CHECKER_OUTPUT     text or json (default text)
  OS environment variables are always used first. If a variable is not set,
  is-checker looks for a .env file starting from the current directory and
  walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import json
import logging
import sys

from is_checker import registry
from is_checker.core.config import load_config
from is_checker.core.tags import UNDEFINED

logger = logging.getLogger(__name__)

# Subcommands of the CLI itself; a predicate with one of these names is API-only
COMMANDS = ('help', 'list')


def _parse_value(text: str):
    """Parse one command-line value: JSON, `undefined`, or a plain string."""
    if text == 'undefined':
        return UNDEFINED
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def _short_doc(predicate) -> str:
    doc = (predicate.__doc__ or '').strip()
    return doc.splitlines()[0] if doc else ''


def _build_parser() -> argparse.ArgumentParser:
    predicates = registry.all_predicates()

    epilog = (
        'Examples:\n'
        '  is-checker integer 4\n'
        "  is-checker substring '\"lo\"' '\"hello\"' 4\n"
        "  is-checker deep_equal '[1, [2, 3]]' '[1, [2, 3]]'\n"
        "  is-checker in_array 3 '[1, 2, 3, 4]' 2 --json\n"
        '  is-checker nil undefined --not\n'
        '  is-checker list\n'
        '  is-checker help conforms\n'
    )
    parser = argparse.ArgumentParser(
        prog='is-checker',
        description='Evaluate a predicate against JSON values.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global options before subcommand
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Log at DEBUG level')
    sub = parser.add_subparsers(dest='predicate', help='Predicate to evaluate')

    # One subcommand per registered predicate
    for name, predicate in sorted(predicates.items()):
        if name in COMMANDS:
            logger.debug('Predicate %s shadowed by the %s command, not exposed', name, name)
            continue
        p = sub.add_parser(name, help=_short_doc(predicate))
        p.add_argument('values', nargs='*', help='JSON literals passed as arguments')
        p.add_argument('-n', '--not', dest='negate', action='store_true', help='Evaluate the negated predicate')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')

    help_parser = sub.add_parser('help', help='Print full docs for a predicate')
    help_parser.add_argument('command', nargs='?', help='Predicate name')

    sub.add_parser('list', help='List all predicates')

    return parser


def _print_list() -> None:
    for name, predicate in sorted(registry.all_predicates().items()):
        print(f'  {name:<18} {_short_doc(predicate)}')


def _print_help(command: str | None) -> None:
    """Print the full docstring of a predicate."""
    predicates = registry.all_predicates()

    if command is None:
        print('Available predicates:\n')
        _print_list()
        print('\nRun: is-checker help <predicate> for full docs.')
        return

    if command not in predicates:
        print(f'Unknown predicate: {command}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(predicates))}', file=sys.stderr)
        sys.exit(2)

    doc = (predicates[command].__doc__ or '').strip()
    if not doc:
        print(f'(No docs for {command!r})')
        return
    print(doc)


def _format_result(name: str, negate: bool, values: list, result: bool, as_json: bool) -> str:
    if not as_json:
        return 'true' if result else 'false'
    return json.dumps(
        {
            'predicate': name,
            'negated': negate,
            'args': values,
            'result': result,
        },
        default=repr,
    )


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    config = load_config(env_file=args.env_file)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level_number,
        format='%(levelname)s %(name)s: %(message)s',
    )
    if config.env_path:
        logger.debug('Loaded %s', config.env_path)

    if not args.predicate:
        parser.print_help()
        sys.exit(2)

    if args.predicate == 'help':
        _print_help(args.command)
        return

    if args.predicate == 'list':
        _print_list()
        return

    predicates = registry.discover()
    namespace = predicates.not_ if args.negate else predicates
    values = [_parse_value(text) for text in args.values]

    try:
        result = bool(namespace[args.predicate](*values))
    except TypeError as exc:
        # Wrong number of values for the predicate's signature
        print(f'Error: {args.predicate}: {exc}', file=sys.stderr)
        sys.exit(2)
    logger.debug('%s%s%r -> %s', 'not ' if args.negate else '', args.predicate, tuple(values), result)

    print(_format_result(args.predicate, args.negate, values, result, args.json or config.output == 'json'))
    sys.exit(0 if result else 1)


if __name__ == '__main__':
    main()
