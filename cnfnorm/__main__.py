import argparse
import json
import logging
import sys

from . import bnf
from .grammar import ConstructionError
from .pipeline import normalize
from .tools import timeit


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='cnfnorm',
        description='Convert a context-free grammar into Chomsky normal form.',
    )
    parser.add_argument('file', nargs='?',
        help='Grammar file. Read from stdin when omitted.')
    parser.add_argument('--start',
        help='Start symbol. Defaults to the left side of the first rule.')
    parser.add_argument('--json', action='store_true', default=False,
        help='Print the normalized grammar as JSON.')
    parser.add_argument('-v', '--verbose', action='store_true', default=False,
        help='Log every normalization stage.')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(name)s: %(message)s',
    )

    try:
        if args.file is None:
            grammar = bnf.loads(sys.stdin.read(), args.start)
        else:
            grammar = bnf.load(args.file, args.start)
        with timeit('normalizing'):
            normalized = normalize(grammar)
    except (bnf.SyntaxError, ConstructionError) as e:
        print('error: {}'.format(e), file=sys.stderr)
        return 1

    if args.json:
        json.dump(normalized.as_dict(), sys.stdout, indent=2, ensure_ascii=False)
        print()
    else:
        print('Original Grammar:')
        print(grammar)
        print()
        print('Grammar in Chomsky Normal Form:')
        print(normalized)
    return 0


if __name__ == '__main__':
    sys.exit(main())
