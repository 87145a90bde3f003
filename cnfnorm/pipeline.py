import logging

from .binarize import to_chomsky_normal_form
from .naming import NameGenerator
from .nullable import remove_null_productions
from .tools import timeit
from .unit import remove_unit_productions
from .useless import remove_non_productive_symbols, remove_inaccessible_symbols


logger = logging.getLogger(__name__)


def stages(names):
    """The normalization stages in the order they have to run."""
    return [
        ('null productions', lambda g: remove_null_productions(g, names)),
        ('unit productions', remove_unit_productions),
        ('non-productive symbols', remove_non_productive_symbols),
        ('inaccessible symbols', remove_inaccessible_symbols),
        ('chomsky normal form', lambda g: to_chomsky_normal_form(g, names)),
    ]


def _size(grammar):
    return len(grammar.nonterminals), len(grammar.rules())


def normalize(grammar, names=None):
    """Language-equivalent grammar in Chomsky normal form.

    names is the NameGenerator used for symbols introduced along the way. A
    fresh one is created when omitted. It is reserved against every
    intermediate grammar, so introduced names never clash with existing ones.
    """
    if names is None:
        names = NameGenerator()
    names.reserve(grammar)

    for title, stage in stages(names):
        with timeit(title):
            grammar = stage(grammar)
        logger.debug('after %s: %d nonterminals, %d rules', title, *_size(grammar))

    return grammar
