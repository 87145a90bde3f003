from itertools import product
import logging

import attr

from .grammar import without_empty
from .naming import reserved_for
from .symbols import EPSILON, is_epsilon


logger = logging.getLogger(__name__)


def find_nullable(grammar):
    """Nonterminals that can derive the empty string."""
    nullable = {
        lhs
        for lhs, bodies in grammar.productions.items()
        if any(is_epsilon(body) for body in bodies)
    }

    changed = True
    while changed:
        changed = False
        for lhs, bodies in grammar.productions.items():
            if lhs in nullable:
                continue
            for body in bodies:
                if all(symbol in nullable for symbol in body):
                    nullable.add(lhs)
                    changed = True
                    break

    return frozenset(nullable)


def expand_nullable(body, nullable):
    """Every subsequence of body made by dropping any subset of its nullable symbols.

    The result may contain EPSILON, when every symbol of body is nullable.
    Its size is up to 2**k for k nullable symbols in body.
    """
    choices = [
        ((symbol,), ()) if symbol in nullable else ((symbol,),)
        for symbol in body
    ]
    return {
        sum(picked, ())
        for picked in product(*choices)
    }


def remove_null_productions(grammar, names=None):
    """Equivalent grammar where only the start symbol may derive ε directly.

    If the start symbol is nullable and also occurs inside some production
    body, a fresh start symbol `S0 -> S | ε` is introduced, so that ε stays
    in the language without reappearing inside other nonterminals.
    """
    nullable = find_nullable(grammar)

    productions = {}
    for lhs, bodies in grammar.productions.items():
        new_bodies = set()
        for body in bodies:
            if is_epsilon(body):
                continue
            new_bodies.update(expand_nullable(body, nullable))
        new_bodies.discard(EPSILON)
        productions[lhs] = new_bodies
    productions = without_empty(productions)

    nonterminals = set(grammar.nonterminals)
    start = grammar.start
    if start in nullable:
        start_is_referenced = any(
            start in body
            for bodies in productions.values()
            for body in bodies
        )
        if start_is_referenced:
            start = reserved_for(grammar, names).start()
            nonterminals.add(start)
            productions[start] = {(grammar.start,), EPSILON}
            logger.debug('start symbol %s is nullable, introduced %s', grammar.start, start)
        else:
            productions.setdefault(start, set()).add(EPSILON)

    logger.debug('nullable nonterminals: %s', ', '.join(sorted(n.name for n in nullable)))
    return attr.evolve(
        grammar,
        nonterminals=nonterminals,
        productions=productions,
        start=start,
    )
