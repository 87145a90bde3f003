import logging

import attr

from .grammar import without_empty
from .symbols import is_unit


logger = logging.getLogger(__name__)


def unit_closure(grammar):
    """Map every nonterminal A to the set of nonterminals reachable from A by unit productions only.

    Each closure contains A itself.
    """
    closures = {}
    for nonterminal in grammar.nonterminals:
        closure = {nonterminal}
        pending = [nonterminal]
        while pending:
            member = pending.pop()
            for body in grammar.productions_of(member):
                if is_unit(body) and body[0] not in closure:
                    closure.add(body[0])
                    pending.append(body[0])
        closures[nonterminal] = frozenset(closure)
    return closures


def remove_unit_productions(grammar):
    closures = unit_closure(grammar)

    productions = {}
    for nonterminal, closure in closures.items():
        productions[nonterminal] = {
            body
            for member in closure
            for body in grammar.productions_of(member)
            if not is_unit(body)
        }

    logger.debug(
        'unit closures: %s',
        '; '.join(
            '{} => {}'.format(n, ' '.join(sorted(m.name for m in c)))
            for n, c in sorted(closures.items(), key=lambda item: item[0].name)
            if len(c) > 1
        ),
    )
    return attr.evolve(grammar, productions=without_empty(productions))
