"""Removal of symbols that can't take part in any derivation of a terminal
string from the start symbol.

Two independent passes:
 * non-productive nonterminals derive no terminal string at all,
 * inaccessible symbols never occur in a sentential form derived from the
   start symbol.

Running the productive pass first and the accessible pass second leaves only
useful symbols. The other order may leave some behind.
"""
import logging

import attr

from .grammar import without_empty
from .symbols import NonTerminal, Terminal


logger = logging.getLogger(__name__)


def find_productive(grammar):
    productive = set()

    def is_productive(symbol):
        return isinstance(symbol, Terminal) or symbol in productive

    changed = True
    while changed:
        changed = False
        for lhs, bodies in grammar.productions.items():
            if lhs in productive:
                continue
            if any(all(map(is_productive, body)) for body in bodies):
                productive.add(lhs)
                changed = True

    return frozenset(productive)


def remove_non_productive_symbols(grammar):
    """Keep productive nonterminals only, and only productions made of productive symbols.

    The start symbol is always kept (possibly without productions), so an
    empty language still has a valid grammar.
    """
    productive = find_productive(grammar)

    def all_productive(body):
        return all(
            isinstance(symbol, Terminal) or symbol in productive
            for symbol in body
        )

    productions = {
        lhs: {body for body in bodies if all_productive(body)}
        for lhs, bodies in grammar.productions.items()
        if lhs in productive
    }

    removed = set(grammar.nonterminals) - productive - {grammar.start}
    if removed:
        logger.debug('non-productive nonterminals: %s', ', '.join(sorted(n.name for n in removed)))
    return attr.evolve(
        grammar,
        nonterminals=productive | {grammar.start},
        productions=without_empty(productions),
    )


def find_accessible(grammar):
    """All symbols (terminals and nonterminals) reachable from the start symbol."""
    accessible = {grammar.start}
    pending = [grammar.start]
    while pending:
        nonterminal = pending.pop()
        for body in grammar.productions_of(nonterminal):
            for symbol in body:
                if symbol in accessible:
                    continue
                accessible.add(symbol)
                if isinstance(symbol, NonTerminal):
                    pending.append(symbol)
    return frozenset(accessible)


def remove_inaccessible_symbols(grammar):
    accessible = find_accessible(grammar)

    productions = {
        lhs: {
            body
            for body in bodies
            if all(symbol in accessible for symbol in body)
        }
        for lhs, bodies in grammar.productions.items()
        if lhs in accessible
    }

    removed = (set(grammar.nonterminals) | set(grammar.terminals)) - accessible
    if removed:
        logger.debug('inaccessible symbols: %s', ', '.join(sorted(s.name for s in removed)))
    return attr.evolve(
        grammar,
        nonterminals=[n for n in grammar.nonterminals if n in accessible],
        terminals=[t for t in grammar.terminals if t in accessible],
        productions=without_empty(productions),
    )
