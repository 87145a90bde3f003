import logging
from collections import deque

import attr

from .naming import reserved_for
from .symbols import NonTerminal, Terminal, is_epsilon, symbol_sort_key


logger = logging.getLogger(__name__)


def isolate_terminals(grammar, names=None):
    """Replace terminals inside productions of length >= 2 by proxy nonterminals.

    Every such terminal t gets exactly one proxy P with the single production
    P -> t. Productions consisting of a lone terminal stay as they are.
    """
    names = reserved_for(grammar, names)

    mixed = {
        symbol
        for bodies in grammar.productions.values()
        for body in bodies
        if len(body) >= 2
        for symbol in body
        if isinstance(symbol, Terminal)
    }
    proxies = {}
    for terminal in sorted(mixed, key=symbol_sort_key):
        proxies[terminal] = names.proxy()
        logger.debug('proxy %s -> %s', proxies[terminal], terminal)

    def rewrite(body):
        if len(body) < 2:
            return body
        return tuple(proxies.get(symbol, symbol) for symbol in body)

    productions = {
        lhs: {rewrite(body) for body in bodies}
        for lhs, bodies in grammar.productions.items()
    }
    for terminal, proxy in proxies.items():
        productions[proxy] = {(terminal,)}

    return attr.evolve(
        grammar,
        nonterminals=set(grammar.nonterminals) | set(proxies.values()),
        productions=productions,
    )


def reduce_lengths(grammar, names=None):
    """Split every production A -> B1 B2 ... Bn with n > 2 into A -> B1 Y, Y -> B2 ... Bn.

    Auxiliary nonterminals are shared: a remainder B2 ... Bn seen twice (for
    any left side) maps to the same Y.
    """
    names = reserved_for(grammar, names)

    tails = {}  # remainder -> auxiliary nonterminal
    productions = {}
    pending = deque(grammar.rules())
    while pending:
        lhs, body = pending.popleft()
        if len(body) <= 2:
            productions.setdefault(lhs, set()).add(body)
            continue
        head, rest = body[0], body[1:]
        if rest not in tails:
            tails[rest] = names.auxiliary()
            pending.append((tails[rest], rest))
        productions.setdefault(lhs, set()).add((head, tails[rest]))

    if tails:
        logger.debug('introduced %d auxiliary nonterminals', len(tails))
    return attr.evolve(
        grammar,
        nonterminals=set(grammar.nonterminals) | set(tails.values()),
        productions=productions,
    )


def to_chomsky_normal_form(grammar, names=None):
    names = reserved_for(grammar, names)
    return reduce_lengths(isolate_terminals(grammar, names), names)


def cnf_violations(grammar):
    """Rules that break the Chomsky normal form shape.

    Allowed are `A -> B C`, `A -> t`, and `S -> ε` for the start symbol S,
    provided S never occurs on a right side.
    """
    start_on_right = any(grammar.start in body for _, body in grammar.rules())

    def allowed(lhs, body):
        if is_epsilon(body):
            return lhs == grammar.start and not start_on_right
        if len(body) == 1:
            return isinstance(body[0], Terminal)
        if len(body) == 2:
            return all(isinstance(symbol, NonTerminal) for symbol in body)
        return False

    return [
        (lhs, body)
        for lhs, body in grammar.rules()
        if not allowed(lhs, body)
    ]


def is_chomsky_normal_form(grammar):
    return not cnf_violations(grammar)
