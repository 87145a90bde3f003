from typing import Any
import attr
from pyrsistent import pmap, pset, PMap, PSet

from .symbols import (
    NonTerminal, Terminal, Symbol,
    symbol_sort_key, production_sort_key, format_production,
)


class ConstructionError(Exception):
    """A grammar candidate violates one of the referential integrity rules."""

    def __init__(self, message, symbol=None, rule=None):
        super().__init__(message)
        self.symbol = symbol
        self.rule = rule


class InvalidStartSymbol(ConstructionError):
    pass


class UndefinedNonTerminalKey(ConstructionError):
    pass


class UndefinedSymbol(ConstructionError):
    pass


class OverlappingSymbol(ConstructionError):
    pass


def _freeze_symbols(symbols):
    return pset(symbols)


def _freeze_productions(productions):
    if isinstance(productions, PMap):
        items = productions.items()
    else:
        items = dict(productions).items()
    return pmap({
        lhs: pset(tuple(body) for body in bodies)
        for lhs, bodies in items
    })


def _format_rule(lhs, body):
    return '{} -> {}'.format(lhs, format_production(body))


@attr.s(frozen=True, auto_attribs=True)
class Grammar:
    """Immutable context-free grammar.

    Every instance satisfies:
     * start is one of nonterminals
     * every key of productions is one of nonterminals
     * every symbol of every production body is a known terminal or nonterminal
     * no name is used both as a terminal and as a nonterminal
    """
    nonterminals: PSet
    nonterminals = attr.ib(converter=_freeze_symbols)
    terminals: PSet
    terminals = attr.ib(converter=_freeze_symbols)
    productions: PMap
    productions = attr.ib(converter=_freeze_productions)
    start: NonTerminal

    def __attrs_post_init__(self):
        self._check_types()

        if self.start not in self.nonterminals:
            raise InvalidStartSymbol(
                'start symbol {} is not a nonterminal of the grammar'.format(self.start),
                symbol=self.start,
            )

        terminal_names = {t.name for t in self.terminals}
        for nonterminal in self.nonterminals:
            if nonterminal.name in terminal_names:
                raise OverlappingSymbol(
                    'name {} is used both as a terminal and as a nonterminal'.format(nonterminal.name),
                    symbol=nonterminal,
                )

        for lhs, bodies in self.productions.items():
            if lhs not in self.nonterminals:
                raise UndefinedNonTerminalKey(
                    'production rules are given for undefined nonterminal {}'.format(lhs),
                    symbol=lhs,
                )
            for body in bodies:
                for symbol in body:
                    if symbol not in self.nonterminals and symbol not in self.terminals:
                        raise UndefinedSymbol(
                            'undefined symbol {} in rule {}'.format(symbol, _format_rule(lhs, body)),
                            symbol=symbol,
                            rule=(lhs, body),
                        )

    def _check_types(self):
        if not isinstance(self.start, NonTerminal):
            raise TypeError('start symbol must be a nonterminal, got {!r}'.format(self.start))
        for n in self.nonterminals:
            if not isinstance(n, NonTerminal):
                raise TypeError('nonterminal set contains {!r}'.format(n))
        for t in self.terminals:
            if not isinstance(t, Terminal):
                raise TypeError('terminal set contains {!r}'.format(t))
        for lhs, bodies in self.productions.items():
            if not isinstance(lhs, NonTerminal):
                raise TypeError('left side must be a nonterminal, got {!r}'.format(lhs))
            for body in bodies:
                for symbol in body:
                    if not isinstance(symbol, Symbol):
                        raise TypeError('right side must be a sequence of symbols, got {!r}'.format(body))

    def productions_of(self, nonterminal):
        return self.productions.get(nonterminal, pset())

    def rules(self):
        """All (lhs, body) pairs in a stable order, start symbol first."""
        return [
            (lhs, body)
            for lhs in self.sorted_nonterminals()
            for body in sorted(self.productions_of(lhs), key=production_sort_key)
        ]

    def sorted_nonterminals(self):
        rest = sorted((n for n in self.nonterminals if n != self.start), key=symbol_sort_key)
        return [self.start] + rest

    def sorted_terminals(self):
        return sorted(self.terminals, key=symbol_sort_key)

    def symbol_names(self):
        return {s.name for s in self.nonterminals} | {s.name for s in self.terminals}

    def pretty_string(self):
        lines = [
            'Start Symbol: {}'.format(self.start),
            'Non-terminals: {{{}}}'.format(', '.join(map(str, self.sorted_nonterminals()))),
            'Terminals: {{{}}}'.format(', '.join(map(str, self.sorted_terminals()))),
            'Production Rules:',
        ]
        for lhs in self.sorted_nonterminals():
            bodies = sorted(self.productions_of(lhs), key=production_sort_key)
            if bodies:
                lines.append('{} -> {}'.format(
                    lhs,
                    ' | '.join(map(format_production, bodies)),
                ))
        return '\n'.join(lines)

    def __str__(self):
        return self.pretty_string()

    def as_dict(self) -> Any:
        return {
            'start': self.start.name,
            'nonterminals': [n.name for n in self.sorted_nonterminals()],
            'terminals': [t.name for t in self.sorted_terminals()],
            'productions': {
                lhs.name: [
                    [s.name for s in body]
                    for body in sorted(self.productions_of(lhs), key=production_sort_key)
                ]
                for lhs in self.sorted_nonterminals()
                if self.productions_of(lhs)
            },
        }


def without_empty(productions):
    return {lhs: bodies for lhs, bodies in productions.items() if bodies}
