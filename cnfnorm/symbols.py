from typing import Tuple
import attr


EPSILON_DISPLAY = 'ε'


@attr.s(frozen=True, auto_attribs=True)
class Symbol:
    name: str

    @property
    def is_terminal(self):
        raise NotImplementedError('{}.is_terminal is not implemented'.format(self.__class__))

    def __str__(self):
        return self.name


@attr.s(frozen=True, auto_attribs=True, repr=False)
class Terminal(Symbol):
    is_terminal = True

    def __repr__(self):
        return 'Terminal({!r})'.format(self.name)


@attr.s(frozen=True, auto_attribs=True, repr=False)
class NonTerminal(Symbol):
    is_terminal = False

    def __repr__(self):
        return 'NonTerminal({!r})'.format(self.name)


Production = Tuple[Symbol, ...]

# the empty production
EPSILON: Production = ()


def is_epsilon(production):
    return len(production) == 0


def is_unit(production):
    """A -> B where B is a single nonterminal"""
    return len(production) == 1 and isinstance(production[0], NonTerminal)


def symbol_sort_key(symbol):
    return (symbol.is_terminal, symbol.name)


def production_sort_key(production):
    return (len(production), [symbol_sort_key(s) for s in production])


def format_production(production):
    if is_epsilon(production):
        return EPSILON_DISPLAY
    return ' '.join(map(str, production))
