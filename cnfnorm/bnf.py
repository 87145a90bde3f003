"""Reading grammars from text.

    S -> A | b A | a B;
    A -> B | A S | b B A B | b;
    B -> b | b S | a D | ε;

Names on a left side are nonterminals, any other bare name is a terminal.
Quoted names ("a") are always terminals. `ε` or `%empty` is the empty
production. Rules sharing a left side are merged. The first rule's left side
is the start symbol unless given explicitly.
"""
import parglare

from .grammar import Grammar
from .symbols import NonTerminal, Terminal
from .tools import timeit


bnf_grammar = r'''
rules: definition+;
definition: NAME ARROW alternatives SEMI;
alternatives: alternatives BAR body | body;
body: symbol+ | EPSILON;
symbol: NAME | LITERAL;

terminals
ARROW: "->";
BAR: "|";
SEMI: ";";
EPSILON: /ε|%empty/;
NAME: /[A-Za-z_][A-Za-z0-9_']*/;
LITERAL: /"[^"]+"/;
'''


def take_raw(i):
    def f(_, c):
        return c[i]
    return f


actions = {
    'rules': take_raw(0),
    'definition': lambda _, c: (c[0], c[2]),
    'alternatives': [
        lambda _, c: c[0] + [c[2]],
        lambda _, c: [c[0]],
    ],
    'body': [
        lambda _, c: tuple(c[0]),
        lambda _, c: (),
    ],
    'symbol': [
        lambda _, c: ('name', c[0]),
        lambda _, c: ('literal', c[0][1:-1]),
    ],
    'NAME': lambda _, value: value,
    'LITERAL': lambda _, value: value,
}


with timeit('making grammar parser'):
    parser = parglare.Parser(
        parglare.Grammar.from_string(bnf_grammar),
        actions=actions,
    )


class SyntaxError(Exception):
    pass


def to_grammar(definitions, start=None):
    """Make a Grammar from (lhs name, [raw bodies]) pairs as produced by the parser."""
    nonterminal_names = [name for name, _ in definitions]
    nonterminals = {name: NonTerminal(name) for name in nonterminal_names}
    terminals = {}

    def resolve(kind, name):
        if kind == 'name' and name in nonterminals:
            return nonterminals[name]
        return terminals.setdefault(name, Terminal(name))

    productions = {}
    for name, bodies in definitions:
        resolved = productions.setdefault(nonterminals[name], set())
        for body in bodies:
            resolved.add(tuple(resolve(kind, n) for kind, n in body))

    if start is None:
        start = nonterminal_names[0]
    return Grammar(
        nonterminals=nonterminals.values(),
        terminals=terminals.values(),
        productions=productions,
        start=NonTerminal(start),
    )


def loads(string, start=None):
    try:
        definitions = parser.parse(string)
    except parglare.exceptions.SyntaxError as e:
        raise SyntaxError(e)
    return to_grammar(definitions, start)


def load(filename, start=None):
    with open(filename, 'rt', encoding='utf8') as f:
        return loads(f.read(), start)
