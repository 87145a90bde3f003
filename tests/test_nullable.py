from unittest import TestCase
from parameterized import parameterized

from cnfnorm import NonTerminal, Terminal, EPSILON, NameGenerator
from cnfnorm.nullable import find_nullable, expand_nullable, remove_null_productions

from grammar_util import (
    make_grammar, example_grammar, language, bodies,
    SAMPLE_GRAMMARS, sample_grammar,
)


A = NonTerminal('A')
B = NonTerminal('B')
b = Terminal('b')


class FindNullableTestCase(TestCase):
    def test_example(self):
        self.assertEqual(
            {n.name for n in find_nullable(example_grammar())},
            {'S', 'A', 'B', 'D'},
        )

    def test_terminal_blocks(self):
        grammar = make_grammar({'S': ['A a'], 'A': ['ε']})
        self.assertEqual(find_nullable(grammar), {A})

    def test_none(self):
        self.assertEqual(find_nullable(make_grammar({'S': ['a S', 'a']})), set())


class ExpandNullableTestCase(TestCase):
    def test_all_subsets(self):
        self.assertEqual(
            expand_nullable((b, B, A, B), {A, B}),
            {
                (b, B, A, B), (b, A, B), (b, B, B), (b, B, A),
                (b, B), (b, A), (b,),
            },
        )

    def test_only_nullable_gives_epsilon(self):
        self.assertEqual(expand_nullable((A, A), {A}), {(A, A), (A,), EPSILON})

    def test_nothing_nullable(self):
        self.assertEqual(expand_nullable((b, A), set()), {(b, A)})

    def test_size_doubles_per_nullable_symbol(self):
        body = tuple(NonTerminal(name) for name in 'VWXYZ')
        self.assertEqual(len(expand_nullable(body, set(body))), 2 ** 5)


class RemoveNullProductionsTestCase(TestCase):
    def test_non_nullable_start(self):
        grammar = remove_null_productions(make_grammar({
            'S': ['a A'],
            'A': ['b', 'ε'],
        }))
        self.assertEqual(bodies(grammar, 'S'), {'a A', 'a'})
        self.assertEqual(bodies(grammar, 'A'), {'b'})
        self.assertEqual(grammar.start, NonTerminal('S'))

    def test_unreferenced_nullable_start_keeps_epsilon(self):
        original = make_grammar({
            'S': ['A B'],
            'A': ['a', 'ε'],
            'B': ['b', 'ε'],
        })
        grammar = remove_null_productions(original)
        self.assertEqual(grammar.start, NonTerminal('S'))
        self.assertEqual(grammar.nonterminals, original.nonterminals)
        self.assertEqual(bodies(grammar, 'S'), {'A B', 'A', 'B', 'ε'})
        self.assertEqual(bodies(grammar, 'A'), {'a'})

    def test_referenced_nullable_start_gets_new_start(self):
        grammar = remove_null_productions(example_grammar())
        new_start = grammar.start
        self.assertEqual(new_start, NonTerminal('S0'))
        self.assertEqual(bodies(grammar, 'S0'), {'S', 'ε'})
        for lhs, body in grammar.rules():
            if lhs != new_start:
                self.assertNotEqual(body, EPSILON)
                self.assertNotIn(new_start, body)

    def test_new_start_name_is_fresh(self):
        grammar = make_grammar({'S': ['a S', 'ε'], 'S0': ['a']})
        result = remove_null_productions(grammar, NameGenerator())
        self.assertEqual(result.start, NonTerminal('S1'))

    def test_epsilon_only_nonterminal_disappears(self):
        grammar = remove_null_productions(make_grammar({
            'S': ['a E'],
            'E': ['ε'],
        }))
        self.assertEqual(bodies(grammar, 'S'), {'a E', 'a'})
        self.assertEqual(bodies(grammar, 'E'), set())
        self.assertIn(NonTerminal('E'), grammar.nonterminals)

    def test_input_untouched(self):
        original = example_grammar()
        remove_null_productions(original)
        self.assertEqual(original, example_grammar())

    @parameterized.expand(SAMPLE_GRAMMARS)
    def test_language_preserved(self, _name, rules):
        original = sample_grammar(rules)
        nullable = find_nullable(original)
        grammar = remove_null_productions(original)
        before = language(original)
        after = language(grammar)
        for nonterminal in original.nonterminals:
            expected = set(before[nonterminal])
            if nonterminal in nullable and nonterminal != grammar.start:
                expected.discard(())
            self.assertEqual(after[nonterminal], expected, nonterminal)
        self.assertEqual(after[grammar.start], before[original.start])
