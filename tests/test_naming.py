from unittest import TestCase

from cnfnorm import NameGenerator, NonTerminal

from grammar_util import make_grammar


class NameGeneratorTestCase(TestCase):
    def test_counts_per_prefix(self):
        names = NameGenerator()
        self.assertEqual(
            [names.proxy(), names.proxy(), names.auxiliary(), names.start()],
            [NonTerminal('X0'), NonTerminal('X1'), NonTerminal('Y0'), NonTerminal('S0')],
        )

    def test_reserved_names_skipped(self):
        names = NameGenerator().reserve(make_grammar({'S': ['X0 Y1'], 'X0': ['X1']}))
        self.assertEqual(names.proxy(), NonTerminal('X2'))
        self.assertEqual(names.auxiliary(), NonTerminal('Y0'))
        self.assertEqual(names.auxiliary(), NonTerminal('Y2'))

    def test_generators_are_independent(self):
        first = NameGenerator()
        second = NameGenerator()
        first.proxy()
        self.assertEqual(second.proxy(), NonTerminal('X0'))
