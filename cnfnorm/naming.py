from .symbols import NonTerminal


class NameGenerator:
    """Fresh nonterminal names for one normalization run.

    Names are `prefix + counter`. Every name of a reserved grammar and every
    name handed out before is skipped, so generated names never collide
    within the run.
    """

    def __init__(self, proxy_prefix='X', auxiliary_prefix='Y', start_prefix='S'):
        self.proxy_prefix = proxy_prefix
        self.auxiliary_prefix = auxiliary_prefix
        self.start_prefix = start_prefix
        self.taken = set()
        self.counters = {}  # prefix -> next number to try

    def reserve(self, grammar):
        self.taken.update(grammar.symbol_names())
        return self

    def fresh(self, prefix):
        count = self.counters.get(prefix, 0)
        name = '{}{}'.format(prefix, count)
        while name in self.taken:
            count += 1
            name = '{}{}'.format(prefix, count)
        self.counters[prefix] = count + 1
        self.taken.add(name)
        return NonTerminal(name)

    def proxy(self):
        return self.fresh(self.proxy_prefix)

    def auxiliary(self):
        return self.fresh(self.auxiliary_prefix)

    def start(self):
        return self.fresh(self.start_prefix)


def reserved_for(grammar, names=None):
    if names is None:
        names = NameGenerator()
    return names.reserve(grammar)
