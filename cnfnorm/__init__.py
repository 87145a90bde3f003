from .symbols import Terminal, NonTerminal, EPSILON
from .grammar import (
    Grammar, ConstructionError,
    InvalidStartSymbol, UndefinedNonTerminalKey, UndefinedSymbol, OverlappingSymbol,
)
from .naming import NameGenerator
from .nullable import find_nullable, remove_null_productions
from .unit import unit_closure, remove_unit_productions
from .useless import (
    find_productive, remove_non_productive_symbols,
    find_accessible, remove_inaccessible_symbols,
)
from .binarize import (
    isolate_terminals, reduce_lengths, to_chomsky_normal_form,
    is_chomsky_normal_form, cnf_violations,
)
from .pipeline import normalize
