from .types import Atom, Symbol, String, Substitution, Table
from .forms import is_error, is_statement, make_statement, statement_elements
from .evaluator import eval_atom, lookup, universal_lookup

__all__ = [
    "Atom", "Symbol", "String", "Substitution", "Table",
    "is_error", "is_statement", "make_statement", "statement_elements",
    "eval_atom", "lookup", "universal_lookup",
]
