from .runtime.types import (
    Atom, Symbol, String, Substitution, Table,
    make_symbol, make_string, make_substitution, make_table,
)
from .runtime.forms import is_error, is_statement, make_statement, statement_elements
from .runtime.evaluator import eval_atom
from .parser import read
from .printing import render_canonical, render_pretty
from .driver import reduce_to_fixed_point, InfiniteLoop

__all__ = [
    "Atom", "Symbol", "String", "Substitution", "Table",
    "make_symbol", "make_string", "make_substitution", "make_table",
    "is_error", "is_statement", "make_statement", "statement_elements",
    "eval_atom", "read",
    "render_canonical", "render_pretty",
    "reduce_to_fixed_point", "InfiniteLoop",
]
