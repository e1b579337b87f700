from dataclasses import dataclass
from typing import Iterable, List, Optional

from .types import Atom, Symbol, String, Table, collect_pairs, make_table

# ======================================
# Conventional keys
# ======================================

TYPE_KEY = Symbol("__type")
ERROR_TYPE_KEY = Symbol("__error-type")
MESSAGE_KEY = Symbol("message")
MAP_KEY = Symbol("map")
KEY_KEY = Symbol("key")

STATEMENT = Symbol("statement")
ERROR = Symbol("error")
READ_ERROR = Symbol("read-error")
LOOKUP_ERROR = Symbol("lookup-error")

def position_key(index: int) -> Symbol:
    return Symbol(str(index))

# ======================================
# Statements
# ======================================

def make_statement(elements: Iterable[Atom]) -> Table:
    pairs = [(position_key(i), e) for i, e in enumerate(elements)]
    pairs.append((TYPE_KEY, STATEMENT))
    return make_table(pairs)

def is_statement(atom: Atom) -> bool:
    return isinstance(atom, Table) and atom.get(TYPE_KEY) == STATEMENT

def statement_elements(atom: Table) -> List[Atom]:
    """Positional elements 0..n-1; counting stops at the first missing index."""
    elements = []
    while True:
        e = atom.get(position_key(len(elements)))
        if e is None: return elements
        elements.append(e)

# ======================================
# Errors
# ======================================

@dataclass(frozen=True, eq=False, repr=False)
class ErrorTable(Table):
    """Error produced by the reader or evaluator.

    Compares and hashes like any table with the same pairs; only the class
    marks it as a propagated failure rather than user data.
    """

def make_error(error_type: Symbol, message: str, map: Optional[Atom] = None, key: Optional[Atom] = None) -> ErrorTable:
    pairs = [(TYPE_KEY, ERROR), (ERROR_TYPE_KEY, error_type), (MESSAGE_KEY, String(message))]
    if map is not None: pairs.append((MAP_KEY, map))
    if key is not None: pairs.append((KEY_KEY, key))
    return ErrorTable(collect_pairs(pairs))

def make_read_error(message: str) -> ErrorTable:
    return make_error(READ_ERROR, message)

def make_lookup_error(message: str, map: Atom, key: Atom) -> ErrorTable:
    return make_error(LOOKUP_ERROR, message, map, key)

def is_error(atom: Atom) -> bool:
    return isinstance(atom, ErrorTable)

def error_type(atom: Table) -> Optional[str]:
    t = atom.get(ERROR_TYPE_KEY)
    return t.text if isinstance(t, Symbol) else None

def error_message(atom: Table) -> str:
    m = atom.get(MESSAGE_KEY)
    return m.text if isinstance(m, String) else ""
