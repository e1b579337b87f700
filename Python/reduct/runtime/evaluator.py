from .types import Atom, Substitution, Table
from .forms import (
    is_error, is_statement, make_lookup_error, make_statement, position_key, statement_elements,
)
from ..printing import render_pretty as show

DEBUG_EVAL = False

def log(msg: str):
    if DEBUG_EVAL:
        print(f"[EVAL] {msg}")

# ======================================
# Lookup
# ======================================

def lookup(m: Atom, k: Atom) -> Atom:
    if not isinstance(m, Table):
        return make_lookup_error(f"Cannot look up '{show(k)}' in non-table '{show(m)}'", m, k)
    value = m.get(k)
    if value is None:
        return make_lookup_error(f"Key '{show(k)}' not found", m, k)
    return value

def substitute(atom: Atom, wildcard: Substitution, k: Atom, m: Table) -> Atom:
    """Replace ``atom`` by ``k`` if it is the wildcard. Does not descend into tables."""
    if isinstance(atom, Substitution):
        if atom == wildcard: return k
        return make_lookup_error(
            f"Mismatch between substitution key and expression: '{show(atom)}' is not '{show(wildcard)}'", m, k)
    return atom

def universal_lookup(m: Table, k: Atom, failure: Atom) -> Atom:
    pattern = m.pattern()
    if pattern is None:
        return failure
    wildcard, template = pattern
    log(f"universal lookup of {show(k)} via {show(wildcard)}")
    if not is_statement(template):
        return substitute(template, wildcard, k, m)  # type: ignore[arg-type]
    elements = []
    for e in statement_elements(template):  # type: ignore[arg-type]
        s = substitute(e, wildcard, k, m)
        if is_error(s): return s
        elements.append(s)
    return make_statement(elements)

# ======================================
# Reduction step
# ======================================

def eval_atom(atom: Atom) -> Atom:
    """One reduction step.

    Non-statements are self-evaluating. For a statement ``(m k r2 r3 ...)``
    the result is the lookup of ``k`` in ``m`` when there are exactly two
    elements, otherwise the statement ``(result r2 r3 ...)``.
    """
    if not is_statement(atom):
        return atom
    elements = statement_elements(atom)  # type: ignore[arg-type]
    log(f"step: {show(atom)}")
    if not elements:
        return make_lookup_error("Cannot evaluate an empty statement", atom, position_key(0))
    if len(elements) == 1:
        return eval_atom(elements[0])

    m = eval_atom(elements[0])
    if is_error(m): return m
    k = eval_atom(elements[1])
    if is_error(k): return k

    result = lookup(m, k)
    if is_error(result) and isinstance(m, Table):
        result = universal_lookup(m, k, result)

    if is_error(result) or len(elements) == 2:
        log(f"  -> {show(result)}")
        return result
    return make_statement([result] + elements[2:])
