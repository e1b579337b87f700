from .runtime.types import Atom, Symbol, String, Substitution, Table
from .runtime.forms import is_statement, statement_elements, is_error, error_type, error_message

# ======================================
# Renderers
# ======================================

def render_canonical(atom: Atom) -> str:
    if isinstance(atom, Table):
        entries = ", ".join(f"{render_canonical(k)} = {render_canonical(v)}" for k, v in atom)
        return f"{{{entries}}}"
    return render_text(atom)

def render_pretty(atom: Atom) -> str:
    """Like ``render_canonical``, but statements print as ``(e0 e1 ...)``."""
    if isinstance(atom, Table):
        if is_statement(atom):
            return "(" + " ".join(render_pretty(e) for e in statement_elements(atom)) + ")"
        entries = ", ".join(f"{render_pretty(k)} = {render_pretty(v)}" for k, v in atom)
        return f"{{{entries}}}"
    return render_text(atom)

def render_text(atom: Atom) -> str:
    if isinstance(atom, Symbol): return atom.text
    if isinstance(atom, Substitution): return f"${atom.text}"
    if isinstance(atom, String): return f'"{atom.text}"'
    raise TypeError(f"Not a text atom: {atom!r}")

ERROR_LABELS = {"read-error": "Read error", "lookup-error": "Eval error"}

def describe_error(atom: Table) -> str:
    if not is_error(atom):
        raise TypeError(f"Not an error atom: {atom!r}")
    label = ERROR_LABELS.get(error_type(atom) or "", "Error")
    return f"{label}: {error_message(atom)}"
