from typing import Optional

from ..lexing import LexerConfig, ReadFailure, lex
from ..runtime.types import Atom
from ..runtime.forms import make_read_error
from .engine import Reader

DEBUG_READ = False

def read(text: str, config: Optional[LexerConfig] = None) -> Atom:
    """Parse one statement's worth of text.

    Returns the atom, or a read-error atom describing the first problem found.
    """
    reader = Reader(lex(text, config), debug=DEBUG_READ)
    try:
        return reader.run()
    except ReadFailure as e:
        reader.log(f"failed: {e}")
        return make_read_error(str(e))
    except RecursionError:
        return make_read_error("Input nested too deeply")
