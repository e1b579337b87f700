from typing import Iterator, List, Optional

from ..lexing import Token, Ident, Subst, String, Delim, ReadFailure
from ..runtime.types import Atom, make_symbol, make_string, make_substitution, make_table
from ..runtime.forms import make_statement

# ======================================
# Recursive-descent Reader
# ======================================

ATOM_STARTS = (Ident, Subst, String)

class Reader:
    def __init__(self, tokens: Iterator[Token], debug: bool = False):
        self.tokens = tokens
        self.debug = debug
        self.buffer: List[Token] = []
        self.exhausted = False
        self.depth = 0

    def log(self, msg: str):
        if self.debug:
            print(f"[READ] {'  ' * self.depth}{msg}")

    # --- token stream ---

    def peek(self, offset: int = 0) -> Optional[Token]:
        while len(self.buffer) <= offset and not self.exhausted:
            tok = next(self.tokens, None)
            if tok is None: self.exhausted = True
            else: self.buffer.append(tok)
        return self.buffer[offset] if offset < len(self.buffer) else None

    def advance(self) -> Token:
        if self.peek() is None:
            raise ReadFailure("Unexpected end of input")
        return self.buffer.pop(0)

    def at_delim(self, d: str, offset: int = 0) -> bool:
        tok = self.peek(offset)
        return isinstance(tok, Delim) and tok.lexeme == d

    def starts_atom(self) -> bool:
        tok = self.peek()
        return isinstance(tok, ATOM_STARTS) or (isinstance(tok, Delim) and tok.lexeme == "{")

    # --- productions ---

    def run(self) -> Atom:
        result = self.read_statement()
        tok = self.peek()
        if tok is not None:
            raise ReadFailure(f"Unexpected '{tok.raw[0]}'")
        return result

    def read_atom(self) -> Atom:
        tok = self.peek()
        if tok is None:
            raise ReadFailure("Expected an atom")
        if isinstance(tok, Ident):
            self.advance()
            return make_symbol(tok.lexeme)
        if isinstance(tok, Subst):
            self.advance()
            if not tok.lexeme:
                raise ReadFailure("Expected a substitution name after '$'")
            return make_substitution(tok.lexeme)
        if isinstance(tok, String):
            self.advance()
            return make_string(tok.lexeme)
        if tok.lexeme == "{":
            return self.read_table()
        raise ReadFailure(f"Unexpected '{tok.lexeme}'")

    def starts_entry(self) -> bool:
        # `key =` where key is a single token; table keys need unbounded lookahead
        return isinstance(self.peek(), ATOM_STARTS) and self.at_delim("=", 1)

    def read_statement(self, in_table: bool = False) -> Atom:
        elements: List[Atom] = []
        while self.starts_atom():
            if in_table and elements and self.starts_entry():
                break
            elements.append(self.read_atom())
        if not elements:
            raise ReadFailure("Expected a statement")
        if len(elements) == 1:
            return elements[0]
        self.log(f"statement of {len(elements)} atoms")
        return make_statement(elements)

    def read_table(self) -> Atom:
        self.advance()  # {
        self.depth += 1
        pairs = []
        while True:
            if self.peek() is None:
                raise ReadFailure("EOF while reading a table")
            if self.at_delim("}"):
                self.advance()
                break
            key = self.read_atom()
            if self.at_delim("="):
                self.advance()
            if self.peek() is None:
                raise ReadFailure("EOF while reading a table")
            value = self.read_statement(in_table=True)
            self.log(f"entry {key!r}")
            pairs.append((key, value))
            if self.at_delim(","):
                self.advance()
        self.depth -= 1
        table = make_table(pairs)
        if len(table.substitution_keys()) > 1:
            raise ReadFailure("A table may contain at most one substitution key")
        return table
