from typing import Callable, Iterator, List, Optional, Set, Tuple
import re

# ======================================
# Token Definition
# ======================================

class Token:
    def __init__(self, s: str, pos: int = 0, raw: Optional[str] = None):
        self.s = s
        self.pos = pos
        self.raw = raw if raw is not None else s

    @property
    def lexeme(self) -> str:
        return self.s

    def __repr__(self):
        return f"{self.__class__.__name__}({self.s})"

    def __eq__(self, other):
        return isinstance(other, self.__class__) and self.s == other.s

class Ident(Token): pass
class Subst(Token): pass
class String(Token): pass
class Delim(Token): pass

class ReadFailure(Exception):
    """Malformed input. Raised inside the reader, turned into a read-error atom by ``read``."""

# ======================================
# Tokenizer Types and Constructors
# ======================================

# Tokenizer: (input_str, pos) -> Optional[(Token, next_pos)]
Tokenizer = Callable[[str, int], Optional[Tuple[Token, int]]]

def lex_regex_longest(pattern: str, converter: Callable[[str, int], Token]) -> Tokenizer:
    regex = re.compile(pattern, re.DOTALL)

    def tokenizer(input_str: str, pos: int) -> Optional[Tuple[Token, int]]:
        m = regex.match(input_str, pos)
        if m and m.end() > pos:
            return converter(m.group(0), pos), m.end()
        return None

    return tokenizer

def lex_delim(delimiters: Set[str]) -> Tokenizer:
    def tokenizer(input_str: str, pos: int) -> Optional[Tuple[Token, int]]:
        for d in delimiters:
            if input_str.startswith(d, pos):
                return Delim(d, pos), pos + len(d)
        return None
    return tokenizer

def unescape(body: str) -> str:
    return re.sub(r"\\(.)", r"\1", body, flags=re.DOTALL)

# ======================================
# Lexer Config
# ======================================

class LexerConfig:
    def __init__(self, symbol_punctuation: str, quotes: str, delimiters: Set[str]):
        self.symbol_punctuation = symbol_punctuation
        self.quotes = quotes
        self.delimiters = delimiters

    @property
    def symbol_char(self) -> str:
        return r"(?:[^\W]|[" + re.escape(self.symbol_punctuation) + r"])"

    @staticmethod
    def default() -> 'LexerConfig':
        return LexerConfig(
            symbol_punctuation="_!?+-*/%",
            quotes="\"'",
            delimiters={"{", "}", "=", ","},
        )

def build_tokenizers(config: LexerConfig) -> List[Tokenizer]:
    symbol_regex = config.symbol_char + "+"
    subst_regex = r"\$" + config.symbol_char + "*"
    string_regexes = [q + r"(?:[^" + q + r"\\]|\\.)*" + q for q in config.quotes]

    return [
        lex_regex_longest(symbol_regex, lambda s, pos: Ident(s, pos)),
        lex_regex_longest(subst_regex, lambda s, pos: Subst(s[1:], pos, s)),
        *[lex_regex_longest(r, lambda s, pos: String(unescape(s[1:-1]), pos, s)) for r in string_regexes],
        lex_delim(config.delimiters),
    ]

# ======================================
# Main Lexer
# ======================================

def lex(input_str: str, config: Optional[LexerConfig] = None) -> Iterator[Token]:
    """Lazily tokenize ``input_str``, skipping whitespace.

    Errors are raised when the offending position is reached, so a reader
    pulling tokens sees them in input order.
    """
    config = config or LexerConfig.default()
    tokenizers = build_tokenizers(config)
    pos = 0
    length = len(input_str)
    while pos < length:
        c = input_str[pos]
        if c.isspace():
            pos += 1
            continue
        for tokenizer in tokenizers:
            match = tokenizer(input_str, pos)
            if match is not None:
                tok, pos = match
                yield tok
                break
        else:
            if c in config.quotes:
                raise ReadFailure("EOF while reading a string")
            raise ReadFailure(f"Unexpected '{c}'")
