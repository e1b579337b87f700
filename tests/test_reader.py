import pytest

from reduct import read, render_canonical, is_statement, statement_elements, is_error
from reduct.runtime.types import Symbol, String, Substitution, Table, make_table
from reduct.runtime.forms import error_type, error_message
from reduct.parser import Reader
from reduct.lexing import ReadFailure


def read_error(text: str) -> str:
    result = read(text)
    assert is_error(result), f"expected a read error for {text!r}, got {result!r}"
    assert error_type(result) == "read-error"
    return error_message(result)


def test_single_symbol_is_not_wrapped():
    assert read("x") == Symbol("x")
    assert read("  x  ") == Symbol("x")


def test_two_atoms_make_a_statement():
    stmt = read("x y")
    assert is_statement(stmt)
    assert statement_elements(stmt) == [Symbol("x"), Symbol("y")]


def test_statement_keeps_read_order():
    stmt = read("c b a {} 'q'")
    assert statement_elements(stmt) == [Symbol("c"), Symbol("b"), Symbol("a"), make_table(), String("q")]


def test_literals_round_trip():
    for text in ["foo", "bar-baz", "x1", '"hello"', '"two words"']:
        assert render_canonical(read(text)) == text


def test_single_quotes_read_as_strings():
    assert read("'hi'") == String("hi")


def test_substitution():
    assert read("$x") == Substitution("x")


def test_last_key_wins():
    t = read("{a = 1, a = 2}")
    assert len(t) == 1
    assert t.get(Symbol("a")) == Symbol("2")


def test_table_punctuation_is_optional():
    expected = make_table({Symbol("a"): Symbol("1")})
    assert read("{a = 1}") == expected
    assert read("{a = 1,}") == expected
    assert read("{a 1}") == expected
    assert read("{ a=1 , }") == expected
    assert read("{}") == make_table()


def test_table_values_are_statements():
    t = read("{a = b c, d = e}")
    assert statement_elements(t.get(Symbol("a"))) == [Symbol("b"), Symbol("c")]
    assert t.get(Symbol("d")) == Symbol("e")


def test_table_keys_may_be_any_atom():
    t = read("{'s' = 1, {k = v} = 2, $x = 3}")
    assert t.get(String("s")) == Symbol("1")
    assert t.get(make_table({Symbol("k"): Symbol("v")})) == Symbol("2")
    assert t.pattern() == (Substitution("x"), Symbol("3"))


def test_nested_tables():
    t = read("{outer = {inner = value}}")
    assert isinstance(t.get(Symbol("outer")), Table)
    assert t.get(Symbol("outer")).get(Symbol("inner")) == Symbol("value")


def test_handwritten_statement_equals_read_statement():
    assert read("{__type = statement, 0 = a, 1 = b}") == read("a b")


def test_same_substitution_twice_is_one_key():
    t = read("{$x = 1, $x = 2}")
    assert t.pattern() == (Substitution("x"), Symbol("2"))


def test_unterminated_table():
    assert read_error("{a = 1") == "EOF while reading a table"
    assert read_error("{a =") == "EOF while reading a table"
    assert read_error("{") == "EOF while reading a table"


def test_unterminated_string():
    assert read_error('"abc') == "EOF while reading a string"
    assert read_error("{a = 'abc}") == "EOF while reading a string"


def test_empty_input():
    assert read_error("") == "Expected a statement"
    assert read_error("   ") == "Expected a statement"


def test_trailing_input():
    assert read_error("a }") == "Unexpected '}'"
    assert read_error("a = b") == "Unexpected '='"


def test_unknown_character():
    assert read_error("a ^ b") == "Unexpected '^'"
    assert read_error("{a = #}") == "Unexpected '#'"


def test_bad_key():
    assert read_error("{= a}") == "Unexpected '='"


def test_two_substitution_keys():
    assert read_error("{$x = 1, $y = 2}") == "A table may contain at most one substitution key"


def test_nested_error_aborts_whole_read():
    assert read_error("{a = {b = }}") == "Expected a statement"
    assert read_error("x {a = {$p = 1, $q = 2}} y") == "A table may contain at most one substitution key"


def test_bare_dollar():
    assert read_error("$") == "Expected a substitution name after '$'"


@pytest.mark.parametrize("text", ["{a = 1", "a ^", '"x'])
def test_read_errors_are_values(text):
    # No exception crosses the reader boundary.
    assert isinstance(read(text), Table)


def test_too_deep_input_is_a_read_error():
    text = "{a = " * 5000 + "b" + "}" * 5000
    assert read_error(text) == "Input nested too deeply"


def test_comma_between_entries_is_optional():
    assert read("{a = 1 b = 2}") == read("{a = 1, b = 2}")
    assert read("{a = x y b = 2}") == read("{a = x y, b = 2}")
    assert read("{a = 1 'k' = 2 $x = $x}") == read("{a = 1, 'k' = 2, $x = $x}")


def test_value_statement_still_greedy_without_next_key():
    t = read("{a = x y z}")
    assert statement_elements(t.get(Symbol("a"))) == [Symbol("x"), Symbol("y"), Symbol("z")]


def test_advance_past_end_is_a_read_failure():
    reader = Reader(iter([]))
    with pytest.raises(ReadFailure, match="Unexpected end of input"):
        reader.advance()
