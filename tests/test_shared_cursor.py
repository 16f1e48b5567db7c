import hypothesis.strategies as st
import pytest
from hypothesis import given

from _lexrule.cursor import SourceCursor
from _lexrule.engine import Emitted, Exhausted, Failed, LexerEngine, Skipped
from _lexrule.errors import ActionError, UnmatchedInputError
from _lexrule.lexer import Lexer
from _lexrule.rules import EOF, WHITESPACE, WILDCARD, skip

from .generators.token_sources import ascii_token_sources

string_body = Lexer(
    [
        (r"\\n", lambda _: "\n"),
        (r'\\"', lambda _: '"'),
        ('"', lambda _: None),
        (WILDCARD, str),
    ]
)


def string_literal(text, cursor, loc):
    chars = []
    for char, _ in string_body(cursor):
        if char is None:
            return ("STRING", "".join(chars))
        chars.append(char)
    raise ValueError(f"Unterminated string starting at {loc}")


host = Lexer(
    [
        (WHITESPACE, skip),
        ('"', string_literal),
        ("[a-z]+", lambda text: ("NAME", text)),
        (EOF, lambda _: ("EOF",)),
    ]
)


def test_sub_lexer_consumes_string():
    tokens = host.tokenize('say "hi \\"you\\"" ok')
    assert [token for token, _ in tokens] == [
        ("NAME", "say"),
        ("STRING", 'hi "you"'),
        ("NAME", "ok"),
        ("EOF",),
    ]
    ok_loc = tokens[2][1]
    assert ok_loc.start == (1, 18)
    assert ok_loc.byte_range == (17, 19)


def test_sub_lexer_over_lines():
    tokens = host.tokenize('"a\nb" c')
    assert tokens[0][0] == ("STRING", "a\nb")
    assert tokens[1][1].start == (2, 4)


def test_host_location_covers_opening_quote_only():
    tokens = host.tokenize('"ab"')
    assert tokens[0][1].byte_range == (0, 1)


def test_unterminated_string():
    with pytest.raises(ActionError) as excinfo:
        host.tokenize('"abc')
    assert isinstance(excinfo.value.original, ValueError)


def test_nested_comments():
    def comment(text, cursor):
        depth = 1
        body = Lexer([("/\\*", lambda _: 1), ("\\*/", lambda _: -1), (WILDCARD, skip)])
        for change, _ in body(cursor):
            depth += change
            if depth == 0:
                return skip(text)
        raise ValueError("Unterminated comment")

    lex = Lexer([("/\\*", comment), (WHITESPACE, skip), ("[a-z]+", str)])
    assert lex("a /* b /* c */ d */ e").token_list() == ["a", "e"]


def test_sub_lexer_failure_is_action_error():
    digits = Lexer([("[0-9]", int)])

    def number_list(text, cursor):
        return list(digits(cursor).tokens())

    lex = Lexer([("#", number_list)])
    with pytest.raises(ActionError) as excinfo:
        lex.tokenize("#12x")
    assert isinstance(excinfo.value.original, UnmatchedInputError)
    assert excinfo.value.original.character == "x"


letters = LexerEngine([(WHITESPACE, skip), ("[a-z]+", str)])
digits = LexerEngine([(WHITESPACE, skip), ("[0-9]+", int)])


@given(ascii_token_sources, st.lists(st.booleans(), min_size=1, max_size=60))
def test_interleaved_engines_never_overlap(text, choices):
    cursor = SourceCursor(text)
    last_end = 0
    for use_letters in choices:
        before = cursor.byte_index
        outcome = (letters if use_letters else digits).step(cursor)
        assert cursor.byte_index >= before
        if isinstance(outcome, (Emitted, Skipped)):
            assert outcome.loc.start_byte >= last_end
            last_end = outcome.loc.end_byte
        elif isinstance(outcome, Failed):
            assert cursor.byte_index == before
        else:
            assert isinstance(outcome, Exhausted)
            break


def test_engines_take_turns():
    cursor = SourceCursor("ab12cd")
    assert letters.step(cursor).token == "ab"
    assert isinstance(letters.step(cursor), Failed)
    assert digits.step(cursor).token == 12
    assert letters.step(cursor).token == "cd"
    assert digits.step(cursor) == Exhausted()
    assert letters.step(cursor) == Exhausted()
