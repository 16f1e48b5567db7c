import lexrule.version
from _lexrule.cursor import SourceCursor
from _lexrule.engine import Emitted, Exhausted, Failed, LexerEngine, Skipped
from _lexrule.errors import (
    ActionError,
    EmptyMatchWarning,
    LexError,
    RuleDefinitionError,
    UnmatchedInputError,
)
from _lexrule.lexer import Lexer
from _lexrule.location import SrcLoc
from _lexrule.rules import EOF, SKIP, WHITESPACE, WILDCARD, Rule, RuleTable, skip
from _lexrule.stream import TokenStream

__version__ = lexrule.version.version

__all__ = [
    "ActionError",
    "EOF",
    "Emitted",
    "EmptyMatchWarning",
    "Exhausted",
    "Failed",
    "LexError",
    "Lexer",
    "LexerEngine",
    "Rule",
    "RuleDefinitionError",
    "RuleTable",
    "SKIP",
    "Skipped",
    "SourceCursor",
    "SrcLoc",
    "TokenStream",
    "UnmatchedInputError",
    "WHITESPACE",
    "WILDCARD",
    "skip",
]
