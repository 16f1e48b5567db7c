"""
In this package, a lexer is an ordered list of rules, each a pattern and an
action. Tokenizing moves a cursor over the input: at each position the rules
are tried in declaration order, the first rule that matches consumes its match
and its action decides whether a token is emitted or the text is skipped.

Matching is first-match by declaration order, not longest-match. If a keyword
rule and an identifier rule both match "if", whichever was declared first
wins, so keywords have to be declared before identifiers.

The position (line, column and byte offset) lives in a SourceCursor, separate
from the compiled rules. A cursor handle can be shared with the actions of a
lexer, which lets an action run a different lexer over the same input and
return to the first lexer at the position where the other one stopped.
"""
