from dataclasses import dataclass

from _lexrule.errors import ActionError, UnmatchedInputError
from _lexrule.location import SrcLoc
from _lexrule.rules import SKIP, RuleTable


@dataclass(frozen=True)
class Emitted:
    """
    A rule matched and its action returned a token.
    """

    token: object
    loc: SrcLoc


@dataclass(frozen=True)
class Skipped:
    """
    A rule matched and its action returned SKIP. The input was consumed
    but no token was produced.
    """

    loc: SrcLoc


@dataclass(frozen=True)
class Exhausted:
    """
    There is no more input, and the final pass over the rules (where an
    EOF rule gets to match) has already been made.
    """

    pass


@dataclass(frozen=True)
class Failed:
    """
    Tokenization failed with error, either an UnmatchedInputError or an
    ActionError. Failure is terminal.
    """

    error: Exception


class LexerEngine:
    """
    Takes single steps of tokenization: matches the rules of a rule table
    against the cursor, advances the cursor past the match and calls the
    action of the matching rule.

    The engine itself holds no position, so any number of engines can take
    turns stepping the same cursor.
    """

    def __init__(self, rule_table):
        """
        :param rule_table: A RuleTable, or anything RuleTable accepts.
        """
        if not isinstance(rule_table, RuleTable):
            rule_table = RuleTable(rule_table)
        self.rule_table = rule_table

    def step(self, cursor, context=None):
        """
        Take one step of tokenization.

        Rules are tried in declaration order and the first rule that matches
        wins (this is not longest-match). When the input runs out, the rules
        get one final pass in which an EOF rule can match; after that the
        cursor is exhausted and every step returns Exhausted.

        :param cursor: The SourceCursor to tokenize from.
        :param context: The lexer arguments passed on to the actions.
        :returns: One of Emitted, Skipped, Exhausted or Failed.
        """
        if cursor.exhausted:
            return Exhausted()
        cursor.mark_exhausted_if_empty()

        remaining = cursor.remaining_text()
        for rule in self.rule_table:
            length = rule.match(cursor, remaining)
            if length is None:
                continue

            start = (cursor.line, cursor.col)
            start_byte = cursor.byte_index
            end = cursor.advance(length)
            loc = SrcLoc(start, end, (start_byte, cursor.byte_index))
            text = remaining[:length]

            try:
                result = rule.invoke(text, cursor, loc, context)
            except Exception as err:
                error = ActionError(err, loc, rule.priority)
                error.__cause__ = err
                return Failed(error)

            if result is SKIP:
                return Skipped(loc)
            return Emitted(result, loc)

        if cursor.exhausted:
            return Exhausted()
        return Failed(UnmatchedInputError(cursor.peek(), cursor.location()))
