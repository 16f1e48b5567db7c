from _lexrule.cursor import as_cursor
from _lexrule.engine import LexerEngine
from _lexrule.rules import RuleTable
from _lexrule.stream import TokenStream


class Lexer:
    """
    A lexer defined by an ordered list of rules. The rules are compiled
    once, when the lexer is created, and calling the lexer gives a new
    TokenStream over the given input.

    >>> lex = Lexer(
    ...     [
    ...         (WHITESPACE, skip),
    ...         ("[0-9]+", int),
    ...         ("[a-zA-Z]+", str),
    ...         (EOF, lambda _: "<eof>"),
    ...     ]
    ... )
    >>> lex("123 abc").token_list()
    [123, 'abc', '<eof>']

    Given a SourceCursor instead of a string, the lexer continues from the
    position of that cursor, and advances it. This is used by actions which
    take the shared cursor handle and run another lexer on it.

    Actions with keyword-only parameters receive the lexer arguments of
    the same name, given when calling the lexer:

    >>> lex = Lexer([("[a-z]+", lambda text, *, prefix: prefix + text)])
    >>> lex("abc", prefix="id:").token_list()
    ['id:abc']
    """

    def __init__(self, rules):
        """
        :param rules: A RuleTable, an iterable of Rule or (pattern, action)
            pairs, or a mapping from pattern to action.
        """
        if not isinstance(rules, RuleTable):
            rules = RuleTable(rules)
        self.rule_table = rules
        self.engine = LexerEngine(rules)

    def __call__(self, source, **arguments):
        """
        :param source: The input text or a SourceCursor.
        :param arguments: Lexer arguments. Each action receives the
            arguments named by its keyword-only parameters.
        :returns: A TokenStream of (token, SrcLoc) pairs.
        :raises TypeError: If an argument some action requires is missing,
            or an argument is given that no action takes.
        """
        self.rule_table.check_arguments(arguments)
        return TokenStream(self.engine, as_cursor(source), arguments)

    def tokenize(self, source, **arguments):
        """
        :returns: A list of all (token, SrcLoc) pairs in source.
        :raises UnmatchedInputError: If source contains input that
            no rule matches.
        :raises ActionError: If the action of a matched rule raises.
        """
        return self(source, **arguments).to_list()

    def __repr__(self):
        return f"Lexer({self.rule_table!r})"
