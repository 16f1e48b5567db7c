from _lexrule.engine import Emitted, Exhausted, Failed, Skipped


class TokenStream:
    """
    An iterator of (token, SrcLoc) pairs produced by stepping a LexerEngine
    over a cursor.

    Iteration stops when the input is exhausted. If tokenization fails, the
    error (UnmatchedInputError or ActionError) is raised, and raised again on
    any later call to next(). A stream can not be restarted, tokenizing the
    same text again requires a new stream.

    >>> stream = Lexer([("[0-9]+", int), (WHITESPACE, skip)])("1 2")
    >>> stream.token_list()
    [1, 2]
    """

    def __init__(self, engine, cursor, context=None):
        """
        :param engine: The LexerEngine to step.
        :param cursor: The SourceCursor to tokenize from.
        :param context: A dict of lexer arguments passed on to actions.
        """
        self.engine = engine
        self.context = dict(context or {})
        self._cursor = cursor
        self._done = False
        self._error = None

    @property
    def cursor(self):
        return self._cursor

    @property
    def failed(self):
        return self._error is not None

    @property
    def done(self):
        return self._done

    def step(self):
        """
        Take one step of tokenization without unwrapping the outcome.

        :returns: One of Emitted, Skipped, Exhausted or Failed. Once the
            stream has failed or been exhausted, the same outcome is
            returned for every call.
        """
        if self._error is not None:
            return Failed(self._error)
        if self._done:
            return Exhausted()
        outcome = self.engine.step(self._cursor, self.context)
        if isinstance(outcome, Failed):
            self._error = outcome.error
        elif isinstance(outcome, Exhausted):
            self._done = True
        return outcome

    def __iter__(self):
        return self

    def __next__(self):
        while True:
            outcome = self.step()
            if isinstance(outcome, Emitted):
                return (outcome.token, outcome.loc)
            if isinstance(outcome, Skipped):
                continue
            if isinstance(outcome, Failed):
                raise outcome.error
            raise StopIteration

    def tokens(self):
        """
        :returns: An iterator of the remaining tokens without their locations.
        """
        for token, _ in self:
            yield token

    def to_list(self):
        """
        :returns: A list of all remaining (token, SrcLoc) pairs.
        """
        return list(self)

    def token_list(self):
        """
        :returns: A list of all remaining tokens.
        """
        return list(self.tokens())
