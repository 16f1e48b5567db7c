class LexError(Exception):
    """
    Base class for all errors raised while declaring rules or
    tokenizing input.
    """

    pass


class UnmatchedInputError(LexError):
    """
    Raised when the remaining input is non-empty and no rule matches
    at the current position. Tokenization halts, the engine does not
    attempt to skip ahead.
    """

    def __init__(self, character, location):
        """
        :param character: The first character of the unmatched input.
        :param location: Zero-width SrcLoc of the cursor when matching failed.
        """
        self.character = character
        self.location = location
        super().__init__(f"Unexpected character {character!r} at {location}")


class ActionError(LexError):
    """
    Raised when the action of a matched rule raises. The exception raised
    by the action is available as `original` (and as `__cause__`).
    """

    def __init__(self, original, location, rule_index):
        self.original = original
        self.location = location
        self.rule_index = rule_index
        super().__init__(
            f"Action of rule {rule_index} failed at {location}: {original!r}"
        )


class RuleDefinitionError(LexError, ValueError):
    """
    Raised when constructing a rule table from malformed rules, for
    instance an invalid regex or an action with an unsupported signature.
    """

    pass


class EmptyMatchWarning(UserWarning):
    """
    Emitted when a pattern rule can match the empty string. Such a rule
    consumes no input when it fires, so it will fire again at the same
    position unless its action changes the cursor.
    """

    pass
