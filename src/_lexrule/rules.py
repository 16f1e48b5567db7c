"""
Rules pair a pattern with an action. The pattern is either one of the
sentinels WILDCARD, EOF and WHITESPACE, or one or more regex fragments that
are concatenated into a single pattern.

A rule table compiles all patterns once, when it is constructed. Compiled
rules are immutable and can be shared between any number of lexers.

Rules are tried in declaration order and the first rule that matches at the
current position wins, regardless of how long the match of a later rule would
have been. This means that, for instance, keywords have to be declared before
a rule matching general identifiers.
"""

import inspect
import re
import warnings
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, auto, unique

from _lexrule.errors import EmptyMatchWarning, RuleDefinitionError


@unique
class RuleKind(Enum):
    PATTERN = auto()
    WILDCARD = auto()
    EOF = auto()
    WHITESPACE = auto()

    @classmethod
    def sentinels(cls):
        return (cls.WILDCARD, cls.EOF, cls.WHITESPACE)


# Matches any single character, including newline.
WILDCARD = RuleKind.WILDCARD
# Matches once, with zero width, when the input has been exhausted.
EOF = RuleKind.EOF
# Matches a single whitespace character.
WHITESPACE = RuleKind.WHITESPACE


@unique
class _Skip(Enum):
    SKIP = auto()

    def __repr__(self):
        return "SKIP"


# Returned by an action to discard the matched text without emitting a token.
SKIP = _Skip.SKIP


def skip(text):
    """
    Action that discards the matched text.
    """
    return SKIP


sentinel_regexes = {
    RuleKind.WILDCARD: "(?s).",
    RuleKind.WHITESPACE: r"[ \n\r\t]",
}


@dataclass(frozen=True)
class Rule:
    """
    A declared rule: a pattern and the action to take when it matches.

    :param pattern: WILDCARD, EOF, WHITESPACE, a regex string or a
        sequence of regex strings that are concatenated.
    :param action: Called with the matched text and, if it accepts
        more positional arguments, a shared handle to the cursor and the
        SrcLoc of the match. Keyword-only parameters receive the lexer
        arguments of the same name (see Lexer.__call__). Returns a token
        or SKIP.
    """

    pattern: object
    action: object


@dataclass(frozen=True)
class ActionParameters:
    """
    How the lexer calls an action.

    :param arity: The number of positional arguments, 1 (text), 2 (text,
        cursor) or 3 (text, cursor, loc).
    :param keywords: Names of lexer arguments passed as keywords.
    :param required_keywords: The keywords without a default value.
    :param any_keyword: Whether the action takes **kwargs, and so
        receives every lexer argument.
    """

    arity: int
    keywords: frozenset = frozenset()
    required_keywords: frozenset = frozenset()
    any_keyword: bool = False


def action_parameters(action):
    """
    :returns: The ActionParameters for calling action.
    :raises RuleDefinitionError: If action cannot be called with
        (text), (text, cursor) or (text, cursor, loc).
    """
    if not callable(action):
        raise RuleDefinitionError(f"Rule action {action!r} is not callable")
    try:
        signature = inspect.signature(action)
    except (TypeError, ValueError):
        # Builtins such as int and str have no introspectable signature,
        # they are called with the matched text only.
        return ActionParameters(1)

    positional = []
    keywords = []
    required_keywords = []
    var_positional = False
    any_keyword = False
    for parameter in signature.parameters.values():
        if parameter.kind == parameter.VAR_POSITIONAL:
            var_positional = True
        elif parameter.kind == parameter.VAR_KEYWORD:
            any_keyword = True
        elif parameter.kind == parameter.KEYWORD_ONLY:
            keywords.append(parameter.name)
            if parameter.default is parameter.empty:
                required_keywords.append(parameter.name)
        else:
            positional.append(parameter)

    required = [p for p in positional if p.default is p.empty]
    if not positional and not var_positional:
        raise RuleDefinitionError(
            f"Rule action {action!r} must accept the matched text as argument"
        )
    if len(required) > 3:
        raise RuleDefinitionError(
            f"Rule action {action!r} takes {len(required)} arguments, "
            "expected at most (text, cursor, loc)"
        )
    arity = 3 if var_positional else max(len(required), 1)
    return ActionParameters(
        arity, frozenset(keywords), frozenset(required_keywords), any_keyword
    )


def action_arity(action):
    """
    :returns: The number of positional arguments (1, 2 or 3) the lexer
        should call action with.
    """
    return action_parameters(action).arity


def pattern_source(pattern):
    """
    :param pattern: A regex string or a non-empty sequence of regex strings.
    :returns: The concatenated regex source.
    """
    if isinstance(pattern, str):
        return pattern
    if isinstance(pattern, (tuple, list)):
        if not pattern:
            raise RuleDefinitionError("Rule pattern has no fragments")
        for fragment in pattern:
            if not isinstance(fragment, str):
                raise RuleDefinitionError(
                    f"Pattern fragment {fragment!r} is not a string"
                )
        return "".join(pattern)
    raise RuleDefinitionError(f"Unsupported rule pattern {pattern!r}")


multiline_flag = re.compile(r"\(\?[a-zA-Z]*m")


def anchor_end(source):
    """
    Replace each $ outside of a character class by \\Z, so that it only
    matches at the end of the input and not also before a final newline.
    Patterns setting the multiline flag inline are left unchanged.

    >>> anchor_end(r"a$|[$]\\$")
    'a\\\\Z|[$]\\\\$'
    """
    if multiline_flag.search(source):
        return source
    result = []
    in_class = False
    class_start = 0
    i = 0
    while i < len(source):
        char = source[i]
        if char == "\\":
            result.append(source[i : i + 2])
            i += 2
            continue
        if in_class:
            # A ] directly after [ or [^ is a literal
            if char == "]" and i > class_start:
                in_class = False
        elif char == "[":
            in_class = True
            class_start = i + 1
            if source[class_start : class_start + 1] == "^":
                class_start += 1
        elif char == "$":
            char = r"\Z"
        result.append(char)
        i += 1
    return "".join(result)


@dataclass(frozen=True)
class CompiledRule:
    """
    A rule with its pattern compiled. The priority of a compiled rule is its
    index in the RuleTable.
    """

    priority: int
    kind: RuleKind
    matcher: object
    action: object
    parameters: ActionParameters

    @property
    def arity(self):
        return self.parameters.arity

    @classmethod
    def compile(cls, priority, rule):
        action = rule.action
        parameters = action_parameters(action)
        if rule.pattern in RuleKind.sentinels():
            kind = rule.pattern
            source = sentinel_regexes.get(kind)
            matcher = None if source is None else re.compile(source)
            return cls(priority, kind, matcher, action, parameters)

        source = pattern_source(rule.pattern)
        try:
            matcher = re.compile(anchor_end(source))
        except re.error as err:
            raise RuleDefinitionError(
                f"Invalid pattern {source!r} in rule {priority}: {err}"
            ) from err
        if matcher.match(""):
            warnings.warn(
                f"Pattern {source!r} in rule {priority} matches the empty string",
                EmptyMatchWarning,
            )
        return cls(priority, RuleKind.PATTERN, matcher, action, parameters)

    def match(self, cursor, remaining=None):
        """
        Try to match this rule at the start of the remaining text of the
        cursor. The pattern only sees the remaining text, so ^, \\b and
        lookbehinds treat the cursor position as the start of the input.

        :param remaining: The remaining text of the cursor, when the caller
            already has it.
        :returns: The number of characters matched, or None if the rule
            does not match.
        """
        if self.kind == RuleKind.EOF:
            return 0 if cursor.exhausted else None
        if remaining is None:
            remaining = cursor.remaining_text()
        mat = self.matcher.match(remaining)
        if mat is None:
            return None
        return mat.end()

    def keyword_arguments(self, context):
        if not context:
            return {}
        if self.parameters.any_keyword:
            return dict(context)
        return {
            name: value
            for name, value in context.items()
            if name in self.parameters.keywords
        }

    def invoke(self, text, cursor, loc, context=None):
        """
        Call the action of this rule.

        :param context: The lexer arguments, passed to the keyword-only
            parameters of the action.
        """
        kwargs = self.keyword_arguments(context)
        if self.arity == 1:
            return self.action(text, **kwargs)
        if self.arity == 2:
            return self.action(text, cursor.share(), **kwargs)
        return self.action(text, cursor.share(), loc, **kwargs)


def as_rule(declaration):
    if isinstance(declaration, Rule):
        return declaration
    try:
        pattern, action = declaration
    except (TypeError, ValueError) as err:
        raise RuleDefinitionError(
            f"Expected a (pattern, action) pair, got {declaration!r}"
        ) from err
    return Rule(pattern, action)


class RuleTable:
    """
    An ordered, immutable sequence of compiled rules.

    >>> table = RuleTable([(WHITESPACE, skip), ("[0-9]+", int)])
    >>> len(table)
    2
    """

    def __init__(self, rules):
        """
        :param rules: An iterable of Rule or (pattern, action) pairs, or a
            mapping from pattern to action. Earlier rules have priority.
        """
        if isinstance(rules, Mapping):
            rules = rules.items()
        self._rules = tuple(
            CompiledRule.compile(priority, as_rule(declaration))
            for priority, declaration in enumerate(rules)
        )

    @property
    def has_eof_rule(self):
        return any(rule.kind == RuleKind.EOF for rule in self._rules)

    @property
    def argument_names(self):
        """
        The names of the lexer arguments that some action takes.
        """
        return frozenset().union(*(rule.parameters.keywords for rule in self._rules))

    @property
    def required_arguments(self):
        """
        The names of the lexer arguments that some action requires.
        """
        return frozenset().union(
            *(rule.parameters.required_keywords for rule in self._rules)
        )

    @property
    def accepts_any_argument(self):
        return any(rule.parameters.any_keyword for rule in self._rules)

    def check_arguments(self, arguments):
        """
        :param arguments: The names of the lexer arguments given.
        :raises TypeError: If a required lexer argument is missing, or an
            argument is given that no action takes.
        """
        missing = self.required_arguments - set(arguments)
        if missing:
            raise TypeError(f"Missing lexer arguments: {', '.join(sorted(missing))}")
        if not self.accepts_any_argument:
            unexpected = set(arguments) - self.argument_names
            if unexpected:
                raise TypeError(
                    f"Unexpected lexer arguments: {', '.join(sorted(unexpected))}"
                )

    def __len__(self):
        return len(self._rules)

    def __iter__(self):
        return iter(self._rules)

    def __getitem__(self, index):
        return self._rules[index]

    def __repr__(self):
        return f"RuleTable({len(self._rules)} rules)"
