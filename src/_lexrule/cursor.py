"""
A cursor holds the position of tokenization within an input text. The state
lives in a separate object so that several handles (see SourceCursor.share)
can refer to, and advance, the same position. This is what allows one lexer
to hand the input over to another lexer mid-stream and continue where the
other one stopped.

Handles are not synchronized: a cursor, and all of its shared handles, must
only be used from one thread, one operation at a time.
"""

from _lexrule.location import SrcLoc


class _CursorState:
    def __init__(self, text):
        self.text = text
        self.char_index = 0
        self.byte_index = 0
        self.line = 1
        self.col = 1
        self.exhausted = False
        self.total_bytes = len(text.encode("utf-8"))


class SourceCursor:
    """
    The mutable position over an input text.

    >>> cursor = SourceCursor("ab\\nc")
    >>> cursor.advance(3)
    (1, 3)
    >>> (cursor.line, cursor.col, cursor.byte_index)
    (2, 1, 3)
    """

    def __init__(self, text):
        """
        :param text: The complete input text.
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected input text as str, got {type(text)}")
        self._state = _CursorState(text)

    @classmethod
    def _from_state(cls, state):
        cursor = cls.__new__(cls)
        cursor._state = state
        return cursor

    @property
    def text(self):
        return self._state.text

    @property
    def char_index(self):
        """
        The index (in characters) of the first unconsumed character.
        """
        return self._state.char_index

    @property
    def byte_index(self):
        """
        The utf-8 byte offset of the first unconsumed character.
        """
        return self._state.byte_index

    @property
    def line(self):
        return self._state.line

    @property
    def col(self):
        return self._state.col

    @property
    def exhausted(self):
        return self._state.exhausted

    @property
    def total_bytes(self):
        return self._state.total_bytes

    @property
    def is_empty(self):
        return self._state.char_index >= len(self._state.text)

    def remaining_text(self):
        return self._state.text[self._state.char_index :]

    def peek(self):
        """
        :returns: The next unconsumed character, or None at the end of input.
        """
        if self.is_empty:
            return None
        return self._state.text[self._state.char_index]

    def advance(self, n):
        """
        Consume exactly n characters, updating line, column and byte offset.

        :param n: The number of characters to consume.
        :returns: The (line, col) of the last consumed character, or the
            current position if n is 0.
        """
        state = self._state
        if n < 0 or state.char_index + n > len(state.text):
            raise ValueError(
                f"Cannot advance {n} characters from {state.char_index} "
                f"in input of length {len(state.text)}"
            )
        last = (state.line, state.col)
        for char in state.text[state.char_index : state.char_index + n]:
            last = (state.line, state.col)
            if char == "\n":
                state.line += 1
                state.col = 1
            else:
                state.col += 1
            state.byte_index += len(char.encode("utf-8"))
        state.char_index += n
        return last

    def mark_exhausted_if_empty(self):
        """
        Set the exhausted flag the first time there is no remaining input.

        :returns: Whether the cursor is exhausted.
        """
        if self.is_empty:
            self._state.exhausted = True
        return self._state.exhausted

    def share(self):
        """
        :returns: Another handle to the same cursor state. Advancing either
            handle advances both.
        """
        return SourceCursor._from_state(self._state)

    def shares_state_with(self, other):
        return self._state is other._state

    def location(self):
        """
        :returns: A zero-width SrcLoc at the current position.
        """
        return SrcLoc.at(self.line, self.col, self.byte_index)

    def __repr__(self):
        return (
            f"SourceCursor(line={self.line}, col={self.col}, "
            f"byte_index={self.byte_index}, exhausted={self.exhausted})"
        )


def as_cursor(source):
    """
    :param source: Either the input text or an existing SourceCursor.
    :returns: A SourceCursor for source. An existing cursor is returned as-is
        so that several lexers can take turns advancing it.
    """
    if isinstance(source, SourceCursor):
        return source
    return SourceCursor(source)
