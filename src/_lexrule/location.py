from dataclasses import dataclass


@dataclass(frozen=True)
class SrcLoc:
    """
    The location of a matched span of input.

    Lines and columns are 1-based, byte offsets are 0-based with an
    exclusive end. `end` is the (line, col) of the last consumed character,
    so a zero-width match has end == start.

    >>> loc = SrcLoc((1, 1), (1, 3), (0, 3))
    >>> str(loc)
    '1:1-1:3'
    """

    start: tuple
    end: tuple
    byte_range: tuple

    @classmethod
    def at(cls, line, col, byte_index):
        """
        :returns: A zero-width location at the given position.
        """
        return cls((line, col), (line, col), (byte_index, byte_index))

    @property
    def start_line(self):
        return self.start[0]

    @property
    def start_col(self):
        return self.start[1]

    @property
    def end_line(self):
        return self.end[0]

    @property
    def end_col(self):
        return self.end[1]

    @property
    def start_byte(self):
        return self.byte_range[0]

    @property
    def end_byte(self):
        return self.byte_range[1]

    def __str__(self):
        if self.start == self.end:
            return f"{self.start_line}:{self.start_col}"
        return f"{self.start_line}:{self.start_col}-{self.end_line}:{self.end_col}"
