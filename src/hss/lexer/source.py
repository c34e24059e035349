"""Line-tracked cursor over transpiler input."""

from __future__ import annotations


class CharacterSource:
    """Forward-only cursor over the remaining input.

    Keeps an index into the original string instead of re-slicing it, so
    consuming a character is O(1). ``line`` is always the 1-indexed line of
    the next unconsumed character.

    End of input is signaled by an empty string from both peek() and next().

    Usage:
            >>> src = CharacterSource("a\\nb")
            >>> src.peek(2)
            'a\\n'
            >>> src.next(), src.next(), src.line
            ('a', '\\n', 2)

    """

    __slots__ = ("_input", "_input_len", "_pos", "line")

    def __init__(self, text: str, line: int = 1) -> None:
        self._input = text
        self._input_len = len(text)
        self._pos = 0
        self.line = line

    def peek(self, length: int = 1) -> str:
        """Return the next ``length`` characters without consuming them.

        Returns fewer characters near the end of input, and "" at the end.
        """
        return self._input[self._pos : self._pos + length]

    def next(self) -> str:
        """Consume and return one character ("" at end of input)."""
        if self._pos >= self._input_len:
            return ""

        char = self._input[self._pos]
        self._pos += 1

        if char == "\n":
            self.line += 1

        return char

    def skip(self, length: int) -> None:
        """Consume ``length`` characters, discarding them."""
        for _ in range(length):
            self.next()

    @property
    def at_end(self) -> bool:
        return self._pos >= self._input_len

    def __len__(self) -> int:
        """Number of characters not yet consumed."""
        return self._input_len - self._pos
