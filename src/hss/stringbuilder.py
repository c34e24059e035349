"""StringBuilder for O(n) string accumulation.

Each region keeps its content in a StringBuilder. The scanner appends
mostly one character at a time, so repeated string concatenation would be
O(n²) on long regions. Appends go to a list and are joined once when the
region is serialized.

Thread Safety:
StringBuilder instances are local to each region of a transpile() call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Appends to a list, joins once at the end.
    O(n) total vs O(n²) for repeated string concatenation.

    Usage:
            >>> sb = StringBuilder().append("color").append(" ")
            >>> sb.last_char()
            ' '
            >>> sb.build()
            'color '

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def last_char(self) -> str:
        """Return the last accumulated character, or "" when empty.

        Empty strings are never stored, so the last part always has one.
        """
        if not self._parts:
            return ""
        return self._parts[-1][-1]

    def build(self) -> str:
        """Join all parts into final string.

        Returns:
            Concatenated string of all appended parts
        """
        return "".join(self._parts)
