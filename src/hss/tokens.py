"""Token and TokenType definitions for the hss scanner.

The scanner classifies raw characters into a small set of token types and
hands each Token to whichever context is current. Contexts decide what to
do with a token based on its type.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Token types produced by the scanner.

    COMMENT, STRING and WHITESPACE are recognized the same way in every
    context. TEXT is one literal character outside those runs, including a
    lone "/" that starts no comment.

    """

    COMMENT = auto()  # // line or /* block */
    STRING = auto()  # '...', "..." or `...`
    WHITESPACE = auto()  # One whitespace character
    TEXT = auto()  # Literal text


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Attributes:
        type: The token type (from TokenType enum)
        value: The raw string value from source
        lineno: Line number the token starts on (1-indexed)

    """

    type: TokenType
    value: str
    lineno: int = 1

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.lineno})"
