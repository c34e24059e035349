"""Context-agnostic scanning of comments, strings and whitespace.

These runs are recognized identically at every nesting level: a `>>`
inside a string or comment never closes a stylesheet expression. What
happens to the resulting token is up to the current context.
"""

from __future__ import annotations

from hss.errors import UnterminatedStringError
from hss.lexer.contexts import Context
from hss.lexer.source import CharacterSource
from hss.tokens import Token, TokenType

QUOTE_CHARS = frozenset("'\"`")

# Only backtick strings may contain raw newlines
MULTILINE_QUOTE = "`"


class ScannerMixin:
    """Mixin providing token scanning for the Transpiler.

    Each _scan_* method is called when the lookahead starts its run,
    consumes the whole run, and delivers one token to the current context.

    """

    # These will be set by the Transpiler class
    _source: CharacterSource
    _source_file: str
    _stack: list[Context]

    def _scan_comment(self) -> None:
        """Scan a comment, or a lone "/" that isn't one."""
        lookahead = self._source.peek(2)
        if lookahead == "//":
            self._scan_line_comment()
        elif lookahead == "/*":
            self._scan_block_comment()
        else:
            lineno = self._source.line
            self._deliver(TokenType.TEXT, self._source.next(), lineno)

    def _scan_line_comment(self) -> None:
        """Scan "//" through end of line, leaving the newline unconsumed."""
        source = self._source
        lineno = source.line
        chars: list[str] = []
        while (char := source.peek()) and char != "\n":
            chars.append(source.next())
        self._deliver(TokenType.COMMENT, "".join(chars), lineno)

    def _scan_block_comment(self) -> None:
        """Scan "/*" through the first "*/".

        An unclosed block comment runs to end of input.
        """
        source = self._source
        lineno = source.line
        chars = [source.next(), source.next()]
        while (lookahead := source.peek(2)) and lookahead != "*/":
            chars.append(source.next())
        chars.append(source.next())
        chars.append(source.next())
        self._deliver(TokenType.COMMENT, "".join(chars), lineno)

    def _scan_string(self) -> None:
        """Scan a quoted literal, including both delimiters.

        Escapes are copied through untouched: a backslash and the character
        after it are never treated as a delimiter or a newline.

        Raises:
            UnterminatedStringError: On end of input before the closing
                quote, or a raw newline in a '...' or "..." string.
        """
        source = self._source
        lineno = source.line
        quote = source.next()
        chars = [quote]

        while (char := source.peek()) and char != quote:
            if char == "\\":
                chars.append(source.next())
                chars.append(source.next())
                continue
            if char == "\n" and quote != MULTILINE_QUOTE:
                raise UnterminatedStringError(
                    "Unexpected multi-line string",
                    lineno=source.line,
                    source_file=self._source_file,
                )
            chars.append(source.next())

        if char != quote:
            raise UnterminatedStringError(
                "Unexpected end of file",
                lineno=source.line,
                source_file=self._source_file,
            )
        chars.append(source.next())
        self._deliver(TokenType.STRING, "".join(chars), lineno)

    def _scan_whitespace(self) -> None:
        lineno = self._source.line
        self._deliver(TokenType.WHITESPACE, self._source.next(), lineno)

    def _deliver(self, token_type: TokenType, value: str, lineno: int) -> None:
        self._stack[-1].add(Token(token_type, value, lineno))
