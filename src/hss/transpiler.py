"""Hybrid stylesheet transpiler.

Turns every `<< stylesheet >>` expression in a host-language source into a
runtime call, leaving the surrounding host text untouched:

    const button = << color: red; width: [w * 2]px >>

becomes

    const button = sheath.css.evaluate('color: red; width: ' + sheath.css.jsExpr(w * 2) + 'px')

Stylesheet and host expressions nest to any depth.

Thread Safety:
Transpiler instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from hss.config import TranspileConfig, get_transpile_config
from hss.errors import HssError, UnterminatedRegionError
from hss.lexer.contexts import Context, ContextKind
from hss.lexer.scanner import QUOTE_CHARS, ScannerMixin
from hss.lexer.source import CharacterSource
from hss.tokens import Token, TokenType
from hss.utils.logger import get_logger

logger = get_logger(__name__)


class Transpiler(ScannerMixin):
    """Priority-ordered driver over the scanner and the context stack.

    At each step the next character is, in order: a string, a comment (or
    a lone "/"), whitespace, the start of a child region, the end of the
    current region, or a literal character.

    Usage:
            >>> Transpiler("a = <<color>>").transpile()
            "a = sheath.css.evaluate('color')"

    """

    __slots__ = ("_source", "_source_file", "_stack", "_config", "_done")

    def __init__(
        self,
        source: str,
        source_file: str = "<string>",
        config: TranspileConfig | None = None,
        line: int = 1,
    ) -> None:
        """Initialize transpiler with source text.

        Args:
            source: Hybrid stylesheet source text
            source_file: Source identifier for error messages
            config: Transpile configuration (uses the context's config if None)
            line: Line number of the first character of source
        """
        self._source = CharacterSource(source, line)
        self._source_file = source_file
        self._config = config if config is not None else get_transpile_config()
        self._stack: list[Context] = [
            Context(ContextKind.ROOT, self._config, starting_line=line)
        ]
        self._done = False

    def transpile(self) -> str:
        """Transpile the whole source.

        Returns:
            Host-language source text

        Raises:
            UnterminatedStringError: A quoted literal was never closed
            UnterminatedRegionError: A region was still open at end of input
            HssError: If called twice on the same instance
        """
        if self._done:
            raise HssError("Transpiler instances are single-use")
        self._done = True

        source = self._source
        while char := source.peek():
            context = self._stack[-1]
            if char in QUOTE_CHARS:
                self._scan_string()
            elif char == "/":
                self._scan_comment()
            elif char.isspace():
                self._scan_whitespace()
            elif (child := context.open_child(source)) is not None:
                self._push(child)
            elif context.close(source):
                self._pop()
            else:
                lineno = source.line
                context.add(Token(TokenType.TEXT, source.next(), lineno))

        current = self._stack[-1]
        if current.kind != ContextKind.ROOT:
            raise UnterminatedRegionError(
                current.name,
                current.end_delimiter,
                current.starting_line,
                lineno=source.line,
                source_file=self._source_file,
            )
        return current.serialize()

    @property
    def depth(self) -> int:
        """Number of open regions below ROOT."""
        return len(self._stack) - 1

    def _push(self, child: Context) -> None:
        self._stack.append(child)
        logger.debug(
            "%s:%d: opened %s (depth %d)",
            self._source_file,
            child.starting_line,
            child.name,
            self.depth,
        )

    def _pop(self) -> None:
        child = self._stack.pop()
        self._stack[-1].fold(child.serialize())
        logger.debug(
            "%s:%d: closed %s opened on line %d",
            self._source_file,
            self._source.line,
            child.name,
            child.starting_line,
        )
