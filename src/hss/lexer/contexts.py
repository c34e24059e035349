"""Nested region contexts for the hss transpiler.

A hybrid stylesheet source is a stack of regions:

    host text << stylesheet [ host expression << stylesheet >> ] >> host text
    ^ ROOT       ^ STYLESHEET  ^ HOST_EXPRESSION  ^ STYLESHEET

Each region is a Context tagged with a ContextKind. Behavior that differs
between regions (delimiters, token handling, serialization, folding a
closed child) dispatches on the tag. The driver owns the stack; a
context's parent is simply the entry below it.

Thread Safety:
Contexts are local to one transpile() call. No shared mutable state.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from hss.config import TranspileConfig
from hss.lexer.source import CharacterSource
from hss.stringbuilder import StringBuilder
from hss.tokens import Token, TokenType


class ContextKind(Enum):
    """Region kinds.

    - ROOT: Plain host-language text, passed through verbatim
    - STYLESHEET: Inside << ... >>, serialized to a quoted string
    - HOST_EXPRESSION: Inside [ ... ] within a stylesheet expression,
      spliced into the surrounding string as a runtime call

    """

    ROOT = auto()
    STYLESHEET = auto()
    HOST_EXPRESSION = auto()


# Names used in unterminated region errors
REGION_NAMES: dict[ContextKind, str] = {
    ContextKind.ROOT: "",
    ContextKind.STYLESHEET: "stylesheet expression",
    ContextKind.HOST_EXPRESSION: "host expression",
}

# Which region each kind opens when its child delimiter is seen
CHILD_KINDS: dict[ContextKind, ContextKind] = {
    ContextKind.ROOT: ContextKind.STYLESHEET,
    ContextKind.STYLESHEET: ContextKind.HOST_EXPRESSION,
    ContextKind.HOST_EXPRESSION: ContextKind.STYLESHEET,
}


def escape_single_quoted(value: str) -> str:
    """Re-quote a single-quoted string literal for a stylesheet expression.

    The stylesheet expression is itself emitted inside single quotes, and
    the runtime quotes it once more when evaluating, so inner quotes need
    two extra escaping layers.

    Example:
        >>> print(escape_single_quoted("'it''s'"))
        \\'it\\\\\\'\\\\\\'s\\'
    """
    inner = value[1:-1].replace("'", "\\\\\\'")
    return "\\'" + inner + "\\'"


@dataclass(slots=True)
class Context:
    """One region on the transpiler's context stack.

    Attributes:
        kind: Which region this is
        config: Delimiters and runtime names for this transpile call
        starting_line: Line the region was opened on (for error messages)
        content: Accumulated output text of the region
        bracket_depth: Unmatched literal opening brackets seen inside a
            HOST_EXPRESSION; while positive, closing brackets are content

    """

    kind: ContextKind
    config: TranspileConfig
    starting_line: int = 1
    content: StringBuilder = field(default_factory=StringBuilder)
    bracket_depth: int = 0

    @property
    def name(self) -> str:
        return REGION_NAMES[self.kind]

    @property
    def end_delimiter(self) -> str:
        if self.kind == ContextKind.STYLESHEET:
            return self.config.stylesheet_close
        if self.kind == ContextKind.HOST_EXPRESSION:
            return self.config.expression_close
        return ""

    @property
    def child_delimiter(self) -> str:
        if self.kind == ContextKind.STYLESHEET:
            return self.config.expression_open
        return self.config.stylesheet_open

    # =========================================================================
    # Tokens
    # =========================================================================

    def add(self, token: Token) -> None:
        """Accept a token from the scanner or driver.

        ROOT keeps everything verbatim. Child regions drop comments and
        collapse whitespace; stylesheet expressions also re-quote
        single-quoted strings.
        """
        if self.kind == ContextKind.ROOT:
            self.content.append(token.value)
            return

        if token.type == TokenType.COMMENT:
            return
        if token.type == TokenType.WHITESPACE:
            self._add_collapsed_space()
            return

        if self.kind == ContextKind.STYLESHEET:
            if token.type == TokenType.STRING and token.value[0] == "'":
                self.content.append(escape_single_quoted(token.value))
                return
        elif token.type == TokenType.TEXT:
            self._track_brackets(token.value)

        self.content.append(token.value)

    def _add_collapsed_space(self) -> None:
        if self.content.last_char() != " ":
            self.content.append(" ")

    def _track_brackets(self, text: str) -> None:
        if text == self.config.expression_open:
            self.bracket_depth += 1
        elif text == self.config.expression_close and self.bracket_depth:
            self.bracket_depth -= 1

    # =========================================================================
    # Region boundaries
    # =========================================================================

    def open_child(self, source: CharacterSource) -> Context | None:
        """Open a child region if its delimiter comes next.

        Consumes the delimiter. Returns the new child context, or None if
        the lookahead doesn't match.
        """
        delimiter = self.child_delimiter
        if source.peek(len(delimiter)) != delimiter:
            return None

        source.skip(len(delimiter))
        return Context(CHILD_KINDS[self.kind], self.config, starting_line=source.line)

    def close(self, source: CharacterSource) -> bool:
        """Consume this region's end delimiter if it comes next.

        ROOT never closes. A HOST_EXPRESSION with open brackets of its own
        leaves the closing bracket in place, to be added as content.
        """
        if self.kind == ContextKind.ROOT:
            return False

        delimiter = self.end_delimiter
        if source.peek(len(delimiter)) != delimiter:
            return False
        if self.kind == ContextKind.HOST_EXPRESSION and self.bracket_depth:
            return False

        source.skip(len(delimiter))
        return True

    # =========================================================================
    # Serialization
    # =========================================================================

    def serialize(self) -> str:
        """Render the region's accumulated content for its parent."""
        text = self.content.build()
        if self.kind == ContextKind.STYLESHEET:
            return "'" + text.strip() + "'"
        if self.kind == ContextKind.HOST_EXPRESSION:
            return f"' + {self.config.expression_call}({text}) + '"
        return text

    def fold(self, child_output: str) -> None:
        """Append a closed child's serialized output.

        A stylesheet expression closing into host code (ROOT or a host
        expression) becomes a runtime evaluate call. A host expression
        closing into a stylesheet expression is already a string splice.
        """
        if self.kind == ContextKind.STYLESHEET:
            self.content.append(child_output)
        else:
            self.content.append(f"{self.config.evaluate_call}({child_output})")
