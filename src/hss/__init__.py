"""
hss: Hybrid Stylesheets for JavaScript

Write stylesheet expressions inline in JavaScript, with JavaScript
expressions inside them, nested as deep as you like:

    const theme = << color: [dark ? 'white' : 'black'] >>

hss transpiles the file into plain JavaScript that calls into the
sheath.css runtime.

Quick Start:
    >>> from hss import transpile
    >>> transpile("<<color>>")
    "sheath.css.evaluate('color')"

    >>> # Transpile a file
    >>> from hss import transpile_file
    >>> js = transpile_file("button.hss")

Configuration:
    >>> from hss import TranspileConfig
    >>> transpile("<<color>>", config=TranspileConfig(runtime="styles"))
    "styles.evaluate('color')"
"""

from os import PathLike

from hss.config import (
    TranspileConfig,
    get_transpile_config,
    reset_transpile_config,
    set_transpile_config,
    transpile_config_context,
)
from hss.errors import (
    HssError,
    TranspileError,
    UnterminatedRegionError,
    UnterminatedStringError,
)
from hss.lexer import CharacterSource, Context, ContextKind
from hss.tokens import Token, TokenType
from hss.transpiler import Transpiler
from hss.utils.logger import get_logger

__version__ = "0.2.0"

logger = get_logger(__name__)


def transpile(
    source: str,
    *,
    source_file: str = "<string>",
    config: TranspileConfig | None = None,
) -> str:
    """Transpile hybrid stylesheet source into JavaScript.

    Args:
        source: Hybrid stylesheet source text
        source_file: Source identifier for error messages
        config: Transpile configuration (uses the context's config if None)

    Returns:
        JavaScript source text

    Raises:
        TranspileError: If the source is malformed

    Example:
        >>> transpile("<< 'a' + [x+1] >>")
        "sheath.css.evaluate('\\\\'a\\\\' + ' + sheath.css.jsExpr(x+1) + '')"
    """
    if config is None:
        config = get_transpile_config()
    return Transpiler(source, source_file=source_file, config=config).transpile()


def transpile_file(
    path: str | PathLike[str],
    *,
    encoding: str = "utf-8",
    config: TranspileConfig | None = None,
) -> str:
    """Read a file and transpile it.

    The path, as given, is the source identifier in error messages.

    Args:
        path: Path to the hybrid stylesheet source file
        encoding: File encoding
        config: Transpile configuration (uses the context's config if None)

    Returns:
        JavaScript source text

    Raises:
        OSError: If the file can't be read
        TranspileError: If the source is malformed
    """
    with open(path, encoding=encoding) as f:
        source = f.read()
    logger.debug("Transpiling %s (%d chars)", path, len(source))
    return transpile(source, source_file=str(path), config=config)


__all__ = [
    # Main API
    "transpile",
    "transpile_file",
    "Transpiler",
    # Configuration
    "TranspileConfig",
    "get_transpile_config",
    "set_transpile_config",
    "reset_transpile_config",
    "transpile_config_context",
    # Errors
    "HssError",
    "TranspileError",
    "UnterminatedRegionError",
    "UnterminatedStringError",
    # Scanner internals
    "CharacterSource",
    "Context",
    "ContextKind",
    "Token",
    "TokenType",
]
