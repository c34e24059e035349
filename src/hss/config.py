"""ContextVar-based transpile configuration for hss.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The configuration names the runtime module the generated code calls into
and the delimiters that open and close embedded regions.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Direct usage
    from hss.config import set_transpile_config, reset_transpile_config, TranspileConfig

    set_transpile_config(TranspileConfig(runtime="styles"))
    try:
        output = transpile(source)
    finally:
        reset_transpile_config()

    # Or use the context manager
    with transpile_config_context(TranspileConfig(runtime="styles")):
        output = transpile(source)

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class TranspileConfig:
    """Immutable transpile configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Note: source_file is intentionally excluded. It's per-call state,
    not configuration, and lives on the Transpiler instance.

    Attributes:
        runtime: Module expression the generated code calls into
        evaluate_function: Entry point wrapping each root-level stylesheet expression
        expression_function: Entry point wrapping each embedded host expression
        stylesheet_open: Delimiter opening a stylesheet expression
        stylesheet_close: Delimiter closing a stylesheet expression
        expression_open: Delimiter opening a host expression (also counted
            as a nested bracket inside one). A single character.
        expression_close: Delimiter closing a host expression. A single character.

    """

    runtime: str = "sheath.css"
    evaluate_function: str = "evaluate"
    expression_function: str = "jsExpr"
    stylesheet_open: str = "<<"
    stylesheet_close: str = ">>"
    expression_open: str = "["
    expression_close: str = "]"

    def __post_init__(self) -> None:
        """Reject expression delimiters that aren't exactly one character.

        Bracket depth inside a host expression is tracked per character,
        so longer delimiters would close the region early.

        Raises:
            ValueError: If expression_open or expression_close has a length
                other than 1
        """
        for name in ("expression_open", "expression_close"):
            value = getattr(self, name)
            if len(value) != 1:
                raise ValueError(f"{name} must be a single character, got {value!r}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "TranspileConfig":
        """Create TranspileConfig from dictionary.

        Useful when config comes from external sources (build tool
        settings, TOML files, etc.).

        Only includes keys that are valid TranspileConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                TranspileConfig attribute names.

        Returns:
            New TranspileConfig instance with values from dict.

        Example:
            >>> config = TranspileConfig.from_dict({
            ...     "runtime": "styles",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.runtime
            'styles'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)

    @property
    def evaluate_call(self) -> str:
        """Qualified name of the root-level evaluate entry point."""
        return f"{self.runtime}.{self.evaluate_function}"

    @property
    def expression_call(self) -> str:
        """Qualified name of the host expression entry point."""
        return f"{self.runtime}.{self.expression_function}"


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: TranspileConfig = TranspileConfig()

# Thread-local configuration via ContextVar
_transpile_config: ContextVar[TranspileConfig] = ContextVar(
    "transpile_config",
    default=_DEFAULT_CONFIG,
)


def get_transpile_config() -> TranspileConfig:
    """Get current transpile configuration (thread-local).

    Returns:
        The active TranspileConfig for this thread/context.

    """
    return _transpile_config.get()


def set_transpile_config(config: TranspileConfig) -> None:
    """Set transpile configuration for current context.

    Args:
        config: TranspileConfig instance to use for this context.

    """
    _transpile_config.set(config)


def reset_transpile_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _transpile_config.set(_DEFAULT_CONFIG)


@contextmanager
def transpile_config_context(config: TranspileConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: TranspileConfig to use within the context.

    Yields:
        None

    Example:
        >>> with transpile_config_context(TranspileConfig(runtime="styles")):
        ...     output = transpile("<<color>>")
        >>> output
        "styles.evaluate('color')"

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _transpile_config.get()
    _transpile_config.set(config)
    try:
        yield
    finally:
        _transpile_config.set(previous)


__all__ = [
    "TranspileConfig",
    "get_transpile_config",
    "set_transpile_config",
    "reset_transpile_config",
    "transpile_config_context",
]
