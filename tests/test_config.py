"""Tests for ContextVar-based transpile configuration.

Validates thread isolation, context manager behavior, and that an explicit
config argument wins over the context's config.
"""

from threading import Thread

import pytest

from hss import (
    TranspileConfig,
    Transpiler,
    get_transpile_config,
    reset_transpile_config,
    set_transpile_config,
    transpile,
    transpile_config_context,
)


class TestTranspileConfigDataclass:
    """Test TranspileConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = TranspileConfig()
        assert config.runtime == "sheath.css"
        assert config.evaluate_function == "evaluate"
        assert config.expression_function == "jsExpr"
        assert config.stylesheet_open == "<<"
        assert config.stylesheet_close == ">>"
        assert config.expression_open == "["
        assert config.expression_close == "]"

    def test_immutability(self) -> None:
        config = TranspileConfig()
        with pytest.raises(AttributeError):
            config.runtime = "other"  # type: ignore[misc]

    def test_qualified_calls(self) -> None:
        config = TranspileConfig(runtime="rt", evaluate_function="ev", expression_function="ex")
        assert config.evaluate_call == "rt.ev"
        assert config.expression_call == "rt.ex"

    @pytest.mark.parametrize(
        "field_values",
        [
            {"expression_open": "(("},
            {"expression_close": "))"},
            {"expression_open": "((", "expression_close": "))"},
            {"expression_open": ""},
            {"expression_close": ""},
        ],
    )
    def test_expression_delimiters_must_be_single_characters(self, field_values: dict) -> None:
        with pytest.raises(ValueError, match="must be a single character"):
            TranspileConfig(**field_values)

    def test_single_character_expression_delimiters_accepted(self) -> None:
        config = TranspileConfig(expression_open="(", expression_close=")")
        assert transpile("<<a (f(x)) b>>", config=config) == (
            "sheath.css.evaluate('a ' + sheath.css.jsExpr(f(x)) + ' b')"
        )

    def test_equality(self) -> None:
        assert TranspileConfig(runtime="a") == TranspileConfig(runtime="a")
        assert TranspileConfig(runtime="a") != TranspileConfig(runtime="b")


class TestFromDict:
    """TranspileConfig.from_dict() for framework integration."""

    def test_known_keys(self) -> None:
        config = TranspileConfig.from_dict({"runtime": "styles", "stylesheet_open": "{{"})
        assert config.runtime == "styles"
        assert config.stylesheet_open == "{{"
        assert config.stylesheet_close == ">>"

    def test_unknown_keys_ignored(self) -> None:
        config = TranspileConfig.from_dict({"runtime": "styles", "unknown_key": 1})
        assert config == TranspileConfig(runtime="styles")

    def test_multi_character_expression_delimiter_rejected(self) -> None:
        with pytest.raises(ValueError, match="expression_close"):
            TranspileConfig.from_dict({"expression_close": "]]"})

    def test_empty_dict_is_default(self) -> None:
        assert TranspileConfig.from_dict({}) == TranspileConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def test_get_returns_default(self) -> None:
        reset_transpile_config()
        assert get_transpile_config() == TranspileConfig()

    def test_set_and_get(self) -> None:
        config = TranspileConfig(runtime="styles")
        set_transpile_config(config)
        try:
            assert get_transpile_config() is config
            assert transpile("<<a>>") == "styles.evaluate('a')"
        finally:
            reset_transpile_config()

    def test_reset(self) -> None:
        set_transpile_config(TranspileConfig(runtime="styles"))
        reset_transpile_config()
        assert get_transpile_config().runtime == "sheath.css"


class TestContextManager:
    """Test transpile_config_context context manager."""

    def test_sets_config_within_block(self) -> None:
        with transpile_config_context(TranspileConfig(runtime="styles")):
            assert transpile("<<a>>") == "styles.evaluate('a')"
        assert transpile("<<a>>") == "sheath.css.evaluate('a')"

    def test_restores_on_exception(self) -> None:
        with pytest.raises(ValueError):
            with transpile_config_context(TranspileConfig(runtime="styles")):
                raise ValueError("boom")
        assert get_transpile_config().runtime == "sheath.css"

    def test_nested_contexts(self) -> None:
        with transpile_config_context(TranspileConfig(runtime="outer")):
            with transpile_config_context(TranspileConfig(runtime="inner")):
                assert get_transpile_config().runtime == "inner"
            assert get_transpile_config().runtime == "outer"

    def test_explicit_config_wins(self) -> None:
        with transpile_config_context(TranspileConfig(runtime="context")):
            out = transpile("<<a>>", config=TranspileConfig(runtime="explicit"))
        assert out == "explicit.evaluate('a')"

    def test_transpiler_reads_config_at_construction(self) -> None:
        with transpile_config_context(TranspileConfig(runtime="early")):
            t = Transpiler("<<a>>")
        assert t.transpile() == "early.evaluate('a')"


class TestThreadIsolation:
    """Config set in one thread does not leak into another."""

    def test_threads_see_own_config(self) -> None:
        results: dict[str, str] = {}

        def worker(name: str) -> None:
            with transpile_config_context(TranspileConfig(runtime=name)):
                results[name] = transpile("<<a [b] >>")

        threads = [Thread(target=worker, args=(f"rt{i}",)) for i in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        for name, output in results.items():
            assert output == f"{name}.evaluate('a ' + {name}.jsExpr(b) + '')"
        assert len(results) == 8
