"""Tests for ContextVar-based parse configuration."""

import threading
from dataclasses import FrozenInstanceError

import pytest

from gohan import Emphasis, Text, parse
from gohan.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)


class TestParseConfig:
    """Test the immutable config object."""

    def test_defaults(self) -> None:
        config = ParseConfig()
        assert config.emphasis_enabled is False
        assert config.text_transformer is None

    def test_frozen(self) -> None:
        config = ParseConfig()
        with pytest.raises(FrozenInstanceError):
            config.emphasis_enabled = True  # type: ignore[misc]

    def test_from_dict(self) -> None:
        config = ParseConfig.from_dict({"emphasis_enabled": True})
        assert config.emphasis_enabled is True

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ParseConfig.from_dict({"emphasis_enabled": True, "tables_enabled": True})
        assert config == ParseConfig(emphasis_enabled=True)

    def test_from_dict_empty(self) -> None:
        assert ParseConfig.from_dict({}) == ParseConfig()


class TestContextVarConfig:
    """Test get/set/reset and the context manager."""

    def setup_method(self) -> None:
        reset_parse_config()

    def teardown_method(self) -> None:
        reset_parse_config()

    def test_default_config(self) -> None:
        assert get_parse_config() == ParseConfig()

    def test_set_and_reset(self) -> None:
        config = ParseConfig(emphasis_enabled=True)
        set_parse_config(config)
        assert get_parse_config() is config
        reset_parse_config()
        assert get_parse_config().emphasis_enabled is False

    def test_context_manager_restores(self) -> None:
        outer = ParseConfig(text_transformer=str.lower)
        set_parse_config(outer)
        with parse_config_context(ParseConfig(emphasis_enabled=True)):
            assert get_parse_config().emphasis_enabled is True
        assert get_parse_config() is outer

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with parse_config_context(ParseConfig(emphasis_enabled=True)):
                raise RuntimeError("boom")
        assert get_parse_config().emphasis_enabled is False

    def test_parse_reads_active_config(self) -> None:
        assert isinstance(parse("_a_").children[0].children[0], Text)
        set_parse_config(ParseConfig(emphasis_enabled=True))
        assert isinstance(parse("_a_").children[0].children[0], Emphasis)


class TestThreadIsolation:
    """Config set in one thread is invisible to others."""

    def test_other_thread_sees_default(self) -> None:
        seen: list[bool] = []
        ready = threading.Event()
        done = threading.Event()

        def configure() -> None:
            set_parse_config(ParseConfig(emphasis_enabled=True))
            ready.set()
            done.wait(timeout=5.0)

        def observe() -> None:
            ready.wait(timeout=5.0)
            seen.append(get_parse_config().emphasis_enabled)
            done.set()

        threads = [threading.Thread(target=configure), threading.Thread(target=observe)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=5.0)

        assert seen == [False]
