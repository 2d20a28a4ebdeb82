"""Parse settings carried in a ContextVar.

The Markdown class installs its ParseConfig around each parse; every Parser
in that context reads it, sub-parsers for link text and strong bodies
included. A thread or asyncio task sees only the settings installed in its
own context.

Usage:
    with parse_config_context(ParseConfig(emphasis_enabled=True)):
        blocks = Parser("_hi_").parse()

    # Lower level, when a context manager does not fit
    set_parse_config(ParseConfig(emphasis_enabled=True))
    try:
        blocks = Parser(source).parse()
    finally:
        reset_parse_config()

"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Dialect switches for one parse.

    The file name is not here; it belongs to a single call and lives on
    the Parser.

    Attributes:
        emphasis_enabled: Parse ``_text_`` as Emphasis; when off, underscores
            stay literal
        text_transformer: Applied to the content of every Text node

    """

    emphasis_enabled: bool = False
    text_transformer: Callable[[str], str] | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Build a config from a mapping such as a loaded settings file.

        Keys that name no field are dropped.

        Example:
            >>> ParseConfig.from_dict({"emphasis_enabled": True, "x": 1})
            ParseConfig(emphasis_enabled=True, text_transformer=None)
        """
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in known})


_DEFAULT_CONFIG = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "gohan_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """The config active in the current context."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Install ``config`` for the current context only."""
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Go back to the defaults: emphasis off, no transformer."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Install ``config`` for the body of a ``with`` block.

    Whatever was active before is restored on exit, even when the body
    raises. Contexts nest.
    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
