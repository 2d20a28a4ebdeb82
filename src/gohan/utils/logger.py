"""Loggers under the ``gohan`` namespace.

Gohan only emits DEBUG records (token counts, degraded delimiters, refused
nodes) and never attaches a handler; applications decide where they go.

Example:
    >>> import logging
    >>> logging.getLogger("gohan").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Logger for ``name``, moved under ``gohan.`` when it is outside it.

    Example:
        >>> get_logger("mymodule").name
        'gohan.mymodule'
        >>> get_logger("gohan.lexer.core").name
        'gohan.lexer.core'
    """
    if name != "gohan" and not name.startswith("gohan."):
        name = "gohan." + name
    return logging.getLogger(name)
