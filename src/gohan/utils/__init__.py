"""Helpers shared across Gohan subpackages."""

from gohan.utils.logger import get_logger

__all__ = ["get_logger"]
