"""Observability package for structured logging setup."""

from .structured_logging import observability_configure_logging

__all__ = ["observability_configure_logging"]
