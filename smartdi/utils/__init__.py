"""Logging setup and console diagnostics."""

from .console import print_error, render_registry
from .logging_config import setup_logging

__all__ = ["setup_logging", "render_registry", "print_error"]
