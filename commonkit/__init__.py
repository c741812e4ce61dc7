"""Shared service building blocks: logging, scheduled-task commands and Redis access."""

__version__ = "0.1.0"