"""Logging setup shared by the CLI and library callers."""

import logging

from rich.logging import RichHandler

DEFAULT_FORMAT = "%(name)s | %(message)s"


def setup_logging(level: str = "INFO", fmt: str | None = None) -> None:
    """Initialize the root logger with a Rich handler."""
    resolved_level = getattr(logging, level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(resolved_level)

    # Clear existing handlers to avoid duplicate logs on repeated setup
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = RichHandler(rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))
    root.addHandler(handler)

    # Provider SDKs are chatty at INFO
    for noisy in ("httpx", "anthropic", "openai"):
        logging.getLogger(noisy).setLevel(max(resolved_level, logging.WARNING))
