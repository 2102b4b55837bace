"""
CLI helper utilities for consistent error reporting and context access.
"""

import logging
import click
from rich.console import Console

from models.digest_settings import DigestSettings
from services.hashing_errors import HashingError

logger = logging.getLogger(__name__)

console = Console(stderr=True)


def get_settings_from_context(ctx: click.Context) -> DigestSettings:
    """
    Return the settings stored by the main group, or defaults when a command
    runs without it (e.g. invoked directly in tests).
    """
    if ctx.obj and ctx.obj.get("settings") is not None:
        return ctx.obj["settings"]
    logger.debug("No settings in context; using defaults")
    return DigestSettings()


def report_hashing_error(ctx: click.Context, error: HashingError) -> None:
    """
    Log a hashing error, print it for the user and exit with status 1.

    Args:
        ctx: Click context object
        error: The error raised by the hashing core
    """
    logger.error(f"{type(error).__name__}: {error}")
    console.print(f"❌ {error}", style="red", markup=False)
    ctx.exit(1)
