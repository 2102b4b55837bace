"""
Main entry point for the digestkit CLI.
- Sets up the Click command group and context object.
- Dynamically loads all CLI commands from this directory.
"""
import os
import sys
import importlib
import click
import logging
import rich_click as rclick
from models.digest_settings import DigestSettings
from utils.digestkit_config import DEFAULT_CONFIG_PATH, load_configuration, load_settings
from utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


@rclick.group()
@click.option('--logfile', '-l', type=click.Path(writable=True, dir_okay=False), help="Log to file")
@click.option('--verbose', '-v', count=True, help="Set verbosity level (-v = INFO, -vv = DEBUG)")
@click.option('--config', '-c', type=click.Path(dir_okay=False), default=DEFAULT_CONFIG_PATH, help="Path to config file")
@click.pass_context
def digestkit_cli(ctx: click.Context, verbose: int, logfile: str, config: str) -> None:
    """
    Incremental hashing with SHA-1, SHA-256, SHA-512 and MD5.

    Sets up logging, loads the configuration and stores the resulting settings
    in the context object shared by all subcommands.

    Args:
        ctx (click.Context): Click context for Click command group.
        verbose (int): Verbosity level (-v = INFO, -vv = DEBUG).
        logfile (str): Path to log file.
        config (str): Path to configuration file.

    Returns:
        None
    """
    # If the context object is already set (e.g. by tests), keep it
    if ctx.obj and all(k in ctx.obj for k in ("config", "settings")):
        return

    if logfile and os.path.dirname(logfile):
        os.makedirs(os.path.dirname(logfile), exist_ok=True)

    setup_logging(verbosity=verbose, logfile=logfile)

    is_config_check = ctx.invoked_subcommand == 'config-check'

    cfg = load_configuration(config)
    try:
        settings = load_settings(cfg)
    except ValueError as e:
        logger.error(f"❌ Configuration error: {e}")
        if not is_config_check:
            click.secho(f"❌ {e}", fg="red", err=True)
            click.secho("💡 Try: digestkit config-check", fg="yellow", err=True)
            sys.exit(1)
        ctx.obj = {
            "config": cfg,
            "settings": DigestSettings(),
            "config_error": str(e),
            "config_path": config,
        }
        return

    ctx.obj = {
        "config": cfg,
        "settings": settings,
        "config_path": config,
    }
    logger.debug(f"Settings: {settings.model_dump()}")


# Dynamic discovery loop: auto-register all CLI commands in this directory
COMMAND_DIR = os.path.dirname(__file__)
for filename in sorted(os.listdir(COMMAND_DIR)):
    # Only import .py files that are not main.py or __init__.py
    if filename.endswith(".py") and filename not in {"main.py", "__init__.py"}:
        command_name = filename[:-3]
        module_name = f"cli.{command_name}"
        try:
            module = importlib.import_module(module_name)
            cli_function = getattr(module, command_name, None)
            if cli_function:
                digestkit_cli.add_command(cli_function)
            else:
                logger.debug(f"No command function found in {module_name}")
        except Exception as e:
            logger.debug(f"Failed to import {module_name}: {e}")

if __name__ == '__main__':
    digestkit_cli()
