"""
Configuration Check CLI Command

Validates the [digest] section of the configuration file and reports any
problems with suggestions for fixing them.
"""

import logging
import click
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

from utils.config.config_validator import ConfigValidator
from utils.config.validation_models import ValidationResult
from utils.digestkit_config import DEFAULT_CONFIG_PATH, load_configuration

logger = logging.getLogger(__name__)


@click.command("config-check")
@click.pass_context
def config_check(ctx: click.Context) -> None:
    """
    Validate the digestkit configuration.

    Uses the configuration loaded by the main command when available,
    otherwise loads it from the parent's --config path.

    Returns:
        None. Prints results and exits with code 1 when the configuration is invalid.
    """
    console = Console()

    if ctx.obj and ctx.obj.get("config") is not None:
        config = ctx.obj["config"]
        config_path = ctx.obj.get("config_path", DEFAULT_CONFIG_PATH)
    else:
        config_path = DEFAULT_CONFIG_PATH
        if ctx.parent and hasattr(ctx.parent, 'params'):
            config_path = ctx.parent.params.get('config', config_path)
        config = load_configuration(config_path)

    logger.info(f"Checking configuration from: {config_path}")
    result = ConfigValidator().validate_digest_config(config)
    _display_validation_results(result, console)

    if not result.is_valid:
        console.print(Panel(
            "❌ [bold red]Configuration validation failed.[/bold red]",
            border_style="red"
        ))
        ctx.exit(1)

    console.print(Panel("✅ [bold green]Configuration is valid[/bold green]", border_style="green"))


def _display_validation_results(result: ValidationResult, console: Console) -> None:
    if result.errors:
        table = Table(title="Configuration errors", show_lines=True)
        table.add_column("Location", style="cyan")
        table.add_column("Problem", style="red")
        table.add_column("Suggestion", style="yellow")
        for error in result.errors:
            location = f"[{error.section}]" + (f".{error.key}" if error.key else "")
            table.add_row(escape(location), escape(error.message), escape(error.suggestion or ""))
        console.print(table)

    for warning in result.warnings:
        console.print(f"⚠️  {warning}", style="yellow", markup=False)
