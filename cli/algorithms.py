"""
CLI command to list the supported digest algorithms.
"""
import json
import click
from rich.console import Console
from rich.table import Table

from models.algorithm_kind import HashAlgorithmKind


@click.command('algorithms', help='List supported digest algorithms.')
@click.option('--json', 'as_json', is_flag=True, help="Print JSON instead of a table")
def algorithms(as_json: bool) -> None:
    """List algorithms with their raw digest size and hex length."""
    rows = [
        {"name": kind.value, "digest_size": kind.digest_size, "hex_length": kind.digest_size * 2}
        for kind in HashAlgorithmKind
    ]

    if as_json:
        click.echo(json.dumps(rows))
        return

    table = Table(title="Supported algorithms")
    table.add_column("Algorithm", style="cyan")
    table.add_column("Digest bytes", justify="right")
    table.add_column("Hex length", justify="right")
    for row in rows:
        table.add_row(row["name"], str(row["digest_size"]), str(row["hex_length"]))

    Console().print(table)
