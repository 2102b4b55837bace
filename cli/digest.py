"""
CLI command to hash data chunks with one algorithm and print the digest.
"""
import os
import logging
import click

from models.algorithm_kind import HashAlgorithmKind
from models.digest_record import DigestRecord
from services.hashing_errors import HashingError
from services.hashing_service import HashSession
from utils.cli_helpers import get_settings_from_context, report_hashing_error
from utils.config.config_validator import encoding_selector_from_text
from utils.encoding_selector import parse_encoding

logger = logging.getLogger(__name__)


@click.command('digest', help='Hash CHUNKS in order and print the digest.')
@click.option('--algorithm', '-a', required=True,
              type=click.Choice([kind.value for kind in HashAlgorithmKind], case_sensitive=False),
              help="Digest algorithm")
@click.option('--encoding', '-e', default=None,
              help="utf8, base64 or hex (or ordinal 0, 1, 2). Defaults to the configured encoding.")
@click.option('--json', 'as_json', is_flag=True, help="Print a JSON record instead of the bare digest")
@click.argument('chunks', nargs=-1)
@click.pass_context
def digest(ctx: click.Context, algorithm: str, encoding: str, as_json: bool, chunks: tuple) -> None:
    """
    Hash the given chunks with a single session.

    Examples:
        digestkit digest -a sha256 abc
        digestkit digest -a md5 -e base64 part1 part2

    Args:
        ctx (click.Context): Click context containing shared settings.
        algorithm (str): Algorithm name.
        encoding (str): Encoding selector, or None for the configured default.
        as_json (bool): Emit a DigestRecord as JSON.
        chunks (tuple): Data chunks, hashed in order.
    """
    settings = get_settings_from_context(ctx)

    try:
        if encoding is None:
            kind = settings.default_encoding
        else:
            kind = parse_encoding(encoding_selector_from_text(encoding))

        session = HashSession.new(algorithm, lock_timeout=settings.lock_timeout)
        total = 0
        for chunk in chunks:
            data = os.fsencode(chunk)
            total += len(data)
            session.update(data)
        rendered = session.digest(kind)
    except HashingError as e:
        report_hashing_error(ctx, e)
        return

    logger.info(f"Hashed {len(chunks)} chunks ({total} bytes) with {session.algorithm.value}")

    if as_json:
        record = DigestRecord(
            algorithm=session.algorithm,
            encoding=kind.label,
            digest=rendered,
            digest_size=session.digest_size,
            chunks=len(chunks),
            bytes_hashed=total,
        )
        click.echo(record.model_dump_json())
    else:
        click.echo(rendered)
