"""CLI for TxSecure record encryption."""
import json
import sys
from typing import NoReturn, Optional

import click

from txsecure.dependencies import get_master_key
from txsecure.domain.crypto.envelope import decrypt_record, encrypt_payload
from txsecure.domain.crypto.errors import EnvelopeError, TamperDetected

EXIT_TAMPER = 1
EXIT_INVALID = 2


def _resolve_master_key(master_key: Optional[str]) -> str:
    if master_key:
        return master_key
    return get_master_key()


def _fail(exc: EnvelopeError) -> NoReturn:
    if isinstance(exc, TamperDetected):
        click.echo("Error: Integrity check failed: Data may have been tampered with", err=True)
        sys.exit(EXIT_TAMPER)
    click.echo(f"Error: {exc.message}", err=True)
    sys.exit(EXIT_INVALID)


@click.group()
def cli():
    """TxSecure CLI."""
    pass


@cli.command("encrypt")
@click.option("--party-id", required=True, help="Opaque party label stored with the record")
@click.option("--payload", default=None, help="JSON payload (read from stdin if omitted)")
@click.option("--master-key", default=None, envvar="MASTER_KEY_HEX", show_envvar=True,
              help="64 hex char master key")
def encrypt_cmd(party_id: str, payload: Optional[str], master_key: Optional[str]):
    """Encrypt a JSON payload and print the record."""
    raw = payload if payload is not None else click.get_text_stream("stdin").read()
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        click.echo("Error: Invalid JSON payload", err=True)
        sys.exit(EXIT_INVALID)

    try:
        record = encrypt_payload(value, party_id, _resolve_master_key(master_key))
    except EnvelopeError as e:
        _fail(e)

    click.echo(json.dumps(record.to_wire(), indent=2))


@cli.command("decrypt")
@click.option("--record", "record_file", type=click.File("r"), default="-",
              help="Record JSON file (default: stdin)")
@click.option("--master-key", default=None, envvar="MASTER_KEY_HEX", show_envvar=True,
              help="64 hex char master key")
def decrypt_cmd(record_file, master_key: Optional[str]):
    """Decrypt a record and print the payload."""
    try:
        data = json.load(record_file)
    except json.JSONDecodeError:
        click.echo("Error: Invalid JSON record", err=True)
        sys.exit(EXIT_INVALID)

    try:
        payload = decrypt_record(data, _resolve_master_key(master_key))
    except EnvelopeError as e:
        _fail(e)

    click.echo(json.dumps(payload, indent=2))


if __name__ == "__main__":
    cli()
