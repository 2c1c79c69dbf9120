"""chash - content hash command line."""
from __future__ import annotations

import click

from . import contenthash, multicodec


def _fatal(e: Exception) -> None:
    # Single-line reason, no stack trace.
    click.echo(f"FATAL: {e}")
    raise SystemExit(1)


@click.group()
def main():
    pass


@main.command("decode")
@click.argument("content_hash")
def decode_cmd(content_hash: str):
    """Decode a hex content hash."""
    try:
        click.echo(contenthash.decode(content_hash))
    except Exception as e:
        _fatal(e)


@main.command("encode")
@click.argument("codec")
@click.argument("value")
def encode_cmd(codec: str, value: str):
    """Encode VALUE under CODEC as a hex content hash."""
    try:
        click.echo(contenthash.encode(codec, value))
    except Exception as e:
        _fatal(e)


@main.command("codec")
@click.argument("content_hash")
def codec_cmd(content_hash: str):
    """Print the codec of a hex content hash."""
    name = contenthash.get_codec(content_hash)
    if name is None:
        click.echo("FATAL: unknown codec")
        raise SystemExit(1)
    click.echo(name)


@main.command("cid-v1")
@click.argument("cid")
def cid_v1_cmd(cid: str):
    """Convert a CID to base32 CIDv1."""
    try:
        click.echo(contenthash.cid_v0_to_v1_base32(cid))
    except Exception as e:
        _fatal(e)


@main.command("table")
def table_cmd():
    """List the loaded multicodec table."""
    for entry in multicodec.table():
        click.echo(f"{entry.code:#06x} {entry.name}")


if __name__ == "__main__":
    main()
