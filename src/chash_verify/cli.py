import json
import click
from .logic import verify_contenthash

@click.group()
def main():
    pass

@main.command("hash")
@click.argument("content_hash")
@click.option("--expect", "expected_codec", default=None, help="Fail unless the hash uses this codec")
def hash_cmd(content_hash: str, expected_codec: str | None):
    result = verify_contenthash(content_hash, expected_codec)
    click.echo(json.dumps(result, sort_keys=True, separators=(",", ":"), ensure_ascii=False))

if __name__ == "__main__":
    main()
