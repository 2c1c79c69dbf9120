import json
import os
import subprocess
import sys
from pathlib import Path

from click.testing import CliRunner

from chash_codec.cli import main as chash
from chash_verify.cli import main as chash_verify

IPFS_HASH = "e30101701220c27f5a54fefc77ff1b2980461286628736f3f410f7e446da3266cdfff3d049c6"
IPFS_CID = "QmbRtS9dp2zqARv7v7ak2reJp3zE5NRkvEpHsc48Hjo9MF"


def run(args, cwd):
    env = dict(os.environ, PYTHONPATH=str(cwd / "src"))
    return subprocess.run([sys.executable, *args], cwd=cwd, env=env, check=False, capture_output=True, text=True)


def test_decode_encode_commands():
    runner = CliRunner()
    r = runner.invoke(chash, ["decode", IPFS_HASH])
    assert r.exit_code == 0, r.output
    assert r.output.strip() == IPFS_CID

    r = runner.invoke(chash, ["encode", "ipfs-ns", IPFS_CID])
    assert r.exit_code == 0, r.output
    assert r.output.strip() == IPFS_HASH

    r = runner.invoke(chash, ["codec", IPFS_HASH])
    assert r.output.strip() == "ipfs-ns"

    r = runner.invoke(chash, ["cid-v1", IPFS_CID])
    assert r.output.strip() == "bafybeigcp5nfj7x4o77rwkmaiyjimyuhg3z7iehx4rdnumtgzx77hucjyy"


def test_failures_exit_nonzero():
    runner = CliRunner()
    r = runner.invoke(chash, ["decode", "e30"])
    assert r.exit_code == 1
    assert r.output.startswith("FATAL:")

    r = runner.invoke(chash, ["encode", "no-such-codec", "x"])
    assert r.exit_code == 1

    r = runner.invoke(chash, ["codec", "ff7f00"])
    assert r.exit_code == 1


def test_table_command():
    r = CliRunner().invoke(chash, ["table"])
    assert r.exit_code == 0
    lines = r.output.splitlines()
    assert "0x00e3 ipfs-ns" in lines
    assert "0xb29910 arweave-ns" in lines


def test_verify_command_prints_canonical_json():
    r = CliRunner().invoke(chash_verify, ["hash", IPFS_HASH, "--expect", "ipfs-ns"])
    assert r.exit_code == 0
    out = r.output.strip()
    result = json.loads(out)
    assert result["status"] == "PASS"
    assert out == json.dumps(result, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def test_module_entry_point():
    repo = Path(__file__).resolve().parents[1]
    r = run(["-m", "chash_codec.cli", "decode", IPFS_HASH], cwd=repo)
    assert r.returncode == 0, r.stderr + r.stdout
    assert r.stdout.strip() == IPFS_CID

    r = run(["-m", "chash_codec.cli", "decode", "zz"], cwd=repo)
    assert r.returncode != 0
