"""Command-line interface for the Rijndael cipher core.

Usage:
    rijndael encrypt --key <hex> --text "hello world"
    rijndael decrypt --key <hex> --hex <ciphertext hex> --utf8
    rijndael expand-key --key <hex>
    rijndael keygen --bits 256
    rijndael validate --n 100 --seed 42
"""

from __future__ import annotations

import base64
import logging
import random
import secrets
import sys
from typing import TextIO

import click

from . import __version__
from .cipher import RijndaelCipher, encrypt_block
from .config import CipherConfig
from .errors import RijndaelError
from .golden import FIPS_197_TEST_VECTORS, validate_against_golden
from .key_schedule import expand_key
from .strategies import STRATEGIES, list_strategies
from .trace import TraceRecorder, print_header, print_result
from .utils import hex_to_bytes, bytes_to_hex


def _parse_hex(value: str, what: str) -> bytes:
    try:
        return hex_to_bytes(value)
    except ValueError as e:
        raise click.BadParameter(f"Invalid {what} hex: {e}") from None


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="rijndael")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool) -> None:
    """Rijndael/AES block cipher (ECB, PKCS#7 padding).

    Keys are given as hex: 32, 48 or 64 hex chars for 128, 192 or
    256-bit keys.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


@main.command()
@click.option("--key", "key_hex", required=True, help="Cipher key as hex")
@click.option("--text", default=None, help="Plaintext as a UTF-8 string")
@click.option("--hex", "pt_hex", default=None, help="Plaintext as hex")
@click.option(
    "--strategy",
    type=click.Choice(list(STRATEGIES.keys())),
    default="serial",
    help="Block processing strategy (default: serial)",
)
@click.option("--workers", type=int, default=1, help="Worker threads (default: 1)")
@click.option("--verbose", "-v", is_flag=True, help="Print per-operation states")
@click.option(
    "--trace",
    "trace_file",
    type=click.File("w"),
    default=None,
    help="Write a JSON Lines trace to FILE",
)
def encrypt(
    key_hex: str,
    text: str | None,
    pt_hex: str | None,
    strategy: str,
    workers: int,
    verbose: bool,
    trace_file: TextIO | None,
) -> None:
    """Encrypt a message and print the ciphertext as hex."""
    if (text is None) == (pt_hex is None):
        _fail("Exactly one of --text or --hex is required")

    key = _parse_hex(key_hex, "key")
    plaintext = text.encode("utf-8") if text is not None else _parse_hex(pt_hex, "plaintext")

    tracer = None
    if verbose or trace_file:
        tracer = TraceRecorder(verbose=verbose, trace_file=trace_file)

    try:
        cipher = RijndaelCipher(
            key, CipherConfig(strategy=strategy, workers=workers), tracer=tracer
        )
        if verbose:
            print_header(f"AES-{len(key) * 8} Encryption ({cipher.rounds} rounds)")
        ciphertext = cipher.encrypt(plaintext)
    except (RijndaelError, ValueError) as e:
        _fail(str(e))

    if verbose:
        print_result("Ciphertext", bytes_to_hex(ciphertext), len(ciphertext) // 16)
    else:
        click.echo(bytes_to_hex(ciphertext))


@main.command()
@click.option("--key", "key_hex", required=True, help="Cipher key as hex")
@click.option("--hex", "ct_hex", required=True, help="Ciphertext as hex")
@click.option("--utf8", is_flag=True, help="Print the plaintext as UTF-8 text")
@click.option(
    "--strategy",
    type=click.Choice(list(STRATEGIES.keys())),
    default="serial",
    help="Block processing strategy (default: serial)",
)
@click.option("--workers", type=int, default=1, help="Worker threads (default: 1)")
def decrypt(key_hex: str, ct_hex: str, utf8: bool, strategy: str, workers: int) -> None:
    """Decrypt a hex ciphertext."""
    key = _parse_hex(key_hex, "key")
    ciphertext = _parse_hex(ct_hex, "ciphertext")

    try:
        cipher = RijndaelCipher(key, CipherConfig(strategy=strategy, workers=workers))
        plaintext = cipher.decrypt(ciphertext)
    except (RijndaelError, ValueError) as e:
        _fail(str(e))

    if utf8:
        try:
            click.echo(plaintext.decode("utf-8"))
        except UnicodeDecodeError as e:
            _fail(f"Plaintext is not valid UTF-8: {e}")
    else:
        click.echo(bytes_to_hex(plaintext))


@main.command(name="expand-key")
@click.option("--key", "key_hex", required=True, help="Cipher key as hex")
def expand_key_cmd(key_hex: str) -> None:
    """Print the round keys, one per line."""
    key = _parse_hex(key_hex, "key")
    try:
        round_keys = expand_key(key)
    except RijndaelError as e:
        _fail(str(e))

    for round_num, rk in enumerate(round_keys):
        click.echo(f"round[{round_num:2d}] {bytes_to_hex(rk)}")


@main.command()
@click.option(
    "--bits",
    type=click.Choice(["128", "192", "256"]),
    default="128",
    help="Key size in bits (default: 128)",
)
@click.option("--base64", "as_base64", is_flag=True, help="Print the key as base64")
def keygen(bits: str, as_base64: bool) -> None:
    """Generate a random key from the OS CSPRNG."""
    key = secrets.token_bytes(int(bits) // 8)
    if as_base64:
        click.echo(base64.b64encode(key).decode("ascii"))
    else:
        click.echo(bytes_to_hex(key))


@main.command(name="strategies")
def strategies_cmd() -> None:
    """List available block processing strategies."""
    click.echo("Available strategies:")
    click.echo("")
    for strat in list_strategies():
        click.echo(f"  {strat['name']}")
        click.echo(f"    {strat['description']}")
        click.echo("")


@main.command()
@click.option(
    "--n",
    "num_tests",
    type=int,
    default=100,
    help="Number of random messages (default: 100)",
)
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option("--verbose", "-v", is_flag=True, help="Show detailed output")
def validate(num_tests: int, seed: int | None, verbose: bool) -> None:
    """Validate against FIPS-197 vectors and the PyCryptodome reference."""
    click.echo("Running FIPS-197 KAT tests...")
    fips_passed = 0

    for vec in FIPS_197_TEST_VECTORS:
        round_keys = expand_key(vec["key"])
        ciphertext = encrypt_block(vec["plaintext"], round_keys)
        if ciphertext == vec["ciphertext"]:
            fips_passed += 1
            if verbose:
                click.echo(f"  {vec['name']}: PASS")
        else:
            click.echo(
                f"  {vec['name']}: FAIL - expected {bytes_to_hex(vec['ciphertext'])}, "
                f"got {bytes_to_hex(ciphertext)}"
            )

    click.echo(f"FIPS-197 tests: {fips_passed}/{len(FIPS_197_TEST_VECTORS)} passed")

    click.echo(f"\nRunning {num_tests} random tests...")
    if seed is not None:
        rng = random.Random(seed)
        random_bytes = lambda n: bytes(rng.randint(0, 255) for _ in range(n))
        pick = rng.choice
        length = lambda: rng.randint(0, 64)
    else:
        random_bytes = secrets.token_bytes
        pick = secrets.choice
        length = lambda: secrets.randbelow(65)

    random_passed = 0
    for i in range(num_tests):
        key = random_bytes(pick((16, 24, 32)))
        message = random_bytes(length())

        cipher = RijndaelCipher(key)
        ciphertext = cipher.encrypt(message)
        correct, error_detail = validate_against_golden(key, message, ciphertext)
        if correct and cipher.decrypt(ciphertext) != message:
            correct, error_detail = False, "Decryption did not restore the message"

        if correct:
            random_passed += 1
        elif verbose:
            click.echo(f"  Random test {i+1}: FAIL - {error_detail}")

    click.echo(f"Random tests: {random_passed}/{num_tests} passed")

    total_passed = fips_passed + random_passed
    total_tests = len(FIPS_197_TEST_VECTORS) + num_tests

    click.echo("")
    if total_passed == total_tests:
        click.echo(f"VALIDATION PASSED: All {total_tests} tests passed")
        sys.exit(0)
    else:
        click.echo(f"VALIDATION FAILED: {total_tests - total_passed} failures")
        sys.exit(1)


if __name__ == "__main__":
    main()
