"""Command-line interface for tinyland-basex.

Provides subcommands:
  encode     - Encode stdin with an alphabet
  decode     - Decode stdin with an alphabet
  alphabets  - List the named alphabets
  encode-b58 - Base58-encode data from stdin
  decode-b58 - Base58-decode data from stdin

The alphabet is taken from --alphabet, else from the environment variable
named by --alphabet-env (default: BASEX_ALPHABET), else base58. It may be a
registered name (see ``alphabets``) or the literal alphabet text.

Exit codes:
    0 - Success
    1 - Input contains a symbol outside the alphabet
    2 - Invalid command-line usage
    3 - Invalid alphabet
"""

import argparse
import logging
import os
import string
import sys
from typing import Union

from tinyland_basex.alphabet import Alphabet, ByteAlphabet, ScalarAlphabet
from tinyland_basex.alphabets import ALPHABETS
from tinyland_basex.base58 import b58decode, b58encode
from tinyland_basex.decoder import decode
from tinyland_basex.encoder import encode
from tinyland_basex.errors import DecodeError, InvalidAlphabetError

logger = logging.getLogger(__name__)

DEFAULT_ALPHABET = "base58"
DEFAULT_ALPHABET_ENV = "BASEX_ALPHABET"


def _resolve_alphabet(args) -> Alphabet:
    """Resolve the alphabet from CLI arguments and the environment.

    Exits with code 3 if the resulting alphabet is invalid.
    """
    source = getattr(args, "alphabet", None)
    origin = "--alphabet"
    if not source:
        env_var = getattr(args, "alphabet_env", None) or DEFAULT_ALPHABET_ENV
        source = os.environ.get(env_var)
        origin = env_var
    if not source:
        source = DEFAULT_ALPHABET
        origin = "default"

    if source in ALPHABETS:
        logger.debug("Using named alphabet %s (from %s)", source, origin)
        source = ALPHABETS[source]
    else:
        logger.debug("Using literal alphabet (from %s)", origin)

    try:
        if getattr(args, "bytes", False):
            return ByteAlphabet(source)
        return ScalarAlphabet(source)
    except InvalidAlphabetError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(3)


def _strip_input(alphabet: Alphabet, text: Union[str, bytes]):
    """Trim surrounding whitespace that is not itself an alphabet symbol."""
    trimmable = alphabet.join(
        symbol
        for symbol in alphabet.split(string.whitespace)
        if alphabet.digit_of(symbol) is None
    )
    return text.strip(trimmable)


def _write_output(value: Union[str, bytes]) -> None:
    if isinstance(value, bytes):
        sys.stdout.buffer.write(value)
    else:
        sys.stdout.write(value)


# ---------------------------------------------------------------------------
# Subcommand handlers
# ---------------------------------------------------------------------------


def cmd_encode(args) -> int:
    """Handle the 'encode' subcommand -- reads raw stdin, writes encoded."""
    alphabet = _resolve_alphabet(args)
    raw = sys.stdin.buffer.read()
    logger.debug("Encoding %d bytes with base-%d alphabet", len(raw), alphabet.base)
    _write_output(encode(alphabet, raw))
    return 0


def cmd_decode(args) -> int:
    """Handle the 'decode' subcommand -- reads encoded stdin, writes raw."""
    alphabet = _resolve_alphabet(args)
    if isinstance(alphabet, ByteAlphabet):
        encoded = sys.stdin.buffer.read()
    else:
        encoded = sys.stdin.read()
    encoded = _strip_input(alphabet, encoded)
    if not encoded:
        return 0

    logger.debug(
        "Decoding %d symbols with base-%d alphabet", len(encoded), alphabet.base
    )
    try:
        decoded = decode(alphabet, encoded)
    except DecodeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.buffer.write(decoded)
    return 0


def cmd_alphabets(args) -> int:
    """Handle the 'alphabets' subcommand."""
    for name, symbols in ALPHABETS.items():
        print(f"{name}\t{len(symbols)}\t{symbols}")
    return 0


def cmd_encode_b58(args) -> int:
    """Handle the 'encode-b58' subcommand -- reads stdin, writes base58."""
    raw = sys.stdin.buffer.read()
    encoded = b58encode(raw)
    sys.stdout.write(encoded)
    return 0


def cmd_decode_b58(args) -> int:
    """Handle the 'decode-b58' subcommand -- reads stdin, writes decoded."""
    encoded = sys.stdin.read().strip()
    if not encoded:
        return 0
    try:
        decoded = b58decode(encoded)
    except DecodeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.buffer.write(decoded)
    return 0


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


def _add_alphabet_args(parser: argparse.ArgumentParser) -> None:
    """Add common alphabet arguments to a subparser."""
    parser.add_argument(
        "-a",
        "--alphabet",
        default=None,
        help="Alphabet name (see 'alphabets') or literal alphabet text",
    )
    parser.add_argument(
        "--alphabet-env",
        default=DEFAULT_ALPHABET_ENV,
        help=f"Environment variable holding the alphabet (default: {DEFAULT_ALPHABET_ENV})",
    )
    parser.add_argument(
        "--bytes",
        action="store_true",
        help="Treat each byte of the alphabet as one symbol instead of each character",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="tinyland-basex",
        description="Binary-to-text encoding with any alphabet",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__import__('tinyland_basex').__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details to stderr",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # -- encode --
    p_enc = sub.add_parser("encode", help="Encode data from stdin")
    _add_alphabet_args(p_enc)
    p_enc.set_defaults(func=cmd_encode)

    # -- decode --
    p_dec = sub.add_parser("decode", help="Decode data from stdin")
    _add_alphabet_args(p_dec)
    p_dec.set_defaults(func=cmd_decode)

    # -- alphabets --
    p_list = sub.add_parser("alphabets", help="List the named alphabets")
    p_list.set_defaults(func=cmd_alphabets)

    # -- encode-b58 --
    p_enc58 = sub.add_parser("encode-b58", help="Base58-encode data from stdin")
    p_enc58.set_defaults(func=cmd_encode_b58)

    # -- decode-b58 --
    p_dec58 = sub.add_parser("decode-b58", help="Base58-decode data from stdin")
    p_dec58.set_defaults(func=cmd_decode_b58)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    return args.func(args)
