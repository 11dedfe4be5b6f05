"""Tests for CLI argument parsing and subcommand dispatch."""

import io
import logging
from unittest import mock

import pytest

from tinyland_basex.alphabet import ByteAlphabet, ScalarAlphabet
from tinyland_basex.alphabets import ALPHABETS
from tinyland_basex.base58 import b58encode, b58encode_str
from tinyland_basex.cli import (
    _resolve_alphabet,
    build_parser,
    cmd_decode,
    cmd_decode_b58,
    cmd_encode,
    cmd_encode_b58,
    main,
)


def _binary_stdout():
    """A stdout stand-in whose .buffer collects raw bytes."""
    out = mock.MagicMock()
    out.buffer = io.BytesIO()
    return out


@pytest.fixture(autouse=True)
def _clean_alphabet_env(monkeypatch):
    monkeypatch.delenv("BASEX_ALPHABET", raising=False)


# ---------------------------------------------------------------------------
# Parser construction tests
# ---------------------------------------------------------------------------


class TestParser:
    """Verify that the argument parser accepts valid inputs and rejects bad ones."""

    def test_encode_minimal(self):
        args = build_parser().parse_args(["encode"])
        assert args.command == "encode"
        assert args.alphabet is None
        assert args.alphabet_env == "BASEX_ALPHABET"
        assert args.bytes is False
        assert args.verbose is False

    def test_decode_with_options(self):
        args = build_parser().parse_args(
            ["decode", "-a", "base64", "--alphabet-env", "MY_ALPHA", "--bytes"]
        )
        assert args.command == "decode"
        assert args.alphabet == "base64"
        assert args.alphabet_env == "MY_ALPHA"
        assert args.bytes is True

    def test_verbose_before_subcommand(self):
        args = build_parser().parse_args(["-v", "alphabets"])
        assert args.verbose is True
        assert args.command == "alphabets"

    @pytest.mark.parametrize("command", ["alphabets", "encode-b58", "decode-b58"])
    def test_argless_subcommands(self, command):
        assert build_parser().parse_args([command]).command == command

    def test_no_subcommand_raises(self):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args([])
        assert exc_info.value.code == 2

    def test_unknown_subcommand_raises(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["bogus"])

    def test_version_flag(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "0.1.0" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# Alphabet resolution
# ---------------------------------------------------------------------------


class TestAlphabetResolution:
    """Verify alphabet precedence: --alphabet, then env var, then base58."""

    def test_default_is_base58(self):
        args = build_parser().parse_args(["encode"])
        assert _resolve_alphabet(args) == ScalarAlphabet(ALPHABETS["base58"])

    def test_named_alphabet(self):
        args = build_parser().parse_args(["encode", "--alphabet", "base16"])
        assert _resolve_alphabet(args) == ScalarAlphabet(ALPHABETS["base16"])

    def test_literal_alphabet(self):
        args = build_parser().parse_args(["encode", "--alphabet", "xyz"])
        assert _resolve_alphabet(args) == ScalarAlphabet("xyz")

    def test_from_default_env(self, monkeypatch):
        monkeypatch.setenv("BASEX_ALPHABET", "base2")
        args = build_parser().parse_args(["encode"])
        assert _resolve_alphabet(args) == ScalarAlphabet("01")

    def test_from_custom_env(self, monkeypatch):
        monkeypatch.setenv("MY_ALPHA", "ab")
        args = build_parser().parse_args(["encode", "--alphabet-env", "MY_ALPHA"])
        assert _resolve_alphabet(args) == ScalarAlphabet("ab")

    def test_argument_takes_precedence_over_env(self, monkeypatch):
        monkeypatch.setenv("BASEX_ALPHABET", "base2")
        args = build_parser().parse_args(["encode", "-a", "base8"])
        assert _resolve_alphabet(args) == ScalarAlphabet(ALPHABETS["base8"])

    def test_bytes_flag(self):
        args = build_parser().parse_args(["encode", "-a", "base2", "--bytes"])
        assert _resolve_alphabet(args) == ByteAlphabet(b"01")

    @pytest.mark.parametrize("literal", ["x", "aab"])
    def test_invalid_alphabet_exits_3(self, literal, capsys):
        args = build_parser().parse_args(["encode", "-a", literal])
        with pytest.raises(SystemExit) as exc_info:
            _resolve_alphabet(args)
        assert exc_info.value.code == 3
        assert "error" in capsys.readouterr().err.lower()

    def test_unencodable_bytes_alphabet_exits_3(self, capsys):
        args = build_parser().parse_args(["encode", "-a", "a\udcff", "--bytes"])
        with pytest.raises(SystemExit) as exc_info:
            _resolve_alphabet(args)
        assert exc_info.value.code == 3
        assert "UTF-8" in capsys.readouterr().err

    def test_invalid_env_alphabet_exits_3(self, monkeypatch):
        monkeypatch.setenv("BASEX_ALPHABET", "zz")
        with mock.patch("sys.stdin", new=io.TextIOWrapper(io.BytesIO(b"x"))):
            with pytest.raises(SystemExit) as exc_info:
                main(["encode"])
        assert exc_info.value.code == 3


# ---------------------------------------------------------------------------
# encode / decode subcommands
# ---------------------------------------------------------------------------


class TestEncodeSubcommand:
    def test_encode_default_alphabet(self):
        args = build_parser().parse_args(["encode"])

        with mock.patch("sys.stdin", new=io.TextIOWrapper(io.BytesIO(b"hello"))):
            with mock.patch("sys.stdout", new_callable=io.StringIO) as mock_out:
                rc = cmd_encode(args)

        assert rc == 0
        assert mock_out.getvalue() == b58encode(b"hello")

    def test_encode_binary_alphabet(self):
        with mock.patch("sys.stdin", new=io.TextIOWrapper(io.BytesIO(b"\x00\x05"))):
            with mock.patch("sys.stdout", new_callable=io.StringIO) as mock_out:
                rc = main(["encode", "-a", "base2"])

        assert rc == 0
        assert mock_out.getvalue() == "0101"

    def test_encode_bytes_mode_writes_raw(self):
        args = build_parser().parse_args(["encode", "-a", "base16", "--bytes"])

        with mock.patch("sys.stdin", new=io.TextIOWrapper(io.BytesIO(b"\x0f\xff"))):
            with mock.patch("sys.stdout", new=_binary_stdout()) as mock_out:
                rc = cmd_encode(args)

        assert rc == 0
        assert mock_out.buffer.getvalue() == b"fff"

    def test_encode_empty(self):
        args = build_parser().parse_args(["encode"])

        with mock.patch("sys.stdin", new=io.TextIOWrapper(io.BytesIO(b""))):
            with mock.patch("sys.stdout", new_callable=io.StringIO) as mock_out:
                rc = cmd_encode(args)

        assert rc == 0
        assert mock_out.getvalue() == ""


class TestDecodeSubcommand:
    def test_decode_named_alphabet(self):
        args = build_parser().parse_args(["decode", "-a", "base64"])

        with mock.patch("sys.stdin", new=io.StringIO("AD/\n")):
            with mock.patch("sys.stdout", new=_binary_stdout()) as mock_out:
                rc = cmd_decode(args)

        assert rc == 0
        assert mock_out.buffer.getvalue() == b"\x00\xff"

    def test_decode_strips_whitespace(self):
        args = build_parser().parse_args(["decode"])

        with mock.patch("sys.stdin", new=io.StringIO(f"  {b58encode_str('data')}  \n\n")):
            with mock.patch("sys.stdout", new=_binary_stdout()) as mock_out:
                rc = cmd_decode(args)

        assert rc == 0
        assert mock_out.buffer.getvalue() == b"data"

    def test_decode_keeps_whitespace_symbols(self):
        """A space that belongs to the alphabet is a digit, not padding."""
        args = build_parser().parse_args(["decode", "-a", " x"])

        with mock.patch("sys.stdin", new=io.StringIO("  x\n")):
            with mock.patch("sys.stdout", new=_binary_stdout()) as mock_out:
                rc = cmd_decode(args)

        assert rc == 0
        assert mock_out.buffer.getvalue() == b"\x00\x00\x01"

    def test_decode_bytes_mode(self):
        args = build_parser().parse_args(["decode", "-a", "base2", "--bytes"])
        stdin = io.TextIOWrapper(io.BytesIO(b"11111111\n"))

        with mock.patch("sys.stdin", new=stdin):
            with mock.patch("sys.stdout", new=_binary_stdout()) as mock_out:
                rc = cmd_decode(args)

        assert rc == 0
        assert mock_out.buffer.getvalue() == b"\xff"

    def test_decode_empty(self):
        args = build_parser().parse_args(["decode"])

        with mock.patch("sys.stdin", new=io.StringIO("\n")):
            rc = cmd_decode(args)

        assert rc == 0

    def test_decode_invalid_symbol(self, capsys):
        args = build_parser().parse_args(["decode", "-a", "base2"])

        with mock.patch("sys.stdin", new=io.StringIO("0102")):
            rc = cmd_decode(args)

        assert rc == 1
        err = capsys.readouterr().err
        assert "error" in err.lower()
        assert "position 3" in err


class TestAlphabetsSubcommand:
    def test_lists_every_alphabet(self, capsys):
        rc = main(["alphabets"])

        assert rc == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == len(ALPHABETS)
        assert "base58\t58\t" + ALPHABETS["base58"] in lines


# ---------------------------------------------------------------------------
# encode-b58 / decode-b58 subcommands
# ---------------------------------------------------------------------------


class TestBase58Subcommands:
    def test_encode_binary(self):
        args = build_parser().parse_args(["encode-b58"])
        data = bytes(range(256))

        with mock.patch("sys.stdin", new=io.TextIOWrapper(io.BytesIO(data))):
            with mock.patch("sys.stdout", new_callable=io.StringIO) as mock_out:
                rc = cmd_encode_b58(args)

        assert rc == 0
        assert mock_out.getvalue() == b58encode(data)

    def test_decode_known_value(self):
        args = build_parser().parse_args(["decode-b58"])

        with mock.patch("sys.stdin", new=io.StringIO(b58encode_str("hello") + "\n")):
            with mock.patch("sys.stdout", new=_binary_stdout()) as mock_out:
                rc = cmd_decode_b58(args)

        assert rc == 0
        assert mock_out.buffer.getvalue() == b"hello"

    def test_decode_invalid_char(self, capsys):
        args = build_parser().parse_args(["decode-b58"])

        with mock.patch("sys.stdin", new=io.StringIO("0OIl")):
            rc = cmd_decode_b58(args)

        assert rc == 1
        assert "error" in capsys.readouterr().err.lower()


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


class TestLogging:
    def test_verbose_logs_alphabet_choice(self, caplog):
        caplog.set_level(logging.DEBUG, logger="tinyland_basex.cli")

        with mock.patch("sys.stdin", new=io.TextIOWrapper(io.BytesIO(b"hi"))):
            with mock.patch("sys.stdout", new_callable=io.StringIO):
                rc = main(["-v", "encode", "-a", "base36"])

        assert rc == 0
        messages = [record.getMessage() for record in caplog.records]
        assert "Using named alphabet base36 (from --alphabet)" in messages
        assert "Encoding 2 bytes with base-36 alphabet" in messages

    def test_payload_is_not_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="tinyland_basex.cli")

        with mock.patch("sys.stdin", new=io.TextIOWrapper(io.BytesIO(b"secret"))):
            with mock.patch("sys.stdout", new_callable=io.StringIO):
                main(["-v", "encode"])

        assert "secret" not in caplog.text
