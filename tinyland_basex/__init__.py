"""Tinyland BaseX - binary-to-text encoding with any alphabet.

Converts bytes to text in an arbitrary base (base2, base58, base64, or an
alphabet of multi-byte Unicode symbols) and back, preserving leading zero
bytes. Includes base58 helpers and a small CLI.
"""

__version__ = "0.1.0"

from tinyland_basex.errors import (  # noqa: F401
    BaseXError,
    DecodeError,
    InvalidAlphabetError,
)
from tinyland_basex.alphabet import (  # noqa: F401
    Alphabet,
    ByteAlphabet,
    ScalarAlphabet,
    as_alphabet,
)
from tinyland_basex.alphabets import ALPHABETS, get_alphabet  # noqa: F401
from tinyland_basex.encoder import encode  # noqa: F401
from tinyland_basex.decoder import decode  # noqa: F401
from tinyland_basex.base58 import (  # noqa: F401
    b58encode,
    b58decode,
    b58encode_str,
    b58decode_str,
)
from tinyland_basex.cli import main  # noqa: F401
