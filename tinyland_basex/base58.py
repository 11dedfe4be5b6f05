"""Base58 codec (Bitcoin alphabet) built on the generic base conversion.

Provides encoding/decoding of arbitrary bytes and text strings.
"""

from tinyland_basex.alphabet import ScalarAlphabet
from tinyland_basex.alphabets import ALPHABETS
from tinyland_basex.decoder import decode
from tinyland_basex.encoder import encode

BITCOIN_ALPHABET = ALPHABETS["base58"]
_B58 = ScalarAlphabet(BITCOIN_ALPHABET)


def b58encode(data: bytes) -> str:
    """Encode bytes to a base58 string using the Bitcoin alphabet."""
    return encode(_B58, data)


def b58decode(encoded: str) -> bytes:
    """Decode a base58 string to bytes using the Bitcoin alphabet."""
    return decode(_B58, encoded)


def b58encode_str(text: str, encoding: str = "utf-8") -> str:
    """Encode a text string to base58."""
    return b58encode(text.encode(encoding))


def b58decode_str(encoded: str, encoding: str = "utf-8") -> str:
    """Decode a base58 string to text."""
    return b58decode(encoded).decode(encoding)
