"""Bytes -> symbols conversion."""

from typing import Union

from tinyland_basex.alphabet import AlphabetSource, as_alphabet
from tinyland_basex.bigint import BigUint, largest_power


def encode(alphabet: AlphabetSource, data: bytes) -> Union[str, bytes]:
    """Encode bytes using the given alphabet.

    Each leading zero byte becomes one zero symbol; the rest of the input is
    written as a base-B number, most significant digit first.

    Args:
        alphabet: A ``str`` (one symbol per character), a bytes-like value
            (one symbol per byte) or an ``Alphabet``.
        data: Bytes to encode.

    Returns:
        ``str`` for character alphabets, ``bytes`` for byte alphabets.

    Raises:
        TypeError: If ``data`` is not bytes-like.
        InvalidAlphabetError: If the alphabet is unusable.
    """
    alphabet = as_alphabet(alphabet)
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("Input must be bytes")
    data = bytes(data)

    leading_zeros = len(data) - len(data.lstrip(b"\x00"))

    # Each division by base**width yields width digits, low digit first
    chunk, width = largest_power(alphabet.base)
    num = BigUint.from_bytes(data)
    digits = []
    while not num.is_zero():
        num, rem = num.divmod_small(chunk)
        for _ in range(width):
            rem, digit = divmod(rem, alphabet.base)
            digits.append(digit)

    # The last chunk is zero-padded above the most significant digit
    while digits and digits[-1] == 0:
        digits.pop()

    symbols = [alphabet.zero] * leading_zeros
    symbols.extend(alphabet.symbol_at(digit) for digit in reversed(digits))
    return alphabet.join(symbols)
