"""Symbols -> bytes conversion."""

from typing import Union

from tinyland_basex.alphabet import AlphabetSource, as_alphabet
from tinyland_basex.bigint import BigUint, largest_power
from tinyland_basex.errors import DecodeError


def decode(alphabet: AlphabetSource, text: Union[str, bytes]) -> bytes:
    """Decode text produced by ``encode`` with the same alphabet.

    Each leading zero symbol becomes one zero byte; the remaining symbols
    are read as a base-B number, most significant digit first.

    Args:
        alphabet: A ``str`` (one symbol per character), a bytes-like value
            (one symbol per byte) or an ``Alphabet``.
        text: Encoded input. Character alphabets take ``str``; byte
            alphabets take bytes-like input or a ``str``, read as UTF-8.

    Returns:
        The decoded bytes.

    Raises:
        DecodeError: If ``text`` contains a symbol outside the alphabet.
        TypeError: If ``text`` has the wrong type for the alphabet.
        InvalidAlphabetError: If the alphabet is unusable.
    """
    alphabet = as_alphabet(alphabet)
    symbols = alphabet.split(text)
    base = alphabet.base

    leading_zeros = 0
    for symbol in symbols:
        if symbol == alphabet.zero:
            leading_zeros += 1
        else:
            break

    # Digits are gathered width at a time into one small chunk per pass
    chunk, width = largest_power(base)
    num = BigUint.zero()
    value = count = 0
    for position in range(leading_zeros, len(symbols)):
        symbol = symbols[position]
        digit = alphabet.digit_of(symbol)
        if digit is None:
            raise DecodeError(
                alphabet.join([symbol]), alphabet.position_in(text, position)
            )
        value = value * base + digit
        count += 1
        if count == width:
            num = num.mul_add_small(chunk, value)
            value = count = 0
    if count:
        num = num.mul_add_small(base**count, value)

    return b"\x00" * leading_zeros + num.to_bytes()
