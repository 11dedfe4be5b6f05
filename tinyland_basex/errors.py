"""Exceptions raised by tinyland-basex."""

from typing import Union


class BaseXError(Exception):
    """Base exception for base conversion operations."""


class InvalidAlphabetError(BaseXError, ValueError):
    """Raised when an alphabet has fewer than two symbols, repeats one, or
    holds text that is not valid Unicode."""


class DecodeError(BaseXError, ValueError):
    """Raised when encoded input contains a symbol absent from the alphabet.

    Attributes:
        symbol: The offending symbol, as a one-symbol ``str`` or ``bytes``
            value matching the alphabet's output type.
        position: Character index within ``str`` input, byte offset within
            bytes input. For a byte alphabet decoding ``str``, this is the
            character that contains the offending byte.
    """

    def __init__(self, symbol: Union[str, bytes], position: int):
        self.symbol = symbol
        self.position = position
        super().__init__(f"Invalid character {symbol!r} at position {position}")
