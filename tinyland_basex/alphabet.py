"""Symbol alphabets: ordered, duplicate-free symbol <-> digit mappings.

Two kinds of alphabet share one lookup contract:

  - ``ByteAlphabet``   each symbol is a single byte; output is ``bytes``
  - ``ScalarAlphabet`` each symbol is one Unicode character, however many
                       bytes it takes once encoded; output is ``str``

The symbol at index 0 is the zero symbol, used to carry leading zero bytes
through a conversion.
"""

from typing import Hashable, Iterable, Optional, Sequence, Union

from tinyland_basex.errors import InvalidAlphabetError

AlphabetSource = Union["Alphabet", str, bytes, bytearray, memoryview]

_BYTES_LIKE = (bytes, bytearray, memoryview)


class Alphabet:
    """Common lookup behaviour for both alphabet kinds.

    Subclasses supply ``split`` (input value -> symbols) and ``join``
    (symbols -> output value).
    """

    __slots__ = ("_symbols", "_digits")

    def __init__(self, symbols: Sequence[Hashable]):
        symbols = tuple(symbols)
        if len(symbols) < 2:
            raise InvalidAlphabetError(
                f"Alphabet needs at least 2 symbols, got {len(symbols)}"
            )

        digits = {}
        for index, symbol in enumerate(symbols):
            if symbol in digits:
                raise InvalidAlphabetError(
                    f"Duplicate symbol {self.describe(symbol)} in alphabet "
                    f"(positions {digits[symbol]} and {index})"
                )
            digits[symbol] = index

        self._symbols = symbols
        self._digits = digits

    @property
    def base(self) -> int:
        return len(self._symbols)

    @property
    def zero(self):
        """The symbol standing for digit 0."""
        return self._symbols[0]

    def __len__(self) -> int:
        return len(self._symbols)

    def digit_of(self, symbol) -> Optional[int]:
        """Return the digit value of ``symbol``, or None if it is unknown."""
        return self._digits.get(symbol)

    def symbol_at(self, index: int):
        return self._symbols[index]

    def describe(self, symbol) -> str:
        """Printable form of one symbol, for error messages."""
        return repr(symbol)

    def position_in(self, text, offset: int) -> int:
        """Map an index into ``split(text)`` back to a position in ``text``."""
        return offset

    def split(self, text) -> Sequence:
        raise NotImplementedError

    def join(self, symbols: Iterable):
        raise NotImplementedError

    def __eq__(self, other) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return type(self) is type(other) and self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash((type(self), self._symbols))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._symbols!r})"


class ByteAlphabet(Alphabet):
    """Alphabet of single-byte symbols.

    A ``str`` source is taken as its UTF-8 bytes, one symbol per byte.
    Decoded ``str`` input is read the same way; lone surrogates in it are
    kept as their three-byte forms, which then fail as unknown symbols.
    """

    __slots__ = ()

    def __init__(self, source: Union[str, bytes, bytearray, memoryview]):
        if isinstance(source, str):
            try:
                source = source.encode("utf-8")
            except UnicodeEncodeError as exc:
                raise InvalidAlphabetError(
                    f"Alphabet text cannot be encoded as UTF-8: {exc.reason}"
                ) from exc
        elif not isinstance(source, _BYTES_LIKE):
            raise TypeError("Byte alphabet must be bytes or str")
        super().__init__(bytes(source))

    def describe(self, symbol: int) -> str:
        return repr(bytes([symbol]))

    def position_in(self, text, offset: int) -> int:
        """For ``str`` input, turn a UTF-8 byte offset into a character index."""
        if not isinstance(text, str):
            return offset
        encoded = self.split(text)[: offset + 1]
        # Count the characters starting at or before the offset
        return sum(1 for byte in encoded if byte & 0xC0 != 0x80) - 1

    def split(self, text) -> bytes:
        if isinstance(text, str):
            return text.encode("utf-8", "surrogatepass")
        if isinstance(text, _BYTES_LIKE):
            return bytes(text)
        raise TypeError("Input must be bytes or str")

    def join(self, symbols: Iterable[int]) -> bytes:
        return bytes(symbols)

    def __repr__(self) -> str:
        return f"ByteAlphabet({self.join(self._symbols)!r})"


class ScalarAlphabet(Alphabet):
    """Alphabet of Unicode characters, each one an atomic symbol."""

    __slots__ = ()

    def __init__(self, source: str):
        if not isinstance(source, str):
            raise TypeError("Scalar alphabet must be a str")
        for ch in source:
            if 0xD800 <= ord(ch) <= 0xDFFF:
                raise InvalidAlphabetError(
                    f"Lone surrogate {ch!r} is not a valid alphabet symbol"
                )
        super().__init__(source)

    def split(self, text) -> str:
        if not isinstance(text, str):
            raise TypeError("Input must be a string")
        return text

    def join(self, symbols: Iterable[str]) -> str:
        return "".join(symbols)

    def __repr__(self) -> str:
        return f"ScalarAlphabet({self.join(self._symbols)!r})"


def as_alphabet(source: AlphabetSource) -> Alphabet:
    """Build an alphabet from a caller-supplied source.

    ``str`` sources become ``ScalarAlphabet``, bytes-like sources become
    ``ByteAlphabet``, and existing alphabets are returned unchanged.
    """
    if isinstance(source, Alphabet):
        return source
    if isinstance(source, str):
        return ScalarAlphabet(source)
    if isinstance(source, _BYTES_LIKE):
        return ByteAlphabet(source)
    raise TypeError(
        f"Alphabet must be str, bytes or Alphabet, not {type(source).__name__}"
    )
