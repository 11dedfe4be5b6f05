"""Unsigned arbitrary-precision integer for base conversion.

The value is a big-endian sequence of base-256 digits with no leading zero
digits; zero is the empty sequence. Only the operations needed to move
between bytes and another radix are provided:

  - ``divmod_small`` peels off the low digits of the target base (encoding)
  - ``mul_add_small`` folds in digits of the source base (decoding)

Both walk the digits four bytes at a time as big-endian 32-bit words.
Instances are immutable; every operation returns a new value.
"""

import struct

SMALL_MAX = 0xFFFFFFFF


def _check_small(name: str, value: int, minimum: int = 0) -> None:
    if not minimum <= value <= SMALL_MAX:
        raise ValueError(
            f"{name} must be between {minimum} and {SMALL_MAX}, got {value}"
        )


def _to_words(digits: bytes) -> tuple[int, ...]:
    padded = b"\x00" * (-len(digits) % 4) + digits
    return struct.unpack(f">{len(padded) // 4}I", padded)


def _from_words(words) -> bytes:
    return struct.pack(f">{len(words)}I", *words)


def largest_power(base: int) -> tuple[int, int]:
    """Return ``(base ** width, width)`` for the largest power of ``base``
    that still fits a small operand.

    Converting ``width`` digits per big-integer pass keeps the number of
    passes proportional to the input length divided by ``width``.
    """
    _check_small("base", base, minimum=2)
    power, width = base, 1
    while power * base <= SMALL_MAX:
        power *= base
        width += 1
    return power, width


class BigUint:
    """Unsigned big integer stored as normalized big-endian bytes."""

    __slots__ = ("_digits",)

    def __init__(self, digits: bytes = b""):
        self._digits = bytes(digits).lstrip(b"\x00")

    @classmethod
    def from_bytes(cls, data: bytes) -> "BigUint":
        """Interpret ``data`` as a big-endian magnitude.

        Leading zero bytes do not change the value and are dropped; callers
        that care about them must count them first.
        """
        return cls(data)

    @classmethod
    def zero(cls) -> "BigUint":
        return cls()

    def is_zero(self) -> bool:
        return not self._digits

    def divmod_small(self, divisor: int) -> tuple["BigUint", int]:
        """Long division by a divisor that fits in 32 bits.

        Returns ``(quotient, remainder)``. The remainder is the least
        significant digit of the value written in base ``divisor``.
        """
        _check_small("divisor", divisor, minimum=1)

        quotient = []
        remainder = 0
        for word in _to_words(self._digits):
            q, remainder = divmod((remainder << 32) | word, divisor)
            quotient.append(q)
        return BigUint(_from_words(quotient)), remainder

    def mul_add_small(self, multiplier: int, addend: int) -> "BigUint":
        """Return ``self * multiplier + addend`` for 32-bit operands."""
        _check_small("multiplier", multiplier)
        _check_small("addend", addend)

        words = _to_words(self._digits)
        result = [0] * len(words)
        carry = addend
        for i in range(len(words) - 1, -1, -1):
            acc = words[i] * multiplier + carry
            result[i] = acc & SMALL_MAX
            carry = acc >> 32

        # (2**32 - 1) ** 2 + (2**32 - 1) < 2**64, so one extra word suffices
        if carry:
            result.insert(0, carry)
        return BigUint(_from_words(result))

    def to_bytes(self) -> bytes:
        """Return the minimal big-endian bytes; zero is ``b""``."""
        return self._digits

    def __int__(self) -> int:
        return int.from_bytes(self._digits, byteorder="big")

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __eq__(self, other) -> bool:
        if not isinstance(other, BigUint):
            return NotImplemented
        return self._digits == other._digits

    def __hash__(self) -> int:
        return hash(self._digits)

    def __repr__(self) -> str:
        return f"BigUint(0x{self._digits.hex() or '0'})"
