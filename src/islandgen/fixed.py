"""
Signed 16.16 fixed-point numbers with the exact wraparound and truncation
behaviour the reference map data was produced with.

Every value is a 32-bit two's complement integer ("bits") scaled by 2**16.
Overflow wraps silently; it is part of the output, not an error.
"""

from functools import total_ordering
from typing import Union

FRAC_BITS = 16
ONE_BITS = 1 << FRAC_BITS
MASK32 = 0xFFFFFFFF


def wrap_i32(v: int) -> int:
    """Keep the low 32 bits of v and interpret them as signed."""
    v &= MASK32
    return v - 0x100000000 if (v & 0x80000000) else v


def as_u32(v: int) -> int:
    """Reinterpret a signed 32-bit pattern as unsigned."""
    return v & MASK32


@total_ordering
class Fixed:
    """Signed 16.16 value held as wrapped 32-bit `bits`."""
    __slots__ = ("bits",)

    def __init__(self, bits: int = 0):
        self.bits = wrap_i32(bits)

    # ---------- construction ----------
    @classmethod
    def from_bits(cls, bits: int) -> "Fixed":
        return cls(bits)

    @classmethod
    def from_int(cls, n: int) -> "Fixed":
        return cls(n << FRAC_BITS)

    @classmethod
    def from_num(cls, value: Union[int, float]) -> "Fixed":
        # Floats round to nearest (ties to even); scaling by 2**16 is exact.
        if isinstance(value, int):
            return cls.from_int(value)
        return cls(round(value * ONE_BITS))

    # ---------- arithmetic ----------
    def __add__(self, other: "Fixed") -> "Fixed":
        return Fixed(self.bits + other.bits)

    def __sub__(self, other: "Fixed") -> "Fixed":
        return Fixed(self.bits - other.bits)

    def __mul__(self, other: Union["Fixed", int]) -> "Fixed":
        if isinstance(other, int):
            return Fixed(self.bits * other)
        # Arithmetic shift drops the low fraction bits (rounds toward -inf).
        return Fixed((self.bits * other.bits) >> FRAC_BITS)

    def __rmul__(self, other: int) -> "Fixed":
        return self.__mul__(other)

    def __truediv__(self, other: Union["Fixed", int]) -> "Fixed":
        if isinstance(other, int):
            divisor = other
            dividend = self.bits
        else:
            divisor = other.bits
            dividend = self.bits << FRAC_BITS
        if divisor == 0:
            raise ZeroDivisionError("fixed-point division by zero")
        q = abs(dividend) // abs(divisor)
        if (dividend < 0) != (divisor < 0):
            q = -q
        return Fixed(q)

    def __abs__(self) -> "Fixed":
        return Fixed(-self.bits) if self.bits < 0 else self

    def floor(self) -> "Fixed":
        return Fixed(self.bits & ~(ONE_BITS - 1))

    def to_int(self) -> int:
        return self.bits >> FRAC_BITS

    def to_float(self) -> float:
        """Lossless for display; never feed the result back into generation."""
        return self.bits / ONE_BITS

    # ---------- comparison ----------
    def __eq__(self, other) -> bool:
        if not isinstance(other, Fixed):
            return NotImplemented
        return self.bits == other.bits

    def __lt__(self, other: "Fixed") -> bool:
        if not isinstance(other, Fixed):
            return NotImplemented
        return self.bits < other.bits

    def __hash__(self) -> int:
        return hash(self.bits)

    def __bool__(self) -> bool:
        return self.bits != 0

    def __repr__(self) -> str:
        return f"Fixed({self.to_float()!r}, bits=0x{as_u32(self.bits):08x})"


Fixed.ZERO = Fixed(0)
Fixed.ONE = Fixed.from_int(1)
Fixed.HALF = Fixed(ONE_BITS // 2)
Fixed.QUARTER = Fixed(ONE_BITS // 4)
Fixed.MIN = Fixed(-0x80000000)
Fixed.MAX = Fixed(0x7FFFFFFF)
