# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Rational values as stored in TIFF/EXIF RATIONAL and SRATIONAL fields.

The numerator and denominator are kept exactly as read from the file.
Reduction only happens when the value is rendered.
"""

import math


def _gcd(a: int, b: int) -> int:
    a, b = abs(a), abs(b)
    while a != 0 and b != 0:
        if a > b:
            a %= b
        else:
            b %= a
    return b if a == 0 else a


class Rational:
    """
    Immutable numerator/denominator pair.

    Zero denominators are legal (cameras write ``0/0`` for "unknown") and
    never raise; see ``to_float`` and ``to_int``.
    """

    __slots__ = ('numerator', 'denominator')

    def __init__(self, numerator: int, denominator: int):
        object.__setattr__(self, 'numerator', int(numerator))
        object.__setattr__(self, 'denominator', int(denominator))

    def __setattr__(self, name, value):
        raise AttributeError("Rational is immutable")

    def to_float(self) -> float:
        """
        Convert to float.

        Returns:
            0.0 for a zero numerator (including 0/0), +/-inf for n/0
        """
        if self.numerator == 0:
            return 0.0
        if self.denominator == 0:
            return math.copysign(math.inf, self.numerator)
        return self.numerator / self.denominator

    def to_int(self) -> int:
        """Truncate toward zero. A zero denominator yields 0."""
        if self.denominator == 0:
            return 0
        return int(self.to_float())

    def __float__(self) -> float:
        return self.to_float()

    def __int__(self) -> int:
        return self.to_int()

    @property
    def reciprocal(self) -> 'Rational':
        return Rational(self.denominator, self.numerator)

    @property
    def is_integer(self) -> bool:
        if self.denominator == 1:
            return True
        if self.denominator != 0 and self.numerator % self.denominator == 0:
            return True
        return self.denominator == 0 and self.numerator == 0

    @property
    def is_zero(self) -> bool:
        return self.numerator == 0 or self.denominator == 0

    def simplified(self) -> 'Rational':
        """Return the equivalent rational in lowest terms."""
        gcd = _gcd(self.numerator, self.denominator)
        if gcd == 0:
            return self
        return Rational(self.numerator // gcd, self.denominator // gcd)

    def to_simple_string(self, allow_decimal: bool = True) -> str:
        """
        Render in the simplest readable form.

        Args:
            allow_decimal: Permit a short decimal form (e.g. "0.5")

        Returns:
            "2" for 4/2, "1/3" for 10/30, "0.5" for 1/2 (when allowed),
            "n/0" for a non-zero numerator over zero
        """
        if self.denominator == 0 and self.numerator != 0:
            return str(self)
        if self.is_integer:
            return str(self.to_int())
        if self.numerator != 1 and self.denominator % self.numerator == 0:
            return Rational(1, self.denominator // self.numerator).to_simple_string(allow_decimal)
        simplified = self.simplified()
        if allow_decimal:
            decimal = str(simplified.to_float())
            if len(decimal) < 5:
                return decimal
        return str(simplified)

    def equals_exact(self, other: 'Rational') -> bool:
        """True only when numerator and denominator are identical."""
        return self.numerator == other.numerator and self.denominator == other.denominator

    def __eq__(self, other):
        if not isinstance(other, Rational):
            return NotImplemented
        return self.to_float() == other.to_float()

    def __lt__(self, other):
        if not isinstance(other, Rational):
            return NotImplemented
        return self.to_float() < other.to_float()

    def __le__(self, other):
        if not isinstance(other, Rational):
            return NotImplemented
        return self.to_float() <= other.to_float()

    def __gt__(self, other):
        if not isinstance(other, Rational):
            return NotImplemented
        return self.to_float() > other.to_float()

    def __ge__(self, other):
        if not isinstance(other, Rational):
            return NotImplemented
        return self.to_float() >= other.to_float()

    def __hash__(self):
        return hash(self.to_float())

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    def __repr__(self) -> str:
        return f"Rational({self.numerator}, {self.denominator})"
