# SPDX-License-Identifier: LGPL-2.1-or-later
# See Notices.txt for copyright information

""" Fixed-point BCD arithmetic.

Numbers are stored as a fixed number of decimal digit cells, most-significant
first. Cell 0 is the sign: 0 for non-negative numbers, 9 for negative ones.
Negative numbers are held as the nines' complement of their magnitude plus
one unit in the last place, the decimal analogue of two's complement.

The arithmetic is a plain schoolbook rendition and is written for
correctness, not speed.
"""

import math
import warnings

from bcdcordic.bcd.errors import (ParseWarning, PrecisionOverflowError,
                                  PreconditionViolation)
from bcdcordic.bcd.format import BCDFormat

SIGN_POSITIVE = 0
SIGN_NEGATIVE = 9


def _add_cells(lhs, rhs):
    """ Add two cell lists from the least-significant cell upwards.

    The carry out of the sign cell is dropped.
    """
    result = [0] * len(lhs)
    carry = 0
    for i in reversed(range(len(lhs))):
        digit = lhs[i] + rhs[i] + carry
        if digit > 9:
            carry = 1
            digit -= 10
        else:
            carry = 0
        result[i] = digit
    return result


def _unit_cells(digit_count):
    cells = [0] * digit_count
    cells[-1] = 1
    return cells


def _neg_cells(cells):
    complement = [9 - digit for digit in cells]
    return _add_cells(complement, _unit_cells(len(cells)))


def pad_integer_digits(text, fmt):
    """ Left-pad the integer part of decimal text with zeros to
    ``fmt.int_digit_count`` digits, e.g. ``"-0.5"`` -> ``"-00.5"`` for two
    integer digits. Text whose integer part is already that long or longer
    is returned unchanged.
    """
    sign = "-" if text.startswith("-") else ""
    int_part, point, frac_part = text[len(sign):].partition(".")
    int_part = int_part.rjust(fmt.int_digit_count, "0")
    return sign + int_part + point + frac_part


class BCDNumber:
    """ Fixed-point BCD number.

    :attribute digits: tuple of ``fmt.digit_count`` cells, each in 0..9
    :attribute fmt: the ``BCDFormat`` of the number
    """

    def __init__(self, digits, fmt=None):
        """ Create a new BCDNumber from its raw cells.

        To convert decimal text use ``BCDNumber.load``.

        :param digits: the cells, sign cell first
        :param fmt: the ``BCDFormat``, defaults to ``BCDFormat.standard()``
        """
        if fmt is None:
            fmt = BCDFormat.standard()
        digits = tuple(digits)
        if len(digits) != fmt.digit_count:
            raise ValueError(f"expected {fmt.digit_count} cells, "
                             f"got {len(digits)}")
        for digit in digits:
            if not isinstance(digit, int) or not 0 <= digit <= 9:
                raise ValueError(f"cell value out of range: {digit!r}")
        self.digits = digits
        self.fmt = fmt

    @staticmethod
    def zero(fmt=None):
        """ The number zero. """
        if fmt is None:
            fmt = BCDFormat.standard()
        return BCDNumber([0] * fmt.digit_count, fmt)

    @staticmethod
    def one_unit(fmt=None):
        """ One unit in the last (least-significant) place. """
        if fmt is None:
            fmt = BCDFormat.standard()
        return BCDNumber(_unit_cells(fmt.digit_count), fmt)

    @staticmethod
    def from_units(units, fmt=None):
        """ Create a new BCDNumber holding ``units`` last-place units.

        The value wraps around modulo ``10 ** fmt.digit_count``, so the
        sign cell of an out-of-range value may end up neither 0 nor 9.
        """
        if fmt is None:
            fmt = BCDFormat.standard()
        text = str(units % fmt.modulus).zfill(fmt.digit_count)
        return BCDNumber([int(c) for c in text], fmt)

    @staticmethod
    def load(text, fmt=None):
        """ Parse decimal text.

        A ``-`` as the very first character makes the number negative.
        Every digit character fills the next cell, starting at the first
        integer cell, so the decimal point carries no positional meaning:
        ``"0001"`` loads as 0.001 in the standard format. Any other
        character is skipped with a ``ParseWarning`` (the first ``.`` is
        skipped silently) and the scan goes on until the cells are full or
        the text ends. Cells not reached stay zero.

        Text written for another number of integer digits must be aligned
        first with ``pad_integer_digits``.
        """
        if fmt is None:
            fmt = BCDFormat.standard()
        cells = [0] * fmt.digit_count
        cell = 1
        seen_point = False
        for idx, char in enumerate(text):
            if cell >= fmt.digit_count:
                break
            if "0" <= char <= "9":
                cells[cell] = ord(char) - ord("0")
                cell += 1
            elif idx == 0 and char == "-":
                pass
            elif char == "." and not seen_point:
                seen_point = True
            else:
                warnings.warn(f"skipped {char!r} at position {idx} "
                              f"of {text!r}", ParseWarning, stacklevel=2)
        result = BCDNumber(cells, fmt)
        if text.startswith("-"):
            result = result.neg()
        return result

    def with_digits(self, digits):
        """ Create a new BCDNumber in the same format with other cells. """
        return BCDNumber(digits, self.fmt)

    def _checked(self, cells):
        if self.fmt.checked and cells[0] not in (SIGN_POSITIVE,
                                                 SIGN_NEGATIVE):
            raise PrecisionOverflowError(
                f"result does not fit {self.fmt.int_digit_count} "
                f"integer digit(s)")
        return self.with_digits(cells)

    def _operand(self, other):
        if not isinstance(other, BCDNumber):
            raise TypeError(f"expected BCDNumber, got {type(other).__name__}")
        if other.fmt != self.fmt:
            raise PreconditionViolation(
                f"format mismatch: {self.fmt!r} and {other.fmt!r}")
        return other

    def is_negative(self):
        """ True if the sign cell is 9. """
        return self.digits[0] == SIGN_NEGATIVE

    def is_valid(self):
        """ False after an unchecked overflow left a stray sign cell. """
        return self.digits[0] in (SIGN_POSITIVE, SIGN_NEGATIVE)

    def neg(self):
        """ Negate: nines' complement, then add one unit. """
        return self._checked(_neg_cells(self.digits))

    def add(self, other):
        """ Add digit by digit with carry. """
        other = self._operand(other)
        return self._checked(_add_cells(self.digits, other.digits))

    def sub(self, other):
        """ Subtract, as ``self + (-other)``. """
        return self.add(self._operand(other).neg())

    def shr(self, bits):
        """ Arithmetic shift right by ``bits`` bits, i.e. divide by
        ``2 ** bits``.

        Each single-bit pass halves cells 1.. from the most-significant end,
        feeding 5 into the next cell for every odd digit and into cell 1
        when the number is negative (sign extension). If the last pass
        shifted out a non-zero remainder the result is corrected by one
        unit: up for non-negative numbers, down for negative ones.
        """
        if bits < 0:
            raise PreconditionViolation(
                f"shift amount must be non-negative, got {bits}")
        cells = list(self.digits)
        spillover = 0
        for _ in range(bits):
            spillover = 5 if cells[0] == SIGN_NEGATIVE else 0
            for i in range(1, len(cells)):
                digit = cells[i]
                cells[i] = (digit >> 1) + spillover
                spillover = 5 if digit & 1 else 0
        if spillover:
            unit = _unit_cells(len(cells))
            if cells[0] == SIGN_POSITIVE:
                cells = _add_cells(cells, unit)
            else:
                cells = _add_cells(cells, _neg_cells(unit))
        return self.with_digits(cells)

    @property
    def units(self):
        """ The value counted in last-place units (ten's complement
        reading of the cells).
        """
        value = int("".join(str(digit) for digit in self.digits))
        if self.digits[0] >= 5:
            value -= self.fmt.modulus
        return value

    def as_integer_ratio(self):
        """ Exact value as a reduced (numerator, denominator) pair. """
        numerator = self.units
        denominator = self.fmt.unit_scale
        divisor = math.gcd(numerator, denominator)
        return numerator // divisor, denominator // divisor

    def rawstr(self):
        """ The stored cells without separator, ``-`` prefixed when
        negative. Negative numbers show their complement digits.
        """
        retval = "-" if self.is_negative() else ""
        return retval + "".join(str(digit) for digit in self.digits[1:])

    def __str__(self):
        """ Decimal text of the number, as accepted by ``load``. """
        cells = self.digits
        retval = ""
        if self.is_negative():
            retval = "-"
            cells = _neg_cells(cells)
        point = 1 + self.fmt.int_digit_count
        retval += "".join(str(digit) for digit in cells[1:point])
        retval += "."
        retval += "".join(str(digit) for digit in cells[point:])
        return retval

    def __repr__(self):
        return f"BCDNumber.from_units({self.units}, {self.fmt!r})"

    def __float__(self):
        """ Convert to float (lossy). """
        return self.units / self.fmt.unit_scale

    def __bool__(self):
        return any(self.digits)

    def __eq__(self, other):
        if not isinstance(other, BCDNumber):
            return NotImplemented
        return self.fmt == other.fmt and self.digits == other.digits

    def __hash__(self):
        return hash((self.digits, self.fmt))

    def __neg__(self):
        return self.neg()

    def __pos__(self):
        return self

    def __add__(self, rhs):
        if not isinstance(rhs, BCDNumber):
            return NotImplemented
        return self.add(rhs)

    def __sub__(self, rhs):
        if not isinstance(rhs, BCDNumber):
            return NotImplemented
        return self.sub(rhs)

    def __rshift__(self, bits):
        if not isinstance(bits, int):
            return NotImplemented
        return self.shr(bits)
