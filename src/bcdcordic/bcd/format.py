# SPDX-License-Identifier: LGPL-2.1-or-later
# See Notices.txt for copyright information


class BCDFormat:
    """ Class describing fixed-point BCD number formats.

    Cell 0 of a number is the sign sentinel, followed by the integer digit
    cells and then the fractional digit cells, most-significant first.

    :attribute digit_count: the total number of cells, sign cell included.
    :attribute int_digit_count: the number of integer digit cells.
    :attribute frac_digit_count: the number of fractional digit cells.
    :attribute checked: if add/subtract/negate raise
        ``PrecisionOverflowError`` instead of silently wrapping around.
    """

    def __init__(self, digit_count=24, int_digit_count=1, checked=False):
        """ Create ``BCDFormat`` instance. """
        if int_digit_count < 1:
            raise ValueError("at least one integer digit is needed")
        if digit_count - 1 - int_digit_count < 1:
            raise ValueError("digit_count too small for a fractional digit")
        self.digit_count = digit_count
        self.int_digit_count = int_digit_count
        self.checked = checked

    @staticmethod
    def standard(checked=False):
        """ Get the reference format: 24 cells, 1 integer digit,
        22 fractional digits.
        """
        return BCDFormat(24, 1, checked)

    @property
    def frac_digit_count(self):
        """ Number of fractional digit cells. """
        return self.digit_count - 1 - self.int_digit_count

    @property
    def modulus(self):
        """ Number of distinct cell patterns, ``10 ** digit_count``. """
        return 10 ** self.digit_count

    @property
    def unit_scale(self):
        """ Last-place units per 1.0, ``10 ** frac_digit_count``. """
        return 10 ** self.frac_digit_count

    def _key(self):
        return (self.digit_count, self.int_digit_count, self.checked)

    def __eq__(self, other):
        """ Check for equality. """
        if not isinstance(other, BCDFormat):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        """ Get repr. """
        retval = f"BCDFormat({self.digit_count}, {self.int_digit_count}"
        if self.checked:
            retval += ", checked=True"
        return retval + ")"
