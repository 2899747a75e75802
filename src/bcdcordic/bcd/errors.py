# SPDX-License-Identifier: LGPL-2.1-or-later
# See Notices.txt for copyright information
""" Errors and warnings raised by the BCD arithmetic and the CORDIC engine.
"""


class BCDError(Exception):
    """ Base class of all bcdcordic errors. """


class PrecisionOverflowError(BCDError, ArithmeticError):
    """ A checked add/subtract/negate left the sign cell at neither 0 nor 9,
    i.e. the integer part no longer fits ``int_digit_count`` digits.
    """


class PreconditionViolation(BCDError, ValueError):
    """ The caller broke an operation's contract: negative shift amount,
    stage index out of range, lookup in an unbuilt angle table or operands
    of different formats.
    """


class ParseWarning(UserWarning):
    """ ``BCDNumber.load`` skipped a character that is not part of the
    decimal text format: anything but a digit, a leading ``-`` or the first
    ``.``, which is skipped silently as the integer/fraction separator.
    """
