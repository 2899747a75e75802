# SPDX-License-Identifier: LGPL-2.1-or-later
# See Notices.txt for copyright information

""" High-precision reference values computed with MPFR (via bigfloat),
used to check the BCD CORDIC results and its literal constants.
"""

import math

import bigfloat as bf
from bigfloat import BigFloat


def _precision(frac_digits):
    # bits for frac_digits decimal digits, plus guard bits
    return int(math.ceil(frac_digits * math.log2(10))) + 64


def to_decimal(value, frac_digits):
    """ Truncate a BigFloat to decimal text with ``frac_digits`` digits
    after the point.
    """
    numerator, denominator = value.as_integer_ratio()
    sign = "-" if numerator < 0 else ""
    scaled = abs(numerator) * 10 ** frac_digits // denominator
    int_part, frac_part = divmod(scaled, 10 ** frac_digits)
    return f"{sign}{int_part}.{str(frac_part).zfill(frac_digits)}"


def atan_literal(k, frac_digits=50):
    """ atan(2 ** -k) as decimal text. """
    with bf.precision(_precision(frac_digits)):
        x = bf.atan(BigFloat(2) ** BigFloat(-k))
        return to_decimal(x, frac_digits)


def gain_inverse_literal(stages, frac_digits=50):
    """ Inverse CORDIC gain: product of 1/sqrt(1 + 2 ** -2k), k < stages. """
    with bf.precision(_precision(frac_digits)):
        gain = BigFloat(1)
        for k in range(stages):
            gain = gain * bf.sqrt(1 + BigFloat(2) ** BigFloat(-2 * k))
        return to_decimal(1 / gain, frac_digits)


def sin_cos_literal(angle_text, frac_digits=50):
    """ sin and cos of the angle given as decimal text, in radians.

    :returns: tuple (sin, cos) of decimal text
    """
    with bf.precision(_precision(frac_digits)):
        angle = BigFloat(angle_text)
        return (to_decimal(bf.sin(angle), frac_digits),
                to_decimal(bf.cos(angle), frac_digits))


def units_error(number, literal):
    """ ``number - literal`` in last-place units of ``number``'s format,
    with ``literal`` truncated to that format's precision.
    """
    frac_digits = number.fmt.frac_digit_count
    sign = -1 if literal.startswith("-") else 1
    int_text, _, frac_text = literal.lstrip("-").partition(".")
    frac_text = frac_text[:frac_digits].ljust(frac_digits, "0")
    expected = sign * int(int_text + frac_text)
    return number.units - expected
