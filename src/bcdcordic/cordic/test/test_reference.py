# SPDX-License-Identifier: LGPL-2.1-or-later
# See Notices.txt for copyright information

from bigfloat import BigFloat

from bcdcordic.bcd.number import BCDNumber
from bcdcordic.cordic.reference import (atan_literal, gain_inverse_literal,
                                        sin_cos_literal, to_decimal,
                                        units_error)
import unittest


class TestReference(unittest.TestCase):
    def test_to_decimal(self):
        self.assertEqual(to_decimal(BigFloat(0.5), 3), "0.500")
        self.assertEqual(to_decimal(BigFloat(-1.25), 2), "-1.25")
        self.assertEqual(to_decimal(BigFloat(2), 1), "2.0")
        # truncates rather than rounds
        self.assertEqual(to_decimal(BigFloat(0.875), 2), "0.87")

    def test_atan(self):
        self.assertEqual(atan_literal(0, 20), "0.78539816339744830961")
        self.assertEqual(atan_literal(1, 20), "0.46364760900080611621")

    def test_gain_inverse(self):
        self.assertEqual(gain_inverse_literal(1, 10), "0.7071067811")
        self.assertEqual(gain_inverse_literal(75, 20),
                         "0.60725293500888125616")

    def test_sin_cos(self):
        self.assertEqual(sin_cos_literal("0", 5), ("0.00000", "1.00000"))
        self.assertEqual(sin_cos_literal("1", 10),
                         ("0.8414709848", "0.5403023058"))

    def test_units_error(self):
        self.assertEqual(
            units_error(BCDNumber.load("0.5"),
                        "0.50000000000000000000000001"), 0)
        self.assertEqual(
            units_error(BCDNumber.from_units(-3),
                        "-0.0000000000000000000002"), -1)
        self.assertEqual(units_error(BCDNumber.from_units(7), "0.0"), 7)


if __name__ == '__main__':
    unittest.main()
