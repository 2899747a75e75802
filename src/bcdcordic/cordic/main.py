# SPDX-License-Identifier: LGPL-2.1-or-later
# See Notices.txt for copyright information

""" Print the CORDIC stages and the resulting sin(x)/cos(x).

Usage:
  python -m bcdcordic.cordic.main
  python -m bcdcordic.cordic.main 0.7853981633974483096156 --check
"""

import argparse
import sys

from bcdcordic.bcd.errors import BCDError
from bcdcordic.bcd.format import BCDFormat
from bcdcordic.bcd.number import BCDNumber, pad_integer_digits
from bcdcordic.cordic.angles import (ANGLE_30_DEGREES, CORDIC_GAIN_INVERSE,
                                     DEFAULT_STAGES)
from bcdcordic.cordic.engine import CordicEngine, Coord
from bcdcordic.cordic.reference import sin_cos_literal, units_error


def make_parser():
    parser = argparse.ArgumentParser(
        description="sin/cos with CORDIC rotations on BCD fixed-point "
                    "numbers")
    parser.add_argument("angle", nargs="?",
                        help="angle in radians, in [0, pi/2) "
                             "(default: 30 degrees)")
    parser.add_argument("--stages", type=int, default=DEFAULT_STAGES,
                        help="number of CORDIC stages")
    parser.add_argument("--digits", type=int, default=24,
                        help="BCD cells per number, sign cell included")
    parser.add_argument("--int-digits", type=int, default=1,
                        help="integer digit cells per number")
    parser.add_argument("--checked", action="store_true",
                        help="raise on overflow instead of wrapping around")
    parser.add_argument("--real",
                        help="real part of the start vector "
                             "(default: inverse CORDIC gain)")
    parser.add_argument("--imag",
                        help="imaginary part of the start vector "
                             "(default: 0)")
    parser.add_argument("--quiet", action="store_true",
                        help="only print the final results")
    parser.add_argument("--check", action="store_true",
                        help="compare against an MPFR reference")
    return parser


def main(argv=None):
    args = make_parser().parse_args(argv)
    try:
        fmt = BCDFormat(args.digits, args.int_digits, args.checked)
        # built-in defaults are written with a single integer digit
        if args.angle is None:
            args.angle = pad_integer_digits(ANGLE_30_DEGREES, fmt)
        if args.real is None:
            args.real = pad_integer_digits(CORDIC_GAIN_INVERSE, fmt)
        if args.imag is None:
            args.imag = pad_integer_digits("0.0", fmt)
        engine = CordicEngine(args.stages, fmt)
        angle = BCDNumber.load(args.angle, fmt)
        coord = Coord(BCDNumber.load(args.real, fmt),
                      BCDNumber.load(args.imag, fmt))
        result = engine.run(coord, angle, log=not args.quiet)
    except (BCDError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print("\n\nFinal results:")
    print(f"sin(x) = {result.sin}")
    print(f"cos(x) = {result.cos}")

    if args.check:
        e_sin, e_cos = sin_cos_literal(str(angle),
                                       fmt.frac_digit_count + 10)
        print(f"sin error: {units_error(result.sin, e_sin)} units")
        print(f"cos error: {units_error(result.cos, e_cos)} units")
        print(f"residual angle: {result.angle}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
