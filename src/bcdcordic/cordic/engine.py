# SPDX-License-Identifier: LGPL-2.1-or-later
# See Notices.txt for copyright information

""" CORDIC sin/cos on fixed-point BCD numbers.

A plain 2D rotation by ``a``

    x' = x * cos(a) - y * sin(a)
    y' = x * sin(a) + y * cos(a)

is rewritten as ``cos(a) * (x - y * tan(a))`` etc. Dropping the cos(a)
factor grows the vector (the CORDIC gain), which is compensated by starting
from (CORDIC_GAIN_INVERSE, 0) instead of (1, 0). Restricting the stage
angles to tan(a) = 2 ** -n turns the multiplication into a right shift:

    x'' = x - (y >> n)
    y'' = y + (x >> n)

and, for a clockwise step, the same with the signs swapped. Each stage
rotates towards the residual angle, so after all stages the vector is
(cos(z0), sin(z0)).
"""

from bcdcordic.bcd.errors import PreconditionViolation
from bcdcordic.bcd.format import BCDFormat
from bcdcordic.bcd.number import BCDNumber, pad_integer_digits
from bcdcordic.cordic.angles import (CORDIC_GAIN_INVERSE, DEFAULT_STAGES,
                                     default_angle_table)


class Coord:
    """ A 2D vector.

    :attribute real: the real part, or cos(x)
    :attribute imag: the imaginary part, or sin(x)
    """

    def __init__(self, real, imag):
        self.real = real
        self.imag = imag

    def __eq__(self, other):
        if not isinstance(other, Coord):
            return NotImplemented
        return self.real == other.real and self.imag == other.imag

    def __repr__(self):
        return f"Coord({self.real}, {self.imag})"


class CordicStage:
    """ State after one CORDIC stage. """

    def __init__(self, stage, angle, coord):
        self.stage = stage
        self.angle = angle
        self.coord = coord

    def __str__(self):
        return (f"stage {self.stage}:   angle {self.angle} -> "
                f"{self.coord.real} {self.coord.imag}")

    def __repr__(self):
        return f"CordicStage({self.stage}, {self.angle}, {self.coord!r})"


class CordicResult:
    """ Outcome of ``CordicEngine.run``.

    :attribute coord: the final vector
    :attribute angle: the final residual angle
    :attribute trace: list of ``CordicStage``, one per stage
    """

    def __init__(self, coord, angle, trace):
        self.coord = coord
        self.angle = angle
        self.trace = trace

    @property
    def cos(self):
        return self.coord.real

    @property
    def sin(self):
        return self.coord.imag


class CordicEngine:
    """ Runs CORDIC rotations over a fixed number of stages.

    :attribute stages: the number of stages
    :attribute fmt: the ``BCDFormat`` of every number involved
    :attribute table: the ``AngleTable`` giving each stage's angle
    """

    def __init__(self, stages=DEFAULT_STAGES, fmt=None, table=None):
        """ Create a CordicEngine.

        :param stages: number of stages to run
        :param fmt: the ``BCDFormat``, defaults to the standard format
        :param table: an ``AngleTable`` with at least ``stages`` entries,
            by default the shared table for ``stages`` and ``fmt``
        """
        if fmt is None:
            fmt = BCDFormat.standard()
        if table is None:
            table = default_angle_table(stages, fmt)
        if not table.is_built():
            raise PreconditionViolation("angle table has not been built")
        if len(table) < stages:
            raise PreconditionViolation(
                f"angle table has {len(table)} entries, need {stages}")
        if table.fmt != fmt:
            raise PreconditionViolation(
                f"angle table is in {table.fmt!r}, engine in {fmt!r}")
        self.stages = stages
        self.fmt = fmt
        self.table = table

    def rotate(self, coord, angle, stage):
        """ Perform one CORDIC rotation.

        If the residual angle ``angle`` is non-negative (zero included) the
        vector is rotated anti-clockwise, else clockwise.

        :param coord: the input ``Coord``
        :param angle: the residual angle before this stage
        :param stage: the stage number, selects the shift and table entry
        :returns: tuple of the rotated ``Coord`` and the new residual angle
        """
        if not 0 <= stage < self.stages:
            raise PreconditionViolation(
                f"stage {stage} outside [0, {self.stages})")
        delta = self.table[stage]
        s_imag = coord.imag.shr(stage)
        s_real = coord.real.shr(stage)
        if not angle.is_negative():
            real = coord.real.sub(s_imag)
            imag = coord.imag.add(s_real)
            angle = angle.sub(delta)
        else:
            real = coord.real.add(s_imag)
            imag = coord.imag.sub(s_real)
            angle = angle.add(delta)
        return Coord(real, imag), angle

    def run(self, coord, angle, log=False):
        """ Apply every stage in turn to ``coord`` and ``angle``.

        The start vector must already be scaled by the inverse CORDIC gain.

        :returns CordicResult:
        """
        trace = []
        for stage in range(self.stages):
            coord, angle = self.rotate(coord, angle, stage)
            trace.append(CordicStage(stage, angle, coord))
            if log:
                print(trace[-1])
        return CordicResult(coord, angle, trace)

    def start_vector(self):
        """ (CORDIC_GAIN_INVERSE, 0) in this engine's format. """
        gain = pad_integer_digits(CORDIC_GAIN_INVERSE, self.fmt)
        return Coord(BCDNumber.load(gain, self.fmt),
                     BCDNumber.zero(self.fmt))


def sin_cos(angle, stages=DEFAULT_STAGES, fmt=None, log=False):
    """ Compute sin and cos of ``angle`` (radians, in [0, pi/2)).

    :param angle: decimal text or a ``BCDNumber``
    :returns: tuple (sin, cos) of ``BCDNumber``
    """
    engine = CordicEngine(stages, fmt)
    if not isinstance(angle, BCDNumber):
        angle = BCDNumber.load(angle, engine.fmt)
    result = engine.run(engine.start_vector(), angle, log=log)
    return result.sin, result.cos
