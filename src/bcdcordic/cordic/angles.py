# SPDX-License-Identifier: LGPL-2.1-or-later
# See Notices.txt for copyright information

""" CORDIC angle table.

Entry k of the table is atan(2 ** -k) in radians. The first 24 entries are
loaded from literals; from there on atan(x) is close enough to x that each
entry is taken as half of the one before.
"""

from functools import lru_cache

from bcdcordic.bcd.errors import PreconditionViolation
from bcdcordic.bcd.format import BCDFormat
from bcdcordic.bcd.number import BCDNumber, pad_integer_digits

CORDIC_ANGLES = (
    "0.78539816339744830961566084581987572104929234984377",
    "0.46364760900080611621425623146121440202853705428612",
    "0.24497866312686415417208248121127581091414409838118",
    "0.12435499454676143503135484916387102557317019176980",
    "0.06241880999595734847397911298550511360627388779749",
    "0.03123983343026827625371174489249097703249566372540",
    "0.01562372862047683080280152125657031891111413980090",
    "0.00781234106010111129646339184219928162122281172501",
    "0.00390623013196697182762866531142438714035749011520",
    "0.00195312251647881868512148262507671393161074677723",
    "0.00097656218955931943040343019971729085163419701581",
    "0.00048828121119489827546923962564484866619236113313",
    "0.00024414062014936176401672294325965998621241779097",
    "0.00012207031189367020423905864611795630093082940901",
    "0.00006103515617420877502166256917382915378514353683",
    "0.00003051757811552609686182595343853601975094967511",
    "0.00001525878906131576210723193581269788513742923814",
    "0.00000762939453110197026338848234010509058635074391",
    "0.00000381469726560649628292307561637299372280525730",
    "0.00000190734863281018703536536930591724416871434216",
    "0.00000095367431640596087942067068992311239001963412",
    "0.00000047683715820308885992758382144924707587049404",
    "0.00000023841857910155798249094797721893269783096898",
    "0.00000011920928955078068531136849713792211264596758",
)

# product of cos(atan(2 ** -k)) over all stages: pre-scales the start vector
CORDIC_GAIN_INVERSE = "0.60725293500888125616944675250492826311239085215007"

ANGLE_90_DEGREES = "1.570796326794897"
ANGLE_45_DEGREES = "0.78539816339744830961566084581987572104929234984345"
ANGLE_30_DEGREES = "0.52359877559829887307710723054658381403286156656251"

DEFAULT_STAGES = 75


class AngleTable:
    """ Read-only sequence of CORDIC rotation angles, one per stage.

    An ``AngleTable`` created without angles has not been built and
    refuses every lookup.

    :attribute fmt: the ``BCDFormat`` of the entries, None if unbuilt
    """

    def __init__(self, angles=()):
        self._angles = tuple(angles)
        self.fmt = self._angles[0].fmt if self._angles else None

    @staticmethod
    def build(stages=DEFAULT_STAGES, fmt=None):
        """ Build the table for ``stages`` CORDIC stages.

        :param stages: number of entries
        :param fmt: the ``BCDFormat`` of the entries
        :returns AngleTable: the new table
        """
        if stages < 1:
            raise PreconditionViolation(f"need at least one stage, "
                                        f"got {stages}")
        if fmt is None:
            fmt = BCDFormat.standard()
        angles = [BCDNumber.load(pad_integer_digits(text, fmt), fmt)
                  for text in CORDIC_ANGLES[:stages]]
        for _ in range(len(angles), stages):
            angles.append(angles[-1].shr(1))
        return AngleTable(angles)

    def is_built(self):
        """ False for a table created without angles. """
        return bool(self._angles)

    def __len__(self):
        return len(self._angles)

    def __iter__(self):
        return iter(self._angles)

    def __getitem__(self, stage):
        if not self._angles:
            raise PreconditionViolation("angle table has not been built")
        if not 0 <= stage < len(self._angles):
            raise PreconditionViolation(
                f"stage {stage} outside [0, {len(self._angles)})")
        return self._angles[stage]

    def __repr__(self):
        return f"AngleTable(<{len(self._angles)} entries, {self.fmt!r}>)"


def default_angle_table(stages=DEFAULT_STAGES, fmt=None):
    """ Build-once angle table shared by every engine using the same
    stage count and format.
    """
    if fmt is None:
        fmt = BCDFormat.standard()
    return _shared_angle_table(stages, fmt)


@lru_cache(maxsize=None)
def _shared_angle_table(stages, fmt):
    return AngleTable.build(stages, fmt)
