"""Multiplicative congruential generator with 100 independent streams."""

MODLUS = 2**31 - 1
MULT1 = 24_112
MULT2 = 26_143

# Initial state of each stream; stream 0 is a placeholder that starts at 1.
_DEFAULT_SEEDS = (
    1,
    1_973_272_912, 281_629_770, 20_006_270, 1_280_689_831, 2_096_730_329,
    1_933_576_050, 913_566_091, 246_780_520, 1_363_774_876, 604_901_985,
    1_511_192_140, 1_259_851_944, 824_064_364, 150_493_284, 242_708_531,
    75_253_171, 1_964_472_944, 1_202_299_975, 233_217_322, 1_911_216_000,
    726_370_533, 403_498_145, 993_232_223, 1_103_205_531, 762_430_696,
    1_922_803_170, 1_385_516_923, 76_271_663, 413_682_397, 726_466_604,
    336_157_058, 1_432_650_381, 1_120_463_904, 595_778_810, 877_722_890,
    1_046_574_445, 68_911_991, 2_088_367_019, 748_545_416, 622_401_386,
    2_122_378_830, 640_690_903, 1_774_806_513, 2_132_545_692, 2_079_249_579,
    78_130_110, 852_776_735, 1_187_867_272, 1_351_423_507, 1_645_973_084,
    1_997_049_139, 922_510_944, 2_045_512_870, 898_585_771, 243_649_545,
    1_004_818_771, 773_686_062, 403_188_473, 372_279_877, 1_901_633_463,
    498_067_494, 2_087_759_558, 493_157_915, 597_104_727, 1_530_940_798,
    1_814_496_276, 536_444_882, 1_663_153_658, 855_503_735, 67_784_357,
    1_432_404_475, 619_691_088, 119_025_595, 880_802_310, 176_192_644,
    1_116_780_070, 277_854_671, 1_366_580_350, 1_142_483_975, 2_026_948_561,
    1_053_920_743, 786_262_391, 1_792_203_830, 1_494_667_770, 1_923_011_392,
    1_433_700_034, 1_244_184_613, 1_147_297_105, 539_712_780, 1_545_929_719,
    190_641_742, 1_645_390_429, 264_907_697, 620_389_253, 1_502_074_852,
    927_711_160, 364_849_192, 2_049_576_050, 638_580_085, 547_070_247,
)

_SCALE = float(1 << 24)


class LCGRand:
    """A set of seeded random-number streams, numbered 0 to 100."""

    def __init__(self):
        self._seeds = list(_DEFAULT_SEEDS)

    def _check_stream(self, stream: int) -> None:
        if not 0 <= stream < len(self._seeds):
            raise ValueError(
                f"stream must be between 0 and {len(self._seeds) - 1}, got {stream}"
            )

    def next(self, stream: int) -> float:
        """Advance ``stream`` and return a uniform value in (0, 1)."""
        self._check_stream(stream)
        z = self._seeds[stream] * MULT1 % MODLUS
        z = z * MULT2 % MODLUS
        self._seeds[stream] = z
        return ((z >> 7) | 1) / _SCALE

    def seed(self, stream: int, value: int) -> None:
        """Set the internal state of ``stream``."""
        self._check_stream(stream)
        if not 0 < value < MODLUS:
            raise ValueError(f"seed must be between 1 and {MODLUS - 1}, got {value}")
        self._seeds[stream] = value

    def state(self, stream: int) -> int:
        """Return the current internal state of ``stream``."""
        self._check_stream(stream)
        return self._seeds[stream]