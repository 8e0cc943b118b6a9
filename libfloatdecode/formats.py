from dataclasses import dataclass
from typing import Dict

import numpy as np


class UnsupportedWidthError(ValueError):
    pass


@dataclass(frozen=True)
class FloatFormat:
    """
    Bit layout of one IEEE-754 binary interchange format.

    Everything the decoder needs to treat binary32 and binary64 the same
    way: field widths, the numpy types used to view the raw bits, and how
    the value is printed.
    """
    name: str
    label: str
    width: int
    exponent_width: int
    fraction_width: int
    float_dtype: type
    uint_dtype: type
    # significant digits that round-trip the format
    digits: int
    show_fraction_decimal: bool

    @property
    def exponent_mask(self) -> int:
        return (1 << self.exponent_width) - 1

    @property
    def fraction_mask(self) -> int:
        return (1 << self.fraction_width) - 1

    @property
    def width_mask(self) -> int:
        return (1 << self.width) - 1

    @property
    def exponent_hex_digits(self) -> int:
        return (self.exponent_width + 3) // 4

    @property
    def fraction_hex_digits(self) -> int:
        return (self.fraction_width + 3) // 4

    @property
    def field_pad(self) -> int:
        # labels are padded so every "=" lines up after the value label
        return len(self.label) + 1


BINARY32 = FloatFormat(
    name="binary32",
    label="float",
    width=32,
    exponent_width=8,
    fraction_width=23,
    float_dtype=np.float32,
    uint_dtype=np.uint32,
    digits=9,
    show_fraction_decimal=True,
)

BINARY64 = FloatFormat(
    name="binary64",
    label="double",
    width=64,
    exponent_width=11,
    fraction_width=52,
    float_dtype=np.float64,
    uint_dtype=np.uint64,
    digits=17,
    show_fraction_decimal=False,
)

FORMATS: Dict[int, FloatFormat] = {fmt.width: fmt for fmt in (BINARY32, BINARY64)}


def get_format(width: int) -> FloatFormat:
    """Look up the format for a total bit width (32 or 64)."""
    try:
        return FORMATS[width]
    except KeyError:
        supported = ", ".join(str(w) for w in sorted(FORMATS))
        raise UnsupportedWidthError(
            f"No IEEE-754 format with width {width} (supported: {supported})"
        ) from None
