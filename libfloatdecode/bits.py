import logging
from typing import NamedTuple

import numpy as np

from libfloatdecode.formats import FloatFormat

logger = logging.getLogger(__name__)


class FloatFields(NamedTuple):
    sign: int
    exponent: int
    fraction: int


def reinterpret(value, fmt: FloatFormat) -> int:
    """
    Returns the bits of a floating-point value as an unsigned integer.

    Args:
        value: A Python float or numpy floating scalar. It is first stored
               as fmt.float_dtype (so 0.1 becomes the nearest binary32 for
               BINARY32), then the same memory is viewed as fmt.uint_dtype.

    Returns:
        int: The raw bit pattern, in [0, 2**fmt.width).
    """
    stored = np.array(value, dtype=fmt.float_dtype)
    raw = int(stored.view(fmt.uint_dtype).item())
    logger.debug("%s %r -> 0x%0*X", fmt.name, value, fmt.width // 4, raw)
    return raw


def from_bits(raw: int, fmt: FloatFormat):
    """
    Views an unsigned integer as a value of fmt.float_dtype.

    Only the low fmt.width bits are used.
    """
    raw &= fmt.width_mask
    stored = np.array(raw, dtype=fmt.uint_dtype)
    return stored.view(fmt.float_dtype)[()]


def extract_fields(raw: int, fmt: FloatFormat) -> FloatFields:
    sign = (raw >> (fmt.width - 1)) & 1
    exponent = (raw >> fmt.fraction_width) & fmt.exponent_mask
    fraction = raw & fmt.fraction_mask
    return FloatFields(sign, exponent, fraction)


def compose_fields(fields: FloatFields, fmt: FloatFormat) -> int:
    return ((fields.sign << (fmt.width - 1))
            | (fields.exponent << fmt.fraction_width)
            | fields.fraction)


def render_bits(raw: int, fmt: FloatFormat) -> str:
    """
    Binary string of raw, MSB first, split into sign, exponent and
    fraction groups by single spaces.
    """
    digits = np.binary_repr(raw & fmt.width_mask, width=fmt.width)
    exponent_end = 1 + fmt.exponent_width
    return f"{digits[0]} {digits[1:exponent_end]} {digits[exponent_end:]}"
