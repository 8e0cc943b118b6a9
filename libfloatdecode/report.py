import logging
import sys
from typing import List, TextIO, Optional

from libfloatdecode.bits import reinterpret, extract_fields, render_bits
from libfloatdecode.formats import FloatFormat

logger = logging.getLogger(__name__)


def format_report(value, fmt: FloatFormat) -> List[str]:
    """
    Builds the decode report for one value.

    Args:
        value: The number to decode, stored as fmt.float_dtype first.
        fmt: BINARY32 or BINARY64.

    Returns:
        List of report lines (no trailing newlines): the value at fmt.digits
        significant digits, the grouped bit string, then sign, exponent and
        fraction.
    """
    raw = reinterpret(value, fmt)
    fields = extract_fields(raw, fmt)
    logger.debug("%s fields: %s", fmt.name, fields)

    pad = fmt.field_pad
    stored = float(fmt.float_dtype(value))

    frac = f"0x{fields.fraction:0{fmt.fraction_hex_digits}X}"
    if fmt.show_fraction_decimal:
        frac += f" ({fields.fraction})"

    return [
        f"{fmt.label:<{pad}}= {stored:.{fmt.digits}g}",
        f"{'bits':<{pad}}= {render_bits(raw, fmt)}",
        f"{'sign':<{pad}}= {fields.sign}",
        f"{'exp':<{pad}}= 0x{fields.exponent:0{fmt.exponent_hex_digits}X} ({fields.exponent})",
        f"{'frac':<{pad}}= {frac}",
    ]


def report(value, fmt: FloatFormat, out: Optional[TextIO] = None) -> None:
    if out is None:
        out = sys.stdout
    for line in format_report(value, fmt):
        out.write(line + "\n")
