from libfloatdecode.formats import (
    FloatFormat,
    BINARY32,
    BINARY64,
    UnsupportedWidthError,
    get_format,
)
from libfloatdecode.bits import (
    FloatFields,
    reinterpret,
    from_bits,
    extract_fields,
    compose_fields,
    render_bits,
)
from libfloatdecode.report import format_report, report

__version__ = "0.1.0"
