import io

from libfloatdecode.formats import BINARY32, BINARY64
from libfloatdecode.report import format_report, report


def test_report_five():
    assert format_report(5.0, BINARY32) == [
        "float = 5",
        "bits  = 0 10000001 01000000000000000000000",
        "sign  = 0",
        "exp   = 0x81 (129)",
        "frac  = 0x200000 (2097152)",
    ]


def test_report_float_tenth():
    assert format_report(0.1, BINARY32) == [
        "float = 0.100000001",
        "bits  = 0 01111011 10011001100110011001101",
        "sign  = 0",
        "exp   = 0x7B (123)",
        "frac  = 0x4CCCCD (5033165)",
    ]


def test_report_double_tenth():
    assert format_report(0.1, BINARY64) == [
        "double = 0.10000000000000001",
        "bits   = 0 01111111011 1001100110011001100110011001100110011001100110011010",
        "sign   = 0",
        "exp    = 0x3FB (1019)",
        "frac   = 0x999999999999A",
    ]


def test_report_negative_zero():
    assert format_report(-0.0, BINARY32) == [
        "float = -0",
        "bits  = 1 00000000 00000000000000000000000",
        "sign  = 1",
        "exp   = 0x00 (0)",
        "frac  = 0x000000 (0)",
    ]


def test_report_writes_lines():
    out = io.StringIO()
    report(5.0, BINARY32, out)
    assert out.getvalue() == "\n".join(format_report(5.0, BINARY32)) + "\n"


def test_report_is_idempotent():
    first = io.StringIO()
    second = io.StringIO()
    report(0.1, BINARY64, first)
    report(0.1, BINARY64, second)
    assert first.getvalue() == second.getvalue()


def test_report_defaults_to_stdout(capsys):
    report(-0.0, BINARY32)
    assert capsys.readouterr().out.splitlines()[0] == "float = -0"
