"""End-to-end tests for parsing, balancing and reporting"""

import io

from balancer import balance_each_scale
from report import format_record, report_changes, write_report
from scale_parser import parse_scales


def run(text):
    """Parse, balance and report text, returning the report"""
    scales = parse_scales(io.StringIO(text)).scales
    balance_each_scale(scales)
    out = io.StringIO()
    write_report(out, scales)
    return out.getvalue()


def test_simple_input():
    """a scale holding a nested scale should balance against its total mass"""
    assert run("# Comment line\nA,2,B\nB,1,3\n") == "A,5,0\nB,2,0\n"


def test_balanced_scale_needs_no_adjustment():
    assert run("S,5,5\n") == "S,0,0\n"


def test_nested_scale_balancing():
    assert run("Main,Sub,6\nSub,4,4\n") == "Main,0,3\nSub,0,0\n"


def test_deeply_nested_scales():
    """deep nesting should accumulate mass all the way up"""
    out = run("\nA,B,1\nB,C,2\nC,3,4\n")

    assert "A,0,18" in out
    assert "B,0,7" in out
    assert "C,1,0" in out


def test_two_nested_children():
    out = run("# Comment\nMain,Left,Right\nLeft,3,1\nRight,2,2\n")

    assert out == "Main,0,2\nLeft,0,2\nRight,0,0\n"


def test_invalid_and_blank_lines():
    """rejected lines should not stop the remaining scales from being reported"""
    out = run("# valid\nInvalid,,Invalid\nS1,5,S2\nS2,5,5\n")

    assert out == "S1,6,0\nS2,0,0\n"


def test_undefined_reference_reports_zero():
    """a referenced but undefined scale should be reported with no counterweights"""
    assert run("A,Ghost,3\n") == "A,2,0\nGhost,0,0\n"


def test_empty_input():
    assert run("") == ""


def test_format_record_and_report_changes():
    """report_changes should return records without line terminators"""
    scales = parse_scales(["Main,Sub,6", "Sub,4,4"]).scales
    balance_each_scale(scales)

    assert format_record(scales["Main"], scales) == "Main,0,3"
    assert report_changes(scales) == ["Main,0,3", "Sub,0,0"]
