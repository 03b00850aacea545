import sys

import pytest


@pytest.mark.parametrize(
    "text,expected",
    [("", b""), ("00", b"\x00"), ("48656c6c6f", b"Hello"), ("ABcd", b"\xab\xcd")],
)
def test_decode_hex_strict_ok(logic, text, expected):
    assert logic.decode_hex_strict(text) == expected


@pytest.mark.parametrize("bad", ["0", "abc", "zz", "48 65", " 48", "0x48", "4g"])
def test_decode_hex_strict_errors(logic, bad):
    with pytest.raises(ValueError):
        logic.decode_hex_strict(bad)


@pytest.mark.parametrize(
    "text,base,expected",
    [("17", 8, 15), ("-17", 8, -15), ("+17", 8, 15), ("101", 2, 5), ("-1", 2, -1), ("0", 8, 0)],
)
def test_parse_native_int(logic, text, base, expected):
    assert logic.parse_native_int(text, base) == expected


@pytest.mark.parametrize(
    "text,base",
    [("", 8), ("8", 8), ("1_0", 8), (" 1", 8), ("0o1", 8), ("2", 2), ("-", 2), ("10", 16)],
)
def test_parse_native_int_errors(logic, text, base):
    with pytest.raises(ValueError):
        logic.parse_native_int(text, base)


def test_parse_native_int_range_edges(logic):
    lo, hi = logic.int_range_for(logic.NATIVE_WORD_BYTES, signed=True)
    assert logic.parse_native_int(format(hi, "o"), 8) == hi
    assert logic.parse_native_int("-" + format(-lo, "o"), 8) == lo
    with pytest.raises(ValueError):
        logic.parse_native_int(format(hi + 1, "o"), 8)
    with pytest.raises(ValueError):
        logic.parse_native_int("-" + format(-lo + 1, "o"), 8)


def test_int_to_native_bytes_is_host_order(logic):
    data = logic.int_to_native_bytes(0x0102)
    assert len(data) == logic.NATIVE_WORD_BYTES
    assert int.from_bytes(data, sys.byteorder, signed=True) == 0x0102
    assert logic.int_to_native_bytes(-1) == b"\xff" * logic.NATIVE_WORD_BYTES


@pytest.mark.parametrize(
    "data,byteorder,expected",
    [
        (b"\x0f\x00\x00\x00", "little", b"\x0f"),
        (b"\x00\x00\x00\x0f", "big", b"\x0f"),
        (b"\x00\x01\x00\x00", "little", b"\x00\x01"),
        (b"\x00\x00\x01\x00", "big", b"\x01\x00"),
        (b"\x00\x00", "little", b""),
        (b"\xff\xff", "big", b"\xff\xff"),
    ],
)
def test_drop_leading_zeros(logic, data, byteorder, expected):
    assert logic.drop_leading_zeros(data, byteorder) == expected


def test_drop_leading_zeros_bad_byteorder(logic):
    with pytest.raises(ValueError):
        logic.drop_leading_zeros(b"\x00", "middle")


@pytest.mark.parametrize(
    "width,signed,expect_lo,expect_hi",
    [
        (1, False, 0, 255),
        (2, True, -32768, 32767),
        (4, False, 0, 2**32 - 1),
        (8, True, -(2**63), 2**63 - 1),
    ],
)
def test_int_range_for(logic, width, signed, expect_lo, expect_hi):
    assert logic.int_range_for(width, signed) == (expect_lo, expect_hi)


@pytest.mark.parametrize("width", [0, 9])
def test_int_range_for_bad_width(logic, width):
    with pytest.raises(ValueError):
        logic.int_range_for(width, signed=False)


def test_input_mode_toggle_and_display(logic):
    Mode = logic.InputMode
    assert Mode.RAW.toggled() is Mode.SMART
    assert Mode.SMART.toggled() is Mode.RAW
    assert str(Mode.RAW) == "Raw"
    assert str(Mode.SMART) == "Smart"
