# tests/test_angles.py
from __future__ import annotations

import math

import pytest
from hypothesis import given, strategies as st

from astronav.angles import (
    convert_ra_components,
    decimal_hours_to_time,
    deg_to_dms,
    deg_to_dms_tuple,
    dms_to_deg,
    hms_to_deg,
    hms_to_hours,
    hours_to_hms,
    hours_to_hms_tuple,
    normalize_degrees,
    normalize_hours,
    parse_and_convert_ra_dec,
    parse_ra_string,
)
from astronav.errors import AstronavError, InvalidNumericFieldError

# ─────────────────────────────────────────────────────────────────────────────
# Parsing
# ─────────────────────────────────────────────────────────────────────────────

def test_dms_to_deg_negative_subtracts_minutes_and_seconds() -> None:
    assert dms_to_deg("-26:29:11.8") == pytest.approx(-26.48661111111111, abs=1e-12)


def test_dms_to_deg_positive() -> None:
    assert dms_to_deg("14:16:12.2") == pytest.approx(14.270055555555556, abs=1e-12)


def test_hms_to_deg_multiplies_by_15() -> None:
    assert hms_to_deg("16:30:55.2") == pytest.approx(247.73, abs=1e-9)
    assert hms_to_deg("13:23:30") == pytest.approx(200.875, abs=1e-9)


def test_hms_to_hours() -> None:
    assert hms_to_hours("06:30:00") == pytest.approx(6.5)


@pytest.mark.parametrize("text", ["-26-29:11.8", "12:30", "1:2:3:4", "aa:10:10", "10:xx:0", "10:0:nan", ""])
def test_malformed_sexagesimal_raises(text: str) -> None:
    with pytest.raises(InvalidNumericFieldError):
        dms_to_deg(text)


def test_invalid_field_error_is_a_value_error() -> None:
    with pytest.raises(ValueError) as info:
        hms_to_deg("12:oops:00")
    assert isinstance(info.value, AstronavError)
    assert info.value.field == "minutes"


# ─────────────────────────────────────────────────────────────────────────────
# Formatting
# ─────────────────────────────────────────────────────────────────────────────

def test_hours_to_hms_recovers_hours() -> None:
    text = hours_to_hms(5.6219597)
    assert text.startswith("5:37:")
    assert hms_to_hours(text) == pytest.approx(5.6219597, abs=1e-5)


def test_tuple_forms() -> None:
    h, m, s = hours_to_hms_tuple(5.6219597)
    assert (h, m) == (5, 37)
    assert s == pytest.approx(19.055, abs=1e-3)

    d, m, s = deg_to_dms_tuple(-26.48661111111111)
    assert (d, m) == (-26, 29)
    assert s == pytest.approx(11.8, abs=1e-6)


def test_negative_sign_kept_on_units_only() -> None:
    assert deg_to_dms(-0.5) == "-0:30:0.0"
    assert deg_to_dms(-26.48661111111111).startswith("-26:29:")


@given(st.floats(min_value=-359.999, max_value=359.999, allow_nan=False))
def test_deg_to_dms_roundtrip(deg: float) -> None:
    assert dms_to_deg(deg_to_dms(deg)) == pytest.approx(deg, abs=1e-9)


@pytest.mark.parametrize(
    "hours, expected",
    [(6.5, "06:30:00.00"), (0.0, "00:00:00.00"), (25.25, "01:15:00.00"), (-1.0, "23:00:00.00")],
)
def test_decimal_hours_to_time(hours: float, expected: str) -> None:
    assert decimal_hours_to_time(hours) == expected


# ─────────────────────────────────────────────────────────────────────────────
# RA / Dec strings
# ─────────────────────────────────────────────────────────────────────────────

def test_convert_ra_components() -> None:
    hours, degrees, radians = convert_ra_components(14.0, 23.0, 45.67)
    assert hours == pytest.approx(14.396019444444445)
    assert degrees == pytest.approx(215.94029166666667)
    assert radians == pytest.approx(math.radians(degrees))


def test_parse_ra_string() -> None:
    assert parse_ra_string("19 34 30.77") == (19.0, 34.0, 30.77)
    with pytest.raises(InvalidNumericFieldError):
        parse_ra_string("19 34")


def test_parse_and_convert_ra_dec() -> None:
    ra_hours, ra_deg, dec_deg, dec_rad = parse_and_convert_ra_dec("19 34 30.77 -17 34 36.4")
    assert ra_hours == pytest.approx(19 + 34 / 60 + 30.77 / 3600)
    assert ra_deg == pytest.approx(ra_hours * 15)
    assert dec_deg == pytest.approx(-(17 + 34 / 60 + 36.4 / 3600))
    assert dec_rad == pytest.approx(math.radians(dec_deg))


def test_parse_and_convert_ra_dec_negative_zero_degrees() -> None:
    _, _, dec_deg, _ = parse_and_convert_ra_dec("05 14 32.2 -00 12 55.0")
    assert dec_deg == pytest.approx(-(12 / 60 + 55 / 3600))


def test_parse_and_convert_ra_dec_wrong_field_count() -> None:
    with pytest.raises(InvalidNumericFieldError):
        parse_and_convert_ra_dec("05 14 32.2 +08 12")


# ─────────────────────────────────────────────────────────────────────────────
# Normalization
# ─────────────────────────────────────────────────────────────────────────────

@given(st.floats(min_value=-1e6, max_value=1e6, allow_nan=False))
def test_normalize_degrees_range(angle: float) -> None:
    assert 0.0 <= normalize_degrees(angle) < 360.0
    assert 0.0 <= normalize_hours(angle) < 24.0


@pytest.mark.parametrize("text", ["10:30:0.0", "-26:15:0.0", "45:45:0.0", "-0:30:0.0", "1:0:0.0"])
def test_dms_string_roundtrip(text: str) -> None:
    assert deg_to_dms(dms_to_deg(text)) == text


@given(
    st.integers(min_value=-359, max_value=359),
    st.integers(min_value=0, max_value=59),
    st.floats(min_value=0.0, max_value=59.99),
)
def test_parse_then_format_keeps_the_angle(degrees: int, minutes: int, seconds: float) -> None:
    text = f"{degrees}:{minutes}:{seconds}"
    d, m, s = deg_to_dms_tuple(dms_to_deg(text))

    magnitude = abs(d) * 3600 + m * 60 + s
    assert magnitude == pytest.approx(abs(degrees) * 3600 + minutes * 60 + seconds, abs=1e-6)
