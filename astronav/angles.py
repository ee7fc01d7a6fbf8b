"""Conversions between decimal angles and sexagesimal notation.

Degrees are written ``DD:MM:SS`` and hours ``HH:MM:SS``; right ascension and
declination pairs may also be written with spaces, ``HH MM SS.SS ±DD MM SS.S``.
"""

import math

from astronav.constants import DEGREES_PER_HOUR
from astronav.errors import InvalidNumericFieldError


# ----------------------------------------------------------------------
# 1. PARSING SEXAGESIMAL STRINGS
# ----------------------------------------------------------------------

def _parse_field(value: str, field: str, text: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise InvalidNumericFieldError(text, field) from None
    if not math.isfinite(number):
        raise InvalidNumericFieldError(text, field)
    return number


def _split_colon_fields(text: str) -> list[str]:
    parts = text.strip().split(":")
    if len(parts) != 3:
        raise InvalidNumericFieldError(text)
    return parts


def dms_to_deg(dms: str) -> float:
    """
    Converts a Degrees:Minutes:Seconds string to decimal degrees.

    The sign is only written on the degrees field ("-26:29:11.8"); the
    minutes and seconds are subtracted from a negative degrees value.

    Args:
        dms (str): Angle in "DD:MM:SS" format (e.g., "14:16:12.2").

    Returns:
        float: The angle in decimal degrees (e.g., 14.270055555555556).

    Raises:
        InvalidNumericFieldError: If a field is missing or not a number.
    """
    parts = _split_colon_fields(dms)
    is_negative = dms.strip().startswith("-")

    degrees = _parse_field(parts[0], "degrees", dms)
    minutes = _parse_field(parts[1], "minutes", dms)
    seconds = _parse_field(parts[2], "seconds", dms)

    if is_negative:
        return degrees - (minutes / 60.0 + seconds / 3600.0)
    return degrees + (minutes / 60.0 + seconds / 3600.0)


def hms_to_deg(hms: str) -> float:
    """
    Converts an Hours:Minutes:Seconds string to decimal degrees (1 hour = 15 degrees).

    Args:
        hms (str): Time angle in "HH:MM:SS" format, 24 hour clock (e.g., "16:30:55.2").

    Returns:
        float: The angle in decimal degrees (e.g., 247.73000000000002).

    Raises:
        InvalidNumericFieldError: If a field is missing or not a number.
    """
    parts = _split_colon_fields(hms)

    hours = _parse_field(parts[0], "hours", hms)
    minutes = _parse_field(parts[1], "minutes", hms)
    seconds = _parse_field(parts[2], "seconds", hms)

    return (hours + (minutes / 60.0 + seconds / 3600.0)) * DEGREES_PER_HOUR


def hms_to_hours(hms: str) -> float:
    """Converts an "HH:MM:SS" string to decimal hours."""
    return hms_to_deg(hms) / DEGREES_PER_HOUR


# ----------------------------------------------------------------------
# 2. FORMATTING DECIMAL VALUES
# ----------------------------------------------------------------------

def _split_sexagesimal(value: float) -> tuple[bool, int, int, float]:
    # Whole units, then the fraction cascades into minutes and seconds.
    negative = value < 0
    magnitude = abs(value)
    units = math.floor(magnitude)
    fraction = magnitude - units
    minutes = math.floor(fraction * 60.0)
    seconds = (fraction * 60.0 - minutes) * 60.0
    return negative, units, minutes, seconds


def _format_sexagesimal(value: float) -> str:
    negative, units, minutes, seconds = _split_sexagesimal(value)
    sign = "-" if negative else ""
    return f"{sign}{units}:{minutes}:{seconds}"


def deg_to_dms(deg: float) -> str:
    """
    Converts decimal degrees to a "D:M:S" string.

    Example:
        >>> deg_to_dms(155.6219597)
        '155:37:19.05491999996684'
    """
    return _format_sexagesimal(deg)


def deg_to_dms_tuple(deg: float) -> tuple[int, int, float]:
    """
    Converts decimal degrees to a (degrees, minutes, seconds) tuple.

    The sign is carried on the degrees only, so values in (-1, 0) come
    back with a zero degrees field; use deg_to_dms() when the sign matters.
    """
    negative, units, minutes, seconds = _split_sexagesimal(deg)
    return (-units if negative else units, minutes, seconds)


def hours_to_hms(hours: float) -> str:
    """
    Converts decimal hours to an "H:M:S" string.

    Example:
        >>> hours_to_hms(5.6219597)
        '5:37:19.054919999998816'
    """
    return _format_sexagesimal(hours)


def hours_to_hms_tuple(hours: float) -> tuple[int, int, float]:
    """Converts decimal hours to an (hours, minutes, seconds) tuple."""
    negative, units, minutes, seconds = _split_sexagesimal(hours)
    return (-units if negative else units, minutes, seconds)


def decimal_hours_to_time(decimal_hours: float) -> str:
    """
    Convert decimal hours to HH:MM:SS.SS format

    Args:
        decimal_hours: Time in decimal hours (e.g., 6.5 = 6:30:00)

    Returns:
        String in format "HH:MM:SS.SS"
    """
    # Round to the printed precision first, so 59.999 s never shows as 60.00
    total_seconds = round((decimal_hours % 24) * 3600, 2) % 86400

    hours = int(total_seconds // 3600)
    minutes = int(total_seconds % 3600 // 60)
    seconds = total_seconds % 60

    return f"{hours:02d}:{minutes:02d}:{seconds:05.2f}"


# ----------------------------------------------------------------------
# 3. RIGHT ASCENSION / DECLINATION PAIRS
# ----------------------------------------------------------------------

def convert_ra_components(hours: float, minutes: float, seconds: float) -> tuple[float, float, float]:
    """
    Convert right ascension components to decimal hours, degrees, and radians.

    Args:
        hours (float): Hours component of right ascension
        minutes (float): Minutes component of right ascension
        seconds (float): Seconds component of right ascension

    Returns:
        tuple: (decimal_hours, degrees, radians)

    Example:
        >>> convert_ra_components(14.0, 23.0, 45.67)
        (14.396019444444445, 215.9402916..., 3.768...)
    """
    ra_decimal_hours = hours + minutes / 60 + seconds / 3600
    degrees = ra_decimal_hours * DEGREES_PER_HOUR
    radians = math.radians(degrees)

    return (ra_decimal_hours, degrees, radians)


def parse_ra_string(ra_string: str) -> tuple[float, float, float]:
    """
    Parse a right ascension string in "HH MM SS.SS" format into
    (hours, minutes, seconds).

    Raises:
        InvalidNumericFieldError: If the string does not have three numeric parts.
    """
    parts = ra_string.strip().split()
    if len(parts) != 3:
        raise InvalidNumericFieldError(ra_string)

    return (
        _parse_field(parts[0], "hours", ra_string),
        _parse_field(parts[1], "minutes", ra_string),
        _parse_field(parts[2], "seconds", ra_string),
    )


def parse_and_convert_ra_dec(ra_dec_string: str) -> tuple[float, float, float, float]:
    """
    Parses a combined Right Ascension and Declination string and converts
    both to decimal degrees and radians.

    The expected input format is: "HH MM SS.SS ±DD MM SS.S"
    Example: "19 34 30.77 -17 34 36.4" or "05 14 32.2 +08 12 55.0"

    Args:
        ra_dec_string (str): Combined RA and DEC string.

    Returns:
        tuple[float, float, float, float]:
            (ra_decimal_hours, ra_degrees, dec_degrees, dec_radians)

    Raises:
        InvalidNumericFieldError: If the string does not have 6 numeric components.
    """
    parts = ra_dec_string.strip().split()
    if len(parts) != 6:
        raise InvalidNumericFieldError(ra_dec_string)

    ra_h = _parse_field(parts[0], "ra_hours", ra_dec_string)
    ra_m = _parse_field(parts[1], "ra_minutes", ra_dec_string)
    ra_s = _parse_field(parts[2], "ra_seconds", ra_dec_string)

    # The sign lives on the degrees field only; "-00" must stay negative.
    dec_d_str = parts[3]
    dec_sign = -1.0 if dec_d_str.startswith("-") else 1.0
    dec_d_abs = abs(_parse_field(dec_d_str, "dec_degrees", ra_dec_string))
    dec_m = _parse_field(parts[4], "dec_minutes", ra_dec_string)
    dec_s = _parse_field(parts[5], "dec_seconds", ra_dec_string)

    ra_decimal_hours, ra_degrees, _ = convert_ra_components(ra_h, ra_m, ra_s)
    dec_decimal_degrees = dec_sign * (dec_d_abs + dec_m / 60.0 + dec_s / 3600.0)

    return (ra_decimal_hours, ra_degrees, dec_decimal_degrees, math.radians(dec_decimal_degrees))


# ----------------------------------------------------------------------
# 4. NORMALIZATION
# ----------------------------------------------------------------------

def normalize_degrees(angle: float) -> float:
    """Wraps an angle into [0.0, 360.0)."""
    angle = angle % 360.0
    # -1e-17 % 360.0 rounds to 360.0
    return 0.0 if angle == 360.0 else angle


def normalize_hours(hours: float) -> float:
    """Wraps a time of day into [0.0, 24.0)."""
    hours = hours % 24.0
    return 0.0 if hours == 24.0 else hours
