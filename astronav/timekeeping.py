"""Calendar and time-scale primitives: day of year, Julian days, sidereal time."""

import logging
import math
from dataclasses import dataclass
from datetime import datetime

import pytz
from tzfpy import get_tz

from astronav.angles import normalize_degrees
from astronav.constants import DAYS_PER_JULIAN_CENTURY, J2000, MINUTES_PER_DAY, SECONDS_PER_DAY
from astronav.errors import TimezoneLookupError

log = logging.getLogger(__name__)

_DAYS_BEFORE_MONTH = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


# ----------------------------------------------------------------------
# 1. CALENDAR ARITHMETIC
# ----------------------------------------------------------------------

def is_leap_year(year: int) -> bool:
    """Gregorian rule: divisible by 4 and not by 100, unless divisible by 400."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def _days_in_month(year: int, month: int) -> int:
    if month == 12:
        return 31
    days = _DAYS_BEFORE_MONTH[month] - _DAYS_BEFORE_MONTH[month - 1]
    if month == 2 and is_leap_year(year):
        days += 1
    return days


def day_of_year(year: int, month: int, day: int) -> int:
    """
    Returns the ordinal day of the year (May 16th, 2024 is day 137).

    Raises:
        ValueError: If the month or day is out of range.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month {month}: must be 1-12.")
    if not 1 <= day <= _days_in_month(year, month):
        raise ValueError(f"Invalid day {day} for {year}-{month:02d}.")

    doy = _DAYS_BEFORE_MONTH[month - 1] + day
    if month > 2 and is_leap_year(year):
        doy += 1
    return doy


def day_of_year_to_month_day(year: int, doy: int) -> tuple[int, int]:
    """
    Inverse of day_of_year(): returns (month, day) for an ordinal day.

    Raises:
        ValueError: If doy is outside 1..days_in_year(year).
    """
    if not 1 <= doy <= days_in_year(year):
        raise ValueError(f"Invalid day of year {doy} for {year}.")

    remaining = doy
    for month in range(1, 13):
        length = _days_in_month(year, month)
        if remaining <= length:
            return month, remaining
        remaining -= length

    raise AssertionError("unreachable")


# ----------------------------------------------------------------------
# 2. JULIAN DAY CALCULATION
# ----------------------------------------------------------------------

def julian_day_number(day: int, month: int, year: int) -> int:
    """
    Computes the (integer) Julian Day Number of a Gregorian calendar date.

    The day number refers to the noon of that date, e.g.
    julian_day_number(12, 5, 2024) == 2460443.
    """
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3

    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045


def julian_time(julian_day: int, hour: int, minute: int, sec: float, timezone: float = 0.0) -> float:
    """
    Computes the Julian Time (continuous day count) for a Julian Day Number
    and a time of day.

    Args:
        julian_day (int): Julian Day Number (noon based).
        hour, minute, sec: Local time of day.
        timezone (float): Offset of the local time from UTC in hours (+ east).

    Returns:
        float: The Julian Time, e.g. julian_time(2460443, 17, 30, 45) == 2460443.2296875003
    """
    return (
        julian_day
        + ((hour - timezone - 12.0) / 24.0)
        + (minute / MINUTES_PER_DAY)
        + (sec / SECONDS_PER_DAY)
    )


def julian_day(Y: int, M: int, D: float) -> float:
    """
    Calculates the Julian Date (JD) for a given calendar date using formula (7.1)
    from Astronomical Algorithms (Meeus).

    Args:
        Y (int): Year.
        M (int): Month number (1=Jan, 12=Dec).
        D (float): Day of the month (with decimals for time).

    Returns:
        float: The calculated Julian Date (JD), which starts at midnight.
    """
    # The Gregorian calendar begins on 15 October 1582; the comparison must
    # be against the original Y, M, D.
    B = 0
    if Y > 1582 or (Y == 1582 and M > 10) or (Y == 1582 and M == 10 and D >= 15):
        A = math.floor(Y / 100)
        B = 2 - A + math.floor(A / 4)

    # Jan (1) and Feb (2) become month 13 and 14 of the preceding year.
    if M <= 2:
        Y = Y - 1
        M = M + 12

    term1 = math.floor(365.25 * (Y + 4716))
    term2 = math.floor(30.6001 * (M + 1))

    return term1 + term2 + D + B - 1524.5


def julian_centuries(julian_time: float, epoch: float = J2000) -> float:
    """Time elapsed since `epoch` in Julian centuries of 36525 days."""
    return (julian_time - epoch) / DAYS_PER_JULIAN_CENTURY


# ----------------------------------------------------------------------
# 3. SIDEREAL TIME CALCULATION
# ----------------------------------------------------------------------

def gmst_in_degrees(julian_time: float) -> float:
    """
    Calculates the Mean Sidereal Time at Greenwich (GMST, or theta_0) in degrees
    using equation (11.4) from Astronomical Algorithms.

    Args:
        julian_time (float): Julian Time of the observation (UT).

    Returns:
        float: GMST in decimal degrees, normalized to [0.0, 360.0).
    """
    jd_diff = julian_time - J2000
    T = jd_diff / DAYS_PER_JULIAN_CENTURY

    theta_0 = 280.46061837 + (360.98564736629 * jd_diff) + (0.000387933 * T**2) - (T**3 / 38710000.0)

    return normalize_degrees(theta_0)


def lmst_in_degrees(gmst_in_deg: float, longitude: float) -> float:
    """
    Local Mean Sidereal Time in degrees [0.0, 360.0) from GMST and the
    longitude of the local meridian (+ east).
    """
    return normalize_degrees(gmst_in_deg + longitude)


def lmst_in_hours(gmst_in_deg: float, longitude: float) -> float:
    """Local Mean Sidereal Time in decimal hours [0.0, 24.0)."""
    return lmst_in_degrees(gmst_in_deg, longitude) / 15.0


# ----------------------------------------------------------------------
# 4. TIMEZONE LOOKUP
# ----------------------------------------------------------------------

def utc_offset_from_coords(lat: float, lon: float, when: datetime) -> tuple[float, str]:
    """
    Get the UTC offset in force at a place and local time.

    Args:
        lat (float): Latitude in degrees (+ north).
        lon (float): Longitude in degrees (+ east).
        when (datetime): Naive local date and time; decides whether DST applies.

    Returns:
        tuple: (offset_hours, timezone_name)

    Raises:
        TimezoneLookupError: If no timezone is known for the coordinates.
    """
    # tzfpy uses (lon, lat) order
    tz_name = get_tz(lon, lat)
    if not tz_name:
        raise TimezoneLookupError(f"Timezone not found: lat={lat}, lon={lon}")

    tz = pytz.timezone(tz_name)
    offset = tz.localize(when.replace(tzinfo=None)).utcoffset().total_seconds() / 3600

    log.debug("utc offset for lat=%s lon=%s at %s: %s (%s)", lat, lon, when, offset, tz_name)
    return offset, tz_name


# ----------------------------------------------------------------------
# 5. RECORD
# ----------------------------------------------------------------------

@dataclass(frozen=True)
class AstroTime:
    """A civil date and time of day, for callers who prefer a record to the free functions."""

    day: int
    month: int
    year: int
    hour: int = 0
    min: int = 0
    sec: float = 0
    timezone: float = 0.0

    def day_of_year(self) -> int:
        return day_of_year(self.year, self.month, self.day)

    def julian_day_number(self) -> int:
        return julian_day_number(self.day, self.month, self.year)

    def julian_time(self) -> float:
        return julian_time(self.julian_day_number(), self.hour, self.min, self.sec, self.timezone)

    def gmst_in_degrees(self) -> float:
        return gmst_in_degrees(self.julian_time())

    def lmst_in_degrees(self, longitude: float) -> float:
        return lmst_in_degrees(self.gmst_in_degrees(), longitude)

    def lmst_in_decimal_hours(self, longitude: float) -> float:
        return lmst_in_hours(self.gmst_in_degrees(), longitude)
