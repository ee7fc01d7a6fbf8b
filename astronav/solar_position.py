"""
Solar declination and position in the sky (NOAA General Solar Position).

Every quantity is computed by a free function taking plain decimal degrees,
decimal hours or minutes; NOAASun supplies its own fields to these.
"""

import enum
import logging
import math
from dataclasses import dataclass

from astronav.angles import normalize_degrees
from astronav.constants import AZIMUTH_EPSILON, MINUTES_PER_DEGREE
from astronav.errors import IndeterminateAzimuthError
from astronav.timekeeping import days_in_year

log = logging.getLogger(__name__)


class DeclinationModel(str, enum.Enum):
    HARMONIC_SERIES = "harmonic_series"
    CLOSED_FORM = "closed_form"


# ----------------------------------------------------------------------
# 1. FRACTIONAL YEAR
# ----------------------------------------------------------------------

def fractional_year_by_hour(year: int, doy: int, hour: float) -> float:
    """
    Returns the fractional year angle in radians for a year, day of the year
    and hour of the day.

    Example:
        >>> fractional_year_by_hour(2024, 137, 15)
        2.336881420600604
    """
    return (2.0 * math.pi / days_in_year(year)) * (doy - 1.0 + ((hour - 12.0) / 24.0))


def fractional_year_by_day(year: int, doy: int) -> float:
    """Returns the fractional year angle in radians at the start of a day of the year."""
    return (2.0 * math.pi / days_in_year(year)) * (doy - 1.0)


def fractional_day_of_year(year: int, doy: int, hour: float, timezone: float) -> float:
    """Fractional day of the year, corrected to UT by the timezone offset."""
    return (doy / days_in_year(year)) + (doy - 1.0) - (timezone / 24.0) + (hour / 24.0)


# ----------------------------------------------------------------------
# 2. DECLINATION
# ----------------------------------------------------------------------

def declination_by_harmonic_series(fy: float) -> float:
    """
    Sun's declination in degrees for a fractional year angle `fy` (radians),
    using the NOAA Fourier series.
    """
    dec = (
        0.006918
        - (0.399912 * math.cos(fy))
        + (0.070257 * math.sin(fy))
        - (0.006758 * math.cos(2.0 * fy))
        + (0.000907 * math.sin(2.0 * fy))
        - (0.002697 * math.cos(3.0 * fy))
        + (0.00148 * math.sin(3.0 * fy))
    )
    return math.degrees(dec)


def declination_by_closed_form(frac_day_of_year: float) -> float:
    """
    Sun's declination in degrees for a fractional day of the year:

        dec = -asin(0.39779 cos(0.98565 (N + 10) + 1.914 sin(0.98565 (N - 2))))

    with the angles inside the cosine in degrees. This accounts for the
    eccentricity of the Earth's orbit and is the default model.
    """
    a = 0.985653269 * (frac_day_of_year + 10.0)
    b = 1.913679036 * math.sin(math.radians(0.985653269 * (frac_day_of_year - 2.0)))
    dec = -math.asin(0.397776944 * math.cos(math.radians(a + b)))

    return math.degrees(dec)


# ----------------------------------------------------------------------
# 3. HOUR ANGLE, ZENITH, ALTITUDE, AZIMUTH
# ----------------------------------------------------------------------

def hour_angle(eot: float, longitude: float, timezone: float, hour: int, minute: int, second: float) -> float:
    """
    Sun's hour angle in degrees [0, 360) at a local clock time.

    Args:
        eot (float): Equation of time in minutes.
        longitude (float): Degrees, + east.
        timezone (float): Hours from UTC, + east.
        hour, minute, second: Local clock time.
    """
    time_offset = eot + (MINUTES_PER_DEGREE * longitude) - 60.0 * timezone
    true_solar_time = (hour * 60.0 + minute + second / 60.0) + time_offset

    # Far-east timezones (UTC+13, UTC+14) push the angle below -180
    return normalize_degrees((true_solar_time / MINUTES_PER_DEGREE) - 180.0)


def zenith_angle(latitude: float, declination: float, hour_angle_deg: float) -> float:
    """Solar zenith angle in degrees [0, 180]."""
    lat = math.radians(latitude)
    dec = math.radians(declination)
    ha = math.radians(hour_angle_deg)

    cos_sza = (math.sin(lat) * math.sin(dec)) + (math.cos(lat) * math.cos(dec) * math.cos(ha))
    # Rounding can push the cosine a hair outside [-1, 1]
    cos_sza = max(-1.0, min(1.0, cos_sza))

    return math.degrees(math.acos(cos_sza))


def altitude_angle(zenith: float) -> float:
    """Altitude (elevation) above the horizon in degrees from the zenith angle."""
    return 90.0 - zenith


def azimuth_angle(latitude: float, declination: float, zenith: float, hour_angle_deg: float) -> float:
    """
    Solar azimuth in degrees [0, 360), clockwise from north.

    Raises:
        IndeterminateAzimuthError: When the Sun is at the zenith or nadir, or
            the observer stands on a pole, so that every azimuth is equivalent.
    """
    lat = math.radians(latitude)
    dec = math.radians(declination)
    sza = math.radians(zenith)

    denominator = math.cos(lat) * math.sin(sza)
    if abs(denominator) < AZIMUTH_EPSILON:
        raise IndeterminateAzimuthError(
            f"Azimuth undefined for latitude={latitude}, zenith={zenith}"
        )

    saa = -(((math.sin(lat) * math.cos(sza)) - math.sin(dec)) / denominator)
    saa = max(-1.0, min(1.0, saa))

    if hour_angle_deg > 180.0:
        return math.degrees(math.acos(saa))
    return 360.0 - math.degrees(math.acos(saa))


def right_ascension(lmst: float, hour_angle_deg: float) -> float:
    """Right ascension in degrees from the local mean sidereal time and the hour angle."""
    return lmst - hour_angle_deg


# ----------------------------------------------------------------------
# 4. POSITION
# ----------------------------------------------------------------------

@dataclass(frozen=True)
class SunPosition:
    declination: float
    hour_angle: float
    zenith: float
    altitude: float
    azimuth: float
    right_ascension: float | None = None


def sun_position(
    latitude: float,
    declination: float,
    eot: float,
    longitude: float,
    timezone: float,
    hour: int,
    minute: int,
    second: float,
    lmst: float | None = None,
) -> SunPosition:
    """
    Computes the Sun's place in the sky for an observer.

    Args:
        latitude (float): Degrees, + north.
        declination (float): Sun's declination in degrees.
        eot (float): Equation of time in minutes.
        longitude (float): Degrees, + east.
        timezone (float): Hours from UTC, + east.
        hour, minute, second: Local clock time.
        lmst (float | None): Local mean sidereal time in degrees. When given,
            the right ascension is filled in.

    Returns:
        SunPosition

    Raises:
        IndeterminateAzimuthError: When the Sun is exactly overhead.
    """
    ha = hour_angle(eot, longitude, timezone, hour, minute, second)
    sza = zenith_angle(latitude, declination, ha)
    saa = azimuth_angle(latitude, declination, sza, ha)

    log.debug("sun position: dec=%s eot=%s ha=%s zenith=%s azimuth=%s", declination, eot, ha, sza, saa)

    return SunPosition(
        declination=declination,
        hour_angle=ha,
        zenith=sza,
        altitude=altitude_angle(sza),
        azimuth=saa,
        right_ascension=None if lmst is None else right_ascension(lmst, ha),
    )
