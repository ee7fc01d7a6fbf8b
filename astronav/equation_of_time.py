"""
Equation of time: apparent solar time minus mean solar time, in minutes.

Three models are provided and kept apart, since their results differ by a
few tenths of a minute and callers pin the exact output of one of them:

* equation_of_time_by_fractional_year()  - NOAA harmonic series
* equation_of_time_by_julian_centuries() - W. M. Smart series (epoch 1900)
* equation_of_time_by_mean_anomaly()     - two-term sine fit
"""

import enum
import logging
import math

from astronav.constants import J1900, MINUTES_PER_DEGREE
from astronav.timekeeping import julian_centuries

log = logging.getLogger(__name__)


class EquationOfTimeModel(str, enum.Enum):
    FRACTIONAL_YEAR = "fractional_year"
    JULIAN_CENTURIES = "julian_centuries"
    MEAN_ANOMALY = "mean_anomaly"


def equation_of_time_by_fractional_year(fy: float) -> float:
    """
    Equation of time in minutes from the fractional year angle `fy` (radians),
    using the NOAA Fourier series.

    The result ranges from about -14 to +16 minutes.
    """
    return 229.18 * (
        0.000075
        + (0.001868 * math.cos(fy))
        - (0.032077 * math.sin(fy))
        - (0.014615 * math.cos(2.0 * fy))
        - (0.040849 * math.sin(2.0 * fy))
    )


def equation_of_time_by_julian_centuries(julian_time: float) -> float:
    """
    Equation of time in minutes for a Julian Time, after W. M. Smart,
    "Text-Book on Spherical Astronomy" (1956), as given by Meeus.

    Args:
        julian_time (float): Julian Time of the instant.

    Returns:
        float: Equation of time in minutes.

    Algorithm Steps:
        1. T = Julian centuries since 1899 Dec 31, 12h (JD 2415020.0)
        2. Obliquity of the ecliptic (epsilon), y = tan^2(epsilon / 2)
        3. Sun's mean longitude L and mean anomaly M, both mod 360
        4. Eccentricity of the Earth's orbit e
        5. E = y sin2L - 2e sinM + 4ey sinM cos2L - y^2/2 sin4L - 5/4 e^2 sin2M,
           in radians; converted to degrees then to minutes (1 degree = 4 minutes)
    """
    T = julian_centuries(julian_time, epoch=J1900)

    obliquity = 23.452294 - (0.0130125 * T) - (0.00000164 * T**2) + (0.000000503 * T**3)
    y = math.tan(math.radians(obliquity / 2.0)) ** 2

    L = (279.69668 + (36000.76892 * T) + (0.0003025 * T**2)) % 360.0
    e = 0.01675104 - (0.0000418 * T) - (0.000000126 * T**2)
    M = (358.47583 + (35999.04975 * T) - (0.000150 * T**2) - (0.0000033 * T**3)) % 360.0

    L_rad = math.radians(L)
    M_rad = math.radians(M)

    eot = (
        (y * math.sin(2.0 * L_rad))
        - (2.0 * e * math.sin(M_rad))
        + (4.0 * e * y * math.sin(M_rad) * math.cos(2.0 * L_rad))
        - (0.5 * y**2 * math.sin(4.0 * L_rad))
        - (1.25 * e**2 * math.sin(2.0 * M_rad))
    )

    log.debug("smart eot: T=%s L=%s M=%s e=%s y=%s -> %s rad", T, L, M, e, y, eot)
    return math.degrees(eot) * MINUTES_PER_DEGREE


def equation_of_time_by_mean_anomaly(year: int, doy: int) -> float:
    """
    Equation of time in minutes from a two-term fit in the Earth's mean
    anomaly, counted in days since the start of 2000.
    """
    n = 365.0 * (year - 2000.0) + doy
    mean_anomaly = 6.24004077 + 0.01720197 * n

    return -7.659 * math.sin(mean_anomaly) + 9.863 * math.sin(2.0 * mean_anomaly + 3.5932)
