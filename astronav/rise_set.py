"""
Sunrise, solar noon, sunset and twilight.

Two independent formulations are provided:

* The NOAA minutes-based model (solar_noon_minutes(), day_events(), ...)
  works from a declination and an equation of time computed by the
  solar_position / equation_of_time modules.
* The classical hour-angle model (event_time(), SunRiseAndSet) from the
  Almanac for Computers (1990) derives its own low-precision declination
  from the Sun's true longitude and needs only the day of the year.

When the Sun does not cross the target zenith on a date (polar night or
midnight sun) both report a SunMood instead of a time.
"""

import enum
import logging
import math
from dataclasses import dataclass, replace

from astronav.angles import normalize_hours
from astronav.constants import MINUTES_PER_DAY, MINUTES_PER_DEGREE, SUNRISE_ZENITH, TWILIGHT_ZENITHS
from astronav.timekeeping import day_of_year

log = logging.getLogger(__name__)


class SunMood(enum.Enum):
    RISE = "rise"
    SET = "set"
    NEVER_RISES = "never_rises"
    NEVER_SETS = "never_sets"


@dataclass(frozen=True)
class SolarEvent:
    """
    Outcome of a rise or set computation.

    `value` holds the computed quantity (a time or an hour angle) when
    `mood` is RISE or SET, and is None for NEVER_RISES / NEVER_SETS.
    """

    mood: SunMood
    value: float | None = None

    @property
    def occurs(self) -> bool:
        return self.mood in (SunMood.RISE, SunMood.SET)


def _no_solution(cos_h: float) -> SunMood | None:
    # cos(H) > 1: the Sun stays below the target zenith all day (polar night)
    # cos(H) < -1: the Sun stays above it all day (midnight sun)
    if cos_h > 1.0:
        return SunMood.NEVER_RISES
    if cos_h < -1.0:
        return SunMood.NEVER_SETS
    return None


# ----------------------------------------------------------------------
# 1. NOAA MINUTES-BASED MODEL
# ----------------------------------------------------------------------

def solar_noon_minutes(longitude: float, eot: float, timezone: float) -> float:
    """
    Local clock time of solar noon in minutes since midnight.

    Args:
        longitude (float): Degrees, + east.
        eot (float): Equation of time in minutes.
        timezone (float): Hours from UTC, + east.
    """
    return 720.0 - (MINUTES_PER_DEGREE * longitude) - eot + (timezone * 60.0)


def sunrise_hour_angle_argument(latitude: float, declination: float, zenith: float = SUNRISE_ZENITH) -> float:
    """cos(H) of the hour angle H at which the Sun's centre reaches `zenith`."""
    lat = math.radians(latitude)
    dec = math.radians(declination)

    return (math.cos(math.radians(zenith)) / (math.cos(lat) * math.cos(dec))) - (math.tan(lat) * math.tan(dec))


def sunrise_minutes(
    latitude: float,
    declination: float,
    longitude: float,
    eot: float,
    timezone: float,
    zenith: float = SUNRISE_ZENITH,
) -> SolarEvent:
    """Local clock time of sunrise in minutes since midnight."""
    arg = sunrise_hour_angle_argument(latitude, declination, zenith)
    mood = _no_solution(arg)
    if mood is not None:
        return SolarEvent(mood)

    ha = math.degrees(math.acos(arg))
    minutes = 720.0 - (MINUTES_PER_DEGREE * (longitude + ha)) - eot + (timezone * 60.0)
    return SolarEvent(SunMood.RISE, minutes)


def sunset_minutes(
    latitude: float,
    declination: float,
    longitude: float,
    eot: float,
    timezone: float,
    zenith: float = SUNRISE_ZENITH,
) -> SolarEvent:
    """Local clock time of sunset in minutes since midnight."""
    arg = sunrise_hour_angle_argument(latitude, declination, zenith)
    mood = _no_solution(arg)
    if mood is not None:
        return SolarEvent(mood)

    # Descending branch: acos(-x) = 180 - acos(x), measured from 1440
    ha = math.degrees(math.acos(-arg))
    minutes = 1440.0 - (MINUTES_PER_DEGREE * (longitude + ha)) - eot + (timezone * 60.0)
    return SolarEvent(SunMood.SET, minutes)


@dataclass(frozen=True)
class DayEvents:
    """
    Sunrise, solar noon and sunset in minutes since local midnight.

    `noon` always falls in [0, 1440); sunrise and sunset are shifted by the
    same whole days, so they may lie just outside it.

    `mood` is None on an ordinary day; on a day without sunrise and sunset
    it is NEVER_RISES or NEVER_SETS and `sunrise` / `sunset` are None.
    """

    sunrise: float | None
    noon: float
    sunset: float | None
    mood: SunMood | None = None

    @property
    def sunrise_hours(self) -> float | None:
        return None if self.sunrise is None else self.sunrise / 60.0

    @property
    def noon_hours(self) -> float:
        return self.noon / 60.0

    @property
    def sunset_hours(self) -> float | None:
        return None if self.sunset is None else self.sunset / 60.0

    @property
    def day_length(self) -> float | None:
        """Hours between sunrise and sunset."""
        if self.sunrise is None or self.sunset is None:
            return None
        return self.sunset_hours - self.sunrise_hours


def day_events(
    latitude: float,
    declination: float,
    longitude: float,
    eot: float,
    timezone: float,
    zenith: float = SUNRISE_ZENITH,
) -> DayEvents:
    """
    Sunrise, solar noon and sunset for one day.

    Args:
        latitude (float): Degrees, + north.
        declination (float): Sun's declination in degrees.
        longitude (float): Degrees, + east.
        eot (float): Equation of time in minutes.
        timezone (float): Hours from UTC, + east.
        zenith (float): Target zenith of the Sun's centre; 90.833 for
            sunrise/sunset, larger values for twilight.

    Returns:
        DayEvents
    """
    noon = solar_noon_minutes(longitude, eot, timezone)
    # Date-line timezones put noon outside the local day; shift the whole day
    # by full days so noon lands in [0, 1440) and the order is kept.
    day_shift = MINUTES_PER_DAY * math.floor(noon / MINUTES_PER_DAY)
    noon -= day_shift

    rise = sunrise_minutes(latitude, declination, longitude, eot, timezone, zenith)
    if not rise.occurs:
        log.info("no sunrise/sunset: lat=%s dec=%s zenith=%s -> %s", latitude, declination, zenith, rise.mood.value)
        return DayEvents(sunrise=None, noon=noon, sunset=None, mood=rise.mood)

    fall = sunset_minutes(latitude, declination, longitude, eot, timezone, zenith)
    return DayEvents(sunrise=rise.value - day_shift, noon=noon, sunset=fall.value - day_shift)


def twilight_events(
    latitude: float,
    declination: float,
    longitude: float,
    eot: float,
    timezone: float,
    kind: str = "civil",
) -> DayEvents:
    """
    Dawn and dusk of a twilight phase, reported as DayEvents (`sunrise` is
    the dawn and `sunset` the dusk).

    Args:
        kind (str): "civil" (Sun 6 degrees below the horizon), "nautical" (12)
            or "astronomical" (18).

    Raises:
        ValueError: On an unknown kind.
    """
    if kind not in TWILIGHT_ZENITHS or kind == "sunrise":
        raise ValueError(f"Unknown twilight kind: {kind!r}")
    return day_events(latitude, declination, longitude, eot, timezone, TWILIGHT_ZENITHS[kind])


# ----------------------------------------------------------------------
# 2. CLASSICAL HOUR-ANGLE MODEL
# ----------------------------------------------------------------------

_EVENT_HOURS = {"sunrise": 6.0, "sunset": 18.0}


def _event_hour(event: str) -> float:
    try:
        return _EVENT_HOURS[event]
    except KeyError:
        raise ValueError(f"event must be 'sunrise' or 'sunset', not {event!r}") from None


def approximate_time(doy: int, longitude: float, event: str) -> float:
    """Approximate time of the event as a fractional day of the year."""
    long_hour = longitude / 15.0
    return doy + ((_event_hour(event) - long_hour) / 24.0)


def mean_anomaly(doy: int, longitude: float, event: str) -> float:
    """Sun's mean anomaly in degrees at the approximate time of the event."""
    return (0.9856 * approximate_time(doy, longitude, event)) - 3.289


def true_longitude(doy: int, longitude: float, event: str) -> float:
    """Sun's true longitude in degrees [0, 360)."""
    M = mean_anomaly(doy, longitude, event)
    L = M + (1.916 * math.sin(math.radians(M))) + (0.020 * math.sin(math.radians(2.0 * M))) + 282.634

    if L < 0.0:
        L += 360.0
    elif L >= 360.0:
        L -= 360.0

    return L


def right_ascension_hours(doy: int, longitude: float, event: str) -> float:
    """Sun's right ascension in hours, in the same quadrant as its true longitude."""
    L = true_longitude(doy, longitude, event)
    ra = math.degrees(math.atan(0.91764 * math.tan(math.radians(L))))

    if ra < 0.0:
        ra += 360.0
    elif ra >= 360.0:
        ra -= 360.0

    l_quadrant = math.floor(L / 90.0) * 90.0
    r_quadrant = math.floor(ra / 90.0) * 90.0

    return (ra + l_quadrant - r_quadrant) / 15.0


def declination(doy: int, longitude: float, event: str) -> float:
    """Sun's declination in degrees from its true longitude."""
    L = true_longitude(doy, longitude, event)
    return math.degrees(math.asin(0.39782 * math.sin(math.radians(L))))


def local_hour_angle(
    doy: int,
    longitude: float,
    latitude: float,
    event: str,
    zenith: float = SUNRISE_ZENITH,
) -> SolarEvent:
    """
    Sun's local hour angle in hours at the event.

    Returns:
        SolarEvent: RISE / SET with the hour angle, or NEVER_RISES /
        NEVER_SETS when cos(H) falls outside [-1, 1].
    """
    dec = math.radians(declination(doy, longitude, event))
    lat = math.radians(latitude)

    cos_lha = (math.cos(math.radians(zenith)) - (math.sin(dec) * math.sin(lat))) / (math.cos(dec) * math.cos(lat))

    mood = _no_solution(cos_lha)
    if mood is not None:
        log.info("no %s on day %s at lat=%s: %s", event, doy, latitude, mood.value)
        return SolarEvent(mood)

    ha = math.degrees(math.acos(cos_lha))
    if event == "sunrise":
        return SolarEvent(SunMood.RISE, (360.0 - ha) / 15.0)
    return SolarEvent(SunMood.SET, ha / 15.0)


def event_time(
    doy: int,
    longitude: float,
    latitude: float,
    timezone: float,
    event: str,
    zenith: float = SUNRISE_ZENITH,
) -> SolarEvent:
    """
    Local time of sunrise or sunset in decimal hours [0, 24).

    Args:
        doy (int): Day of the year.
        longitude (float): Degrees, + east.
        latitude (float): Degrees, + north.
        timezone (float): Hours from UTC, + east.
        event (str): "sunrise" or "sunset".

    Returns:
        SolarEvent: RISE / SET with the time, or NEVER_RISES / NEVER_SETS.
    """
    lha = local_hour_angle(doy, longitude, latitude, event, zenith)
    if not lha.occurs:
        return lha

    ra = right_ascension_hours(doy, longitude, event)
    t = approximate_time(doy, longitude, event)

    local_mean_time = lha.value + ra - (0.06571 * t) - 6.622
    ut = local_mean_time - (longitude / 15.0) + timezone

    return SolarEvent(lha.mood, normalize_hours(ut))


@dataclass(frozen=True)
class SunRiseAndSet:
    """
    A day and a place for the classical sunrise/sunset model.

    Example:
        >>> new_york = SunRiseAndSet(doy=137, long=-74.0060, lat=40.7128, timezone=-4.0)
        >>> new_york.sunrise_time().value
        5.62195...
    """

    doy: int = 1
    long: float = 0.0
    lat: float = 0.0
    timezone: float = 0.0

    def with_date(self, year: int, month: int, day: int) -> "SunRiseAndSet":
        return replace(self, doy=day_of_year(year, month, day))

    def sunrise_mean_anomaly(self) -> float:
        return mean_anomaly(self.doy, self.long, "sunrise")

    def sunset_mean_anomaly(self) -> float:
        return mean_anomaly(self.doy, self.long, "sunset")

    def sunrise_true_long_in_deg(self) -> float:
        return true_longitude(self.doy, self.long, "sunrise")

    def sunset_true_long_in_deg(self) -> float:
        return true_longitude(self.doy, self.long, "sunset")

    def sunrise_ra_in_hours(self) -> float:
        return right_ascension_hours(self.doy, self.long, "sunrise")

    def sunset_ra_in_hours(self) -> float:
        return right_ascension_hours(self.doy, self.long, "sunset")

    def sunrise_declination(self) -> float:
        return declination(self.doy, self.long, "sunrise")

    def sunset_declination(self) -> float:
        return declination(self.doy, self.long, "sunset")

    def sunrise_local_hour_angle(self) -> SolarEvent:
        return local_hour_angle(self.doy, self.long, self.lat, "sunrise")

    def sunset_local_hour_angle(self) -> SolarEvent:
        return local_hour_angle(self.doy, self.long, self.lat, "sunset")

    def sunrise_time(self) -> SolarEvent:
        return event_time(self.doy, self.long, self.lat, self.timezone, "sunrise")

    def sunset_time(self) -> SolarEvent:
        return event_time(self.doy, self.long, self.lat, self.timezone, "sunset")
