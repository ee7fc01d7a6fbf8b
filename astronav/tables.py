"""
Tabulated results over many days or many instants, as pandas DataFrames.

Example:
    Sun events for every day of 2024 in Chennai, India

    >>> table = sun_events_table(2024, longitude=80.2705, latitude=13.0843, timezone=5.5)
    >>> len(table)
    366
"""

import logging
from dataclasses import replace
from datetime import date, datetime, timedelta

import numpy as np
import pandas as pd

from astronav.angles import decimal_hours_to_time, parse_and_convert_ra_dec
from astronav.constants import SUNRISE_ZENITH
from astronav.equation_of_time import EquationOfTimeModel
from astronav.noaa_sun import NOAASun
from astronav.rise_set import day_events
from astronav.solar_position import DeclinationModel
from astronav.star import airmass, altitude_track
from astronav.timekeeping import (
    day_of_year,
    day_of_year_to_month_day,
    days_in_year,
    gmst_in_degrees,
    julian_day,
    lmst_in_degrees,
)

log = logging.getLogger(__name__)


# ----------------------------------------------------------------------
# 1. SUN EVENTS OVER A YEAR
# ----------------------------------------------------------------------

def sun_events_table(
    year: int,
    longitude: float,
    latitude: float,
    timezone: float,
    eot_model: EquationOfTimeModel = EquationOfTimeModel.FRACTIONAL_YEAR,
    declination_model: DeclinationModel = DeclinationModel.CLOSED_FORM,
    zenith: float = SUNRISE_ZENITH,
) -> pd.DataFrame:
    """
    Sunrise, solar noon and sunset for every day of a year.

    Declination and equation of time are evaluated at local noon of each day.

    Args:
        year (int): Year of interest.
        longitude (float): Degrees, + east.
        latitude (float): Degrees, + north.
        timezone (float): Hours from UTC, + east.
        eot_model, declination_model: Models used for each day.
        zenith (float): Target zenith; pass a twilight zenith for dawn/dusk.

    Returns:
        pd.DataFrame: One row per day with the columns date, doy, declination,
        eot, sunrise, noon, sunset (decimal hours, NaN when the event does not
        happen), day_length and mood ("never_rises" / "never_sets" on polar
        days, None otherwise).
    """
    observer = NOAASun(year=year, long=longitude, lat=latitude, timezone=timezone, hour=12)

    rows = []
    for doy in range(1, days_in_year(year) + 1):
        sun = replace(observer, doy=doy)
        dec = sun.declination(declination_model)
        eot = sun.equation_of_time(eot_model)
        events = day_events(latitude, dec, longitude, eot, timezone, zenith)

        month, day = day_of_year_to_month_day(year, doy)
        rows.append({
            "date": date(year, month, day),
            "doy": doy,
            "declination": dec,
            "eot": eot,
            "sunrise": events.sunrise_hours,
            "noon": events.noon_hours,
            "sunset": events.sunset_hours,
            "day_length": events.day_length,
            "mood": None if events.mood is None else events.mood.value,
        })

    table = pd.DataFrame(rows)
    for column in ("sunrise", "sunset", "day_length"):
        table[column] = table[column].astype(float)

    log.debug("sun events table for %s at lon=%s lat=%s: %s polar days",
              year, longitude, latitude, int(table["mood"].notna().sum()))
    return table


# ----------------------------------------------------------------------
# 2. NIGHT WINDOW
# ----------------------------------------------------------------------

def night_events(
    year: int,
    month: int,
    day: int,
    longitude: float,
    latitude: float,
    timezone: float,
    kind: str = "astronomical",
) -> dict:
    """
    Evening events of a date and morning events of the following day.

    Args:
        year, month, day: Date of the evening.
        longitude (float): Degrees, + east.
        latitude (float): Degrees, + north.
        timezone (float): Hours from UTC, + east.
        kind (str): Twilight phase bounding the dark night.

    Returns:
        dict: {"date", "next_date", "sunset", "dusk", "dawn", "sunrise"};
        times are local decimal hours, None when the event does not happen.
    """
    evening = date(year, month, day)
    morning = evening + timedelta(days=1)

    tonight = NOAASun(year=year, doy=day_of_year(year, month, day), long=longitude,
                      lat=latitude, timezone=timezone, hour=12)
    tomorrow = tonight.with_date(morning.year, morning.month, morning.day)

    evening_events = tonight.day_events()
    evening_twilight = tonight.twilight(kind)
    morning_events = tomorrow.day_events()
    morning_twilight = tomorrow.twilight(kind)

    return {
        "date": evening,
        "next_date": morning,
        "sunset": evening_events.sunset_hours,
        "dusk": evening_twilight.sunset_hours,
        "dawn": morning_twilight.sunrise_hours,
        "sunrise": morning_events.sunrise_hours,
    }


# ----------------------------------------------------------------------
# 3. STAR ALTITUDE OVER A NIGHT
# ----------------------------------------------------------------------

def star_altitude_table(
    ra_dec: str,
    longitude: float,
    latitude: float,
    start: datetime,
    periods: int = 1200,
    step_minutes: float = 1,
    timezone: float = 0.0,
) -> pd.DataFrame:
    """
    Altitude of an object at regular steps from a local start time.

    Args:
        ra_dec (str): "HH MM SS.SS ±DD MM SS.S" coordinates of the object.
        longitude (float): Degrees, + east.
        latitude (float): Degrees, + north.
        start (datetime): Local (naive) time of the first row.
        periods (int): Number of rows (1200 one minute steps cover a night).
        step_minutes (float): Minutes between rows.
        timezone (float): Hours from UTC of the local times, + east.

    Returns:
        pd.DataFrame: Columns time, time_str ("HH:MM:SS.SS"), julian_time,
        lmst (degrees), altitude (degrees) and airmass (NaN near and below
        the horizon).

    Example:
        >>> table = star_altitude_table("16 29 24.46 -26 25 55.2", -70.73, -30.24,
        ...                             datetime(2024, 5, 16, 19, 0), periods=720, timezone=-4.0)
        >>> table["altitude"].max() > 80
        True
    """
    _, ra_deg, dec_deg, _ = parse_and_convert_ra_dec(ra_dec)

    times = pd.date_range(start=start, periods=periods, freq=pd.Timedelta(minutes=step_minutes))

    # Meeus (7.1) takes the UT time of day as a fraction of the day
    julian_times = np.array([
        julian_day(t.year, t.month, t.day + (t.hour + t.minute / 60 + t.second / 3600 - timezone) / 24)
        for t in times
    ])
    lmst = np.array([lmst_in_degrees(gmst_in_degrees(jt), longitude) for jt in julian_times])

    altitude = altitude_track(dec_deg, latitude, lmst, ra_deg)

    return pd.DataFrame({
        "time": times,
        "time_str": [decimal_hours_to_time(t.hour + t.minute / 60 + t.second / 3600) for t in times],
        "julian_time": julian_times,
        "lmst": lmst,
        "altitude": altitude,
        "airmass": airmass(altitude),
    })
