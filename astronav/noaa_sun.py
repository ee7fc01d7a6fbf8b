"""
Track the Sun's position and the day's events for an observer using NOAA algorithms.

Example:
    Sun position over Chennai, India on May 17th 2024 at 13:08:47 IST

    >>> chennai_sun = NOAASun(year=2024, doy=138, long=80.2705, lat=13.0843,
    ...                       timezone=5.5, hour=13, min=8, sec=47)
    >>> round(chennai_sun.frac_year_by_hour_in_rads(), 9)
    2.352617996
    >>> position = chennai_sun.position()
    >>> events = chennai_sun.day_events()
    >>> events.sunrise_hours < events.noon_hours < events.sunset_hours
    True
"""

from dataclasses import dataclass, replace
from datetime import datetime

from astronav.equation_of_time import (
    EquationOfTimeModel,
    equation_of_time_by_fractional_year,
    equation_of_time_by_julian_centuries,
    equation_of_time_by_mean_anomaly,
)
from astronav.rise_set import DayEvents, day_events, twilight_events
from astronav.solar_position import (
    DeclinationModel,
    SunPosition,
    altitude_angle,
    azimuth_angle,
    declination_by_closed_form,
    declination_by_harmonic_series,
    fractional_day_of_year,
    fractional_year_by_day,
    fractional_year_by_hour,
    hour_angle,
    sun_position,
    zenith_angle,
)
from astronav.timekeeping import (
    day_of_year,
    day_of_year_to_month_day,
    days_in_year,
    gmst_in_degrees,
    julian_day_number,
    julian_time,
    lmst_in_degrees,
)


@dataclass(frozen=True)
class NOAASun:
    """
    An observer at a place and a local clock time.

    Attributes:
        year: Year of interest.
        doy: Day of the year (May 16th, 2024 is day 137).
        long: Longitude in degrees (+ east, - west).
        lat: Latitude in degrees (+ north, - south).
        timezone: Offset from UTC in hours (+ east, - west).
        hour, min, sec: Local clock time (24 hour format).

    Every method delegates to the free functions of solar_position,
    equation_of_time and rise_set with the record's own fields.
    """

    year: int = 2000
    doy: int = 1
    long: float = 0.0
    lat: float = 0.0
    timezone: float = 0.0
    hour: int = 0
    min: int = 0
    sec: float = 0

    @classmethod
    def from_datetime(cls, when: datetime, long: float, lat: float, timezone: float | None = None) -> "NOAASun":
        """
        Builds an observer from a datetime.

        When `timezone` is omitted it is taken from the datetime's UTC offset,
        so `when` must then be timezone aware.
        """
        if timezone is None:
            offset = when.utcoffset()
            if offset is None:
                raise ValueError("timezone is required for a naive datetime")
            timezone = offset.total_seconds() / 3600.0

        return cls(
            year=when.year,
            doy=day_of_year(when.year, when.month, when.day),
            long=long,
            lat=lat,
            timezone=timezone,
            hour=when.hour,
            min=when.minute,
            sec=when.second + when.microsecond / 1e6,
        )

    def with_date(self, year: int, month: int, day: int) -> "NOAASun":
        return replace(self, year=year, doy=day_of_year(year, month, day))

    # ------------------------------------------------------------------
    # Time scales
    # ------------------------------------------------------------------

    def days_in_year(self) -> int:
        return days_in_year(self.year)

    def frac_day_of_year(self) -> float:
        return fractional_day_of_year(self.year, self.doy, self.hour, self.timezone)

    def frac_year_by_hour_in_rads(self) -> float:
        return fractional_year_by_hour(self.year, self.doy, self.hour)

    def frac_year_by_day_in_rads(self) -> float:
        return fractional_year_by_day(self.year, self.doy)

    def julian_time(self) -> float:
        month, day = day_of_year_to_month_day(self.year, self.doy)
        jdn = julian_day_number(day, month, self.year)
        return julian_time(jdn, self.hour, self.min, self.sec, self.timezone)

    def lmst_in_degrees(self) -> float:
        return lmst_in_degrees(gmst_in_degrees(self.julian_time()), self.long)

    # ------------------------------------------------------------------
    # Equation of time and declination
    # ------------------------------------------------------------------

    def equation_of_time(self, model: EquationOfTimeModel = EquationOfTimeModel.FRACTIONAL_YEAR) -> float:
        """Equation of time in minutes under the chosen model."""
        model = EquationOfTimeModel(model)
        if model is EquationOfTimeModel.FRACTIONAL_YEAR:
            return equation_of_time_by_fractional_year(self.frac_year_by_hour_in_rads())
        if model is EquationOfTimeModel.JULIAN_CENTURIES:
            return equation_of_time_by_julian_centuries(self.julian_time())
        return equation_of_time_by_mean_anomaly(self.year, self.doy)

    def declination(self, model: DeclinationModel = DeclinationModel.CLOSED_FORM) -> float:
        """Sun's declination in degrees under the chosen model."""
        model = DeclinationModel(model)
        if model is DeclinationModel.HARMONIC_SERIES:
            return declination_by_harmonic_series(self.frac_year_by_hour_in_rads())
        return declination_by_closed_form(self.frac_day_of_year())

    # ------------------------------------------------------------------
    # Position
    # ------------------------------------------------------------------

    def hour_angle(self, eot_model: EquationOfTimeModel = EquationOfTimeModel.FRACTIONAL_YEAR) -> float:
        return hour_angle(self.equation_of_time(eot_model), self.long, self.timezone, self.hour, self.min, self.sec)

    def zenith(
        self,
        eot_model: EquationOfTimeModel = EquationOfTimeModel.FRACTIONAL_YEAR,
        declination_model: DeclinationModel = DeclinationModel.CLOSED_FORM,
    ) -> float:
        return zenith_angle(self.lat, self.declination(declination_model), self.hour_angle(eot_model))

    def altitude(
        self,
        eot_model: EquationOfTimeModel = EquationOfTimeModel.FRACTIONAL_YEAR,
        declination_model: DeclinationModel = DeclinationModel.CLOSED_FORM,
    ) -> float:
        return altitude_angle(self.zenith(eot_model, declination_model))

    def azimuth(
        self,
        eot_model: EquationOfTimeModel = EquationOfTimeModel.FRACTIONAL_YEAR,
        declination_model: DeclinationModel = DeclinationModel.CLOSED_FORM,
    ) -> float:
        dec = self.declination(declination_model)
        ha = self.hour_angle(eot_model)
        return azimuth_angle(self.lat, dec, zenith_angle(self.lat, dec, ha), ha)

    def position(
        self,
        eot_model: EquationOfTimeModel = EquationOfTimeModel.FRACTIONAL_YEAR,
        declination_model: DeclinationModel = DeclinationModel.CLOSED_FORM,
    ) -> SunPosition:
        """Declination, hour angle, zenith, altitude, azimuth and right ascension."""
        return sun_position(
            latitude=self.lat,
            declination=self.declination(declination_model),
            eot=self.equation_of_time(eot_model),
            longitude=self.long,
            timezone=self.timezone,
            hour=self.hour,
            minute=self.min,
            second=self.sec,
            lmst=self.lmst_in_degrees(),
        )

    # ------------------------------------------------------------------
    # Day events
    # ------------------------------------------------------------------

    def day_events(
        self,
        eot_model: EquationOfTimeModel = EquationOfTimeModel.FRACTIONAL_YEAR,
        declination_model: DeclinationModel = DeclinationModel.CLOSED_FORM,
    ) -> DayEvents:
        """Sunrise, solar noon and sunset on the record's date."""
        return day_events(
            self.lat,
            self.declination(declination_model),
            self.long,
            self.equation_of_time(eot_model),
            self.timezone,
        )

    def twilight(
        self,
        kind: str = "civil",
        eot_model: EquationOfTimeModel = EquationOfTimeModel.FRACTIONAL_YEAR,
        declination_model: DeclinationModel = DeclinationModel.CLOSED_FORM,
    ) -> DayEvents:
        """Dawn and dusk of a twilight phase ("civil", "nautical" or "astronomical")."""
        return twilight_events(
            self.lat,
            self.declination(declination_model),
            self.long,
            self.equation_of_time(eot_model),
            self.timezone,
            kind,
        )

    def day_length(self) -> float | None:
        """Hours from sunrise to sunset, None on a polar day or night."""
        return self.day_events().day_length
