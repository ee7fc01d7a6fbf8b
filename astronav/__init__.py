"""
astronav: positional astronomy for observers on the ground.

Sun position, sunrise/sunset/twilight and star altitude/azimuth from plain
decimal degrees, decimal hours and civil dates.
"""

from astronav.equation_of_time import EquationOfTimeModel
from astronav.errors import (
    AstronavError,
    IndeterminateAzimuthError,
    InvalidNumericFieldError,
    MissingFieldError,
    TimezoneLookupError,
    UnsealedBuilderError,
)
from astronav.noaa_sun import NOAASun
from astronav.rise_set import DayEvents, SolarEvent, SunMood, SunRiseAndSet
from astronav.solar_position import DeclinationModel, SunPosition
from astronav.star import AltAz, AltAzBuilder, horizontal_coordinates
from astronav.timekeeping import AstroTime

__version__ = "0.1.0"

__all__ = [
    "AltAz",
    "AltAzBuilder",
    "AstroTime",
    "AstronavError",
    "DayEvents",
    "DeclinationModel",
    "EquationOfTimeModel",
    "IndeterminateAzimuthError",
    "InvalidNumericFieldError",
    "MissingFieldError",
    "NOAASun",
    "SolarEvent",
    "SunMood",
    "SunPosition",
    "SunRiseAndSet",
    "TimezoneLookupError",
    "UnsealedBuilderError",
    "horizontal_coordinates",
]
