"""Numeric constants shared by the solar and sidereal computations."""

# ----------------------------------------------------------------------
# ZENITH OFFSETS (degrees)
# ----------------------------------------------------------------------

# 90 degrees + 0.833 = 0.5 (solar radius) + 0.333 (atmospheric refraction)
SUNRISE_ZENITH = 90.833

CIVIL_TWILIGHT_ZENITH = 96.0
NAUTICAL_TWILIGHT_ZENITH = 102.0
ASTRONOMICAL_TWILIGHT_ZENITH = 108.0

TWILIGHT_ZENITHS = {
    "sunrise": SUNRISE_ZENITH,
    "civil": CIVIL_TWILIGHT_ZENITH,
    "nautical": NAUTICAL_TWILIGHT_ZENITH,
    "astronomical": ASTRONOMICAL_TWILIGHT_ZENITH,
}

# ----------------------------------------------------------------------
# EPOCHS
# ----------------------------------------------------------------------

# Julian Day for 12h TT on Jan 1, 2000
J2000 = 2451545.0

# Julian Day for 12h on Dec 31, 1899 (epoch of the W. M. Smart series)
J1900 = 2415020.0

DAYS_PER_JULIAN_CENTURY = 36525.0

# ----------------------------------------------------------------------
# TIME
# ----------------------------------------------------------------------

MINUTES_PER_DAY = 1440.0
SECONDS_PER_DAY = 86400.0

# Earth turns 1 degree every 4 minutes of time
MINUTES_PER_DEGREE = 4.0
DEGREES_PER_HOUR = 15.0

# Denominators closer to zero than this make the azimuth undefined
AZIMUTH_EPSILON = 1e-12
