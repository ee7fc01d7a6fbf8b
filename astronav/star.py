"""
Track the positional coordinates of stars: equatorial (RA/Dec) to horizontal
(altitude/azimuth) for an observer.

Example:
    The star Sirius has the Right Ascension 101.5504 and declination -16.75122.
    The local mean sidereal time for your longitude is 199.05 and your
    latitude is 12.45. All the values are in degrees.

    >>> alt_az = (
    ...     AltAzBuilder()
    ...     .dec(-16.75122)
    ...     .lat(12.45)
    ...     .lmst(199.05)
    ...     .ra(101.5504)
    ...     .seal()
    ...     .build()
    ... )
    >>> round(alt_az.get_altitude(), 6), round(alt_az.get_azimuth(), 6)
    (-10.613192, 254.99376)

Values in sexagesimal notation go through angles.dms_to_deg() and
angles.hms_to_deg() first.
"""

import math
from dataclasses import dataclass, replace

import numpy as np

from astronav.constants import AZIMUTH_EPSILON
from astronav.errors import IndeterminateAzimuthError, MissingFieldError, UnsealedBuilderError


# ----------------------------------------------------------------------
# 1. ALTITUDE AND AZIMUTH
# ----------------------------------------------------------------------

def hour_angles(lst: float, ra: float) -> tuple[float, float]:
    """
    Hour angles in radians for a local sidereal time and right ascension
    given in radians.

    Returns:
        tuple: (ha, ha_for_az) - |lst - ra| for the altitude, and lst - ra
        wrapped into [0, 2 pi) to pick the azimuth's side of the meridian.
    """
    ha = lst - ra if lst > ra else ra - lst

    diff_deg = math.degrees(lst) - math.degrees(ra)
    if diff_deg < 0.0:
        ha_for_az = math.radians(360.0 + diff_deg)
    else:
        ha_for_az = lst - ra

    return ha, ha_for_az


def star_altitude(dec: float, lat: float, ha: float) -> float:
    """Altitude in radians; all arguments in radians."""
    sin_alt = math.sin(dec) * math.sin(lat) + math.cos(dec) * math.cos(lat) * math.cos(ha)
    return math.asin(max(-1.0, min(1.0, sin_alt)))


def star_azimuth(dec: float, lat: float, alt: float, ha_for_az: float) -> float:
    """
    Azimuth in degrees [0, 360) from north; all arguments in radians.

    Raises:
        IndeterminateAzimuthError: When the body is at the zenith or the
            observer at a pole.
    """
    denominator = math.cos(alt) * math.cos(lat)
    if abs(denominator) < AZIMUTH_EPSILON:
        raise IndeterminateAzimuthError(
            f"Azimuth undefined for altitude={math.degrees(alt)}, latitude={math.degrees(lat)}"
        )

    cos_az = (math.sin(dec) - math.sin(alt) * math.sin(lat)) / denominator
    az = math.degrees(math.acos(max(-1.0, min(1.0, cos_az))))

    # West of the meridian (hour angle under 12h) the body is setting
    if math.degrees(ha_for_az) / 15.0 < 12.0:
        return 360.0 - az
    return az


@dataclass(frozen=True)
class AltAz:
    """A fully specified star observation; angles are stored in radians."""

    dec: float
    lat: float
    lst: float
    ra: float
    alt: float
    ha: float

    @classmethod
    def from_radians(cls, dec: float, lat: float, lst: float, ra: float) -> "AltAz":
        ha, ha_for_az = hour_angles(lst, ra)
        return cls(dec=dec, lat=lat, lst=lst, ra=ra, alt=star_altitude(dec, lat, ha), ha=ha_for_az)

    def get_altitude(self) -> float:
        """Altitude of the body in decimal degrees."""
        return math.degrees(self.alt)

    def get_azimuth(self) -> float:
        """Azimuth of the body in decimal degrees."""
        return star_azimuth(self.dec, self.lat, self.alt, self.ha)


def horizontal_coordinates(dec: float, lat: float, lst: float, ra: float) -> tuple[float, float]:
    """
    Altitude and azimuth in decimal degrees.

    Args:
        dec (float): Declination of the body in degrees.
        lat (float): Observer's latitude in degrees, + north.
        lst (float): Local sidereal time in degrees.
        ra (float): Right ascension of the body in degrees.

    Returns:
        tuple: (altitude, azimuth)
    """
    alt_az = AltAz.from_radians(math.radians(dec), math.radians(lat), math.radians(lst), math.radians(ra))
    return alt_az.get_altitude(), alt_az.get_azimuth()


# ----------------------------------------------------------------------
# 2. BUILDER
# ----------------------------------------------------------------------

@dataclass(frozen=True)
class AltAzBuilder:
    """
    Collects declination, latitude, local mean sidereal time and right
    ascension (decimal degrees) before an AltAz can be built.

    seal() refuses an incomplete builder, build() refuses an unsealed one,
    and setting a field after seal() hands back an unsealed builder.
    """

    _dec: float | None = None
    _lat: float | None = None
    _lst: float | None = None
    _ra: float | None = None
    _sealed: bool = False

    def dec(self, dec: float) -> "AltAzBuilder":
        return replace(self, _dec=math.radians(dec), _sealed=False)

    def lat(self, lat: float) -> "AltAzBuilder":
        return replace(self, _lat=math.radians(lat), _sealed=False)

    def lmst(self, lst: float) -> "AltAzBuilder":
        return replace(self, _lst=math.radians(lst), _sealed=False)

    def ra(self, ra: float) -> "AltAzBuilder":
        return replace(self, _ra=math.radians(ra), _sealed=False)

    @property
    def missing(self) -> tuple[str, ...]:
        fields = (("dec", self._dec), ("lat", self._lat), ("lmst", self._lst), ("ra", self._ra))
        return tuple(name for name, value in fields if value is None)

    @property
    def sealed(self) -> bool:
        return self._sealed

    def seal(self) -> "AltAzBuilder":
        if self.missing:
            raise MissingFieldError(self.missing)
        return replace(self, _sealed=True)

    def build(self) -> AltAz:
        if not self._sealed:
            raise UnsealedBuilderError("seal() the builder before build()")
        return AltAz.from_radians(self._dec, self._lat, self._lst, self._ra)


# ----------------------------------------------------------------------
# 3. ALTITUDE TRACKS AND AIRMASS
# ----------------------------------------------------------------------

def altitude_track(dec: float, lat: float, lst, ra: float) -> np.ndarray:
    """
    Altitude in degrees of a body over a series of local sidereal times.

    Args:
        dec (float): Declination in degrees.
        lat (float): Observer's latitude in degrees.
        lst (array_like): Local sidereal times in degrees.
        ra (float): Right ascension in degrees.

    Returns:
        np.ndarray: Altitudes in degrees, one per sidereal time.
    """
    dec_rad = np.deg2rad(dec)
    lat_rad = np.deg2rad(lat)
    ha = np.abs(np.deg2rad(np.asarray(lst, dtype=float)) - np.deg2rad(ra))

    sin_alt = np.sin(dec_rad) * np.sin(lat_rad) + np.cos(dec_rad) * np.cos(lat_rad) * np.cos(ha)
    return np.rad2deg(np.arcsin(np.clip(sin_alt, -1.0, 1.0)))


def airmass(elevation_deg):
    """
    Calculates the airmass (X) using the formula by Young (1994), in terms
    of the true zenith angle.

    Args:
        elevation_deg (float | array_like): Altitude in degrees.

    Returns:
        float | np.ndarray: Airmass; NaN where the body is within 0.1 degree
        of the horizon or below it, where the formula is unstable.
    """
    elevation = np.asarray(elevation_deg, dtype=float)
    zt_deg = 90.0 - elevation
    cos_zt = np.cos(np.deg2rad(zt_deg))

    numerator = (1.002432 * cos_zt**2) + (0.148386 * cos_zt) + 0.0096467
    denominator = (cos_zt**3) + (0.149864 * cos_zt**2) + (0.0102963 * cos_zt) + 0.000303978

    with np.errstate(divide="ignore", invalid="ignore"):
        X = np.where(zt_deg >= 89.9, np.nan, numerator / denominator)

    return float(X) if X.ndim == 0 else X
