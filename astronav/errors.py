"""Exceptions raised by astronav."""


class AstronavError(Exception):
    """Base class for every error raised by the library."""


class InvalidNumericFieldError(AstronavError, ValueError):
    """A sexagesimal string has a field that is missing or not a number."""

    def __init__(self, text: str, field: str | None = None):
        self.text = text
        self.field = field
        if field is None:
            message = f"Invalid sexagesimal value: {text!r}"
        else:
            message = f"Invalid numeric field {field!r} in {text!r}"
        super().__init__(message)


class IndeterminateAzimuthError(AstronavError, ArithmeticError):
    """The azimuth is undefined (body at the zenith/nadir or observer at a pole)."""


class MissingFieldError(AstronavError):
    """A star observation was used before all of its fields were supplied."""

    def __init__(self, missing: tuple[str, ...]):
        self.missing = missing
        super().__init__(f"Missing field(s): {', '.join(missing)}")


class TimezoneLookupError(AstronavError):
    """No IANA timezone could be resolved for a pair of coordinates."""


class UnsealedBuilderError(AstronavError):
    """build() was called on a star observation builder before seal()."""
