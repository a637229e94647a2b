class PericopeError(Exception):
    """Base error."""

class DateParseError(PericopeError, ValueError):
    """Raised when a date string is not a valid dd/mm/yyyy date."""

class ReadingsTableError(PericopeError):
    """Raised when a custom readings table cannot be loaded."""

class DateRangeError(PericopeError, ValueError):
    """Raised when a liturgical year needs dates outside years 1..9999."""
