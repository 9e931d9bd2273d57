class CalendarError(Exception):
    """Base exception for all schedule and calendar errors."""


class ConfigurationError(CalendarError, ValueError):
    """Holiday data or settings from which no valid schedule can be derived."""
