"""Exceptions raised by the reminder engine."""


class ReminderError(Exception):
    """Base class for reminder engine errors."""


class ConfigurationError(ReminderError):
    """A reminder is configured in a way that cannot be acted on.

    Raised when a recurring reminder has no interval to regenerate from.
    """


class PayloadError(ReminderError):
    """A reminder or vehicle payload is missing a key or has a bad value."""
