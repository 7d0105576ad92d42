"""Exceptions raised while validating a search request.

All of them are raised synchronously, before any URL is produced.
"""

from __future__ import annotations


class LensQueryError(Exception):
    """Base class for every error raised by lensurls."""


class ConfigurationError(LensQueryError, ValueError):
    """Options are inconsistent or incomplete.

    Examples: several ranking flags at once, several applicant names with no
    boolean mode, a date-range end without a start, an invalid config file.
    """


class UnsupportedValue(LensQueryError, ValueError):
    """A jurisdiction, field scope or boolean token is not recognized."""

    def __init__(self, option: str, value: object, allowed=None):
        self.option = option
        self.value = value
        self.allowed = tuple(allowed) if allowed else ()
        msg = f"Unsupported value for {option}: {value!r}"
        if self.allowed:
            msg += f" (expected one of: {', '.join(map(str, self.allowed))})"
        super().__init__(msg)
