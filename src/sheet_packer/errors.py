"""Exception types raised by the packing pipeline."""

from __future__ import annotations


class PackingError(ValueError):
    """Base class for all packing failures."""


class ConfigurationError(PackingError):
    """Raised when inputs or options make packing impossible."""


class InvariantViolation(PackingError):
    """Raised when a packer produces an inconsistent placement.

    This indicates a bug in a packing strategy rather than bad input.
    """
