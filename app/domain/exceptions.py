"""Centralized exception hierarchy for the home energy manager.

All domain and service exceptions inherit from :class:`HomeEnergyError` so that
callers can catch a single base class when they need a broad safety net, yet
still match on specific subclasses where narrower handling is appropriate.

The argument-style errors also subclass :class:`ValueError` and the state
error subclasses :class:`RuntimeError`, so plain Python callers can match on
the builtin types.

Hierarchy
---------
::

    HomeEnergyError (base, maps to 500)
    ├── InvalidArgumentError   (404, referenced entity does not exist)
    ├── OutOfRangeError        (400, numeric input violates a constraint)
    ├── InvalidStateError      (409, required singleton resource missing)
    └── ConfigurationError     (500, missing / invalid config or seed data)
"""

from __future__ import annotations


class HomeEnergyError(Exception):
    """Base exception for all home energy manager errors.

    Parameters
    ----------
    message:
        Human-readable description.
    detail:
        Optional machine-readable context dict attached to the error for
        structured logging.
    """

    http_status: int = 500

    def __init__(self, message: str = "", *, detail: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail or {}


# ── Client errors (4xx) ──────────────────────────────────────────────


class InvalidArgumentError(HomeEnergyError, ValueError):
    """Operation referenced an entity that does not exist (HTTP 404)."""

    http_status: int = 404


class OutOfRangeError(HomeEnergyError, ValueError):
    """A numeric input violates a domain constraint (HTTP 400)."""

    http_status: int = 400


class InvalidStateError(HomeEnergyError, RuntimeError):
    """A required singleton resource is missing (HTTP 409)."""

    http_status: int = 409


# ── Server errors (5xx) ──────────────────────────────────────────────


class ConfigurationError(HomeEnergyError):
    """Missing or invalid application configuration (HTTP 500)."""

    http_status: int = 500
