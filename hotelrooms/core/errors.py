from __future__ import annotations


class NotFoundError(Exception):
    """Raise to map to HTTP 404."""


class InvalidDataError(Exception):
    """Raise to map to HTTP 400 (business rule or storage failure)."""


class InvalidIdError(Exception):
    """Raise to map to HTTP 400 (malformed identifier)."""
