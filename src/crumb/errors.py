"""Crumb exception hierarchy.

Shared across Cookie and CookieDefaults so every module raises and
catches the same types.
"""


class CrumbError(Exception):
    """Base for all crumb-specific errors."""


class CookieError(CrumbError):
    """Raised when a mutation would break a cookie attribute invariant.

    The only rule enforced is ``SameSite=None`` requiring ``Secure``.
    The cookie is left untouched when this is raised.
    """


class ConfigurationError(CrumbError):
    """Raised when a ``CookieDefaults`` combination is invalid."""
