"""SameSite cookie attribute values."""

from enum import StrEnum


class SameSite(StrEnum):
    """Cross-site inclusion policy for a cookie.

    Members format as their ``Set-Cookie`` spelling, so
    ``f"SameSite={SameSite.LAX}"`` renders ``SameSite=Lax``.
    """

    STRICT = "Strict"
    LAX = "Lax"
    NONE = "None"
