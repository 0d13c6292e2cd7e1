"""Cookie construction defaults.

CookieDefaults is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass

from crumb.errors import ConfigurationError
from crumb.samesite import SameSite


@dataclass(frozen=True, slots=True)
class CookieDefaults:
    """Attribute values a new Cookie starts from. Immutable after creation.

    Override what you need::

        strict = CookieDefaults(samesite=SameSite.STRICT)
        cookie = Cookie("id", "abc", defaults=strict)
    """

    secure: bool = True
    httponly: bool = True
    samesite: SameSite = SameSite.LAX

    def __post_init__(self) -> None:
        if self.samesite == SameSite.NONE and not self.secure:
            msg = 'CookieDefaults with samesite=SameSite.NONE must set secure=True.'
            raise ConfigurationError(msg)


# Direct construction: secure by default
DEFAULTS = CookieDefaults()

# Parsing: only attributes present in the header text become true
PARSED_DEFAULTS = CookieDefaults(secure=False, httponly=False)
