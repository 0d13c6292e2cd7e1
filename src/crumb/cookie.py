"""A single HTTP cookie and its ``Set-Cookie`` wire form.

``Cookie`` is mutable and built through chained ``set_*()`` calls, each
returning the same instance::

    cookie = (
        Cookie("id", "abc123")
        .set_domain("example.com")
        .set_path("/")
        .set_samesite(SameSite.STRICT)
    )
    header = str(cookie)

``Cookie.parse()`` goes the other way, from a ``Set-Cookie`` value back
to a ``Cookie``.
"""

import logging
import math
from datetime import datetime
from typing import Self

from crumb._internal.dates import http_date
from crumb.config import DEFAULTS, PARSED_DEFAULTS, CookieDefaults
from crumb.errors import CookieError
from crumb.samesite import SameSite

logger = logging.getLogger("crumb.cookie")

_SEPARATOR = "; "


class Cookie:
    """An HTTP cookie with validated attributes.

    A cookie with ``SameSite=None`` is always ``Secure``:
    ``set_samesite(SameSite.NONE)`` turns ``secure`` on, and
    ``set_secure(False)`` on such a cookie raises ``CookieError``.
    """

    __slots__ = (
        "_domain",
        "_expires",
        "_httponly",
        "_max_age",
        "_name",
        "_path",
        "_samesite",
        "_secure",
        "_value",
    )

    def __init__(self, name: str, value: str, *, defaults: CookieDefaults | None = None) -> None:
        policy = defaults if defaults is not None else DEFAULTS
        self._name = name
        self._value = value
        self._expires: str | None = None
        self._max_age: int | float | None = None
        self._domain: str | None = None
        self._path: str | None = None
        self._secure = policy.secure
        self._httponly = policy.httponly
        self._samesite: SameSite | str = policy.samesite

    # -- Attributes --

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> str:
        return self._value

    @property
    def expires(self) -> str | None:
        """HTTP-date string, stored exactly as it will be rendered."""
        return self._expires

    @property
    def max_age(self) -> int | float | None:
        return self._max_age

    @property
    def domain(self) -> str | None:
        return self._domain

    @property
    def path(self) -> str | None:
        return self._path

    @property
    def secure(self) -> bool:
        return self._secure

    @property
    def httponly(self) -> bool:
        return self._httponly

    @property
    def samesite(self) -> SameSite | str:
        """A ``SameSite`` member, or the raw text of an unrecognized parsed value."""
        return self._samesite

    # -- Chainable setters --

    def set_name(self, name: str) -> Self:
        self._name = name
        return self

    def set_value(self, value: str) -> Self:
        self._value = value
        return self

    def set_expires(self, expires: datetime | str) -> Self:
        """Set ``Expires`` from a datetime (rendered in UTC) or a verbatim string."""
        self._expires = http_date(expires) if isinstance(expires, datetime) else expires
        return self

    def set_max_age(self, max_age: int | float) -> Self:
        self._max_age = max_age
        return self

    def set_domain(self, domain: str) -> Self:
        self._domain = domain
        return self

    def set_path(self, path: str) -> Self:
        self._path = path
        return self

    def set_secure(self, secure: bool) -> Self:
        """Set the ``Secure`` flag.

        Raises ``CookieError`` when clearing it on a ``SameSite=None``
        cookie; the cookie is not modified in that case.
        """
        if self._samesite == SameSite.NONE and not secure:
            msg = 'Secure context required: A cookie with "SameSite=None" must include "Secure".'
            raise CookieError(msg)
        self._secure = secure
        return self

    def set_httponly(self, httponly: bool) -> Self:
        self._httponly = httponly
        return self

    def set_samesite(self, samesite: SameSite | str) -> Self:
        """Set ``SameSite``. ``SameSite.NONE`` also turns ``secure`` on."""
        self._samesite = samesite
        if samesite == SameSite.NONE:
            if not self._secure:
                logger.debug("SameSite=None on cookie %r: enabling Secure", self._name)
            self._secure = True
        return self

    # -- Serialization --

    def to_header_value(self) -> str:
        """Serialize to a ``Set-Cookie`` header value string."""
        parts = [f"{self._name}={self._value}", f"SameSite={self._samesite}"]
        if self._domain:
            parts.append(f"Domain={self._domain}")
        if self._path:
            parts.append(f"Path={self._path}")
        if self._httponly:
            parts.append("HttpOnly")
        if self._secure:
            parts.append("Secure")
        if self._max_age and math.isfinite(self._max_age):
            parts.append(f"Max-Age={self._max_age}")
        if self._expires:
            parts.append(f"Expires={self._expires}")
        return _SEPARATOR.join(parts)

    def __str__(self) -> str:
        return self.to_header_value()

    @classmethod
    def parse(cls, text: str) -> Self:
        """Build a Cookie from a single ``Set-Cookie`` header value.

        Attribute names are matched case-insensitively; when a name
        repeats, the last occurrence wins. ``Secure`` and ``HttpOnly``
        are only set when present in *text*. Any attribute that is not
        a known cookie attribute is taken as the cookie's name and value.
        """
        cookie = cls("", "", defaults=PARSED_DEFAULTS)
        for key, value in _split_attributes(text).items():
            match key.lower():
                case "httponly":
                    cookie.set_httponly(True)
                case "secure":
                    cookie.set_secure(True)
                case "samesite" | "domain" | "path" | "max-age" | "expires" if value is None:
                    logger.debug("Skipping %s attribute without a value", key)
                case "samesite":
                    cookie.set_samesite(_parse_samesite(value))
                case "domain":
                    cookie.set_domain(value)
                case "path":
                    cookie.set_path(value)
                case "max-age":
                    cookie.set_max_age(_parse_number(value))
                case "expires":
                    cookie.set_expires(value)
                case _:
                    cookie.set_name(key)
                    cookie.set_value(value or "")
        return cookie

    # -- Comparison --

    def _key(self) -> tuple[object, ...]:
        return tuple(getattr(self, slot) for slot in Cookie.__slots__)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cookie):
            return NotImplemented
        return self._key() == other._key()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Cookie(name={self._name!r}, value={self._value!r}, "
            f"expires={self._expires!r}, max_age={self._max_age!r}, "
            f"domain={self._domain!r}, path={self._path!r}, "
            f"secure={self._secure!r}, httponly={self._httponly!r}, "
            f"samesite={str(self._samesite)!r})"
        )


def _split_attributes(text: str) -> dict[str, str | None]:
    """Split ``a=1; Secure`` into ``{"a": "1", "Secure": None}``.

    Each token is split on its first ``=`` only, so values may contain ``=``.
    """
    attributes: dict[str, str | None] = {}
    for token in text.split(_SEPARATOR):
        key, sep, value = token.partition("=")
        attributes[key] = value if sep else None
    return attributes


def _parse_samesite(value: str) -> SameSite | str:
    """Return the matching ``SameSite`` member, or *value* unchanged."""
    try:
        return SameSite(value)
    except ValueError:
        logger.warning("Unrecognized SameSite value %r kept as-is", value)
        return value


def _parse_number(value: str) -> int | float:
    """Coerce ``Max-Age`` text to a number; non-numeric text becomes NaN.

    Integral values come back as ``int`` (``"1e3"`` is ``1000``), as do
    ``0x``/``0o``/``0b`` literals. Digit grouping with ``_`` is not a number.
    """
    text = value.strip()
    if not text:
        return 0
    if "_" in text:
        return math.nan
    for base in (10, 0):
        try:
            return int(text, base)
        except ValueError:
            pass
    try:
        number = float(text)
    except ValueError:
        return math.nan
    if math.isfinite(number) and number.is_integer():
        return int(number)
    return number
