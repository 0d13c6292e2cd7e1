"""Tests for crumb.errors — exception hierarchy and error messages."""

import pytest

from crumb.cookie import Cookie
from crumb.errors import ConfigurationError, CookieError, CrumbError
from crumb.samesite import SameSite


class TestHierarchy:
    def test_cookie_error_is_crumb_error(self) -> None:
        assert issubclass(CookieError, CrumbError)

    def test_configuration_error_is_crumb_error(self) -> None:
        assert issubclass(ConfigurationError, CrumbError)

    def test_crumb_error_is_exception(self) -> None:
        assert issubclass(CrumbError, Exception)


class TestCookieError:
    def test_caught_as_crumb_error(self) -> None:
        cookie = Cookie("id", "abc").set_samesite(SameSite.NONE)

        with pytest.raises(CrumbError):
            cookie.set_secure(False)

    def test_message_names_secure_requirement(self) -> None:
        cookie = Cookie("id", "abc").set_samesite(SameSite.NONE)

        with pytest.raises(CookieError, match="Secure context required"):
            cookie.set_secure(False)
