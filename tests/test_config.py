"""Tests for crumb.config — CookieDefaults frozen dataclass."""

import pytest

from crumb.config import DEFAULTS, PARSED_DEFAULTS, CookieDefaults
from crumb.errors import ConfigurationError
from crumb.samesite import SameSite


class TestCookieDefaults:
    def test_defaults(self) -> None:
        cfg = CookieDefaults()

        assert cfg.secure is True
        assert cfg.httponly is True
        assert cfg.samesite is SameSite.LAX

    def test_override(self) -> None:
        cfg = CookieDefaults(secure=False, httponly=False, samesite=SameSite.STRICT)

        assert cfg.secure is False
        assert cfg.httponly is False
        assert cfg.samesite is SameSite.STRICT

    def test_frozen(self) -> None:
        cfg = CookieDefaults()

        with pytest.raises(AttributeError):
            cfg.secure = False  # type: ignore[misc]

    def test_samesite_none_requires_secure(self) -> None:
        with pytest.raises(ConfigurationError):
            CookieDefaults(secure=False, samesite=SameSite.NONE)

    def test_samesite_none_with_secure(self) -> None:
        cfg = CookieDefaults(samesite=SameSite.NONE)
        assert cfg.secure is True


class TestModuleDefaults:
    def test_construction_defaults(self) -> None:
        assert DEFAULTS == CookieDefaults()

    def test_parsed_defaults_clear_flags(self) -> None:
        assert PARSED_DEFAULTS.secure is False
        assert PARSED_DEFAULTS.httponly is False
        assert PARSED_DEFAULTS.samesite is SameSite.LAX
