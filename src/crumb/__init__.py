"""Crumb — a single HTTP cookie, to and from its ``Set-Cookie`` header.

Basic usage::

    from crumb import Cookie, SameSite

    cookie = Cookie("id", "abc123").set_path("/").set_samesite(SameSite.STRICT)
    str(cookie)
    # 'id=abc123; SameSite=Strict; Path=/; HttpOnly; Secure'

    Cookie.parse("id=abc123; SameSite=Lax; Path=/")
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "Cookie",
    "CookieDefaults",
    "CookieError",
    "CrumbError",
    "SameSite",
]

# name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "crumb.errors",
    "Cookie": "crumb.cookie",
    "CookieDefaults": "crumb.config",
    "CookieError": "crumb.errors",
    "CrumbError": "crumb.errors",
    "SameSite": "crumb.samesite",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import crumb`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
