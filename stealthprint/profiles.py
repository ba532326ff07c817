"""Fingerprint profiles and the static data they draw from."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FingerprintProfile(Enum):
    """Predefined browser/OS combinations."""

    WINDOWS_CHROME = "windows_chrome"
    WINDOWS_FIREFOX = "windows_firefox"
    WINDOWS_EDGE = "windows_edge"
    MAC_CHROME = "mac_chrome"
    MAC_SAFARI = "mac_safari"
    MAC_FIREFOX = "mac_firefox"
    LINUX_CHROME = "linux_chrome"
    LINUX_FIREFOX = "linux_firefox"
    CUSTOM = "custom"

    @classmethod
    def all_standard(cls) -> list[FingerprintProfile]:
        """All profiles except ``CUSTOM``, in declaration order."""
        return [profile for profile in cls if profile is not cls.CUSTOM]

    def platform(self) -> str:
        """The ``navigator.platform`` value for this profile."""
        return _PLATFORMS[self]

    def vendor(self) -> str:
        """The ``navigator.vendor`` value for this profile."""
        return _VENDORS[self]


_P = FingerprintProfile

_WINDOWS = (_P.WINDOWS_CHROME, _P.WINDOWS_FIREFOX, _P.WINDOWS_EDGE)
_MAC = (_P.MAC_CHROME, _P.MAC_SAFARI, _P.MAC_FIREFOX)
_LINUX = (_P.LINUX_CHROME, _P.LINUX_FIREFOX)
_CHROMIUM = (_P.WINDOWS_CHROME, _P.MAC_CHROME, _P.LINUX_CHROME, _P.WINDOWS_EDGE)
_FIREFOX = (_P.WINDOWS_FIREFOX, _P.MAC_FIREFOX, _P.LINUX_FIREFOX)

_PLATFORMS = {
    **{p: "Win32" for p in _WINDOWS},
    **{p: "MacIntel" for p in _MAC},
    **{p: "Linux x86_64" for p in _LINUX},
    _P.CUSTOM: "Win32",
}

_VENDORS = {
    **{p: "Google Inc." for p in _CHROMIUM},
    **{p: "" for p in _FIREFOX},
    _P.MAC_SAFARI: "Apple Computer, Inc.",
    _P.CUSTOM: "Google Inc.",
}


@dataclass(frozen=True)
class ScreenResolution:
    """Screen size together with the space available to windows."""

    width: int
    height: int
    avail_width: int
    avail_height: int

    @classmethod
    def from_size(cls, width: int, height: int) -> ScreenResolution:
        """Build a resolution leaving 40 pixels of height for a taskbar."""
        return cls(width, height, width, max(height - 40, 0))

    @classmethod
    def common_resolutions(cls) -> list[ScreenResolution]:
        """Frequently seen desktop and laptop resolutions."""
        return [cls.from_size(w, h) for w, h in _COMMON_SIZES]


_COMMON_SIZES = (
    (1920, 1080),
    (2560, 1440),
    (3840, 2160),
    (1366, 768),
    (1536, 864),
    (1440, 900),
    (1680, 1050),
    (2560, 1600),
    (2880, 1800),
)


@dataclass(frozen=True)
class PluginEntry:
    """A plugin as reported by ``navigator.plugins``."""

    name: str
    description: str
    filename: str


@dataclass(frozen=True)
class FontEntry:
    """A font reported as installed."""

    name: str


_USER_AGENTS = {
    _P.WINDOWS_CHROME: (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/119.0.0.0 Safari/537.36",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36",
    ),
    _P.WINDOWS_FIREFOX: (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:121.0) Gecko/20100101 Firefox/121.0",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:120.0) Gecko/20100101 Firefox/120.0",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:122.0) Gecko/20100101 Firefox/122.0",
    ),
    _P.WINDOWS_EDGE: (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36 Edg/120.0.0.0",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36 Edg/121.0.0.0",
    ),
    _P.MAC_CHROME: (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36",
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 14_0) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    ),
    _P.MAC_SAFARI: (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.2 Safari/605.1.15",
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 14_0) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.1 Safari/605.1.15",
    ),
    _P.MAC_FIREFOX: (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10.15; rv:121.0) Gecko/20100101 Firefox/121.0",
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 14.0; rv:120.0) Gecko/20100101 Firefox/120.0",
    ),
    _P.LINUX_CHROME: (
        "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
        "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36",
    ),
    _P.LINUX_FIREFOX: (
        "Mozilla/5.0 (X11; Linux x86_64; rv:121.0) Gecko/20100101 Firefox/121.0",
        "Mozilla/5.0 (X11; Ubuntu; Linux x86_64; rv:120.0) Gecko/20100101 Firefox/120.0",
    ),
}
_USER_AGENTS[_P.CUSTOM] = _USER_AGENTS[_P.WINDOWS_CHROME]

_TIMEZONES = (
    ("America/New_York", -300),
    ("America/Chicago", -360),
    ("America/Denver", -420),
    ("America/Los_Angeles", -480),
    ("Europe/London", 0),
    ("Europe/Paris", 60),
    ("Europe/Berlin", 60),
    ("Asia/Tokyo", 540),
    ("Asia/Shanghai", 480),
    ("Australia/Sydney", 600),
)


def _language_sets(extra: str) -> tuple[tuple[str, ...], ...]:
    return (("en-US", "en"), ("en-US", "en", extra), ("en-GB", "en"))


_LANGUAGES = {
    **{p: _language_sets("es") for p in _WINDOWS},
    **{p: _language_sets("fr") for p in _MAC},
    **{p: _language_sets("de") for p in _LINUX},
    _P.CUSTOM: (("en-US", "en"),),
}

_PDF = "Portable Document Format"
_CHROMIUM_PLUGIN_NAMES = (
    "PDF Viewer",
    "Chrome PDF Viewer",
    "Chromium PDF Viewer",
    "Microsoft Edge PDF Viewer",
    "WebKit built-in PDF",
)

_BASE_FONTS = (
    "Arial",
    "Arial Black",
    "Comic Sans MS",
    "Courier New",
    "Georgia",
    "Impact",
    "Times New Roman",
    "Trebuchet MS",
    "Verdana",
)

_PLATFORM_FONTS = {
    **{
        p: ("Calibri", "Cambria", "Consolas", "Segoe UI", "Tahoma", "Microsoft Sans Serif")
        for p in _WINDOWS
    },
    **{
        p: ("Helvetica", "Helvetica Neue", "Lucida Grande", "Monaco", "Menlo", "SF Pro")
        for p in _MAC
    },
    **{
        p: (
            "DejaVu Sans",
            "DejaVu Serif",
            "Liberation Sans",
            "Liberation Serif",
            "Ubuntu",
            "Noto Sans",
        )
        for p in _LINUX
    },
    _P.CUSTOM: (),
}


def user_agent_for(profile: FingerprintProfile, seed: int) -> str:
    """Pick a user agent string for ``profile`` using ``seed``."""
    agents = _USER_AGENTS[profile]
    return agents[seed % len(agents)]


def timezone_for(seed: int) -> tuple[str, int]:
    """Pick a ``(timezone name, offset in minutes)`` pair using ``seed``."""
    return _TIMEZONES[seed % len(_TIMEZONES)]


def languages_for(profile: FingerprintProfile, seed: int) -> list[str]:
    """Pick an accepted-languages list for ``profile`` using ``seed``."""
    sets = _LANGUAGES[profile]
    return list(sets[seed % len(sets)])


def plugins_for(profile: FingerprintProfile) -> list[PluginEntry]:
    """The plugins a browser of ``profile`` reports."""
    if profile in _CHROMIUM:
        return [PluginEntry(name, _PDF, "internal-pdf-viewer") for name in _CHROMIUM_PLUGIN_NAMES]
    if profile is FingerprintProfile.MAC_SAFARI:
        return [PluginEntry("WebKit built-in PDF", _PDF, "WebKitPDFPlugin")]
    return []


def fonts_for(profile: FingerprintProfile) -> list[FontEntry]:
    """The base fonts followed by the fonts specific to the profile's OS."""
    names = _BASE_FONTS + _PLATFORM_FONTS[profile]
    return [FontEntry(name) for name in names]