import pytest

from stealthprint.profiles import (
    FingerprintProfile,
    FontEntry,
    PluginEntry,
    ScreenResolution,
    fonts_for,
    languages_for,
    plugins_for,
    timezone_for,
    user_agent_for,
)

P = FingerprintProfile


def test_all_standard_excludes_custom():
    standard = P.all_standard()
    assert P.CUSTOM not in standard
    assert set(standard) | {P.CUSTOM} == set(P)
    assert standard[0] is P.WINDOWS_CHROME


@pytest.mark.parametrize(
    "profile, platform",
    [
        (P.WINDOWS_CHROME, "Win32"),
        (P.WINDOWS_EDGE, "Win32"),
        (P.MAC_SAFARI, "MacIntel"),
        (P.LINUX_FIREFOX, "Linux x86_64"),
        (P.CUSTOM, "Win32"),
    ],
)
def test_platform(profile, platform):
    assert profile.platform() == platform


@pytest.mark.parametrize(
    "profile, vendor",
    [
        (P.WINDOWS_CHROME, "Google Inc."),
        (P.WINDOWS_EDGE, "Google Inc."),
        (P.MAC_SAFARI, "Apple Computer, Inc."),
        (P.MAC_FIREFOX, ""),
        (P.CUSTOM, "Google Inc."),
    ],
)
def test_vendor(profile, vendor):
    assert profile.vendor() == vendor


def test_screen_resolution_reserves_taskbar():
    res = ScreenResolution.from_size(1920, 1080)
    assert res.avail_width == res.width == 1920
    assert res.avail_height == 1040


def test_screen_resolution_never_negative():
    assert ScreenResolution.from_size(10, 20).avail_height == 0


def test_common_resolutions_start_with_full_hd():
    resolutions = ScreenResolution.common_resolutions()
    assert resolutions[0] == ScreenResolution.from_size(1920, 1080)
    assert all(r.avail_height <= r.height for r in resolutions)
    assert len({(r.width, r.height) for r in resolutions}) == len(resolutions)


def test_user_agent_first_choice():
    assert user_agent_for(P.WINDOWS_CHROME, 0) == (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    )


def test_custom_uses_windows_chrome_agents():
    for seed in range(8):
        assert user_agent_for(P.CUSTOM, seed) == user_agent_for(P.WINDOWS_CHROME, seed)


def test_user_agent_matches_profile_browser():
    for seed in range(6):
        assert "Firefox/" in user_agent_for(P.LINUX_FIREFOX, seed)
        assert "Edg/" in user_agent_for(P.WINDOWS_EDGE, seed)
        assert "Macintosh" in user_agent_for(P.MAC_SAFARI, seed)


def test_timezone_first_entry():
    assert timezone_for(0) == ("America/New_York", -300)


def test_timezone_cycles():
    first = [timezone_for(seed) for seed in range(10)]
    assert [timezone_for(seed + 10) for seed in range(10)] == first
    assert ("Asia/Tokyo", 540) in first


def test_languages_custom():
    assert languages_for(P.CUSTOM, 12345) == ["en-US", "en"]


def test_languages_by_platform():
    assert languages_for(P.WINDOWS_CHROME, 1) == ["en-US", "en", "es"]
    assert languages_for(P.MAC_SAFARI, 1) == ["en-US", "en", "fr"]
    assert languages_for(P.LINUX_CHROME, 1) == ["en-US", "en", "de"]
    assert languages_for(P.LINUX_CHROME, 2) == ["en-GB", "en"]


def test_languages_returns_fresh_list():
    langs = languages_for(P.WINDOWS_CHROME, 0)
    langs.append("xx")
    assert languages_for(P.WINDOWS_CHROME, 0) == ["en-US", "en"]


def test_chromium_plugins():
    plugins = plugins_for(P.WINDOWS_CHROME)
    assert plugins[1] == PluginEntry(
        "Chrome PDF Viewer", "Portable Document Format", "internal-pdf-viewer"
    )
    assert plugins == plugins_for(P.WINDOWS_EDGE)
    assert all(p.filename == "internal-pdf-viewer" for p in plugins)


def test_safari_and_firefox_plugins():
    assert plugins_for(P.MAC_SAFARI) == [
        PluginEntry("WebKit built-in PDF", "Portable Document Format", "WebKitPDFPlugin")
    ]
    assert plugins_for(P.MAC_FIREFOX) == []
    assert plugins_for(P.CUSTOM) == []


def test_fonts_extend_base_set():
    base = fonts_for(P.CUSTOM)
    assert base[0] == FontEntry("Arial")
    for profile in P.all_standard():
        fonts = fonts_for(profile)
        assert fonts[: len(base)] == base
        assert len(fonts) > len(base)


def test_platform_specific_fonts():
    assert FontEntry("Segoe UI") in fonts_for(P.WINDOWS_FIREFOX)
    assert FontEntry("Menlo") in fonts_for(P.MAC_CHROME)
    assert FontEntry("Ubuntu") in fonts_for(P.LINUX_CHROME)
    assert FontEntry("Segoe UI") not in fonts_for(P.LINUX_CHROME)