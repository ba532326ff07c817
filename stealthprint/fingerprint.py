"""Browser fingerprints: generation, customisation and JavaScript overrides."""

from __future__ import annotations

import dataclasses
import time
from dataclasses import dataclass, field
from string import Template

from .jsutil import escape_js_string, stable_hash
from .profiles import (
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

_U64_MASK = (1 << 64) - 1

_OVERRIDES_TEMPLATE = Template(
    """
// Screen property overrides
Object.defineProperty(screen, 'width', {
    get: function() { return $screen_width; },
    configurable: true
});
Object.defineProperty(screen, 'height', {
    get: function() { return $screen_height; },
    configurable: true
});
Object.defineProperty(screen, 'availWidth', {
    get: function() { return $avail_width; },
    configurable: true
});
Object.defineProperty(screen, 'availHeight', {
    get: function() { return $avail_height; },
    configurable: true
});
Object.defineProperty(screen, 'colorDepth', {
    get: function() { return $color_depth; },
    configurable: true
});
Object.defineProperty(screen, 'pixelDepth', {
    get: function() { return $pixel_depth; },
    configurable: true
});

// Timezone override
const originalDateGetTimezoneOffset = Date.prototype.getTimezoneOffset;
Date.prototype.getTimezoneOffset = function() {
    return $timezone_offset;
};

// Intl.DateTimeFormat timezone override
const originalResolvedOptions = Intl.DateTimeFormat.prototype.resolvedOptions;
Intl.DateTimeFormat.prototype.resolvedOptions = function() {
    const options = originalResolvedOptions.call(this);
    options.timeZone = "$timezone";
    return options;
};

// Cookie enabled override
Object.defineProperty(navigator, 'cookieEnabled', {
    get: function() { return $cookie_enabled; },
    configurable: true
});

// Do Not Track override
Object.defineProperty(navigator, 'doNotTrack', {
    get: function() { return $dnt; },
    configurable: true
});

// Plugins override (create realistic plugin array)
(function() {
    const pluginData = $plugins_json;
    const mimeTypes = [];
    const plugins = [];

    pluginData.forEach(function(p, index) {
        const plugin = Object.create(Plugin.prototype);
        Object.defineProperties(plugin, {
            'name': { value: p.name, enumerable: true },
            'description': { value: p.description, enumerable: true },
            'filename': { value: p.filename, enumerable: true },
            'length': { value: 0, enumerable: true }
        });
        plugins.push(plugin);
    });

    const pluginArray = Object.create(PluginArray.prototype);
    plugins.forEach(function(plugin, i) {
        Object.defineProperty(pluginArray, i, {
            value: plugin,
            enumerable: true
        });
        Object.defineProperty(pluginArray, plugin.name, {
            value: plugin,
            enumerable: false
        });
    });
    Object.defineProperty(pluginArray, 'length', {
        value: plugins.length,
        enumerable: true
    });
    pluginArray.item = function(index) { return plugins[index] || null; };
    pluginArray.namedItem = function(name) {
        return plugins.find(p => p.name === name) || null;
    };
    pluginArray.refresh = function() {};

    Object.defineProperty(navigator, 'plugins', {
        get: function() { return pluginArray; },
        configurable: true
    });
})();

// Font detection defense (randomize canvas font measurements slightly)
(function() {
    const knownFonts = $fonts_json;
    // Store original measureText
    const originalMeasureText = CanvasRenderingContext2D.prototype.measureText;
    CanvasRenderingContext2D.prototype.measureText = function(text) {
        const result = originalMeasureText.call(this, text);
        // Add tiny noise to width to prevent exact fingerprinting
        const noise = (Math.random() - 0.5) * 0.00001;
        const originalWidth = result.width;
        Object.defineProperty(result, 'width', {
            get: function() { return originalWidth + noise; },
            configurable: true
        });
        return result;
    };
})();
"""
)


def _js_bool(value: bool) -> str:
    return "true" if value else "false"


@dataclass
class BrowserFingerprint:
    """Every property that makes up a browser's fingerprint."""

    user_agent: str
    platform: str
    vendor: str
    language: str
    languages: list[str]
    screen_resolution: ScreenResolution
    color_depth: int
    pixel_depth: int
    timezone_offset: int
    timezone: str
    plugins: list[PluginEntry] = field(default_factory=list)
    fonts: list[FontEntry] = field(default_factory=list)
    do_not_track: str | None = None
    cookie_enabled: bool = True
    profile: FingerprintProfile = FingerprintProfile.CUSTOM

    def to_js_overrides(self) -> str:
        """JavaScript that makes the page see this fingerprint."""
        dnt = "null" if self.do_not_track is None else f'"{self.do_not_track}"'
        res = self.screen_resolution
        return _OVERRIDES_TEMPLATE.substitute(
            screen_width=res.width,
            screen_height=res.height,
            avail_width=res.avail_width,
            avail_height=res.avail_height,
            color_depth=self.color_depth,
            pixel_depth=self.pixel_depth,
            timezone_offset=self.timezone_offset,
            timezone=self.timezone,
            cookie_enabled=_js_bool(self.cookie_enabled),
            dnt=dnt,
            plugins_json=self._plugins_json(),
            fonts_json=self._fonts_json(),
        )

    def _plugins_json(self) -> str:
        entries = (
            '{"name":"%s","description":"%s","filename":"%s"}'
            % (
                escape_js_string(p.name),
                escape_js_string(p.description),
                escape_js_string(p.filename),
            )
            for p in self.plugins
        )
        return "[" + ",".join(entries) + "]"

    def _fonts_json(self) -> str:
        entries = (f'"{escape_js_string(f.name)}"' for f in self.fonts)
        return "[" + ",".join(entries) + "]"


def _time_seed() -> int:
    return time.time_ns() & _U64_MASK


class FingerprintGenerator:
    """Creates realistic fingerprints, random or reproducible."""

    def generate_random(self) -> BrowserFingerprint:
        """A fingerprint for a profile and values chosen from the clock."""
        seed = _time_seed()
        profiles = FingerprintProfile.all_standard()
        return self.generate_with_seed(seed, profiles[seed % len(profiles)])

    def generate_consistent(self, seed: str) -> BrowserFingerprint:
        """The same fingerprint every time for the same ``seed`` string."""
        hashed = stable_hash(seed)
        profiles = FingerprintProfile.all_standard()
        return self.generate_with_seed(hashed, profiles[hashed % len(profiles)])

    def generate_from_profile(self, profile: FingerprintProfile) -> BrowserFingerprint:
        """A fingerprint for ``profile`` with clock-chosen details."""
        return self.generate_with_seed(_time_seed(), profile)

    def generate_with_seed(self, seed: int, profile: FingerprintProfile) -> BrowserFingerprint:
        """A fingerprint for ``profile`` whose details are picked by ``seed``."""
        resolutions = ScreenResolution.common_resolutions()
        timezone, offset = timezone_for(seed)
        languages = languages_for(profile, seed)
        return BrowserFingerprint(
            user_agent=user_agent_for(profile, seed),
            platform=profile.platform(),
            vendor=profile.vendor(),
            language=languages[0],
            languages=languages,
            screen_resolution=resolutions[seed % len(resolutions)],
            color_depth=24,
            pixel_depth=24,
            timezone_offset=offset,
            timezone=timezone,
            plugins=plugins_for(profile),
            fonts=fonts_for(profile),
            do_not_track="1" if seed % 3 == 0 else None,
            cookie_enabled=True,
            profile=profile,
        )


class FingerprintBuilder:
    """Chainable customisation of a fingerprint."""

    def __init__(self, fingerprint: BrowserFingerprint | None = None) -> None:
        if fingerprint is None:
            fingerprint = FingerprintGenerator().generate_from_profile(
                FingerprintProfile.WINDOWS_CHROME
            )
        self._fingerprint = dataclasses.replace(
            fingerprint,
            languages=list(fingerprint.languages),
            plugins=list(fingerprint.plugins),
            fonts=list(fingerprint.fonts),
        )

    def user_agent(self, user_agent: str) -> FingerprintBuilder:
        self._fingerprint.user_agent = user_agent
        return self

    def platform(self, platform: str) -> FingerprintBuilder:
        self._fingerprint.platform = platform
        return self

    def vendor(self, vendor: str) -> FingerprintBuilder:
        self._fingerprint.vendor = vendor
        return self

    def language(self, language: str) -> FingerprintBuilder:
        self._fingerprint.language = language
        return self

    def languages(self, languages: list[str]) -> FingerprintBuilder:
        """Set all languages; a non-empty list also sets the primary one."""
        languages = list(languages)
        if languages:
            self._fingerprint.language = languages[0]
        self._fingerprint.languages = languages
        return self

    def screen_resolution(self, width: int, height: int) -> FingerprintBuilder:
        self._fingerprint.screen_resolution = ScreenResolution.from_size(width, height)
        return self

    def color_depth(self, depth: int) -> FingerprintBuilder:
        """Set both colour and pixel depth."""
        self._fingerprint.color_depth = depth
        self._fingerprint.pixel_depth = depth
        return self

    def timezone(self, timezone: str, offset: int) -> FingerprintBuilder:
        self._fingerprint.timezone = timezone
        self._fingerprint.timezone_offset = offset
        return self

    def do_not_track(self, dnt: str | None) -> FingerprintBuilder:
        self._fingerprint.do_not_track = dnt
        return self

    def build(self) -> BrowserFingerprint:
        """Return a copy of the fingerprint built so far."""
        fp = self._fingerprint
        return dataclasses.replace(
            fp, languages=list(fp.languages), plugins=list(fp.plugins), fonts=list(fp.fonts)
        )