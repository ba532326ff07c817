"""Navigator property overrides that keep automation from being detected."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from string import Template

from .fingerprint import BrowserFingerprint
from .jsutil import escape_js_string
from .navigator_plugins import PluginInfo, default_chrome_plugins, plugins_to_json
from .navigator_scripts import automation_removal_script, permissions_spoof_script

_DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
_VALID_DEVICE_MEMORY = (2, 4, 8, 16, 32)
_MOZILLA_PREFIX = "Mozilla/"

_OVERRIDE_TEMPLATE = Template(
    """
// ============================================================================
// CRITICAL NAVIGATOR ANTI-DETECTION OVERRIDES
// This script MUST run before any page scripts to prevent detection
// ============================================================================

(function() {
    'use strict';

    // ========================================================================
    // CRITICAL: WebDriver Detection Prevention
    // This is THE MOST IMPORTANT anti-detection measure
    // ========================================================================

    // Method 1: Direct property override
    Object.defineProperty(navigator, 'webdriver', {
        get: function() { return false; },
        configurable: true,
        enumerable: true
    });

    // Method 2: Delete the property first, then redefine
    try {
        delete navigator.webdriver;
        Object.defineProperty(navigator, 'webdriver', {
            get: function() { return false; },
            configurable: true,
            enumerable: true
        });
    } catch (e) {}

    // Method 3: Override on the Navigator prototype
    try {
        Object.defineProperty(Navigator.prototype, 'webdriver', {
            get: function() { return false; },
            configurable: true,
            enumerable: true
        });
    } catch (e) {}

    // Method 4: Spoof Object.getOwnPropertyDescriptor
    const originalGetOwnPropertyDescriptor = Object.getOwnPropertyDescriptor;
    Object.getOwnPropertyDescriptor = function(obj, prop) {
        if (prop === 'webdriver' && (obj === navigator || obj === Navigator.prototype)) {
            return {
                value: false,
                writable: false,
                enumerable: true,
                configurable: true
            };
        }
        return originalGetOwnPropertyDescriptor.call(this, obj, prop);
    };

    // Method 5: Override toString to hide our modifications
    const originalNavigatorToString = navigator.toString;
    navigator.toString = function() {
        return '[object Navigator]';
    };

    // ========================================================================
    // User Agent and Related Properties
    // ========================================================================

    Object.defineProperty(navigator, 'userAgent', {
        get: function() { return "$user_agent"; },
        configurable: true
    });

    Object.defineProperty(navigator, 'appVersion', {
        get: function() { return "$app_version"; },
        configurable: true
    });

    Object.defineProperty(navigator, 'appName', {
        get: function() { return "$app_name"; },
        configurable: true
    });

    Object.defineProperty(navigator, 'appCodeName', {
        get: function() { return "$app_code_name"; },
        configurable: true
    });

    Object.defineProperty(navigator, 'product', {
        get: function() { return "$product"; },
        configurable: true
    });

    Object.defineProperty(navigator, 'productSub', {
        get: function() { return "$product_sub"; },
        configurable: true
    });

    Object.defineProperty(navigator, 'vendor', {
        get: function() { return "$vendor"; },
        configurable: true
    });

    Object.defineProperty(navigator, 'vendorSub', {
        get: function() { return "$vendor_sub"; },
        configurable: true
    });

    // ========================================================================
    // Platform and Hardware Properties
    // ========================================================================

    Object.defineProperty(navigator, 'platform', {
        get: function() { return "$platform"; },
        configurable: true
    });

    Object.defineProperty(navigator, 'hardwareConcurrency', {
        get: function() { return $hardware_concurrency; },
        configurable: true
    });

    Object.defineProperty(navigator, 'deviceMemory', {
        get: function() { return $device_memory; },
        configurable: true
    });

    Object.defineProperty(navigator, 'maxTouchPoints', {
        get: function() { return $max_touch_points; },
        configurable: true
    });

    // ========================================================================
    // Language Properties
    // ========================================================================

    const LANGUAGES = $languages_json;

    Object.defineProperty(navigator, 'languages', {
        get: function() { return Object.freeze(LANGUAGES.slice()); },
        configurable: true
    });

    Object.defineProperty(navigator, 'language', {
        get: function() { return LANGUAGES[0]; },
        configurable: true
    });

    // ========================================================================
    // Connection and Status Properties
    // ========================================================================

    Object.defineProperty(navigator, 'onLine', {
        get: function() { return $on_line; },
        configurable: true
    });

    Object.defineProperty(navigator, 'cookieEnabled', {
        get: function() { return $cookie_enabled; },
        configurable: true
    });

    Object.defineProperty(navigator, 'doNotTrack', {
        get: function() { return $dnt; },
        configurable: true
    });

    Object.defineProperty(navigator, 'pdfViewerEnabled', {
        get: function() { return $pdf_viewer_enabled; },
        configurable: true
    });

    // ========================================================================
    // Plugins Override
    // ========================================================================

    (function() {
        const pluginData = $plugins_json;
        const plugins = [];
        const mimeTypes = [];

        pluginData.forEach(function(p) {
            const plugin = Object.create(Plugin.prototype);
            const pluginMimeTypes = [];

            (p.mimeTypes || []).forEach(function(mt) {
                const mimeType = Object.create(MimeType.prototype);
                Object.defineProperties(mimeType, {
                    'type': { value: mt.type, enumerable: true },
                    'description': { value: mt.description, enumerable: true },
                    'suffixes': { value: mt.suffixes, enumerable: true },
                    'enabledPlugin': { value: plugin, enumerable: true }
                });
                pluginMimeTypes.push(mimeType);
                mimeTypes.push(mimeType);
            });

            Object.defineProperties(plugin, {
                'name': { value: p.name, enumerable: true },
                'description': { value: p.description, enumerable: true },
                'filename': { value: p.filename, enumerable: true },
                'length': { value: pluginMimeTypes.length, enumerable: true }
            });

            pluginMimeTypes.forEach(function(mt, i) {
                Object.defineProperty(plugin, i, {
                    value: mt,
                    enumerable: true
                });
            });

            plugin.item = function(index) { return pluginMimeTypes[index] || null; };
            plugin.namedItem = function(name) {
                return pluginMimeTypes.find(mt => mt.type === name) || null;
            };

            plugins.push(plugin);
        });

        // Create PluginArray
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

        // Create MimeTypeArray
        const mimeTypeArray = Object.create(MimeTypeArray.prototype);
        mimeTypes.forEach(function(mt, i) {
            Object.defineProperty(mimeTypeArray, i, {
                value: mt,
                enumerable: true
            });
            Object.defineProperty(mimeTypeArray, mt.type, {
                value: mt,
                enumerable: false
            });
        });

        Object.defineProperty(mimeTypeArray, 'length', {
            value: mimeTypes.length,
            enumerable: true
        });

        mimeTypeArray.item = function(index) { return mimeTypes[index] || null; };
        mimeTypeArray.namedItem = function(name) {
            return mimeTypes.find(mt => mt.type === name) || null;
        };

        Object.defineProperty(navigator, 'mimeTypes', {
            get: function() { return mimeTypeArray; },
            configurable: true
        });
    })();

    // ========================================================================
    // Permissions API Spoofing (Optional)
    // ========================================================================

    $permissions_spoof

    // ========================================================================
    // Automation Signal Removal (Optional)
    // ========================================================================

    $automation_removal

    // ========================================================================
    // Final Verification
    // ========================================================================

    // Double-check webdriver is false
    if (navigator.webdriver !== false) {
        console.error('CRITICAL: navigator.webdriver override failed!');
        // Force it again
        Object.defineProperty(navigator, 'webdriver', {
            get: function() { return false; },
            configurable: false,
            enumerable: true
        });
    }

})();
"""
)


class WebdriverExposedError(RuntimeError):
    """Raised when a configuration would report ``navigator.webdriver`` as true."""


def _esc(text: str) -> str:
    return escape_js_string(text, single_quotes=True)


def _js_bool(value: bool) -> str:
    return "true" if value else "false"


def extract_app_version(user_agent: str) -> str:
    """Everything after ``Mozilla/`` in a user agent, or the whole string."""
    pos = user_agent.find(_MOZILLA_PREFIX)
    if pos == -1:
        return user_agent
    return user_agent[pos + len(_MOZILLA_PREFIX):]


@dataclass
class NavigatorOverrides:
    """Navigator properties a page should observe; ``webdriver`` stays false."""

    webdriver: bool = False
    languages: list[str] = field(default_factory=lambda: ["en-US", "en"])
    platform: str = "Win32"
    hardware_concurrency: int = 8
    device_memory: int = 8
    max_touch_points: int = 0
    vendor: str = "Google Inc."
    vendor_sub: str = ""
    product: str = "Gecko"
    product_sub: str = "20030107"
    user_agent: str = _DEFAULT_USER_AGENT
    app_version: str = extract_app_version(_DEFAULT_USER_AGENT)
    app_name: str = "Netscape"
    app_code_name: str = "Mozilla"
    cookie_enabled: bool = True
    on_line: bool = True
    do_not_track: str | None = None
    pdf_viewer_enabled: bool = True
    plugins: list[PluginInfo] = field(default_factory=default_chrome_plugins)
    spoof_permissions: bool = True
    remove_automation_signals: bool = True

    @classmethod
    def from_fingerprint(cls, fingerprint: BrowserFingerprint) -> NavigatorOverrides:
        """Overrides matching the identity described by ``fingerprint``."""
        return cls(
            webdriver=False,
            languages=list(fingerprint.languages),
            platform=fingerprint.platform,
            vendor=fingerprint.vendor,
            user_agent=fingerprint.user_agent,
            app_version=extract_app_version(fingerprint.user_agent),
            cookie_enabled=fingerprint.cookie_enabled,
            do_not_track=fingerprint.do_not_track,
        )

    def ensure_no_webdriver(self) -> None:
        """Raise :class:`WebdriverExposedError` if ``webdriver`` is true."""
        if self.webdriver:
            raise WebdriverExposedError(
                "CRITICAL SECURITY ERROR: navigator.webdriver MUST be false! "
                "Current value is true, which will expose automation detection."
            )

    def get_override_script(self) -> str:
        """JavaScript overriding every navigator property; inject before page scripts."""
        self.ensure_no_webdriver()
        dnt = "null" if self.do_not_track is None else f'"{self.do_not_track}"'
        return _OVERRIDE_TEMPLATE.substitute(
            user_agent=_esc(self.user_agent),
            app_version=_esc(self.app_version),
            app_name=_esc(self.app_name),
            app_code_name=_esc(self.app_code_name),
            product=_esc(self.product),
            product_sub=_esc(self.product_sub),
            vendor=_esc(self.vendor),
            vendor_sub=_esc(self.vendor_sub),
            platform=_esc(self.platform),
            hardware_concurrency=self.hardware_concurrency,
            device_memory=self.device_memory,
            max_touch_points=self.max_touch_points,
            languages_json=self._languages_json(),
            on_line=_js_bool(self.on_line),
            cookie_enabled=_js_bool(self.cookie_enabled),
            dnt=dnt,
            pdf_viewer_enabled=_js_bool(self.pdf_viewer_enabled),
            plugins_json=plugins_to_json(self.plugins),
            permissions_spoof=permissions_spoof_script() if self.spoof_permissions else "",
            automation_removal=(
                automation_removal_script() if self.remove_automation_signals else ""
            ),
        )

    def _languages_json(self) -> str:
        return "[" + ", ".join(f'"{_esc(lang)}"' for lang in self.languages) + "]"


class NavigatorOverridesBuilder:
    """Chainable customisation of navigator overrides."""

    def __init__(self) -> None:
        self._overrides = NavigatorOverrides()

    def languages(self, languages: list[str]) -> NavigatorOverridesBuilder:
        self._overrides.languages = list(languages)
        return self

    def platform(self, platform: str) -> NavigatorOverridesBuilder:
        self._overrides.platform = platform
        return self

    def hardware_concurrency(self, cores: int) -> NavigatorOverridesBuilder:
        self._overrides.hardware_concurrency = cores
        return self

    def device_memory(self, memory_gb: int) -> NavigatorOverridesBuilder:
        """Set device memory; values other than 2, 4, 8, 16 or 32 become 8."""
        self._overrides.device_memory = memory_gb if memory_gb in _VALID_DEVICE_MEMORY else 8
        return self

    def max_touch_points(self, points: int) -> NavigatorOverridesBuilder:
        self._overrides.max_touch_points = points
        return self

    def user_agent(self, user_agent: str) -> NavigatorOverridesBuilder:
        """Set the user agent and the app version derived from it."""
        self._overrides.app_version = extract_app_version(user_agent)
        self._overrides.user_agent = user_agent
        return self

    def vendor(self, vendor: str) -> NavigatorOverridesBuilder:
        self._overrides.vendor = vendor
        return self

    def plugins(self, plugins: list[PluginInfo]) -> NavigatorOverridesBuilder:
        self._overrides.plugins = list(plugins)
        return self

    def spoof_permissions(self, enabled: bool) -> NavigatorOverridesBuilder:
        self._overrides.spoof_permissions = enabled
        return self

    def remove_automation_signals(self, enabled: bool) -> NavigatorOverridesBuilder:
        self._overrides.remove_automation_signals = enabled
        return self

    def build(self) -> NavigatorOverrides:
        """A copy of the overrides built so far, always with ``webdriver`` false."""
        current = self._overrides
        return dataclasses.replace(
            current,
            webdriver=False,
            languages=list(current.languages),
            plugins=list(current.plugins),
        )