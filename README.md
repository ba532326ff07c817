# stealthprint

`stealthprint` builds coherent browser fingerprints: user agent, platform,
screen, timezone, languages, plugins, fonts, WebGL renderer details and
navigator properties. It renders them as JavaScript meant to be injected into
a page before any of the page's own scripts run. It needs nothing beyond the
standard library.

## Fingerprints

```python
from stealthprint.fingerprint import FingerprintGenerator
from stealthprint.profiles import FingerprintProfile

generator = FingerprintGenerator()

# A fingerprint whose profile and details are picked from the clock.
fp = generator.generate_random()

# The same seed string always gives the same fingerprint, in any process.
fp = generator.generate_consistent("session-42")

# A fingerprint for a chosen browser and operating system.
fp = generator.generate_from_profile(FingerprintProfile.MAC_SAFARI)

print(fp.user_agent, fp.platform, fp.timezone)
script = fp.to_js_overrides()
```

`FingerprintProfile.all_standard()` holds Chrome, Firefox and Edge on
Windows, Chrome, Safari and Firefox on macOS, and Chrome and Firefox on Linux;
`FingerprintProfile.CUSTOM` is the remaining member. Each profile knows its
`platform()` and `vendor()`. `ScreenResolution.common_resolutions()` in
`stealthprint.profiles` lists the screen sizes a generated fingerprint is
drawn from; `ScreenResolution.from_size(width, height)` leaves 40 pixels of
height for a taskbar. The same module offers `user_agent_for`,
`timezone_for`, `languages_for`, `plugins_for` and `fonts_for`, which pick
the data a fingerprint is built from.

`FingerprintGenerator.generate_with_seed(seed, profile)` builds a
fingerprint from an integer seed directly.

To adjust a fingerprint, use `FingerprintBuilder`. Given no fingerprint it
starts from a Windows Chrome one:

```python
from stealthprint.fingerprint import FingerprintBuilder

custom = (
    FingerprintBuilder(fp)
    .user_agent("Custom User Agent")
    .languages(["de-DE", "de"])       # also sets the primary language
    .screen_resolution(1920, 1080)
    .color_depth(32)                  # sets colour and pixel depth
    .timezone("America/New_York", -300)
    .do_not_track(None)
    .build()
)
```

## WebGL

```python
from stealthprint.webgl import WebGLConfig, WebGLConfigBuilder
from stealthprint.webgl_profiles import WebGLProfile

config = WebGLConfig.nvidia_rtx_3060()
config = WebGLConfig.consistent("session-42")
config = WebGLConfig.for_profile(FingerprintProfile.MAC_CHROME)   # Apple M1
config = WebGLConfig.from_profile(WebGLProfile.APPLE_M2).with_canvas_noise(True, 0.0005)

js = config.get_js_override_script()

tuned = (
    WebGLConfigBuilder(config)
    .renderer("Custom Renderer")
    .max_texture_size(8192)
    .max_viewport_dims(8192, 8192)
    .canvas_noise(True, 0.0005)
    .build()
)
```

`WebGLProfile.all()` lists every GPU profile and
`WebGLProfile.common_desktop()` the six that `random()` and `consistent()`
choose from. Each profile gives its `vendor()`, `renderer()` and `limits()`.
`for_profile` gives an Apple M1 for macOS profiles, an RTX 3060 for Linux
profiles and a random common desktop GPU otherwise.

Canvas noise intensity is always clamped to the range 0.0 to 0.01
(`stealthprint.canvas.clamp_intensity`).
`stealthprint.canvas.generate_canvas_noise_script` renders the canvas noise
script on its own.

## Navigator

```python
from stealthprint.navigator import NavigatorOverrides, NavigatorOverridesBuilder
from stealthprint.navigator_plugins import PluginInfo

overrides = NavigatorOverrides.from_fingerprint(fp)
js = overrides.get_override_script()

overrides = (
    NavigatorOverridesBuilder()
    .device_memory(16)
    .hardware_concurrency(12)
    .plugins([PluginInfo.chrome_pdf_viewer()])
    .spoof_permissions(False)
    .build()
)
```

`navigator.webdriver` is always reported as `false`. The builder forces it
off, and `get_override_script()` raises `WebdriverExposedError` if the flag
has been set to true by other means (as does `ensure_no_webdriver()`).
Device memory accepts only 2, 4, 8, 16 or 32 GB; any other value becomes 8.
`extract_app_version` derives `appVersion` from a user agent.

`stealthprint.navigator_plugins` describes plugins (`PluginInfo`) and MIME
types (`MimeTypeInfo`), and `stealthprint.navigator_scripts` holds the
optional permissions and automation-trace fragments of the navigator script.

## Everything at once

```python
from stealthprint.config import StealthConfig, StealthConfigError
from stealthprint.profiles import FingerprintProfile

config = StealthConfig.consistent("session-42")
# or StealthConfig.random(), or StealthConfig.from_profile(FingerprintProfile.LINUX_FIREFOX)

try:
    config.validate()
except StealthConfigError as err:
    print(f"unsafe configuration: {err}")
else:
    script = config.get_complete_override_script()
```

The complete script applies the navigator overrides first, then WebGL, then
the remaining fingerprint properties, all wrapped in a single function scope.

## What it does not do

`stealthprint` only produces configuration and JavaScript text. It does not
start, drive or connect to a browser, inject the scripts itself, or offer a
command line or server; hand the generated script to whatever browser
automation tool you use.