"""Browser fingerprints, WebGL and navigator settings, and the JavaScript that applies them."""

__version__ = "0.1.0"

__all__ = [
    "canvas",
    "config",
    "fingerprint",
    "jsutil",
    "navigator",
    "navigator_plugins",
    "navigator_scripts",
    "profiles",
    "webgl",
    "webgl_profiles",
]