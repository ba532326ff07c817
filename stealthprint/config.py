"""Combined stealth configuration: fingerprint, WebGL and navigator."""

from __future__ import annotations

from dataclasses import dataclass

from .fingerprint import BrowserFingerprint, FingerprintGenerator
from .navigator import NavigatorOverrides
from .profiles import FingerprintProfile
from .webgl import WebGLConfig


class StealthConfigError(ValueError):
    """Raised when a stealth configuration is unsafe to use."""


@dataclass
class StealthConfig:
    """Everything needed to present a browser as an ordinary user's."""

    fingerprint: BrowserFingerprint
    webgl: WebGLConfig
    navigator: NavigatorOverrides

    @classmethod
    def from_profile(cls, profile: FingerprintProfile) -> StealthConfig:
        """A configuration for a given fingerprint profile."""
        fingerprint = FingerprintGenerator().generate_from_profile(profile)
        return cls(
            fingerprint=fingerprint,
            webgl=WebGLConfig.for_profile(profile),
            navigator=NavigatorOverrides.from_fingerprint(fingerprint),
        )

    @classmethod
    def random(cls) -> StealthConfig:
        """A randomised configuration."""
        fingerprint = FingerprintGenerator().generate_random()
        return cls(
            fingerprint=fingerprint,
            webgl=WebGLConfig.random(),
            navigator=NavigatorOverrides.from_fingerprint(fingerprint),
        )

    @classmethod
    def consistent(cls, seed: str) -> StealthConfig:
        """The same configuration every time for the same ``seed``."""
        fingerprint = FingerprintGenerator().generate_consistent(seed)
        return cls(
            fingerprint=fingerprint,
            webgl=WebGLConfig.consistent(seed),
            navigator=NavigatorOverrides.from_fingerprint(fingerprint),
        )

    def get_complete_override_script(self) -> str:
        """The full script to inject before any page script runs."""
        parts = [
            "(function() {\n'use strict';\n\n",
            "// === NAVIGATOR OVERRIDES (CRITICAL) ===\n",
            self.navigator.get_override_script(),
            "\n\n",
            "// === WEBGL OVERRIDES ===\n",
            self.webgl.get_js_override_script(),
            "\n\n",
            "// === FINGERPRINT OVERRIDES ===\n",
            self.fingerprint.to_js_overrides(),
            "\n\n",
            "})();\n",
        ]
        return "".join(parts)

    def validate(self) -> None:
        """Raise :class:`StealthConfigError` if a critical setting is wrong."""
        if self.navigator.webdriver:
            raise StealthConfigError(
                "CRITICAL: navigator.webdriver is set to true! This MUST be false."
            )
        if not self.fingerprint.user_agent:
            raise StealthConfigError("User agent cannot be empty")
        if not self.fingerprint.platform:
            raise StealthConfigError("Platform cannot be empty")