import dataclasses

import pytest

from stealthprint.config import StealthConfig, StealthConfigError
from stealthprint.navigator import WebdriverExposedError
from stealthprint.profiles import FingerprintProfile


def _default():
    return StealthConfig.from_profile(FingerprintProfile.WINDOWS_CHROME)


def test_stealth_config_validation():
    config = _default()
    assert config.validate() is None
    assert config.navigator.webdriver is False


def test_random_config_is_valid():
    for _ in range(10):
        config = StealthConfig.random()
        assert config.validate() is None
        assert config.navigator.webdriver is False


def test_consistent_config_is_deterministic():
    config1 = StealthConfig.consistent("test-seed-123")
    config2 = StealthConfig.consistent("test-seed-123")
    assert config1.fingerprint.user_agent == config2.fingerprint.user_agent
    assert config1.fingerprint.platform == config2.fingerprint.platform
    assert config1.webgl.renderer == config2.webgl.renderer


def test_validate_rejects_webdriver_true():
    config = _default()
    config.navigator = dataclasses.replace(config.navigator, webdriver=True)
    with pytest.raises(StealthConfigError, match="webdriver"):
        config.validate()


def test_validate_rejects_empty_user_agent():
    config = _default()
    config.fingerprint = dataclasses.replace(config.fingerprint, user_agent="")
    with pytest.raises(StealthConfigError, match="User agent cannot be empty"):
        config.validate()


def test_validate_rejects_empty_platform():
    config = _default()
    config.fingerprint = dataclasses.replace(config.fingerprint, platform="")
    with pytest.raises(StealthConfigError, match="Platform cannot be empty"):
        config.validate()


def test_from_profile_matches_profile():
    config = StealthConfig.from_profile(FingerprintProfile.MAC_SAFARI)
    assert config.fingerprint.profile is FingerprintProfile.MAC_SAFARI
    assert config.webgl.vendor == "Apple Inc."
    assert config.navigator.user_agent == config.fingerprint.user_agent


def test_linux_profile_uses_rtx_3060():
    config = StealthConfig.from_profile(FingerprintProfile.LINUX_FIREFOX)
    assert "RTX 3060" in config.webgl.renderer


def test_complete_script_structure():
    script = _default().get_complete_override_script()
    assert script.startswith("(function() {\n'use strict';\n\n")
    assert script.endswith("})();\n")
    nav = script.index("// === NAVIGATOR OVERRIDES (CRITICAL) ===")
    webgl = script.index("// === WEBGL OVERRIDES ===")
    fp = script.index("// === FINGERPRINT OVERRIDES ===")
    assert nav < webgl < fp


def test_complete_script_refuses_webdriver_true():
    config = _default()
    config.navigator = dataclasses.replace(config.navigator, webdriver=True)
    with pytest.raises(WebdriverExposedError, match="CRITICAL SECURITY ERROR") as excinfo:
        config.get_complete_override_script()
    assert "webdriver" in str(excinfo.value)