import pytest

from stealthprint.navigator_scripts import automation_removal_script, permissions_spoof_script


def test_automation_script_removes_known_globals():
    script = automation_removal_script()
    for name in (
        "window.cdc_adoQpoasnfa76pfcZLmcfl_Array",
        "window.__webdriver_script_fn",
        "window.$chrome_asyncScriptInfo",
        "window.callPhantom",
        "window.__nightmare",
        "window.domAutomationController",
    ):
        assert f"delete {name};" in script


def test_automation_script_keeps_js_newline_escape():
    script = automation_removal_script()
    assert ".split('\\n')" in script
    assert ".join('\\n')" in script


def test_automation_script_filters_performance_entries():
    script = automation_removal_script()
    assert "Performance.prototype.getEntries" in script
    assert "playwright" in script


@pytest.mark.parametrize("factory", [permissions_spoof_script, automation_removal_script])
def test_scripts_are_balanced_and_stable(factory):
    script = factory()
    assert script.count("{") == script.count("}")
    assert script.count("(") == script.count(")")
    assert script.startswith("\n    // ")
    assert script.endswith("\n    ")
    assert factory() == script