"""Optional JavaScript fragments used by the navigator override script."""

_PERMISSIONS_SPOOF = """
    // Permissions API: answer queries through a wrapping promise
    if (typeof Permissions !== 'undefined' && Permissions.prototype.query) {
        const nativeQuery = Permissions.prototype.query;
        Permissions.prototype.query = function(permissionDesc) {
            const self = this;
            return new Promise(function(resolve, reject) {
                nativeQuery.call(self, permissionDesc).then(resolve, reject);
            });
        };
    }
    """

# Globals left behind by automation tools, grouped by the tool that sets them.
_AUTOMATION_GLOBALS = (
    (
        "Chrome DevTools Protocol (CDP)",
        (
            "cdc_adoQpoasnfa76pfcZLmcfl_Array",
            "cdc_adoQpoasnfa76pfcZLmcfl_Promise",
            "cdc_adoQpoasnfa76pfcZLmcfl_Symbol",
        ),
    ),
    (
        "Selenium",
        (
            "_selenium",
            "callSelenium",
            "_Selenium_IDE_Recorder",
            "__webdriver_script_fn",
            "__driver_evaluate",
            "__webdriver_evaluate",
            "__selenium_evaluate",
            "__fxdriver_evaluate",
            "__driver_unwrapped",
            "__webdriver_unwrapped",
            "__selenium_unwrapped",
            "__fxdriver_unwrapped",
            "__webdriver_script_func",
            "$chrome_asyncScriptInfo",
            "$cdc_asdjflasutopfhvcZLmcfl_",
        ),
    ),
    ("PhantomJS", ("callPhantom", "_phantom")),
    ("Nightmare", ("__nightmare",)),
    ("generic automation", ("domAutomation", "domAutomationController")),
)

_AUTOMATION_TAIL = r"""
    // Drop console.debug messages that mention automation
    const nativeDebug = console.debug;
    console.debug = function(...args) {
        const text = args.join(' ');
        if (text.includes('webdriver') || text.includes('automation')) return;
        return nativeDebug.apply(console, args);
    };

    // Strip automation frames from error stacks
    const NativeError = Error;
    window.Error = function(...args) {
        const err = new NativeError(...args);
        if (err.stack) {
            err.stack = err.stack.split('\n')
                .filter(l => !l.includes('webdriver') && !l.includes('puppeteer'))
                .join('\n');
        }
        return err;
    };
    window.Error.prototype = NativeError.prototype;

    // Hide automation resources from performance entries
    if (typeof Performance !== 'undefined' && Performance.prototype.getEntries) {
        const nativeGetEntries = Performance.prototype.getEntries;
        const hiddenWords = ['webdriver', 'puppeteer', 'playwright'];
        Performance.prototype.getEntries = function() {
            return nativeGetEntries.call(this).filter(function(entry) {
                const name = entry.name || '';
                return !hiddenWords.some(function(word) { return name.includes(word); });
            });
        };
    }
    """


def _delete_block(label: str, names: tuple[str, ...]) -> str:
    deletes = "".join(f"        delete window.{name};\n" for name in names)
    return f"\n    // {label} globals\n    try {{\n{deletes}    }} catch (e) {{}}\n"


_AUTOMATION_REMOVAL = (
    "\n    // Remove common automation signals\n"
    + "".join(_delete_block(label, names) for label, names in _AUTOMATION_GLOBALS)
    + _AUTOMATION_TAIL
)


def permissions_spoof_script() -> str:
    """JavaScript wrapping ``Permissions.prototype.query``."""
    return _PERMISSIONS_SPOOF


def automation_removal_script() -> str:
    """JavaScript deleting globals and traces left by automation tools."""
    return _AUTOMATION_REMOVAL