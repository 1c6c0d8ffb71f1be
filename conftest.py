import json
import re
import time
from datetime import datetime
from pathlib import Path
import pytest
from playwright.sync_api import Page, sync_playwright
from common.constants import DEFAULT_PAGE_TIMEOUT


REPORT_DIR = Path.cwd() / "reports"
REPORT_FILE = REPORT_DIR / "report.html"
CONFIG_FILE = Path(__file__).parent / "config.json"


# ---------------------------------------------------------------------------
# Load configuration
# ---------------------------------------------------------------------------
with open(CONFIG_FILE, encoding="utf-8") as f:
    CONFIG = json.load(f)


def _to_bool(value: str) -> bool:
    return str(value).strip().lower() == "true"


# ---------------------------------------------------------------------------
# CLI options
# ---------------------------------------------------------------------------
def pytest_addoption(parser):
    parser.addoption(
        "--base_url",
        action="store",
        help="Override base_url from config.json",
    )

    parser.addoption(
        "--browser_name",
        action="store",
        choices=["chromium", "firefox", "webkit"],
        help="Browser to run the tests in",
    )

    parser.addoption(
        "--headless",
        action="store",
        choices=["true", "false"],
        help="Run the browser without a window",
    )

    parser.addoption(
        "--highlight",
        action="store",
        choices=["true", "false"],
        help="Highlight elements during tests",
    )

    parser.addoption(
        "--screenshot_on_error",
        action="store",
        choices=["true", "false"],
        help="Capture screenshot on test failure",
    )

    parser.addoption(
        "--step_delay",
        action="store",
        type=int,
        help="Delay (in ms) between steps",
    )

    parser.addoption(
        "--element_timeout",
        action="store",
        type=int,
        help="Element wait timeout (in ms)",
    )

    parser.addoption(
        "--username",
        action="store",
        help="Custom username override",
    )

    parser.addoption(
        "--password",
        action="store",
        help="Custom password override",
    )


def build_config(pytestconfig) -> dict:
    cfg = CONFIG.copy()

    for name in ("base_url", "username", "password"):
        value = pytestconfig.getoption(name)
        if value:
            cfg[name] = value

    browser_name = pytestconfig.getoption("browser_name")
    if browser_name:
        cfg["browser"] = browser_name

    # Boolean switches
    for name, default in (("headless", True), ("highlight", False), ("screenshot_on_error", True)):
        value = pytestconfig.getoption(name)
        if value is not None:
            cfg[name] = _to_bool(value)
        else:
            cfg[name] = bool(cfg.get(name, default))

    # Step delay
    step_delay = pytestconfig.getoption("step_delay")
    if step_delay is not None:
        cfg["step_delay"] = float(step_delay)
    else:
        cfg["step_delay"] = float(cfg.get("step_delay", 0.0))

    element_timeout = pytestconfig.getoption("element_timeout")
    if element_timeout is not None:
        cfg["element_timeout"] = element_timeout

    return cfg


# ---------------------------------------------------------------------------
# Config fixture
# ---------------------------------------------------------------------------
@pytest.fixture(scope="session")
def config(pytestconfig):
    return build_config(pytestconfig)


# ---------------------------------------------------------------------------
# Playwright fixtures
# ---------------------------------------------------------------------------
@pytest.fixture(scope="session")
def playwright_instance():
    """Provide a shared Playwright instance."""
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="session")
def browser(playwright_instance, config):
    """Launch a browser based on config."""
    browser_name = config.get("browser", "chromium")
    headless = config.get("headless", True)
    browser = getattr(playwright_instance, browser_name).launch(headless=headless)
    yield browser
    browser.close()


@pytest.fixture(scope="function")
def context(browser, config):
    """New browser context per test."""
    context = browser.new_context()
    context.set_default_timeout(config.get("timeout", DEFAULT_PAGE_TIMEOUT))
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context, config):
    """New page per test."""
    page = context.new_page()
    page.set_default_timeout(config.get("timeout", DEFAULT_PAGE_TIMEOUT))
    yield page
    page.close()


def pytest_configure(config):
    """Make sure reports/ exists and direct pytest-html there."""
    REPORT_DIR.mkdir(parents=True, exist_ok=True)
    if config.pluginmanager.hasplugin("html"):
        config.option.htmlpath = str(REPORT_FILE)
        print(f"[INFO] HTML report → {REPORT_FILE}")


def pytest_sessionstart(session):
    """Delete old report & screenshots before the session begins."""
    REPORT_DIR.mkdir(parents=True, exist_ok=True)
    for f in REPORT_DIR.glob("*"):
        try:
            f.unlink()
        except OSError as e:
            print(f"[WARN] Could not remove {f}: {e}")


def safe_filename(name: str) -> str:
    """
    Convert any string (like test names or parameterized values)
    into a filesystem-safe filename.
    Keeps letters, digits, underscore, dash, and dot only.
    """
    name = re.sub(r'[<>:"/\\|?*\s,=#@!%^&;{}()+\[\]\']+', '_', name)
    name = re.sub(r'_+', '_', name)
    name = name.strip('._')
    return name[:150]


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Capture a Playwright screenshot and attach it to the HTML report."""
    outcome = yield
    rep = outcome.get_result()

    # Run only when the test itself failed
    if rep.when != "call" or not rep.failed:
        return

    page = item.funcargs.get("page", None)
    if not isinstance(page, Page):
        return

    cfg = item.funcargs.get("config")
    if isinstance(cfg, dict) and not cfg.get("screenshot_on_error", True):
        return

    try:
        # {test-name}-yyyy-MM-dd-hh-mm-ss-sss.png
        ts = datetime.now().strftime("%Y-%m-%d-%H-%M-%S-%f")[:-3]
        screenshot_path = REPORT_DIR / f"{safe_filename(item.name)}-{ts}.png"

        # Give browser time to render any failure overlay
        time.sleep(0.2)

        page.screenshot(path=str(screenshot_path), full_page=True)
        print(f"[INFO] Screenshot saved → {screenshot_path}")
    except Exception as e:
        print(f"[WARN] Screenshot capture failed: {e}")
        return

    if item.config.pluginmanager.hasplugin("html"):
        from pytest_html import extras

        rel_path = screenshot_path.name
        link_html = f'<a href="{rel_path}" target="_blank">Open Screenshot</a>'
        rep.extras = getattr(rep, "extras", [])
        rep.extras.append(extras.html(link_html))
        rep.extras.append(extras.image(rel_path))
