import logging
import time
from re import Pattern
from typing import Optional, Union
from urllib.parse import urljoin
from playwright.sync_api import Page, TimeoutError as PlaywrightTimeoutError, expect as pw_expect
from common.constants import BASE_URL, DEFAULT_ELEMENT_TIMEOUT, DEFAULT_LOAD_STATE
from common.exceptions import PageStateError, WaitTimeout
from utils.web_utils import highlight_element, reset_element_style
from wrappers.smart_expect import expect
from wrappers.smart_locator import SmartLocator

logger = logging.getLogger(__name__)

MIN_REMAINING_TIMEOUT = 1.0


class SmartPage:
    """
    SmartPage is the interaction capability every page object is composed with:
    - Holds the browsing session (Playwright Page) and the test config.
    - Waits: visible, clickable (visible and enabled), page settled.
    - Actions: click, fill, clear and select, each preceded by its wait.
    - Reads: text, optional text, input value, all texts, count.
    - Terminal assertions on elements and on the current URL.
    Timeouts are in milliseconds and default to config['element_timeout'].
    """

    def __init__(self, page: Page, config: dict):
        self.page = page
        self.config = config
        self.base_url = config.get("base_url") or BASE_URL
        self.element_timeout = float(config.get("element_timeout") or DEFAULT_ELEMENT_TIMEOUT)

    def url_for(self, path: str) -> str:
        return urljoin(self.base_url, path)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def navigate(self, url: str):
        logger.info("Navigate to %s", url)
        self.page.goto(url)

    def wait_page_settled(self, state: Optional[str] = None):
        """Best-effort gate: waits for the load state, not for any element."""
        self.page.wait_for_load_state(state or self.config.get("load_state") or DEFAULT_LOAD_STATE)

    # ------------------------------------------------------------------
    # Waits
    # ------------------------------------------------------------------
    def wait_visible(self, locator: SmartLocator, timeout: Optional[float] = None):
        timeout = self._timeout(timeout)
        try:
            locator.locator.wait_for(state="visible", timeout=timeout)
        except PlaywrightTimeoutError as e:
            raise WaitTimeout(str(locator), timeout, "visible") from e

    def wait_clickable(self, locator: SmartLocator, timeout: Optional[float] = None):
        """Visible and enabled, both within one `timeout` budget."""
        timeout = self._timeout(timeout)
        deadline = time.monotonic() + timeout / 1000.0
        self.wait_visible(locator, timeout)
        # Playwright treats 0 as "no timeout"
        remaining = max((deadline - time.monotonic()) * 1000.0, MIN_REMAINING_TIMEOUT)
        try:
            pw_expect(locator.locator).to_be_enabled(timeout=remaining)
        except AssertionError as e:
            raise WaitTimeout(str(locator), timeout, "enabled") from e

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    def click(self, locator: SmartLocator, timeout: Optional[float] = None):
        self.wait_clickable(locator, timeout)
        logger.debug("Click %s", locator)
        target = locator.locator
        element_style = self._highlight_element_with_delay(target)
        target.click()
        self._restore_element_style(target, element_style)

    def fill(self, locator: SmartLocator, text: str):
        self.wait_visible(locator)
        logger.debug("Fill %s", locator)
        target = locator.locator
        element_style = self._highlight_element_with_delay(target)
        target.clear()
        target.fill(text)
        self._restore_element_style(target, element_style)

    def clear(self, locator: SmartLocator):
        self.wait_visible(locator)
        locator.locator.clear()

    def select_option(self, locator: SmartLocator, value: str):
        self.wait_visible(locator)
        logger.debug("Select '%s' in %s", value, locator)
        locator.locator.select_option(value)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def read_text(self, locator: SmartLocator) -> str:
        self.wait_visible(locator)
        return (locator.locator.text_content() or "").strip()

    def read_optional_text(self, locator: SmartLocator) -> Optional[str]:
        """Text of an element that may legitimately be absent, None if it is."""
        if not self.is_present(locator):
            return None
        return self.read_text(locator)

    def read_value(self, locator: SmartLocator) -> str:
        self.wait_visible(locator)
        return locator.locator.input_value()

    def read_all_texts(self, locator: SmartLocator) -> list[str]:
        texts = [text.strip() for text in locator.locator.all_text_contents()]
        return [text for text in texts if text]

    def count(self, locator: SmartLocator) -> int:
        return locator.locator.count()

    def is_present(self, locator: SmartLocator) -> bool:
        return self.count(locator) > 0

    # ------------------------------------------------------------------
    # Assertions
    # ------------------------------------------------------------------
    def assert_visible(self, locator: SmartLocator, timeout: Optional[float] = None):
        expect(locator).to_be_visible(timeout=self._timeout(timeout))

    def assert_hidden(self, locator: SmartLocator, timeout: Optional[float] = None):
        expect(locator).to_be_hidden(timeout=self._timeout(timeout))

    def assert_text(self, locator: SmartLocator, expected: Union[str, Pattern],
                    timeout: Optional[float] = None):
        expect(locator).to_have_text(expected, timeout=self._timeout(timeout))

    def assert_contains_text(self, locator: SmartLocator, expected: Union[str, Pattern],
                             timeout: Optional[float] = None):
        expect(locator).to_contain_text(expected, timeout=self._timeout(timeout))

    def assert_url(self, expected: Union[str, Pattern], timeout: Optional[float] = None):
        expect(self.page).to_have_url(expected, timeout=self._timeout(timeout))

    def check_state(self, condition: bool, message: str, expected=None, actual=None):
        if not condition:
            raise PageStateError(message, expected=expected, actual=actual)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _timeout(self, timeout: Optional[float]) -> float:
        return self.element_timeout if timeout is None else timeout

    def _highlight_element_with_delay(self, target):
        step_delay_milliseconds = self.config.get("step_delay")

        try:
            step_delay_seconds = float(step_delay_milliseconds) / 1000.0
        except (TypeError, ValueError):
            step_delay_seconds = 0.0

        element_style = None
        if self.config.get("highlight"):
            element_style = highlight_element(target)

        if step_delay_seconds > 0.0:
            time.sleep(step_delay_seconds)
        return element_style

    def _restore_element_style(self, target, element_style):
        # The element may be gone after the action (e.g. navigation)
        if self.config.get("highlight") and target.count() > 0:
            reset_element_style(target, element_style)

    def __str__(self):
        return f"<SmartPage url='{self.page.url}'>"

    __repr__ = __str__
