"""Failures raised by the page object layer.

Nothing here is retried. Every error propagates to the calling test, which
pytest then records as failed.
"""


class PageObjectError(Exception):
    """Base exception for all page object failures."""


class WaitTimeout(PageObjectError):
    """An element did not reach the awaited state within the timeout."""

    def __init__(self, locator_description: str, timeout: float, state: str = "visible"):
        self.locator_description = locator_description
        self.timeout = timeout
        self.state = state
        super().__init__(
            f"Timed out after {timeout} ms waiting for {locator_description} to be {state}")


class AssertionMismatch(PageObjectError, AssertionError):
    """A terminal assertion observed a different page state than expected."""

    def __init__(self, target_description: str, assertion: str, details: str = ""):
        self.target_description = target_description
        self.assertion = assertion
        message = f"{assertion} failed for {target_description}"
        if details:
            message = f"{message}: {details}"
        super().__init__(message)


class PageStateError(PageObjectError):
    """A condition checked by the page object itself does not hold."""

    def __init__(self, message: str, expected=None, actual=None):
        self.expected = expected
        self.actual = actual
        super().__init__(message)
