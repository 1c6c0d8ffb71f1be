from playwright.sync_api import expect as pw_expect, Page, Locator, APIResponse
from common.exceptions import AssertionMismatch
from wrappers.smart_locator import SmartLocator


class SmartExpect:
    """
    Wraps Playwright's expect() so that a failed assertion names the
    SmartLocator (field and selector) or page it was made against.
    """

    def __init__(self, actual):
        self._smart_locator = None
        if isinstance(actual, SmartLocator):
            self.page = actual.page
            self._smart_locator = actual
            self.description = str(actual)
            unwrapped = actual.locator
        elif isinstance(actual, Locator):
            self.page = actual.page
            self.description = f"<Locator {actual}>"
            unwrapped = actual
        elif isinstance(actual, Page):
            self.page = actual
            self.description = f"<Page url='{actual.url}'>"
            unwrapped = actual
        elif isinstance(actual, APIResponse):
            self.page = None
            self.description = f"<APIResponse url='{actual.url}'>"
            unwrapped = actual
        else:
            raise ValueError(f"Unsupported type: {type(actual)}")

        self._inner = pw_expect(unwrapped)

    def __getattr__(self, item):
        if item.startswith("_"):
            raise AttributeError(item)
        target = getattr(self._inner, item)

        if callable(target) and item.startswith(("to_", "not_to_")):
            def wrapper(*args, **kwargs):
                try:
                    return target(*args, **kwargs)
                except AssertionError as e:
                    raise AssertionMismatch(self.description, item, str(e)) from e
            return wrapper
        return target

    def __dir__(self):
        return dir(self._inner)

# ---------------- helpers ---------------- #

def expect(actual):
    """Public entry point: works with SmartLocator or native Playwright objects."""
    return SmartExpect(actual)
