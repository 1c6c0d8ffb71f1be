import functools
from wrappers.smart_page import SmartPage


def _delegate_to_smart_page(self, item):
    # Only reached for attributes the page object itself does not define
    smart_page = self.__dict__.get("smart_page")
    if smart_page is None or item.startswith("__"):
        raise AttributeError(f"{type(self).__name__!s} has no attribute '{item}'")
    return getattr(smart_page, item)


def page_object(screen):
    """
    Composes a SmartPage into every instance of the decorated page object class.
    The SmartPage is created before the class's own __init__ runs, so locators
    declared there can already resolve the session. Attributes the class does
    not define (navigate(), click(), assert_text(), page, config...) are
    delegated to the composed SmartPage.
    Example: LoginPage(page, config).navigate(url) -> SmartPage.navigate(url)
    """
    def decorate(cls):
        original_init = cls.__init__

        @functools.wraps(original_init)
        def new_init(self, page, config, *args, **kwargs):
            self.smart_page = SmartPage(page, config)
            self.url = self.smart_page.url_for(screen.path)
            original_init(self, page, config, *args, **kwargs)

        cls.__init__ = new_init
        cls.screen = screen
        if "__getattr__" not in cls.__dict__:
            cls.__getattr__ = _delegate_to_smart_page
        if "__repr__" not in cls.__dict__:
            cls.__repr__ = lambda self: f"<{type(self).__name__} screen={screen.name}>"
        return cls

    return decorate


def checkout_page(screen):
    """
    page_object() for the checkout steps, which must each provide their own
    verify_page_loaded() check (title text, URL and critical elements).
    """
    def decorate(cls):
        if not callable(cls.__dict__.get("verify_page_loaded")):
            raise TypeError(f"{cls.__name__} must implement verify_page_loaded()")
        return page_object(screen)(cls)

    return decorate
