import inspect
import linecache
import re
from playwright.sync_api import Locator
from common.constants import KEYWORD_PLACEHOLDER
from utils.text_utils import exact_text_pattern

FIRST = "first"
LAST = "last"
UNKNOWN_FIELD = "unknown_field"

FIELD_ASSIGNMENT = re.compile(r"self\.(\w+)\s*=\s*SmartLocator\(")
OWN_ATTRIBUTES = {"owner", "page", "locator", "selector", "text", "text_selector",
                  "position", "keyword", "parent", "field_name"}


class SmartLocator:
    """
    SmartLocator is a declarative, re-resolvable reference to page elements:
    - Nothing is looked up at construction; every use resolves the selector
      against the live DOM through the owner's Playwright page.
    - Optional text filter: a substring match on the element itself, or an
      exact match on a child element (text_selector) for keyed rows.
    - Optional position ('first', 'last' or an index) among the matches.
    - '#KEYWORD#' in the selector or text is replaced by the bound keyword.
    - Immutable: for_keyword(), child() and at() return new locators.
    - Transparent proxying of Playwright Locator methods (e.g. .count()).
    """

    def __init__(self, owner, selector, text=None, text_selector=None, position=None,
                 keyword=None, parent=None, field_name=None):
        self.owner = owner
        self.selector = str(selector)
        self.text = text
        self.text_selector = text_selector
        self.position = position
        self.keyword = keyword
        self.parent = parent

        # Detect field name for failure messages
        self.field_name = field_name or self._get_field_info()

    @property
    def page(self):
        return self.owner.page

    @property
    def locator(self) -> Locator:
        return self._locator()

    def _get_field_info(self) -> str:
        frame = inspect.currentframe()
        while frame is not None:
            line = linecache.getline(frame.f_code.co_filename, frame.f_lineno).strip()
            match = FIELD_ASSIGNMENT.match(line)
            if match:
                return match.group(1)
            frame = frame.f_back
        return UNKNOWN_FIELD

    def _bound_keyword(self):
        if self.keyword is not None:
            return self.keyword
        if self.parent is not None:
            return self.parent._bound_keyword()
        return None

    def _with_keyword(self, value: str) -> str:
        if KEYWORD_PLACEHOLDER not in value:
            return value

        keyword = self._bound_keyword()
        if keyword is None:
            raise ValueError(f"{self} needs a keyword for {KEYWORD_PLACEHOLDER}")
        return value.replace(KEYWORD_PLACEHOLDER, keyword)

    def _locator(self) -> Locator:
        root = self.parent.locator if self.parent is not None else self.page
        locator = root.locator(self._with_keyword(self.selector))

        if self.text is not None:
            text = self._with_keyword(self.text)
            if self.text_selector:
                name = self.page.locator(self.text_selector, has_text=exact_text_pattern(text))
                locator = locator.filter(has=name)
            else:
                locator = locator.filter(has_text=text)

        if self.position == FIRST:
            locator = locator.first
        elif self.position == LAST:
            locator = locator.last
        elif isinstance(self.position, int):
            locator = locator.nth(self.position)

        return locator

    def _derive(self, **changes):
        fields = dict(
            owner=self.owner,
            selector=self.selector,
            text=self.text,
            text_selector=self.text_selector,
            position=self.position,
            keyword=self.keyword,
            parent=self.parent,
            field_name=self.field_name,
        )
        fields.update(changes)
        return SmartLocator(**fields)

    def for_keyword(self, keyword: str):
        """Same locator with '#KEYWORD#' bound to `keyword`."""
        return self._derive(keyword=str(keyword))

    def at(self, position):
        """Same locator narrowed to the first, last or n-th match."""
        return self._derive(position=position)

    def child(self, selector, text=None, position=None):
        """Locator for `selector` scoped inside this one."""
        return SmartLocator(
            self.owner, selector, text=text, position=position, parent=self,
            field_name=f"{self.field_name} > {selector}")

    def __getattr__(self, item):
        # Own attributes that are missing must not resolve the locator
        if item.startswith("_") or item in OWN_ATTRIBUTES:
            raise AttributeError(item)
        return getattr(self._locator(), item)

    def __str__(self):
        keyword = self._bound_keyword()
        selector = self.selector
        text = self.text

        if keyword is not None:
            selector = selector.replace(KEYWORD_PLACEHOLDER, keyword)
            if text is not None:
                text = text.replace(KEYWORD_PLACEHOLDER, keyword)

        if self.parent is not None:
            parent_selector = self.parent.selector
            if keyword is not None:
                parent_selector = parent_selector.replace(KEYWORD_PLACEHOLDER, keyword)
            selector = f"{parent_selector} >> {selector}"
        description = f"<SmartLocator field='{self.field_name}' selector='{selector}'"
        if text is not None:
            description += f" text='{text}'"
        if self.position is not None:
            description += f" position='{self.position}'"
        return description + ">"

    __repr__ = __str__
