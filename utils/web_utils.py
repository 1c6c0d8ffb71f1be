from typing import Optional
from playwright.sync_api import Locator

HIGHLIGHT_STYLE = "outline: 2px solid red !important; outline-offset: 1px;"


def highlight_element(locator: Locator, highlight_style: str = HIGHLIGHT_STYLE) -> Optional[str]:
    """
    Outlines the element about to be acted on.
    Returns the element's previous 'style' attribute (None when it had none)
    so reset_element_style() can put it back.
    """
    return locator.evaluate(
        """(el, highlight) => {
            const previous = el.getAttribute('style');
            el.setAttribute('style', (previous ? previous + '; ' : '') + highlight);
            return previous;
        }""",
        highlight_style,
    )


def reset_element_style(locator: Locator, original_style: Optional[str]):
    if original_style is None:
        locator.evaluate("el => el.removeAttribute('style')")
    else:
        locator.evaluate("(el, style) => el.setAttribute('style', style)", original_style)
