import re
from playwright.sync_api import Page
from common.constants import ORDER_COMPLETE_HEADER, ORDER_COMPLETE_MESSAGE, ORDER_DISPATCHED_MESSAGE
from decorators.class_decorators import checkout_page
from enums.screen import Screen
from wrappers.smart_locator import SmartLocator

# .complete-text carries the thank-you line on older site versions, the dispatch note on current ones
COMPLETE_TEXT_PATTERN = re.compile(
    f"{re.escape(ORDER_COMPLETE_MESSAGE)}|{re.escape(ORDER_DISPATCHED_MESSAGE)}", re.IGNORECASE)


@checkout_page(Screen.CHECKOUT_COMPLETE)
class CheckoutCompletePage:

    def __init__(self, page: Page, config: dict):
        # Locators
        self.title = SmartLocator(self, ".title")
        self.complete_container = SmartLocator(self, "#checkout_complete_container")
        self.complete_header = SmartLocator(self, ".complete-header")
        self.complete_text = SmartLocator(self, ".complete-text")
        self.pony_express_image = SmartLocator(self, ".pony_express")
        self.back_home_button = SmartLocator(self, "[data-test='back-to-products']")

    def verify_page_loaded(self):
        self.assert_visible(self.title)
        self.assert_text(self.title, self.screen.title)
        self.assert_url(self.url)
        self._verify_success_elements_visible()

    def _verify_success_elements_visible(self):
        for element in (self.complete_header, self.complete_text,
                        self.pony_express_image, self.back_home_button):
            self.assert_visible(element)

    def verify_order_complete_message(self):
        # Header casing differs between site versions
        self.assert_visible(self.complete_header)
        self.assert_text(self.complete_header,
                         re.compile(re.escape(ORDER_COMPLETE_HEADER), re.IGNORECASE))

    def verify_thank_you_message(self):
        self.assert_visible(self.complete_text)
        self.assert_contains_text(self.complete_text, COMPLETE_TEXT_PATTERN)

    def get_complete_header_text(self) -> str:
        return self.read_text(self.complete_header)

    def get_complete_text(self) -> str:
        return self.read_text(self.complete_text)

    def click_back_home(self):
        self.assert_visible(self.back_home_button)
        self.click(self.back_home_button)

    def verify_pony_express_image_visible(self):
        self.assert_visible(self.pony_express_image)

    def verify_complete_order_success(self):
        self.verify_page_loaded()
        self.verify_order_complete_message()
        self.verify_thank_you_message()
        self.verify_pony_express_image_visible()

    def verify_success_message(self, expected_message: str):
        actual_message = self.read_text(self.complete_container)
        self.check_state(expected_message in actual_message,
                         f"Expected message to contain \"{expected_message}\" but got \"{actual_message}\"",
                         expected=expected_message, actual=actual_message)

    def complete_order_and_return_home(self):
        self.verify_complete_order_success()
        self.click_back_home()
