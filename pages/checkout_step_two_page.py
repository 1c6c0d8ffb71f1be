import logging
from playwright.sync_api import Page
from common.constants import SAUCE_LABS_BACKPACK, SUBTOTAL_LABEL, TAX_LABEL, TOTAL_LABEL
from decorators.class_decorators import checkout_page
from enums.screen import Screen
from pages.cart_item_list import CartItemList
from utils.text_utils import parse_price, strip_label
from wrappers.smart_locator import FIRST, LAST, SmartLocator

logger = logging.getLogger(__name__)


@checkout_page(Screen.CHECKOUT_STEP_TWO)
class CheckoutStepTwoPage:

    def __init__(self, page: Page, config: dict):
        # Locators
        self.title = SmartLocator(self, ".title")
        self.summary_info = SmartLocator(self, ".summary_info")
        self.summary_subtotal = SmartLocator(self, ".summary_subtotal_label")
        self.summary_tax = SmartLocator(self, ".summary_tax_label")
        self.summary_total = SmartLocator(self, ".summary_total_label")
        self.finish_button = SmartLocator(self, "[data-test='finish']")
        self.cancel_button = SmartLocator(self, "[data-test='cancel']")
        self.payment_information = SmartLocator(self, "[data-test='payment-info-value']")
        self.shipping_information = SmartLocator(self, "[data-test='shipping-info-value']")
        self.summary_values = SmartLocator(self, ".summary_value_label")
        self.order_items = CartItemList(self, "order summary")

    def verify_page_loaded(self):
        self.assert_visible(self.title)
        self.assert_text(self.title, self.screen.title)
        self.assert_url(self.url)
        self._verify_order_summary_visible()

    def _verify_order_summary_visible(self):
        self.assert_visible(self.summary_info)
        self.assert_visible(self.finish_button)
        self.assert_visible(self.cancel_button)

    def verify_product_in_order_summary(self, product_name: str):
        self.order_items.verify_contains(product_name)

    def verify_sauce_labs_backpack_in_order_summary(self):
        self.verify_product_in_order_summary(SAUCE_LABS_BACKPACK)

    # ------------------------------------------------------------------
    # Summary values
    # ------------------------------------------------------------------
    def get_subtotal_amount(self) -> str:
        return strip_label(self.read_text(self.summary_subtotal), SUBTOTAL_LABEL)

    def get_tax_amount(self) -> str:
        return strip_label(self.read_text(self.summary_tax), TAX_LABEL)

    def get_total_amount(self) -> str:
        return strip_label(self.read_text(self.summary_total), TOTAL_LABEL)

    def _payment_information(self) -> SmartLocator:
        if self.is_present(self.payment_information):
            return self.payment_information
        # Older markup: payment is the first unlabeled summary value
        return self.summary_values.at(FIRST)

    def _shipping_information(self) -> SmartLocator:
        if self.is_present(self.shipping_information):
            return self.shipping_information
        # Older markup: shipping is the last unlabeled summary value
        return self.summary_values.at(LAST)

    def get_payment_information(self) -> str:
        return self.read_text(self._payment_information())

    def get_shipping_information(self) -> str:
        return self.read_text(self._shipping_information())

    def verify_order_summary_complete(self):
        self.assert_visible(self.summary_subtotal)
        self.assert_visible(self.summary_tax)
        self.assert_visible(self.summary_total)
        self.assert_visible(self._payment_information())
        self.assert_visible(self._shipping_information())

    def verify_order_totals(self):
        """Item total equals the sum of item prices and total equals item total plus tax."""
        item_prices = [parse_price(self.order_items.price(name)) for name in self.order_items.names()]
        subtotal = parse_price(self.get_subtotal_amount())
        tax = parse_price(self.get_tax_amount())
        total = parse_price(self.get_total_amount())

        self.check_state(sum(item_prices) == subtotal,
                         f"Expected item total {sum(item_prices)}, but found {subtotal}",
                         expected=sum(item_prices), actual=subtotal)
        self.check_state(subtotal + tax == total,
                         f"Expected total {subtotal + tax}, but found {total}",
                         expected=subtotal + tax, actual=total)

    # ------------------------------------------------------------------
    # Order items
    # ------------------------------------------------------------------
    def get_order_item_count(self) -> int:
        return self.order_items.count()

    def verify_order_item_count(self, expected_count: int):
        self.order_items.verify_count(expected_count)

    def get_product_price_in_order_summary(self, product_name: str) -> str:
        return self.order_items.price(product_name)

    def get_product_quantity_in_order_summary(self, product_name: str) -> str:
        return self.order_items.quantity(product_name)

    def get_all_product_names_in_order_summary(self) -> list[str]:
        return self.order_items.names()

    def click_finish(self):
        logger.info("Finish order")
        self.assert_visible(self.finish_button)
        self.click(self.finish_button)

    def click_cancel(self):
        self.click(self.cancel_button)
