import logging
from playwright.sync_api import Page
from common.constants import KEYWORD_PLACEHOLDER, SAUCE_LABS_BACKPACK
from decorators.class_decorators import page_object
from enums.screen import Screen
from pages.cart_item_list import CartItemList
from utils.text_utils import to_data_test_key
from wrappers.smart_locator import SmartLocator

logger = logging.getLogger(__name__)


@page_object(Screen.CART)
class CartPage:

    def __init__(self, page: Page, config: dict):
        # Locators
        self.title = SmartLocator(self, ".title")
        self.cart_list = SmartLocator(self, ".cart_list")
        self.checkout_button = SmartLocator(self, "[data-test='checkout']")
        self.continue_shopping_button = SmartLocator(self, "[data-test='continue-shopping']")
        self.remove_button = SmartLocator(self, f"[data-test='remove-{KEYWORD_PLACEHOLDER}']")
        self.cart_items = CartItemList(self, "cart")

    def verify_page_loaded(self):
        self.assert_visible(self.title)
        self.assert_text(self.title, self.screen.title)
        self.assert_url(self.url)

    def verify_product_in_cart(self, product_name: str):
        self.cart_items.verify_contains(product_name)

    def verify_sauce_labs_backpack_in_cart(self):
        self.verify_product_in_cart(SAUCE_LABS_BACKPACK)

    def remove_product_from_cart(self, product_name: str):
        logger.info("Remove '%s' from cart", product_name)
        remove_button = self.remove_button.for_keyword(to_data_test_key(product_name))
        if not self.is_present(remove_button):
            remove_button = self.cart_items.item_for(product_name).child("button", text="Remove")
        self.click(remove_button)

    def click_checkout(self):
        self.assert_visible(self.checkout_button)
        self.click(self.checkout_button)

    def click_continue_shopping(self):
        self.click(self.continue_shopping_button)

    def get_cart_item_count(self) -> int:
        return self.cart_items.count()

    def verify_cart_item_count(self, expected_count: int):
        self.cart_items.verify_count(expected_count)

    def get_product_price_in_cart(self, product_name: str) -> str:
        return self.cart_items.price(product_name)

    def get_product_quantity_in_cart(self, product_name: str) -> str:
        return self.cart_items.quantity(product_name)

    def verify_cart_is_empty(self):
        item_count = self.get_cart_item_count()
        self.check_state(item_count == 0,
                         f"Expected cart to be empty, but found {item_count} items",
                         expected=0, actual=item_count)

    def get_all_product_names_in_cart(self) -> list[str]:
        return self.cart_items.names()

    def verify_checkout_button_visible(self):
        self.assert_visible(self.checkout_button)

    def verify_continue_shopping_button_visible(self):
        self.assert_visible(self.continue_shopping_button)
