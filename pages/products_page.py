import logging
from typing import Optional
from playwright.sync_api import Page
from common.constants import KEYWORD_PLACEHOLDER, SAUCE_LABS_BACKPACK
from decorators.class_decorators import page_object
from enums.screen import Screen
from utils.text_utils import to_data_test_key
from wrappers.smart_locator import SmartLocator

logger = logging.getLogger(__name__)

ADD_TO_CART_TEXT = "Add to cart"
REMOVE_TEXT = "Remove"


@page_object(Screen.PRODUCTS)
class ProductsPage:

    def __init__(self, page: Page, config: dict):
        # Locators
        self.title = SmartLocator(self, ".title")
        self.shopping_cart_link = SmartLocator(self, ".shopping_cart_link")
        self.shopping_cart_badge = SmartLocator(self, ".shopping_cart_badge")
        self.inventory_container = SmartLocator(self, ".inventory_container")
        self.menu_button = SmartLocator(self, "#react-burger-menu-btn")
        self.sort_dropdown = SmartLocator(self, ".product_sort_container")
        self.product_names = SmartLocator(self, ".inventory_item_name")
        self.product_item = SmartLocator(self, ".inventory_item", text=KEYWORD_PLACEHOLDER, text_selector=".inventory_item_name")
        self.add_to_cart_button = SmartLocator(self, f"[data-test='add-to-cart-{KEYWORD_PLACEHOLDER}']")
        self.remove_button = SmartLocator(self, f"[data-test='remove-{KEYWORD_PLACEHOLDER}']")

    def verify_page_loaded(self):
        self.assert_visible(self.title)
        self.assert_text(self.title, self.screen.title)
        self.assert_visible(self.inventory_container)
        self.assert_url(self.url)

    # ------------------------------------------------------------------
    # Product lookup: data-test key first, exact name scan as fallback
    # ------------------------------------------------------------------
    def _product(self, product_name: str) -> SmartLocator:
        return self.product_item.for_keyword(product_name)

    def _product_button(self, keyed: SmartLocator, product_name: str, text: str) -> SmartLocator:
        keyed = keyed.for_keyword(to_data_test_key(product_name))
        if self.is_present(keyed):
            return keyed
        return self._product(product_name).child("button", text=text)

    def _add_to_cart_button(self, product_name: str) -> SmartLocator:
        return self._product_button(self.add_to_cart_button, product_name, ADD_TO_CART_TEXT)

    def _remove_button(self, product_name: str) -> SmartLocator:
        return self._product_button(self.remove_button, product_name, REMOVE_TEXT)

    # ------------------------------------------------------------------
    # Cart operations
    # ------------------------------------------------------------------
    def add_product_to_cart(self, product_name: str, timeout: Optional[float] = None):
        """
        Adding a product already in the cart fails with WaitTimeout: its
        'Add to cart' button has been replaced by 'Remove'.
        """
        logger.info("Add '%s' to cart", product_name)
        self.click(self._add_to_cart_button(product_name), timeout)

    def add_sauce_labs_backpack_to_cart(self):
        self.add_product_to_cart(SAUCE_LABS_BACKPACK)

    def remove_product_from_cart(self, product_name: str):
        logger.info("Remove '%s' from cart", product_name)
        self.click(self._remove_button(product_name))

    def click_shopping_cart(self):
        self.click(self.shopping_cart_link)

    def get_cart_item_count(self) -> int:
        """Number shown on the cart badge, 0 when the cart is empty and no badge is rendered."""
        badge_text = self.read_optional_text(self.shopping_cart_badge)
        if badge_text is None:
            return 0
        return int(badge_text)

    def verify_cart_item_count(self, expected_count: int):
        if expected_count > 0:
            self.assert_visible(self.shopping_cart_badge)
            self.assert_text(self.shopping_cart_badge, str(expected_count))
        else:
            self.assert_hidden(self.shopping_cart_badge)

    # ------------------------------------------------------------------
    # Product details
    # ------------------------------------------------------------------
    def verify_product_visible(self, product_name: str):
        self.assert_visible(self._product(product_name))

    def verify_add_to_cart_button_visible(self, product_name: str):
        self.assert_visible(self._add_to_cart_button(product_name))

    def verify_remove_button_visible(self, product_name: str):
        self.assert_visible(self._remove_button(product_name))

    def get_product_price(self, product_name: str) -> str:
        return self.read_text(self._product(product_name).child(".inventory_item_price"))

    def get_product_description(self, product_name: str) -> str:
        return self.read_text(self._product(product_name).child(".inventory_item_desc"))

    def sort_products(self, sort_option: str):
        """Sort option value: 'az', 'za', 'lohi' or 'hilo'."""
        self.select_option(self.sort_dropdown, sort_option)

    def get_all_product_names(self) -> list[str]:
        return self.read_all_texts(self.product_names)

    def open_menu(self):
        self.click(self.menu_button)
