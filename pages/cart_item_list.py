from common.constants import KEYWORD_PLACEHOLDER
from wrappers.smart_locator import SmartLocator


class CartItemList:
    """
    Line items listed on the cart and on the checkout overview.
    Rows are looked up by a linear scan for the row whose name element reads
    exactly the product name; the shop renders no stable per-row key here.
    """

    def __init__(self, owner, where: str):
        self.owner = owner
        self.where = where

        # Locators
        self.items = SmartLocator(owner, ".cart_item")
        self.item = SmartLocator(owner, ".cart_item", text=KEYWORD_PLACEHOLDER, text_selector=".inventory_item_name")
        self.item_names = SmartLocator(owner, ".cart_item .inventory_item_name")

    def item_for(self, product_name: str) -> SmartLocator:
        return self.item.for_keyword(product_name)

    def count(self) -> int:
        return self.owner.count(self.items)

    def names(self) -> list[str]:
        return self.owner.read_all_texts(self.item_names)

    def price(self, product_name: str) -> str:
        return self.owner.read_text(self.item_for(product_name).child(".inventory_item_price"))

    def quantity(self, product_name: str) -> str:
        return self.owner.read_text(self.item_for(product_name).child(".cart_quantity"))

    def verify_contains(self, product_name: str):
        self.owner.assert_visible(self.item_for(product_name))

    def verify_count(self, expected_count: int):
        actual_count = self.count()
        self.owner.check_state(
            actual_count == expected_count,
            f"Expected {expected_count} items in {self.where}, but found {actual_count}",
            expected=expected_count, actual=actual_count)
