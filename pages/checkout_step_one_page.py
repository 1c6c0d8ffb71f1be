import logging
from playwright.sync_api import Page
from decorators.class_decorators import checkout_page
from enums.screen import Screen
from utils.data_generator import CustomerData, generate_customer_data
from wrappers.smart_locator import SmartLocator

logger = logging.getLogger(__name__)


@checkout_page(Screen.CHECKOUT_STEP_ONE)
class CheckoutStepOnePage:

    def __init__(self, page: Page, config: dict):
        # Locators
        self.title = SmartLocator(self, ".title")
        self.first_name_input = SmartLocator(self, "[data-test='firstName']")
        self.last_name_input = SmartLocator(self, "[data-test='lastName']")
        self.zip_code_input = SmartLocator(self, "[data-test='postalCode']")
        self.continue_button = SmartLocator(self, "[data-test='continue']")
        self.cancel_button = SmartLocator(self, "[data-test='cancel']")
        self.error_message = SmartLocator(self, "[data-test='error']")

    def verify_page_loaded(self):
        self.assert_visible(self.title)
        self.assert_text(self.title, self.screen.title)
        self.assert_url(self.url)
        self._verify_form_fields_visible()

    def _verify_form_fields_visible(self):
        for field in (self.first_name_input, self.last_name_input, self.zip_code_input,
                      self.continue_button, self.cancel_button):
            self.assert_visible(field)

    def fill_first_name(self, first_name: str):
        self.fill(self.first_name_input, first_name)

    def fill_last_name(self, last_name: str):
        self.fill(self.last_name_input, last_name)

    def fill_zip_code(self, zip_code: str):
        self.fill(self.zip_code_input, zip_code)

    def fill_customer_information(self, first_name: str, last_name: str, zip_code: str):
        self.fill_first_name(first_name)
        self.fill_last_name(last_name)
        self.fill_zip_code(zip_code)

    def fill_random_customer_information(self) -> CustomerData:
        customer = generate_customer_data()
        logger.info("Generated customer data: %s", customer)
        self.fill_customer_information(customer.first_name, customer.last_name, customer.zip_code)
        return customer

    def click_continue(self):
        self.assert_visible(self.continue_button)
        self.click(self.continue_button)

    def click_cancel(self):
        self.click(self.cancel_button)

    def complete_step_one_with_random_data(self) -> CustomerData:
        customer = self.fill_random_customer_information()
        self.click_continue()
        return customer

    def verify_error_message(self, expected_message: str):
        self.assert_visible(self.error_message)
        self.assert_text(self.error_message, expected_message)

    def get_first_name_value(self) -> str:
        return self.read_value(self.first_name_input)

    def get_last_name_value(self) -> str:
        return self.read_value(self.last_name_input)

    def get_zip_code_value(self) -> str:
        return self.read_value(self.zip_code_input)

    def clear_all_fields(self):
        self.clear(self.first_name_input)
        self.clear(self.last_name_input)
        self.clear(self.zip_code_input)

    def verify_all_fields_filled(self):
        """Local check that no form value is empty; the site validates separately."""
        values = {
            "first name": self.get_first_name_value(),
            "last name": self.get_last_name_value(),
            "zip code": self.get_zip_code_value(),
        }
        missing = [name for name, value in values.items() if not value]
        self.check_state(not missing,
                         f"Not all required fields are filled, missing: {', '.join(missing)}",
                         expected="all fields filled", actual=missing)
