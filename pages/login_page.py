import logging
from playwright.sync_api import Page
from common.constants import VALID_PASSWORD, VALID_USERNAME
from decorators.class_decorators import page_object
from enums.screen import Screen
from wrappers.smart_locator import SmartLocator

logger = logging.getLogger(__name__)


@page_object(Screen.LOGIN)
class LoginPage:

    def __init__(self, page: Page, config: dict):
        # Locators
        self.username_input = SmartLocator(self, "[data-test='username']")
        self.password_input = SmartLocator(self, "[data-test='password']")
        self.login_button = SmartLocator(self, "[data-test='login-button']")
        self.error_message = SmartLocator(self, "[data-test='error']")
        self.login_logo = SmartLocator(self, ".login_logo")
        self.products_url = self.url_for(Screen.PRODUCTS.path)

    def open(self):
        self.navigate(self.url)
        self.wait_page_settled()

    def verify_page_loaded(self):
        self.assert_visible(self.login_logo)
        self.assert_visible(self.username_input)
        self.assert_visible(self.password_input)
        self.assert_visible(self.login_button)

    def enter_username(self, username: str):
        self.fill(self.username_input, username)

    def enter_password(self, password: str):
        self.fill(self.password_input, password)

    def click_login_button(self):
        self.click(self.login_button)

    def login(self, username: str, password: str):
        logger.info("Log in as '%s'", username)
        self.enter_username(username)
        self.enter_password(password)
        self.click_login_button()

    def login_with_valid_credentials(self):
        self.login(self.config.get("username") or VALID_USERNAME,
                   self.config.get("password") or VALID_PASSWORD)

    def verify_error_message(self, expected_message: str):
        # Same banner for every rejection; the site checks username presence,
        # then password presence, then the credential match
        self.assert_visible(self.error_message)
        self.assert_text(self.error_message, expected_message)

    def verify_successful_login(self):
        self.assert_url(self.products_url)

    def clear_login_form(self):
        self.clear(self.username_input)
        self.clear(self.password_input)

    def get_username_value(self) -> str:
        return self.read_value(self.username_input)

    def get_password_value(self) -> str:
        return self.read_value(self.password_input)
