"""
Page object for the login screen.
It wraps a caller-owned Selenium driver and exposes one method per browser interaction.
No waits are applied: an element that is not rendered yet raises `NoSuchElementException`,
so synchronization stays with the calling test.
"""

from __future__ import annotations

import logging

from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver

LOGGER = logging.getLogger("ui")

LOGIN_URL = "https://example.com/login"


class LoginPage:
    USERNAME = (By.ID, "username")
    PASSWORD = (By.ID, "password")
    LOGIN_BUTTON = (By.ID, "login-button")
    ERROR_MESSAGE = (By.CSS_SELECTOR, "[data-test='error']")

    def __init__(self, driver: WebDriver, *, url: str = LOGIN_URL) -> None:
        self.driver = driver
        self.url = url

    def open(self) -> LoginPage:
        LOGGER.debug("opening login page url=%s", self.url)
        self.driver.get(self.url)
        return self

    def enter_username(self, value: str) -> LoginPage:
        self.driver.find_element(*self.USERNAME).send_keys(value)
        return self

    def enter_password(self, value: str) -> LoginPage:
        self.driver.find_element(*self.PASSWORD).send_keys(value)
        return self

    def click_login(self) -> None:
        LOGGER.debug("submitting login form")
        self.driver.find_element(*self.LOGIN_BUTTON).click()

    def get_error_message(self) -> str:
        return self.driver.find_element(*self.ERROR_MESSAGE).text
