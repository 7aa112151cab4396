"""Login page object for the ngx-admin auth screens."""

from __future__ import annotations

import logging
import re

from playwright.sync_api import Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from ..utils.config import SHORT_TIMEOUT
from .base_page import BasePage

logger = logging.getLogger("ngx-e2e.pom.login")

_AUTH_ROUTES = ("/auth/login", "/auth/register")


class LoginPage(BasePage):
    """Page object for ``/auth/login``.

    Field locators try the accessible label first, then the placeholder,
    then the input type.
    """

    path = "/auth/login"

    def __init__(self, page: Page, base_url: str | None = None) -> None:
        super().__init__(page, base_url)
        self._email = (
            page.get_by_label("Email")
            .or_(page.get_by_placeholder("Email"))
            .or_(page.locator('input[type="email"]'))
        )
        self._password = (
            page.get_by_label("Password")
            .or_(page.get_by_placeholder("Password"))
            .or_(page.locator('input[type="password"]'))
        )
        self._remember_me = page.locator('input[type="checkbox"]').or_(page.locator(".custom-checkbox"))
        self._login_button = page.get_by_role("button", name=re.compile(r"log in|sign in|login", re.IGNORECASE))
        self._register_link = page.get_by_role("link", name=re.compile(r"register|sign up", re.IGNORECASE))
        self._forgot_password_link = page.get_by_role("link", name=re.compile(r"forgot password", re.IGNORECASE))
        self._error_message = page.locator('.alert-danger, .error-message, [class*="error"], [class*="danger"]')
        self._loading_spinner = page.locator('.spinner, .loading, [class*="spinner"]')

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def fill_login_form(self, email: str, password: str) -> None:
        self._email.first.fill(email)
        self._password.first.fill(password)

    def clear_login_form(self) -> None:
        self._email.first.clear()
        self._password.first.clear()

    def check_remember_me(self) -> None:
        checkbox = self._remember_me.first
        if checkbox.is_visible():
            checkbox.check(force=True)

    def uncheck_remember_me(self) -> None:
        checkbox = self._remember_me.first
        if checkbox.is_visible():
            checkbox.uncheck(force=True)

    def submit_login(self) -> None:
        self._login_button.first.click()
        self.wait_for_loading_to_complete()

    def login(self, email: str, password: str, remember_me: bool = False) -> bool:
        """Submit credentials and report whether the app navigated to a dashboard.

        Waits until either the URL reaches a dashboard or an error message
        shows up; neither within five seconds counts as a failed login.
        """
        self.fill_login_form(email, password)
        if remember_me:
            self.check_remember_me()
        self.submit_login()

        self.wait_until(
            lambda: "dashboard" in self.page.url or self._error_message.first.is_visible(),
            timeout=SHORT_TIMEOUT,
        )
        logged_in = "dashboard" in self.page.url
        logger.info("Login %s", "succeeded" if logged_in else "failed")
        return logged_in

    def click_register_link(self) -> None:
        self._register_link.first.click()
        self.page.wait_for_url("**/auth/register")

    def click_forgot_password_link(self) -> None:
        link = self._forgot_password_link.first
        if link.is_visible():
            link.click()
            self.page.wait_for_url("**/auth/request-password")

    def logout(self) -> None:
        pattern = re.compile(r"log out|sign out|logout", re.IGNORECASE)
        logout_control = self.page.get_by_role("button", name=pattern).or_(
            self.page.get_by_role("link", name=pattern)
        ).first
        if logout_control.is_visible():
            logout_control.click()
            self.page.wait_for_url("**/login", timeout=SHORT_TIMEOUT)

    def wait_for_loading_to_complete(self) -> None:
        """Wait out the submit spinner if one appears; fast responses never show it."""
        if self.is_visible_within(self._loading_spinner.first, 1_000):
            self.is_hidden_within(self._loading_spinner.first, 10_000)

    # ------------------------------------------------------------------
    # Readers
    # ------------------------------------------------------------------

    def error_message(self) -> str:
        """Text of the first error message, or an empty string if none appears."""
        try:
            self._error_message.first.wait_for(state="visible", timeout=3_000)
        except PlaywrightTimeoutError:
            return ""
        return self._error_message.first.text_content() or ""

    def is_error_displayed(self) -> bool:
        return self._error_message.first.is_visible()

    def is_login_button_enabled(self) -> bool:
        return self._login_button.first.is_enabled()

    def is_email_field_visible(self) -> bool:
        return self._email.first.is_visible()

    def is_password_field_visible(self) -> bool:
        return self._password.first.is_visible()

    def is_user_logged_in(self) -> bool:
        current = self.page.url
        return not any(route in current for route in _AUTH_ROUTES)

    def field_validation_error(self, field: str) -> str:
        """Validation hint rendered next to the ``email`` or ``password`` input."""
        if field not in ("email", "password"):
            raise ValueError(f"Unknown login field: {field}")
        target = self._email if field == "email" else self._password
        hint = target.first.locator("xpath=..").locator('.error-text, .invalid-feedback, [class*="error"]').first
        if hint.is_visible():
            return hint.text_content() or ""
        return ""

    def is_remember_me_checked(self) -> bool:
        checkbox = self._remember_me.first
        if checkbox.is_visible():
            return checkbox.is_checked()
        return False
