"""Registration page object; successful sign-ups are recorded in the user store."""

from __future__ import annotations

import logging
import re

from playwright.sync_api import Page

from ..user_store import STATUS_FAILED, STATUS_REGISTERED, UserRecord, UserStore
from ..utils.config import SHORT_TIMEOUT
from .base_page import BasePage

logger = logging.getLogger("ngx-e2e.pom.register")


class RegisterPage(BasePage):

    path = "/auth/register"

    def __init__(
        self,
        page: Page,
        base_url: str | None = None,
        store: UserStore | None = None,
    ) -> None:
        super().__init__(page, base_url)
        self.store = store if store is not None else UserStore()

        self._full_name = page.get_by_label("Full Name").or_(page.get_by_placeholder("Full Name"))
        self._email = page.get_by_label("Email").or_(page.get_by_placeholder("Email"))
        # Exact match keeps "Password" from also resolving to "Confirm Password".
        self._password = page.get_by_label("Password", exact=True).or_(
            page.get_by_placeholder("Password", exact=True)
        )
        self._confirm_password = page.get_by_label("Confirm Password").or_(
            page.get_by_placeholder("Confirm Password")
        )
        self._register_button = page.get_by_role("button", name=re.compile(r"register|sign up", re.IGNORECASE))
        self._login_link = page.get_by_role("link", name=re.compile(r"login|sign in", re.IGNORECASE))
        self._terms_checkbox = page.locator(".custom-checkbox").or_(page.locator('input[type="checkbox"]'))
        self._success_message = page.locator('.alert-success, .success-message, [class*="success"]')
        self._error_message = page.locator('.alert-error, .error-message, [class*="error"]')

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def fill_registration_form(
        self,
        full_name: str,
        email: str,
        password: str,
        confirm_password: str | None = None,
    ) -> None:
        self._full_name.first.fill(full_name)
        self._email.first.fill(email)
        self._password.first.fill(password)
        if confirm_password and self._confirm_password.first.is_visible():
            self._confirm_password.first.fill(confirm_password)

    def accept_terms_and_conditions(self) -> None:
        """Tick the terms checkbox; a missing checkbox is logged, not raised."""
        try:
            self._terms_checkbox.first.click(timeout=SHORT_TIMEOUT)
        except Exception as exc:
            logger.warning("Error clicking terms checkbox: %s", exc)

    def submit_registration(self) -> None:
        self._register_button.first.click()

    def click_login_link(self) -> None:
        self._login_link.first.click()
        self.page.wait_for_url("**/auth/login")

    def register_user(
        self,
        full_name: str,
        email: str,
        password: str,
        confirm_password: str | None = None,
        accept_terms: bool = False,
    ) -> UserRecord:
        """Run the registration journey and append the outcome to the user store.

        The returned record's status is ``registered`` or ``failed``. Errors
        raised by the browser are logged and recorded as a failed attempt.
        """
        record = UserRecord(full_name=full_name, email=email, password=password, status=STATUS_FAILED)

        try:
            self.fill_registration_form(full_name, email, password, confirm_password)
            if accept_terms:
                self.accept_terms_and_conditions()
            self.submit_registration()
            if self.is_registration_successful():
                record.status = STATUS_REGISTERED
        except Exception:
            logger.exception("Registration failed for %s", email)

        self.store.append(record)
        return record

    # ------------------------------------------------------------------
    # Readers
    # ------------------------------------------------------------------

    def is_registration_successful(self, timeout: float = SHORT_TIMEOUT) -> bool:
        """True once the app leaves the register route or shows a success message.

        An error message, or nothing at all within *timeout* ms, is a failure.
        """

        def settled() -> bool:
            return (
                self._left_register_route()
                or self._success_message.first.is_visible()
                or self._error_message.first.is_visible()
            )

        self.wait_until(settled, timeout=timeout)
        return self._left_register_route() or self._success_message.first.is_visible()

    def _left_register_route(self) -> bool:
        return self.path not in self.page.url

    def is_email_field_visible(self) -> bool:
        return self._email.first.is_visible()

    def is_password_field_visible(self) -> bool:
        return self._password.first.is_visible()

    def is_register_button_visible(self) -> bool:
        return self._register_button.first.is_visible()
