"""Unit tests for the registration page object and its user-store side effect."""

from __future__ import annotations

import pytest
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from ngx_e2e.pages.register_page import RegisterPage
from ngx_e2e.user_store import STATUS_FAILED, STATUS_REGISTERED

SUCCESS = '.alert-success, .success-message, [class*="success"]'
ERROR = '.alert-error, .error-message, [class*="error"]'
TERMS = ".custom-checkbox"


@pytest.fixture()
def register_page(dispatch_page, user_store, clean_env):
    dispatch_page.url = "http://localhost:4200/auth/register"
    return RegisterPage(dispatch_page, "http://localhost:4200", store=user_store)


def _show_messages(page, success: bool, error: bool) -> None:
    page.locator(SUCCESS).first.is_visible.return_value = success
    page.locator(ERROR).first.is_visible.return_value = error


@pytest.mark.unit
class TestRegisterUser:

    def test_success_is_recorded_as_registered(self, register_page, dispatch_page, user_store):
        _show_messages(dispatch_page, success=False, error=False)
        dispatch_page.url = "http://localhost:4200/pages/dashboard"

        record = register_page.register_user("Ava Brown", "ava.brown7@test.com", "Welcome7!", "Welcome7!", True)

        assert record.status == STATUS_REGISTERED
        assert user_store.last_registered_user().email == "ava.brown7@test.com"

    def test_error_message_is_recorded_as_failed(self, register_page, dispatch_page, user_store):
        _show_messages(dispatch_page, success=False, error=True)

        record = register_page.register_user("Ava Brown", "ava.brown7@test.com", "Welcome7!")

        assert record.status == STATUS_FAILED
        assert user_store.last_appended_user().status == STATUS_FAILED
        assert user_store.last_registered_user() is None

    def test_browser_errors_are_recorded_not_raised(self, register_page, dispatch_page, user_store):
        field = dispatch_page.get_by_label.return_value.or_.return_value.first
        field.fill.side_effect = PlaywrightTimeoutError("Timeout 30000ms exceeded")

        record = register_page.register_user("Ava Brown", "ava.brown7@test.com", "Welcome7!")

        assert record.status == STATUS_FAILED
        assert len(user_store.registered_users()) == 1

    def test_terms_checkbox_failure_only_logs(self, register_page, dispatch_page):
        dispatch_page.locator(TERMS).or_.return_value.first.click.side_effect = PlaywrightTimeoutError("hidden")

        register_page.accept_terms_and_conditions()

    def test_confirm_password_skipped_when_not_given(self, register_page, dispatch_page):
        field = dispatch_page.get_by_label.return_value.or_.return_value.first

        register_page.fill_registration_form("Ava Brown", "ava.brown7@test.com", "Welcome7!")

        assert field.fill.call_count == 3


@pytest.mark.unit
class TestRegistrationOutcome:

    def test_success_message_on_same_route(self, register_page, dispatch_page):
        _show_messages(dispatch_page, success=True, error=False)

        assert register_page.is_registration_successful(timeout=0) is True

    def test_nothing_happens_is_failure(self, register_page, dispatch_page):
        _show_messages(dispatch_page, success=False, error=False)

        assert register_page.is_registration_successful(timeout=0) is False
