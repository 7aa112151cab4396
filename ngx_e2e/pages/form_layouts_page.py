"""Form Layouts page: the "Using the Grid" and "Inline form" cards."""

from __future__ import annotations

from playwright.sync_api import Page

from .base_page import BasePage


class FormLayoutsPage(BasePage):

    path = "/pages/forms/layouts"

    def __init__(self, page: Page, base_url: str | None = None) -> None:
        super().__init__(page, base_url)

        grid = page.locator("nb-card", has_text="Using the Grid")
        self._grid_email = grid.get_by_label("Email")
        self._grid_password = grid.get_by_role("textbox", name="Password")
        self._grid_options = {
            "Option 1": grid.get_by_role("radio", name="Option 1"),
            "Option 2": grid.get_by_role("radio", name="Option 2"),
        }
        self._grid_submit = grid.get_by_role("button")

        inline = page.locator("nb-card", has_text="Inline form")
        self._inline_name = inline.get_by_role("textbox", name="Jane Doe")
        self._inline_email = inline.get_by_role("textbox", name="Email")
        self._inline_remember = inline.get_by_role("checkbox")
        self._inline_submit = inline.get_by_role("button")

    def submit_using_the_grid_form(self, email: str, password: str, option_text: str) -> None:
        """Fill the grid form, pick a radio option by its label, and submit.

        Unknown option labels leave the radio group untouched.
        """
        self._grid_email.fill(email)
        self._grid_password.fill(password)
        option = self._grid_options.get(option_text)
        if option is not None:
            option.check(force=True)
        self._grid_submit.click()

    def grid_option_checked(self, option_text: str) -> bool:
        return self._grid_options[option_text].is_checked()

    def submit_inline_form(self, name: str, email: str, remember_me: bool) -> None:
        self._inline_name.fill(name)
        self._inline_email.fill(email)
        if remember_me:
            self._inline_remember.check(force=True)
        self._inline_submit.click()

    def inline_values(self) -> tuple[str, str]:
        return self._inline_name.input_value(), self._inline_email.input_value()
