"""Smart Table page: reading rows of the ng2-smart-table grid."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from playwright.sync_api import Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from ..utils.config import SHORT_TIMEOUT
from .base_page import BasePage

logger = logging.getLogger("ngx-e2e.pom.smart-table")


@dataclass(frozen=True)
class TableRow:
    id: str
    first_name: str
    last_name: str
    username: str
    email: str
    age: str


class SmartTablePage(BasePage):

    path = "/pages/tables/smart-table"

    # Column 0 holds the edit/delete action buttons.
    _DATA_COLUMNS = ("id", "first_name", "last_name", "username", "email", "age")

    def __init__(self, page: Page, base_url: str | None = None) -> None:
        super().__init__(page, base_url)
        self._rows = page.locator("//table//tbody//tr")
        self._header = page.locator("//table//thead//tr")
        self._search_input = page.locator('//input[@placeholder="Search"]')
        self._add_new_button = page.locator('//button[contains(text(),"Add New")]')

    def row_count(self) -> int:
        return self._rows.count()

    def _wait_for_rows(self) -> bool:
        try:
            self._rows.first.wait_for(state="visible", timeout=SHORT_TIMEOUT)
            return True
        except PlaywrightTimeoutError:
            logger.error("Unable to retrieve table data: no rows became visible")
            return False

    def row_texts(self) -> list[str]:
        """Inner text of each body row; empty when the table never renders."""
        if not self._wait_for_rows():
            return []

        count = self.row_count()
        if count == 0:
            logger.warning("Table currently has no data rows.")
            return []
        return [self._rows.nth(i).inner_text().strip() for i in range(count)]

    def row_objects(self) -> list[TableRow]:
        """Body rows mapped onto :class:`TableRow`; empty when the table never renders."""
        if not self._wait_for_rows():
            return []

        rows: list[TableRow] = []
        for i in range(self.row_count()):
            cells = self._rows.nth(i).locator("td")
            values = [
                cells.nth(column).inner_text().strip()
                for column in range(1, len(self._DATA_COLUMNS) + 1)
            ]
            rows.append(TableRow(*values))
        return rows

    def search(self, text: str) -> None:
        self._search_input.first.fill(text)

    def header_text(self) -> str:
        return self._header.first.inner_text()

    def click_add_new(self) -> None:
        self._add_new_button.first.click()
