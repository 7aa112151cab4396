"""Datepicker page: the "Common Datepicker" form picker."""

from __future__ import annotations

import logging
from datetime import date, timedelta

from playwright.sync_api import Page

from ..utils.config import SHORT_TIMEOUT
from .base_page import BasePage

logger = logging.getLogger("ngx-e2e.pom.datepicker")


def default_target_date(today: date | None = None) -> date:
    return (today or date.today()) + timedelta(days=1)


def default_target_day(today: date | None = None) -> str:
    """Day-of-month for tomorrow, as it is labelled in the calendar grid."""
    return str(default_target_date(today).day)


class DatePickerPage(BasePage):

    path = "/pages/forms/datepicker"

    def __init__(self, page: Page, base_url: str | None = None) -> None:
        super().__init__(page, base_url)
        self._input = page.get_by_placeholder("Form Picker")
        self._calendar = page.locator("nb-calendar")
        # Leading and trailing days of the neighbouring months carry .bounding-month
        self._day_cells = page.locator("nb-calendar-day-cell:not(.bounding-month)")

    def open_calendar(self) -> None:
        self._input.click()
        self._calendar.first.wait_for(state="visible")

    def next_month(self) -> None:
        button = self.find(
            "nb-calendar-pageable-navigation .next-month",
            fallbacks=("nb-calendar-pageable-navigation button >> nth=1",),
            timeout=SHORT_TIMEOUT,
        )
        button.first.click()

    def select_day(self, day: str | int | None = None, *, today: date | None = None) -> str:
        """Click a day of the displayed month and return the label clicked.

        Without *day* the target is tomorrow. The calendar opens on the
        current month, so when tomorrow is the 1st it is paged forward first.
        """
        if day is None:
            current = today or date.today()
            target_date = default_target_date(current)
            if target_date.month != current.month:
                self.next_month()
            target = str(target_date.day)
        else:
            target = str(day)

        logger.info("Selecting day %s in calendar", target)
        self._day_cells.get_by_text(target, exact=True).first.click()
        self.is_hidden_within(self._calendar.first)
        return target

    def selected_value(self) -> str:
        return self._input.input_value()
