from typing import List, Optional

from playwright.sync_api import Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from ..core.config import StoreConfig
from ..dom.overlay import dismiss_ad_overlay

ROWS_PER_PAGE_OPTIONS = ("5", "10", "20", "25", "50", "100")


class BookNotFoundError(PlaywrightTimeoutError):
    """A book link did not become visible within its lookup timeout."""


class BooksPage:
    """Page object for the books grid at /books."""

    def __init__(self, page: Page, config: StoreConfig):
        self.page = page
        self.config = config
        self.search_box = self.get_by_role_and_label("textbox", "Type to search")
        self.search_button = self.get_by_css("#basic-addon2")
        self.next_page_button = self.get_by_role_and_label("button", "Next")
        self.previous_page_button = self.get_by_role_and_label("button", "Previous")
        self.jump_to_page_spin_button = self.get_by_role_and_label(
            "spinbutton", "jump to page")
        self.rows_per_page_select = page.get_by_label("rows per page")
        # Title column only; the grid also links authors elsewhere
        self.all_book_links = page.locator(".rt-td:nth-child(2)").get_by_role("link")

    def get_by_role_and_label(self, role: str, label: str, exact: bool = False) -> Locator:
        return self.page.get_by_role(role, name=label, exact=exact)

    def get_by_css(self, selector: str) -> Locator:
        return self.page.locator(selector)

    def open(self) -> None:
        print(f"[BooksPage] Opening {self.config.books_url}")
        self.page.goto(self.config.books_url)

    def get_visible_book_titles(self) -> List[str]:
        """Titles currently rendered in the grid, top to bottom."""
        return self.all_book_links.all_text_contents()

    def search_book(self, title: str) -> None:
        self.search_box.fill(title)
        self.search_button.click()

    def get_book_link(self, title: str, timeout_ms: Optional[int] = None) -> Locator:
        """
        Return the link for a book title once it is visible.

        Raises BookNotFoundError if it does not show up within the timeout
        (config.book_link_timeout_ms unless overridden).
        """
        timeout = self.config.book_link_timeout_ms if timeout_ms is None else timeout_ms
        locator = self.get_by_role_and_label("link", title, exact=True)
        try:
            locator.wait_for(state="visible", timeout=timeout)
        except PlaywrightTimeoutError as e:
            raise BookNotFoundError(
                f"Book link '{title}' not visible within {timeout}ms") from e
        return locator

    def get_book_link_no_wait(self, title: str) -> Locator:
        """Same locator as get_book_link, without waiting; for absence checks."""
        return self.get_by_role_and_label("link", title, exact=True)

    def select_rows_per_page(self, rows: str) -> None:
        rows = str(rows)
        if rows not in ROWS_PER_PAGE_OPTIONS:
            raise ValueError(
                f"Unsupported rows per page '{rows}', expected one of {', '.join(ROWS_PER_PAGE_OPTIONS)}")
        self.rows_per_page_select.select_option(rows)

    def go_to_next_page(self) -> None:
        self.next_page_button.click()

    def go_to_previous_page(self) -> None:
        self.previous_page_button.click()

    def current_page_number(self) -> str:
        return self.jump_to_page_spin_button.input_value()

    def close_ad_overlay_if_present(self) -> bool:
        return dismiss_ad_overlay(
            self.page, click_timeout_ms=self.config.overlay_click_timeout_ms)
