from pathlib import Path

import pytest
from playwright.sync_api import expect, sync_playwright

from bookstore_e2e.api.client import BookStoreApi
from bookstore_e2e.core.config import StoreConfig
from bookstore_e2e.dom.overlay import block_ad_requests
from bookstore_e2e.pages.books_page import BooksPage
from bookstore_e2e.utils.artifacts import save_failure_screenshot
from bookstore_e2e.utils.golden import load_titles

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def config() -> StoreConfig:
    return StoreConfig.from_env()


@pytest.fixture(scope="session")
def playwright_session():
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="session")
def browser(playwright_session, config):
    browser_type = getattr(playwright_session, config.browser)
    browser = browser_type.launch(headless=config.headless, slow_mo=config.slow_mo_ms)
    yield browser
    browser.close()


@pytest.fixture
def page(browser, config):
    context = browser.new_context()
    page = context.new_page()
    page.set_default_timeout(config.default_timeout_ms)
    if config.block_ads:
        block_ad_requests(page, config.ad_url_patterns)
    yield page
    context.close()


@pytest.fixture
def books_page(page, config) -> BooksPage:
    books = BooksPage(page, config)
    books.open()
    expect(page).to_have_url(config.books_url)
    return books


@pytest.fixture
def api(playwright_session, config):
    request = playwright_session.request.new_context()
    yield BookStoreApi(request, config)
    request.dispose()


@pytest.fixture(scope="session")
def expected_titles():
    return {
        "page1": load_titles(FIXTURES_DIR, "expected_page1_titles"),
        "page2": load_titles(FIXTURES_DIR, "expected_page2_titles"),
    }


@pytest.hookimpl(wrapper=True)
def pytest_runtest_makereport(item, call):
    report = yield
    if report.when == "call" and report.failed:
        page = item.funcargs.get("page")
        conf = item.funcargs.get("config")
        if page is not None and conf is not None:
            save_failure_screenshot(page, conf.artifacts_dir, item.nodeid)
    return report
