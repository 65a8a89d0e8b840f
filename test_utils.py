import json
import re
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from playwright.sync_api import Error as PlaywrightError

from bookstore_e2e.core.config import StoreConfig
from bookstore_e2e.utils.artifacts import sanitize_filename, save_failure_screenshot
from bookstore_e2e.utils.credentials import generate_random_credentials
from bookstore_e2e.utils.golden import load_titles
from conftest import pytest_runtest_makereport

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def test_random_credentials_shape():
    creds = generate_random_credentials()
    assert re.fullmatch(r"testuser_\d+", creds["username"])
    # upper, lower, digit and special character
    assert re.fullmatch(r"TestPassword\d+!", creds["password"])
    assert creds["username"].split("_")[1] in creds["password"]


def test_load_titles(tmp_path):
    (tmp_path / "page1.json").write_text(json.dumps(["A", "B"]), encoding="utf-8")
    assert load_titles(tmp_path, "page1") == ["A", "B"]


def test_load_titles_rejects_non_lists(tmp_path):
    (tmp_path / "bad.json").write_text(json.dumps({"titles": ["A"]}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_titles(tmp_path, "bad")


def test_shipped_golden_titles():
    page1 = load_titles(FIXTURES_DIR, "expected_page1_titles")
    page2 = load_titles(FIXTURES_DIR, "expected_page2_titles")
    assert len(page1) == 5 and page1[0] == "Git Pocket Guide"
    assert page2 == [
        "Programming JavaScript Applications",
        "Eloquent JavaScript, Second Edition",
        "Understanding ECMAScript 6",
    ]


def test_sanitize_filename():
    assert sanitize_filename("test_ui.py::test_search[chromium]") == "test_ui_py__test_search_chromium_"


def test_save_failure_screenshot(tmp_path):
    page = MagicMock()
    path = save_failure_screenshot(page, tmp_path / "shots", "test_a.py::test_b")
    assert path == tmp_path / "shots" / "test_a_py__test_b.png"
    page.screenshot.assert_called_once_with(path=str(path), full_page=True)


def test_save_failure_screenshot_on_closed_page(tmp_path):
    page = MagicMock()
    page.screenshot.side_effect = PlaywrightError("Target page, context or browser has been closed")
    assert save_failure_screenshot(page, tmp_path, "x") is None


def test_save_failure_screenshot_unwritable_directory(tmp_path):
    blocker = tmp_path / "shots"
    blocker.write_text("not a directory", encoding="utf-8")
    page = MagicMock()
    assert save_failure_screenshot(page, blocker, "x") is None
    page.screenshot.assert_not_called()


def _run_report_hook(item, report):
    hook = pytest_runtest_makereport(item, call=None)
    next(hook)
    with pytest.raises(StopIteration) as stop:
        hook.send(report)
    return stop.value.value


def test_report_hook_screenshots_failed_browser_tests(tmp_path):
    page = MagicMock()
    item = MagicMock(nodeid="test_ui.py::test_x",
                     funcargs={"page": page, "config": StoreConfig(artifacts_dir=tmp_path)})
    report = MagicMock(when="call", failed=True)

    assert _run_report_hook(item, report) is report
    page.screenshot.assert_called_once_with(
        path=str(tmp_path / "test_ui_py__test_x.png"), full_page=True)


def test_report_hook_ignores_passing_and_browserless_tests(tmp_path):
    page = MagicMock()
    passed = MagicMock(nodeid="a", funcargs={"page": page, "config": StoreConfig(artifacts_dir=tmp_path)})
    report = MagicMock(when="call", failed=False)
    assert _run_report_hook(passed, report) is report

    unit = MagicMock(nodeid="b", funcargs={"config": StoreConfig(artifacts_dir=tmp_path)})
    failed = MagicMock(when="call", failed=True)
    assert _run_report_hook(unit, failed) is failed
    page.screenshot.assert_not_called()
