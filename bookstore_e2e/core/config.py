import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple

from dotenv import load_dotenv

load_dotenv()

BROWSERS = ("chromium", "firefox", "webkit")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env_bool(env: Mapping[str, str], key: str, default: bool) -> bool:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    val = raw.strip().lower()
    if val in _TRUE:
        return True
    if val in _FALSE:
        return False
    raise ValueError(f"{key} must be a boolean flag, got {raw!r}")


def _env_int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        val = int(raw.strip())
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None
    if val < 0:
        raise ValueError(f"{key} must not be negative, got {val}")
    return val


@dataclass(frozen=True)
class StoreConfig:
    """Run settings handed to page objects, API clients and fixtures."""

    base_url: str = "https://demoqa.com"
    books_path: str = "/books"
    browser: str = "chromium"
    headless: bool = True
    slow_mo_ms: int = 0
    default_timeout_ms: int = 30000
    book_link_timeout_ms: int = 5000
    overlay_click_timeout_ms: int = 2000
    block_ads: bool = False
    ad_url_patterns: Tuple[str, ...] = ("**/google_ads_iframe_*",)
    artifacts_dir: Path = Path("artifacts/bookstore_e2e")

    def __post_init__(self):
        if self.browser not in BROWSERS:
            raise ValueError(
                f"Unknown browser '{self.browser}', expected one of {', '.join(BROWSERS)}")
        # Normalize so url() never produces a double slash
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    def url(self, path: str) -> str:
        if not path.startswith("/"):
            path = "/" + path
        return f"{self.base_url}{path}"

    @property
    def books_url(self) -> str:
        return self.url(self.books_path)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "StoreConfig":
        """Build a config from BOOKSTORE_* variables (os.environ plus .env by default)."""
        env = os.environ if env is None else env
        defaults = cls()
        return cls(
            base_url=env.get("BOOKSTORE_BASE_URL") or defaults.base_url,
            browser=(env.get("BOOKSTORE_BROWSER") or defaults.browser).strip().lower(),
            headless=_env_bool(env, "BOOKSTORE_HEADLESS", defaults.headless),
            slow_mo_ms=_env_int(env, "BOOKSTORE_SLOW_MO_MS", defaults.slow_mo_ms),
            default_timeout_ms=_env_int(
                env, "BOOKSTORE_TIMEOUT_MS", defaults.default_timeout_ms),
            book_link_timeout_ms=_env_int(
                env, "BOOKSTORE_BOOK_LINK_TIMEOUT_MS", defaults.book_link_timeout_ms),
            overlay_click_timeout_ms=_env_int(
                env, "BOOKSTORE_OVERLAY_CLICK_TIMEOUT_MS", defaults.overlay_click_timeout_ms),
            block_ads=_env_bool(env, "BOOKSTORE_BLOCK_ADS", defaults.block_ads),
            artifacts_dir=Path(env.get("BOOKSTORE_ARTIFACTS_DIR")
                               or defaults.artifacts_dir),
        )
