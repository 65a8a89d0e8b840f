from typing import Iterable, Iterator, Optional, Sequence, Tuple

from playwright.sync_api import Error as PlaywrightError

from ..core.config import StoreConfig
from .matchers import AD_CLOSE_MATCHERS, Matcher


def _frame_label(frame) -> str:
    try:
        return frame.name or frame.url or "<main>"
    except PlaywrightError:
        return "<detached>"


def _is_visible(locator) -> bool:
    try:
        return bool(locator.is_visible())
    except PlaywrightError:
        # Frame detached or navigated away mid-check
        return False


def iter_visible_matches(
    frames: Iterable, matchers: Sequence[Matcher]
) -> Iterator[Tuple[object, Matcher, object]]:
    """Yield (frame, matcher, locator) for every visible candidate.

    Frames are walked in the order given; inside a frame the matchers are tried
    in priority order. Nothing is clicked here, so a consumer that stops
    iterating stops all further DOM queries.
    """
    for frame in frames:
        for matcher in matchers:
            try:
                locator = matcher.resolve(frame)
            except PlaywrightError:
                continue
            if _is_visible(locator):
                yield frame, matcher, locator


def dismiss_ad_overlay(
    page,
    matchers: Sequence[Matcher] = AD_CLOSE_MATCHERS,
    click_timeout_ms: Optional[int] = None,
) -> bool:
    """
    Best-effort close of a third-party ad overlay anywhere in the frame tree.

    Clicks at most one control. Returns True if something was clicked; an
    absent overlay is not an error. click_timeout_ms defaults to
    StoreConfig.overlay_click_timeout_ms.
    """
    if click_timeout_ms is None:
        click_timeout_ms = StoreConfig().overlay_click_timeout_ms
    # Snapshot: ad iframes attach and detach while the page loads
    frames = list(page.frames)
    for frame, matcher, locator in iter_visible_matches(frames, matchers):
        try:
            locator.click(timeout=click_timeout_ms)
        except PlaywrightError as e:
            print(
                f"[Overlay] Click failed on {matcher} in frame {_frame_label(frame)} (skipping): {e}")
            continue
        print(f"[Overlay] Closed ad via {matcher} in frame {_frame_label(frame)}")
        return True
    print(f"[Overlay] No ad overlay found across {len(frames)} frame(s).")
    return False


def block_ad_requests(page, patterns: Iterable[str]) -> None:
    """Abort requests whose URL matches any of the glob patterns."""
    for pattern in patterns:
        page.route(pattern, lambda route: route.abort())
        print(f"[Overlay] Blocking requests matching {pattern}")
