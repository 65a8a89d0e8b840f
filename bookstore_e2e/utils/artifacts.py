import re
from pathlib import Path
from typing import Optional, Union

from playwright.sync_api import Error as PlaywrightError


def sanitize_filename(name: str) -> str:
    # Keep only alphanumerics, spaces, dashes, underscores
    s = re.sub(r"[^a-zA-Z0-9 \-_]", "_", name)
    s = s.strip().replace(" ", "_")
    return s[:120]


def save_failure_screenshot(page, directory: Union[str, Path], name: str) -> Optional[Path]:
    """Full-page screenshot for a failed test; returns None if it could not be written."""
    out_dir = Path(directory)
    path = out_dir / f"{sanitize_filename(name)}.png"
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
        page.screenshot(path=str(path), full_page=True)
    except (PlaywrightError, OSError) as e:
        print(f"[Artifacts] Screenshot failed for {name}: {e}")
        return None
    print(f"[Artifacts] Failure screenshot: {path}")
    return path
