from dataclasses import dataclass
from typing import Tuple, Union

VISIBLE = "visible=true"


@dataclass(frozen=True)
class ByRole:
    """Match by accessible role and name, e.g. a button labelled 'Close ad'."""

    role: str
    name: str
    exact: bool = False

    def resolve(self, frame):
        # Filter before .first so a hidden duplicate cannot shadow a visible match
        locator = frame.get_by_role(self.role, name=self.name, exact=self.exact)
        return locator.locator(VISIBLE).first

    def __str__(self) -> str:
        return f"role={self.role} name={self.name!r}"


@dataclass(frozen=True)
class ByCss:
    selector: str

    def resolve(self, frame):
        return frame.locator(self.selector).locator(VISIBLE).first

    def __str__(self) -> str:
        return f"css={self.selector}"


Matcher = Union[ByRole, ByCss]

# Priority order matters: the first visible hit in a frame wins.
AD_CLOSE_MATCHERS: Tuple[Matcher, ...] = (
    ByRole("button", "Close ad"),
    ByRole("button", "Close"),
    ByCss("#ad_position_box button"),
    ByCss(".close-ad"),
    ByCss(".close"),
    ByCss('[aria-label="close"]'),
    ByCss('[aria-label="Close"]'),
)
