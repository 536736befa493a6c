"""Value objects shared by the chart kinds."""

from dataclasses import dataclass, field
from typing import Iterator

from .color import ChartColor
from .constants import CHART_TITLE_PREFIX, CHART_TITLE_STYLE_PREFIX, COMMA_SEPARATOR
from .features import Fragment


@dataclass(frozen=True, slots=True)
class DataScalingSet:
    """Value range the service scales text encoded data against (``chds``)."""
    minimum: float
    maximum: float

    def __post_init__(self) -> None:
        if self.minimum >= self.maximum:
            raise ValueError("minimum must be lower than maximum")

    def to_url_data(self) -> str:
        return f"{_number(self.minimum)},{_number(self.maximum)}"


@dataclass(frozen=True, slots=True)
class ChartTitle:
    """Chart title with optional color and font size."""
    text: str
    color: ChartColor | None = field(default=None)
    font_size: int | None = None

    def __post_init__(self) -> None:
        if self.text is None:
            raise ValueError("title text can not be None")
        if self.font_size is not None and self.font_size <= 0:
            raise ValueError("font size must be > 0")
        if self.color is not None:
            object.__setattr__(self, "color", ChartColor.of(self.color))

    def to_url_data(self) -> str:
        # The service reads + as a space and | as a line break.
        return self.text.replace(" ", "+").replace("\n", "|")


class TitleSource:
    """Feature source for an optional chart title (``chtt`` and ``chts``)."""

    def __init__(self, title: ChartTitle | None = None):
        self.title = title

    def fragments(self) -> Iterator[Fragment]:
        if self.title is None:
            return
        yield Fragment(CHART_TITLE_PREFIX, self.title.to_url_data())
        if self.title.color is None and self.title.font_size is None:
            return
        # chts needs a color before the font size; black is the service default.
        color = self.title.color.to_url_data() if self.title.color else "000000"
        style = [color]
        if self.title.font_size is not None:
            style.append(str(self.title.font_size))
        yield Fragment(CHART_TITLE_STYLE_PREFIX, COMMA_SEPARATOR.join(style))


def _number(value: float) -> str:
    if isinstance(value, int) or value == int(value):
        return str(int(value))
    return repr(value)
